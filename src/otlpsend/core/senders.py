"""Send operations for logs, metrics and spans.

Each call builds one OTLP JSON document and performs one blocking POST
through the given transport. There is no batching or retry; every failure
is logged and re-raised.
"""

import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from datetime import datetime
from typing import Any

from otlpsend.core.config import OtlpConfig, resolve_config
from otlpsend.core.encoding.otlp_json import (
    LOGS_PATH,
    METRICS_PATH,
    TRACES_PATH,
    build_logs_payload,
    build_metrics_payload,
    build_traces_payload,
    encode_payload,
)
from otlpsend.core.ids import new_span_id, new_trace_id
from otlpsend.core.models import (
    LogRecord,
    MetricPoint,
    MetricType,
    Severity,
    Span,
    SpanKind,
    SpanResult,
    StatusCode,
    to_attributes,
)
from otlpsend.core.ports import TransportPort
from otlpsend.core.timestamps import now_unix_nano, to_unix_nano

logger = logging.getLogger(__name__)


@contextmanager
def _reported(signal: str) -> Iterator[None]:
    """Log a failure to build a payload, then re-raise it."""
    try:
        yield
    except Exception as e:
        logger.error("Failed to send %s: %s", signal, e)
        raise


def _post(
    signal: str,
    config: OtlpConfig,
    path: str,
    payload: dict[str, Any],
    transport: TransportPort,
) -> Any:
    """POST a payload, logging and re-raising any failure."""
    url = config.url_for(path)
    try:
        response = transport.post(url, config.headers, encode_payload(payload))
    except Exception as e:
        logger.error("Failed to send %s to %s: %s", signal, url, e)
        raise
    logger.debug("Sent %s to %s", signal, url)
    return response


def send_log(
    message: str,
    severity: Severity | str = Severity.INFO,
    attributes: Mapping[str, Any] | None = None,
    trace_id: str | None = None,
    span_id: str | None = None,
    *,
    config: OtlpConfig | None = None,
    transport: TransportPort,
) -> Any:
    """Send one log record to ``{endpoint}/v1/logs``.

    Args:
        message: The log body; must be non-empty.
        severity: TRACE, DEBUG, INFO, WARN, ERROR or FATAL (default INFO).
        attributes: Additional structured fields.
        trace_id: Optional trace id to correlate with a span.
        span_id: Optional span id to correlate with a span.
        config: Configuration to use instead of the process-wide one.
        transport: Transport that performs the POST.

    Returns:
        The collector's parsed response.

    Raises:
        NotConfiguredError: If no configuration is available.
        ValueError: If the message is empty or the severity is unknown.
        TransportError: If the request fails or is rejected.
    """
    with _reported("log"):
        config = resolve_config(config)
        if not message:
            raise ValueError("Log message must not be empty")
        record = LogRecord(
            time_unix_nano=now_unix_nano(),
            severity=Severity.parse(severity),
            body=message,
            attributes=to_attributes(attributes),
            trace_id=trace_id,
            span_id=span_id,
        )
        payload = build_logs_payload(record, config)
    return _post("log", config, LOGS_PATH, payload, transport)


def send_metric(
    name: str,
    value: float,
    metric_type: MetricType | str = MetricType.GAUGE,
    unit: str = "",
    attributes: Mapping[str, Any] | None = None,
    *,
    config: OtlpConfig | None = None,
    transport: TransportPort,
) -> Any:
    """Send one metric data point to ``{endpoint}/v1/metrics``.

    Args:
        name: Metric name; must be non-empty.
        value: The observed value.
        metric_type: Gauge (default), Counter or Histogram.
        unit: Unit string (default empty).
        attributes: Dimension attributes.
        config: Configuration to use instead of the process-wide one.
        transport: Transport that performs the POST.

    Returns:
        The collector's parsed response.
    """
    with _reported("metric"):
        config = resolve_config(config)
        if not name:
            raise ValueError("Metric name must not be empty")
        point = MetricPoint(
            name=name,
            value=float(value),
            metric_type=MetricType.parse(metric_type),
            time_unix_nano=now_unix_nano(),
            unit=unit,
            attributes=to_attributes(attributes),
        )
        payload = build_metrics_payload(point, config)
    return _post("metric", config, METRICS_PATH, payload, transport)


def send_trace(
    name: str,
    trace_id: str | None = None,
    span_id: str | None = None,
    parent_span_id: str | None = None,
    kind: SpanKind | str = SpanKind.INTERNAL,
    start_time: datetime | int | None = None,
    end_time: datetime | int | None = None,
    attributes: Mapping[str, Any] | None = None,
    status: StatusCode | str = StatusCode.OK,
    status_message: str | None = None,
    *,
    config: OtlpConfig | None = None,
    transport: TransportPort,
) -> SpanResult:
    """Send one span to ``{endpoint}/v1/traces``.

    Missing ids are generated. ``start_time`` and ``end_time`` each default
    to the current time independently; pass both to report a real duration.

    Returns:
        SpanResult with the trace id, span id and collector response.
    """
    with _reported("trace"):
        config = resolve_config(config)
        if not name:
            raise ValueError("Span name must not be empty")
        span = Span(
            trace_id=trace_id or new_trace_id(),
            span_id=span_id or new_span_id(),
            parent_span_id=parent_span_id,
            name=name,
            kind=SpanKind.parse(kind),
            start_time_unix_nano=to_unix_nano(start_time),
            end_time_unix_nano=to_unix_nano(end_time),
            attributes=to_attributes(attributes),
            status=StatusCode.parse(status),
            status_message=status_message,
        )
        payload = build_traces_payload(span, config)
    response = _post("trace", config, TRACES_PATH, payload, transport)
    return SpanResult(trace_id=span.trace_id, span_id=span.span_id, response=response)
