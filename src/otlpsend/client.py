"""Public send functions with HttpxTransport as the default transport.

The core senders take a transport explicitly; these wrappers pick a
fresh HttpxTransport when none is given, so nothing is pooled between
calls.
"""

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from otlpsend.adapters.transport.httpx_transport import HttpxTransport
from otlpsend.core import senders
from otlpsend.core.config import OtlpConfig
from otlpsend.core.models import MetricType, Severity, SpanKind, SpanResult, StatusCode
from otlpsend.core.ports import TransportPort


def default_transport(transport: TransportPort | None = None) -> TransportPort:
    """Return ``transport``, or a new HttpxTransport when it is None."""
    return transport if transport is not None else HttpxTransport()


def send_log(
    message: str,
    severity: Severity | str = Severity.INFO,
    attributes: Mapping[str, Any] | None = None,
    trace_id: str | None = None,
    span_id: str | None = None,
    *,
    config: OtlpConfig | None = None,
    transport: TransportPort | None = None,
) -> Any:
    """Send one log record. See ``otlpsend.core.senders.send_log``."""
    return senders.send_log(
        message,
        severity=severity,
        attributes=attributes,
        trace_id=trace_id,
        span_id=span_id,
        config=config,
        transport=default_transport(transport),
    )


def send_metric(
    name: str,
    value: float,
    metric_type: MetricType | str = MetricType.GAUGE,
    unit: str = "",
    attributes: Mapping[str, Any] | None = None,
    *,
    config: OtlpConfig | None = None,
    transport: TransportPort | None = None,
) -> Any:
    """Send one metric data point. See ``otlpsend.core.senders.send_metric``."""
    return senders.send_metric(
        name,
        value,
        metric_type=metric_type,
        unit=unit,
        attributes=attributes,
        config=config,
        transport=default_transport(transport),
    )


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
    transport: TransportPort | None = None,
) -> SpanResult:
    """Send one span. See ``otlpsend.core.senders.send_trace``."""
    return senders.send_trace(
        name,
        trace_id=trace_id,
        span_id=span_id,
        parent_span_id=parent_span_id,
        kind=kind,
        start_time=start_time,
        end_time=end_time,
        attributes=attributes,
        status=status,
        status_message=status_message,
        config=config,
        transport=default_transport(transport),
    )
