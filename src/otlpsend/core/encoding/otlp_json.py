"""OTLP/HTTP JSON encoder for logs, metrics and spans.

Builds the nested ``resource -> scope -> record`` documents accepted by
an OpenTelemetry collector on ``/v1/logs``, ``/v1/metrics`` and
``/v1/traces``. Timestamps are emitted as stringified integer nanoseconds
and every attribute uses the ``stringValue`` variant.
"""

import json
from collections.abc import Mapping
from typing import Any

from otlpsend.core.config import OtlpConfig
from otlpsend.core.models import (
    AGGREGATION_TEMPORALITY_CUMULATIVE,
    AttributeValue,
    LogRecord,
    MetricPoint,
    MetricType,
    Span,
    StatusCode,
    StringValue,
)

SCOPE_NAME = "otlpsend"

LOGS_PATH = "/v1/logs"
METRICS_PATH = "/v1/metrics"
TRACES_PATH = "/v1/traces"


def encode_attributes(attributes: Mapping[str, AttributeValue]) -> list[dict[str, Any]]:
    """Encode attributes as an OTLP key/value list, keeping mapping order."""
    return [{"key": key, "value": value.to_otlp()} for key, value in attributes.items()]


def encode_resource(config: OtlpConfig) -> dict[str, Any]:
    """Encode the resource block: service identity, then custom attributes."""
    attributes: dict[str, AttributeValue] = {
        "service.name": StringValue(config.service_name),
        "service.version": StringValue(config.service_version),
    }
    resource = encode_attributes(attributes)
    resource.extend(
        {"key": key, "value": StringValue(value).to_otlp()}
        for key, value in config.resource_attributes.items()
    )
    return {"attributes": resource}


def _scope() -> dict[str, str]:
    return {"name": SCOPE_NAME}


def encode_log_record(record: LogRecord) -> dict[str, Any]:
    """Encode a single log record."""
    obj: dict[str, Any] = {
        "timeUnixNano": str(record.time_unix_nano),
        "severityNumber": record.severity.value,
        "severityText": record.severity.name,
        "body": StringValue(record.body).to_otlp(),
        "attributes": encode_attributes(record.attributes),
    }
    if record.trace_id:
        obj["traceId"] = record.trace_id
    if record.span_id:
        obj["spanId"] = record.span_id
    return obj


def build_logs_payload(record: LogRecord, config: OtlpConfig) -> dict[str, Any]:
    """Wrap a log record in a ``resourceLogs`` document."""
    return {
        "resourceLogs": [
            {
                "resource": encode_resource(config),
                "scopeLogs": [
                    {
                        "scope": _scope(),
                        "logRecords": [encode_log_record(record)],
                    }
                ],
            }
        ]
    }


def encode_metric(point: MetricPoint) -> dict[str, Any]:
    """Encode a metric with one data point shaped by its type.

    Histograms carry ``count=1`` and ``sum=value``: each call records
    exactly one observation and no bucket boundaries.
    """
    data_point: dict[str, Any] = {
        "timeUnixNano": str(point.time_unix_nano),
        "attributes": encode_attributes(point.attributes),
    }
    metric: dict[str, Any] = {"name": point.name, "unit": point.unit}

    if point.metric_type is MetricType.GAUGE:
        data_point["asDouble"] = point.value
        metric["gauge"] = {"dataPoints": [data_point]}
    elif point.metric_type is MetricType.COUNTER:
        data_point["asDouble"] = point.value
        metric["sum"] = {
            "dataPoints": [data_point],
            "aggregationTemporality": AGGREGATION_TEMPORALITY_CUMULATIVE,
            "isMonotonic": True,
        }
    else:
        data_point["count"] = 1
        data_point["sum"] = point.value
        metric["histogram"] = {
            "dataPoints": [data_point],
            "aggregationTemporality": AGGREGATION_TEMPORALITY_CUMULATIVE,
        }
    return metric


def build_metrics_payload(point: MetricPoint, config: OtlpConfig) -> dict[str, Any]:
    """Wrap a metric point in a ``resourceMetrics`` document."""
    return {
        "resourceMetrics": [
            {
                "resource": encode_resource(config),
                "scopeMetrics": [
                    {
                        "scope": _scope(),
                        "metrics": [encode_metric(point)],
                    }
                ],
            }
        ]
    }


def encode_span(span: Span) -> dict[str, Any]:
    """Encode a single span.

    ``parentSpanId`` appears only when set; ``status.message`` only for
    ERROR status with a message.
    """
    obj: dict[str, Any] = {
        "traceId": span.trace_id,
        "spanId": span.span_id,
    }
    if span.parent_span_id:
        obj["parentSpanId"] = span.parent_span_id
    status: dict[str, Any] = {"code": span.status.value}
    if span.status is StatusCode.ERROR and span.status_message:
        status["message"] = span.status_message
    obj.update(
        {
            "name": span.name,
            "kind": span.kind.value,
            "startTimeUnixNano": str(span.start_time_unix_nano),
            "endTimeUnixNano": str(span.end_time_unix_nano),
            "attributes": encode_attributes(span.attributes),
            "status": status,
        }
    )
    return obj


def build_traces_payload(span: Span, config: OtlpConfig) -> dict[str, Any]:
    """Wrap a span in a ``resourceSpans`` document."""
    return {
        "resourceSpans": [
            {
                "resource": encode_resource(config),
                "scopeSpans": [
                    {
                        "scope": _scope(),
                        "spans": [encode_span(span)],
                    }
                ],
            }
        ]
    }


def encode_payload(payload: Mapping[str, Any]) -> str:
    """Serialize a payload document to a JSON request body."""
    return json.dumps(payload)
