"""otlpsend: send logs, metrics and spans to an OpenTelemetry collector.

Each send builds one OTLP/HTTP JSON document and POSTs it synchronously.
"""

from otlpsend.adapters.logging import OtlpLogHandler
from otlpsend.adapters.transport import HttpxTransport, InMemoryTransport
from otlpsend.client import send_log, send_metric, send_trace
from otlpsend.core.config import (
    OtlpConfig,
    get_config,
    init_config,
    reset_config,
)
from otlpsend.core.errors import (
    CollectorUnreachableError,
    InvalidEndpointError,
    MissingSettingError,
    NotConfiguredError,
    OtlpSendError,
    PreconditionError,
    RemoteRejectionError,
    TransportError,
)
from otlpsend.core.ids import new_span_id, new_trace_id
from otlpsend.core.models import (
    MetricType,
    Severity,
    SpanKind,
    SpanResult,
    StatusCode,
)
from otlpsend.spans import TimedSpan, timed_span

__all__ = [
    # Configuration
    "OtlpConfig",
    "get_config",
    "init_config",
    "reset_config",
    # Send operations
    "send_log",
    "send_metric",
    "send_trace",
    "timed_span",
    "TimedSpan",
    "SpanResult",
    # Ids
    "new_span_id",
    "new_trace_id",
    # Enums
    "MetricType",
    "Severity",
    "SpanKind",
    "StatusCode",
    # Errors
    "CollectorUnreachableError",
    "InvalidEndpointError",
    "MissingSettingError",
    "NotConfiguredError",
    "OtlpSendError",
    "PreconditionError",
    "RemoteRejectionError",
    "TransportError",
    # Adapters
    "HttpxTransport",
    "InMemoryTransport",
    "OtlpLogHandler",
]
