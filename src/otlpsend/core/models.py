"""Core domain models for OTLP telemetry signals."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class _NamedEnum(Enum):
    """Enum whose members can be looked up by case-insensitive name."""

    @classmethod
    def parse(cls, value: "str | _NamedEnum") -> Any:
        """Return the member for ``value``.

        Raises:
            ValueError: If ``value`` names no member of this enum.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.name.lower() == value.lower():
                    return member
        names = ", ".join(member.name for member in cls)
        raise ValueError(f"Invalid {cls.__name__} {value!r}; expected one of {names}")


class Severity(_NamedEnum):
    """Log severity with its OTLP severityNumber."""

    TRACE = 1
    DEBUG = 5
    INFO = 9
    WARN = 13
    ERROR = 17
    FATAL = 21


class MetricType(_NamedEnum):
    """Shape of a metric data point."""

    GAUGE = "Gauge"
    COUNTER = "Counter"
    HISTOGRAM = "Histogram"


class SpanKind(_NamedEnum):
    """OTLP span kind."""

    INTERNAL = 1
    SERVER = 2
    CLIENT = 3
    PRODUCER = 4
    CONSUMER = 5


class StatusCode(_NamedEnum):
    """OTLP span status code."""

    UNSET = 0
    OK = 1
    ERROR = 2


# Cumulative temporality; the only one this library emits.
AGGREGATION_TEMPORALITY_CUMULATIVE = 2


@dataclass(frozen=True)
class StringValue:
    """String variant of the OTLP AnyValue union."""

    value: str

    def to_otlp(self) -> dict[str, str]:
        return {"stringValue": self.value}


# Other AnyValue variants (int, double, bool) slot in here.
AttributeValue = StringValue


@dataclass(frozen=True)
class LogRecord:
    """A single log record.

    Attributes:
        time_unix_nano: Nanoseconds since the Unix epoch.
        severity: Log severity.
        body: The log message.
        attributes: Additional structured fields.
        trace_id: Optional trace correlation id (32 hex chars).
        span_id: Optional span correlation id (16 hex chars).
    """

    time_unix_nano: int
    severity: Severity
    body: str
    attributes: dict[str, AttributeValue] = field(default_factory=dict)
    trace_id: str | None = None
    span_id: str | None = None


@dataclass(frozen=True)
class MetricPoint:
    """A single metric observation.

    Attributes:
        name: Metric name (e.g., http.server.duration).
        value: The observed value.
        metric_type: Gauge, Counter or Histogram.
        time_unix_nano: Nanoseconds since the Unix epoch.
        unit: Unit string, empty when unitless.
        attributes: Key-value pairs for metric dimensions.
    """

    name: str
    value: float
    metric_type: MetricType
    time_unix_nano: int
    unit: str = ""
    attributes: dict[str, AttributeValue] = field(default_factory=dict)


@dataclass(frozen=True)
class Span:
    """A single timed operation within a trace."""

    trace_id: str
    span_id: str
    name: str
    kind: SpanKind
    start_time_unix_nano: int
    end_time_unix_nano: int
    attributes: dict[str, AttributeValue] = field(default_factory=dict)
    status: StatusCode = StatusCode.OK
    status_message: str | None = None
    parent_span_id: str | None = None


@dataclass(frozen=True)
class SpanResult:
    """Correlation record returned after sending a span.

    Attributes:
        trace_id: Trace id the span was sent under.
        span_id: Id of the sent span; pass as ``parent_span_id`` for children.
        response: Parsed collector response.
    """

    trace_id: str
    span_id: str
    response: Any = None


def to_attributes(values: dict[str, Any] | None) -> dict[str, AttributeValue]:
    """Convert a plain mapping into attribute values, preserving key order."""
    if not values:
        return {}
    return {str(key): StringValue(str(value)) for key, value in values.items()}
