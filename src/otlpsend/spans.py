"""Context manager that times a block and sends it as a span."""

from collections.abc import Generator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

from otlpsend.client import send_trace
from otlpsend.core.config import OtlpConfig
from otlpsend.core.ids import new_span_id, new_trace_id
from otlpsend.core.models import SpanKind, SpanResult, StatusCode
from otlpsend.core.ports import TransportPort
from otlpsend.core.timestamps import now_unix_nano


@dataclass
class TimedSpan:
    """Handle yielded by timed_span().

    Ids are fixed on entry so logs and child spans can reference them
    while the block runs. ``result`` is set once the span has been sent.
    """

    name: str
    trace_id: str
    span_id: str
    attributes: dict[str, Any] = field(default_factory=dict)
    result: SpanResult | None = None


@contextmanager
def timed_span(
    name: str,
    trace_id: str | None = None,
    parent_span_id: str | None = None,
    kind: SpanKind | str = SpanKind.INTERNAL,
    attributes: Mapping[str, Any] | None = None,
    *,
    config: OtlpConfig | None = None,
    transport: TransportPort | None = None,
) -> Generator[TimedSpan]:
    """Send a span covering the body of the ``with`` block.

    If the block raises, the span is sent with ERROR status and the
    exception text as its message, and the exception propagates.

    Example:
        ```python
        with timed_span("checkout", kind="SERVER") as outer:
            with timed_span("db.query", trace_id=outer.trace_id,
                            parent_span_id=outer.span_id):
                ...
        ```
    """
    handle = TimedSpan(
        name=name,
        trace_id=trace_id or new_trace_id(),
        span_id=new_span_id(),
        attributes=dict(attributes or {}),
    )
    start = now_unix_nano()
    try:
        yield handle
    except Exception as e:
        handle.result = send_trace(
            name,
            trace_id=handle.trace_id,
            span_id=handle.span_id,
            parent_span_id=parent_span_id,
            kind=kind,
            start_time=start,
            end_time=now_unix_nano(),
            attributes={**handle.attributes, "exception.type": type(e).__name__},
            status=StatusCode.ERROR,
            status_message=str(e) or type(e).__name__,
            config=config,
            transport=transport,
        )
        raise
    handle.result = send_trace(
        name,
        trace_id=handle.trace_id,
        span_id=handle.span_id,
        parent_span_id=parent_span_id,
        kind=kind,
        start_time=start,
        end_time=now_unix_nano(),
        attributes=handle.attributes,
        config=config,
        transport=transport,
    )
