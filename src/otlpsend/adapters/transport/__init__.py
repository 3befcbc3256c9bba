"""Transport adapters implementing TransportPort."""

from otlpsend.adapters.transport.httpx_transport import HttpxTransport
from otlpsend.adapters.transport.in_memory import InMemoryTransport, RecordedRequest

__all__ = [
    "HttpxTransport",
    "InMemoryTransport",
    "RecordedRequest",
]
