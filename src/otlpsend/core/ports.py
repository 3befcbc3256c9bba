"""Port interface for the HTTP transport.

The senders depend only on this protocol, not on a concrete HTTP client.
"""

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TransportPort(Protocol):
    """Port for posting one JSON document to a collector.

    Examples: HttpxTransport, InMemoryTransport.
    """

    def post(self, url: str, headers: Mapping[str, str], body: str) -> Any:
        """POST ``body`` to ``url`` and return the parsed response.

        Raises:
            CollectorUnreachableError: If the collector cannot be reached.
            RemoteRejectionError: If the collector returns a non-success status.
        """
        ...
