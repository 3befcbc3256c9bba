"""In-memory transport adapter."""

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class RecordedRequest:
    """A request captured by InMemoryTransport.

    Attributes:
        url: Target URL.
        headers: Headers sent with the request.
        payload: The decoded JSON body.
    """

    url: str
    headers: dict[str, str]
    payload: dict[str, Any] = field(default_factory=dict)


class InMemoryTransport:
    """In-memory implementation of TransportPort.

    Records every request instead of sending it. Suitable for testing and
    for dry runs where no collector is available.
    """

    def __init__(self, response: Any = None) -> None:
        self._requests: list[RecordedRequest] = []
        self._response = {} if response is None else response

    @property
    def requests(self) -> list[RecordedRequest]:
        """Requests recorded so far, oldest first."""
        return list(self._requests)

    @property
    def last(self) -> RecordedRequest:
        """The most recent request."""
        return self._requests[-1]

    def post(self, url: str, headers: Mapping[str, str], body: str) -> Any:
        """Record the request and return the configured response."""
        self._requests.append(RecordedRequest(url, dict(headers), json.loads(body)))
        return self._response

    def clear(self) -> None:
        """Forget all recorded requests."""
        self._requests.clear()
