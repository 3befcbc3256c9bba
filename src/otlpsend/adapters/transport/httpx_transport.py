"""HTTP transport adapter backed by httpx."""

from collections.abc import Mapping
from typing import Any

import httpx

from otlpsend.core.errors import (
    CollectorUnreachableError,
    InvalidEndpointError,
    RemoteRejectionError,
)


def _parse_body(response: httpx.Response) -> Any:
    """Return the response body as JSON, text, or an empty dict if blank."""
    if not response.content:
        return {}
    try:
        return response.json()
    except ValueError:
        return response.text


class HttpxTransport:
    """Implementation of TransportPort using httpx.

    Without a client every call is a standalone ``httpx.post()``; nothing is
    pooled between sends. Pass an ``httpx.Client`` to control connection
    reuse, proxies, or to plug in ``httpx.MockTransport`` in tests.

    Example:
        ```python
        from otlpsend import HttpxTransport, send_log

        send_log("hello", transport=HttpxTransport())
        ```
    """

    def __init__(self, client: httpx.Client | None = None) -> None:
        self._client = client

    def post(self, url: str, headers: Mapping[str, str], body: str) -> Any:
        """POST a JSON body and return the parsed collector response.

        Raises:
            CollectorUnreachableError: On connection, timeout or network errors.
            RemoteRejectionError: On any non-2xx status.
            InvalidEndpointError: If the URL is malformed or not http(s).
        """
        try:
            if self._client is not None:
                response = self._client.post(url, headers=dict(headers), content=body)
            else:
                response = httpx.post(url, headers=dict(headers), content=body)
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as e:
            raise InvalidEndpointError(url, str(e)) from e
        except httpx.TransportError as e:
            raise CollectorUnreachableError(
                f"Could not reach collector at {url}: {e}", url
            ) from e

        if not response.is_success:
            raise RemoteRejectionError(url, response.status_code, _parse_body(response))
        return _parse_body(response)
