"""Exception types raised by otlpsend.

Callers distinguish failure modes by type rather than by message text:

- ``PreconditionError``: the library was used before it was configured,
  configuration is missing a required setting, or the endpoint is not a
  usable URL.
- ``CollectorUnreachableError``: the collector could not be reached.
- ``RemoteRejectionError``: the collector answered with a non-success status.
"""

from typing import Any


class OtlpSendError(Exception):
    """Base class for all otlpsend errors."""


class PreconditionError(OtlpSendError):
    """An operation was attempted without its preconditions being met."""


class NotConfiguredError(PreconditionError):
    """A send was attempted before ``init_config()`` was called."""

    def __init__(self) -> None:
        super().__init__(
            "otlpsend is not configured; call init_config() or pass config="
        )


class MissingSettingError(PreconditionError):
    """A required setting was neither passed nor found in the environment."""

    def __init__(self, setting: str, env_var: str) -> None:
        self.setting = setting
        self.env_var = env_var
        super().__init__(
            f"Missing required setting '{setting}': pass {setting}= "
            f"or set the {env_var} environment variable"
        )


class InvalidEndpointError(PreconditionError):
    """The configured endpoint is not a usable http(s) URL."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        super().__init__(f"Invalid collector URL {url!r}: {reason}")


class TransportError(OtlpSendError):
    """The HTTP request to the collector failed."""

    def __init__(self, message: str, url: str) -> None:
        self.url = url
        super().__init__(message)


class CollectorUnreachableError(TransportError):
    """Connection refused, DNS failure, timeout or other network error."""


class RemoteRejectionError(TransportError):
    """The collector returned a non-success HTTP status."""

    def __init__(self, url: str, status_code: int, body: Any = None) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"Collector at {url} returned HTTP {status_code}", url)
