"""Collector configuration.

A configuration can be installed process-wide with ``init_config()`` or
built with ``OtlpConfig.from_env()`` and passed to each send call as
``config=``. The process-wide value is read without locking; do not call
``init_config()`` while sends are in flight on other threads.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from otlpsend.core.errors import MissingSettingError, NotConfiguredError

ENDPOINT_ENV_VAR = "OTEL_ENDPOINT"
SERVICE_NAME_ENV_VAR = "SERVICE_NAME"
DEFAULT_SERVICE_VERSION = "1.0.0"
DEFAULT_HEADERS = {"Content-Type": "application/json"}


@dataclass(frozen=True)
class OtlpConfig:
    """Where to send telemetry and how to identify the emitting service.

    Attributes:
        endpoint: Collector base URL; signal paths are appended as-is.
        service_name: Reported as the ``service.name`` resource attribute.
        service_version: Reported as ``service.version``.
        headers: HTTP headers sent with every request.
        resource_attributes: Extra resource attributes for every payload.
    """

    endpoint: str
    service_name: str
    service_version: str = DEFAULT_SERVICE_VERSION
    headers: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_HEADERS))
    resource_attributes: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_env(
        cls,
        endpoint: str | None = None,
        service_name: str | None = None,
        service_version: str = DEFAULT_SERVICE_VERSION,
        headers: Mapping[str, str] | None = None,
        resource_attributes: Mapping[str, str] | None = None,
        *,
        environ: Mapping[str, str] | None = None,
    ) -> "OtlpConfig":
        """Build a configuration, falling back to environment variables.

        Explicit arguments win over ``OTEL_ENDPOINT`` and ``SERVICE_NAME``.

        Raises:
            MissingSettingError: If endpoint or service name is still absent.
        """
        env = os.environ if environ is None else environ
        resolved_endpoint = endpoint or env.get(ENDPOINT_ENV_VAR)
        if not resolved_endpoint:
            raise MissingSettingError("endpoint", ENDPOINT_ENV_VAR)
        resolved_service = service_name or env.get(SERVICE_NAME_ENV_VAR)
        if not resolved_service:
            raise MissingSettingError("service_name", SERVICE_NAME_ENV_VAR)

        return cls(
            endpoint=resolved_endpoint,
            service_name=resolved_service,
            service_version=service_version,
            headers={**DEFAULT_HEADERS, **(headers or {})},
            resource_attributes=dict(resource_attributes or {}),
        )

    def url_for(self, path: str) -> str:
        """Return the collector URL for a signal path such as ``/v1/logs``."""
        return f"{self.endpoint}{path}"


_config: OtlpConfig | None = None


def init_config(
    endpoint: str | None = None,
    service_name: str | None = None,
    service_version: str = DEFAULT_SERVICE_VERSION,
    headers: Mapping[str, str] | None = None,
    resource_attributes: Mapping[str, str] | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> OtlpConfig:
    """Build a configuration and install it as the process-wide default.

    Replaces any previous configuration in full; headers and resource
    attributes from earlier calls are not carried over.

    Returns:
        The installed configuration.
    """
    global _config
    _config = OtlpConfig.from_env(
        endpoint=endpoint,
        service_name=service_name,
        service_version=service_version,
        headers=headers,
        resource_attributes=resource_attributes,
        environ=environ,
    )
    return _config


def get_config() -> OtlpConfig:
    """Return the process-wide configuration.

    Raises:
        NotConfiguredError: If ``init_config()`` has not been called.
    """
    if _config is None:
        raise NotConfiguredError()
    return _config


def reset_config() -> None:
    """Clear the process-wide configuration."""
    global _config
    _config = None


def resolve_config(config: OtlpConfig | None) -> OtlpConfig:
    """Return ``config`` if given, else the process-wide configuration."""
    return config if config is not None else get_config()
