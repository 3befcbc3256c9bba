"""Shared test fixtures for all test modules."""

import time
from collections.abc import Generator

import pytest

from otlpsend.adapters.transport.in_memory import InMemoryTransport
from otlpsend.core.config import OtlpConfig, reset_config

# 2023-12-11T13:06:40Z
FIXED_TIME_NS = 1702300000_000000000


@pytest.fixture(autouse=True)
def _clean_config() -> Generator[None]:
    """Ensure no process-wide configuration leaks between tests."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def config() -> OtlpConfig:
    """A configuration with one custom resource attribute."""
    return OtlpConfig.from_env(
        endpoint="http://collector:4318",
        service_name="checkout",
        service_version="2.3.1",
        headers={"Authorization": "Bearer token"},
        resource_attributes={"deployment.environment": "staging"},
        environ={},
    )


@pytest.fixture
def transport() -> InMemoryTransport:
    """Fixture providing an empty recording transport."""
    return InMemoryTransport()


@pytest.fixture
def frozen_clock(monkeypatch: pytest.MonkeyPatch) -> int:
    """Pin time.time_ns() to FIXED_TIME_NS."""
    monkeypatch.setattr(time, "time_ns", lambda: FIXED_TIME_NS)
    return FIXED_TIME_NS
