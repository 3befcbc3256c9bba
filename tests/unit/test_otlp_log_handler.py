"""Tests for OtlpLogHandler."""

import logging
from collections.abc import Generator

import httpx
import pytest

from otlpsend.adapters.logging import OtlpLogHandler, severity_for_level
from otlpsend.adapters.transport.httpx_transport import HttpxTransport
from otlpsend.adapters.transport.in_memory import InMemoryTransport
from otlpsend.core.config import OtlpConfig
from otlpsend.core.errors import CollectorUnreachableError
from otlpsend.core.models import Severity


@pytest.fixture
def app_logger(
    config: OtlpConfig, transport: InMemoryTransport
) -> Generator[logging.Logger]:
    """A logger wired to an OtlpLogHandler with a recording transport."""
    logger = logging.getLogger("tests.app")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    handler = OtlpLogHandler(config=config, transport=transport)
    logger.addHandler(handler)
    yield logger
    logger.removeHandler(handler)
    logger.propagate = True


def _record(transport: InMemoryTransport) -> dict:
    return transport.last.payload["resourceLogs"][0]["scopeLogs"][0]["logRecords"][0]


def _attrs(record: dict) -> dict[str, str]:
    return {a["key"]: a["value"]["stringValue"] for a in record["attributes"]}


class TestSeverityForLevel:
    """Tests for stdlib level mapping."""

    @pytest.mark.adapter
    @pytest.mark.parametrize(
        ("levelname", "severity"),
        [
            ("DEBUG", Severity.DEBUG),
            ("INFO", Severity.INFO),
            ("WARNING", Severity.WARN),
            ("ERROR", Severity.ERROR),
            ("CRITICAL", Severity.FATAL),
            ("NOTSET", Severity.INFO),
            ("CUSTOM", Severity.INFO),
        ],
    )
    def test_mapping(self, levelname: str, severity: Severity) -> None:
        """Stdlib level names map onto OTLP severities."""
        assert severity_for_level(levelname) is severity


class TestOtlpLogHandler:
    """Tests for OtlpLogHandler.emit()."""

    @pytest.mark.adapter
    def test_forwards_message_and_severity(
        self, app_logger: logging.Logger, transport: InMemoryTransport
    ) -> None:
        """Log calls become OTLP log records."""
        app_logger.warning("disk at %d%%", 91)
        record = _record(transport)
        assert record["body"] == {"stringValue": "disk at 91%"}
        assert record["severityNumber"] == 13
        assert transport.last.url == "http://collector:4318/v1/logs"

    @pytest.mark.adapter
    def test_includes_source_attributes(
        self, app_logger: logging.Logger, transport: InMemoryTransport
    ) -> None:
        """Logger name and call site are attached."""
        app_logger.info("hello")
        attrs = _attrs(_record(transport))
        assert attrs["logger"] == "tests.app"
        assert attrs["funcName"] == "test_includes_source_attributes"
        assert "lineno" in attrs

    @pytest.mark.adapter
    def test_extra_fields_and_correlation_ids(
        self, app_logger: logging.Logger, transport: InMemoryTransport
    ) -> None:
        """extra= fields become attributes; trace/span ids become correlation."""
        app_logger.info(
            "charged",
            extra={
                "order_id": "A-17",
                "trace_id": "0af7651916cd43dd8448eb211c80319c",
                "span_id": "b7ad6b7169203331",
            },
        )
        record = _record(transport)
        attrs = _attrs(record)
        assert attrs["order_id"] == "A-17"
        assert "trace_id" not in attrs
        assert record["traceId"] == "0af7651916cd43dd8448eb211c80319c"
        assert record["spanId"] == "b7ad6b7169203331"

    @pytest.mark.adapter
    def test_exception_info(
        self, app_logger: logging.Logger, transport: InMemoryTransport
    ) -> None:
        """Exception details are attached as attributes."""
        try:
            raise ValueError("bad input")
        except ValueError:
            app_logger.exception("failed")
        record = _record(transport)
        attrs = _attrs(record)
        assert record["severityNumber"] == 17
        assert attrs["exception.type"] == "ValueError"
        assert attrs["exception.message"] == "bad input"
        assert "Traceback" in attrs["exception.stacktrace"]

    @pytest.mark.adapter
    def test_own_records_are_skipped(
        self, config: OtlpConfig, transport: InMemoryTransport
    ) -> None:
        """Records from otlpsend loggers are not forwarded."""
        handler = OtlpLogHandler(config=config, transport=transport)
        record = logging.LogRecord(
            "otlpsend.core.senders", logging.ERROR, __file__, 1, "x", None, None
        )
        handler.emit(record)
        assert transport.requests == []

    @pytest.mark.adapter
    def test_send_failure_goes_to_handle_error(
        self, config: OtlpConfig, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Transport errors are reported via Handler.handleError()."""

        class Unreachable:
            def post(self, url: str, headers: object, body: str) -> None:
                raise CollectorUnreachableError("down", url)

        handler = OtlpLogHandler(config=config, transport=Unreachable())
        handled: list[logging.LogRecord] = []
        monkeypatch.setattr(handler, "handleError", handled.append)
        record = logging.LogRecord(
            "tests.app", logging.INFO, __file__, 1, "x", None, None
        )
        handler.emit(record)
        assert handled == [record]

    @pytest.mark.adapter
    @pytest.mark.parametrize(
        "name", ["httpx", "httpcore.connection", "httpcore.http11"]
    )
    def test_http_client_records_are_skipped(
        self, name: str, config: OtlpConfig, transport: InMemoryTransport
    ) -> None:
        """Records from the HTTP client stack are not forwarded."""
        handler = OtlpLogHandler(config=config, transport=transport)
        record = logging.LogRecord(name, logging.INFO, __file__, 1, "x", None, None)
        handler.emit(record)
        assert transport.requests == []

    @pytest.mark.adapter
    def test_records_logged_while_sending_are_dropped(
        self, config: OtlpConfig
    ) -> None:
        """Logging from inside the transport does not trigger another send."""
        inner = logging.getLogger("tests.transport")
        posts: list[str] = []

        class ChattyTransport:
            def post(self, url: str, headers: object, body: str) -> dict:
                posts.append(url)
                inner.warning("posting to %s", url)
                return {}

        handler = OtlpLogHandler(config=config, transport=ChattyTransport())
        inner.addHandler(handler)
        inner.setLevel(logging.DEBUG)
        try:
            inner.warning("outer")
        finally:
            inner.removeHandler(handler)
        assert posts == ["http://collector:4318/v1/logs"]


class TestRootLoggerWithHttpx:
    """The handler can sit on the root logger while httpx logs requests."""

    @pytest.fixture
    def root_logger(self) -> Generator[logging.Logger]:
        root = logging.getLogger()
        level = root.level
        yield root
        root.setLevel(level)

    @pytest.mark.adapter
    def test_one_log_line_is_one_post(
        self, config: OtlpConfig, root_logger: logging.Logger
    ) -> None:
        """httpx's own INFO request log does not feed back into the handler."""
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={})

        client = httpx.Client(transport=httpx.MockTransport(handler))
        otlp_handler = OtlpLogHandler(
            config=config, transport=HttpxTransport(client=client)
        )
        root_logger.setLevel(logging.INFO)
        root_logger.addHandler(otlp_handler)
        try:
            logging.getLogger("tests.app.root").info("order placed")
        finally:
            root_logger.removeHandler(otlp_handler)
            client.close()

        assert len(requests) == 1
        assert str(requests[0].url) == "http://collector:4318/v1/logs"
