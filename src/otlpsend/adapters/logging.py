"""Python logging handler adapter for otlpsend.

This adapter bridges Python's standard library logging module to
send_log(), so existing ``logging`` calls are forwarded to a collector.
"""

import logging
import threading
import traceback

from otlpsend.adapters.transport.httpx_transport import HttpxTransport
from otlpsend.core.config import OtlpConfig
from otlpsend.core.models import Severity
from otlpsend.core.ports import TransportPort
from otlpsend.core.senders import send_log

# Standard LogRecord attributes that should not be treated as extra fields
_STANDARD_LOGRECORD_ATTRS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
        "trace_id",
        "span_id",
    }
)

_LEVEL_TO_SEVERITY = {
    "DEBUG": Severity.DEBUG,
    "INFO": Severity.INFO,
    "WARNING": Severity.WARN,
    "ERROR": Severity.ERROR,
    "CRITICAL": Severity.FATAL,
}

# Records from these loggers are produced while sending and are dropped.
_IGNORED_LOGGER_PREFIXES = frozenset({"otlpsend", "httpx", "httpcore"})


def severity_for_level(levelname: str) -> Severity:
    """Map a stdlib level name to a Severity, defaulting to INFO."""
    return _LEVEL_TO_SEVERITY.get(levelname, Severity.INFO)


class OtlpLogHandler(logging.Handler):
    """Logging handler that sends each record to a collector.

    ``trace_id`` and ``span_id`` passed via ``extra=`` become the record's
    correlation ids.

    Example:
        ```python
        from otlpsend import OtlpLogHandler, init_config

        init_config("http://localhost:4318", "checkout")
        logging.getLogger().addHandler(OtlpLogHandler())
        ```
    """

    def __init__(
        self,
        level: int = logging.NOTSET,
        *,
        config: OtlpConfig | None = None,
        transport: TransportPort | None = None,
    ) -> None:
        """Initialize the handler.

        Args:
            level: Minimum level to forward.
            config: Configuration to use instead of the process-wide one.
            transport: Transport to use instead of a fresh HttpxTransport.
        """
        super().__init__(level)
        self._config = config
        self._transport = transport
        self._emitting = threading.local()

    def emit(self, record: logging.LogRecord) -> None:
        """Send a log record to the collector.

        Args:
            record: The log record to emit.
        """
        if record.name.split(".")[0] in _IGNORED_LOGGER_PREFIXES:
            return
        # Anything logged by the transport while this thread is sending.
        if getattr(self._emitting, "active", False):
            return

        attributes: dict[str, str | int | float | bool] = {
            "logger": record.name,
            "module": record.module,
            "funcName": record.funcName or "",
            "lineno": record.lineno,
        }

        # Add any extra attributes passed via logging call
        for key, value in record.__dict__.items():
            if key not in _STANDARD_LOGRECORD_ATTRS and isinstance(
                value, (str, int, float, bool)
            ):
                attributes[key] = value

        if record.exc_info:
            exc_type, exc_value, exc_tb = record.exc_info
            if exc_type is not None:
                attributes["exception.type"] = exc_type.__name__
            if exc_value is not None:
                attributes["exception.message"] = str(exc_value)
            if exc_tb is not None:
                attributes["exception.stacktrace"] = "".join(
                    traceback.format_exception(exc_type, exc_value, exc_tb)
                )

        transport = self._transport
        if transport is None:
            transport = HttpxTransport()

        self._emitting.active = True
        try:
            send_log(
                record.getMessage() or record.levelname,
                severity=severity_for_level(record.levelname),
                attributes=attributes,
                trace_id=getattr(record, "trace_id", None),
                span_id=getattr(record, "span_id", None),
                config=self._config,
                transport=transport,
            )
        except Exception:
            self.handleError(record)
        finally:
            self._emitting.active = False
