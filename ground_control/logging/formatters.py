"""Log formatters for different output formats."""

import json
import logging
import traceback
from datetime import UTC, datetime
from typing import Any, ClassVar

from ground_control.constants import SERVICE_NAME
from ground_control.logging.context import get_correlation_id, get_extra_context

_STANDARD_LOG_ATTRS: frozenset[str] = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "exc_info",
        "exc_text",
        "thread",
        "threadName",
        "taskName",
        "message",
    }
)

_MAX_LOGGER_NAME_LENGTH = 30


def _record_extras(record: logging.LogRecord) -> dict[str, Any]:
    """Collect context and ``extra=`` fields attached to a record."""
    fields: dict[str, Any] = {}

    corr_id = get_correlation_id()
    if corr_id:
        fields["correlation_id"] = corr_id

    fields.update(get_extra_context())
    fields.update(
        {
            key: value
            for key, value in record.__dict__.items()
            if key not in _STANDARD_LOG_ATTRS and not key.startswith("_")
        }
    )
    return fields


def _json_default(value: Any) -> Any:
    """Serialize values json cannot handle natively.

    Binary image chunks are summarized by size rather than dumped.
    """
    if isinstance(value, bytes | bytearray | memoryview):
        return f"<{len(value)} bytes>"
    return str(value)


class JSONFormatter(logging.Formatter):
    """Format log records as JSON for structured logging."""

    def __init__(
        self,
        *,
        service_name: str = SERVICE_NAME,
        include_timestamp: bool = True,
        include_location: bool = True,
    ) -> None:
        """Initialize the JSON formatter.

        Args:
            service_name: Service identifier for log aggregation.
            include_timestamp: Whether to include timestamp field.
            include_location: Whether to include module/function/line fields.
        """
        super().__init__()
        self._service_name = service_name
        self._include_timestamp = include_timestamp
        self._include_location = include_location

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as a JSON string."""
        log_entry: dict[str, Any] = {}

        if self._include_timestamp:
            log_entry["timestamp"] = datetime.now(UTC).isoformat(timespec="milliseconds")

        log_entry["level"] = record.levelname
        log_entry["logger"] = record.name
        log_entry["message"] = record.getMessage()
        log_entry["service"] = self._service_name

        if self._include_location:
            log_entry["module"] = record.module
            log_entry["function"] = record.funcName
            log_entry["line"] = record.lineno

        log_entry.update(_record_extras(record))

        if record.exc_info:
            log_entry["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else "Unknown",
                "message": str(record.exc_info[1]) if record.exc_info[1] else "",
                "traceback": traceback.format_exception(*record.exc_info),
            }

        return json.dumps(log_entry, default=_json_default, ensure_ascii=False)


class HumanFormatter(logging.Formatter):
    """Format log records for an operator console."""

    COLORS: ClassVar[dict[str, str]] = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET: ClassVar[str] = "\033[0m"

    def __init__(self, *, use_colors: bool = True) -> None:
        """Initialize the human formatter.

        Args:
            use_colors: Whether to use ANSI colors in output.
        """
        super().__init__()
        self._use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record for human readability."""
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")

        level = record.levelname
        if self._use_colors:
            color = self.COLORS.get(level, "")
            level_string = f"{color}{level:<8}{self.RESET}"
        else:
            level_string = f"{level:<8}"

        logger_name = record.name
        if len(logger_name) > _MAX_LOGGER_NAME_LENGTH:
            truncate_at = _MAX_LOGGER_NAME_LENGTH - 3
            logger_name = "..." + logger_name[-truncate_at:]

        context_string = " ".join(f"{key}={value}" for key, value in _record_extras(record).items())

        parts = [timestamp, "|", level_string, "|", f"{logger_name:<30}", "|", record.getMessage()]
        if context_string:
            parts.extend(["|", context_string])

        result = " ".join(parts)

        if record.exc_info:
            result += "\n" + "".join(traceback.format_exception(*record.exc_info))

        return result
