"""Structured logging for the checkout backend.

JSON lines in production, colored text for development. Payment references
and order details are bound with ``LogContext`` and stamped onto every record
emitted inside the block, so the log lines of one webhook call can be traced
back to its payment.
"""

import json
import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Optional

_request_context: ContextVar[Optional[Dict[str, Any]]] = ContextVar("request_context", default=None)


class LogContext:
    """Bind fields to every log record emitted inside the block."""

    def __init__(self, **fields):
        self.fields = fields
        self._token = None

    def __enter__(self):
        merged = dict(_request_context.get() or {})
        merged.update(self.fields)
        self._token = _request_context.set(merged)
        return self

    def __exit__(self, *args):
        _request_context.reset(self._token)


class RequestContextFilter(logging.Filter):
    """Copies the bound request context onto each record as ``record.context``."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.context = dict(_request_context.get() or {})
        return True


class JSONFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        context = getattr(record, "context", None)
        if context:
            entry["context"] = context
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class ColoredFormatter(logging.Formatter):
    """Readable single-line output for development consoles."""

    LEVEL_COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self, use_color: bool = True):
        super().__init__()
        self.use_color = use_color

    def _paint(self, text: str, code: str) -> str:
        return f"{code}{text}{self.RESET}" if self.use_color else text

    def format(self, record: logging.LogRecord) -> str:
        clock = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        level = self._paint(f"{record.levelname:<8}", self.LEVEL_COLORS.get(record.levelname, ""))
        line = f"{clock} {level} {record.name}: {record.getMessage()}"

        context = getattr(record, "context", None)
        if context:
            pairs = " ".join(f"{key}={value}" for key, value in context.items())
            line += " " + self._paint(f"[{pairs}]", "\033[90m")

        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def setup_logging(level: Optional[str] = None, format: Optional[str] = None) -> None:
    """Install the backend log handler on the root logger.

    Args:
        level: Log level name, INFO when omitted
        format: "json" for JSON lines, anything else for colored text
    """
    level = getattr(logging, (level or "INFO").upper())

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestContextFilter())
    if format == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(ColoredFormatter(use_color=sys.stdout.isatty()))

    root = logging.getLogger()
    for existing in root.handlers[:]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
