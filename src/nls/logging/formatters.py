"""
Log formatters for different output formats.

Provides structured JSON formatting, console formatting, and Rich terminal output.
"""

import json
import logging
import traceback
from datetime import datetime, timezone

from rich.console import Console
from rich.logging import RichHandler


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def __init__(self, service_name: str = "nls", version: str = "unknown"):
        super().__init__()
        self.service_name = service_name
        self.version = version

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "service": self.service_name,
            "version": self.version,
            "logger": record.name,
            "thread_name": record.threadName,
        }

        if hasattr(record, "correlation_id"):
            log_entry["correlation_id"] = record.correlation_id

        if hasattr(record, "operation"):
            log_entry["operation"] = record.operation

        if hasattr(record, "duration"):
            log_entry["duration_ms"] = record.duration

        if record.exc_info:
            log_entry["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": traceback.format_exception(*record.exc_info),
            }

        return json.dumps(log_entry, default=str)


def create_console_formatter() -> logging.Formatter:
    """Create a console formatter for human-readable output."""
    return logging.Formatter(
        "%(asctime)s [%(levelname)8s] %(threadName)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_rich_handler() -> logging.Handler:
    """Create a Rich handler for enhanced terminal output."""
    return RichHandler(
        console=Console(stderr=True),
        show_time=True,
        show_level=True,
        show_path=True,
        markup=False,
        rich_tracebacks=True,
    )
