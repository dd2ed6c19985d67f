"""
Logging context management.

Provides a context manager that brackets an operation with entry, success
and failure messages.
"""

import logging
import time
from typing import Any, Dict, Optional


class LoggingContext:
    """Context manager for structured logging with entry/exit messages."""

    def __init__(self, entry_msg=None, success_msg=None, failure_msg=None,
                 logger: Optional[logging.Logger] = None,
                 extra: Optional[Dict[str, Any]] = None,
                 entry_level=logging.DEBUG, success_level=logging.DEBUG,
                 failure_level=logging.WARNING):
        self.entry_msg = entry_msg
        self.success_msg = success_msg
        self.failure_msg = failure_msg
        self.logger = logger or logging.getLogger(__name__)
        self.extra = dict(extra or {})
        self.entry_level = entry_level
        self.success_level = success_level
        self.failure_level = failure_level
        self._started = None

    def __enter__(self):
        self._started = time.perf_counter()
        if self.entry_msg:
            self.logger.log(self.entry_level, self.entry_msg, extra=self.extra)
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        extra = dict(self.extra)
        extra["duration"] = round((time.perf_counter() - self._started) * 1000, 2)
        if exc_type is None:
            if self.success_msg:
                self.logger.log(self.success_level, self.success_msg, extra=extra)
        elif self.failure_msg:
            self.logger.log(
                self.failure_level, f"{self.failure_msg} ({exc_type.__name__})", extra=extra
            )
        return False
