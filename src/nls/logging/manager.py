"""
Centralized logging configuration.

The client itself never configures logging; applications that want the NLS
formats call configure_logging() once at startup.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import List, Optional

from nls.constants import LoggingDefaults

from .config import LoggingConfig
from .formatters import (
    StructuredFormatter,
    create_console_formatter,
    create_rich_handler,
)


class LoggingManager:
    """Centralized logging configuration and management."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self.config: Optional[LoggingConfig] = None
            self.handlers: List[logging.Handler] = []
            self._initialized = True

    def configure(self, config: LoggingConfig):
        """Configure the logging system."""
        self.config = config

        # Only remove handlers this manager installed
        root_logger = logging.getLogger()
        for handler in self.handlers:
            root_logger.removeHandler(handler)
            handler.close()
        self.handlers.clear()

        root_logger.setLevel(config.level)

        for output in config.output:
            if output == "console":
                self._add_console_handler(config)
            elif output == "file":
                self._add_file_handler(config)
            else:
                raise ValueError(f"Unknown log output: {output}")

        logging.getLogger("nls").setLevel(config.level)

    def _add_console_handler(self, config: LoggingConfig):
        """Add console handler."""
        if config.format_type == "rich":
            handler = create_rich_handler()
            handler.setFormatter(logging.Formatter("%(message)s"))
        elif config.format_type == "json":
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(
                StructuredFormatter(config.service_name, config.version)
            )
        else:  # console format
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(create_console_formatter())

        self._install(handler, config)

    def _add_file_handler(self, config: LoggingConfig):
        """Add file handler with rotation."""
        if not config.file_path:
            config.file_path = Path(LoggingDefaults.LOG_FILE)

        config.file_path.parent.mkdir(parents=True, exist_ok=True)

        handler = logging.handlers.RotatingFileHandler(
            config.file_path,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
        )

        if config.format_type == "json":
            handler.setFormatter(
                StructuredFormatter(config.service_name, config.version)
            )
        else:
            handler.setFormatter(create_console_formatter())

        self._install(handler, config)

    def _install(self, handler: logging.Handler, config: LoggingConfig):
        handler.setLevel(config.level)
        logging.getLogger().addHandler(handler)
        self.handlers.append(handler)


# Global logging manager instance
logging_manager = LoggingManager()


def configure_logging(config: Optional[LoggingConfig] = None):
    """Configure the global logging system."""
    if config is None:
        from .config import create_default_config

        config = create_default_config()
    logging_manager.configure(config)
