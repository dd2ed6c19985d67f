"""
Logging configuration management.

Provides configuration classes and utilities for setting up logging.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from nls.constants import LoggingDefaults


class LoggingConfig:
    """Configuration for the logging system."""

    def __init__(
        self,
        level: Union[str, int] = logging.INFO,
        format_type: str = "console",  # "console", "json", "rich"
        output: Union[
            str, List[str]
        ] = "console",  # "console", "file", ["console", "file"]
        file_path: Optional[Path] = None,
        max_file_size: int = LoggingDefaults.MAX_FILE_SIZE_BYTES,
        backup_count: int = LoggingDefaults.BACKUP_COUNT,
        service_name: str = LoggingDefaults.SERVICE_NAME,
        version: str = "unknown",
    ):
        self.level = (
            level if isinstance(level, int) else getattr(logging, level.upper())
        )
        if format_type not in ("console", "json", "rich"):
            raise ValueError("format_type must be one of: console, json, rich")
        self.format_type = format_type
        self.output = output if isinstance(output, list) else [output]
        self.file_path = Path(file_path) if file_path else None
        self.max_file_size = max_file_size
        self.backup_count = backup_count
        self.service_name = service_name
        self.version = version


def create_default_config() -> LoggingConfig:
    """Create a default logging configuration.

    The level comes from NLS_LOG_LEVEL when it is set.
    """
    from nls import __version__
    from nls.config import load_settings

    level = load_settings().nls_log_level or "INFO"
    return LoggingConfig(
        level=level,
        format_type="console",
        output="console",
        version=__version__,
    )
