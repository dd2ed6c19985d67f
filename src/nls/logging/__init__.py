"""
NLS Logging Package

Logging setup for applications using the NLS client:
- formatters: Log formatting (JSON, console, rich)
- config: Logging configuration
- manager: Centralized logging setup
- context: Entry/exit logging around an operation
"""

from .config import LoggingConfig, create_default_config
from .context import LoggingContext
from .formatters import StructuredFormatter
from .manager import LoggingManager, configure_logging, logging_manager

__all__ = [
    "LoggingConfig",
    "LoggingManager",
    "configure_logging",
    "create_default_config",
    "logging_manager",
    "LoggingContext",
    "StructuredFormatter",
]
