"""
Base exception classes for the NLS client.

Provides the foundational NLSError class that all other exceptions inherit from.
"""

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class ExceptionContext:
    """Context information for NLS exceptions."""

    help_text: Optional[str] = None
    error_code: Optional[str] = None
    context: Dict[str, Any] = field(default_factory=dict)
    technical_details: Optional[str] = None
    correlation_id: Optional[str] = None


class NLSError(Exception):
    """Base exception for all NLS client errors.

    Errors raised by a dispatched request reuse that request's correlation
    id, so the Error ID shown to the caller matches the id on its log lines.
    """

    def __init__(self, message: str, context: Optional[ExceptionContext] = None):
        context = context or ExceptionContext()
        self.message = message
        self.help_text = context.help_text
        self.error_code = context.error_code
        self.context = context.context
        self.technical_details = context.technical_details
        self.correlation_id = context.correlation_id or new_correlation_id()
        super().__init__(message)

    def __str__(self) -> str:
        result = self.message

        if self.help_text:
            result += f"\n\nHelp: {self.help_text}"

        context_items = [f"{k}: {v}" for k, v in self.context.items() if v is not None]
        if context_items:
            result += f"\n\nContext: {', '.join(context_items)}"

        result += f"\n\nError ID: {self.correlation_id}"
        return result


def new_correlation_id() -> str:
    """Short id tying a request's log lines to the error it may raise."""
    return str(uuid.uuid4())[:8]
