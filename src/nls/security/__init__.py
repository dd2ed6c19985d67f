"""Credential masking for log output."""

from .masking import CredentialSanitizer

__all__ = ["CredentialSanitizer"]
