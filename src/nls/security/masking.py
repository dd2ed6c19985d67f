"""
Credential masking utilities.

NLS credentials travel as URL path segments, so every URL that reaches a log
record has to go through here first.
"""

from typing import Iterable, Optional


class CredentialSanitizer:
    """Mask credentials before they are displayed or logged."""

    @staticmethod
    def mask_credential(credential: Optional[str], visible_chars: int = 4) -> str:
        """
        Mask credential for display/logging purposes.

        Args:
            credential: Credential to mask
            visible_chars: Number of characters to show at the end

        Returns:
            Masked credential string
        """
        if not credential:
            return "[empty]"

        if len(credential) <= visible_chars:
            return "*" * len(credential)

        return "*" * (len(credential) - visible_chars) + credential[-visible_chars:]

    @classmethod
    def mask_url(cls, url: str, credentials: Iterable[Optional[str]]) -> str:
        """Replace each credential path segment of ``url`` with its masked form."""
        segments = url.split("/")
        secrets = {c for c in credentials if c}
        return "/".join(
            cls.mask_credential(segment) if segment in secrets else segment
            for segment in segments
        )
