"""
Configuration for the NLS client.

Usage:
    from nls.config import ClientConfig, load_settings

    settings = load_settings()
    config = ClientConfig(api_key=settings.nls_api_key, app_key=settings.nls_app_key)
"""

from .models import ClientConfig, NLSSettings


def load_settings() -> NLSSettings:
    """Read NLS settings from the environment (and .env, when present)."""
    return NLSSettings()


__all__ = [
    "ClientConfig",
    "NLSSettings",
    "load_settings",
]
