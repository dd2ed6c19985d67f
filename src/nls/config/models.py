"""
Configuration models for the NLS client.

This module defines Pydantic-based models for the client configuration and
the environment settings credentials are resolved from.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from nls.constants import ClientDefaults, EnvironmentConstants, ServiceConstants


class ClientConfig(BaseModel):
    """Endpoint and credentials used to build every request.

    Instances are frozen. Changing credentials means building a new config
    and swapping it in as a whole, so a request always sees a consistent
    api_key/app_key pair.
    """

    endpoint_base: str = Field(
        ServiceConstants.DEFAULT_ENDPOINT,
        description="URL prefix the get/ and store/ paths are appended to",
    )
    api_key: Optional[str] = Field(None, description="API key (URL path segment)")
    app_key: Optional[str] = Field(None, description="Application key (URL path segment)")
    timeout: Optional[float] = Field(
        ClientDefaults.REQUEST_TIMEOUT_SECONDS,
        gt=0,
        description="Request timeout in seconds, None for no timeout",
    )

    model_config = {
        "frozen": True,
        "extra": "forbid",
        "str_strip_whitespace": True,
    }

    @field_validator("api_key", "app_key")
    @classmethod
    def validate_credentials(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and len(v) == 0:
            return None
        return v

    @field_validator("endpoint_base")
    @classmethod
    def validate_endpoint_base(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("endpoint_base must be an http:// or https:// URL")
        if not v.endswith("/"):
            v += "/"
        return v

    @property
    def missing_credentials(self) -> tuple:
        """Names of the credentials that are not set."""
        missing = []
        if not self.api_key:
            missing.append("api_key")
        if not self.app_key:
            missing.append("app_key")
        return tuple(missing)


class NLSSettings(BaseSettings):
    """Settings that can be provided through environment variables or .env."""

    nls_api_key: Optional[str] = Field(None, alias=EnvironmentConstants.API_KEY)
    nls_app_key: Optional[str] = Field(None, alias=EnvironmentConstants.APP_KEY)
    nls_log_level: Optional[str] = Field(None, alias=EnvironmentConstants.LOG_LEVEL)

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )
