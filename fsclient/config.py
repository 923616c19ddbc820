"""
Configuration module for fsclient.

Supports environment variables for easy configuration:
- FSCLIENT_APP_NAME: Application name sent in the User-Agent (required)
- FSCLIENT_APP_VERSION: Application version
- FSCLIENT_APP_URL: Application homepage
- FSCLIENT_CONSUMER_KEY / FSCLIENT_CONSUMER_SECRET: OAuth v1 consumer
- FSCLIENT_ACCESS_TOKEN: OAuth v2 bearer token
- FSCLIENT_BASE_URL: Base URL joined to relative request paths
- FSCLIENT_LOGGER_NAME: Logger name (default: fsclient)
"""

import os
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from .models import AccessToken, Consumer, UserAgent

ENV_PREFIX = "FSCLIENT_"
DEFAULT_LOGGER_NAME = "fsclient"


class ClientConfig(BaseModel):
    """Client configuration"""

    app_name: str = Field(..., description="Application name")
    app_version: Optional[str] = Field(None, description="Application version")
    app_url: Optional[str] = Field(None, description="Application homepage")
    consumer_key: Optional[str] = Field(None, description="OAuth v1 consumer key")
    consumer_secret: Optional[str] = Field(None, description="OAuth v1 consumer secret")
    access_token: Optional[str] = Field(None, description="OAuth v2 bearer token")
    base_url: Optional[str] = Field(None, description="Base URL for relative paths")
    timeout_connect: float = Field(5.0, description="Connection timeout in seconds")
    timeout_read: float = Field(30.0, description="Read timeout in seconds")
    logger_name: str = Field(DEFAULT_LOGGER_NAME, description="Logger name")
    debug: bool = Field(False, description="Enable debug logging")

    @field_validator("app_name")
    @classmethod
    def validate_app_name(cls, v):
        if not v or not v.strip():
            raise ValueError("app_name is required")
        return v.strip()

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v):
        if v is None:
            return v
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("timeout_connect", "timeout_read")
    @classmethod
    def validate_timeout(cls, v):
        if v <= 0:
            raise ValueError("timeouts must be positive")
        return v

    @model_validator(mode="after")
    def validate_consumer(self) -> "ClientConfig":
        if bool(self.consumer_key) != bool(self.consumer_secret):
            raise ValueError("consumer_key and consumer_secret must be set together")
        return self

    @property
    def user_agent(self) -> UserAgent:
        return UserAgent(
            app_name=self.app_name, app_version=self.app_version, app_url=self.app_url
        )

    @property
    def consumer(self) -> Optional[Consumer]:
        if not self.consumer_key:
            return None
        return Consumer(key=self.consumer_key, secret=self.consumer_secret or "")

    @property
    def bearer_token(self) -> Optional[AccessToken]:
        if not self.access_token:
            return None
        return AccessToken(value=self.access_token)

    @classmethod
    def from_env(cls, **overrides) -> "ClientConfig":
        """
        Build configuration from ``FSCLIENT_*`` environment variables.

        Args:
            **overrides: Explicit values taking precedence over the environment

        Returns:
            Validated configuration
        """
        values = {}
        for name in cls.model_fields:
            env_value = os.getenv(ENV_PREFIX + name.upper())
            if env_value is not None and env_value != "":
                values[name] = env_value
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def __repr__(self) -> str:
        return (
            f"ClientConfig(app_name={self.app_name!r}, "
            f"app_version={self.app_version!r}, "
            f"consumer_key={self.consumer_key!r}, "
            f"consumer_secret=***REDACTED***, "
            f"base_url={self.base_url!r})"
        )
