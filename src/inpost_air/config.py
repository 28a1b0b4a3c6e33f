"""Configuration for the InPost Air client.

Uses Pydantic v2 for validation with defaults matching the
InPost Mobile iOS application.
"""

from __future__ import annotations

import logging
import os
from typing import Annotated, Any, Self

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    ValidationError,
    field_validator,
)

from .errors import InvalidConfigError

DEFAULT_BASE_URL = "https://api-inmobile-pl.easypack24.net"
DEFAULT_USER_AGENT = "InPost-Mobile/3.18.0-release (iOS 17.1.1; iPhone14,2; pl)"
DEFAULT_PHONE_OS = "Apple"

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


class TelemetryConfig(BaseModel):
    """Logging and tracing configuration."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = True
    service_name: str = "inpost-air"
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        level = v.upper()
        if level not in LOG_LEVELS:
            msg = f"Unsupported log level: {v}"
            raise ValueError(msg)
        return level


class ClientConfig(BaseModel):
    """Main configuration for the InPost Air client."""

    model_config = ConfigDict(frozen=True, validate_default=True)

    base_url: HttpUrl = DEFAULT_BASE_URL  # type: ignore[assignment]

    # HTTP settings
    timeout: Annotated[float, Field(gt=0, le=300)] = 10.0
    user_agent: str = Field(default=DEFAULT_USER_AGENT, min_length=1)
    accept_language: str = "en-US"

    # Reported to the authentication endpoints
    phone_os: str = Field(default=DEFAULT_PHONE_OS, min_length=1)

    telemetry: TelemetryConfig = Field(default_factory=TelemetryConfig)

    @property
    def base_url_str(self) -> str:
        """Get base URL as string without trailing slash."""
        return str(self.base_url).rstrip("/")

    def with_overrides(self, **kwargs: Any) -> Self:
        """Create new config with overridden values."""
        data = self.model_dump()
        data.update(kwargs)
        return self.__class__(**data)

    @classmethod
    def from_env(cls, prefix: str = "INPOST_") -> Self:
        """Create config from environment variables.

        Unset variables fall back to the defaults.

        Raises:
            InvalidConfigError: If a variable holds an invalid value.
        """

        def get_env(key: str) -> str | None:
            return os.environ.get(f"{prefix}{key}")

        data: dict[str, Any] = {}
        for key in ("BASE_URL", "TIMEOUT", "USER_AGENT"):
            value = get_env(key)
            if value is not None:
                data[key.lower()] = value

        log_level = get_env("LOG_LEVEL")
        if log_level is not None:
            data["telemetry"] = {"log_level": log_level}

        try:
            return cls(**data)
        except ValidationError as e:
            field = ".".join(str(part) for part in e.errors()[0]["loc"])
            raise InvalidConfigError(
                f"Invalid {prefix} environment configuration: {e}",
                field=field,
            ) from e
