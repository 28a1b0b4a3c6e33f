"""Pydantic models for the InPost Air client.

Wire models use camelCase aliases matching the InPost Mobile API
and ignore keys they do not know about.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Self

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    ValidationError,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from .telemetry import get_logger


class WireModel(BaseModel):
    """Immutable model read from an API response.

    Keys sent as JSON null fall back to the field default.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class Session(BaseModel):
    """Tokens owned by one client instance.

    The auth token is stored verbatim as issued, including its
    ``Bearer `` prefix.
    """

    model_config = ConfigDict(
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )

    refresh_token: str = ""
    auth_token: str = ""

    @field_validator("refresh_token", "auth_token", mode="before")
    @classmethod
    def none_as_empty(cls, v: str | None) -> str:
        """Treat JSON null as an absent token."""
        return "" if v is None else v

    @property
    def has_refresh_token(self) -> bool:
        """Check if a refresh token is available."""
        return bool(self.refresh_token)

    @classmethod
    def from_bytes(cls, blob: bytes | None) -> Self:
        """Load a session from persisted bytes.

        Missing, empty or unparsable data yields an empty session.
        """
        if not blob or not blob.strip():
            return cls()

        try:
            return cls.model_validate_json(blob)
        except ValidationError as e:
            get_logger().warning(
                "Ignoring unreadable session config",
                errors=e.error_count(),
            )
            return cls()

    def to_bytes(self) -> bytes:
        """Serialize the session for the config store."""
        return self.model_dump_json(by_alias=True, indent=2).encode("utf-8")


class APIError(WireModel):
    """Error body returned by the API on non-success responses."""

    status: int = 0
    error: str = ""
    description: str = ""

    @classmethod
    def from_body(cls, body: bytes) -> Self:
        """Parse an error body, keeping raw text when it is not JSON."""
        try:
            return cls.model_validate_json(body)
        except ValidationError:
            return cls(description=body.decode("utf-8", errors="replace"))


class AuthenticateResponse(WireModel):
    """Success body of ``/v1/authenticate``."""

    auth_token: str = Field(..., min_length=1)


class ConfirmCodeResponse(WireModel):
    """Success body of ``/v1/confirmSMSCode``."""

    auth_token: str = Field(..., min_length=1)
    refresh_token: str = Field(..., min_length=1)


class TokenPayload(BaseModel):
    """Claims read from the access token payload."""

    model_config = ConfigDict(extra="ignore")

    exp: StrictInt


class Pollutant(WireModel):
    value: float = 0.0
    percent: float = 0.0


class Pollutants(WireModel):
    pm10: Pollutant = Field(default_factory=Pollutant)
    pm25: Pollutant = Field(default_factory=Pollutant)


class Weather(WireModel):
    temperature: float = 0.0
    pressure: float = 0.0
    humidity: float = 0.0


class AirSensorData(WireModel):
    """Readings of the air sensor mounted on a point."""

    air_quality: str = ""
    weather: Weather = Field(default_factory=Weather)
    pollutants: Pollutants = Field(default_factory=Pollutants)
    updated_until: datetime | None = None


class Point(WireModel):
    """A parcel locker or pickup point.

    ``air_sensor_data`` keeps zero values when the point has no sensor.
    """

    name: str = ""
    location_description: str = ""
    air_sensor: bool = False
    air_sensor_data: AirSensorData = Field(default_factory=AirSensorData)
