"""InPost Air Python client."""

from .client import InPostAirClient
from .config import ClientConfig, TelemetryConfig
from .errors import (
    ConfigStoreError,
    InPostError,
    InvalidConfigError,
    InvalidResponseError,
    NetworkError,
    NotLoggedInError,
    RemoteRejectedError,
    RequestTimeoutError,
    TokenMalformedError,
)
from .models import AirSensorData, Point, Pollutant, Session, Weather
from .store import CallbackConfigStore, ConfigStore, FileConfigStore, MemoryConfigStore

__all__ = [
    "InPostAirClient",
    "ClientConfig",
    "TelemetryConfig",
    "InPostError",
    "NotLoggedInError",
    "RemoteRejectedError",
    "TokenMalformedError",
    "InvalidResponseError",
    "NetworkError",
    "RequestTimeoutError",
    "ConfigStoreError",
    "InvalidConfigError",
    "Point",
    "AirSensorData",
    "Weather",
    "Pollutant",
    "Session",
    "ConfigStore",
    "MemoryConfigStore",
    "FileConfigStore",
    "CallbackConfigStore",
]

__version__ = "0.1.0"
