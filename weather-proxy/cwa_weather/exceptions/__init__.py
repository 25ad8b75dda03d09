"""Weather service exceptions."""

from .common import (
    WeatherServiceException,
    ConfigurationError,
    ExternalAPIException,
    UpstreamPayloadError,
    CityNotFoundError,
    MissingParameterError,
)

__all__ = [
    "WeatherServiceException",
    "ConfigurationError",
    "ExternalAPIException",
    "UpstreamPayloadError",
    "CityNotFoundError",
    "MissingParameterError",
]
