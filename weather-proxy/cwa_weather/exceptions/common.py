from typing import Any, Iterable, Optional


class WeatherServiceException(Exception):
    """Base exception for weather service."""

    status_code: int = 500
    error: str = "weather_service_error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigurationError(WeatherServiceException):
    """Raised when a required setting such as the CWA API key is missing."""

    error = "configuration_error"


class ExternalAPIException(WeatherServiceException):
    """Raised when the CWA API answers with an error status."""

    error = "upstream_error"

    def __init__(self, message: str, status_code: int = 500, details: Any = None):
        self.status_code = status_code
        self.details = details
        super().__init__(message)


class UpstreamPayloadError(WeatherServiceException):
    """Raised when the CWA API returns a payload of unexpected shape."""

    error = "upstream_payload_invalid"


class CityNotFoundError(WeatherServiceException):
    """Raised when the CWA API has no location record for the city."""

    status_code = 404
    error = "city_not_found"

    def __init__(self, city: str, message: Optional[str] = None):
        self.city = city
        super().__init__(message or f"Unable to retrieve weather data for {city}")


class MissingParameterError(WeatherServiceException):
    """Raised when required query parameters are absent."""

    status_code = 400
    error = "missing_parameters"

    def __init__(self, parameters: Iterable[str]):
        self.parameters = list(parameters)
        super().__init__(
            f"Missing required query parameters: {', '.join(self.parameters)}"
        )
