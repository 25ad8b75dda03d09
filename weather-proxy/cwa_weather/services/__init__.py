"""
Services package initialization.
"""

from cwa_weather.services.cwa_client import CWAClient
from cwa_weather.services.forecast_transformer import build_forecasts, first_location
from cwa_weather.services.share_service import build_share_content
from cwa_weather.services.sun_service import SunriseSunsetService
from cwa_weather.services.weather_service import WeatherService

__all__ = [
    "CWAClient",
    "build_forecasts",
    "first_location",
    "build_share_content",
    "SunriseSunsetService",
    "WeatherService",
]
