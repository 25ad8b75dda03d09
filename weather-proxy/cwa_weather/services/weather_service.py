"""
This module provides weather-related services.
"""

from typing import Optional

from cwa_weather.schemas.weather import (
    CityWeather,
    DetailedForecastEntry,
    FixedCityWeather,
    ForecastEntry,
)
from cwa_weather.services.cwa_client import CWAClient
from cwa_weather.services.forecast_transformer import build_forecasts, first_location
from cwa_weather.services.sun_service import SunriseSunsetService
from cwa_weather.utils.logger import setup_logger

logger = setup_logger(__name__)


class WeatherService:
    """
    Combines the CWA client, the forecast transformer and the sun enricher.
    """

    def __init__(self, client: CWAClient, sun_service: SunriseSunsetService):
        self.client = client
        self.sun_service = sun_service
        self.settings = client.settings

    async def get_fixed_city_weather(self) -> FixedCityWeather:
        """
        Get the 36-hour forecast, including wind speed, for the fixed city.
        """
        city = self.settings.fixed_city
        logger.info(
            "Fetching fixed city forecast",
            extra={
                "event": "api_call",
                "city": city,
                "dataset": self.settings.forecast_dataset,
            },
        )
        payload = await self.client.fetch_forecast(city)
        location = first_location(payload, city)

        return FixedCityWeather(
            city=location.location_name,
            update_time=payload.records.dataset_description,
            forecasts=build_forecasts(location, DetailedForecastEntry),
        )

    async def get_city_weather(self, city: Optional[str] = None) -> CityWeather:
        """
        Get the 36-hour forecast for a city, enriched with sunrise and sunset.

        Falls back to the default city when no name is given.
        """
        city = city or self.settings.default_city
        logger.info(
            "Fetching city forecast",
            extra={
                "event": "api_call",
                "city": city,
                "dataset": self.settings.forecast_dataset,
            },
        )
        payload = await self.client.fetch_forecast(city)
        location = first_location(payload, city)

        sun_times = await self.sun_service.get_sun_times(city)

        return CityWeather(
            city=location.location_name,
            update_time=payload.records.dataset_description,
            forecasts=build_forecasts(location, ForecastEntry),
            sunrise=sun_times.sunrise,
            sunset=sun_times.sunset,
        )
