"""
This module enriches forecasts with sunrise and sunset times.
"""

from cwa_weather.schemas.weather import SunTimes
from cwa_weather.services.cwa_client import CWAClient
from cwa_weather.utils.logger import setup_logger

logger = setup_logger(__name__)


class SunriseSunsetService:
    """
    Looks up today's sunrise and sunset for a county.

    Enrichment is best effort: any failure yields the configured fallback
    values instead of an error.
    """

    def __init__(self, client: CWAClient):
        self.client = client
        self.fallback = client.settings.sun_fallback

    async def get_sun_times(self, city: str) -> SunTimes:
        try:
            payload = await self.client.fetch_sun_times(city)
            today = payload.records.locations.location[0].first_day()
            return SunTimes(sunrise=today.sunrise_time, sunset=today.sunset_time)
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.warning(
                "Failed to fetch sunrise/sunset, using fallback",
                extra={
                    "event": "sun_times_fallback",
                    "city": city,
                    "error": str(e),
                    "error_type": type(e).__name__,
                },
            )
            return SunTimes(sunrise=self.fallback, sunset=self.fallback)
