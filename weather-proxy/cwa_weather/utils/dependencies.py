"""
FastAPI dependency injection providers.

Route handlers receive their services through ``Depends`` so tests can
swap the upstream client via ``app.dependency_overrides``.
"""

from fastapi import Depends

from cwa_weather.services.cwa_client import CWAClient
from cwa_weather.services.sun_service import SunriseSunsetService
from cwa_weather.services.weather_service import WeatherService
from cwa_weather.utils.logger import setup_logger

logger = setup_logger(__name__)

# Module-level client instance shared across requests
_cwa_client: CWAClient | None = None


async def get_cwa_client() -> CWAClient:
    """
    Get or create the shared CWA API client.

    Returns:
        CWAClient: Client reusing one httpx connection pool
    """
    global _cwa_client  # pylint: disable=global-statement
    if _cwa_client is None:
        _cwa_client = CWAClient()
        logger.info("CWA API client initialized")
    return _cwa_client


async def get_sun_service(
    client: CWAClient = Depends(get_cwa_client),
) -> SunriseSunsetService:
    return SunriseSunsetService(client)


async def get_weather_service(
    client: CWAClient = Depends(get_cwa_client),
    sun_service: SunriseSunsetService = Depends(get_sun_service),
) -> WeatherService:
    """
    Provide the weather service with its client and enricher.

    Args:
        client: CWA client from dependency
        sun_service: Sunrise/sunset enricher from dependency

    Returns:
        WeatherService: Configured weather service
    """
    return WeatherService(client=client, sun_service=sun_service)


async def close_cwa_client():
    """
    Close the shared client during application shutdown.
    """
    global _cwa_client  # pylint: disable=global-statement
    if _cwa_client:
        await _cwa_client.close()
        _cwa_client = None
        logger.info("CWA API client closed")
