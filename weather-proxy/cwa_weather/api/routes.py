"""
This module defines the HTTP routes of the proxy.
"""

from datetime import datetime, UTC
from typing import Optional

from fastapi import APIRouter, Depends, Query

from cwa_weather.config import get_settings
from cwa_weather.schemas.weather import (
    CityWeatherResponse,
    ErrorResponse,
    FixedCityWeatherResponse,
    HealthResponse,
    RootResponse,
    ShareResponse,
)
from cwa_weather.services.share_service import build_share_content
from cwa_weather.services.weather_service import WeatherService
from cwa_weather.utils.dependencies import get_weather_service
from cwa_weather.utils.logger import setup_logger

logger = setup_logger(__name__)
settings = get_settings()

router = APIRouter()

ENDPOINTS = {
    "kaohsiung": "/api/weather/kaohsiung",
    "health": "/api/health",
    "cityWeather": "/api/weather?city=城市名稱",
    "shareWeather": "/api/share?city=城市名稱&weather=天氣描述&temperature=氣溫",
}

UPSTREAM_ERRORS = {
    404: {"model": ErrorResponse, "description": "City not found"},
    500: {"model": ErrorResponse, "description": "Configuration or upstream error"},
}


@router.get("/", response_model=RootResponse, tags=["default"])
async def root() -> RootResponse:
    """
    List the available endpoints.
    """
    return RootResponse(message=f"Welcome to the {settings.app_name}", endpoints=ENDPOINTS)


@router.get("/api/health", response_model=HealthResponse, tags=["default"])
async def health_check() -> HealthResponse:
    return HealthResponse(status="OK", timestamp=datetime.now(UTC).isoformat())


@router.get(
    "/api/weather/kaohsiung",
    response_model=FixedCityWeatherResponse,
    responses=UPSTREAM_ERRORS,
    tags=["weather"],
)
async def get_kaohsiung_weather(
    weather_service: WeatherService = Depends(get_weather_service),
) -> FixedCityWeatherResponse:
    """
    Get the 36-hour forecast for the fixed city, including wind speed.
    """
    data = await weather_service.get_fixed_city_weather()
    return FixedCityWeatherResponse(data=data)


@router.get(
    "/api/weather",
    response_model=CityWeatherResponse,
    responses=UPSTREAM_ERRORS,
    tags=["weather"],
)
async def get_city_weather(
    city: Optional[str] = Query(None, description="City name"),
    weather_service: WeatherService = Depends(get_weather_service),
) -> CityWeatherResponse:
    """
    Get the 36-hour forecast for a city, enriched with sunrise and sunset.

    The default city is used when ``city`` is omitted.
    """
    data = await weather_service.get_city_weather(city)
    return CityWeatherResponse(data=data)


@router.get(
    "/api/share",
    response_model=ShareResponse,
    responses={400: {"model": ErrorResponse, "description": "Missing parameters"}},
    tags=["share"],
)
async def share_weather(
    city: Optional[str] = Query(None, description="City name"),
    weather: Optional[str] = Query(None, description="Weather description"),
    temperature: Optional[str] = Query(None, description="Temperature"),
) -> ShareResponse:
    """
    Generate a share sentence for the given city, weather and temperature.
    """
    return ShareResponse(share_content=build_share_content(city, weather, temperature))
