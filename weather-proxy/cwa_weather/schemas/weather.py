"""
This module defines the response schemas served by the proxy.

Field names are snake_case in Python and camelCase on the wire.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ForecastEntry(ApiModel):
    """
    One forecast time slot with display-ready values.

    Attributes:
        start_time: Slot start as reported upstream
        end_time: Slot end as reported upstream
        weather: Weather description (Wx)
        rain: Probability of precipitation with "%" suffix (PoP)
        min_temp: Minimum temperature with "°C" suffix (MinT)
        max_temp: Maximum temperature with "°C" suffix (MaxT)
        comfort: Comfort index description (CI)
    """

    model_config = ConfigDict(frozen=True)

    start_time: str
    end_time: str
    weather: str = ""
    rain: str = ""
    min_temp: str = ""
    max_temp: str = ""
    comfort: str = ""


class DetailedForecastEntry(ForecastEntry):
    """
    Forecast slot that also carries the wind speed (WS).
    """

    wind_speed: str = ""


class ForecastData(ApiModel):
    city: str = Field(..., description="Location name reported upstream")
    update_time: str = Field(..., description="Upstream dataset description")


class FixedCityWeather(ForecastData):
    forecasts: List[DetailedForecastEntry] = Field(default_factory=list)


class CityWeather(ForecastData):
    forecasts: List[ForecastEntry] = Field(default_factory=list)
    sunrise: Optional[str] = None
    sunset: Optional[str] = None


class SunTimes(ApiModel):
    model_config = ConfigDict(frozen=True)

    sunrise: str
    sunset: str


class FixedCityWeatherResponse(ApiModel):
    success: bool = True
    data: FixedCityWeather


class CityWeatherResponse(ApiModel):
    success: bool = True
    data: CityWeather


class ShareResponse(ApiModel):
    success: bool = True
    share_content: str


class HealthResponse(ApiModel):
    status: str = Field(..., description="Service health status")
    timestamp: str = Field(..., description="Current timestamp")


class RootResponse(ApiModel):
    message: str
    endpoints: Dict[str, str]


class ErrorResponse(BaseModel):
    error: str = Field(..., description="Fixed error code")
    message: Optional[str] = Field(None, description="Human readable explanation")
    details: Optional[Any] = Field(None, description="Upstream error body, if any")
