"""
This module defines schemas for the CWA open data payloads.

Only the members the proxy reads are declared; everything else in the
upstream JSON is ignored. Time slots are kept raw and validated when read,
so an element the proxy does not use cannot invalidate the payload.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ElementParameter(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    parameter_name: Optional[str] = Field(None, alias="parameterName")
    parameter_value: Optional[str] = Field(None, alias="parameterValue")
    parameter_unit: Optional[str] = Field(None, alias="parameterUnit")


class SlotTimes(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    start_time: str = Field("", alias="startTime")
    end_time: str = Field("", alias="endTime")


class ElementTimeSlot(SlotTimes):
    parameter: Optional[ElementParameter] = None


class WeatherElement(BaseModel):
    """
    A named upstream data series (Wx, PoP, MinT, ...) indexed by time slot.
    """

    element_name: str = Field(..., alias="elementName")
    time: List[Any] = Field(default_factory=list)

    def slot_times(self, index: int) -> SlotTimes:
        return SlotTimes.model_validate(self.time[index])

    def slot(self, index: int) -> Optional[ElementTimeSlot]:
        """
        Validate and return the slot at ``index``, or None when it is absent.
        """
        if index >= len(self.time):
            return None
        return ElementTimeSlot.model_validate(self.time[index])


class ForecastLocation(BaseModel):
    location_name: str = Field(..., alias="locationName")
    weather_element: List[WeatherElement] = Field(
        default_factory=list, alias="weatherElement"
    )


class ForecastRecords(BaseModel):
    dataset_description: str = Field("", alias="datasetDescription")
    location: List[ForecastLocation] = Field(default_factory=list)


class ForecastPayload(BaseModel):
    """
    Response of the 36-hour forecast dataset (F-C0032-001).
    """

    records: ForecastRecords


class SunTimeSlot(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    date: Optional[str] = Field(None, alias="Date")
    sunrise_time: str = Field(..., alias="SunRiseTime")
    sunset_time: str = Field(..., alias="SunSetTime")


class SunLocation(BaseModel):
    county_name: Optional[str] = Field(None, alias="CountyName")
    time: List[Any] = Field(default_factory=list)

    def first_day(self) -> SunTimeSlot:
        return SunTimeSlot.model_validate(self.time[0])


class SunLocations(BaseModel):
    location: List[SunLocation] = Field(default_factory=list)


class SunRecords(BaseModel):
    locations: SunLocations


class SunPayload(BaseModel):
    """
    Response of the sunrise/sunset dataset (A-B0062-001).
    """

    records: SunRecords
