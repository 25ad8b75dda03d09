"""
This module reshapes CWA forecast payloads into flat forecast lists.
"""

from typing import Callable, Dict, List, Optional, Tuple, Type, TypeVar

from pydantic import ValidationError

from cwa_weather.exceptions import CityNotFoundError, UpstreamPayloadError
from cwa_weather.schemas.upstream import ForecastLocation, ForecastPayload, WeatherElement
from cwa_weather.schemas.weather import DetailedForecastEntry, ForecastEntry

EntryT = TypeVar("EntryT", bound=ForecastEntry)

# element name -> (entry field, value formatter)
ELEMENT_FIELDS: Dict[str, Tuple[str, Callable[[str], str]]] = {
    "Wx": ("weather", str),
    "PoP": ("rain", lambda value: f"{value}%"),
    "MinT": ("min_temp", lambda value: f"{value}°C"),
    "MaxT": ("max_temp", lambda value: f"{value}°C"),
    "CI": ("comfort", str),
}

WIND_SPEED_FIELD: Dict[str, Tuple[str, Callable[[str], str]]] = {
    "WS": ("wind_speed", str),
}


def build_forecasts(
    location: ForecastLocation, entry_model: Type[EntryT] = ForecastEntry
) -> List[EntryT]:
    """
    Build one forecast entry per time slot of a location.

    The slot count and start/end times come from the first weather element.
    For every slot each element is scanned and its value copied into the
    matching field. Only slots of mapped elements are validated; unknown
    element names are ignored and absent or unreadable values leave the
    field empty.

    Args:
        location: Upstream location record
        entry_model: ForecastEntry or DetailedForecastEntry (adds wind speed)

    Returns:
        Ordered list of forecast entries

    Raises:
        UpstreamPayloadError: a slot of the first element has no usable times
    """
    elements = location.weather_element
    if not elements:
        return []

    field_map = dict(ELEMENT_FIELDS)
    if issubclass(entry_model, DetailedForecastEntry):
        field_map.update(WIND_SPEED_FIELD)

    forecasts = []
    for index in range(len(elements[0].time)):
        try:
            times = elements[0].slot_times(index)
        except ValidationError as e:
            raise UpstreamPayloadError(
                f"Forecast time slot {index} has no usable start/end time"
            ) from e

        values = {"start_time": times.start_time, "end_time": times.end_time}
        for element in elements:
            mapping = field_map.get(element.element_name)
            if mapping is None:
                continue
            value = _parameter_name(element, index)
            if value is None:
                continue
            field, formatter = mapping
            values[field] = formatter(value)
        forecasts.append(entry_model(**values))

    return forecasts


def _parameter_name(element: WeatherElement, index: int) -> Optional[str]:
    try:
        slot = element.slot(index)
    except ValidationError:
        return None
    if slot is None or slot.parameter is None:
        return None
    return slot.parameter.parameter_name


def first_location(payload: ForecastPayload, city: str) -> ForecastLocation:
    """
    Return the first location record or raise CityNotFoundError naming the city.
    """
    if not payload.records.location:
        raise CityNotFoundError(city)
    return payload.records.location[0]
