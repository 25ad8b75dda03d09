from typing import Optional

from cwa_weather.exceptions import MissingParameterError

SHARE_TEMPLATE = "目前在 {city} 的天氣是 {weather}，氣溫 {temperature}。快來看看吧！"


def build_share_content(
    city: Optional[str], weather: Optional[str], temperature: Optional[str]
) -> str:
    """
    Format the share sentence, raising MissingParameterError for empty inputs.
    """
    provided = {"city": city, "weather": weather, "temperature": temperature}
    missing = [name for name, value in provided.items() if not value]
    if missing:
        raise MissingParameterError(missing)

    return SHARE_TEMPLATE.format(**provided)
