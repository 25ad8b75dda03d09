"""
Tests for the sunrise/sunset enrichment module.
"""

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from cwa_weather.config import Settings
from cwa_weather.exceptions import ConfigurationError, ExternalAPIException
from cwa_weather.schemas.upstream import SunPayload
from cwa_weather.services.sun_service import SunriseSunsetService


@pytest.fixture
def mock_client():
    client = MagicMock()
    client.settings = Settings(_env_file=None, cwa_api_key="test-key")
    client.fetch_sun_times = AsyncMock()
    return client


class TestSunriseSunsetService:
    """Test cases for SunriseSunsetService."""

    async def test_returns_first_day(self, mock_client, sun_payload):
        """Test that only the first day's times are used."""
        mock_client.fetch_sun_times.return_value = SunPayload.model_validate(
            sun_payload("臺北市")
        )

        sun_times = await SunriseSunsetService(mock_client).get_sun_times("臺北市")

        assert sun_times.sunrise == "06:12"
        assert sun_times.sunset == "17:04"
        mock_client.fetch_sun_times.assert_called_once_with("臺北市")

    @pytest.mark.parametrize(
        "error",
        [
            ConfigurationError("CWA_API_KEY is not configured"),
            ExternalAPIException("Invalid Authorization", status_code=401),
            httpx.ConnectError("connection refused"),
        ],
    )
    async def test_failures_yield_fallback(self, mock_client, error):
        """Test that upstream failures are replaced by sentinel values."""
        mock_client.fetch_sun_times.side_effect = error

        sun_times = await SunriseSunsetService(mock_client).get_sun_times("臺北市")

        assert sun_times.sunrise == "未知"
        assert sun_times.sunset == "未知"

    async def test_empty_locations_yield_fallback(self, mock_client):
        mock_client.fetch_sun_times.return_value = SunPayload.model_validate(
            {"records": {"locations": {"location": []}}}
        )

        sun_times = await SunriseSunsetService(mock_client).get_sun_times("火星市")

        assert sun_times.sunrise == "未知"
        assert sun_times.sunset == "未知"

    async def test_empty_time_list_yields_fallback(self, mock_client):
        mock_client.fetch_sun_times.return_value = SunPayload.model_validate(
            {"records": {"locations": {"location": [{"CountyName": "臺北市", "time": []}]}}}
        )

        sun_times = await SunriseSunsetService(mock_client).get_sun_times("臺北市")

        assert sun_times.sunrise == "未知"

    async def test_later_days_are_not_validated(self, mock_client, sun_payload):
        """Test a malformed later day does not discard the first day's times."""
        raw = sun_payload("臺北市")
        days = raw["records"]["locations"]["location"][0]["time"]
        del days[1]["SunRiseTime"]
        days.append("not-a-day")
        mock_client.fetch_sun_times.return_value = SunPayload.model_validate(raw)

        sun_times = await SunriseSunsetService(mock_client).get_sun_times("臺北市")

        assert sun_times.sunrise == "06:12"
        assert sun_times.sunset == "17:04"
