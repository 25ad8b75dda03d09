"""
Common test fixtures and configuration.
"""

from typing import Callable, Dict, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from cwa_weather.config import Settings
from cwa_weather.main import app
from cwa_weather.services.cwa_client import CWAClient
from cwa_weather.utils.dependencies import get_cwa_client

FORECAST_PATH = "/api/v1/rest/datastore/F-C0032-001"
SUN_PATH = "/api/v1/rest/datastore/A-B0062-001"

TIME_SLOTS = [
    ("2024-11-20 18:00:00", "2024-11-21 06:00:00"),
    ("2024-11-21 06:00:00", "2024-11-21 18:00:00"),
    ("2024-11-21 18:00:00", "2024-11-22 06:00:00"),
]


def make_element(name: str, values: List[str]) -> dict:
    return {
        "elementName": name,
        "time": [
            {"startTime": start, "endTime": end, "parameter": {"parameterName": value}}
            for (start, end), value in zip(TIME_SLOTS, values)
        ],
    }


def make_forecast_payload(city: str, elements: Optional[List[dict]] = None) -> dict:
    if elements is None:
        elements = [
            make_element("Wx", ["多雲", "晴時多雲", "陰短暫雨"]),
            make_element("PoP", ["10", "20", "70"]),
            make_element("MinT", ["22", "23", "21"]),
            make_element("MaxT", ["27", "30", "25"]),
            make_element("CI", ["舒適", "舒適至悶熱", "舒適"]),
            make_element("WS", ["2", "3", "4"]),
        ]
    return {
        "success": "true",
        "records": {
            "datasetDescription": "三十六小時天氣預報",
            "location": [{"locationName": city, "weatherElement": elements}],
        },
    }


def make_sun_payload(city: str) -> dict:
    return {
        "success": "true",
        "records": {
            "locations": {
                "location": [
                    {
                        "CountyName": city,
                        "time": [
                            {"Date": "2024-11-21", "SunRiseTime": "06:12", "SunSetTime": "17:04"},
                            {"Date": "2024-11-22", "SunRiseTime": "06:13", "SunSetTime": "17:04"},
                        ],
                    }
                ]
            }
        },
    }


class FakeCWA:
    """
    Records upstream requests and answers them with canned responses.
    """

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.routes: Dict[str, Callable[[httpx.Request], httpx.Response]] = {
            FORECAST_PATH: lambda request: httpx.Response(
                200, json=make_forecast_payload(request.url.params["locationName"])
            ),
            SUN_PATH: lambda request: httpx.Response(
                200, json=make_sun_payload(request.url.params["CountyName"])
            ),
        }

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.routes[request.url.path](request)

    def requests_to(self, path: str) -> List[httpx.Request]:
        return [request for request in self.requests if request.url.path == path]


@pytest.fixture
def test_settings():
    """Settings with a dummy API key, independent of the environment."""
    return Settings(_env_file=None, cwa_api_key="test-key")


@pytest.fixture
def fake_cwa():
    return FakeCWA()


@pytest.fixture
def cwa_client(test_settings, fake_cwa):
    """CWAClient whose transport is served by FakeCWA."""
    return CWAClient(
        settings=test_settings,
        client=httpx.AsyncClient(transport=httpx.MockTransport(fake_cwa.handler)),
    )


@pytest.fixture
def client(cwa_client):
    """FastAPI test client wired to the fake upstream."""
    app.dependency_overrides[get_cwa_client] = lambda: cwa_client
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def forecast_payload():
    """Factory for forecast dataset payloads."""
    return make_forecast_payload


@pytest.fixture
def forecast_element():
    """Factory for a single weather element spanning the sample time slots."""
    return make_element


@pytest.fixture
def sun_payload():
    """Factory for sunrise/sunset dataset payloads."""
    return make_sun_payload
