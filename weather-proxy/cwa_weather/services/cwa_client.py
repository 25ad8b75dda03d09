"""
This module provides the async client for the CWA open data REST API.
"""

from typing import Any, Dict, Optional

import httpx
from pydantic import BaseModel, ValidationError

from cwa_weather.config import Settings, get_settings
from cwa_weather.exceptions import (
    ConfigurationError,
    ExternalAPIException,
    UpstreamPayloadError,
)
from cwa_weather.schemas.upstream import ForecastPayload, SunPayload
from cwa_weather.utils.logger import setup_logger

logger = setup_logger(__name__)

DEFAULT_UPSTREAM_ERROR = "Unable to retrieve weather data"


class CWAClient:
    """
    Thin wrapper around httpx.AsyncClient for the two datasets the proxy reads.

    The API key is sent as the ``Authorization`` query parameter, as the
    CWA datastore expects.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.settings = settings or get_settings()
        self.client = client or httpx.AsyncClient(
            timeout=self.settings.cwa_api_timeout, follow_redirects=True
        )

    async def close(self):
        await self.client.aclose()

    def _dataset_url(self, dataset: str) -> str:
        base_url = self.settings.cwa_api_base_url.rstrip("/")
        return f"{base_url}/v1/rest/datastore/{dataset}"

    async def fetch_dataset(self, dataset: str, params: Dict[str, str]) -> Any:
        """
        Fetch one datastore dataset and return the decoded JSON body.

        Raises:
            ConfigurationError: CWA_API_KEY is not configured
            ExternalAPIException: upstream answered with an error status
            UpstreamPayloadError: upstream body is not JSON
            httpx.RequestError: transport failure
        """
        if not self.settings.cwa_api_key:
            raise ConfigurationError(
                "CWA_API_KEY is not configured. Set it in the environment or .env file"
            )

        try:
            response = await self.client.get(
                self._dataset_url(dataset),
                params={"Authorization": self.settings.cwa_api_key, **params},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            body = _decode_error_body(e.response)
            message = body.get("message") if isinstance(body, dict) else None
            logger.error(
                "CWA API returned an error status",
                extra={
                    "event": "upstream_error",
                    "dataset": dataset,
                    "status_code": e.response.status_code,
                    "error": str(e),
                },
            )
            raise ExternalAPIException(
                message or DEFAULT_UPSTREAM_ERROR,
                status_code=e.response.status_code,
                details=body,
            ) from e
        except httpx.RequestError as e:
            logger.error(
                "CWA API request failed",
                extra={
                    "event": "upstream_unreachable",
                    "dataset": dataset,
                    "error": str(e),
                    "error_type": type(e).__name__,
                },
            )
            raise

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamPayloadError(
                f"CWA dataset {dataset} returned a non-JSON body"
            ) from e

    async def fetch_forecast(self, location_name: str) -> ForecastPayload:
        """
        Fetch the 36-hour forecast for a location name.
        """
        data = await self.fetch_dataset(
            self.settings.forecast_dataset, {"locationName": location_name}
        )
        return _validate(ForecastPayload, data, self.settings.forecast_dataset)

    async def fetch_sun_times(self, county_name: str) -> SunPayload:
        """
        Fetch sunrise and sunset times for a county name.
        """
        data = await self.fetch_dataset(
            self.settings.sun_dataset, {"CountyName": county_name}
        )
        return _validate(SunPayload, data, self.settings.sun_dataset)


def _decode_error_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text or None


def _validate(model: type[BaseModel], data: Any, dataset: str):
    try:
        return model.model_validate(data)
    except ValidationError as e:
        logger.error(
            "Unexpected CWA payload shape",
            extra={
                "event": "upstream_payload_invalid",
                "dataset": dataset,
                "error": str(e),
            },
        )
        raise UpstreamPayloadError(
            f"CWA dataset {dataset} returned an unexpected payload"
        ) from e
