"""
Exception handlers rendering errors as ``{"error", "message", "details"}``.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from cwa_weather.exceptions import ExternalAPIException, WeatherServiceException
from cwa_weather.utils.logger import setup_logger

logger = setup_logger(__name__)


async def weather_service_exception_handler(
    request: Request, exc: WeatherServiceException
) -> JSONResponse:
    content = {"error": exc.error, "message": exc.message}
    if isinstance(exc, ExternalAPIException) and exc.details is not None:
        content["details"] = exc.details

    logger.warning(
        "Request failed with handled error",
        extra={
            "event": "api_error",
            "error": exc.error,
            "status_code": exc.status_code,
            "path": request.url.path,
            "request_id": getattr(request.state, "request_id", None),
        },
    )
    return JSONResponse(status_code=exc.status_code, content=content)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    if exc.status_code == 404:
        content = {"error": "not_found", "message": f"Path {request.url.path} not found"}
    else:
        content = {"error": "http_error", "message": str(exc.detail)}
    return JSONResponse(
        status_code=exc.status_code, content=content, headers=getattr(exc, "headers", None)
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(WeatherServiceException, weather_service_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
