from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from cwa_weather.api import routes
from cwa_weather.api.errors import register_exception_handlers
from cwa_weather.config import get_settings
from cwa_weather.middleware.request_tracker import RequestTrackerMiddleware
from cwa_weather.utils.dependencies import close_cwa_client
from cwa_weather.utils.logger import setup_logger

logger = setup_logger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "Starting CWA Weather Proxy...",
        extra={"environment": settings.environment, "port": settings.port},
    )
    if not settings.cwa_api_key:
        logger.warning("CWA_API_KEY is not set; weather endpoints will answer 500")

    yield

    logger.info("Shutting down CWA Weather Proxy...")
    await close_cwa_client()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

app.add_middleware(RequestTrackerMiddleware)

# Wraps the tracker so its 500 fallback also carries CORS headers
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

register_exception_handlers(app)

Instrumentator().instrument(app).expose(app, endpoint="/prometheus-metrics")

app.include_router(routes.router)


def run():
    uvicorn.run(
        "cwa_weather.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.environment == "development",
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    run()
