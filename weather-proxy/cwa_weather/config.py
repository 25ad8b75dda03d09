"""
This module contains configuration settings for the application.
"""

from functools import lru_cache
from typing import Optional, List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration using Pydantic BaseSettings.
    Automatically handles environment variable parsing and type conversion.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Application settings
    app_name: str = "CWA Weather Proxy"
    app_version: str = "1.0.0"
    environment: str = "development"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3000

    # CWA open data settings
    cwa_api_key: Optional[str] = None
    cwa_api_base_url: str = "https://opendata.cwa.gov.tw/api"
    cwa_api_timeout: Optional[float] = None
    forecast_dataset: str = "F-C0032-001"
    sun_dataset: str = "A-B0062-001"

    # Cities
    fixed_city: str = "高雄市"
    default_city: str = "臺北市"
    sun_fallback: str = "未知"

    # CORS settings
    cors_origins: List[str] = ["*"]
    cors_allow_credentials: bool = True
    cors_allow_methods: List[str] = ["*"]
    cors_allow_headers: List[str] = ["*"]


@lru_cache()
def get_settings() -> Settings:
    """
    Get the application settings.
    """
    return Settings()
