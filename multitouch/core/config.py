# File: multitouch/core/config.py

import os
from functools import lru_cache
from typing import List

from pydantic import BaseModel, AnyHttpUrl, Field, field_validator


class Settings(BaseModel):
    # Basic app info
    PROJECT_NAME: str = "Multitouch Backend API"
    VERSION: str = "0.1.0"

    api_v1_prefix: str = "/api/v1"
    debug: bool = os.getenv("MULTITOUCH_DEBUG", "false").lower() in ("1", "true", "yes")

    # CORS
    backend_cors_origins: List[AnyHttpUrl] = Field(
        default_factory=lambda: os.getenv("MULTITOUCH_CORS_ORIGINS", ""),
        validate_default=True,
    )

    # Database
    database_url: str = os.getenv("MULTITOUCH_DATABASE_URL", "sqlite:///./multitouch.db")
    echo_sql: bool = os.getenv("MULTITOUCH_ECHO_SQL", "false").lower() in ("1", "true", "yes")

    # Logging
    log_level: str = os.getenv("MULTITOUCH_LOG_LEVEL", "INFO")

    @field_validator("backend_cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        if isinstance(v, list):
            return v
        return []

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
