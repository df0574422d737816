"""
Service configuration, read from CATALOG_* environment variables or .env
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Settings for the catalog API server."""

    # Server
    api_host: str = "0.0.0.0"
    api_port: int = Field(default=4000, ge=1, le=65535)
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]
    graphiql: bool = True

    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = True
    log_level: str = "INFO"

    # Catalog behaviour
    seed_on_startup: bool = True
    default_page_size: int = Field(default=10, ge=0)
    default_sort_field: str = "title"
    subscriber_queue_size: int = Field(default=100, ge=1)

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level {value!r}")
        return level

    class Config:
        env_file = ".env"
        env_prefix = "CATALOG_"
        case_sensitive = False
        extra = "ignore"


settings = Settings()

if settings.debug:
    from .logging import get_logger

    get_logger(__name__).debug(
        "Settings loaded",
        environment=settings.environment,
        port=settings.api_port,
        seed_on_startup=settings.seed_on_startup,
    )
