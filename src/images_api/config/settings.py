# src/images_api/config/settings.py
from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_IMAGEKIT_URL_ENDPOINT = "https://ik.imagekit.io/thegivingkind2021"
DEFAULT_MAX_BODY_BYTES = 1024 * 1024


class Settings(BaseSettings):
    """
    Settings for the Images API.

    Configuration precedence:
    1. Environment variables (highest priority)
    2. IMAGEKIT_KEYS.env, then .env (if they exist)
    3. Default values in this class (lowest priority)

    Instances are frozen: build one at startup and hand it to `create_app`.

    Usage:
        from images_api.config.settings import get_settings
        settings = get_settings()
        endpoint = settings.imagekit_url_endpoint
    """

    # ImageKit credentials
    imagekit_public_key: str = Field(
        alias="IMAGEKIT_PUBLIC_KEY",
        description="ImageKit public API key"
    )

    imagekit_private_key: str = Field(
        alias="IMAGEKIT_PRIVATE_KEY",
        description="ImageKit private API key, used for signing and deletion"
    )

    imagekit_url_endpoint: str = Field(
        default=DEFAULT_IMAGEKIT_URL_ENDPOINT,
        alias="IMAGEKIT_URL_ENDPOINT",
        description="Base URL of the ImageKit media library"
    )

    # Server
    host: str = Field(
        default="0.0.0.0",
        alias="HOST"
    )

    port: int = Field(
        default=3000,
        alias="PORT"
    )

    max_body_bytes: int = Field(
        default=DEFAULT_MAX_BODY_BYTES,
        alias="MAX_BODY_BYTES",
        description="Largest accepted request body, in bytes"
    )

    # CORS
    cors_allow_origins: List[str] = Field(
        default=["*"],
        alias="CORS_ALLOW_ORIGINS",
        description="Origins allowed by the app-wide CORS middleware"
    )

    route_allowed_origin: str = Field(
        default="http://localhost:3000",
        alias="ROUTE_ALLOWED_ORIGIN",
        description="Access-Control-Allow-Origin sent by the image routes"
    )

    # Deletion
    delete_failure_status_code: int = Field(
        default=200,
        alias="DELETE_FAILURE_STATUS_CODE",
        description="HTTP status used when ImageKit rejects a deletion"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        alias="LOG_LEVEL",
        description="Logging level"
    )

    @field_validator("delete_failure_status_code")
    @classmethod
    def validate_status_code(cls, v: int) -> int:
        if not 200 <= v <= 599:
            raise ValueError(f"Invalid delete_failure_status_code: {v}. Must be between 200 and 599")
        return v

    @field_validator("max_body_bytes")
    @classmethod
    def validate_max_body_bytes(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("max_body_bytes must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        valid_levels = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]
        level = v.upper()
        if level not in valid_levels:
            raise ValueError(f"Invalid log_level: {v}. Must be one of {valid_levels}")
        return level

    @property
    def masked_private_key(self) -> str:
        """Private key with everything but the last four characters hidden."""
        key = self.imagekit_private_key
        if len(key) <= 4:
            return "*" * len(key)
        return "*" * (len(key) - 4) + key[-4:]

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=("IMAGEKIT_KEYS.env", ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
        frozen=True,
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    This ensures we only read the environment once per process.
    """
    return Settings()
