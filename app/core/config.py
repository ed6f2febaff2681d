"""Stores API configuration settings."""

from pathlib import Path
from typing import Any, Optional
import json
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import structlog

logger = structlog.stdlib.get_logger().bind(component="config")

APP_ROOT = Path(__file__).resolve().parents[1]


class StoresSettings(BaseSettings):
    """Stores API configuration settings.

    Locale files live under ``LOCALES_PATH/<locale>/<file>``. The catalog of
    products, stores and channels is read from the YAML file at
    ``CATALOG_PATH``.

    API versions:
        API_SUPPORTED_VERSIONS: ordered list, oldest first. The first entry is
            the version assumed for legacy calls without a version segment.
        API_CURRENT_VERSION: the version advertised to clients.
    """

    LOCALES_PATH: str = Field(
        default=str(APP_ROOT / "locales"), alias="STORES_LOCALES_PATH"
    )
    CATALOG_PATH: str = Field(
        default=str(APP_ROOT / "catalog" / "catalog.yml"),
        alias="STORES_CATALOG_PATH",
    )
    REFERENCE_LOCALE: str = Field(default="en-US", alias="STORES_REFERENCE_LOCALE")
    API_SUPPORTED_VERSIONS: list[str] = Field(
        default=["v1"], alias="API_SUPPORTED_VERSIONS"
    )
    API_CURRENT_VERSION: str = Field(default="v1", alias="API_CURRENT_VERSION")

    @field_validator("API_SUPPORTED_VERSIONS", mode="before")
    @classmethod
    def _parse_supported_versions(cls, v: Optional[Any]) -> Any:
        """Accept a JSON list, a comma separated string or a native list."""
        if v is None:
            return ["v1"]

        if isinstance(v, (list, tuple)):
            return list(v)

        if isinstance(v, str):
            s = v.strip()
            if s.startswith("["):
                try:
                    return json.loads(s)
                except (json.JSONDecodeError, ValueError) as e:
                    raise ValueError(
                        f"Invalid API_SUPPORTED_VERSIONS JSON: {e} (value: {s[:80]}...)"
                    ) from e
            return [item.strip() for item in s.split(",") if item.strip()]

        raise ValueError("API_SUPPORTED_VERSIONS must be a list or a string")

    @model_validator(mode="after")
    def _check_current_version(self) -> "StoresSettings":
        if not self.API_SUPPORTED_VERSIONS:
            raise ValueError("API_SUPPORTED_VERSIONS cannot be empty")
        if self.API_CURRENT_VERSION not in self.API_SUPPORTED_VERSIONS:
            logger.warning(
                "current_api_version_not_supported",
                current=self.API_CURRENT_VERSION,
                supported=self.API_SUPPORTED_VERSIONS,
            )
        return self

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )


class ServerSettings(BaseSettings):
    """Server configuration settings."""

    BACKEND_URL: str = Field(default="http://127.0.0.1:8000", alias="BACKEND_URL")
    CORS_ALLOWED_ORIGINS: list[str] = Field(
        default=["http://localhost:8000", "http://127.0.0.1:8000"],
        alias="CORS_ALLOWED_ORIGINS",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


class Settings(BaseSettings):
    """Stores API configuration settings."""

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    # Server settings
    server: ServerSettings

    # Functionality settings
    stores: StoresSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production."""
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        settings_map = {
            "server": ServerSettings,
            "stores": StoresSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the settings instance
settings = Settings()
