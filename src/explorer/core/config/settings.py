"""Client configuration using Pydantic Settings with YAML support.

Configuration is layered from YAML files (base + per-environment), a `.env`
file and environment variables. The prices backend URL is kept in an explicit
two-field struct and resolved by a pure function so it can be tested without
touching the environment.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict

from .yaml_source import MultiYamlConfigSettingsSource


if TYPE_CHECKING:
    from pydantic_settings import PydanticBaseSettingsSource


# Environment variable names for the two prices backend settings
PRICES_API_URL_ENV = "PRICES_API__URL"
PRICES_API_LOCAL_URL_ENV = "PRICES_API__LOCAL_URL"


# =============================================================================
# Nested Configuration Models (from YAML)
# =============================================================================


class AppSettings(BaseModel):
    """Application identity settings."""

    name: str = "Open Food Facts Explorer"
    version: str = "0.1.0"


class LoggingSettings(BaseModel):
    """Logging configuration settings."""

    level: str = "INFO"
    format: str = "json"
    file: str | None = None


class PricesBackendConfig(BaseModel):
    """Prices API backend location.

    `local_url` points at a development backend and takes precedence over
    the remote `url` when set.
    """

    model_config = ConfigDict(frozen=True)

    url: str | None = None
    local_url: str | None = None


class PricesApiSettings(PricesBackendConfig):
    """Prices API client configuration."""

    timeout: float = 10.0


class OpenFoodFactsSettings(BaseModel):
    """Open Food Facts product API configuration."""

    url: str = "https://world.openfoodfacts.org"
    user_agent: str = "OpenFoodFactsExplorer/0.1.0"
    timeout: float = 10.0


def resolve_backend_url(config: PricesBackendConfig) -> str | None:
    """Pick the effective prices backend URL.

    Priority:
    1. Local backend URL (development)
    2. Remote backend URL (production default)

    Args:
        config: Backend configuration to resolve.

    Returns:
        The effective URL, or None when neither URL is set.
    """
    if config.local_url:
        return config.local_url
    return config.url or None


# =============================================================================
# Main Settings Class
# =============================================================================


class Settings(BaseSettings):
    """Client settings with YAML + environment variable support.

    Priority (highest to lowest):
    1. Values passed to Settings()
    2. Environment variables
    3. .env file
    4. Environment-specific YAML files (config/environments/{APP_ENV}/)
    5. Base YAML files (config/base/)
    6. Default values in code

    Nested values use the '__' delimiter, e.g. PRICES_API__LOCAL_URL.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        case_sensitive=False,
        env_nested_delimiter="__",
    )

    APP_ENV: str = "development"

    app: AppSettings = AppSettings()
    logging: LoggingSettings = LoggingSettings()
    prices_api: PricesApiSettings = PricesApiSettings()
    open_food_facts: OpenFoodFactsSettings = OpenFoodFactsSettings()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the YAML source below env and .env."""
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            MultiYamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    @property
    def prices_backend(self) -> PricesBackendConfig:
        """Backend URL pair for the prices API."""
        return PricesBackendConfig(
            url=self.prices_api.url,
            local_url=self.prices_api.local_url,
        )

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.APP_ENV == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.APP_ENV == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
