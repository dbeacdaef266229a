"""Configuration module with YAML and environment variable support."""

from .settings import (
    PricesBackendConfig,
    Settings,
    get_settings,
    resolve_backend_url,
)


__all__ = [
    "PricesBackendConfig",
    "Settings",
    "get_settings",
    "resolve_backend_url",
]
