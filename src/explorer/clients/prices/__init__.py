"""Open Prices API client package."""

from explorer.clients.prices.client import PricesApi, is_configured
from explorer.clients.prices.exceptions import (
    PricesApiError,
    PricesApiNotConfiguredError,
)
from explorer.clients.prices.schemas import (
    ApiResult,
    LoginCredentials,
    PriceCreate,
    PricesQuery,
    PriceStatsQuery,
    PriceUpdate,
    ProofUpload,
)


__all__ = [
    "ApiResult",
    "LoginCredentials",
    "PriceCreate",
    "PriceStatsQuery",
    "PriceUpdate",
    "PricesApi",
    "PricesApiError",
    "PricesApiNotConfiguredError",
    "PricesQuery",
    "ProofUpload",
    "is_configured",
]
