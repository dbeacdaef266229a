"""Prices API client exceptions.

Transport and HTTP errors are not wrapped: they surface as httpx raises
them. The only error owned by this package is the missing backend URL.
"""

from __future__ import annotations

from explorer.core.config.settings import PRICES_API_LOCAL_URL_ENV, PRICES_API_URL_ENV


class PricesApiError(Exception):
    """Base exception for prices API client errors."""


class PricesApiNotConfiguredError(PricesApiError, RuntimeError):
    """Raised at construction when no backend URL can be resolved.

    Not retryable: the caller has to set one of the two settings first.
    """

    def __init__(self, message: str | None = None) -> None:
        if message is None:
            message = (
                "Prices API URL is not configured. "
                f"Please set {PRICES_API_URL_ENV} or {PRICES_API_LOCAL_URL_ENV}"
            )
        super().__init__(message)
