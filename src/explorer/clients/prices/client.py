"""Open Prices REST API client.

Each method issues exactly one request and returns an `ApiResult`. Non-2xx
responses are returned, not raised; transport errors propagate from httpx
unchanged.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Final

import httpx
import orjson

from explorer.clients.prices.exceptions import PricesApiNotConfiguredError
from explorer.clients.prices.schemas import ApiResult
from explorer.core.config import (
    PricesBackendConfig,
    get_settings,
    resolve_backend_url,
)
from explorer.observability.logging import get_logger


if TYPE_CHECKING:
    from types import TracebackType

    from explorer.clients.prices.schemas import (
        LoginCredentials,
        PriceCreate,
        PricesQuery,
        PriceStatsQuery,
        PriceUpdate,
        ProofUpload,
    )


logger = get_logger(__name__)


def is_configured(config: PricesBackendConfig | None = None) -> bool:
    """Check whether a prices backend URL can be resolved.

    Args:
        config: Backend configuration. Defaults to the `prices_api` settings.
    """
    if config is None:
        config = get_settings().prices_backend
    return resolve_backend_url(config) is not None


class PricesApi:
    """Client for the Open Prices API.

    The backend URL is resolved once at construction (local URL first, then
    remote). Login stores the session cookie in the HTTP client's cookie jar,
    so later calls on the same client are authenticated.

    Example:
        ```python
        async with PricesApi() as api:
            await api.login({"username": "user", "password": "secret"})
            result = await api.get_prices({"product_code": "3017620422003"})
            prices = result.data
        ```
    """

    API_PREFIX: Final[str] = "/api/v1"

    def __init__(
        self,
        http_client: httpx.AsyncClient | None = None,
        *,
        config: PricesBackendConfig | None = None,
        timeout: float | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            http_client: HTTP client to send requests with. When omitted the
                instance creates one and closes it in `aclose()`.
            config: Backend configuration. Defaults to the `prices_api` settings.
            timeout: Timeout for a client created here, in seconds. Configure
                an injected client's timeout on that client instead.

        Raises:
            PricesApiNotConfiguredError: If no backend URL is set.
            TypeError: If both `http_client` and `timeout` are given.
        """
        if http_client is not None and timeout is not None:
            msg = "timeout cannot be combined with an injected http_client"
            raise TypeError(msg)

        if config is None:
            config = get_settings().prices_backend
        self._config = config

        backend_url = resolve_backend_url(config)
        if not backend_url:
            raise PricesApiNotConfiguredError

        self._base_url = f"{backend_url.rstrip('/')}{self.API_PREFIX}"
        self._owns_http_client = http_client is None
        if http_client is None:
            if timeout is None:
                timeout = get_settings().prices_api.timeout
            http_client = httpx.AsyncClient(
                timeout=httpx.Timeout(timeout),
                headers={"Accept": "application/json"},
            )
        self._http = http_client

        logger.info("PricesApi initialized", backend_url=backend_url)

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_http_client:
            await self._http.aclose()
        logger.debug("PricesApi closed")

    async def __aenter__(self) -> PricesApi:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    # -------------------------------------------------------------------------
    # Prices
    # -------------------------------------------------------------------------

    async def get_prices(self, query: PricesQuery | None = None) -> ApiResult[Any]:
        return await self._request("GET", "/prices", params=query)

    async def create_price(self, body: PriceCreate) -> ApiResult[Any]:
        return await self._request("POST", "/prices", json=body)

    async def get_price_by_id(self, price_id: int) -> ApiResult[Any]:
        return await self._request("GET", f"/prices/{price_id}")

    async def update_price(self, price_id: int, body: PriceUpdate) -> ApiResult[Any]:
        """Send a partial update; only the fields in `body` are changed."""
        return await self._request("PATCH", f"/prices/{price_id}", json=body)

    async def delete_price(self, price_id: int) -> ApiResult[Any]:
        return await self._request("DELETE", f"/prices/{price_id}")

    async def get_price_stats(
        self, query: PriceStatsQuery | None = None
    ) -> ApiResult[Any]:
        return await self._request("GET", "/prices/stats", params=query)

    # -------------------------------------------------------------------------
    # Auth & proofs
    # -------------------------------------------------------------------------

    async def login(self, body: LoginCredentials) -> ApiResult[Any]:
        """Log in with form-encoded credentials and ask for a session cookie."""
        return await self._request(
            "POST",
            "/auth",
            params={"set_cookie": True},
            data=dict(body),
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )

    async def upload_proof(self, body: ProofUpload) -> ApiResult[Any]:
        """Upload a proof file as multipart form data.

        Fields other than `file` are sent as form fields alongside it.
        """
        fields = {
            key: _form_value(value)
            for key, value in body.items()
            if key != "file" and value is not None
        }
        return await self._request(
            "POST",
            "/proofs/upload",
            data=fields,
            files={"file": body["file"]},
        )

    async def get_proofs(self) -> ApiResult[Any]:
        return await self._request("GET", "/proofs")

    async def is_authenticated(self) -> bool:
        """Return whether the session check succeeds. The body is discarded."""
        result = await self._request("GET", "/session")
        return result.response.is_success

    async def get_status(self) -> Any:
        """Return the parsed body of GET /status."""
        result = await self._request("GET", "/status")
        return result.data

    def get_backend_url(self) -> str | None:
        """Return the backend URL resolved from the current configuration."""
        return resolve_backend_url(self._config)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Mapping[str, Any] | None = None,
        data: Mapping[str, Any] | None = None,
        files: Mapping[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> ApiResult[Any]:
        url = f"{self._base_url}{path}"
        content = None
        if json is not None:
            content = orjson.dumps(dict(json))
            headers = {"Content-Type": "application/json", **(headers or {})}

        logger.debug("Prices API request", method=method, url=url)

        response = await self._http.request(
            method,
            url,
            params=_query_params(params),
            content=content,
            data=data,
            files=files,
            headers=headers,
        )

        logger.debug(
            "Prices API response",
            method=method,
            url=url,
            status_code=response.status_code,
        )
        return ApiResult.from_response(response)


def _query_params(params: Mapping[str, Any] | None) -> dict[str, Any] | None:
    # Unset filters are omitted rather than sent empty
    if not params:
        return None
    return {key: value for key, value in params.items() if value is not None}


def _form_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
