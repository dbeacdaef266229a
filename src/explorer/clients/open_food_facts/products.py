"""Open Food Facts product API client.

Covers the read endpoints the explorer needs: facet listings, the products
behind a facet value, and single product lookup.
"""

from __future__ import annotations

from typing import Any, Final
from urllib.parse import quote

import httpx
import orjson

from explorer.clients.open_food_facts.schemas import (
    FacetQueryOptions,
    FacetSortOption,
)
from explorer.core.config import get_settings
from explorer.observability.logging import get_logger


logger = get_logger(__name__)


class ProductsApi:
    """Client for the Open Food Facts product API.

    The HTTP client is injected and never closed here; its owner decides the
    lifetime. Non-2xx responses raise `httpx.HTTPStatusError`.
    """

    DEFAULT_BASE_URL: Final[str] = "https://world.openfoodfacts.org"
    PRODUCT_ENDPOINT: Final[str] = "/api/v2/product/{barcode}.json"
    FACET_ENDPOINT: Final[str] = "/facets/{facet}.json"
    FACET_VALUE_ENDPOINT: Final[str] = "/facets/{facet}/{value}.json"

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        *,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            http_client: HTTP client used for every request.
            base_url: Product API host.
            user_agent: Sent as User-Agent, as the API asks of its clients.
        """
        self._http = http_client
        self._base_url = base_url.rstrip("/")
        self._headers = {"Accept": "application/json"}
        if user_agent:
            self._headers["User-Agent"] = user_agent

    @property
    def base_url(self) -> str:
        return self._base_url

    async def get_facet(
        self,
        facet: str,
        *,
        page: int | None = None,
        page_size: int | None = None,
        sort_by: FacetSortOption | None = None,
    ) -> dict[str, Any]:
        """List the values of a facet (e.g. every category).

        Args:
            facet: Facet name such as "categories" or "brands".
            page: 1-based page number.
            page_size: Values per page.
            sort_by: Sort key.

        Returns:
            Parsed JSON body.
        """
        path = self.FACET_ENDPOINT.format(facet=quote(facet, safe=""))
        options = FacetQueryOptions(page=page, page_size=page_size, sort_by=sort_by)
        return await self._get(path, options.to_params())

    async def get_facet_value(
        self,
        facet: str,
        value: str,
        *,
        page: int | None = None,
        page_size: int | None = None,
        sort_by: FacetSortOption | None = None,
    ) -> dict[str, Any]:
        """List the products tagged with one facet value.

        Args:
            facet: Facet name.
            value: Facet value tag, e.g. "en:sugars".
            page: 1-based page number.
            page_size: Products per page.
            sort_by: Sort key.

        Returns:
            Parsed JSON body.
        """
        path = self.FACET_VALUE_ENDPOINT.format(
            facet=quote(facet, safe=""),
            value=quote(value, safe=":"),
        )
        options = FacetQueryOptions(page=page, page_size=page_size, sort_by=sort_by)
        return await self._get(path, options.to_params())

    async def get_product(
        self,
        barcode: str,
        fields: list[str] | None = None,
    ) -> dict[str, Any]:
        """Fetch one product by barcode.

        Args:
            barcode: Product barcode.
            fields: Restrict the response to these product fields.

        Returns:
            Parsed JSON body.
        """
        path = self.PRODUCT_ENDPOINT.format(barcode=quote(barcode, safe=""))
        params = {"fields": ",".join(fields)} if fields else {}
        return await self._get(path, params)

    async def _get(self, path: str, params: dict[str, str]) -> dict[str, Any]:
        url = f"{self._base_url}{path}"
        logger.debug("Product API request", url=url, params=params)
        response = await self._http.get(url, params=params, headers=self._headers)
        response.raise_for_status()
        return orjson.loads(response.content)


def create_products_api(http_client: httpx.AsyncClient) -> ProductsApi:
    """Build a ProductsApi configured from the `open_food_facts` settings."""
    config = get_settings().open_food_facts
    return ProductsApi(
        http_client,
        base_url=config.url,
        user_agent=config.user_agent,
    )
