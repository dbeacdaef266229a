"""Unit tests for ProductsApi."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import httpx
import pytest
import respx

from explorer.clients.open_food_facts.products import ProductsApi, create_products_api
from explorer.clients.open_food_facts.schemas import FacetSortOption


pytestmark = pytest.mark.unit

BASE_URL = "https://world.openfoodfacts.org"


@pytest.fixture
def api(http_client: httpx.AsyncClient) -> ProductsApi:
    """ProductsApi bound to the default host."""
    return ProductsApi(http_client, base_url=BASE_URL, user_agent="ExplorerTests/1.0")


class TestProductsApiFacets:
    """Tests for facet endpoints."""

    @respx.mock
    async def test_get_facet_forwards_options(self, api: ProductsApi) -> None:
        """Should send page, page_size and sort_by as query parameters."""
        route = respx.get(f"{BASE_URL}/facets/categories.json").mock(
            return_value=httpx.Response(200, json={"count": 1, "tags": []})
        )

        result = await api.get_facet(
            "categories",
            page=3,
            page_size=20,
            sort_by=FacetSortOption.POPULARITY,
        )

        assert result == {"count": 1, "tags": []}
        request = route.calls.last.request
        assert dict(request.url.params) == {
            "page": "3",
            "page_size": "20",
            "sort_by": "popularity",
        }
        assert request.headers["user-agent"] == "ExplorerTests/1.0"

    @respx.mock
    async def test_get_facet_without_options(self, api: ProductsApi) -> None:
        """Should send no query parameters when no option is set."""
        route = respx.get(f"{BASE_URL}/facets/brands.json").mock(
            return_value=httpx.Response(200, json={"tags": []})
        )

        await api.get_facet("brands")

        assert route.calls.last.request.url.query == b""

    @respx.mock
    async def test_get_facet_value(self, api: ProductsApi) -> None:
        """Should request the facet/value path."""
        route = respx.get(f"{BASE_URL}/facets/categories/en:sugars.json").mock(
            return_value=httpx.Response(200, json={"products": [], "count": 0})
        )

        result = await api.get_facet_value(
            "categories",
            "en:sugars",
            sort_by=FacetSortOption.NUTRISCORE_SCORE,
        )

        assert result["count"] == 0
        assert route.calls.last.request.url.params["sort_by"] == "nutriscore_score"

    @respx.mock
    async def test_http_error_is_raised(self, api: ProductsApi) -> None:
        """Should raise HTTPStatusError on non-2xx responses."""
        respx.get(f"{BASE_URL}/facets/nope.json").mock(
            return_value=httpx.Response(404, json={"status": "not found"})
        )

        with pytest.raises(httpx.HTTPStatusError):
            await api.get_facet("nope")


class TestProductsApiProduct:
    """Tests for product lookup."""

    @respx.mock
    async def test_get_product_with_fields(self, api: ProductsApi) -> None:
        """Should join requested fields with commas."""
        route = respx.get(f"{BASE_URL}/api/v2/product/3017620422003.json").mock(
            return_value=httpx.Response(
                200, json={"code": "3017620422003", "status": 1}
            )
        )

        result = await api.get_product(
            "3017620422003", fields=["product_name", "brands"]
        )

        assert result["status"] == 1
        assert route.calls.last.request.url.params["fields"] == "product_name,brands"


class TestCreateProductsApi:
    """Tests for the settings-driven factory."""

    def test_uses_settings(self, http_client: httpx.AsyncClient) -> None:
        """Should take host and user agent from settings."""
        settings = MagicMock()
        settings.open_food_facts.url = "https://world.openfoodfacts.net/"
        settings.open_food_facts.user_agent = "Explorer/2.0"

        with patch(
            "explorer.clients.open_food_facts.products.get_settings",
            return_value=settings,
        ):
            api = create_products_api(http_client)

        assert api.base_url == "https://world.openfoodfacts.net"
