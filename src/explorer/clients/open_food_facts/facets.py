"""Facet listings and facet knowledge panels."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

import orjson

from explorer.clients.open_food_facts.products import create_products_api
from explorer.clients.open_food_facts.schemas import (
    FacetKnowledgePanelResponse,
    FacetQueryOptions,
)
from explorer.observability.logging import get_logger


if TYPE_CHECKING:
    import httpx


logger = get_logger(__name__)

FACETS_KP_HOST: Final[str] = "https://facets-kp.openfoodfacts.org"
FACETS_KP_ENDPOINT: Final[str] = "/knowledge_panel"


async def get_facet(
    http_client: httpx.AsyncClient,
    facet: str,
    opts: FacetQueryOptions | None = None,
) -> dict[str, Any]:
    """List a facet's values through the product API."""
    opts = opts or FacetQueryOptions()
    client = create_products_api(http_client)
    return await client.get_facet(
        facet,
        page=opts.page,
        page_size=opts.page_size,
        sort_by=opts.sort_by,
    )


async def get_facet_value(
    http_client: httpx.AsyncClient,
    facet: str,
    value: str,
    opts: FacetQueryOptions,
) -> dict[str, Any]:
    """List the products behind one facet value through the product API."""
    client = create_products_api(http_client)
    return await client.get_facet_value(
        facet,
        value,
        page=opts.page,
        page_size=opts.page_size,
        sort_by=opts.sort_by,
    )


async def get_facet_knowledge_panels(
    http_client: httpx.AsyncClient,
    facet: str,
    value: str | None = None,
) -> FacetKnowledgePanelResponse:
    """Fetch the knowledge panels describing a facet or a facet value.

    Args:
        http_client: HTTP client used for the request.
        facet: Facet tag, e.g. "categories".
        value: Optional value tag, e.g. "en:sugars". Empty strings are ignored.

    Returns:
        The panels keyed by panel id.

    Raises:
        httpx.HTTPStatusError: If the host answers with a non-2xx status.
    """
    params = {"facet_tag": facet}
    if value:
        params["value_tag"] = value

    url = f"{FACETS_KP_HOST}{FACETS_KP_ENDPOINT}"
    logger.debug("Fetching facet knowledge panels", facet=facet, value=value)

    response = await http_client.get(url, params=params)
    response.raise_for_status()
    return FacetKnowledgePanelResponse.model_validate(orjson.loads(response.content))
