"""Open Food Facts product API and facet knowledge panel clients."""

from explorer.clients.open_food_facts.facets import (
    FACETS_KP_HOST,
    get_facet,
    get_facet_knowledge_panels,
    get_facet_value,
)
from explorer.clients.open_food_facts.products import ProductsApi, create_products_api
from explorer.clients.open_food_facts.schemas import (
    FACETS_SORT_OPTIONS,
    FacetKnowledgePanelResponse,
    FacetQueryOptions,
    FacetSortOption,
    KnowledgePanel,
)


__all__ = [
    "FACETS_KP_HOST",
    "FACETS_SORT_OPTIONS",
    "FacetKnowledgePanelResponse",
    "FacetQueryOptions",
    "FacetSortOption",
    "KnowledgePanel",
    "ProductsApi",
    "create_products_api",
    "get_facet",
    "get_facet_knowledge_panels",
    "get_facet_value",
]
