"""Types shared by the product API and facet clients."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Final

from pydantic import BaseModel, ConfigDict


class FacetSortOption(StrEnum):
    """Sort keys accepted for facet listings.

    NUTRISCORE_SCORE is honoured by the server but is missing from the
    product API's published schema. Keep it here until the schema lists it.
    """

    LAST_MODIFIED = "last_modified_t"
    POPULARITY = "popularity"
    ENVIRONMENTAL_SCORE = "environmental_score_score"
    CREATED = "created_t"
    # Not an upstream facet key; fills out the six accepted sort options
    PRODUCT_NAME = "product_name"
    NUTRISCORE_SCORE = "nutriscore_score"


FACETS_SORT_OPTIONS: Final[tuple[FacetSortOption, ...]] = tuple(FacetSortOption)


@dataclass(frozen=True, slots=True)
class FacetQueryOptions:
    """Paging and sorting for facet queries. Unset fields are not sent."""

    page: int | None = None
    page_size: int | None = None
    sort_by: FacetSortOption | None = None

    def to_params(self) -> dict[str, str]:
        """Query parameters for the product API."""
        params: dict[str, str] = {}
        if self.page is not None:
            params["page"] = str(self.page)
        if self.page_size is not None:
            params["page_size"] = str(self.page_size)
        if self.sort_by is not None:
            params["sort_by"] = FacetSortOption(self.sort_by).value
        return params


class KnowledgePanel(BaseModel):
    """A renderable information block. Unknown fields are preserved."""

    model_config = ConfigDict(extra="allow")

    type: str | None = None
    level: str | None = None
    topics: list[str] | None = None
    size: str | None = None
    expanded: bool | None = None
    evaluation: str | None = None
    title_element: dict[str, Any] | None = None
    elements: list[dict[str, Any]] | None = None


class FacetKnowledgePanelResponse(BaseModel):
    """Knowledge panels for a facet (or facet value), keyed by panel id."""

    model_config = ConfigDict(extra="allow")

    knowledge_panels: dict[str, KnowledgePanel] = {}
