"""Request shapes and the response wrapper for the prices API.

Payloads are forwarded to the server as given. The TypedDicts document the
fields the server knows about; the server remains the source of truth.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, Literal, TypedDict, TypeVar

import orjson


if TYPE_CHECKING:
    import httpx


T = TypeVar("T")

LocationOsmType = Literal["NODE", "WAY", "RELATION"]
PricePer = Literal["UNIT", "KILOGRAM"]


class PriceCreate(TypedDict, total=False):
    """Body of POST /prices."""

    type: Literal["PRODUCT", "CATEGORY"]
    product_code: str
    product_name: str
    category_tag: str
    labels_tags: list[str]
    origins_tags: list[str]
    price: float
    price_is_discounted: bool
    price_without_discount: float
    discount_type: str
    price_per: PricePer
    currency: str
    location_osm_id: int
    location_osm_type: LocationOsmType
    location_id: int
    date: str
    proof_id: int
    receipt_quantity: int
    owner_comment: str


# PATCH accepts any subset of the create fields
PriceUpdate = PriceCreate


class PricesQuery(TypedDict, total=False):
    """Filters for GET /prices."""

    product_code: str
    product_id: int
    category_tag: str
    location_osm_id: int
    location_osm_type: LocationOsmType
    location_id: int
    proof_id: int
    currency: str
    date: str
    date__gte: str
    date__lte: str
    owner: str
    order_by: str
    page: int
    size: int


class PriceStatsQuery(TypedDict, total=False):
    """Filters for GET /prices/stats."""

    product_code: str
    category_tag: str
    location_id: int
    currency: str
    date__gte: str
    date__lte: str


class LoginCredentials(TypedDict):
    """Body of POST /auth, sent form-encoded."""

    username: str
    password: str


class _ProofUploadRequired(TypedDict):
    file: Any


class ProofUpload(_ProofUploadRequired, total=False):
    """Body of POST /proofs/upload, sent as multipart form data.

    `file` takes anything httpx accepts as a file part: bytes, a binary file
    object, or a (filename, content, content_type) tuple.
    """

    type: Literal["PRICE_TAG", "RECEIPT", "GDPR_REQUEST", "SHOP_IMPORT"]
    location_osm_id: int
    location_osm_type: LocationOsmType
    date: str
    currency: str


@dataclass(frozen=True, slots=True)
class ApiResult(Generic[T]):
    """Outcome of one prices API call.

    Exactly one of `data` (2xx) and `error` (non-2xx) carries the parsed
    body; `response` is always the raw response.
    """

    data: T | None
    error: Any | None
    response: httpx.Response

    @property
    def ok(self) -> bool:
        return self.response.is_success

    @classmethod
    def from_response(cls, response: httpx.Response) -> ApiResult[Any]:
        """Parse a response body into data or error.

        JSON bodies are decoded with orjson. On 2xx a decode error
        propagates; on error statuses an undecodable body is kept as text.
        Empty bodies parse to None, other bodies to text.
        """
        if response.is_success:
            return cls(data=_parse_body(response), error=None, response=response)
        try:
            body = _parse_body(response)
        except orjson.JSONDecodeError:
            body = response.text
        return cls(data=None, error=body, response=response)


def _parse_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    content_type = response.headers.get("content-type", "")
    if "json" in content_type:
        return orjson.loads(response.content)
    return response.text
