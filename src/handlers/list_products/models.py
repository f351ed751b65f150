"""
Pydantic models for the list products request.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.utils.constants import DEFAULT_LIMIT, DEFAULT_PAGE
from core.utils.numbers import parse_int_prefix


class ListProductsRequest(BaseModel):
    """
    Parsed query parameters of the list products API.

    Filter values are kept as raw strings; each filter stage decides how to
    read and validate its own value. Pagination values are resolved here:
    anything absent, non-numeric or zero falls back to the default instead
    of failing the request.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    # Filters (in-memory)
    search: str | None = Field(None, description="Substring match on product title")
    theme: str | None = Field(None, description="Theme filter, 'all' disables it")
    tier: str | None = Field(None, description="Tier filter, 'all' disables it")
    category: str | None = Field(None, description="Canonical category key, 'all' disables it")
    period: str | None = Field(None, description="Creation window token (3d, 7d, 30d)")
    min_price: str | None = Field(None, alias="minPrice", description="Inclusive lower price bound")
    max_price: str | None = Field(None, alias="maxPrice", description="Inclusive upper price bound")

    # Pagination
    page: int = Field(default=DEFAULT_PAGE, description="1-based page number")
    limit: int = Field(default=DEFAULT_LIMIT, description="Results per page")

    @field_validator(
        "search",
        "theme",
        "tier",
        "category",
        "period",
        "min_price",
        "max_price",
        mode="before",
    )
    @classmethod
    def coerce_text(cls, value: Any) -> str | None:
        """Query values arrive as strings; anything else is stringified."""
        if value is None:
            return None
        return value if isinstance(value, str) else str(value)

    @field_validator("page", mode="before")
    @classmethod
    def resolve_page(cls, value: Any) -> int:
        """Read the leading integer of the page value, defaulting to 1."""
        return parse_int_prefix(value) or DEFAULT_PAGE

    @field_validator("limit", mode="before")
    @classmethod
    def resolve_limit(cls, value: Any) -> int:
        """Read the leading integer of the limit value, defaulting to 10."""
        return parse_int_prefix(value) or DEFAULT_LIMIT

    @classmethod
    def from_query_params(cls, params: dict[str, Any] | None) -> "ListProductsRequest":
        """Build a request from API Gateway ``queryStringParameters``."""
        return cls.model_validate(params or {})
