"""Shared product model."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from core.filters.base import ProductItem
from core.models.pagination import PageMetadata


class Product(BaseModel):
    """Catalog product record.

    Only the fields the listing filters read are declared. Every other
    attribute is kept as-is and returned to clients unchanged.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str | int = Field(..., description="Opaque product identifier")
    title: str = Field("", description="Display title, matched by text search")
    theme: str = Field("", description="Theme (halloween, light, dark, colorful)")
    tier: str = Field("", description="Tier (basic, premium, deluxe)")
    category: str = Field("", description="Free-form category label")
    price: Decimal | str | None = Field(None, description="Unit price")
    created_at: str | int | None = Field(
        None,
        alias="createdAt",
        description="Creation timestamp (ISO-8601 or epoch milliseconds)",
    )


class ListProductsResponse(BaseModel):
    """Paginated response for the product listing endpoint."""

    data: list[ProductItem] = Field(..., description="Products on the requested page")
    metadata: PageMetadata = Field(..., description="Page metadata")
