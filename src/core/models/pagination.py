"""Pagination model."""

from pydantic import BaseModel, ConfigDict, Field, StrictInt


class PageMetadata(BaseModel):
    """Page metadata for list responses."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    total: StrictInt = Field(..., description="Number of items matching the filters")
    page: StrictInt = Field(..., description="Requested page number")
    limit: StrictInt = Field(..., description="Requested page size")
    total_pages: StrictInt = Field(
        ...,
        alias="totalPages",
        description="Number of pages at this page size",
    )
