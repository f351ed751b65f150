"""Shared contracts for in-memory product filter stages."""

from datetime import datetime
from typing import Any, Protocol

ProductItem = dict[str, Any]


class ProductQuery(Protocol):
    """Filter options read by the pipeline.

    Every attribute holds the raw query value; ``None`` or ``""`` means the
    filter was not requested.
    """

    search: str | None
    theme: str | None
    tier: str | None
    category: str | None
    period: str | None
    min_price: str | None
    max_price: str | None


class FilterStage(Protocol):
    """A single narrowing step of the listing pipeline.

    Stages return a new list holding a subsequence of ``items`` in the same
    order, or raise ``InvalidFilterValueError`` when their query value is
    rejected. A stage whose parameter is absent returns ``items`` unchanged.
    """

    name: str

    def apply(
        self,
        items: list[ProductItem],
        query: ProductQuery,
        now: datetime,
    ) -> list[ProductItem]: ...


def field_text(item: ProductItem, field_name: str) -> str:
    """Read a record field as text, treating missing values as empty."""
    value = item.get(field_name)
    if value is None:
        return ""
    return str(value)
