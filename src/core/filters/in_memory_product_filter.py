"""
Product filtering service for list operations.

Provides a coordination layer that applies filtering and pagination
strategies to in-memory product collections. This service does not perform
data access and is intended to operate on pre-fetched items.
"""

from collections.abc import Sequence
from datetime import datetime

from aws_lambda_powertools import Logger

from core.filters.base import FilterStage, ProductItem, ProductQuery
from core.filters.category_filter import CategoryFilter
from core.filters.enum_match_filter import theme_filter, tier_filter
from core.filters.page_pagination import PagePagination
from core.filters.period_filter import PeriodFilter
from core.filters.price_range_filter import PriceRangeFilter
from core.filters.title_contains_filter import TitleContainsFilter
from core.models.pagination import PageMetadata
from core.utils.time import utc_now

logger = Logger(UTC=True)


def default_stages() -> list[FilterStage]:
    """Listing stages in execution order."""
    return [
        TitleContainsFilter(),
        theme_filter(),
        tier_filter(),
        CategoryFilter(),
        PeriodFilter(),
        PriceRangeFilter(),
    ]


class InMemoryProductFilter:
    """
    Service responsible for filtering and paginating products.

    This class orchestrates in-memory refinement strategies, applied in a
    fixed order, each narrowing the output of the previous one:
    - Title search (case-insensitive substring matching)
    - Theme and tier (validated, case-insensitive equality)
    - Category (validated, canonical key equality)
    - Creation period (trailing window ending at request time)
    - Price range (inclusive bounds)
    - Page-number pagination

    IMPORTANT:
    - Source order is never changed; results are subsequences.
    - The first rejected filter value aborts the pipeline. Later stages
      are not applied.
    """

    def __init__(self, stages: Sequence[FilterStage] | None = None) -> None:
        """Initialize filter components used for orchestration."""
        self._stages: list[FilterStage] = list(stages) if stages is not None else default_stages()
        self._pagination: PagePagination = PagePagination()

    @property
    def stage_names(self) -> list[str]:
        return [stage.name for stage in self._stages]

    def apply_filters(
        self,
        items: list[ProductItem],
        query: ProductQuery,
        *,
        now: datetime | None = None,
    ) -> list[ProductItem]:
        """
        Run every filter stage over the products.

        Args:
            items: Products in source order
            query: Requested filter values
            now: Anchor for relative periods (defaults to the current UTC time)

        Returns:
            Products matching every requested filter, in source order

        Raises:
            InvalidFilterValueError: If a filter value is rejected
        """
        anchor = now or utc_now()
        result = items

        for stage in self._stages:
            before = len(result)
            result = stage.apply(result, query, anchor)
            logger.debug(
                "Filter stage applied",
                extra={"stage": stage.name, "before": before, "after": len(result)},
            )

        return result

    def paginate(
        self,
        items: list[ProductItem],
        *,
        page: int,
        limit: int,
    ) -> tuple[list[ProductItem], PageMetadata]:
        """
        Apply page-number pagination to a list of items.

        Args:
            items: List of filtered products
            page: 1-based page number
            limit: Page size

        Returns:
            A tuple of (page_items, metadata)
        """
        return self._pagination.paginate(items, page, limit)
