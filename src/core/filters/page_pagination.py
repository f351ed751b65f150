"""
Page-number pagination utilities.
"""

import math
from typing import Any

from core.models.pagination import PageMetadata
from core.utils.constants import DEFAULT_LIMIT, DEFAULT_PAGE


class PagePagination:
    """
    Page-number pagination helper.

    Slices an already-filtered list of items into the requested page and
    describes the result with page metadata.

    Page and limit are used exactly as given. There is no upper bound on
    the limit, and negative values are not rejected: they produce whatever
    slice ``items[(page - 1) * limit : page * limit]`` yields.
    """

    @staticmethod
    def paginate(
        items: list[dict[str, Any]],
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_LIMIT,
    ) -> tuple[list[dict[str, Any]], PageMetadata]:
        """
        Paginate a list of items using a 1-based page number and page size.

        Args:
            items: Full list of filtered items
            page: 1-based page number
            limit: Maximum number of items on a page

        Returns:
            A tuple containing:
            - page_items: Items on the requested page
            - metadata: Total count, page, limit and total page count

        Example:
            items = [1, 2, 3, 4, 5]
            page = 2
            limit = 2

            → ([3, 4], PageMetadata(total=5, page=2, limit=2, total_pages=3))
        """
        start_index = (page - 1) * limit
        end_index = page * limit
        page_items = items[start_index:end_index]

        metadata = PageMetadata(
            total=len(items),
            page=page,
            limit=limit,
            total_pages=PagePagination.total_pages(len(items), limit),
        )
        return page_items, metadata

    @staticmethod
    def total_pages(total_count: int, limit: int) -> int:
        """Number of pages needed for ``total_count`` items, rounded up."""
        if limit == 0:
            return 0
        return math.ceil(total_count / limit)
