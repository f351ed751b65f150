"""Title-based search for products."""

from datetime import datetime

from core.filters.base import ProductItem, ProductQuery, field_text
from core.utils.constants import FIELD_TITLE


class TitleContainsFilter:
    """Filter products by title using case-insensitive substring search.

    Any product whose title contains the search term, regardless of case,
    is kept. Whitespace in the term is significant: ``"blue hat"`` only
    matches titles containing that exact phrase.
    """

    name = "search"

    @staticmethod
    def match(
        items: list[ProductItem],
        search_term: str | None,
        field_name: str = FIELD_TITLE,
    ) -> list[ProductItem]:
        """Keep items whose field contains the search term."""
        if not search_term:
            return items

        search_lower = search_term.lower()
        return [
            item for item in items if search_lower in field_text(item, field_name).lower()
        ]

    def apply(
        self,
        items: list[ProductItem],
        query: ProductQuery,
        now: datetime,
    ) -> list[ProductItem]:
        return self.match(items, query.search)
