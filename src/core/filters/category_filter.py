"""Category filtering by canonical category key."""

from datetime import datetime

from aws_lambda_powertools import Logger

from core.filters.base import ProductItem, ProductQuery
from core.models.errors import InvalidFilterValueError
from core.utils.constants import FIELD_CATEGORY, FILTER_ALL
from core.utils.text import canonicalize
from core.utils.validators import validate_category

logger = Logger(UTC=True)


class CategoryFilter:
    """Filter products by category.

    Product categories are free-form labels ("Upper Body", "Hat"). The query
    value must already be a canonical key ("upperBody", "hat") and is
    compared case-sensitively with each product's canonicalized label.
    """

    name = "category"

    @staticmethod
    def match(items: list[ProductItem], category: str | None) -> list[ProductItem]:
        if not category or category == FILTER_ALL:
            return items

        if not validate_category(category):
            logger.warning(
                "Rejected filter value",
                extra={"filter": "category", "value": category},
            )
            raise InvalidFilterValueError(field="category", details={"value": category})

        return [
            item for item in items if canonicalize(item.get(FIELD_CATEGORY)) == category
        ]

    def apply(
        self,
        items: list[ProductItem],
        query: ProductQuery,
        now: datetime,
    ) -> list[ProductItem]:
        return self.match(items, query.category)
