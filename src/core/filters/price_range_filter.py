"""Inclusive price range filtering."""

import math
from datetime import datetime

from core.filters.base import ProductItem, ProductQuery
from core.models.errors import InvalidFilterValueError
from core.utils.constants import FIELD_PRICE
from core.utils.numbers import parse_decimal_prefix


class PriceRangeFilter:
    """Keep products priced within ``[min_price, max_price]``.

    The filter runs when either bound is supplied. A missing, unreadable or
    zero lower bound becomes 0; a missing, unreadable or zero upper bound
    is unbounded. Products whose price cannot be read never match.
    """

    name = "price"

    @staticmethod
    def resolve_bounds(min_price: str | None, max_price: str | None) -> tuple[float, float]:
        """Apply the bound defaults.

        Raises:
            InvalidFilterValueError: If a bound is still not a number
        """
        lower = parse_decimal_prefix(min_price) or 0.0
        upper = parse_decimal_prefix(max_price) or math.inf

        if math.isnan(lower) or math.isnan(upper):
            raise InvalidFilterValueError(
                field="price",
                message="Invalid price format",
                details={"min_price": min_price, "max_price": max_price},
            )

        return lower, upper

    @classmethod
    def match(
        cls,
        items: list[ProductItem],
        min_price: str | None,
        max_price: str | None,
    ) -> list[ProductItem]:
        if not min_price and not max_price:
            return items

        lower, upper = cls.resolve_bounds(min_price, max_price)

        result: list[ProductItem] = []
        for item in items:
            price = parse_decimal_prefix(item.get(FIELD_PRICE))
            if price is not None and lower <= price <= upper:
                result.append(item)
        return result

    def apply(
        self,
        items: list[ProductItem],
        query: ProductQuery,
        now: datetime,
    ) -> list[ProductItem]:
        return self.match(items, query.min_price, query.max_price)
