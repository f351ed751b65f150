"""Creation-date window filtering."""

from datetime import datetime

from core.filters.base import ProductItem, ProductQuery
from core.utils.constants import FIELD_CREATED_AT
from core.utils.time import parse_timestamp, resolve_window


class PeriodFilter:
    """Keep products created within a trailing window ending at ``now``.

    Unknown period tokens resolve to the 30-day window rather than failing.
    Products whose creation timestamp cannot be parsed never match.
    """

    name = "period"

    @staticmethod
    def match(
        items: list[ProductItem],
        period: str | None,
        now: datetime,
    ) -> list[ProductItem]:
        if not period:
            return items

        window = resolve_window(period, now)

        result: list[ProductItem] = []
        for item in items:
            created_at = parse_timestamp(item.get(FIELD_CREATED_AT))
            if created_at is not None and window.contains(created_at):
                result.append(item)
        return result

    def apply(
        self,
        items: list[ProductItem],
        query: ProductQuery,
        now: datetime,
    ) -> list[ProductItem]:
        return self.match(items, query.period, now)
