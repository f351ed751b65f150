"""Case-insensitive equality filters over enumerated product fields."""

from collections.abc import Callable
from datetime import datetime

from aws_lambda_powertools import Logger

from core.filters.base import ProductItem, ProductQuery, field_text
from core.models.errors import InvalidFilterValueError
from core.utils.constants import FIELD_THEME, FIELD_TIER, FILTER_ALL
from core.utils.validators import validate_theme, validate_tier

logger = Logger(UTC=True)


class EnumMatchFilter:
    """Keep products whose field equals the query value, ignoring case.

    The query value is checked against the filter vocabulary first; an
    unknown value fails the whole request. The literal ``"all"`` disables
    the filter. Other casings of ``"all"`` pass validation and are then
    matched literally against the product field.
    """

    def __init__(
        self,
        *,
        name: str,
        field_name: str,
        validator: Callable[[str], bool],
    ) -> None:
        self.name = name
        self._field_name = field_name
        self._validator = validator

    def match(self, items: list[ProductItem], value: str | None) -> list[ProductItem]:
        """Validate ``value`` and keep the matching items."""
        if not value or value == FILTER_ALL:
            return items

        if not self._validator(value):
            logger.warning(
                "Rejected filter value",
                extra={"filter": self.name, "value": value},
            )
            raise InvalidFilterValueError(field=self.name, details={"value": value})

        expected = value.lower()
        return [
            item for item in items if field_text(item, self._field_name).lower() == expected
        ]

    def apply(
        self,
        items: list[ProductItem],
        query: ProductQuery,
        now: datetime,
    ) -> list[ProductItem]:
        return self.match(items, getattr(query, self.name))


def theme_filter() -> EnumMatchFilter:
    """Build the theme stage."""
    return EnumMatchFilter(name="theme", field_name=FIELD_THEME, validator=validate_theme)


def tier_filter() -> EnumMatchFilter:
    """Build the tier stage."""
    return EnumMatchFilter(name="tier", field_name=FIELD_TIER, validator=validate_tier)
