"""Filter value validation utilities.

Each validator answers whether a query value belongs to the fixed vocabulary
of its filter. Validators never raise; callers decide how to report failures.
"""

from typing import Any

from core.utils.constants import VALID_CATEGORIES, VALID_THEMES, VALID_TIERS


def validate_theme(value: Any) -> bool:
    """Check a theme value, ignoring case."""
    if not isinstance(value, str):
        return False
    return value.lower() in VALID_THEMES


def validate_tier(value: Any) -> bool:
    """Check a tier value, ignoring case."""
    if not isinstance(value, str):
        return False
    return value.lower() in VALID_TIERS


def validate_category(value: Any) -> bool:
    """Check a canonical category key.

    Unlike themes and tiers, categories are compared case-sensitively:
    ``"upperBody"`` is valid, ``"upperbody"`` is not.
    """
    if not isinstance(value, str):
        return False
    return value in VALID_CATEGORIES
