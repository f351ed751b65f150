"""Global constants used throughout the application.

This module centralizes all magic numbers, string literals, and configuration
values that are used across multiple modules. Using constants prevents hardcoding
values and makes it easy to change them globally.
"""

from typing import Final

# ============================================================================
# Error Codes
# ============================================================================


# Validation Errors
ERROR_CODE_INVALID_FILTER = "INVALID_FILTER"

# Store Errors
ERROR_CODE_STORE_READ_FAILED = "STORE_READ_FAILED"


# ============================================================================
# Filter Vocabularies
# ============================================================================

FILTER_ALL: Final[str] = "all"

VALID_THEMES: Final[frozenset[str]] = frozenset(
    {"all", "halloween", "light", "dark", "colorful"}
)

VALID_TIERS: Final[frozenset[str]] = frozenset({"all", "basic", "premium", "deluxe"})

# Compared case-sensitively against canonical category keys
VALID_CATEGORIES: Final[tuple[str, ...]] = (
    "all",
    "upperBody",
    "lowerBody",
    "hat",
    "shoes",
    "accessory",
    "legendary",
    "mythic",
    "epic",
    "rare",
)

# ============================================================================
# Period Windows
# ============================================================================

PERIOD_WINDOW_DAYS: Final[dict[str, int]] = {
    "3d": 3,
    "7d": 7,
    "30d": 30,
}
DEFAULT_PERIOD_DAYS = 30

# ============================================================================
# Pagination Defaults
# ============================================================================

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

# ============================================================================
# Product Record Fields
# ============================================================================

FIELD_TITLE = "title"
FIELD_THEME = "theme"
FIELD_TIER = "tier"
FIELD_CATEGORY = "category"
FIELD_PRICE = "price"
FIELD_CREATED_AT = "createdAt"

PRODUCTS_COLLECTION = "products"

# ============================================================================
# API Gateway Configuration
# ============================================================================

CORS_ORIGIN = "*"
CORS_METHODS = "GET,OPTIONS"
CORS_HEADERS = "Content-Type,Authorization,X-Api-Key"
DEFAULT_CONTENT_TYPE = "application/json"

# ============================================================================
# Environment Variable Names
# ============================================================================

ENV_AWS_ENDPOINT_URL = "AWS_ENDPOINT_URL"
ENV_AWS_REGION = "AWS_REGION"
ENV_PRODUCTS_TABLE_NAME = "PRODUCTS_TABLE_NAME"

# Collection name -> environment variable holding its table name
COLLECTION_TABLE_ENV: Final[dict[str, str]] = {
    PRODUCTS_COLLECTION: ENV_PRODUCTS_TABLE_NAME,
}
