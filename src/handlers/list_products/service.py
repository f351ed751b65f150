"""
Business logic for product listing and filtering.
"""

from datetime import datetime

from aws_lambda_powertools import Logger

from core.filters.base import ProductItem
from core.filters.in_memory_product_filter import InMemoryProductFilter
from core.infrastructure.aws.dynamodb_catalog import DynamoDBCatalog
from core.models.pagination import PageMetadata
from core.repositories.catalog_repository import CatalogRepository
from core.utils.constants import PRODUCTS_COLLECTION

from .models import ListProductsRequest

logger = Logger(UTC=True)


class ListService:
    """Application service responsible for listing catalog products.

    This service coordinates:
    - Reading the full products collection from the catalog store
    - Applying in-memory filters in their fixed order
    - Paginating the filtered products
    """

    def __init__(
        self,
        catalog: CatalogRepository | None = None,
        filters: InMemoryProductFilter | None = None,
    ) -> None:
        """Initialize list service with required dependencies."""
        self.catalog = catalog or DynamoDBCatalog()
        self.filters = filters or InMemoryProductFilter()

    def list_products(
        self,
        request: ListProductsRequest,
        *,
        now: datetime | None = None,
    ) -> tuple[list[ProductItem], PageMetadata]:
        """List products with filtering and pagination.

        Raises:
            InvalidFilterValueError: If a filter value is rejected
            StoreError: If the products collection cannot be read
        """
        # Step 1: Read the whole collection; nothing is cached between requests
        products = self.catalog.fetch_collection(name=PRODUCTS_COLLECTION)

        # Step 2: Narrow in memory
        filtered = self.filters.apply_filters(products, request, now=now)

        # Step 3: Slice the requested page
        page_items, metadata = self.filters.paginate(
            filtered,
            page=request.page,
            limit=request.limit,
        )

        logger.info(
            "Products listed successfully",
            extra={
                "source_count": len(products),
                "total": metadata.total,
                "returned_count": len(page_items),
                "page": metadata.page,
                "limit": metadata.limit,
            },
        )

        return page_items, metadata
