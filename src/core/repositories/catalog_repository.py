"""Abstract contract for catalog collection reads."""

from abc import ABC, abstractmethod

from core.filters.base import ProductItem


class CatalogRepository(ABC):
    """Contract for reading whole catalog collections.

    Implementations could be DynamoDB, a JSON file, PostgreSQL, etc.
    Handlers depend on this interface, not the implementation.
    """

    @abstractmethod
    def fetch_collection(self, *, name: str) -> list[ProductItem]:
        """Read every record of a collection.

        Args:
            name: Collection name (e.g. "products")

        Returns:
            All records in the store's order

        Raises:
            StoreError: If the collection cannot be read
        """
