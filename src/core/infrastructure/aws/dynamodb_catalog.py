"""DynamoDB-backed implementation of CatalogRepository."""

from typing import Any

from aws_lambda_powertools import Logger
from botocore.exceptions import ClientError

from core.filters.base import ProductItem
from core.infrastructure.adapters.dynamodb_adapter import DynamoDBAdapter, DynamoDBAdapterProtocol
from core.models.errors import StoreError
from core.repositories.catalog_repository import CatalogRepository
from core.utils.constants import COLLECTION_TABLE_ENV

logger = Logger(UTC=True)


class DynamoDBCatalog(CatalogRepository):
    """Catalog collections stored one per DynamoDB table.

    All boto3 errors are caught and translated into
    StoreError with stable semantics.
    """

    def __init__(self, adapters: dict[str, DynamoDBAdapterProtocol] | None = None) -> None:
        """Initialize with optional pre-built adapters keyed by collection name."""
        self._adapters: dict[str, DynamoDBAdapterProtocol] = dict(adapters or {})

    def _adapter_for(self, name: str) -> DynamoDBAdapterProtocol:
        adapter = self._adapters.get(name)
        if adapter is not None:
            return adapter

        table_env_var = COLLECTION_TABLE_ENV.get(name)
        if table_env_var is None:
            raise StoreError(
                message=f"Unknown collection '{name}'",
                details={"collection": name},
            )

        try:
            adapter = DynamoDBAdapter(table_env_var)
        except RuntimeError as exc:
            logger.error("Catalog store is not configured", extra={"collection": name})
            raise StoreError(message=str(exc), details={"collection": name}) from exc

        self._adapters[name] = adapter
        return adapter

    def fetch_collection(self, *, name: str) -> list[ProductItem]:
        """Read every record of a collection with a paginated scan.

        NOTE:
        - Scan pages are followed until LastEvaluatedKey is exhausted.
        - Records are returned in scan order, which follows the table's
          hash key partitioning. It is neither insertion order nor id order,
          so an unfiltered listing does not reproduce the seed file's order.

        Raises:
            StoreError: If the collection cannot be read
        """
        adapter = self._adapter_for(name)
        logger.debug("Reading collection", extra={"collection": name})

        items: list[ProductItem] = []
        scan_kwargs: dict[str, Any] = {}

        try:
            while True:
                response = adapter.scan(**scan_kwargs)
                page_items = response.get("Items", [])

                if not isinstance(page_items, list):
                    raise StoreError(
                        message="Invalid scan response from DynamoDB",
                        details={"collection": name},
                    )

                items.extend(page_items)

                last_evaluated_key = response.get("LastEvaluatedKey")
                if not last_evaluated_key:
                    break
                scan_kwargs["ExclusiveStartKey"] = last_evaluated_key

        except StoreError:
            raise

        except ClientError as exc:
            logger.error(
                "DynamoDB scan failed",
                extra={
                    "collection": name,
                    "error_code": exc.response.get("Error", {}).get("Code"),
                },
            )
            raise StoreError(
                message=f"Unable to read collection '{name}'",
                details={"collection": name},
            ) from exc

        except Exception as exc:
            logger.exception("Unexpected error reading collection")
            raise StoreError(
                message=f"Unable to read collection '{name}'",
                details={"collection": name},
            ) from exc

        logger.info(
            "Collection read",
            extra={"collection": name, "count": len(items)},
        )
        return items
