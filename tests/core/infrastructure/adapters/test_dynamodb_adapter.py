import os

import pytest

from core.infrastructure.adapters.dynamodb_adapter import DynamoDBAdapter
from core.utils.constants import ENV_PRODUCTS_TABLE_NAME


class TestDynamoDBAdapter:
    def test_init_missing_table_env(self, monkeypatch):
        monkeypatch.delenv(ENV_PRODUCTS_TABLE_NAME, raising=False)

        with pytest.raises(RuntimeError):
            DynamoDBAdapter()

    def test_init_reads_table_name(self, products_table):
        adapter = DynamoDBAdapter()

        assert adapter.table_name == os.environ[ENV_PRODUCTS_TABLE_NAME]

    def test_scan_returns_items(self, put_products):
        put_products([{"id": 1, "title": "Witch Hat"}, {"id": 2, "title": "Boots"}])

        response = DynamoDBAdapter().scan()

        assert {item["title"] for item in response["Items"]} == {"Witch Hat", "Boots"}

    def test_scan_passes_through_arguments(self, put_products):
        put_products([{"id": i} for i in range(1, 6)])

        response = DynamoDBAdapter().scan(Limit=2)

        assert len(response["Items"]) == 2
        assert "LastEvaluatedKey" in response
