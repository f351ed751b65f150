"""
Pytest configuration and fixtures for product catalog tests.
Provides AWS mocking, the DynamoDB products table and sample catalog data.
"""

import os
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any

os.environ.setdefault("AWS_REGION", "us-east-1")
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("PRODUCTS_TABLE_NAME", "products-test")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "product-catalog")
os.environ.setdefault("POWERTOOLS_METRICS_NAMESPACE", "ProductCatalog")
os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "true")

import boto3  # noqa: E402
import pytest  # noqa: E402
from botocore.exceptions import ClientError  # noqa: E402
from moto import mock_aws  # noqa: E402

NOW = datetime(2026, 10, 19, 12, 0, 0, tzinfo=timezone.utc)


def days_ago(days: float) -> str:
    """ISO-8601 timestamp ``days`` before the fixed test clock."""
    return (NOW - timedelta(days=days)).isoformat().replace("+00:00", "Z")


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture(scope="function")
def aws_mock():
    with mock_aws():
        yield


@pytest.fixture(scope="function")
def dynamodb_resource(aws_mock):
    return boto3.resource("dynamodb", region_name=os.getenv("AWS_REGION"))


def _create_products_table(dynamodb_resource):
    """Helper to create the products table."""
    return dynamodb_resource.create_table(
        TableName=os.getenv("PRODUCTS_TABLE_NAME"),
        BillingMode="PAY_PER_REQUEST",
        KeySchema=[{"AttributeName": "id", "KeyType": "HASH"}],
        AttributeDefinitions=[{"AttributeName": "id", "AttributeType": "N"}],
    )


@pytest.fixture(scope="function")
def products_table(dynamodb_resource):
    """
    Create the DynamoDB products table for a test.

    Moto discards the table when the mock context exits.
    """
    try:
        table = dynamodb_resource.Table(os.getenv("PRODUCTS_TABLE_NAME"))
        table.load()
    except ClientError:
        table = _create_products_table(dynamodb_resource)
        table.wait_until_exists()

    yield table


@pytest.fixture
def put_products(products_table) -> Callable[[list[dict[str, Any]]], list[dict[str, Any]]]:
    """
    Helper to insert products into DynamoDB.

    Usage:
        items = put_products([product1, product2])
    """

    def _put(items: list[dict[str, Any]]) -> list[dict[str, Any]]:
        with products_table.batch_writer() as batch:
            for item in items:
                batch.put_item(Item=item)
        return items

    return _put


@pytest.fixture
def sample_products() -> list[dict[str, Any]]:
    """Small catalog covering every filterable field."""
    return [
        {
            "id": 1,
            "title": "Pumpkin Hoodie",
            "theme": "Halloween",
            "tier": "Basic",
            "category": "Upper Body!",
            "price": Decimal("12.5"),
            "createdAt": days_ago(2),
        },
        {
            "id": 2,
            "title": "Midnight Cargo Pants",
            "theme": "Dark",
            "tier": "Premium",
            "category": "Lower Body",
            "price": "24.00",
            "createdAt": days_ago(5),
        },
        {
            "id": 3,
            "title": "Witch Hat",
            "theme": "halloween",
            "tier": "Deluxe",
            "category": "Hat",
            "price": Decimal("40"),
            "createdAt": days_ago(10),
        },
        {
            "id": 4,
            "title": "Sunrise Sneakers",
            "theme": "Light",
            "tier": "basic",
            "category": "Shoes",
            "price": Decimal("9.99"),
            "createdAt": days_ago(45),
        },
        {
            "id": 5,
            "title": "Hat of Colors",
            "theme": "Colorful",
            "tier": "Premium",
            "category": "hat",
            "price": "not-a-price",
            "createdAt": "yesterday-ish",
        },
    ]


@pytest.fixture
def products_in_store(put_products, sample_products) -> list[dict[str, Any]]:
    """DynamoDB table pre-populated with the sample catalog."""
    return put_products(sample_products)
