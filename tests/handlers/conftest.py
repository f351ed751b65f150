from types import SimpleNamespace
from typing import Any

import pytest


@pytest.fixture
def lambda_context():
    return SimpleNamespace(
        aws_request_id="test-request-id",
        function_name="list-products",
        memory_limit_in_mb=256,
        invoked_function_arn="arn:aws:lambda:us-east-1:000000000000:function:list-products",
        log_group_name="/aws/lambda/list-products",
        log_stream_name="2026/10/19/[$LATEST]test",
    )


@pytest.fixture
def list_products_event() -> dict[str, Any]:
    return {
        "httpMethod": "GET",
        "path": "/api/products",
        "queryStringParameters": None,
        "headers": {"Accept": "application/json"},
    }
