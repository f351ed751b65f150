"""
Lambda handler responsible for listing products with filtering and pagination.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.models.product import ListProductsResponse
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder

from .models import ListProductsRequest
from .service import ListService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle GET /api/products.

    Supports:
    - Title search, theme, tier, category, period and price filters
    - Page-number pagination (page, limit)

    Args:
        event: API Gateway Lambda proxy event
        context: AWS Lambda execution context

    Returns:
        API Gateway-compatible HTTP response
    """
    logger.info(
        "Received product list request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "query_params": event.get("queryStringParameters"),
            "request_id": getattr(context, "aws_request_id", None),
        },
    )

    request = ListProductsRequest.from_query_params(event.get("queryStringParameters"))
    service = ListService()

    # Rejected filters and store failures are converted by api_gateway_handler
    items, metadata = service.list_products(request)
    response = ListProductsResponse(data=items, metadata=metadata)

    return ResponseBuilder.ok(
        response.model_dump(by_alias=True),
        request_id=getattr(context, "aws_request_id", None),
    )
