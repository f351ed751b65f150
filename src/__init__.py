"""Product Catalog Service Package."""

__version__ = "1.0.0"
__description__ = (
    "Serverless product catalog listing API using AWS Lambda and DynamoDB"
)

__all__ = ["handlers", "core"]
