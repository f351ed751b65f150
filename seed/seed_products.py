#!/usr/bin/env python3
"""
Seed script to load the sample catalog into the products table.

Run:
    PYTHONPATH=src python seed/seed_products.py \
      --table-name <TABLE-NAME> \
      [--endpoint-url http://localhost:4566] \
      [--api-id <API-ID>]

When --api-id is given, the listing endpoint is queried afterwards as a
smoke check.
"""

import argparse
import json
import os
import sys
from decimal import Decimal
from pathlib import Path
from typing import Any, cast

import boto3
import requests
from aws_lambda_powertools import Logger
from pydantic import ValidationError

from core.models.product import Product
from core.utils.constants import (
    ENV_AWS_ENDPOINT_URL,
    ENV_AWS_REGION,
    ENV_PRODUCTS_TABLE_NAME,
    PRODUCTS_COLLECTION,
)

logger = Logger(service="seed")


LIST_API_URL = "http://localhost:4566/restapis/{0}/snd/_user_request_/api/products"


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed the product catalog table")

    parser.add_argument(
        "--table-name",
        default=os.getenv(ENV_PRODUCTS_TABLE_NAME),
        help=f"DynamoDB table name (defaults to ${ENV_PRODUCTS_TABLE_NAME})",
    )
    parser.add_argument(
        "--endpoint-url",
        default=os.getenv(ENV_AWS_ENDPOINT_URL),
        help="DynamoDB endpoint (e.g. LocalStack)",
    )
    parser.add_argument(
        "--data-file",
        type=Path,
        default=Path(__file__).parent / "data" / "products.json",
        help="JSON file with a top-level 'products' array",
    )
    parser.add_argument(
        "--api-id",
        default=None,
        help="API Gateway ID to smoke-test the listing endpoint after seeding",
    )

    return parser.parse_args()


def load_sample_data(data_file: Path) -> list[dict[str, Any]]:
    # DynamoDB rejects floats, so numbers are read as Decimal
    with open(data_file, encoding="utf-8") as f:
        data = cast(dict[str, Any], json.load(f, parse_float=Decimal))
    return cast(list[dict[str, Any]], data.get(PRODUCTS_COLLECTION, []))


def seed_products() -> None:
    try:
        args = parse_args()
        if not args.table_name:
            logger.error("No table name given", extra={"env_var": ENV_PRODUCTS_TABLE_NAME})
            sys.exit(2)

        dynamodb = boto3.resource(
            "dynamodb",
            endpoint_url=args.endpoint_url,
            region_name=os.getenv(ENV_AWS_REGION),
        )
        table = dynamodb.Table(args.table_name)

        logger.info(
            "Starting seeding process",
            extra={"table": args.table_name, "data_file": str(args.data_file)},
        )

        seeded = 0
        with table.batch_writer() as batch:
            for raw in load_sample_data(args.data_file):
                try:
                    product = Product.model_validate(raw)
                except ValidationError as exc:
                    logger.warning(
                        "Skipping malformed product",
                        extra={"product": raw.get("id"), "errors": exc.errors()},
                    )
                    continue

                batch.put_item(Item=product.model_dump(by_alias=True, exclude_none=True))
                seeded += 1

        logger.info("Seeding completed", extra={"count": seeded})

        if args.api_id:
            list_response = requests.get(
                LIST_API_URL.format(args.api_id),
                params={"limit": 5},
                timeout=30,
            )
            logger.info(
                "List products response",
                extra={
                    "status": list_response.status_code,
                    "response": list_response.json() if list_response.ok else list_response.text,
                },
            )

    except Exception as exc:
        logger.exception("Seeding failed", exc_info=exc)
        sys.exit(1)


if __name__ == "__main__":
    seed_products()
