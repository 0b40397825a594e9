"""
Product creation API route.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError

from ..dependencies import get_shopify_client, get_store_config, require_shared_secret
from ..products import (
    CreateProductResponse,
    InvalidPayload,
    ProductCreator,
    ProductPayload,
    StoreConfig,
)
from ..shopify import ShopifyClient

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", dependencies=[Depends(require_shared_secret)])


def format_validation_error(error: ValidationError) -> str:
    """First validation problem as 'field: message'."""
    first = error.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "invalid value")
    return f"{location}: {message}" if location else message


async def read_payload(request: Request) -> ProductPayload:
    """Parse and validate the JSON body."""
    try:
        body: Any = await request.json()
    except ValueError:
        raise InvalidPayload("Invalid request body: body must be valid JSON")
    except RecursionError:
        raise InvalidPayload("Invalid request body: JSON is nested too deeply")

    if not isinstance(body, dict):
        raise InvalidPayload("Invalid request body: product data is required")

    try:
        return ProductPayload.model_validate(body)
    except ValidationError as e:
        raise InvalidPayload(f"Invalid request body: {format_validation_error(e)}")


@router.post("/create-product", response_model=CreateProductResponse)
async def create_product(
    request: Request,
    config: StoreConfig = Depends(get_store_config),
    client: ShopifyClient = Depends(get_shopify_client),
):
    """Create a Shopify product and set its inventory and cost."""
    payload = await read_payload(request)
    logger.info(f"Creating product '{payload.title}' with {len(payload.variants)} variants")

    creator = ProductCreator(client, config)
    return await creator.create(payload)
