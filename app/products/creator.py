"""
Create a product, then apply the inventory and cost that the create call
cannot set.
"""

import logging
from dataclasses import dataclass, field
from typing import List

from pydantic import ValidationError

from ..shopify import ShopifyAPIError, ShopifyClient, ShopifyClientError
from .errors import (
    ProductCreationError,
    UnexpectedError,
    UpstreamCreateFailed,
    UpstreamLocationsUnavailable,
)
from .models import (
    CreatedProduct,
    CreateProductResponse,
    Location,
    ProductPayload,
    ProductSummary,
    VariantSummary,
)
from .variants import ProductDefaults, build_product, pair_variants, select_location

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoreConfig:
    """Shopify store a request runs against."""
    store: str
    access_token: str
    api_version: str
    defaults: ProductDefaults

    @property
    def admin_root(self) -> str:
        return f"https://{self.store}/admin"


@dataclass
class ReconcileResult:
    """Outcome of the per-variant inventory/cost pass."""
    inventory_set: int = 0
    cost_set: int = 0
    skipped: int = 0
    warnings: List[str] = field(default_factory=list)

    def warn(self, message: str) -> None:
        logger.warning(message)
        self.warnings.append(message)


class ProductCreator:
    """
    Runs one create-product request against a Shopify store.

    Calls are made strictly in sequence: product, locations, then per
    variant inventory and cost, in the order Shopify returned the variants.
    """

    def __init__(self, client: ShopifyClient, config: StoreConfig):
        self.client = client
        self.config = config

    async def create(self, payload: ProductPayload) -> CreateProductResponse:
        """
        Create the product and reconcile inventory/cost.

        Raises:
            ProductCreationError: on any fatal failure; unknown exceptions
                are wrapped in UnexpectedError
        """
        try:
            product = await self.create_product(payload)

            result = ReconcileResult()
            if any(v.needs_reconciliation for v in payload.variants):
                location = await self.resolve_location()
                result = await self.reconcile(product, payload, location)

            logger.info(
                f"Created product {product.id} '{product.title}': "
                f"{result.inventory_set} inventory set, {result.cost_set} cost set, "
                f"{result.skipped} skipped, {len(result.warnings)} warnings"
            )

            return CreateProductResponse(
                product=self.summarize(product),
                warnings=result.warnings,
            )

        except ProductCreationError:
            raise
        except Exception as e:
            logger.exception("Unexpected error creating product")
            raise UnexpectedError(str(e) or "Unexpected error") from e

    async def create_product(self, payload: ProductPayload) -> CreatedProduct:
        """Issue the single POST /products.json call."""
        if payload.passthrough:
            logger.debug(f"Ignoring unknown product fields: {sorted(payload.passthrough)}")
        for index, variant in enumerate(payload.variants):
            if variant.passthrough:
                logger.debug(
                    f"Ignoring unknown fields on variant {index}: {sorted(variant.passthrough)}"
                )

        body = build_product(payload, self.config.defaults)

        try:
            data = await self.client.create_product(body)
        except ShopifyAPIError as e:
            logger.error(f"Shopify product create failed: {e.status_code} {e.body}")
            raise UpstreamCreateFailed(
                f"Product create failed: {e.status_code} {e.body}"
            ) from e
        except ShopifyClientError as e:
            raise UpstreamCreateFailed(f"Product create failed: {e}") from e

        raw = data.get("product") if isinstance(data, dict) else None
        if not raw:
            raise UpstreamCreateFailed("Product create failed: no product in Shopify response")

        try:
            return CreatedProduct.model_validate(raw)
        except ValidationError as e:
            raise UpstreamCreateFailed(f"Product create failed: unexpected response: {e}") from e

    async def resolve_location(self) -> Location:
        """Pick the location inventory is written to."""
        try:
            raw = await self.client.get_locations()
        except ShopifyAPIError as e:
            raise UpstreamLocationsUnavailable(
                f"Failed to fetch locations: {e.status_code} {e.body}"
            ) from e
        except ShopifyClientError as e:
            raise UpstreamLocationsUnavailable(f"Failed to fetch locations: {e}") from e

        locations = [Location.model_validate(item) for item in raw]
        location = select_location(locations)
        if location is None:
            raise UpstreamLocationsUnavailable("No Shopify locations found on this store.")

        logger.debug(f"Using location {location.id} ({location.name})")
        return location

    async def reconcile(
        self,
        product: CreatedProduct,
        payload: ProductPayload,
        location: Location,
    ) -> ReconcileResult:
        """Apply inventory quantity and cost per variant; failures only warn."""
        result = ReconcileResult()

        for created, requested in pair_variants(product.variants, payload.variants):
            if requested is None or created.inventory_item_id is None:
                result.skipped += 1
                logger.debug(f"Skipping variant {created.id}: nothing to reconcile")
                continue

            item_id = created.inventory_item_id

            if requested.inventory_quantity is not None:
                try:
                    await self.client.set_inventory_level(
                        location.id, item_id, requested.inventory_quantity
                    )
                    result.inventory_set += 1
                except ShopifyClientError as e:
                    result.warn(f"Inventory set failed for variant {created.id}: {e}")
                except Exception as e:
                    logger.exception(f"Unexpected error setting inventory for variant {created.id}")
                    result.warn(f"Inventory set failed for variant {created.id}: {e}")

            if requested.cost is not None:
                try:
                    await self.client.update_inventory_item_cost(item_id, float(requested.cost))
                    result.cost_set += 1
                except ShopifyClientError as e:
                    result.warn(f"Setting cost failed for variant {created.id}: {e}")
                except Exception as e:
                    logger.exception(f"Unexpected error setting cost for variant {created.id}")
                    result.warn(f"Setting cost failed for variant {created.id}: {e}")

        return result

    def summarize(self, product: CreatedProduct) -> ProductSummary:
        return ProductSummary(
            id=product.id,
            title=product.title,
            handle=product.handle,
            status=product.status,
            admin_url=f"{self.config.admin_root}/products/{product.id}",
            variants=[
                VariantSummary(id=v.id, sku=v.sku, inventory_item_id=v.inventory_item_id)
                for v in product.variants
            ],
        )

