"""
Tests for ProductCreator reconciliation.
"""

import pytest

from app.products import (
    CreatedProduct,
    Location,
    ProductCreator,
    ProductDefaults,
    ProductPayload,
    StoreConfig,
)


CONFIG = StoreConfig(
    store="test-store.myshopify.com",
    access_token="shpat_test",
    api_version="2024-10",
    defaults=ProductDefaults(vendor="ChickenToday", product_type="Poultry", weight_unit="lb"),
)

PRODUCT = CreatedProduct.model_validate({
    "id": 1001,
    "title": "Whole Chicken",
    "variants": [{"id": 2001, "sku": "CT-001", "inventory_item_id": 808}],
})

PAYLOAD = ProductPayload.model_validate({
    "title": "Whole Chicken",
    "variants": [{"sku": "CT-001", "inventory_quantity": 1, "cost": "12.50"}],
})


class EncodingFailureClient:
    """Client whose cost update fails before reaching Shopify."""

    def __init__(self):
        self.inventory_calls = []

    async def set_inventory_level(self, location_id, inventory_item_id, available):
        self.inventory_calls.append((location_id, inventory_item_id, available))
        return {}

    async def update_inventory_item_cost(self, inventory_item_id, cost):
        raise ValueError("Out of range float values are not JSON compliant")


class TestReconcile:
    """Tests for ProductCreator.reconcile."""

    @pytest.mark.asyncio
    async def test_non_shopify_error_on_cost_is_a_warning(self):
        """An error building the cost call warns instead of failing the request."""
        client = EncodingFailureClient()
        creator = ProductCreator(client, CONFIG)

        result = await creator.reconcile(PRODUCT, PAYLOAD, Location(id=555, active=True))

        assert client.inventory_calls == [(555, 808, 1)]
        assert result.inventory_set == 1
        assert result.cost_set == 0
        assert len(result.warnings) == 1
        assert "Setting cost failed for variant 2001" in result.warnings[0]

    @pytest.mark.asyncio
    async def test_unpaired_variants_are_counted_as_skipped(self):
        """Created variants with nothing to apply count as skipped."""
        product = CreatedProduct.model_validate({
            "id": 1001,
            "title": "Whole Chicken",
            "variants": [
                {"id": 2001, "sku": "CT-001", "inventory_item_id": 808},
                {"id": 2002, "sku": "CT-002"},
            ],
        })
        creator = ProductCreator(EncodingFailureClient(), CONFIG)

        result = await creator.reconcile(product, PAYLOAD, Location(id=555, active=True))

        assert result.skipped == 1
