"""
Pydantic models for the create-product request and Shopify responses.
"""

from decimal import Decimal
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


MAX_COST_DIGITS = 12


def _price_to_str(value: Any) -> Any:
    """Accept numeric prices, Shopify expects strings."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float, Decimal)):
        return str(value)
    return value


class ImageSpec(BaseModel):
    """Product image referenced by URL."""
    src: str
    alt: Optional[str] = None


class VariantSpec(BaseModel):
    """
    A variant as sent by the caller.

    Only the known fields below are forwarded to Shopify. Anything else
    lands in `model_extra` and stays there.
    """

    model_config = ConfigDict(extra="allow")

    price: Optional[str] = None
    sku: Optional[str] = None
    # Set on the inventory item, not the variant
    cost: Optional[Decimal] = Field(default=None, ge=0, max_digits=MAX_COST_DIGITS, decimal_places=2)
    inventory_quantity: Optional[int] = None
    requires_shipping: Optional[bool] = None
    taxable: Optional[bool] = None
    weight: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    weight_unit: Optional[str] = None
    barcode: Optional[str] = None
    compare_at_price: Optional[str] = None

    @field_validator("price", "compare_at_price", mode="before")
    @classmethod
    def normalize_prices(cls, value: Any) -> Any:
        return _price_to_str(value)

    @field_validator("cost", mode="before")
    @classmethod
    def blank_cost_as_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("inventory_quantity", mode="before")
    @classmethod
    def quantity_is_number(cls, value: Any) -> Any:
        # Whole-number floats such as 100.0 pass; strings and booleans do not
        if value is not None and (isinstance(value, bool) or not isinstance(value, (int, float))):
            raise ValueError("inventory_quantity must be a number")
        return value

    @property
    def passthrough(self) -> Dict[str, Any]:
        """Unknown fields supplied by the caller."""
        return dict(self.model_extra or {})

    @property
    def needs_reconciliation(self) -> bool:
        """True if inventory or cost must be applied after creation."""
        return self.inventory_quantity is not None or self.cost is not None


class ProductPayload(BaseModel):
    """Inbound create-product body."""

    model_config = ConfigDict(extra="allow")

    title: str
    body_html: Optional[str] = None
    vendor: Optional[str] = None
    product_type: Optional[str] = None
    tags: Optional[Union[List[str], str]] = None
    images: List[ImageSpec] = Field(default_factory=list)
    variants: List[VariantSpec] = Field(default_factory=list)

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("title must not be empty")
        return value

    @field_validator("images", "variants", mode="before")
    @classmethod
    def none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def passthrough(self) -> Dict[str, Any]:
        """Unknown top-level fields supplied by the caller."""
        return dict(self.model_extra or {})


class CreatedVariant(BaseModel):
    """Variant as returned by Shopify after creation."""

    model_config = ConfigDict(extra="allow")

    id: int
    sku: Optional[str] = None
    inventory_item_id: Optional[int] = None


class CreatedProduct(BaseModel):
    """Product as returned by Shopify after creation."""

    model_config = ConfigDict(extra="allow")

    id: int
    title: str
    handle: Optional[str] = None
    status: Optional[str] = None
    variants: List[CreatedVariant] = Field(default_factory=list)


class Location(BaseModel):
    """Shopify location (warehouse, store, ...)."""

    model_config = ConfigDict(extra="allow")

    id: int
    name: Optional[str] = None
    active: bool = False


class VariantSummary(BaseModel):
    id: int
    sku: Optional[str] = None
    inventory_item_id: Optional[int] = None


class ProductSummary(BaseModel):
    """Subset of the created product returned to the caller."""
    id: int
    title: str
    handle: Optional[str] = None
    status: Optional[str] = None
    admin_url: str
    variants: List[VariantSummary] = Field(default_factory=list)


class CreateProductResponse(BaseModel):
    ok: bool = True
    product: ProductSummary
    warnings: List[str] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    ok: bool = False
    error: str
