"""
Rules for mapping variants to Shopify and matching them up after creation.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from .models import CreatedVariant, Location, ProductPayload, VariantSpec


# Shopify tracks stock for the variant
INVENTORY_MANAGEMENT = "shopify"
TAG_SEPARATOR = ","


@dataclass(frozen=True)
class ProductDefaults:
    """Values filled in when the caller leaves a field out."""
    vendor: str
    product_type: str
    weight_unit: str


def join_tags(tags: Optional[Union[Sequence[str], str]]) -> str:
    """Shopify's REST API takes tags as one delimited string."""
    if tags is None:
        return ""
    if isinstance(tags, str):
        return tags
    return TAG_SEPARATOR.join(tags)


def build_variant(variant: VariantSpec, defaults: ProductDefaults) -> Dict[str, Any]:
    """
    Map a variant spec to the Shopify product-create schema.

    `cost` and `inventory_quantity` are left out; they are applied to the
    inventory item once the variant exists.
    """
    data: Dict[str, Any] = {
        "price": variant.price,
        "sku": variant.sku,
        "inventory_management": INVENTORY_MANAGEMENT,
        "requires_shipping": variant.requires_shipping is not False,
        "taxable": variant.taxable is not False,
        "weight": variant.weight,
        "weight_unit": variant.weight_unit or defaults.weight_unit,
        "compare_at_price": variant.compare_at_price,
        "barcode": variant.barcode,
    }

    # Absent fields are left to Shopify defaults
    return {k: v for k, v in data.items() if v is not None}


def build_product(payload: ProductPayload, defaults: ProductDefaults) -> Dict[str, Any]:
    """Build the `product` object for POST /products.json."""
    return {
        "title": payload.title,
        "body_html": payload.body_html or "",
        "vendor": payload.vendor or defaults.vendor,
        "product_type": payload.product_type or defaults.product_type,
        "tags": join_tags(payload.tags),
        "images": [image.model_dump(exclude_none=True) for image in payload.images],
        "variants": [build_variant(v, defaults) for v in payload.variants],
    }


def pair_variants(
    created: Sequence[CreatedVariant],
    requested: Sequence[VariantSpec],
) -> List[Tuple[CreatedVariant, Optional[VariantSpec]]]:
    """
    Pair each created variant with the variant spec it came from.

    Matching is by sku when both sides have one, otherwise by position.
    An input is used at most once; sku matches win over positional ones.

    Returns:
        (created, spec) tuples in created-variant order; spec is None
        when nothing matches.
    """
    by_sku: Dict[str, int] = {}
    for index, spec in enumerate(requested):
        if spec.sku and spec.sku not in by_sku:
            by_sku[spec.sku] = index

    claimed = set()
    matches: List[Optional[int]] = []

    # First pass: sku
    for variant in created:
        index = by_sku.get(variant.sku) if variant.sku else None
        if index is not None and index not in claimed:
            claimed.add(index)
            matches.append(index)
        else:
            matches.append(None)

    # Second pass: position
    for position, index in enumerate(matches):
        if index is None and position < len(requested) and position not in claimed:
            claimed.add(position)
            matches[position] = position

    return [
        (variant, requested[index] if index is not None else None)
        for variant, index in zip(created, matches)
    ]


def select_location(locations: Sequence[Location]) -> Optional[Location]:
    """First active location, else the first one, else None."""
    for location in locations:
        if location.active:
            return location
    return locations[0] if locations else None
