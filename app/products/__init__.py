"""
Product creation package.
"""

from .errors import (
    ProductCreationError,
    MethodNotAllowed,
    Unauthorized,
    ConfigurationMissing,
    InvalidPayload,
    UpstreamCreateFailed,
    UpstreamLocationsUnavailable,
    UnexpectedError,
)
from .models import (
    ProductPayload,
    VariantSpec,
    ImageSpec,
    CreatedProduct,
    CreatedVariant,
    Location,
    ProductSummary,
    CreateProductResponse,
    ErrorResponse,
)
from .variants import ProductDefaults, build_product, build_variant, pair_variants, select_location
from .creator import ProductCreator, StoreConfig, ReconcileResult

__all__ = [
    "ProductCreationError",
    "MethodNotAllowed",
    "Unauthorized",
    "ConfigurationMissing",
    "InvalidPayload",
    "UpstreamCreateFailed",
    "UpstreamLocationsUnavailable",
    "UnexpectedError",
    "ProductPayload",
    "VariantSpec",
    "ImageSpec",
    "CreatedProduct",
    "CreatedVariant",
    "Location",
    "ProductSummary",
    "CreateProductResponse",
    "ErrorResponse",
    "ProductDefaults",
    "build_product",
    "build_variant",
    "pair_variants",
    "select_location",
    "ProductCreator",
    "StoreConfig",
    "ReconcileResult",
]
