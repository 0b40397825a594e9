"""
Shopify API module.
"""

from app.shopify.client import (
    ShopifyClient,
    ShopifyClientError,
    ShopifyAPIError,
)

__all__ = [
    "ShopifyClient",
    "ShopifyClientError",
    "ShopifyAPIError",
]
