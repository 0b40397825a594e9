"""
FastAPI dependency injection.
Shared-secret auth, store configuration and the per-request Shopify client.
"""

import hmac
from typing import AsyncIterator, Optional

from fastapi import Depends, Header

from .config import DEFAULT_API_VERSION, Settings, get_settings
from .products import ConfigurationMissing, ProductDefaults, StoreConfig, Unauthorized
from .shopify import ShopifyClient


AUTH_HEADER = "X-CT-Auth"


def require_shared_secret(
    x_ct_auth: Optional[str] = Header(default=None, alias=AUTH_HEADER),
    settings: Settings = Depends(get_settings),
) -> None:
    """
    Dependency that requires a valid X-CT-Auth header.
    Runs before anything touches the body or Shopify.
    """
    expected = settings.ct_shared_secret
    if not expected or x_ct_auth is None:
        raise Unauthorized()

    if not hmac.compare_digest(x_ct_auth.encode("utf-8"), expected.encode("utf-8")):
        raise Unauthorized()


def get_store_config(settings: Settings = Depends(get_settings)) -> StoreConfig:
    """Build the store config for this request, or fail if it is incomplete."""
    store = settings.shopify_store.strip()
    token = settings.shopify_admin_token.strip()

    if not store or not token:
        raise ConfigurationMissing(
            "Server configuration error: Missing SHOPIFY_STORE or SHOPIFY_ADMIN_TOKEN"
        )

    # Clean domain
    for prefix in ("https://", "http://"):
        if store.startswith(prefix):
            store = store[len(prefix):]
    store = store.rstrip("/")

    return StoreConfig(
        store=store,
        access_token=token,
        api_version=settings.shopify_api_version.strip() or DEFAULT_API_VERSION,
        defaults=ProductDefaults(
            vendor=settings.default_vendor,
            product_type=settings.default_product_type,
            weight_unit=settings.default_weight_unit,
        ),
    )


async def get_shopify_client(
    config: StoreConfig = Depends(get_store_config),
    settings: Settings = Depends(get_settings),
) -> AsyncIterator[ShopifyClient]:
    """Shopify client scoped to one request."""
    async with ShopifyClient(
        config.store,
        config.access_token,
        config.api_version,
        timeout=settings.http_timeout,
    ) as client:
        yield client
