"""
Shared fixtures: settings, a fake Shopify store and a test client.
"""

import json
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import httpx
import pytest
from fastapi import Depends
from fastapi.testclient import TestClient

from app.config import Settings, get_settings
from app.dependencies import get_shopify_client, get_store_config
from app.main import app
from app.products import StoreConfig
from app.shopify import ShopifyClient


SECRET = "s3cret-value"
STORE = "test-store.myshopify.com"
TOKEN = "shpat_test_token"
API_VERSION = "2024-10"


@dataclass
class Call:
    """One request received by the fake store."""
    method: str
    path: str
    url: str
    body: Optional[Any]
    headers: Dict[str, str]


@dataclass
class FakeShopify:
    """
    In-memory Shopify REST API served through httpx.MockTransport.

    Responses are looked up by (method, path regex); paths are relative to
    /admin/api/{version}.
    """

    calls: List[Call] = field(default_factory=list)
    routes: List[Tuple[str, str, int, Any]] = field(default_factory=list)

    def __post_init__(self):
        self.set_product(variants=[])
        self.set_locations([{"id": 555, "name": "Main", "active": True}])
        self.on("POST", r"/inventory_levels/set\.json", 200, {"inventory_level": {}})
        self.on("PUT", r"/inventory_items/\d+\.json", 200, {"inventory_item": {}})

    def on(self, method: str, pattern: str, status: int, body: Any = None) -> None:
        # Newest route wins
        self.routes.insert(0, (method, pattern, status, body))

    def set_product(self, variants: List[Dict[str, Any]], product_id: int = 1001) -> None:
        self.on("POST", r"/products\.json", 201, {
            "product": {
                "id": product_id,
                "title": "Whole Chicken",
                "handle": "whole-chicken",
                "status": "active",
                "variants": variants,
            }
        })

    def set_locations(self, locations: List[Dict[str, Any]]) -> None:
        self.on("GET", r"/locations\.json", 200, {"locations": locations})

    def handler(self, request: httpx.Request) -> httpx.Response:
        path = re.sub(r"^/admin/api/[^/]+", "", request.url.path)
        body = json.loads(request.content) if request.content else None
        self.calls.append(Call(request.method, path, str(request.url), body, dict(request.headers)))

        for method, pattern, status, payload in self.routes:
            if method == request.method and re.fullmatch(pattern, path):
                if payload is None:
                    return httpx.Response(status)
                if isinstance(payload, str):
                    return httpx.Response(status, text=payload)
                return httpx.Response(status, json=payload)

        return httpx.Response(404, json={"errors": "Not Found"})

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def paths(self) -> List[Tuple[str, str]]:
        return [(c.method, c.path) for c in self.calls]

    def calls_to(self, method: str, pattern: str) -> List[Call]:
        return [c for c in self.calls if c.method == method and re.fullmatch(pattern, c.path)]


def make_settings(**overrides) -> Settings:
    values = {
        "ct_shared_secret": SECRET,
        "shopify_store": STORE,
        "shopify_admin_token": TOKEN,
        "shopify_api_version": API_VERSION,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def shopify() -> FakeShopify:
    return FakeShopify()


@pytest.fixture
def client(settings, shopify):
    """TestClient wired to the fake store."""

    async def fake_client(config: StoreConfig = Depends(get_store_config)):
        async with ShopifyClient(
            config.store,
            config.access_token,
            config.api_version,
            transport=shopify.transport,
        ) as shopify_client:
            yield shopify_client

    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_shopify_client] = fake_client

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers() -> Dict[str, str]:
    return {"X-CT-Auth": SECRET}
