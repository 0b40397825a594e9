"""
Shopify REST Admin API client.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)


class ShopifyClientError(Exception):
    """Base exception for Shopify client errors."""
    pass


class ShopifyAPIError(ShopifyClientError):
    """Non-success HTTP status returned by Shopify."""

    def __init__(self, message: str, status_code: int, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ShopifyClient:
    """
    Async HTTP client for the Shopify REST Admin API.

    One instance per request. No retries: a failed call raises and the
    caller decides whether it is fatal.
    """

    DEFAULT_TIMEOUT = 30.0  # seconds

    def __init__(
        self,
        shop_domain: str,
        access_token: str,
        api_version: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize Shopify client.

        Args:
            shop_domain: Store domain (e.g., "mystore.myshopify.com")
            access_token: Admin API access token
            api_version: Admin API version path segment (e.g., "2024-10")
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        # Clean domain
        domain = shop_domain
        if domain.startswith("https://"):
            domain = domain[8:]
        elif domain.startswith("http://"):
            domain = domain[7:]
        domain = domain.rstrip("/")

        self.shop_domain = domain
        self.access_token = access_token
        self.api_version = api_version
        self.base_url = f"https://{domain}/admin/api/{api_version}"

        self._timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self._timeout, connect=10.0),
                headers={
                    "Content-Type": "application/json",
                    "X-Shopify-Access-Token": self.access_token,
                },
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def request(
        self,
        method: str,
        path: str,
        json: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Send a REST request and return the decoded JSON body.

        Args:
            method: HTTP method
            path: Path relative to the versioned admin API root
            json: Optional JSON body

        Returns:
            Decoded response body ({} when empty)

        Raises:
            ShopifyAPIError: On a non-2xx response
            ShopifyClientError: On transport or decoding errors
        """
        client = await self._get_client()

        try:
            response = await client.request(method, path, json=json)
        except httpx.RequestError as e:
            raise ShopifyClientError(f"Request error: {e}") from e

        if response.is_error:
            raise ShopifyAPIError(
                f"{response.status_code} {response.text}",
                status_code=response.status_code,
                body=response.text,
            )

        logger.debug(f"{method} {path} -> {response.status_code}")

        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as e:
            raise ShopifyClientError(f"Invalid JSON from {path}: {e}") from e

    async def create_product(self, product: Dict[str, Any]) -> Dict[str, Any]:
        """POST /products.json and return the response body."""
        return await self.request("POST", "/products.json", json={"product": product})

    async def get_locations(self) -> List[Dict[str, Any]]:
        """GET /locations.json and return the locations list."""
        data = await self.request("GET", "/locations.json")
        return data.get("locations") or []

    async def set_inventory_level(
        self,
        location_id: int,
        inventory_item_id: int,
        available: int,
    ) -> Dict[str, Any]:
        """POST /inventory_levels/set.json."""
        return await self.request(
            "POST",
            "/inventory_levels/set.json",
            json={
                "location_id": location_id,
                "inventory_item_id": inventory_item_id,
                "available": available,
            },
        )

    async def update_inventory_item_cost(
        self,
        inventory_item_id: int,
        cost: float,
    ) -> Dict[str, Any]:
        """PUT /inventory_items/{id}.json with a new unit cost."""
        return await self.request(
            "PUT",
            f"/inventory_items/{inventory_item_id}.json",
            json={"inventory_item": {"id": inventory_item_id, "cost": cost}},
        )

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
