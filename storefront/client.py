"""
Storefront API Client

Async HTTP client for the storefront API. After a successful login the
client remembers the email and sends it as X-User-Email on cart requests.
"""

import logging
from typing import Any, Optional

import httpx

from .security.identity import IDENTITY_HEADER

logger = logging.getLogger(__name__)


class StorefrontClient:
    """Client for the storefront REST API"""

    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 30.0,
    ):
        """
        Initialize storefront client.

        Args:
            base_url: Base URL of the storefront service
            transport: Optional httpx transport, e.g. httpx.ASGITransport(app=app)
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self._http_client = httpx.AsyncClient(
            base_url=self.base_url,
            transport=transport,
            timeout=timeout,
        )
        self.current_email: Optional[str] = None

    async def close(self) -> None:
        """Close HTTP client"""
        await self._http_client.aclose()

    @property
    def is_logged_in(self) -> bool:
        return self.current_email is not None

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.current_email:
            headers[IDENTITY_HEADER] = self.current_email
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        body: Optional[dict] = None,
    ) -> Any:
        response = await self._http_client.request(
            method=method,
            url=path,
            headers=self._headers(),
            json=body,
        )

        if response.status_code >= 400:
            logger.error(f"Request failed: {method} {path} {response.status_code} - {response.text}")
            response.raise_for_status()

        return response.json()

    # ==================== Account APIs ====================

    async def register(self, email: str, password: str) -> dict:
        """Register a new account"""
        return await self._request("POST", "/api/register", body={"email": email, "password": password})

    async def login(self, email: str, password: str) -> dict:
        """Log in and remember the email as this client's identity"""
        result = await self._request("POST", "/api/login", body={"email": email, "password": password})
        if result.get("success"):
            self.current_email = email
        return result

    def logout(self) -> None:
        """Forget the identity; there is nothing to revoke server-side"""
        self.current_email = None

    # ==================== Product APIs ====================

    async def get_products(self) -> list[dict]:
        """Get the full catalog"""
        return await self._request("GET", "/api/products")

    # ==================== Cart APIs ====================

    async def get_cart(self) -> dict:
        """Get the current user's cart"""
        return await self._request("GET", "/api/cart")

    async def update_cart(self, cart: dict) -> dict:
        """Overwrite the current user's whole cart"""
        return await self._request("POST", "/api/cart", body={"cart": cart})

    async def add_to_cart(self, product_id: int) -> dict:
        """Add one unit of a product"""
        return await self._request("POST", "/api/cart/items", body={"product_id": product_id})

    async def remove_from_cart(self, product_id: int) -> dict:
        """Remove one unit of a product"""
        return await self._request("DELETE", f"/api/cart/items/{product_id}")
