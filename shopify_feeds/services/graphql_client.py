"""
Shopify Admin GraphQL API client
"""

from typing import Any, Dict, Optional

import httpx

from shopify_feeds.core.credentials import ShopifyCredentials
from shopify_feeds.core.exceptions import UpstreamError
from shopify_feeds.core.logging import get_logger

logger = get_logger(__name__)


class ShopifyAdminClient:
    """Executes GraphQL documents against one store's Admin API"""

    def __init__(
        self,
        credentials: ShopifyCredentials,
        api_version: str = "2023-10",
        timeout: Optional[httpx.Timeout] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.credentials = credentials
        self.api_version = api_version
        self.endpoint = credentials.graphql_url(api_version)
        self.timeout = timeout or httpx.Timeout(30.0, connect=10.0)
        self.transport = transport

        # HTTP client
        self.http_client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self):
        """Async context manager entry"""
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit"""
        await self.close()

    async def connect(self):
        """Initialize HTTP client"""
        if self.http_client is None:
            self.http_client = httpx.AsyncClient(
                timeout=self.timeout,
                transport=self.transport,
                headers={
                    "Content-Type": "application/json",
                    "X-Shopify-Access-Token": self.credentials.token,
                },
            )

    async def close(self):
        """Close HTTP client"""
        if self.http_client:
            await self.http_client.aclose()
            self.http_client = None

    async def execute(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Execute a GraphQL payload and unwrap its data envelope

        Args:
            payload: {"query": str, "variables": dict}

        Returns:
            The value of the response's "data" key

        Raises:
            UpstreamError: on transport failure, non-2xx status, a body that
                isn't a JSON object, or a body without data
        """
        await self.connect()

        try:
            response = await self.http_client.post(self.endpoint, json=payload)
        except httpx.HTTPError as e:
            logger.error(
                "Shopify request failed",
                endpoint=self.endpoint,
                error=f"{type(e).__name__}: {e}",
            )
            raise UpstreamError(
                f"Shopify request failed: {type(e).__name__}: {e}", cause=e
            ) from e

        body = response.text

        if response.is_error:
            logger.error(
                "Shopify returned an error status",
                endpoint=self.endpoint,
                status=response.status_code,
            )
            raise UpstreamError(
                f"Shopify returned HTTP {response.status_code}",
                body=body,
                upstream_status=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamError(
                "Shopify returned a body that is not JSON",
                body=body,
                upstream_status=response.status_code,
                cause=e,
            ) from e

        if not isinstance(data, dict) or not isinstance(data.get("data"), dict):
            logger.error("Shopify response has no data", body=body)
            raise UpstreamError(body, body=body, upstream_status=response.status_code)

        # Partial success, keep the data the way the API hands it back
        if data.get("errors"):
            logger.warning("Shopify response included errors", errors=data["errors"])

        return data["data"]
