"""
Request dependencies for the feed endpoints
"""

from typing import Optional

import httpx
from fastapi import Query

from shopify_feeds.core.credentials import ShopifyCredentials, resolve_credentials


def get_credentials(
    store: Optional[str] = Query(
        None, description="Store identifier selecting suffixed credentials"
    ),
) -> ShopifyCredentials:
    """Resolve credentials for the requested store, every request"""
    return resolve_credentials(store)


def get_transport() -> Optional[httpx.AsyncBaseTransport]:
    """Transport for the Shopify client, None uses httpx's network transport"""
    return None
