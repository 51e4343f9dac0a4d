"""
Feed endpoints consumed by the importer
"""

from typing import Any, Awaitable, Callable, Dict, List, Optional

import httpx
from fastapi import APIRouter, Depends

from shopify_feeds.api.deps import get_credentials, get_transport
from shopify_feeds.core.config import Settings, get_settings
from shopify_feeds.core.credentials import ShopifyCredentials
from shopify_feeds.core.logging import get_logger
from shopify_feeds.models.responses import (
    CollectionFeedItem,
    ProductFeedItem,
    VariantFeedItem,
)
from shopify_feeds.services.feeds import FeedService
from shopify_feeds.services.graphql_client import ShopifyAdminClient

logger = get_logger(__name__)
router = APIRouter()


async def _build_feed(
    fetch: Callable[[FeedService], Awaitable[List[Dict[str, Any]]]],
    credentials: ShopifyCredentials,
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport],
) -> List[Dict[str, Any]]:
    logger.info("Feed request received", feed=fetch.__name__, store=credentials.store)

    client = ShopifyAdminClient(
        credentials,
        api_version=settings.SHOPIFY_API_VERSION,
        timeout=httpx.Timeout(
            settings.SHOPIFY_REQUEST_TIMEOUT, connect=settings.SHOPIFY_CONNECT_TIMEOUT
        ),
        transport=transport,
    )
    async with client:
        service = FeedService(
            client,
            disable_published_check=settings.DISABLE_PUBLISHED_CHECK,
            page_size=settings.SHOPIFY_PAGE_SIZE,
            max_pages=settings.SHOPIFY_MAX_PAGES or None,
        )
        return await fetch(service)


@router.get("/products", response_model=List[ProductFeedItem])
async def products_feed(
    credentials: ShopifyCredentials = Depends(get_credentials),
    settings: Settings = Depends(get_settings),
    transport: Optional[httpx.AsyncBaseTransport] = Depends(get_transport),
):
    """All products published to the app's sales channel"""
    return await _build_feed(FeedService.get_products, credentials, settings, transport)


@router.get("/variants", response_model=List[VariantFeedItem])
async def variants_feed(
    credentials: ShopifyCredentials = Depends(get_credentials),
    settings: Settings = Depends(get_settings),
    transport: Optional[httpx.AsyncBaseTransport] = Depends(get_transport),
):
    """All variants with a SKU, deduplicated by SKU"""
    return await _build_feed(FeedService.get_variants, credentials, settings, transport)


@router.get("/collections", response_model=List[CollectionFeedItem])
async def collections_feed(
    credentials: ShopifyCredentials = Depends(get_credentials),
    settings: Settings = Depends(get_settings),
    transport: Optional[httpx.AsyncBaseTransport] = Depends(get_transport),
):
    """All collections"""
    return await _build_feed(FeedService.get_collections, credentials, settings, transport)
