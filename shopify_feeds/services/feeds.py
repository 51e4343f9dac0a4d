"""
Feed services for products, variants and collections

Each feed paginates one Admin API connection and reshapes the nodes into the
records served to the importer.
"""

from typing import Any, Dict, List, Optional

from shopify_feeds.core.logging import get_logger
from shopify_feeds.services.graphql_client import ShopifyAdminClient
from shopify_feeds.services.paginator import paginate
from shopify_feeds.services.queries import (
    COLLECTIONS_QUERY,
    PRODUCTS_QUERY,
    VARIANTS_QUERY,
)

logger = get_logger(__name__)

# https://shopify.dev/api/admin-graphql/2022-04/enums/ProductStatus
ACTIVE_STATUS = "ACTIVE"

PUBLISHED_FIELD = "publishedOnCurrentPublication"


def filter_published_products(products: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Keep products published to the app's sales channel, without the flag"""
    return [
        {key: value for key, value in product.items() if key != PUBLISHED_FIELD}
        for product in products
        if product.get(PUBLISHED_FIELD)
    ]


def filter_variants_with_sku(variants: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [variant for variant in variants if variant.get("sku")]


def filter_published_variants(variants: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Drop variants whose product isn't published to the app's sales channel

    This is how wholesale-only products are kept out of the public feed.
    """
    return [
        variant
        for variant in variants
        if (variant.get("product") or {}).get(PUBLISHED_FIELD)
    ]


def dedupe_by_sku(variants: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Keep one variant per SKU, preferring active products

    Shopify allows the same SKU on several variants but the importer uses it
    as the unique key. The first occurrence holds the SKU's position. A later
    duplicate replaces it in place unless the held variant's product is
    ACTIVE.
    """
    deduped: List[Dict[str, Any]] = []
    positions: Dict[Any, int] = {}

    for variant in variants:
        sku = variant.get("sku")
        if sku not in positions:
            positions[sku] = len(deduped)
            deduped.append(variant)
            continue

        index = positions[sku]
        existing_status = (deduped[index].get("product") or {}).get("status")
        if existing_status != ACTIVE_STATUS:
            deduped[index] = variant

    return deduped


def build_dashboard_title(variant: Dict[str, Any]) -> str:
    """Title for the CMS dashboard, e.g. "Shirt - Red (R1)" """
    product_title = (variant.get("product") or {}).get("title") or ""
    title = f"{product_title} - {variant.get('title') or ''}"
    sku = variant.get("sku")
    if sku:
        title += f" ({sku})"
    return title


def strip_variant_filter_fields(variant: Dict[str, Any]) -> Dict[str, Any]:
    """Remove the product fields only requested for filtering"""
    stripped = dict(variant)
    product = variant.get("product")
    if isinstance(product, dict):
        stripped["product"] = {
            key: value
            for key, value in product.items()
            if key not in ("status", PUBLISHED_FIELD)
        }
    return stripped


class FeedService:
    """Builds the importable feeds for one store"""

    def __init__(
        self,
        client: ShopifyAdminClient,
        disable_published_check: bool = False,
        page_size: int = 250,
        max_pages: Optional[int] = None,
    ):
        self.client = client
        self.disable_published_check = disable_published_check
        self.page_size = page_size
        self.max_pages = max_pages

    async def _fetch_all(self, query: str) -> List[Dict[str, Any]]:
        return await paginate(
            self.client,
            {"query": query, "variables": {"first": self.page_size}},
            max_pages=self.max_pages,
        )

    async def get_products(self) -> List[Dict[str, Any]]:
        """Get all products published to the current publication"""
        products = await self._fetch_all(PRODUCTS_QUERY)
        published = filter_published_products(products)
        logger.info(
            "Products feed built", fetched=len(products), published=len(published)
        )
        return published

    async def get_variants(self) -> List[Dict[str, Any]]:
        """Get all variants of all products, one per SKU"""
        variants = await self._fetch_all(VARIANTS_QUERY)
        fetched = len(variants)

        variants = filter_variants_with_sku(variants)
        with_sku = len(variants)

        if not self.disable_published_check:
            variants = filter_published_variants(variants)
        published = len(variants)

        variants = dedupe_by_sku(variants)

        records = []
        for variant in variants:
            record = strip_variant_filter_fields(variant)
            record["dashboardTitle"] = build_dashboard_title(variant)
            records.append(record)

        logger.info(
            "Variants feed built",
            fetched=fetched,
            with_sku=with_sku,
            published=published,
            unique_skus=len(records),
            published_check=not self.disable_published_check,
        )
        return records

    async def get_collections(self) -> List[Dict[str, Any]]:
        """Get all collections"""
        collections = await self._fetch_all(COLLECTIONS_QUERY)
        logger.info("Collections feed built", fetched=len(collections))
        return collections
