"""
Cursor pagination over aliased `results` connections
"""

from typing import Any, Dict, List, Optional

from shopify_feeds.core.exceptions import PaginationLimitError, UpstreamError
from shopify_feeds.core.logging import get_logger
from shopify_feeds.services.flattener import flatten_edges
from shopify_feeds.services.graphql_client import ShopifyAdminClient

logger = get_logger(__name__)


async def paginate(
    client: ShopifyAdminClient,
    payload: Dict[str, Any],
    max_pages: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """
    Execute a query page by page and concatenate the flattened results

    The query must alias its connection as `results` and accept a `$cursor`
    variable. Pages are requested one after another since each cursor comes
    from the previous response.

    Args:
        client: Client whose execute(payload) returns the data envelope
        payload: {"query": str, "variables": dict}, left unmodified
        max_pages: Hard cap on requests, None or 0 for no cap

    Returns:
        All nodes in upstream order

    Raises:
        PaginationLimitError: if more than max_pages pages would be needed
        UpstreamError: if a page's results are missing, null or not a connection
    """
    payload = {**payload, "variables": dict(payload.get("variables") or {})}
    results: List[Dict[str, Any]] = []
    page = 0

    while True:
        if max_pages and page >= max_pages:
            logger.error(
                "Pagination cap reached", max_pages=max_pages, items=len(results)
            )
            raise PaginationLimitError(max_pages, len(results))

        response = await client.execute(payload)
        page += 1

        page_items = flatten_edges(response).get("results")
        if not isinstance(page_items, list):
            raise UpstreamError(
                "Shopify response has no results connection", body=str(response)
            )
        results.extend(page_items)

        connection = response.get("results")
        page_info = (connection.get("pageInfo") if isinstance(connection, dict) else None) or {}
        has_next_page = bool(page_info.get("hasNextPage"))
        logger.debug(
            "Fetched page",
            page=page,
            items=len(page_items),
            has_next_page=has_next_page,
        )

        if not has_next_page:
            break

        payload["variables"] = {**payload["variables"], "cursor": page_info.get("endCursor")}

    logger.info("Pagination complete", pages=page, items=len(results))
    return results
