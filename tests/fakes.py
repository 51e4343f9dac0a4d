"""
Fakes standing in for the Shopify Admin API in tests
"""

import copy
import json
from typing import Any, Dict, List, Optional

import httpx


def make_page(
    nodes: List[Dict[str, Any]],
    has_next_page: bool = False,
    end_cursor: Optional[str] = None,
) -> Dict[str, Any]:
    """Build the data envelope of one page of an aliased `results` connection"""
    return {
        "results": {
            "edges": [{"node": node} for node in nodes],
            "pageInfo": {"hasNextPage": has_next_page, "endCursor": end_cursor},
        }
    }


class StubClient:
    """Stands in for ShopifyAdminClient, replaying data envelopes in order"""

    def __init__(self, pages: List[Dict[str, Any]]):
        self.pages = list(pages)
        self.payloads: List[Dict[str, Any]] = []

    async def execute(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        self.payloads.append(copy.deepcopy(payload))
        return self.pages[len(self.payloads) - 1]


class FakeShopify:
    """httpx mock transport replaying GraphQL responses and recording requests"""

    def __init__(self, responses: List[httpx.Response]):
        self.responses = list(responses)
        self.requests: List[httpx.Request] = []
        self.transport = httpx.MockTransport(self.handler)

    @classmethod
    def with_pages(cls, pages: List[Dict[str, Any]]) -> "FakeShopify":
        return cls([httpx.Response(200, json={"data": page}) for page in pages])

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responses[len(self.requests) - 1]

    @property
    def payloads(self) -> List[Dict[str, Any]]:
        return [json.loads(request.content) for request in self.requests]


