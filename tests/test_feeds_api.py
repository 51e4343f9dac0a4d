"""
Tests for the feed endpoints
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from shopify_feeds.api.deps import get_transport
from shopify_feeds.core.config import Settings, get_settings
from shopify_feeds.main import app

from .fakes import FakeShopify, make_page


@pytest.fixture
def feed_settings():
    """Settings used by the endpoints under test"""
    return Settings(DISABLE_PUBLISHED_CHECK=False, SHOPIFY_MAX_PAGES=1000)


@pytest.fixture
def api(feed_settings):
    """Test client wired to a swappable fake Shopify"""
    holder = {"shopify": FakeShopify([])}
    app.dependency_overrides[get_settings] = lambda: feed_settings
    app.dependency_overrides[get_transport] = lambda: holder["shopify"].transport

    def use(shopify: FakeShopify) -> TestClient:
        holder["shopify"] = shopify
        return TestClient(app)

    yield use
    app.dependency_overrides.clear()


class TestProductsFeed:
    """Test suite for GET /feeds/products"""

    def test_two_pages_in_order(self, api, shopify_env):
        shopify = FakeShopify.with_pages(
            [
                make_page(
                    [{"title": "Shirt", "handle": "shirt", "publishedOnCurrentPublication": True}],
                    True,
                    "c1",
                ),
                make_page(
                    [{"title": "Hat", "handle": "hat", "publishedOnCurrentPublication": True}],
                    False,
                ),
            ]
        )

        response = api(shopify).get("/feeds/products")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        assert response.json() == [
            {"title": "Shirt", "handle": "shirt"},
            {"title": "Hat", "handle": "hat"},
        ]
        assert len(shopify.requests) == 2
        assert shopify.payloads[1]["variables"]["cursor"] == "c1"

    def test_missing_url_fails_before_any_request(self, api, shopify_env):
        shopify = FakeShopify.with_pages([make_page([])])

        response = api(shopify).get("/feeds/products", params={"store": "canada"})

        assert response.status_code == 500
        body = response.json()
        assert body["success"] is False
        assert body["error_code"] == "CONFIG_ERROR"
        assert body["message"] == "Missing SHOPIFY_URL_canada"
        assert len(shopify.requests) == 0

    def test_store_param_selects_credentials(self, api, shopify_env):
        shopify_env.setenv("SHOPIFY_URL_canada", "https://canada-shop.myshopify.com")
        shopify_env.setenv("SHOPIFY_API_PASSWORD_canada", "legacy_canada")
        shopify = FakeShopify.with_pages([make_page([])])

        response = api(shopify).get("/feeds/products", params={"store": "canada"})

        assert response.status_code == 200
        assert response.json() == []
        request = shopify.requests[0]
        assert request.url.host == "canada-shop.myshopify.com"
        assert request.url.path == "/admin/api/2023-10/graphql.json"
        assert request.headers["X-Shopify-Access-Token"] == "legacy_canada"

    def test_upstream_error_returns_502(self, api, shopify_env):
        shopify = FakeShopify(
            [httpx.Response(200, json={"errors": [{"message": "Throttled"}]})]
        )

        response = api(shopify).get("/feeds/products")

        assert response.status_code == 502
        body = response.json()
        assert body["error"] == "UpstreamError"
        assert "Throttled" in body["message"]


class TestVariantsFeed:
    """Test suite for GET /feeds/variants"""

    def _variants_page(self):
        return make_page(
            [
                {
                    "title": "Red",
                    "sku": "R1",
                    "product": {
                        "title": "Shirt",
                        "handle": "shirt",
                        "status": "ACTIVE",
                        "publishedOnCurrentPublication": True,
                    },
                },
                {
                    "title": "Blue",
                    "sku": "B1",
                    "product": {
                        "title": "Wholesale Shirt",
                        "handle": "wholesale-shirt",
                        "status": "ACTIVE",
                        "publishedOnCurrentPublication": False,
                    },
                },
            ]
        )

    def test_variant_records(self, api, shopify_env):
        shopify = FakeShopify.with_pages([self._variants_page()])

        response = api(shopify).get("/feeds/variants")

        assert response.status_code == 200
        assert response.json() == [
            {
                "title": "Red",
                "sku": "R1",
                "dashboardTitle": "Shirt - Red (R1)",
                "product": {"title": "Shirt", "handle": "shirt"},
            }
        ]

    def test_published_check_disabled(self, api, shopify_env, feed_settings):
        feed_settings.DISABLE_PUBLISHED_CHECK = True
        shopify = FakeShopify.with_pages([self._variants_page()])

        response = api(shopify).get("/feeds/variants")

        assert [v["sku"] for v in response.json()] == ["R1", "B1"]

    def test_null_connection_with_errors_returns_502(self, api, shopify_env):
        shopify = FakeShopify(
            [
                httpx.Response(
                    200,
                    json={
                        "data": {"results": None},
                        "errors": [{"message": "Access denied for productVariants field."}],
                    },
                )
            ]
        )

        response = api(shopify).get("/feeds/variants")

        assert response.status_code == 502
        assert response.json()["error_code"] == "UPSTREAM_ERROR"
        assert len(shopify.requests) == 1


class TestCollectionsFeed:
    """Test suite for GET /feeds/collections"""

    def test_collections(self, api, shopify_env):
        shopify = FakeShopify.with_pages(
            [make_page([{"title": "Summer", "handle": "summer"}])]
        )

        response = api(shopify).get("/feeds/collections")

        assert response.status_code == 200
        assert response.json() == [{"title": "Summer", "handle": "summer"}]


class TestServiceEndpoints:
    """Test suite for the root and health endpoints"""

    def test_health(self, api):
        response = api(FakeShopify([])).get("/health/")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_root(self, api):
        response = api(FakeShopify([])).get("/")

        assert response.status_code == 200
        assert "/feeds/variants" in response.json()["feeds"]
