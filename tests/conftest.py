"""
Shared fixtures for Shopify Feeds tests
"""

import pytest

from shopify_feeds.core.credentials import ShopifyCredentials


@pytest.fixture
def credentials():
    """Credentials for a test store"""
    return ShopifyCredentials(
        url="https://test-shop.myshopify.com", token="shpat_test_token"
    )


@pytest.fixture
def shopify_env(monkeypatch):
    """Environment with credentials for the default store only"""
    for name in (
        "SHOPIFY_URL",
        "SHOPIFY_ADMIN_API_ACCESS_TOKEN",
        "SHOPIFY_API_PASSWORD",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("SHOPIFY_URL", "https://test-shop.myshopify.com")
    monkeypatch.setenv("SHOPIFY_ADMIN_API_ACCESS_TOKEN", "shpat_test_token")
    return monkeypatch
