"""
Per-request resolution of Shopify Admin API credentials

Credentials live in the environment as SHOPIFY_URL and
SHOPIFY_ADMIN_API_ACCESS_TOKEN (or the legacy SHOPIFY_API_PASSWORD). Several
stores can be served by one deployment by suffixing the variables with a
store identifier, e.g. SHOPIFY_URL_CANADA, selected with ?store=CANADA.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from shopify_feeds.core.exceptions import EnvironmentVariableError

URL_VAR = "SHOPIFY_URL"
TOKEN_VAR = "SHOPIFY_ADMIN_API_ACCESS_TOKEN"
LEGACY_TOKEN_VAR = "SHOPIFY_API_PASSWORD"


@dataclass(frozen=True)
class ShopifyCredentials:
    """Base URL and access token for one store"""

    url: str
    token: str
    store: Optional[str] = None

    def graphql_url(self, api_version: str) -> str:
        """Admin GraphQL endpoint for the given API version"""
        return f"{self.url.rstrip('/')}/admin/api/{api_version}/graphql.json"


def resolve_credentials(
    store: Optional[str] = None, environ: Optional[Mapping[str, str]] = None
) -> ShopifyCredentials:
    """
    Resolve credentials for a store from the environment

    Args:
        store: Optional store identifier appended to the variable names
        environ: Mapping to read from, defaults to os.environ

    Returns:
        ShopifyCredentials for the store

    Raises:
        EnvironmentVariableError: if the URL or the token is missing or empty
    """
    if environ is None:
        environ = os.environ

    suffix = f"_{store}" if store else ""

    url = environ.get(URL_VAR + suffix)
    if not url:
        raise EnvironmentVariableError(URL_VAR + suffix, details={"store": store})

    token = environ.get(TOKEN_VAR + suffix) or environ.get(LEGACY_TOKEN_VAR + suffix)
    if not token:
        raise EnvironmentVariableError(TOKEN_VAR + suffix, details={"store": store})

    return ShopifyCredentials(url=url, token=token, store=store or None)
