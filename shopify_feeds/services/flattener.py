"""
Flattening of GraphQL connection envelopes

Shopify wraps list fields in {"edges": [{"node": {...}}], "pageInfo": {...}}.
The feeds only care about the nodes, so every connection found below the
top-level value is replaced by the plain list of its nodes.
"""

from typing import Any


def _unwrap_connection(value: Any) -> Any:
    """Replace a connection object with its list of nodes"""
    if isinstance(value, dict) and value.get("edges") is not None:
        return [edge.get("node") for edge in value["edges"]]
    return value


def flatten_edges(value: Any) -> Any:
    """
    Recursively replace edges/node envelopes with lists of nodes

    Scalars and empty containers come back unchanged. Only children are
    unwrapped, so a connection passed in directly is walked but not replaced.
    """
    if not value or not isinstance(value, (dict, list)):
        return value

    if isinstance(value, dict):
        return {key: flatten_edges(_unwrap_connection(child)) for key, child in value.items()}

    return [flatten_edges(_unwrap_connection(child)) for child in value]
