"""
Shopify Feeds - importable JSON feeds of Shopify Admin API resources
"""

__version__ = "1.0.0"
