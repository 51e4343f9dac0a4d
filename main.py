#!/usr/bin/env python3
"""
Main entry point for Shopify Feeds
"""

import uvicorn

from shopify_feeds.core.config import settings
from shopify_feeds.core.logging import setup_logging

if __name__ == "__main__":
    # Setup logging before starting uvicorn
    setup_logging()

    uvicorn.run(
        "shopify_feeds.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level="info" if not settings.DEBUG else "debug",
        log_config=None,  # Keep our logging configuration
    )
