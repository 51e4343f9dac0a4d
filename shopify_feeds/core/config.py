"""
Core configuration for Shopify Feeds
"""

from pathlib import Path
from pydantic import Field
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Load environment variables from local.env
env_path = Path(__file__).parent.parent.parent / "local.env"
load_dotenv(env_path)


class Settings(BaseSettings):
    """Application settings

    Store credentials (SHOPIFY_URL, SHOPIFY_ADMIN_API_ACCESS_TOKEN and their
    store-suffixed variants) are not settings fields: they are resolved per
    request by shopify_feeds.core.credentials.
    """

    # API Configuration
    PROJECT_NAME: str = "Shopify Feeds"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Shopify Admin API
    SHOPIFY_API_VERSION: str = "2023-10"
    SHOPIFY_REQUEST_TIMEOUT: float = 30.0
    SHOPIFY_CONNECT_TIMEOUT: float = 10.0
    SHOPIFY_PAGE_SIZE: int = 250
    # 0 disables the cap
    SHOPIFY_MAX_PAGES: int = Field(default=1000, ge=0)

    # Feed filtering
    DISABLE_PUBLISHED_CHECK: bool = False

    # Logging Configuration
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_JSON: bool = False

    class Config:
        case_sensitive = True
        extra = "ignore"


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Settings dependency for the API layer"""
    return settings
