"""
Response models for Shopify Feeds
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, Field
from datetime import datetime


class BaseResponse(BaseModel):
    """Base response model"""

    success: bool = Field(..., description="Operation success status")
    message: str = Field(..., description="Response message")
    timestamp: datetime = Field(
        default_factory=datetime.now, description="Response timestamp"
    )


class ErrorResponse(BaseResponse):
    """Error response model"""

    success: bool = False
    error: str = Field(..., description="Exception type")
    error_code: Optional[str] = Field(None, description="Error code")
    details: Optional[Dict[str, Any]] = Field(
        None, description="Additional error details"
    )


class HealthCheckResponse(BaseResponse):
    """Response model for health check"""

    success: bool = True
    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service name")
    version: str = Field(..., description="Service version")


class ProductFeedItem(BaseModel):
    """A product in the products feed"""

    title: Optional[str] = None
    handle: Optional[str] = None


class VariantProduct(BaseModel):
    """Parent product of a variant"""

    title: Optional[str] = None
    handle: Optional[str] = None


class VariantFeedItem(BaseModel):
    """A variant in the variants feed"""

    title: Optional[str] = None
    sku: Optional[str] = None
    dashboardTitle: str = Field(..., description="Product title - variant title (sku)")
    product: Optional[VariantProduct] = None


class CollectionFeedItem(BaseModel):
    """A collection in the collections feed"""

    title: Optional[str] = None
    handle: Optional[str] = None
