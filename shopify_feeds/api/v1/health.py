"""
Health check API endpoints
"""

from fastapi import APIRouter, Depends

from shopify_feeds.core.config import Settings, get_settings
from shopify_feeds.models.responses import HealthCheckResponse

router = APIRouter()


@router.get("/", response_model=HealthCheckResponse)
async def health_check_endpoint(
    settings: Settings = Depends(get_settings),
) -> HealthCheckResponse:
    """
    Liveness check, does not call Shopify

    Returns:
        HealthCheckResponse with service status
    """
    return HealthCheckResponse(
        success=True,
        message="Service is healthy",
        status="healthy",
        service=settings.PROJECT_NAME,
        version=settings.VERSION,
    )
