"""
Health Check Endpoint
"""
from fastapi import APIRouter
from datetime import datetime

from app.api.schemas import HealthCheckResponse
from app.config import settings

router = APIRouter()


@router.get("/health", response_model=HealthCheckResponse)
async def health_check():
    """
    Health check endpoint

    Returns the current health status of the API and the deployment it targets.
    """
    return HealthCheckResponse(
        status="healthy",
        version=settings.API_VERSION,
        factory=settings.FACTORY_ADDRESS,
        chain=settings.CHAIN,
        graph_api_configured=bool(settings.GRAPH_API_KEY),
        timestamp=datetime.utcnow()
    )
