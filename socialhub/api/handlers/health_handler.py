"""
Health Check Handler

Provides health check endpoints for monitoring and load balancers, plus
the ``/api`` liveness message clients ping on startup.
"""

from fastapi import APIRouter

from socialhub.config.settings import settings
from socialhub.shared.schemas.common import HealthResponse, MessageResponse


router = APIRouter()


@router.get("/api", response_model=MessageResponse)
async def index():
    """
    Liveness message.

    Returns:
        MessageResponse saying the API is up
    """
    return MessageResponse(message="All good in here")


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Basic health check endpoint.

    Returns:
        HealthResponse with service status
    """
    return HealthResponse(
        status="healthy",
        service=settings.APP_NAME.lower(),
        version=settings.APP_VERSION,
    )


@router.get("/ready")
async def readiness_check():
    """
    Readiness check for Kubernetes/load balancers.

    Returns:
        Simple ready status
    """
    return {"status": "ready"}


@router.get("/live")
async def liveness_check():
    """
    Liveness check for Kubernetes.

    Returns:
        Simple alive status
    """
    return {"status": "alive"}
