"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from modules.client import ApiClientError
from modules.content import HealthClient
from shared.config import get_settings

from ..dependencies import get_health_client

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    backend: str
    message: str | None = None


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the portal is running. Does not contact the backend.
    """
    return HealthResponse(status="healthy", version=get_settings().app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(
    health: HealthClient = Depends(get_health_client),
) -> ReadinessResponse:
    """
    Readiness check endpoint.

    Probes the church backend's health endpoint.
    """
    try:
        response = await health.check()
    except ApiClientError as e:
        logger.warning(f"Backend health probe failed: {e.message}")
        return ReadinessResponse(status="degraded", backend="unreachable", message=e.message)

    if not response.success:
        return ReadinessResponse(status="degraded", backend="unhealthy", message=response.message)
    return ReadinessResponse(status="ready", backend="reachable", message=response.message)
