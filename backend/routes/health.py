"""
Health check endpoint.
"""
from datetime import datetime, timezone
import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from config import settings
from exceptions import GatewayRequestError
from gateway_client import supabase_gateway

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check():
    """Health check — verifies the Supabase auth service answers."""
    try:
        await supabase_gateway.request("GET", f"{settings.auth_url}/health")
        return {
            "status": "healthy",
            "gateway_connected": True,
            "environment": settings.environment,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
    except GatewayRequestError as e:
        logger.error(f"Health check failed: {e}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "unhealthy",
                "gateway_connected": False,
                "environment": settings.environment,
                "error": str(e),
            },
        )
