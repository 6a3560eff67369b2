"""
Health check endpoints.
"""

from fastapi import APIRouter, Depends

from vigie.config.settings import Settings
from vigie.di.dependencies import get_app_settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(settings: Settings = Depends(get_app_settings)):
    """
    Overall health check.

    Does not touch the RPC endpoint; chainConfigured only reflects
    whether the required settings are present.
    """
    return {
        "status": "healthy",
        "service": "vigie",
        "version": settings.APP_VERSION,
        "chainConfigured": settings.chain_configured,
    }
