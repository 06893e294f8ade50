"""
Health check endpoints.
"""

from fastapi import APIRouter

from bess_console.core.config import settings
from bess_console.core.dependencies import Store

router = APIRouter()


@router.get("")
async def health_check() -> dict:
    """Health check básico."""
    return {
        "status": "healthy",
        "version": settings.VERSION,
    }


@router.get("/ready")
async def readiness_check(store: Store) -> dict:
    """
    Readiness check.

    O único recurso é o store em memória, já semeado na primeira chamada.
    """
    return {
        "status": "ready",
        "checks": {
            "store": "ok",
            "clients": len(store.clients),
            "bess_systems": len(store.bess_systems),
        },
    }
