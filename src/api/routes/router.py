"""Montagem das rotas do relay."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.tally.router import router as tally_router


def create_api_router() -> APIRouter:
    """Router raiz: ``/health`` e o webhook do Tally (``/`` e ``/webhook/tally``)."""
    api_router = APIRouter()
    api_router.include_router(health_router, tags=["health"])
    api_router.include_router(tally_router, tags=["tally"])
    return api_router
