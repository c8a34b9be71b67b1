"""Agregador de rotas — registra todos os routers.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.roblox.router import router as roblox_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health e status (na raiz: /health e /status)
    api_router.include_router(health_router, tags=["health"])

    # Webhook da Roblox na raiz (URL cadastrada no Creator Dashboard)
    api_router.include_router(roblox_router, tags=["roblox"])

    return api_router
