"""Endpoints de health check e status de configuração."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from fastapi import APIRouter, Response, status
from pydantic import BaseModel

from config.settings import get_base_settings, get_roblox_settings

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe — verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=get_base_settings().service_name,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/status")
async def status_check() -> Response:
    """Verifica se OPEN_CLOUD_API_KEY e WEBHOOK_SECRET estão configurados.

    Returns:
        200 "OK" ou 500 com os nomes dos secrets ausentes.
    """
    missing = get_roblox_settings().missing_secrets()
    if missing:
        logger.warning("status_missing_secrets", extra={"missing": missing})
        return Response(
            content=f"Missing secrets: {' '.join(missing)}",
            media_type="text/plain",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return Response(content="OK", media_type="text/plain", status_code=status.HTTP_200_OK)
