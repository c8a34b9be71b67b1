"""Endpoint de webhook da Roblox.

Endpoint:
- POST /: eventos SampleNotification e RightToErasureRequest

Fluxo:
1. Valida assinatura (roblox-signature) sobre o body bruto
2. Parseia JSON e despacha por EventType
3. RightToErasureRequest: apaga os dados em cada universe e responde
   200 (tudo apagado) ou 500 (alguma deleção falhou)

Segurança:
- Assinatura inválida responde 401 sem interpretar o body
- Nenhum detalhe de falha volta ao chamador; só status + texto fixo
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request, Response, status

from api.connectors.roblox.webhook.receive import (
    InvalidJsonError,
    InvalidSignatureError,
    parse_webhook_request,
)
from app.bootstrap import get_erasure_use_case
from app.observability import get_correlation_id, reset_correlation_id, set_correlation_id
from app.protocols.models import EVENT_TYPE_ERASURE, EVENT_TYPE_SAMPLE, ErasureRequest
from config.settings import get_roblox_settings

logger = logging.getLogger(__name__)

router = APIRouter()


def _text_response(content: str, status_code: int) -> Response:
    return Response(content=content, media_type="text/plain", status_code=status_code)


async def _handle_erasure(payload: dict[str, Any]) -> Response:
    """Executa o use case de erasure e mapeia o resultado para HTTP."""
    request = ErasureRequest.from_event(payload)
    try:
        success = await get_erasure_use_case().execute(request)
    except Exception:
        logger.exception(
            "erasure_processing_failed",
            extra={"channel": "roblox", "correlation_id": get_correlation_id()},
        )
        success = False

    if success:
        return _text_response("OK", status.HTTP_200_OK)
    return _text_response("Internal Server Error", status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.post("/", response_model=None)
async def receive_webhook(request: Request) -> Response:
    """Recebimento de eventos da Roblox.

    Returns:
        200 (ok), 400 (evento desconhecido ou JSON inválido),
        401 (assinatura inválida) ou 500 (falha na erasure).
    """
    correlation_id = request.headers.get("x-correlation-id")
    token = set_correlation_id(correlation_id)

    try:
        settings = get_roblox_settings()

        # Body bruto: a assinatura cobre os bytes exatamente como recebidos
        raw_body = await request.body()

        try:
            payload = parse_webhook_request(
                raw_body=raw_body,
                headers=dict(request.headers),
                secret=settings.webhook_secret or None,
                signature_header=settings.signature_header,
                tolerance_seconds=settings.signature_tolerance_seconds,
            )
        except InvalidSignatureError as exc:
            logger.warning(
                "webhook_signature_invalid",
                extra={
                    "channel": "roblox",
                    "correlation_id": get_correlation_id(),
                    "error": str(exc),
                },
            )
            return _text_response("Unauthorized", status.HTTP_401_UNAUTHORIZED)
        except InvalidJsonError as exc:
            logger.warning(
                "webhook_json_invalid",
                extra={
                    "channel": "roblox",
                    "correlation_id": get_correlation_id(),
                    "error": str(exc),
                },
            )
            return _text_response("Bad Request", status.HTTP_400_BAD_REQUEST)

        event_type = payload.get("EventType")
        logger.info(
            "webhook_received",
            extra={
                "channel": "roblox",
                "correlation_id": get_correlation_id(),
                "event_type": str(event_type),
                "payload_size": len(raw_body),
            },
        )

        if event_type == EVENT_TYPE_SAMPLE:
            return _text_response("OK", status.HTTP_200_OK)

        if event_type == EVENT_TYPE_ERASURE:
            return await _handle_erasure(payload)

        logger.warning(
            "webhook_event_type_unhandled",
            extra={
                "channel": "roblox",
                "correlation_id": get_correlation_id(),
                "event_type": str(event_type),
            },
        )
        return _text_response("Unhandled event type", status.HTTP_400_BAD_REQUEST)

    finally:
        reset_correlation_id(token)
