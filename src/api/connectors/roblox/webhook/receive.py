"""Parse e validação inicial do webhook (sem PII)."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from config.settings.roblox import SIGNATURE_HEADER, SIGNATURE_TOLERANCE_SECONDS

from ..signature import verify_webhook_signature

if TYPE_CHECKING:
    from collections.abc import Mapping


class WebhookRequestError(ValueError):
    """Erro base para falhas de webhook."""


class InvalidSignatureError(WebhookRequestError):
    """Assinatura ausente, inválida ou expirada."""


class InvalidJsonError(WebhookRequestError):
    """JSON inválido no payload do webhook."""


def parse_webhook_request(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str | None,
    *,
    signature_header: str = SIGNATURE_HEADER,
    tolerance_seconds: int = SIGNATURE_TOLERANCE_SECONDS,
) -> dict[str, Any]:
    """Valida assinatura e só então parseia o JSON do webhook.

    Args:
        raw_body: Corpo bruto do request
        headers: Headers recebidos (chaves em minúsculas)
        secret: Secret do webhook
        signature_header: Nome do header de assinatura
        tolerance_seconds: Idade máxima da assinatura

    Raises:
        InvalidSignatureError: Se secret não configurado ou assinatura inválida
        InvalidJsonError: Se o JSON estiver inválido ou não for objeto

    Returns:
        Payload como dict
    """
    if not secret:
        raise InvalidSignatureError("missing_webhook_secret")

    signature = headers.get(signature_header.lower())
    if not verify_webhook_signature(
        raw_body,
        signature,
        secret,
        tolerance_seconds=tolerance_seconds,
    ):
        raise InvalidSignatureError("invalid_signature")

    try:
        payload = json.loads(raw_body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonError("invalid_json") from exc

    if not isinstance(payload, dict):
        raise InvalidJsonError("payload_not_object")

    return payload
