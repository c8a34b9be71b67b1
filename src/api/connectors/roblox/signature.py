"""Validação da assinatura dos webhooks da Roblox.

Header (ex: roblox-signature): ``t=<unix_seconds>,v1=<base64 HMAC-SHA256>``.
A base assinada é ``<timestamp>.<body bruto>``.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import re
import time
from typing import TYPE_CHECKING

from config.settings.roblox import SIGNATURE_TOLERANCE_SECONDS

if TYPE_CHECKING:
    from collections.abc import Callable

# Tamanho dos marcadores "t=" e "v1=" removidos de cada campo
TIMESTAMP_MARKER_LENGTH = 2
HASH_MARKER_LENGTH = 3

# Só os dígitos iniciais contam: "1760000000.5" -> 1760000000, "1_760" -> 1
_LEADING_INT_RE = re.compile(r"\s*([+-]?[0-9]+)", re.ASCII)


def _as_bytes(value: bytes | str) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else value


def _sign(timestamp: str, raw_body: bytes, secret: str) -> str:
    base = timestamp.encode("utf-8") + b"." + raw_body
    digest = hmac.new(secret.encode("utf-8"), base, hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii")


def _parse_timestamp(timestamp: str) -> int | None:
    match = _LEADING_INT_RE.match(timestamp)
    return int(match.group(1)) if match else None


def _split_header(signature_header: str) -> tuple[str, str] | None:
    parts = signature_header.split(",")
    if len(parts) != 2:
        return None
    timestamp = parts[0][TIMESTAMP_MARKER_LENGTH:]
    expected_hash = parts[1][HASH_MARKER_LENGTH:]
    if not timestamp or not expected_hash:
        return None
    return timestamp, expected_hash


def verify_webhook_signature(
    raw_body: bytes | str,
    signature_header: str | None,
    secret: str,
    *,
    tolerance_seconds: int = SIGNATURE_TOLERANCE_SECONDS,
    now: Callable[[], float] = time.time,
) -> bool:
    """Valida autenticidade e idade do webhook.

    Args:
        raw_body: Corpo bruto do request, exatamente como recebido
        signature_header: Valor do header de assinatura (None se ausente)
        secret: Secret do webhook
        tolerance_seconds: Idade máxima aceita (exclusivo)
        now: Relógio em segundos unix (injetável em testes)

    Returns:
        True se o hash confere e ``now - timestamp < tolerance_seconds``.
        Timestamps no futuro são aceitos.
    """
    if not signature_header:
        return False

    fields = _split_header(signature_header)
    if fields is None:
        return False
    timestamp, expected_hash = fields

    computed = _sign(timestamp, _as_bytes(raw_body), secret)
    if not hmac.compare_digest(computed.encode("ascii"), expected_hash.encode("utf-8")):
        return False

    signed_at = _parse_timestamp(timestamp)
    if signed_at is None:
        return False

    return int(now()) - signed_at < tolerance_seconds


def compute_webhook_signature(
    raw_body: bytes | str,
    secret: str,
    timestamp: int,
) -> str:
    """Monta o header de assinatura no formato enviado pela Roblox.

    Útil para testes e para disparar webhooks localmente.
    """
    return f"t={timestamp},v1={_sign(str(timestamp), _as_bytes(raw_body), secret)}"
