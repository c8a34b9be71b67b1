"""Webhook Roblox: assinatura e parsing seguro."""

from ..signature import compute_webhook_signature, verify_webhook_signature
from .receive import (
    InvalidJsonError,
    InvalidSignatureError,
    WebhookRequestError,
    parse_webhook_request,
)

__all__ = [
    "InvalidJsonError",
    "InvalidSignatureError",
    "WebhookRequestError",
    "compute_webhook_signature",
    "parse_webhook_request",
    "verify_webhook_signature",
]
