"""Settings específicas da integração Roblox.

Credenciais do webhook e da Open Cloud API, além dos parâmetros
do fluxo de Right to Erasure.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Constantes da Open Cloud API
OPEN_CLOUD_BASE_URL: str = "https://apis.roblox.com"
SIGNATURE_HEADER: str = "roblox-signature"
SIGNATURE_TOLERANCE_SECONDS: int = 10 * 60

# Layout das chaves usado pelos jogos (DataStore "PlayerData", chave "52/<userId>")
DEFAULT_DATASTORE_NAME: str = "PlayerData"
DEFAULT_ENTRY_KEY_PREFIX: str = "52/"


@dataclass(frozen=True)
class RobloxSettings:
    """Configurações da integração Roblox.

    Attributes:
        open_cloud_api_key: API key da Open Cloud com acesso à DataStore API
        webhook_secret: Secret usado pela Roblox para assinar os webhooks
        signature_header: Nome do header com a assinatura
        signature_tolerance_seconds: Janela máxima de idade da assinatura
        open_cloud_base_url: URL base da Open Cloud API
        request_timeout_seconds: Timeout por chamada de deleção
        datastore_name: DataStore onde ficam os dados do jogador
        entry_key_prefix: Prefixo da chave (concatenado ao userId)
        max_concurrency: Máximo de deleções simultâneas (1 = sequencial)
        empty_request_succeeds: Se pedidos sem userId/GameIds respondem sucesso
    """

    # Credenciais (carregadas de env)
    open_cloud_api_key: str = ""
    webhook_secret: str = ""

    # Webhook
    signature_header: str = SIGNATURE_HEADER
    signature_tolerance_seconds: int = SIGNATURE_TOLERANCE_SECONDS

    # Open Cloud
    open_cloud_base_url: str = OPEN_CLOUD_BASE_URL
    request_timeout_seconds: float = 10.0

    # Erasure
    datastore_name: str = DEFAULT_DATASTORE_NAME
    entry_key_prefix: str = DEFAULT_ENTRY_KEY_PREFIX
    max_concurrency: int = 1
    empty_request_succeeds: bool = True

    def missing_secrets(self) -> list[str]:
        """Retorna nomes das variáveis de secrets ausentes."""
        missing: list[str] = []
        if not self.open_cloud_api_key:
            missing.append("OPEN_CLOUD_API_KEY")
        if not self.webhook_secret:
            missing.append("WEBHOOK_SECRET")
        return missing

    def validate(self) -> list[str]:
        """Valida configurações mínimas da integração.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors = [f"{name} não configurado" for name in self.missing_secrets()]

        if not self.signature_header:
            errors.append("ROBLOX_SIGNATURE_HEADER não pode ser vazio")

        if self.signature_tolerance_seconds <= 0:
            errors.append("ROBLOX_SIGNATURE_TOLERANCE_SECONDS deve ser > 0")

        if self.request_timeout_seconds <= 0:
            errors.append("OPEN_CLOUD_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if not self.datastore_name:
            errors.append("ERASURE_DATASTORE_NAME não pode ser vazio")

        if self.max_concurrency < 1:
            errors.append("ERASURE_MAX_CONCURRENCY deve ser >= 1")

        return errors


def _load_from_env() -> RobloxSettings:
    """Carrega RobloxSettings a partir de variáveis de ambiente."""
    return RobloxSettings(
        open_cloud_api_key=os.getenv("OPEN_CLOUD_API_KEY", ""),
        webhook_secret=os.getenv("WEBHOOK_SECRET", ""),
        signature_header=os.getenv("ROBLOX_SIGNATURE_HEADER", SIGNATURE_HEADER).lower(),
        signature_tolerance_seconds=int(
            os.getenv("ROBLOX_SIGNATURE_TOLERANCE_SECONDS", str(SIGNATURE_TOLERANCE_SECONDS))
        ),
        open_cloud_base_url=os.getenv("OPEN_CLOUD_BASE_URL", OPEN_CLOUD_BASE_URL).rstrip("/"),
        request_timeout_seconds=float(os.getenv("OPEN_CLOUD_REQUEST_TIMEOUT_SECONDS", "10")),
        datastore_name=os.getenv("ERASURE_DATASTORE_NAME", DEFAULT_DATASTORE_NAME),
        entry_key_prefix=os.getenv("ERASURE_ENTRY_KEY_PREFIX", DEFAULT_ENTRY_KEY_PREFIX),
        max_concurrency=int(os.getenv("ERASURE_MAX_CONCURRENCY", "1")),
        empty_request_succeeds=os.getenv("ERASURE_EMPTY_REQUEST_SUCCEEDS", "true").lower()
        in ("true", "1", "yes"),
    )


@lru_cache(maxsize=1)
def get_roblox_settings() -> RobloxSettings:
    """Retorna instância cacheada de RobloxSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
