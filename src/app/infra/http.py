"""Cliente HTTP base para chamadas externas (httpx).

Sem retries: cada chamada é tentada uma única vez e o chamador
decide o que fazer com a resposta.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 10.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpError(Exception):
    """Erro de requisição HTTP sem dados sensíveis."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class HttpClient:
    """Cliente HTTP simples para chamadas externas.

    Args:
        config: Timeout, headers padrão e verificação TLS.
        transport: Transport httpx opcional (ex: httpx.MockTransport em testes).
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport

    async def delete(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Executa DELETE e retorna a resposta, qualquer que seja o status.

        Raises:
            HttpError: Em timeout ou falha de conexão/transporte.
        """
        merged_headers = {**self._config.default_headers, **(headers or {})}
        try:
            async with httpx.AsyncClient(
                verify=self._config.verify_ssl,
                transport=self._transport,
            ) as client:
                return await client.delete(
                    url,
                    params=params,
                    headers=merged_headers,
                    timeout=self._config.timeout_seconds,
                )
        except httpx.TimeoutException as exc:
            logger.warning("http_timeout", extra={"method": "DELETE"})
            raise HttpError("http_timeout") from exc
        except httpx.HTTPError as exc:
            logger.warning(
                "http_transport_error",
                extra={"method": "DELETE", "error_type": type(exc).__name__},
            )
            raise HttpError("http_connection_error") from exc
