"""Cliente da Open Cloud DataStore API (Standard DataStores v1).

Conforme a documentação da Open Cloud:
- DELETE .../universes/{universeId}/standard-datastores/datastore/entries/entry
- Query params: entryKey, datastoreName
- Autenticação via header x-api-key (nunca na URL)

Sem retries: uma tentativa por universe em cada webhook.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.roblox.datastore_logging import log_delete_failure, log_delete_success
from app.infra.http import HttpClient, HttpClientConfig, HttpError
from app.protocols.models import DeletionOutcome
from config.settings.roblox import OPEN_CLOUD_BASE_URL

if TYPE_CHECKING:
    import httpx

    from app.protocols.datastore import DataStoreClientFactory
    from app.protocols.models import UniverseId
    from config.settings import RobloxSettings

ENTRY_PATH = "/datastores/v1/universes/{universe_id}/standard-datastores/datastore/entries/entry"
API_KEY_HEADER = "x-api-key"
MAX_DETAIL_CHARS = 512


class OpenCloudDataStoreClient:
    """Cliente de DataStore escopado a um universe.

    Args:
        universe_id: Universe (jogo) alvo
        api_key: API key da Open Cloud
        http_client: Cliente HTTP base (default: HttpClient com config padrão)
        base_url: URL base da Open Cloud

    Raises:
        ValueError: Se api_key está vazia
    """

    def __init__(
        self,
        universe_id: UniverseId,
        api_key: str,
        http_client: HttpClient | None = None,
        base_url: str = OPEN_CLOUD_BASE_URL,
    ) -> None:
        if not api_key or not api_key.strip():
            raise ValueError(
                "api_key é obrigatória para a DataStore API. "
                "Verifique se OPEN_CLOUD_API_KEY está configurada."
            )
        self.universe_id = str(universe_id)
        self._api_key = api_key
        self._http = http_client or HttpClient()
        self._base_url = base_url.rstrip("/")

    @property
    def entry_url(self) -> str:
        """URL do recurso de entrada para este universe."""
        return self._base_url + ENTRY_PATH.format(universe_id=self.universe_id)

    async def delete(self, datastore_name: str, entry_key: str) -> DeletionOutcome:
        """Remove uma chave do DataStore.

        Returns:
            DeletionOutcome com success=True para qualquer resposta 2xx.
            Timeout e falhas de conexão viram outcome com status_code=None.
        """
        params = {"entryKey": entry_key, "datastoreName": datastore_name}
        try:
            response = await self._http.delete(
                self.entry_url,
                params=params,
                headers={API_KEY_HEADER: self._api_key},
            )
        except HttpError as exc:
            log_delete_failure(self.universe_id, datastore_name, None, str(exc))
            return DeletionOutcome(universe_id=self.universe_id, success=False, detail=str(exc))

        if response.is_success:
            log_delete_success(self.universe_id, datastore_name, response.status_code)
            return DeletionOutcome(
                universe_id=self.universe_id,
                success=True,
                status_code=response.status_code,
            )

        log_delete_failure(self.universe_id, datastore_name, response.status_code, "http_status")
        return DeletionOutcome(
            universe_id=self.universe_id,
            success=False,
            status_code=response.status_code,
            detail=response.text[:MAX_DETAIL_CHARS],
        )


def create_datastore_client_factory(
    settings: RobloxSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> DataStoreClientFactory:
    """Factory de clientes por universe, com API key e timeout das settings.

    Args:
        settings: RobloxSettings com API key e parâmetros da Open Cloud
        transport: Transport httpx opcional (testes)

    Returns:
        Callable universe_id -> OpenCloudDataStoreClient
    """
    http_client = HttpClient(
        HttpClientConfig(timeout_seconds=settings.request_timeout_seconds),
        transport=transport,
    )

    def _factory(universe_id: UniverseId) -> OpenCloudDataStoreClient:
        return OpenCloudDataStoreClient(
            universe_id,
            settings.open_cloud_api_key,
            http_client=http_client,
            base_url=settings.open_cloud_base_url,
        )

    return _factory
