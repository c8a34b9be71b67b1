"""Contratos de DataStore usados pelo use case de erasure.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.protocols.models import DeletionOutcome, UniverseId


class DataStoreClientProtocol(Protocol):
    """Cliente escopado a um universe e à API key configurada."""

    async def delete(self, datastore_name: str, entry_key: str) -> DeletionOutcome: ...


class DataStoreClientFactory(Protocol):
    """Cria um cliente de DataStore para o universe informado."""

    def __call__(self, universe_id: UniverseId) -> DataStoreClientProtocol: ...


class DeletionObserverProtocol(Protocol):
    """Sink de diagnóstico chamado após cada deleção (sucesso ou falha)."""

    async def on_deletion(self, outcome: DeletionOutcome) -> None: ...


class NullDeletionObserver:
    """Observer padrão: não faz nada."""

    async def on_deletion(self, outcome: DeletionOutcome) -> None:
        return None
