"""Use case de Right to Erasure: apaga os dados do jogador em cada universe."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from app.protocols.datastore import NullDeletionObserver
from app.protocols.models import DeletionOutcome

if TYPE_CHECKING:
    from app.protocols.datastore import DataStoreClientFactory, DeletionObserverProtocol
    from app.protocols.models import ErasureRequest, UniverseId, UserId

logger = logging.getLogger(__name__)


class ProcessErasureRequestUseCase:
    """Orquestra uma deleção por universe e agrega os resultados.

    Cada universe é tentado exatamente uma vez, mesmo depois de falhas em
    outros. O resultado é True somente se todas as deleções tiveram sucesso.

    Args:
        client_factory: Cria o cliente de DataStore escopado ao universe
        datastore_name: DataStore de onde a chave é removida
        entry_key_prefix: Prefixo concatenado ao userId para formar a chave
        observer: Sink de diagnóstico por deleção (default: no-op)
        max_concurrency: Deleções simultâneas (1 = sequencial)
        empty_request_succeeds: Resultado para pedidos sem userId ou GameIds
    """

    def __init__(
        self,
        client_factory: DataStoreClientFactory,
        datastore_name: str,
        entry_key_prefix: str,
        observer: DeletionObserverProtocol | None = None,
        max_concurrency: int = 1,
        empty_request_succeeds: bool = True,
    ) -> None:
        if max_concurrency < 1:
            raise ValueError("max_concurrency deve ser >= 1")
        self._client_factory = client_factory
        self._datastore_name = datastore_name
        self._entry_key_prefix = entry_key_prefix
        self._observer = observer or NullDeletionObserver()
        self._max_concurrency = max_concurrency
        self._empty_request_succeeds = empty_request_succeeds

    def entry_key(self, user_id: UserId) -> str:
        """Chave da entrada do jogador no DataStore (ex: "52/123")."""
        return f"{self._entry_key_prefix}{user_id}"

    async def execute(self, request: ErasureRequest) -> bool:
        """Executa as deleções e retorna o resultado agregado."""
        if not request.is_actionable:
            # TODO: confirmar com produto se pedido sem userId/GameIds deve responder 200
            logger.warning(
                "erasure_request_empty",
                extra={
                    "has_user_id": request.user_id is not None,
                    "targets": len(request.game_ids),
                    "result": self._empty_request_succeeds,
                },
            )
            return self._empty_request_succeeds

        entry_key = self.entry_key(request.user_id)
        semaphore = asyncio.Semaphore(self._max_concurrency)

        async def _bounded(universe_id: UniverseId) -> DeletionOutcome:
            async with semaphore:
                return await self._delete_one(universe_id, entry_key)

        outcomes = await asyncio.gather(*(_bounded(game_id) for game_id in request.game_ids))
        success = all(outcome.success for outcome in outcomes)

        logger.info(
            "erasure_completed",
            extra={
                "targets": len(outcomes),
                "failed": sum(1 for outcome in outcomes if not outcome.success),
                "result": success,
            },
        )
        return success

    async def _delete_one(self, universe_id: UniverseId, entry_key: str) -> DeletionOutcome:
        """Deleta em um universe; qualquer erro vira falha só deste alvo."""
        try:
            client = self._client_factory(universe_id)
            outcome = await client.delete(self._datastore_name, entry_key)
        except Exception as exc:
            logger.exception(
                "erasure_target_error",
                extra={"universe_id": str(universe_id), "error_type": type(exc).__name__},
            )
            outcome = DeletionOutcome(
                universe_id=str(universe_id),
                success=False,
                detail=type(exc).__name__,
            )

        if outcome.success:
            logger.info(
                "erasure_target_deleted",
                extra={"universe_id": outcome.universe_id, "datastore": self._datastore_name},
            )
        else:
            logger.warning(
                "erasure_target_failed",
                extra={
                    "universe_id": outcome.universe_id,
                    "datastore": self._datastore_name,
                    "status_code": outcome.status_code,
                },
            )

        await self._notify(outcome)
        return outcome

    async def _notify(self, outcome: DeletionOutcome) -> None:
        try:
            await self._observer.on_deletion(outcome)
        except Exception:
            logger.exception(
                "erasure_observer_failed",
                extra={"universe_id": outcome.universe_id},
            )
