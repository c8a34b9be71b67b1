"""Factory do use case de erasure com o connector Open Cloud."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.roblox import create_datastore_client_factory
from app.use_cases.erasure import ProcessErasureRequestUseCase

if TYPE_CHECKING:
    import httpx

    from app.protocols.datastore import DeletionObserverProtocol
    from config.settings import RobloxSettings


def create_erasure_use_case(
    settings: RobloxSettings,
    observer: DeletionObserverProtocol | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ProcessErasureRequestUseCase:
    """Cria ProcessErasureRequestUseCase a partir das settings.

    Args:
        settings: RobloxSettings (API key, DataStore, concorrência)
        observer: Sink de diagnóstico por deleção
        transport: Transport httpx opcional (testes)
    """
    return ProcessErasureRequestUseCase(
        client_factory=create_datastore_client_factory(settings, transport=transport),
        datastore_name=settings.datastore_name,
        entry_key_prefix=settings.entry_key_prefix,
        observer=observer,
        max_concurrency=settings.max_concurrency,
        empty_request_succeeds=settings.empty_request_succeeds,
    )
