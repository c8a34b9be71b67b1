"""Protocolos e contratos do core da aplicação."""

from .datastore import (
    DataStoreClientFactory,
    DataStoreClientProtocol,
    DeletionObserverProtocol,
    NullDeletionObserver,
)
from .models import (
    EVENT_TYPE_ERASURE,
    EVENT_TYPE_SAMPLE,
    DeletionOutcome,
    ErasureRequest,
    UniverseId,
    UserId,
)

__all__ = [
    "EVENT_TYPE_ERASURE",
    "EVENT_TYPE_SAMPLE",
    "DataStoreClientFactory",
    "DataStoreClientProtocol",
    "DeletionObserverProtocol",
    "DeletionOutcome",
    "ErasureRequest",
    "NullDeletionObserver",
    "UniverseId",
    "UserId",
]
