"""Helpers de logging para a DataStore API (sem PII nem API key)."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_delete_failure(
    universe_id: str,
    datastore_name: str,
    status_code: int | None,
    reason: str,
) -> None:
    """Loga falha de deleção sem expor chave nem credenciais.

    Em debug: o warning por universe fica com o use case (erasure_target_failed).
    """
    logger.debug(
        "datastore_delete_failed",
        extra={
            "universe_id": universe_id,
            "datastore": datastore_name,
            "status_code": status_code,
            "reason": reason,
        },
    )


def log_delete_success(
    universe_id: str,
    datastore_name: str,
    status_code: int,
) -> None:
    logger.debug(
        "datastore_delete_ok",
        extra={
            "universe_id": universe_id,
            "datastore": datastore_name,
            "status_code": status_code,
        },
    )
