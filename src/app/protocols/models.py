"""Modelos do fluxo de Right to Erasure (sem IO)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

EVENT_TYPE_SAMPLE = "SampleNotification"
EVENT_TYPE_ERASURE = "RightToErasureRequest"

UserId = int | str
UniverseId = int | str


@dataclass(frozen=True, slots=True)
class ErasureRequest:
    """Pedido de erasure extraído do EventPayload.

    Attributes:
        user_id: ID do jogador cujos dados devem ser apagados (None = ausente)
        game_ids: Universe IDs alvo, na ordem do payload
    """

    user_id: UserId | None
    game_ids: tuple[UniverseId, ...] = ()

    @property
    def is_actionable(self) -> bool:
        """True se há userId e ao menos um universe alvo."""
        return self.user_id is not None and bool(self.game_ids)

    @classmethod
    def from_event(cls, event: dict[str, Any]) -> ErasureRequest:
        """Monta o pedido a partir do body do webhook.

        Campos ausentes, nulos ou com tipo inesperado viram "ausente";
        quem decide o que fazer com isso é o use case.
        """
        payload = event.get("EventPayload")
        if not isinstance(payload, dict):
            return cls(user_id=None)

        return cls(
            user_id=_parse_user_id(payload.get("UserId")),
            game_ids=_parse_game_ids(payload.get("GameIds")),
        )


@dataclass(frozen=True, slots=True)
class DeletionOutcome:
    """Resultado de uma deleção em um universe.

    Attributes:
        universe_id: Universe onde a deleção foi tentada
        success: True se a Open Cloud respondeu 2xx
        status_code: Status HTTP (None em falha de transporte)
        detail: Body da resposta ou nome do erro, apenas para diagnóstico
    """

    universe_id: str
    success: bool
    status_code: int | None = None
    detail: str = ""


def _parse_user_id(value: object) -> UserId | None:
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        return None
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _parse_game_ids(value: object) -> tuple[UniverseId, ...]:
    if not isinstance(value, list):
        return ()
    # Itens inválidos seguem adiante: a Open Cloud rejeita e a falha entra no agregado
    return tuple(value)
