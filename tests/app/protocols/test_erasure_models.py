"""Testes de ErasureRequest.from_event."""

from __future__ import annotations

import pytest

from app.protocols import UniverseId
from app.protocols.models import ErasureRequest


def test_from_event_full_payload() -> None:
    request = ErasureRequest.from_event(
        {
            "EventType": "RightToErasureRequest",
            "EventPayload": {"UserId": 52, "GameIds": [1001, 1002]},
        }
    )

    assert request == ErasureRequest(user_id=52, game_ids=(1001, 1002))
    assert request.is_actionable is True


@pytest.mark.parametrize(
    "event",
    [
        {},
        {"EventPayload": None},
        {"EventPayload": "x"},
        {"EventPayload": {"GameIds": [1]}},
        {"EventPayload": {"UserId": None, "GameIds": [1]}},
        {"EventPayload": {"UserId": "", "GameIds": [1]}},
        {"EventPayload": {"UserId": True, "GameIds": [1]}},
        {"EventPayload": {"UserId": 52}},
        {"EventPayload": {"UserId": 52, "GameIds": []}},
        {"EventPayload": {"UserId": 52, "GameIds": "1001"}},
    ],
)
def test_from_event_not_actionable(event: dict) -> None:
    assert ErasureRequest.from_event(event).is_actionable is False


def test_from_event_keeps_order() -> None:
    request = ErasureRequest.from_event({"EventPayload": {"UserId": "7", "GameIds": [3, 1, 2]}})

    assert request.user_id == "7"
    assert request.game_ids == (3, 1, 2)


def test_game_ids_keep_universe_id_types() -> None:
    request = ErasureRequest.from_event(
        {"EventPayload": {"UserId": "52", "GameIds": [1001, "2002"]}}
    )

    assert request.game_ids == (1001, "2002")
    assert all(isinstance(game_id, UniverseId) for game_id in request.game_ids)
