"""Testes dos endpoints de health e status."""

from __future__ import annotations

import pytest

from api.routes.health import router as health_router
from config.settings import BaseSettings, RobloxSettings


@pytest.mark.asyncio
async def test_health_returns_healthy(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(health_router, "get_base_settings", lambda: BaseSettings())

    response = await health_router.health_check()

    assert response.status == "healthy"
    assert response.service == "roblox-erasure-webhook"


@pytest.mark.asyncio
async def test_health_reports_configured_service_name(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        health_router, "get_base_settings", lambda: BaseSettings(service_name="custom-svc")
    )

    response = await health_router.health_check()

    assert response.service == "custom-svc"


@pytest.mark.asyncio
async def test_status_ok_when_secrets_configured(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        health_router,
        "get_roblox_settings",
        lambda: RobloxSettings(open_cloud_api_key="k", webhook_secret="s"),
    )

    response = await health_router.status_check()

    assert response.status_code == 200
    assert response.body == b"OK"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("settings", "expected_body"),
    [
        (RobloxSettings(), b"Missing secrets: OPEN_CLOUD_API_KEY WEBHOOK_SECRET"),
        (RobloxSettings(webhook_secret="s"), b"Missing secrets: OPEN_CLOUD_API_KEY"),
        (RobloxSettings(open_cloud_api_key="k"), b"Missing secrets: WEBHOOK_SECRET"),
    ],
)
async def test_status_names_missing_secrets(
    monkeypatch: pytest.MonkeyPatch,
    settings: RobloxSettings,
    expected_body: bytes,
) -> None:
    monkeypatch.setattr(health_router, "get_roblox_settings", lambda: settings)

    response = await health_router.status_check()

    assert response.status_code == 500
    assert response.body == expected_body
