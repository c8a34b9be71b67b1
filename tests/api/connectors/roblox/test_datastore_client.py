"""Testes do cliente Open Cloud DataStore."""

from __future__ import annotations

import httpx
import pytest

from api.connectors.roblox.datastore_client import (
    OpenCloudDataStoreClient,
    create_datastore_client_factory,
)
from app.infra.http import HttpClient, HttpClientConfig
from config.settings import RobloxSettings

API_KEY = "open-cloud-key"


def _client(handler, universe_id: int = 1001) -> OpenCloudDataStoreClient:
    http_client = HttpClient(HttpClientConfig(), transport=httpx.MockTransport(handler))
    return OpenCloudDataStoreClient(universe_id, API_KEY, http_client=http_client)


@pytest.mark.asyncio
async def test_delete_sends_expected_request() -> None:
    captured: list[httpx.Request] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(204)

    outcome = await _client(_handler).delete("PlayerData", "52/52")

    assert outcome.success is True
    assert outcome.status_code == 204
    assert outcome.universe_id == "1001"
    request = captured[0]
    assert request.method == "DELETE"
    assert request.url.path == (
        "/datastores/v1/universes/1001/standard-datastores/datastore/entries/entry"
    )
    assert request.url.params["entryKey"] == "52/52"
    assert request.url.params["datastoreName"] == "PlayerData"
    assert request.headers["x-api-key"] == API_KEY
    assert API_KEY not in str(request.url)
    assert request.content == b""


@pytest.mark.asyncio
async def test_delete_non_2xx_is_failure() -> None:
    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(403, text='{"error":"PERMISSION_DENIED"}')

    outcome = await _client(_handler).delete("PlayerData", "52/52")

    assert outcome.success is False
    assert outcome.status_code == 403
    assert "PERMISSION_DENIED" in outcome.detail


@pytest.mark.asyncio
async def test_delete_not_found_is_failure() -> None:
    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404)

    outcome = await _client(_handler).delete("PlayerData", "52/52")

    assert outcome.success is False
    assert outcome.status_code == 404


@pytest.mark.asyncio
async def test_delete_transport_error_is_failure() -> None:
    def _handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("boom", request=request)

    outcome = await _client(_handler).delete("PlayerData", "52/52")

    assert outcome.success is False
    assert outcome.status_code is None
    assert outcome.detail == "http_connection_error"


@pytest.mark.asyncio
async def test_delete_timeout_is_failure() -> None:
    def _handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("slow", request=request)

    outcome = await _client(_handler).delete("PlayerData", "52/52")

    assert outcome.success is False
    assert outcome.detail == "http_timeout"


def test_empty_api_key_raises() -> None:
    with pytest.raises(ValueError, match="OPEN_CLOUD_API_KEY"):
        OpenCloudDataStoreClient(1001, "  ")


@pytest.mark.asyncio
async def test_factory_scopes_client_per_universe() -> None:
    seen: list[tuple[str, str]] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        seen.append((request.url.host, request.url.path))
        return httpx.Response(200)

    settings = RobloxSettings(
        open_cloud_api_key=API_KEY,
        open_cloud_base_url="https://apis.example.test/",
    )
    factory = create_datastore_client_factory(settings, transport=httpx.MockTransport(_handler))

    await factory(1001).delete("PlayerData", "52/1")
    await factory("2002").delete("PlayerData", "52/1")

    assert seen == [
        ("apis.example.test", "/datastores/v1/universes/1001/standard-datastores/datastore/entries/entry"),
        ("apis.example.test", "/datastores/v1/universes/2002/standard-datastores/datastore/entries/entry"),
    ]
