"""Testes do TiamIntrospectionClient com httpx.MockTransport."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from api.connectors.tiam import TiamIntrospectionClient, create_tiam_client
from api.connectors.tiam.client import DEFAULT_REJECTION_DESCRIPTION
from app.infra.http import HttpClientConfig
from app.protocols.credential_introspector import IntrospectionError
from config.settings import TiamSettings

ENDPOINT = "https://tiam.test/identity/v1/introspect"


def _client(handler: Any) -> TiamIntrospectionClient:
    return TiamIntrospectionClient(
        endpoint=ENDPOINT,
        service_id="slack",
        config=HttpClientConfig(transport=httpx.MockTransport(handler)),
    )


@pytest.mark.asyncio
async def test_introspect_success_sends_basic_credential() -> None:
    captured: dict[str, Any] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["url"] = str(request.url)
        captured["authorization"] = request.headers.get("authorization")
        captured["body"] = json.loads(request.content)
        return httpx.Response(200, json={"active": True})

    result = await _client(handler).introspect({"key": "tc1"}, "dXNlcjpwYXNz")

    assert result is None
    assert captured["url"] == ENDPOINT
    assert captured["authorization"] == "Basic dXNlcjpwYXNz"
    assert captured["body"] == {"toolchain_credentials": {"key": "tc1"}, "service_id": "slack"}


@pytest.mark.asyncio
async def test_rejection_uses_status_and_description() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(403, json={"description": "credentials revoked"})

    with pytest.raises(IntrospectionError) as exc_info:
        await _client(handler).introspect("creds", "abc")

    assert exc_info.value.status_code == 403
    assert exc_info.value.description == "credentials revoked"


@pytest.mark.asyncio
async def test_rejection_with_message_key() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"message": "invalid credential"})

    with pytest.raises(IntrospectionError) as exc_info:
        await _client(handler).introspect("creds", "abc")

    assert exc_info.value.status_code == 401
    assert exc_info.value.description == "invalid credential"


@pytest.mark.asyncio
async def test_rejection_with_plain_text_body() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, text="unauthorized")

    with pytest.raises(IntrospectionError) as exc_info:
        await _client(handler).introspect("creds", "abc")

    assert exc_info.value.description == "unauthorized"


@pytest.mark.asyncio
async def test_rejection_without_description() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"code": 42})

    with pytest.raises(IntrospectionError) as exc_info:
        await _client(handler).introspect("creds", "abc")

    assert exc_info.value.status_code == 500
    assert exc_info.value.description == DEFAULT_REJECTION_DESCRIPTION


@pytest.mark.asyncio
async def test_transport_failure_maps_to_500() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(IntrospectionError) as exc_info:
        await _client(handler).introspect("creds", "abc")

    assert exc_info.value.status_code == 500
    assert "connection refused" in exc_info.value.description


def test_create_tiam_client_from_settings() -> None:
    client = create_tiam_client(TiamSettings(base_url="https://tiam.test/", service_id="slack"))

    assert isinstance(client, TiamIntrospectionClient)
    assert client._endpoint == ENDPOINT
