"""Testes do endpoint POST /accept."""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import AsyncMock

import pytest
from starlette.requests import Request

from api.routes.events import accept
from app.observability import get_correlation_id
from app.translators import build_translator_registry
from app.use_cases.relay import RelayEventUseCase, RelayOutcome, RelayStage
from config.settings import RelaySettings
from tests.fakes.fake_relay_collaborators import (
    FakeIntrospector,
    FakeMessageClient,
    FakeServiceInstanceStore,
    build_record,
)


def _build_request(*, body: bytes = b"", headers: dict[str, str] | None = None) -> Request:
    header_items = headers or {}
    raw_headers = [(k.lower().encode("utf-8"), v.encode("utf-8")) for k, v in header_items.items()]
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "POST",
        "path": "/accept",
        "raw_path": b"/accept",
        "query_string": b"",
        "headers": raw_headers,
    }
    sent = False

    async def _receive() -> dict[str, object]:
        nonlocal sent
        if sent:
            return {"type": "http.request", "body": b"", "more_body": False}
        sent = True
        return {"type": "http.request", "body": body, "more_body": False}

    return Request(scope, _receive)


@pytest.fixture(autouse=True)
def _relay_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(accept, "get_relay_settings", lambda: RelaySettings())


def _install_use_case(monkeypatch: pytest.MonkeyPatch, use_case: Any) -> None:
    monkeypatch.setattr(accept, "_relay_use_case", use_case)


@pytest.mark.asyncio
async def test_accept_returns_204_on_forwarded(monkeypatch: pytest.MonkeyPatch) -> None:
    use_case = AsyncMock()
    use_case.execute = AsyncMock(
        return_value=RelayOutcome(status_code=204, stage=RelayStage.FORWARDED)
    )
    _install_use_case(monkeypatch, use_case)

    body = {"service_id": "pipeline", "instance_id": "inst1", "toolchain_id": "tc1"}
    request = _build_request(
        body=json.dumps(body).encode(),
        headers={"Authorization": "Basic abc", "X-Vcap-Request-Id": "vcap-123"},
    )
    response = await accept.accept_event(request)

    assert response.status_code == 204
    assert response.body == b""
    use_case.execute.assert_awaited_once_with(body, "Basic abc", "vcap-123")


@pytest.mark.asyncio
async def test_accept_renders_error_description(monkeypatch: pytest.MonkeyPatch) -> None:
    use_case = AsyncMock()
    use_case.execute = AsyncMock(
        return_value=RelayOutcome(
            status_code=400,
            stage=RelayStage.FAILED,
            description="no service instance found for id inst1",
            failed_after=RelayStage.PARSED,
        )
    )
    _install_use_case(monkeypatch, use_case)

    response = await accept.accept_event(_build_request(body=b"{}"))

    assert response.status_code == 400
    assert json.loads(response.body) == {"description": "no service instance found for id inst1"}


@pytest.mark.asyncio
async def test_accept_invalid_json_treated_as_empty_object(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    use_case = AsyncMock()
    use_case.execute = AsyncMock(
        return_value=RelayOutcome(status_code=204, stage=RelayStage.NO_OP)
    )
    _install_use_case(monkeypatch, use_case)

    await accept.accept_event(_build_request(body=b"{not-json"))

    assert use_case.execute.await_args.args[0] == {}


@pytest.mark.asyncio
async def test_accept_sets_and_resets_correlation_id(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: list[str] = []

    async def _execute(body: Any, authorization: str | None, correlation_id: str) -> RelayOutcome:
        seen.append(get_correlation_id())
        return RelayOutcome(status_code=204, stage=RelayStage.NO_OP)

    use_case = AsyncMock()
    use_case.execute = _execute
    _install_use_case(monkeypatch, use_case)

    await accept.accept_event(
        _build_request(body=b"{}", headers={"X-Correlation-Id": "corr-456"})
    )

    assert seen == ["corr-456"]
    assert get_correlation_id() == ""


@pytest.mark.asyncio
async def test_accept_reads_underscore_vcap_header(monkeypatch: pytest.MonkeyPatch) -> None:
    use_case = AsyncMock()
    use_case.execute = AsyncMock(
        return_value=RelayOutcome(status_code=204, stage=RelayStage.NO_OP)
    )
    _install_use_case(monkeypatch, use_case)

    await accept.accept_event(
        _build_request(body=b"{}", headers={"vcap_request_id": "vcap-789"})
    )

    assert use_case.execute.await_args.args[2] == "vcap-789"


@pytest.mark.asyncio
async def test_accept_generates_correlation_id_without_headers(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    use_case = AsyncMock()
    use_case.execute = AsyncMock(
        return_value=RelayOutcome(status_code=204, stage=RelayStage.NO_OP)
    )
    _install_use_case(monkeypatch, use_case)

    await accept.accept_event(_build_request(body=b"{}"))

    correlation_id = use_case.execute.await_args.args[2]
    assert correlation_id.isdigit()


@pytest.mark.asyncio
async def test_accept_pipeline_event_end_to_end(monkeypatch: pytest.MonkeyPatch) -> None:
    message_client = FakeMessageClient()
    use_case = RelayEventUseCase(
        store=FakeServiceInstanceStore({"inst1": build_record("inst1")}),
        introspector=FakeIntrospector(),
        message_client=message_client,
        translators=build_translator_registry(),
    )
    _install_use_case(monkeypatch, use_case)

    body = {
        "service_id": "pipeline",
        "instance_id": "inst1",
        "toolchain_id": "tc1",
        "payload": {
            "event": "stageStarted",
            "pipeline": {"id": "p1", "name": "My Pipeline"},
            "stage": {"name": "Build"},
            "execution": {"number": 1},
        },
    }
    response = await accept.accept_event(
        _build_request(body=json.dumps(body).encode(), headers={"Authorization": "Basic abc"})
    )

    assert response.status_code == 204
    assert message_client.sent[0][1].channel == "inst1"


@pytest.mark.asyncio
async def test_accept_without_authorization_returns_401(monkeypatch: pytest.MonkeyPatch) -> None:
    use_case = RelayEventUseCase(
        store=FakeServiceInstanceStore({"inst1": build_record("inst1")}),
        introspector=FakeIntrospector(),
        message_client=FakeMessageClient(),
        translators=build_translator_registry(),
    )
    _install_use_case(monkeypatch, use_case)

    body = {"service_id": "pipeline", "instance_id": "inst1", "toolchain_id": "tc1"}
    response = await accept.accept_event(_build_request(body=json.dumps(body).encode()))

    assert response.status_code == 401
    assert json.loads(response.body) == {"description": "invalid or missing authorization header"}
