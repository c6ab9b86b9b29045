"""Testes do ToolchainEventTranslator."""

from __future__ import annotations

from typing import Any

import pytest

from app.protocols.event_translator import TranslationError
from app.translators import ToolchainEventTranslator


def _payload(event: str, **overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "event": event,
        "toolchain_id": "tc1",
        "toolchain_name": "My Toolchain",
        "service": {"service_id": "github", "label": "my-repo"},
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def translator() -> ToolchainEventTranslator:
    return ToolchainEventTranslator()


@pytest.mark.parametrize(
    ("event", "phrase"),
    [
        ("bind", "bound to"),
        ("unbind", "unbound from"),
        ("provision", "provisioned in"),
        ("deprovision", "deprovisioned from"),
        ("update", "updated in"),
    ],
)
def test_lifecycle_events(translator: ToolchainEventTranslator, event: str, phrase: str) -> None:
    message = translator.translate("req", _payload(event), None)

    assert message is not None
    assert message.username == "Toolchain"
    assert message.text == (
        f"Service *github* (my-repo) has been *{phrase}* toolchain *My Toolchain*"
    )


def test_event_name_is_case_insensitive(translator: ToolchainEventTranslator) -> None:
    message = translator.translate("req", _payload("BIND"), None)

    assert message is not None
    assert "*bound to*" in message.text


def test_falls_back_to_toolchain_id(translator: ToolchainEventTranslator) -> None:
    payload = _payload("bind", service={"service_id": "slack"})
    del payload["toolchain_name"]

    message = translator.translate("req", payload, None)

    assert message is not None
    assert message.text == "Service *slack* has been *bound to* toolchain *tc1*"


def test_unknown_event_returns_none(translator: ToolchainEventTranslator) -> None:
    assert translator.translate("req", _payload("archive"), None) is None


def test_non_object_payload_raises(translator: ToolchainEventTranslator) -> None:
    with pytest.raises(TranslationError):
        translator.translate("req", "bind", None)


def test_missing_service_raises(translator: ToolchainEventTranslator) -> None:
    payload = _payload("bind")
    del payload["service"]

    with pytest.raises(TranslationError, match="missing service"):
        translator.translate("req", payload, None)
