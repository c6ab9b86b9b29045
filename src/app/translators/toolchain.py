"""Tradutor de eventos de ciclo de vida da toolchain.

Payload esperado:
    {
        "event": "bind",
        "toolchain_id": "...",
        "toolchain_name": "My Toolchain",
        "service": {"service_id": "github", "label": "my-repo"}
    }
"""

from __future__ import annotations

from typing import Any

from app.domain.events import OutboundMessage
from app.protocols.event_translator import TranslationError

TOOLCHAIN_USERNAME = "Toolchain"

EVENT_PHRASES = {
    "bind": "bound to",
    "unbind": "unbound from",
    "provision": "provisioned in",
    "deprovision": "deprovisioned from",
    "update": "updated in",
}


class ToolchainEventTranslator:
    """Converte eventos de bind/unbind/provision de serviços em mensagens."""

    def translate(
        self,
        request_id: str,
        payload: Any,
        toolchain_credentials: Any,
    ) -> OutboundMessage | None:
        if not isinstance(payload, dict):
            raise TranslationError("invalid toolchain event payload: expected an object")

        phrase = EVENT_PHRASES.get(str(payload.get("event", "")).lower())
        if phrase is None:
            return None

        service = payload.get("service")
        if not isinstance(service, dict) or not service.get("service_id"):
            raise TranslationError("invalid toolchain event payload: missing service")

        service_ref = f"*{service['service_id']}*"
        if service.get("label"):
            service_ref += f" ({service['label']})"

        toolchain = payload.get("toolchain_name") or payload.get("toolchain_id") or "unknown"
        text = f"Service {service_ref} has been *{phrase}* toolchain *{toolchain}*"
        return OutboundMessage(username=TOOLCHAIN_USERNAME, text=text)
