"""Protocolo dos tradutores evento → mensagem."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.domain.events import OutboundMessage


class TranslationError(Exception):
    """Payload que o tradutor não consegue converter."""


class EventTranslatorProtocol(Protocol):
    """Converte o payload de um source em mensagem, ou None (nada a enviar)."""

    def translate(
        self,
        request_id: str,
        payload: Any,
        toolchain_credentials: Any,
    ) -> OutboundMessage | None: ...
