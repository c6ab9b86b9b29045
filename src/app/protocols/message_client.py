"""Protocolo do cliente de mensagens (Slack)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.domain.events import OutboundMessage


class MessageTransportError(Exception):
    """Falha de transporte ao chamar a API de mensagens."""


@dataclass(frozen=True, slots=True)
class MessagePostResponse:
    """Resposta da API de mensagens.

    `error` preenchido indica rejeição em nível de API, mesmo com
    transporte bem-sucedido.
    """

    ok: bool
    error: str | None = None
    ts: str | None = None

    @classmethod
    def from_api_dict(cls, data: dict[str, Any]) -> MessagePostResponse:
        error = data.get("error")
        return cls(
            ok=bool(data.get("ok", error is None)),
            error=str(error) if error else None,
            ts=data.get("ts"),
        )


class MessageClientProtocol(Protocol):
    """Contrato mínimo para postar mensagem em um canal."""

    async def post_message(
        self,
        api_token: str,
        message: OutboundMessage,
    ) -> MessagePostResponse: ...
