"""Modelos de domínio do relay de eventos de toolchain.

Contratos compartilhados entre os estágios do pipeline. Todos são
imutáveis: cada estágio produz um valor novo em vez de mutar o anterior.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class IncomingEvent(BaseModel):
    """Evento recebido do LMS, populado literalmente a partir do body."""

    model_config = ConfigDict(frozen=True)

    source: str | None = Field(default=None, description="service_id do sistema de origem.")
    service_instance_id: str | None = Field(
        default=None, description="instance_id da service instance de destino."
    )
    toolchain_id: str | None = Field(default=None, description="Toolchain que emitiu o evento.")
    payload: Any = Field(default=None, description="Payload opaco do evento.")

    @classmethod
    def from_request_body(cls, body: Any) -> IncomingEvent:
        """Constrói o evento sem validar presença de campos.

        Body que não é objeto JSON é tratado como objeto vazio.
        """
        if not isinstance(body, Mapping):
            body = {}
        return cls(
            source=_as_identifier(body.get("service_id")),
            service_instance_id=_as_identifier(body.get("instance_id")),
            toolchain_id=_as_identifier(body.get("toolchain_id")),
            payload=body.get("payload"),
        )

    @property
    def has_identifying_fields(self) -> bool:
        """True se source, instance_id e toolchain_id estão preenchidos."""
        return bool(self.source and self.service_instance_id and self.toolchain_id)


def _as_identifier(value: Any) -> str | None:
    if value is None or isinstance(value, str):
        return value
    return str(value)


class ToolchainBinding(BaseModel):
    """Credenciais de uma toolchain associada à service instance."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str = Field(..., description="toolchain_id.")
    credentials: Any = Field(default=None, description="Credenciais opacas da toolchain.")


class ServiceInstanceParameters(BaseModel):
    """Parâmetros do canal Slack configurados no bind."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    api_token: str = Field(..., description="Token da Slack Web API.")
    label: str | None = Field(default=None, description="Nome legível do canal (só para logs).")


class ServiceInstanceRecord(BaseModel):
    """Documento de service instance resolvido pelo store."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    instance_id: str = Field(..., description="ID da instance; é também o channel id do Slack.")
    parameters: ServiceInstanceParameters
    toolchain_ids: tuple[ToolchainBinding, ...] = Field(default=())

    def find_toolchain_credentials(self, toolchain_id: str) -> Any | None:
        """Retorna as credenciais da primeira toolchain com o id informado."""
        for binding in self.toolchain_ids:
            if binding.id == toolchain_id:
                return binding.credentials
        return None

    @property
    def channel_name(self) -> str:
        """Label do canal para logs, com fallback para o instance_id."""
        return self.parameters.label or self.instance_id


class OutboundMessage(BaseModel):
    """Mensagem de chat produzida por um tradutor."""

    model_config = ConfigDict(frozen=True)

    username: str
    text: str
    channel: str = ""
    icon_url: str | None = None

    def for_channel(self, channel: str) -> OutboundMessage:
        """Retorna cópia da mensagem endereçada ao channel informado."""
        return self.model_copy(update={"channel": channel})

    def to_slack_payload(self) -> dict[str, Any]:
        """Serializa para o body JSON de chat.postMessage."""
        payload: dict[str, Any] = {
            "channel": self.channel,
            "username": self.username,
            "text": self.text,
        }
        if self.icon_url:
            payload["icon_url"] = self.icon_url
        return payload


__all__ = [
    "IncomingEvent",
    "OutboundMessage",
    "ServiceInstanceParameters",
    "ServiceInstanceRecord",
    "ToolchainBinding",
]
