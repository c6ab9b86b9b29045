"""Use case de relay: evento do LMS → mensagem Slack.

Pipeline sequencial, cada estágio pode encerrar a requisição:

    Parsed → InstanceResolved → CredentialChecked → Translated → Forwarded | NoOp

Qualquer estágio pode ir direto para Failed levantando RelayError; o
`execute` converte o erro em RelayOutcome. Cada estágio recebe apenas o
que o anterior devolveu.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from app.domain.events import IncomingEvent, OutboundMessage, ServiceInstanceRecord
from app.protocols.credential_introspector import IntrospectionError
from app.protocols.event_translator import TranslationError
from app.protocols.message_client import MessageTransportError
from app.use_cases.relay.errors import (
    BadRequestError,
    InternalRelayError,
    RelayError,
    UnauthorizedError,
)
from utils.errors import ServiceInstanceStoreError

if TYPE_CHECKING:
    from app.protocols.credential_introspector import CredentialIntrospectorProtocol
    from app.protocols.message_client import MessageClientProtocol
    from app.protocols.service_instance_store import ServiceInstanceStoreProtocol
    from app.translators.registry import TranslatorRegistry

logger = logging.getLogger(__name__)

BASIC_SCHEME = "basic"

MISSING_FIELDS_DESCRIPTION = (
    "missing required identifying fields: service_id, instance_id or toolchain_id"
)
INVALID_AUTHORIZATION_DESCRIPTION = "invalid or missing authorization header"
NO_TOOLCHAIN_CREDENTIALS_DESCRIPTION = "no toolchain credentials found"


class RelayStage(str, Enum):
    """Estados do pipeline por requisição."""

    PARSED = "parsed"
    INSTANCE_RESOLVED = "instance_resolved"
    CREDENTIAL_CHECKED = "credential_checked"
    TRANSLATED = "translated"
    FORWARDED = "forwarded"
    NO_OP = "no_op"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class RelayOutcome:
    """Resultado terminal de uma requisição.

    Attributes:
        status_code: Status HTTP da resposta
        stage: Estado terminal (FORWARDED, NO_OP ou FAILED)
        description: Descrição devolvida ao chamador (apenas em falhas)
        failed_after: Último estado alcançado antes da falha
    """

    status_code: int
    stage: RelayStage
    description: str | None = None
    failed_after: RelayStage | None = None

    @property
    def is_error(self) -> bool:
        return self.stage is RelayStage.FAILED


class RelayEventUseCase:
    """Orquestra os estágios do relay com colaboradores injetados."""

    def __init__(
        self,
        store: ServiceInstanceStoreProtocol,
        introspector: CredentialIntrospectorProtocol,
        message_client: MessageClientProtocol,
        translators: TranslatorRegistry,
    ) -> None:
        self._store = store
        self._introspector = introspector
        self._message_client = message_client
        self._translators = translators

    async def execute(
        self,
        body: Any,
        authorization: str | None,
        correlation_id: str,
    ) -> RelayOutcome:
        """Processa uma requisição POST /accept até um estado terminal."""
        event = parse_incoming_event(body)
        reached = RelayStage.PARSED
        try:
            record = await self.resolve_instance(event)
            reached = RelayStage.INSTANCE_RESOLVED

            credentials = await self.check_credentials(event, record, authorization)
            reached = RelayStage.CREDENTIAL_CHECKED

            message = self.translate(event, credentials, correlation_id)
            if message is None:
                return RelayOutcome(status_code=204, stage=RelayStage.NO_OP)
            reached = RelayStage.TRANSLATED

            await self.forward(event, record, message, correlation_id)
        except RelayError as exc:
            logger.info(
                "relay_failed",
                extra={
                    "status_code": exc.status_code,
                    "failed_after": reached.value,
                    "source": event.source,
                    "instance_id": event.service_instance_id,
                    "description": exc.description,
                },
            )
            return RelayOutcome(
                status_code=exc.status_code,
                stage=RelayStage.FAILED,
                description=exc.description,
                failed_after=reached,
            )

        return RelayOutcome(status_code=204, stage=RelayStage.FORWARDED)

    async def resolve_instance(self, event: IncomingEvent) -> ServiceInstanceRecord:
        """Valida campos identificadores e busca a service instance (uma tentativa)."""
        if not event.has_identifying_fields:
            raise BadRequestError(MISSING_FIELDS_DESCRIPTION)

        instance_id = event.service_instance_id
        logger.debug("service_instance_lookup", extra={"instance_id": instance_id})
        try:
            record = await self._store.get(instance_id)
        except ServiceInstanceStoreError as exc:
            logger.error(
                "service_instance_lookup_failed",
                extra={"instance_id": instance_id, "error_type": type(exc).__name__},
            )
            raise InternalRelayError(str(exc)) from exc

        if record is None:
            logger.info("service_instance_not_found", extra={"instance_id": instance_id})
            raise BadRequestError(f"no service instance found for id {instance_id}")
        return record

    async def check_credentials(
        self,
        event: IncomingEvent,
        record: ServiceInstanceRecord,
        authorization: str | None,
    ) -> Any:
        """Introspecta a credencial Basic contra as credenciais da toolchain.

        Returns:
            Credenciais da toolchain (repassadas ao tradutor).
        """
        toolchain_credentials = record.find_toolchain_credentials(event.toolchain_id)
        if toolchain_credentials:
            logger.debug("toolchain_credentials_found", extra={"toolchain_id": event.toolchain_id})

        credential = parse_basic_authorization(authorization)
        if credential is None:
            raise UnauthorizedError(INVALID_AUTHORIZATION_DESCRIPTION)

        if not toolchain_credentials:
            raise UnauthorizedError(NO_TOOLCHAIN_CREDENTIALS_DESCRIPTION)

        try:
            await self._introspector.introspect(toolchain_credentials, credential)
        except IntrospectionError as exc:
            logger.debug("introspection_failed", extra={"status_code": exc.status_code})
            raise UnauthorizedError(exc.description, status_code=exc.status_code) from exc

        logger.debug("credentials_introspected", extra={"toolchain_id": event.toolchain_id})
        return toolchain_credentials

    def translate(
        self,
        event: IncomingEvent,
        toolchain_credentials: Any,
        correlation_id: str,
    ) -> OutboundMessage | None:
        """Seleciona o tradutor pelo source; None significa nada a enviar."""
        translator = self._translators.get(event.source)
        if translator is None:
            logger.warning(
                "translator_not_found",
                extra={"source": event.source, "request_id": correlation_id},
            )
            return None

        logger.info(
            "event_processing",
            extra={
                "request_id": correlation_id,
                "source": event.source,
                "toolchain_id": event.toolchain_id,
                "instance_id": event.service_instance_id,
            },
        )
        try:
            message = translator.translate(correlation_id, event.payload, toolchain_credentials)
        except TranslationError as exc:
            raise InternalRelayError(str(exc)) from exc

        if message is None:
            logger.info(
                "event_without_message",
                extra={"request_id": correlation_id, "source": event.source},
            )
        return message

    async def forward(
        self,
        event: IncomingEvent,
        record: ServiceInstanceRecord,
        message: OutboundMessage,
        correlation_id: str,
    ) -> None:
        """Envia a mensagem ao canal da service instance (uma tentativa)."""
        # Channel sempre vem do record, nunca do tradutor
        addressed = message.for_channel(record.instance_id)
        log_extra = {
            "request_id": correlation_id,
            "channel": record.channel_name,
            "source": event.source,
            "toolchain_id": event.toolchain_id,
            "instance_id": record.instance_id,
        }
        logger.debug("message_posting", extra=log_extra)

        try:
            response = await self._message_client.post_message(
                record.parameters.api_token, addressed
            )
        except MessageTransportError as exc:
            raise InternalRelayError(str(exc)) from exc

        if response.error:
            raise BadRequestError(f"Error - {response.error}")

        logger.debug("message_sent", extra=log_extra)


def parse_incoming_event(body: Any) -> IncomingEvent:
    """Estágio de ingress: monta o IncomingEvent sem validar. Nunca falha."""
    event = IncomingEvent.from_request_body(body)
    logger.debug(
        "incoming_event",
        extra={
            "source": event.source,
            "payload": json.dumps(event.payload, default=str),
        },
    )
    return event


def parse_basic_authorization(authorization: str | None) -> str | None:
    """Extrai o valor de um header `Basic <credencial>`.

    Returns:
        Credencial, ou None para header ausente, outro esquema ou sem valor.
    """
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) < 2 or parts[0].lower() != BASIC_SCHEME:
        return None
    return parts[1]
