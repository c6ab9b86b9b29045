"""Use case de relay de eventos de toolchain para o Slack."""

from .errors import BadRequestError, InternalRelayError, RelayError, UnauthorizedError
from .relay_event import (
    INVALID_AUTHORIZATION_DESCRIPTION,
    MISSING_FIELDS_DESCRIPTION,
    NO_TOOLCHAIN_CREDENTIALS_DESCRIPTION,
    RelayEventUseCase,
    RelayOutcome,
    RelayStage,
    parse_basic_authorization,
    parse_incoming_event,
)

__all__ = [
    "INVALID_AUTHORIZATION_DESCRIPTION",
    "MISSING_FIELDS_DESCRIPTION",
    "NO_TOOLCHAIN_CREDENTIALS_DESCRIPTION",
    "BadRequestError",
    "InternalRelayError",
    "RelayError",
    "RelayEventUseCase",
    "RelayOutcome",
    "RelayStage",
    "UnauthorizedError",
    "parse_basic_authorization",
    "parse_incoming_event",
]
