"""Filters de logging do relay.

- CorrelationIdFilter: injeta correlation_id (vcap_request_id ou timestamp) e service
- SensitiveFieldFilter: mascara api_token, credenciais e Authorization passados via `extra`
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

REDACTED = "[REDACTED]"

# Atributos de record que nunca podem sair em claro
SENSITIVE_LOG_FIELDS = frozenset(
    {
        "api_token",
        "authorization",
        "credential",
        "credentials",
        "toolchain_credentials",
    }
)


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record.

    Um correlation_id passado explicitamente via `extra` tem precedência
    sobre o valor do getter.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "correlation_id", None):
            record.correlation_id = self._get_correlation_id()
        record.service = self._service_name
        return True


class SensitiveFieldFilter(logging.Filter):
    """Substitui por REDACTED os campos sensíveis presentes no record."""

    def __init__(self, fields: Iterable[str] = SENSITIVE_LOG_FIELDS) -> None:
        super().__init__()
        self._fields = frozenset(fields)

    def filter(self, record: logging.LogRecord) -> bool:
        for name in self._fields.intersection(record.__dict__):
            if record.__dict__[name]:
                setattr(record, name, REDACTED)
        return True
