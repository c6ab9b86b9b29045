"""Settings do pipeline de relay de eventos."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache

# Headers aceitos como origem do correlation_id, em ordem de prioridade
DEFAULT_CORRELATION_HEADERS: tuple[str, ...] = (
    "x-vcap-request-id",
    "vcap_request_id",
    "x-correlation-id",
)


@dataclass(frozen=True)
class RelaySettings:
    """Configurações do relay.

    Attributes:
        generic_sources: Sources sem tradutor dedicado que devem usar o
            tradutor genérico (payload serializado como texto)
        correlation_headers: Headers lidos para o correlation_id
    """

    generic_sources: frozenset[str] = field(default_factory=frozenset)
    correlation_headers: tuple[str, ...] = DEFAULT_CORRELATION_HEADERS

    def validate(self) -> list[str]:
        errors: list[str] = []
        if not self.correlation_headers:
            errors.append("RELAY_CORRELATION_HEADERS não pode ser vazio")
        return errors


def _split_csv(raw: str) -> list[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


def _load_from_env() -> RelaySettings:
    """Carrega RelaySettings a partir de variáveis de ambiente."""
    headers = _split_csv(os.getenv("RELAY_CORRELATION_HEADERS", ""))
    return RelaySettings(
        generic_sources=frozenset(_split_csv(os.getenv("RELAY_GENERIC_SOURCES", ""))),
        correlation_headers=(
            tuple(h.lower() for h in headers) if headers else DEFAULT_CORRELATION_HEADERS
        ),
    )


@lru_cache(maxsize=1)
def get_relay_settings() -> RelaySettings:
    """Retorna instância cacheada de RelaySettings."""
    return _load_from_env()
