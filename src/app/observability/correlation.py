"""Gerenciamento de correlation_id para rastreamento de requisições.

O correlation_id é apenas informativo (correlação de logs), sem efeito
funcional. Vem do header vcap_request_id quando presente; caso contrário
usa o timestamp atual em milissegundos.

Uso:
    from app.observability import resolve_correlation_id, set_correlation_id

    token = set_correlation_id(resolve_correlation_id(request.headers))
    try:
        # processar request
    finally:
        reset_correlation_id(token)
"""

from __future__ import annotations

import time
from contextvars import ContextVar, Token
from typing import TYPE_CHECKING

from config.settings.relay import DEFAULT_CORRELATION_HEADERS

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

# ContextVar para correlation_id (thread/async-safe)
_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual.

    Returns:
        correlation_id ou string vazia se não definido.
    """
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual.

    Args:
        correlation_id: ID a definir. Se None, gera um novo via timestamp.

    Returns:
        Token para reset posterior via reset_correlation_id().
    """
    value = correlation_id or generate_correlation_id()
    return _correlation_id.set(value)


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o correlation_id ao valor anterior."""
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    """Gera correlation_id a partir do epoch atual em milissegundos."""
    return str(time.time_ns() // 1_000_000)


def resolve_correlation_id(
    headers: Mapping[str, str],
    header_names: Iterable[str] = DEFAULT_CORRELATION_HEADERS,
) -> str:
    """Extrai o correlation_id dos headers ou gera um novo.

    Args:
        headers: Headers da requisição (chaves case-insensitive no Starlette)
        header_names: Headers candidatos, em ordem de prioridade

    Returns:
        Valor do primeiro header não vazio ou timestamp em ms.
    """
    for name in header_names:
        value = headers.get(name)
        if value and value.strip():
            return value.strip()
    return generate_correlation_id()
