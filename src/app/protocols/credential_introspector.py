"""Protocolo de introspecção de credenciais de toolchain."""

from __future__ import annotations

from typing import Any, Protocol


class IntrospectionError(Exception):
    """Credencial rejeitada (ou introspecção indisponível).

    Attributes:
        status_code: Status HTTP devolvido ao chamador sem alteração
        description: Descrição legível devolvida ao chamador
    """

    def __init__(self, status_code: int, description: str) -> None:
        super().__init__(description)
        self.status_code = status_code
        self.description = description


class CredentialIntrospectorProtocol(Protocol):
    """Valida a credencial apresentada contra as credenciais da toolchain."""

    async def introspect(self, toolchain_credentials: Any, credential: str) -> None: ...
