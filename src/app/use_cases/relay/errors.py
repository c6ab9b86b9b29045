"""Erros terminais do pipeline de relay.

Cada erro encerra a requisição e mapeia direto para status HTTP +
descrição devolvida ao chamador. Não há recuperação local.
"""

from __future__ import annotations


class RelayError(Exception):
    """Base dos erros terminais do relay."""

    default_status_code = 500

    def __init__(self, description: str, status_code: int | None = None) -> None:
        super().__init__(description)
        self.description = description
        self.status_code = status_code or self.default_status_code


class BadRequestError(RelayError):
    """Defeito do chamador: campos ausentes, instance desconhecida, rejeição da API."""

    default_status_code = 400


class UnauthorizedError(RelayError):
    """Credencial ausente, inválida ou rejeitada (status pode vir do TIAM)."""

    default_status_code = 401


class InternalRelayError(RelayError):
    """Falha de store, de transporte ou de tradutor."""

    default_status_code = 500
