"""Settings específicas do Slack.

Configurações do cliente da Slack Web API (chat.postMessage).
O api_token não fica aqui: vem de cada service instance.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Constantes da Web API
SLACK_API_BASE_URL: str = "https://slack.com/api"
SLACK_POST_MESSAGE_METHOD: str = "chat.postMessage"


@dataclass(frozen=True)
class SlackSettings:
    """Configurações do cliente Slack.

    Attributes:
        api_base_url: URL base da Web API
        request_timeout_seconds: Timeout por requisição HTTP
        icon_url: Ícone padrão das mensagens (opcional)
    """

    api_base_url: str = SLACK_API_BASE_URL
    request_timeout_seconds: float = 10.0
    icon_url: str = ""

    @property
    def post_message_endpoint(self) -> str:
        """URL completa de chat.postMessage."""
        return f"{self.api_base_url.rstrip('/')}/{SLACK_POST_MESSAGE_METHOD}"

    def validate(self) -> list[str]:
        """Valida configurações do Slack.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_base_url:
            errors.append("SLACK_API_BASE_URL não pode ser vazio")

        if self.request_timeout_seconds <= 0:
            errors.append("SLACK_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> SlackSettings:
    """Carrega SlackSettings a partir de variáveis de ambiente."""
    return SlackSettings(
        api_base_url=os.getenv("SLACK_API_BASE_URL", SLACK_API_BASE_URL),
        request_timeout_seconds=float(os.getenv("SLACK_REQUEST_TIMEOUT_SECONDS", "10")),
        icon_url=os.getenv("SLACK_ICON_URL", ""),
    )


@lru_cache(maxsize=1)
def get_slack_settings() -> SlackSettings:
    """Retorna instância cacheada de SlackSettings."""
    return _load_from_env()
