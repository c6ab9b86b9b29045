"""Settings do serviço de introspecção de credenciais (TIAM)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

TIAM_INTROSPECT_PATH: str = "/identity/v1/introspect"


@dataclass(frozen=True)
class TiamSettings:
    """Configurações do cliente TIAM.

    Attributes:
        base_url: URL base do TIAM
        service_id: Identificador deste broker junto ao TIAM
        request_timeout_seconds: Timeout por requisição HTTP
    """

    base_url: str = ""
    service_id: str = "slack"
    request_timeout_seconds: float = 10.0

    @property
    def introspect_endpoint(self) -> str:
        """URL completa do endpoint de introspecção."""
        return f"{self.base_url.rstrip('/')}{TIAM_INTROSPECT_PATH}"

    def validate(self) -> list[str]:
        """Valida configurações do TIAM.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if not self.base_url:
            errors.append("TIAM_URL não configurado")

        if not self.service_id:
            errors.append("TIAM_SERVICE_ID não pode ser vazio")

        if self.request_timeout_seconds <= 0:
            errors.append("TIAM_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> TiamSettings:
    """Carrega TiamSettings a partir de variáveis de ambiente."""
    return TiamSettings(
        base_url=os.getenv("TIAM_URL", ""),
        service_id=os.getenv("TIAM_SERVICE_ID", "slack"),
        request_timeout_seconds=float(os.getenv("TIAM_REQUEST_TIMEOUT_SECONDS", "10")),
    )


@lru_cache(maxsize=1)
def get_tiam_settings() -> TiamSettings:
    """Retorna instância cacheada de TiamSettings."""
    return _load_from_env()
