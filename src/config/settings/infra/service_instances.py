"""Settings do store de service instances.

Seleciona o backend (memory | redis | firestore). Em staging/production
o padrão é firestore; em desenvolvimento, memória com seed opcional.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

ServiceInstanceStoreBackend = Literal["memory", "redis", "firestore"]

VALID_BACKENDS = frozenset({"memory", "redis", "firestore"})


@dataclass(frozen=True)
class ServiceInstanceStoreSettings:
    """Configurações do store de service instances.

    Attributes:
        backend: Backend de armazenamento
        seed_file: Arquivo YAML/JSON com records para o backend memory
    """

    backend: str = "memory"
    seed_file: str = ""

    def validate(self) -> list[str]:
        """Valida backend configurado.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []
        if self.backend not in VALID_BACKENDS:
            errors.append(f"SERVICE_INSTANCE_STORE_BACKEND inválido: {self.backend}")
        if self.seed_file and self.backend != "memory":
            errors.append("SERVICE_INSTANCE_SEED_FILE só é suportado com backend memory")
        return errors


def _default_backend_for_env(environment: str) -> str:
    return "firestore" if environment in ("staging", "production") else "memory"


def _load_from_env() -> ServiceInstanceStoreSettings:
    """Carrega ServiceInstanceStoreSettings de variáveis de ambiente."""
    environment = os.getenv("ENVIRONMENT", "development").lower()
    return ServiceInstanceStoreSettings(
        backend=os.getenv(
            "SERVICE_INSTANCE_STORE_BACKEND", _default_backend_for_env(environment)
        ).lower(),
        seed_file=os.getenv("SERVICE_INSTANCE_SEED_FILE", ""),
    )


@lru_cache(maxsize=1)
def get_service_instance_store_settings() -> ServiceInstanceStoreSettings:
    """Retorna instância cacheada de ServiceInstanceStoreSettings."""
    return _load_from_env()
