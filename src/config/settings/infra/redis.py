"""Settings do Redis (backend de service instances)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class RedisSettings:
    """Configurações do Redis.

    Attributes:
        url: URL de conexão (redis:// ou rediss://)
        key_prefix: Namespace das chaves de service instance
        socket_timeout_seconds: Timeout de socket/conexão
    """

    url: str = ""
    key_prefix: str = "service_instance:"
    socket_timeout_seconds: float = 5.0

    def validate(self) -> list[str]:
        errors: list[str] = []
        if not self.url:
            errors.append("REDIS_URL não configurado")
        if self.socket_timeout_seconds <= 0:
            errors.append("REDIS_SOCKET_TIMEOUT_SECONDS deve ser > 0")
        return errors


def _load_redis_from_env() -> RedisSettings:
    """Carrega RedisSettings de variáveis de ambiente."""
    return RedisSettings(
        url=os.getenv("REDIS_URL", ""),
        key_prefix=os.getenv("REDIS_KEY_PREFIX", "service_instance:"),
        socket_timeout_seconds=float(os.getenv("REDIS_SOCKET_TIMEOUT_SECONDS", "5")),
    )


@lru_cache(maxsize=1)
def get_redis_settings() -> RedisSettings:
    """Retorna instância cacheada de RedisSettings."""
    return _load_redis_from_env()
