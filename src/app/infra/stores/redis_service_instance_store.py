"""Redis Service Instance Store.

Cada service instance é um documento JSON sob a chave
`<prefix><instance_id>` (padrão: service_instance:<id>).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from redis.exceptions import RedisError

from app.infra.stores._documents import parse_service_instance
from app.protocols.service_instance_store import ServiceInstanceStoreProtocol
from utils.errors import RedisConnectionError

if TYPE_CHECKING:
    from redis.asyncio import Redis as AsyncRedis

    from app.domain.events import ServiceInstanceRecord

logger = logging.getLogger(__name__)

SERVICE_INSTANCE_PREFIX = "service_instance:"


class RedisServiceInstanceStore(ServiceInstanceStoreProtocol):
    """Store de service instances usando Redis assíncrono.

    Args:
        redis_client: Cliente redis.asyncio
        key_prefix: Namespace das chaves
    """

    def __init__(
        self,
        redis_client: AsyncRedis,
        key_prefix: str = SERVICE_INSTANCE_PREFIX,
    ) -> None:
        self._redis = redis_client
        self._prefix = key_prefix

    def _key(self, instance_id: str) -> str:
        """Gera chave Redis com namespace."""
        return f"{self._prefix}{instance_id}"

    async def get(self, instance_id: str) -> ServiceInstanceRecord | None:
        try:
            raw = await self._redis.get(self._key(instance_id))
        except RedisError as exc:
            logger.error(
                "service_instance_get_failed",
                extra={"backend": "redis", "error_type": type(exc).__name__},
            )
            raise RedisConnectionError(str(exc)) from exc

        if raw is None:
            return None
        return parse_service_instance(instance_id, raw)

    async def ping(self) -> bool:
        try:
            return bool(await self._redis.ping())
        except RedisError as exc:
            raise RedisConnectionError(str(exc)) from exc
