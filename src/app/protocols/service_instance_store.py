"""Protocolo do store de service instances (lookup chave/valor)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.events import ServiceInstanceRecord


class ServiceInstanceStoreProtocol(ABC):
    """Contrato mínimo assíncrono para resolver service instances.

    `get` retorna None quando o id não existe e levanta
    ServiceInstanceStoreError para qualquer outra falha.
    """

    @abstractmethod
    async def get(self, instance_id: str) -> ServiceInstanceRecord | None: ...

    @abstractmethod
    async def ping(self) -> bool: ...
