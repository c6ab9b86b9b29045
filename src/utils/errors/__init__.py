"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    FirestoreUnavailableError,
    InfrastructureError,
    InvalidServiceInstanceError,
    RedisConnectionError,
    ServiceInstanceStoreError,
)

__all__ = [
    "FirestoreUnavailableError",
    "InfrastructureError",
    "InvalidServiceInstanceError",
    "RedisConnectionError",
    "ServiceInstanceStoreError",
]
