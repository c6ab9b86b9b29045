"""Agregador de settings de infraestrutura.

Re-exporta as settings dos backends de service instances.
"""

from __future__ import annotations

from config.settings.infra.firestore import (
    FirestoreSettings,
    get_firestore_settings,
)
from config.settings.infra.redis import (
    RedisSettings,
    get_redis_settings,
)
from config.settings.infra.service_instances import (
    ServiceInstanceStoreBackend,
    ServiceInstanceStoreSettings,
    get_service_instance_store_settings,
)

__all__ = [
    # Firestore
    "FirestoreSettings",
    # Redis
    "RedisSettings",
    # Service instances
    "ServiceInstanceStoreBackend",
    "ServiceInstanceStoreSettings",
    "get_firestore_settings",
    "get_redis_settings",
    "get_service_instance_store_settings",
]
