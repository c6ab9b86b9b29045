"""Stores: implementações concretas do lookup de service instances.

Módulos disponíveis:
    - memory_store: Store em memória para desenvolvimento/testes (seed YAML)
    - redis_service_instance_store: Documentos JSON em Redis
    - firestore_service_instance_store: Documentos em uma collection Firestore
"""

from __future__ import annotations

from app.infra.stores.firestore_service_instance_store import FirestoreServiceInstanceStore
from app.infra.stores.memory_store import MemoryServiceInstanceStore, load_seed_file
from app.infra.stores.redis_service_instance_store import RedisServiceInstanceStore

__all__ = [
    # Firestore
    "FirestoreServiceInstanceStore",
    # Memory (dev/test)
    "MemoryServiceInstanceStore",
    # Redis
    "RedisServiceInstanceStore",
    "load_seed_file",
]
