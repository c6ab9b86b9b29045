"""Factories dos colaboradores do relay baseadas em configuração de ambiente."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.slack import create_slack_client
from api.connectors.tiam import create_tiam_client
from app.bootstrap.clients import create_async_redis_client, create_firestore_client
from app.infra.stores import (
    FirestoreServiceInstanceStore,
    MemoryServiceInstanceStore,
    RedisServiceInstanceStore,
    load_seed_file,
)
from app.translators import build_translator_registry
from app.use_cases.relay import RelayEventUseCase
from config.settings import (
    get_base_settings,
    get_firestore_settings,
    get_redis_settings,
    get_relay_settings,
    get_service_instance_store_settings,
)

if TYPE_CHECKING:
    from app.protocols.service_instance_store import ServiceInstanceStoreProtocol
    from app.translators import TranslatorRegistry

logger = logging.getLogger(__name__)


def create_service_instance_store() -> ServiceInstanceStoreProtocol:
    """Cria store de service instances baseado na configuração."""
    settings = get_service_instance_store_settings()
    backend = settings.backend

    if backend == "firestore":
        store = FirestoreServiceInstanceStore(
            create_firestore_client(),
            collection=get_firestore_settings().collection_service_instances,
        )
        logger.info("service_instance_store_created", extra={"backend": "firestore"})
        return store

    if backend == "redis":
        store = RedisServiceInstanceStore(
            create_async_redis_client(),
            key_prefix=get_redis_settings().key_prefix,
        )
        logger.info("service_instance_store_created", extra={"backend": "redis"})
        return store

    if backend == "memory":
        base_settings = get_base_settings()
        if not base_settings.is_development:
            logger.warning(
                "memory_store_in_non_dev",
                extra={"backend": "memory", "environment": base_settings.environment},
            )
        documents = load_seed_file(settings.seed_file) if settings.seed_file else {}
        store = MemoryServiceInstanceStore(documents)
        logger.info("service_instance_store_created", extra={"backend": "memory"})
        return store

    msg = f"SERVICE_INSTANCE_STORE_BACKEND inválido: {backend}"
    raise ValueError(msg)


def create_translator_registry() -> TranslatorRegistry:
    """Cria o registro de tradutores com os sources genéricos configurados."""
    generic_sources = get_relay_settings().generic_sources
    registry = build_translator_registry(generic_sources=sorted(generic_sources))
    logger.info("translator_registry_created", extra={"sources": sorted(registry.sources)})
    return registry


def create_relay_use_case(
    store: ServiceInstanceStoreProtocol | None = None,
) -> RelayEventUseCase:
    """Monta o RelayEventUseCase com os colaboradores concretos."""
    return RelayEventUseCase(
        store=store or create_service_instance_store(),
        introspector=create_tiam_client(),
        message_client=create_slack_client(),
        translators=create_translator_registry(),
    )
