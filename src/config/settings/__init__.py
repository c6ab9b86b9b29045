"""Agregador de settings do relay.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Infrastructure settings
from config.settings.infra import (
    FirestoreSettings,
    RedisSettings,
    ServiceInstanceStoreBackend,
    ServiceInstanceStoreSettings,
    get_firestore_settings,
    get_redis_settings,
    get_service_instance_store_settings,
)

# Relay settings
from config.settings.relay import (
    DEFAULT_CORRELATION_HEADERS,
    RelaySettings,
    get_relay_settings,
)

# Collaborator settings
from config.settings.slack import (
    SLACK_API_BASE_URL,
    SlackSettings,
    get_slack_settings,
)
from config.settings.tiam import (
    TiamSettings,
    get_tiam_settings,
)

__all__ = [
    # Constants
    "DEFAULT_CORRELATION_HEADERS",
    "SLACK_API_BASE_URL",
    # Base
    "BaseSettings",
    "Environment",
    # Infrastructure
    "FirestoreSettings",
    "RedisSettings",
    # Relay
    "RelaySettings",
    "ServiceInstanceStoreBackend",
    "ServiceInstanceStoreSettings",
    # Collaborators
    "SlackSettings",
    "TiamSettings",
    "get_base_settings",
    "get_firestore_settings",
    "get_redis_settings",
    "get_relay_settings",
    "get_service_instance_store_settings",
    "get_slack_settings",
    "get_tiam_settings",
]
