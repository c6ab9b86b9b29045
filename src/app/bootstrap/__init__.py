"""Bootstrap da aplicação — inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
conecta implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, get_relay_use_case

    # Na inicialização do serviço
    initialize_app()

    # Obter o use case (singleton)
    use_case = get_relay_use_case()
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_firestore_settings,
    get_redis_settings,
    get_relay_settings,
    get_service_instance_store_settings,
    get_slack_settings,
    get_tiam_settings,
)

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação (logging JSON com correlation_id).

    Deve ser chamada uma vez no início do serviço.
    """
    base_settings = get_base_settings()
    configure_logging(
        level=base_settings.log_level,
        service_name=base_settings.service_name,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development`/`test` mantém alerta sem bloquear execução local.
    """
    base_settings = get_base_settings()
    environment = base_settings.environment
    strict_mode = not base_settings.is_development
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base_settings.validate())
    errors.extend(f"slack: {error}" for error in get_slack_settings().validate())
    errors.extend(f"tiam: {error}" for error in get_tiam_settings().validate())
    errors.extend(f"relay: {error}" for error in get_relay_settings().validate())

    store_settings = get_service_instance_store_settings()
    errors.extend(f"store: {error}" for error in store_settings.validate())
    if store_settings.backend == "redis":
        errors.extend(f"redis: {error}" for error in get_redis_settings().validate())
    elif store_settings.backend == "firestore":
        gcp_project = os.getenv("GCP_PROJECT", "") or os.getenv("GOOGLE_CLOUD_PROJECT", "")
        errors.extend(
            f"firestore: {error}" for error in get_firestore_settings().validate(gcp_project)
        )

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")


# ──────────────────────────────────────────────────────────────────────────────
# Singletons (lazy initialization com cache)
# ──────────────────────────────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def get_service_instance_store():
    """Obtém store de service instances (singleton)."""
    from app.bootstrap.dependencies import create_service_instance_store

    return create_service_instance_store()


@lru_cache(maxsize=1)
def get_relay_use_case():
    """Obtém o RelayEventUseCase (singleton), compartilhando o store."""
    from app.bootstrap.dependencies import create_relay_use_case

    return create_relay_use_case(store=get_service_instance_store())
