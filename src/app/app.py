"""Entrypoint da aplicação toolchain-slack-relay.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import (
    get_service_instance_store,
    initialize_app,
    validate_runtime_settings,
)
from app.bootstrap.clients import create_async_redis_client
from config.logging import get_logger
from config.settings import get_service_instance_store_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações
    - Cria o store de service instances

    Shutdown:
    - Fecha conexão Redis (quando backend redis)
    """
    logger.info("app_starting", extra={"service": "toolchain-slack-relay"})
    validate_runtime_settings()
    app.state.service_instance_store = get_service_instance_store()

    yield

    logger.info("app_shutting_down", extra={"service": "toolchain-slack-relay"})
    if get_service_instance_store_settings().backend == "redis":
        redis_client = create_async_redis_client()
        close_async = getattr(redis_client, "aclose", None)
        if callable(close_async):
            await close_async()
        else:
            await redis_client.close()


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Returns:
        Aplicação FastAPI configurada.
    """
    fastapi_app = FastAPI(
        title="toolchain-slack-relay",
        description="Relay de eventos de toolchain/pipeline para o Slack",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # Registra todas as rotas
    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": "toolchain-slack-relay"})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting toolchain-slack-relay in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
