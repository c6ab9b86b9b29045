"""Rotas de recebimento de eventos do toolchain."""

from api.routes.events.accept import router

__all__ = ["router"]
