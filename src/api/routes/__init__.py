"""Rotas HTTP da API: adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (accept, health)
- Leitura inicial do request (headers, body)
- Delegação para use_cases
- Respostas HTTP apropriadas

Estrutura:
- routes/events/: POST /accept
- routes/health/: health checks e readiness
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
