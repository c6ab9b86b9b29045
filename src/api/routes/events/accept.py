"""Endpoint de recebimento de eventos: POST /accept.

Fluxo:
1. Resolve correlation_id (X-Vcap-Request-Id / X-Correlation-Id ou timestamp)
2. Decodifica o body JSON (body inválido vira objeto vazio)
3. Delega ao RelayEventUseCase
4. Converte o RelayOutcome em resposta HTTP (204 ou {"description": ...})
"""

from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse

from app.observability import reset_correlation_id, resolve_correlation_id, set_correlation_id
from config.settings import get_relay_settings

logger = logging.getLogger(__name__)

router = APIRouter()

# Lazy-loaded use case (inicializado na primeira requisição)
_relay_use_case = None


def _get_relay_use_case():
    """Obtém o use case de relay (lazy-loading)."""
    global _relay_use_case
    if _relay_use_case is None:
        from app.bootstrap import get_relay_use_case

        _relay_use_case = get_relay_use_case()
    return _relay_use_case


async def _read_json_body(request: Request) -> Any:
    raw_body = await request.body()
    if not raw_body:
        return {}
    try:
        return json.loads(raw_body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.warning("accept_invalid_json", extra={"body_size": len(raw_body)})
        return {}


@router.post("/accept", response_model=None)
async def accept_event(request: Request) -> Response:
    """Recebe um evento do toolchain e o encaminha ao Slack.

    Returns:
        204 sem corpo em sucesso ou no-op; JSON {"description": ...} em falha.
    """
    correlation_id = resolve_correlation_id(
        request.headers,
        get_relay_settings().correlation_headers,
    )
    token = set_correlation_id(correlation_id)

    try:
        body = await _read_json_body(request)
        outcome = await _get_relay_use_case().execute(
            body,
            request.headers.get("authorization"),
            correlation_id,
        )

        logger.info(
            "accept_completed",
            extra={
                "status_code": outcome.status_code,
                "stage": outcome.stage.value,
            },
        )

        if outcome.is_error:
            return JSONResponse(
                content={"description": outcome.description},
                status_code=outcome.status_code,
            )
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    finally:
        reset_correlation_id(token)
