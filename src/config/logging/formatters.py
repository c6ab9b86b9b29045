"""Formatter JSON do relay.

Todo log sai com: asctime, level, logger, message, correlation_id, service.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = frozenset(
    {
        "asctime",
        "levelname",
        "name",
        "message",
        "correlation_id",
        "service",
    }
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria o JsonFormatter com os campos obrigatórios renomeados.

    Exemplo:
        {"asctime": "2026-10-18 10:30:00,123", "level": "INFO",
         "logger": "app.use_cases.relay.relay_event", "message": "relay_failed",
         "correlation_id": "1760783400000", "service": "toolchain_slack_relay",
         "status_code": 400, "failed_after": "parsed"}
    """
    return JsonFormatter(
        " ".join(f"%({name})s" for name in sorted(REQUIRED_LOG_FIELDS)),
        rename_fields=FIELD_RENAME_MAP,
    )
