"""Logging estruturado JSON do relay.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="toolchain_slack_relay")
    logger = get_logger(__name__)
    logger.info("event_relayed", extra={"source": "pipeline"})

api_token, credenciais de toolchain e o header Authorization são
mascarados pelo SensitiveFieldFilter caso cheguem via `extra`.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import (
    REDACTED,
    SENSITIVE_LOG_FIELDS,
    CorrelationIdFilter,
    SensitiveFieldFilter,
)
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REDACTED",
    "REQUIRED_LOG_FIELDS",
    "SENSITIVE_LOG_FIELDS",
    "CorrelationIdFilter",
    "SensitiveFieldFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
