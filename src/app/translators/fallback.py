"""Tradutor genérico: serializa o payload inteiro como texto."""

from __future__ import annotations

import json
from typing import Any

from app.domain.events import OutboundMessage

FALLBACK_USERNAME = "Unknown Event"


class StringifyEventTranslator:
    """Usado apenas para sources configurados em RELAY_GENERIC_SOURCES."""

    def translate(
        self,
        request_id: str,
        payload: Any,
        toolchain_credentials: Any,
    ) -> OutboundMessage | None:
        text = json.dumps(payload, ensure_ascii=False, sort_keys=True, default=str)
        return OutboundMessage(username=FALLBACK_USERNAME, text=text)
