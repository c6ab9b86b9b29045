"""Store de service instances em memória: desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Sem persistência entre reinícios.
Pode ser populado a partir de um arquivo YAML (ou JSON) no formato:

    inst1:
      parameters:
        api_token: xoxb-...
        label: "#deploys"
      toolchain_ids:
        - id: tc1
          credentials: ...
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from app.domain.events import ServiceInstanceRecord
from app.infra.stores._documents import parse_service_instance
from app.protocols.service_instance_store import ServiceInstanceStoreProtocol

logger = logging.getLogger(__name__)


class MemoryServiceInstanceStore(ServiceInstanceStoreProtocol):
    """Store de service instances em memória."""

    def __init__(self, documents: dict[str, Any] | None = None) -> None:
        self._documents: dict[str, Any] = dict(documents or {})

    def put(self, instance_id: str, document: dict[str, Any]) -> None:
        """Registra (ou substitui) o documento de uma instance."""
        self._documents[instance_id] = document

    async def get(self, instance_id: str) -> ServiceInstanceRecord | None:
        document = self._documents.get(instance_id)
        if document is None:
            return None
        return parse_service_instance(instance_id, document)

    async def ping(self) -> bool:
        return True


def load_seed_file(path: str | Path) -> dict[str, Any]:
    """Carrega documentos de service instance de um arquivo YAML/JSON.

    Raises:
        ValueError: Se o arquivo não contiver um mapeamento id → documento.
    """
    seed_path = Path(path)
    with seed_path.open("r", encoding="utf-8") as f:
        documents = yaml.safe_load(f) or {}

    if not isinstance(documents, dict):
        raise ValueError(f"Seed de service instances deve ser um dicionário: {seed_path}")

    logger.info(
        "service_instance_seed_loaded",
        extra={"path": str(seed_path), "count": len(documents)},
    )
    return {str(key): value for key, value in documents.items()}
