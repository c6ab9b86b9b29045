"""Firestore Service Instance Store.

Documento por service instance, com o instance_id como id do documento.
O cliente Firestore é síncrono; as chamadas rodam em thread.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from google.api_core.exceptions import GoogleAPIError

from app.infra.stores._documents import parse_service_instance
from app.protocols.service_instance_store import ServiceInstanceStoreProtocol
from utils.errors import FirestoreUnavailableError, InvalidServiceInstanceError

if TYPE_CHECKING:
    from google.cloud.firestore import Client as FirestoreClient

    from app.domain.events import ServiceInstanceRecord

logger = logging.getLogger(__name__)

SERVICE_INSTANCES_COLLECTION = "service_instances"


class FirestoreServiceInstanceStore(ServiceInstanceStoreProtocol):
    """Store de service instances usando Firestore."""

    def __init__(
        self,
        firestore_client: FirestoreClient,
        collection: str = SERVICE_INSTANCES_COLLECTION,
    ) -> None:
        self._db = firestore_client
        self._collection = collection

    async def get(self, instance_id: str) -> ServiceInstanceRecord | None:
        data = await asyncio.to_thread(self._get_sync, instance_id)
        if data is None:
            return None
        return parse_service_instance(instance_id, data)

    def _get_sync(self, instance_id: str) -> dict[str, Any] | None:
        try:
            doc = self._db.collection(self._collection).document(instance_id).get()
        except GoogleAPIError as exc:
            logger.error(
                "service_instance_get_failed",
                extra={"backend": "firestore", "error_type": type(exc).__name__},
            )
            raise FirestoreUnavailableError(str(exc)) from exc
        except ValueError as exc:
            # instance_id com "/" não forma um caminho de documento válido
            logger.warning(
                "service_instance_invalid_id",
                extra={"backend": "firestore", "error_type": type(exc).__name__},
            )
            raise InvalidServiceInstanceError(
                f"service instance id {instance_id!r} is not a valid document id"
            ) from exc
        if not doc.exists:
            return None
        return doc.to_dict() or {}

    async def ping(self) -> bool:
        return await asyncio.to_thread(self._ping_sync)

    def _ping_sync(self) -> bool:
        try:
            # Leitura de documento inexistente basta para validar conectividade
            self._db.collection(self._collection).document("_health").get()
        except GoogleAPIError as exc:
            raise FirestoreUnavailableError(str(exc)) from exc
        return True
