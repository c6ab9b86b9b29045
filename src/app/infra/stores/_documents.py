"""Conversão de documentos brutos do store em ServiceInstanceRecord."""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from app.domain.events import ServiceInstanceRecord
from utils.errors import InvalidServiceInstanceError


def parse_service_instance(instance_id: str, data: Any) -> ServiceInstanceRecord:
    """Valida documento de service instance.

    Documentos sem `instance_id` herdam o id usado no lookup (a chave).

    Raises:
        InvalidServiceInstanceError: Documento não é objeto ou falta campo obrigatório.
    """
    if isinstance(data, (bytes, str)):
        try:
            data = json.loads(data)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise InvalidServiceInstanceError(
                f"service instance {instance_id} is not valid JSON"
            ) from exc

    if not isinstance(data, dict):
        raise InvalidServiceInstanceError(f"service instance {instance_id} is not an object")

    document = {"instance_id": instance_id, **data}
    try:
        return ServiceInstanceRecord.model_validate(document)
    except ValidationError as exc:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in exc.errors())
        raise InvalidServiceInstanceError(
            f"service instance {instance_id} is invalid: {fields}"
        ) from exc
