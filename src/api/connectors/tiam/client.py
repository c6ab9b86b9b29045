"""Cliente de introspecção de credenciais do TIAM.

Valida a credencial Basic apresentada pelo LMS contra as credenciais
que o TIAM emitiu para a toolchain. Qualquer resposta não-2xx vira
IntrospectionError com o status e a descrição devolvidos pelo TIAM,
que o relay repassa ao chamador sem alteração.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from app.infra.http import HttpClient, HttpClientConfig, HttpError
from app.protocols.credential_introspector import IntrospectionError

if TYPE_CHECKING:
    import httpx

    from config.settings import TiamSettings

logger = logging.getLogger(__name__)

DEFAULT_REJECTION_DESCRIPTION = "credentials rejected by introspection"


class TiamIntrospectionClient(HttpClient):
    """Implementa CredentialIntrospectorProtocol sobre HTTP."""

    def __init__(
        self,
        endpoint: str,
        service_id: str,
        config: HttpClientConfig | None = None,
    ) -> None:
        super().__init__(config)
        self._endpoint = endpoint
        self._service_id = service_id

    async def introspect(self, toolchain_credentials: Any, credential: str) -> None:
        """Valida a credencial; retorna None em caso de sucesso.

        Raises:
            IntrospectionError: Credencial rejeitada (status do TIAM) ou
                TIAM inacessível (500).
        """
        headers = {"Authorization": f"Basic {credential}"}
        body = {
            "toolchain_credentials": toolchain_credentials,
            "service_id": self._service_id,
        }
        try:
            response = await self.post(self._endpoint, json=body, headers=headers)
        except HttpError as exc:
            raise IntrospectionError(500, str(exc)) from exc

        if response.is_success:
            logger.debug("credentials_introspected")
            return

        description = _extract_description(response)
        logger.info(
            "credentials_rejected",
            extra={"status_code": response.status_code},
        )
        raise IntrospectionError(response.status_code, description)


def _extract_description(response: httpx.Response) -> str:
    try:
        data = response.json()
    except json.JSONDecodeError:
        return response.text or DEFAULT_REJECTION_DESCRIPTION
    if isinstance(data, dict):
        for key in ("description", "message", "error"):
            value = data.get(key)
            if value:
                return str(value)
    return DEFAULT_REJECTION_DESCRIPTION


def create_tiam_client(settings: TiamSettings | None = None) -> TiamIntrospectionClient:
    """Factory para criar cliente TIAM com config do ambiente."""
    from config.settings import get_tiam_settings

    tiam = settings or get_tiam_settings()
    return TiamIntrospectionClient(
        endpoint=tiam.introspect_endpoint,
        service_id=tiam.service_id,
        config=HttpClientConfig(timeout_seconds=tiam.request_timeout_seconds),
    )
