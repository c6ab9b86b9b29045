"""Cliente HTTP base para os conectores externos (Slack, TIAM).

Uma única tentativa por chamada: retry e backoff não fazem parte do relay.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 10.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True
    transport: httpx.AsyncBaseTransport | None = None


class HttpError(Exception):
    """Erro de transporte HTTP sem dados sensíveis."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class HttpClient:
    """Cliente HTTP simples para chamadas externas."""

    def __init__(self, config: HttpClientConfig | None = None) -> None:
        self._config = config or HttpClientConfig()

    async def post(
        self,
        url: str,
        json: Any,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Executa um POST JSON.

        Respostas com qualquer status são devolvidas ao chamador; só falhas
        de conexão/timeout viram HttpError.

        Raises:
            HttpError: Falha de transporte (conexão, timeout, protocolo).
        """
        merged_headers = {**self._config.default_headers, **(headers or {})}
        try:
            async with httpx.AsyncClient(
                verify=self._config.verify_ssl,
                transport=self._config.transport,
            ) as client:
                return await client.post(
                    url,
                    json=json,
                    headers=merged_headers,
                    timeout=self._config.timeout_seconds,
                )
        except httpx.TimeoutException as exc:
            logger.warning("http_timeout", extra={"url": url})
            raise HttpError(f"timeout calling {url}") from exc
        except httpx.HTTPError as exc:
            logger.warning(
                "http_transport_error",
                extra={"url": url, "error_type": type(exc).__name__},
            )
            raise HttpError(f"error calling {url}: {exc}") from exc
