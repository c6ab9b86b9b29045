"""Cliente HTTP da Slack Web API (chat.postMessage).

Estende HttpClient com o contrato de MessageClientProtocol:
- Autenticação Bearer com o api_token da service instance
- Erros de API (`ok: false`, `error: ...`) voltam na resposta, não como exceção
- Falha de transporte, status HTTP não-2xx ou JSON inválido → MessageTransportError
- Logs sem token nem texto da mensagem
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from app.infra.http import HttpClient, HttpClientConfig, HttpError
from app.protocols.message_client import MessagePostResponse, MessageTransportError

if TYPE_CHECKING:
    import httpx

    from app.domain.events import OutboundMessage
    from config.settings import SlackSettings

logger: logging.Logger = logging.getLogger(__name__)


class SlackHttpClient(HttpClient):
    """Cliente Slack para postar mensagens em canais."""

    def __init__(
        self,
        endpoint: str,
        config: HttpClientConfig | None = None,
        default_icon_url: str = "",
    ) -> None:
        """Inicializa cliente Slack.

        Args:
            endpoint: URL completa de chat.postMessage
            config: Configuração HTTP base
            default_icon_url: Ícone usado quando a mensagem não define um
        """
        super().__init__(config)
        self._endpoint = endpoint
        self._default_icon_url = default_icon_url

    async def post_message(
        self,
        api_token: str,
        message: OutboundMessage,
    ) -> MessagePostResponse:
        """Posta mensagem no canal `message.channel`.

        Raises:
            MessageTransportError: Falha de transporte ou resposta ilegível.
        """
        payload = message.to_slack_payload()
        if self._default_icon_url and "icon_url" not in payload:
            payload["icon_url"] = self._default_icon_url

        headers = {
            "Content-Type": "application/json; charset=utf-8",
            "Authorization": f"Bearer {api_token}",
        }
        try:
            response = await self.post(self._endpoint, json=payload, headers=headers)
        except HttpError as exc:
            raise MessageTransportError(str(exc)) from exc

        return self._process_response(response, message.channel)

    def _process_response(
        self,
        response: httpx.Response,
        channel: str,
    ) -> MessagePostResponse:
        if not response.is_success:
            logger.warning(
                "slack_http_error",
                extra={"status_code": response.status_code, "channel": channel},
            )
            raise MessageTransportError(
                f"Slack API responded with HTTP {response.status_code}"
            )

        try:
            data = response.json()
        except json.JSONDecodeError as exc:
            logger.error("slack_response_invalid_json", extra={"channel": channel})
            raise MessageTransportError("Slack API response is not valid JSON") from exc

        if not isinstance(data, dict):
            raise MessageTransportError("Slack API response is not a JSON object")

        result = MessagePostResponse.from_api_dict(data)
        if result.error:
            logger.warning(
                "slack_api_error",
                extra={"channel": channel, "slack_error": result.error},
            )
        else:
            logger.debug("slack_message_posted", extra={"channel": channel, "ts": result.ts})
        return result


def create_slack_client(settings: SlackSettings | None = None) -> SlackHttpClient:
    """Factory para criar cliente Slack com config do ambiente.

    Args:
        settings: SlackSettings opcional. Se None, carrega do ambiente.
    """
    # Import local para evitar dependência circular
    from config.settings import get_slack_settings

    slack = settings or get_slack_settings()
    return SlackHttpClient(
        endpoint=slack.post_message_endpoint,
        config=HttpClientConfig(timeout_seconds=slack.request_timeout_seconds),
        default_icon_url=slack.icon_url,
    )
