"""Cliente HTTP para webhooks do Discord.

Uma única tentativa por submissão: sem retry nem backoff. O resultado
(sucesso ou erro do Discord) volta síncrono para quem chamou.
Logs nunca incluem a URL do webhook (ela contém o token do webhook).
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any

import httpx

from app.protocols.models import DeliveryResult
from config.settings import DiscordRelaySettings, get_discord_relay_settings
from utils.errors import DeliveryFailedError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DiscordClientConfig:
    """Configuração do cliente de webhook."""

    timeout_seconds: float = 10.0
    user_agent: str = "tally-discord-relay/1.0"


class DiscordWebhookClient:
    """Envia o corpo JSON (username + embeds) a um webhook Discord."""

    def __init__(
        self,
        config: DiscordClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Inicializa o cliente.

        Args:
            config: Timeout e User-Agent
            transport: Transport httpx alternativo (ex: MockTransport em testes)
        """
        self._config = config or DiscordClientConfig()
        self._transport = transport

    async def send(self, url: str, payload: dict[str, Any]) -> DeliveryResult:
        """Executa o POST e devolve status e corpo da resposta.

        Raises:
            DeliveryFailedError: Se a requisição não completar (timeout, conexão)
        """
        headers = {
            "Content-Type": "application/json",
            "User-Agent": self._config.user_agent,
        }
        started_at = time.perf_counter()
        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                timeout=self._config.timeout_seconds,
            ) as client:
                response = await client.post(url, json=payload, headers=headers)
        except httpx.HTTPError as exc:
            logger.warning(
                "discord_webhook_unreachable",
                extra={"component": "discord_client", "error_type": type(exc).__name__},
            )
            raise DeliveryFailedError("Discord webhook request failed") from exc

        latency_ms = round((time.perf_counter() - started_at) * 1000, 2)
        result = DeliveryResult(
            ok=response.is_success,
            status_code=response.status_code,
            body=response.text,
        )
        log_extra = {
            "component": "discord_client",
            "status_code": response.status_code,
            "latency_ms": latency_ms,
        }
        if result.ok:
            logger.info("discord_webhook_delivered", extra=log_extra)
        else:
            logger.warning("discord_webhook_rejected", extra=log_extra)
        return result


def create_discord_webhook_client(
    settings: DiscordRelaySettings | None = None,
) -> DiscordWebhookClient:
    """Factory para criar cliente com o timeout das settings.

    Args:
        settings: DiscordRelaySettings opcional. Se None, carrega do ambiente.
    """
    relay = settings or get_discord_relay_settings()
    return DiscordWebhookClient(
        config=DiscordClientConfig(timeout_seconds=relay.request_timeout_seconds),
    )
