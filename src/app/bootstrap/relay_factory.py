"""Factories do relay: conecta adapters concretos ao use case."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.discord import create_discord_webhook_client
from api.payload_builders.discord import build_webhook_payload
from app.use_cases.tally import RelaySubmissionUseCase

if TYPE_CHECKING:
    from app.protocols.webhook_sender import WebhookSenderProtocol
    from config.settings import RelayConfig


def create_relay_submission_use_case(
    config: RelayConfig,
    sender: WebhookSenderProtocol | None = None,
) -> RelaySubmissionUseCase:
    """Cria o use case de relay.

    Args:
        config: Configuração imutável do relay
        sender: Sender alternativo (default: cliente HTTP do Discord)
    """
    return RelaySubmissionUseCase(
        config=config,
        sender=sender or create_discord_webhook_client(config.relay),
        payload_builder=build_webhook_payload,
    )
