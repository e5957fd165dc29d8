"""Conector de saída para webhooks do Discord."""

from .http_client import DiscordClientConfig, DiscordWebhookClient, create_discord_webhook_client

__all__ = [
    "DiscordClientConfig",
    "DiscordWebhookClient",
    "create_discord_webhook_client",
]
