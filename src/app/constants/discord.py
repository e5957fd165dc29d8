"""Constantes do destino Discord (limites de embed, cores e hosts aceitos)."""

from __future__ import annotations

# Limites de embed da API do Discord
MAX_FIELD_NAME_LENGTH = 256
MAX_FIELD_VALUE_LENGTH = 1024
TRUNCATION_SUFFIX = "..."

# Hosts aceitos no header X-Webhook-URL (comparação exata, sem subdomínios)
TRUSTED_WEBHOOK_HOSTS = frozenset({"discord.com", "discordapp.com"})

DEFAULT_EMBED_TITLE = "📝 New Form Response"
UNKNOWN_FORM_NAME = "Unknown Form"
MISSING_ID_PLACEHOLDER = "N/A"
DEFAULT_EMBED_COLOR = 0x0099FF
