"""Settings do relay lidas do ambiente.

- base: ambiente, nome do serviço, log, porta
- discord: token de entrada, YAML de formulários, envio ao Discord

``RelayConfig`` junta as duas com a configuração de formulários.
"""

from __future__ import annotations

from config.settings.base import (
    DEFAULT_PORT,
    DEFAULT_SERVICE_NAME,
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.discord import (
    DEFAULT_BOT_USERNAME,
    DEFAULT_FORMS_CONFIG_PATH,
    DiscordRelaySettings,
    RelayConfig,
    get_discord_relay_settings,
)

__all__ = [
    "DEFAULT_BOT_USERNAME",
    "DEFAULT_FORMS_CONFIG_PATH",
    "DEFAULT_PORT",
    "DEFAULT_SERVICE_NAME",
    "BaseSettings",
    "DiscordRelaySettings",
    "Environment",
    "RelayConfig",
    "get_base_settings",
    "get_discord_relay_settings",
]
