"""Settings do relay Tally → Discord.

Credencial de entrada (bearer token), caminho da configuração de
formulários e parâmetros do envio ao webhook Discord.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING

from config.forms import FormsConfig

if TYPE_CHECKING:
    from config.settings.base.core import BaseSettings

DEFAULT_FORMS_CONFIG_PATH = "forms.yaml"
DEFAULT_BOT_USERNAME = "Tally Form Bot"


@dataclass(frozen=True)
class DiscordRelaySettings:
    """Configurações do relay.

    Attributes:
        auth_token: Token esperado em ``Authorization: Bearer <token>``
        forms_config_path: Caminho do YAML de formulários
        bot_username: Nome exibido pelo webhook no Discord
        request_timeout_seconds: Timeout do POST ao Discord
    """

    auth_token: str = field(default="", repr=False)
    forms_config_path: str = DEFAULT_FORMS_CONFIG_PATH
    bot_username: str = DEFAULT_BOT_USERNAME
    request_timeout_seconds: float = 10.0

    def validate(self) -> list[str]:
        """Valida configurações mínimas do relay.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.auth_token:
            errors.append("RELAY_AUTH_TOKEN não configurado")

        if not Path(self.forms_config_path).exists():
            errors.append(f"RELAY_FORMS_CONFIG_PATH não encontrado: {self.forms_config_path}")

        if not self.bot_username:
            errors.append("RELAY_BOT_USERNAME não pode ser vazio")

        if self.request_timeout_seconds <= 0:
            errors.append("RELAY_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


@dataclass(frozen=True)
class RelayConfig:
    """Configuração imutável montada uma vez no startup.

    Passada explicitamente ao resolver de destino e ao transcoder.
    """

    base: BaseSettings
    relay: DiscordRelaySettings
    forms: FormsConfig


def _load_from_env() -> DiscordRelaySettings:
    """Carrega DiscordRelaySettings a partir de variáveis de ambiente."""
    return DiscordRelaySettings(
        auth_token=os.getenv("RELAY_AUTH_TOKEN", ""),
        forms_config_path=os.getenv("RELAY_FORMS_CONFIG_PATH", DEFAULT_FORMS_CONFIG_PATH),
        bot_username=os.getenv("RELAY_BOT_USERNAME", DEFAULT_BOT_USERNAME),
        request_timeout_seconds=float(os.getenv("RELAY_REQUEST_TIMEOUT_SECONDS", "10")),
    )


@lru_cache(maxsize=1)
def get_discord_relay_settings() -> DiscordRelaySettings:
    """Retorna instância cacheada de DiscordRelaySettings."""
    return _load_from_env()
