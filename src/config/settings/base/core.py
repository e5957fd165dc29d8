"""Settings de processo do relay: ambiente, identificação, log e porta HTTP."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]

DEFAULT_SERVICE_NAME = "tally-discord-relay"
DEFAULT_PORT = 8080

_ENVIRONMENT_ALIASES: dict[str, Environment] = {
    "production": "production",
    "prod": "production",
    "staging": "staging",
    "stage": "staging",
}
_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})
_TRUTHY = frozenset({"true", "1", "yes"})


@dataclass(frozen=True)
class BaseSettings:
    """Settings comuns do processo.

    Attributes:
        environment: development | staging | production
        service_name: Valor do campo ``service`` nos logs
        log_level: Nível do root logger
        debug: Modo debug (reload do uvicorn em desenvolvimento)
        port: Porta HTTP do uvicorn
    """

    environment: Environment = "development"
    service_name: str = DEFAULT_SERVICE_NAME
    log_level: str = "INFO"
    debug: bool = False
    port: int = DEFAULT_PORT

    @property
    def is_strict(self) -> bool:
        """Staging e produção não sobem com configuração inválida."""
        return self.environment != "development"

    def validate(self) -> list[str]:
        """Retorna a lista de erros (vazia = OK)."""
        errors: list[str] = []
        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")
        if self.log_level not in _LOG_LEVELS:
            errors.append(f"LOG_LEVEL inválido: {self.log_level}")
        if not 0 < self.port < 65536:
            errors.append(f"PORT fora do intervalo: {self.port}")
        return errors


def _parse_environment(raw: str) -> Environment:
    return _ENVIRONMENT_ALIASES.get(raw.strip().lower(), "development")


def _load_base_from_env() -> BaseSettings:
    return BaseSettings(
        environment=_parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", DEFAULT_SERVICE_NAME),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        debug=os.getenv("DEBUG", "").lower() in _TRUTHY,
        port=int(os.getenv("PORT", str(DEFAULT_PORT))),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """BaseSettings lidas do ambiente uma única vez."""
    return _load_base_from_env()
