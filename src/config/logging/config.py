"""Configuração centralizada de logging JSON do relay."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

from config.logging.filters import RequestContextFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "tally-discord-relay"

# httpx registra a URL completa de cada request em INFO; a URL do webhook
# Discord contém o token do webhook.
QUIET_LOGGERS = ("httpx", "httpcore")


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    form_id_getter: Callable[[], str] | None = None,
    stream: TextIO | None = None,
) -> None:
    """Instala um único handler JSON no root logger.

    Chamada uma vez pelo bootstrap (``initialize_app``).

    Args:
        level: Nível do root logger (case insensitive)
        service_name: Valor do campo ``service``
        correlation_id_getter: Lê o correlation_id da requisição atual
        form_id_getter: Lê o formId da submissão atual
        stream: Destino do handler (default: stdout)

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(
        RequestContextFilter(service_name, correlation_id_getter, form_id_getter)
    )

    root = logging.getLogger()
    root.setLevel(level_upper)
    root.handlers = [handler]

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
