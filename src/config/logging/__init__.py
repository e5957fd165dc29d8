"""Logging estruturado (JSON) do relay.

``configure_logging`` é chamado uma vez pelo bootstrap; os módulos usam
``logging.getLogger(__name__)`` e passam contexto via ``extra``. Todo
record recebe ``service``, ``correlation_id`` e ``form_id``. Tokens, URLs
de webhook e valores de resposta nunca vão para os logs.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import RequestContextFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "RequestContextFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
