"""Formatter JSON do relay."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Ordem das chaves no JSON emitido
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "service",
    "correlation_id",
    "form_id",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria o formatter com os campos fixos e os ``extra`` de cada chamada.

    Exemplo de output:
        {"asctime": "...", "level": "INFO", "logger": "app.use_cases...",
         "message": "submission_relayed", "service": "tally-discord-relay",
         "correlation_id": "abc-123", "form_id": "w2XqYb", "entry_count": 4}
    """
    return JsonFormatter(
        " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS),
        rename_fields=FIELD_RENAME_MAP,
    )
