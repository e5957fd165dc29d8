"""Serviços de aplicação.

Funções puras de resolução de destino, transcodificação de campos e
montagem do envelope (sem IO direto).
"""

from app.services.destination_resolver import resolve_destination, validate_override_url
from app.services.display_settings import display_settings_for
from app.services.envelope_builder import build_envelope, build_footer_text
from app.services.field_formatters import (
    UnknownFormatterError,
    apply_formatter,
    available_formatters,
    get_formatter,
)
from app.services.field_transcoder import (
    resolve_field_value,
    transcode_field,
    transcode_fields,
    truncate_text,
)

__all__ = [
    "UnknownFormatterError",
    "apply_formatter",
    "available_formatters",
    "build_envelope",
    "build_footer_text",
    "display_settings_for",
    "get_formatter",
    "resolve_destination",
    "resolve_field_value",
    "transcode_field",
    "transcode_fields",
    "truncate_text",
    "validate_override_url",
]
