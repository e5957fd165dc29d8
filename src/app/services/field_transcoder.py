"""Transcoder de campos do Tally para entradas de embed do Discord.

Pipeline por campo, na ordem original da submissão:
1. Filtro de visibilidade (hidden_fields)
2. Resolução do valor conforme o tipo do campo
3. Override de rótulo
4. Override de formatação (transformação nomeada)
5. Descarte de valores vazios
6. Truncamento nos limites do Discord

Funções puras: sem IO e sem estado compartilhado.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from app.constants.discord import (
    MAX_FIELD_NAME_LENGTH,
    MAX_FIELD_VALUE_LENGTH,
    TRUNCATION_SUFFIX,
)
from app.constants.tally import FieldType
from app.domain.display import DisplayEntry, DisplaySettings
from app.domain.submission import ChoiceOption, FieldRecord
from app.services.field_formatters import apply_formatter

logger = logging.getLogger(__name__)

CHECKBOX_YES = "✅ Yes"
CHECKBOX_NO = "❌ No"

# Ordem importa: o primeiro trecho encontrado no rótulo vence
_PAYMENT_BRANCHES: tuple[tuple[str, str], ...] = (
    ("price", "💰 ${value}"),
    ("currency", "💱 {value}"),
    ("name", "👤 {value}"),
    ("email", "📧 {value}"),
    ("link", "🔗 [Payment Link]({value})"),
)
_PAYMENT_DEFAULT = "💳 {value}"


def truncate_text(text: str, max_length: int) -> str:
    """Limita o texto a ``max_length`` caracteres terminando em ``...``.

    Idempotente: o resultado já cabe no limite.
    """
    if len(text) <= max_length:
        return text
    return text[: max_length - len(TRUNCATION_SUFFIX)] + TRUNCATION_SUFFIX


def stringify_value(value: Any) -> str:
    """Converte um valor bruto do webhook em texto exibível."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int | float):
        return _format_number(value)
    if isinstance(value, list | tuple):
        return ", ".join(stringify_value(item) for item in value)
    if isinstance(value, Mapping):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def _format_number(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def _option_text(options: Sequence[ChoiceOption] | None, raw_id: Any) -> str | None:
    if not options or raw_id is None:
        return None
    wanted = str(raw_id)
    for option in options:
        if option.id == wanted:
            return option.text
    return None


def _resolve_selection(options: Sequence[ChoiceOption] | None, value: Any) -> str:
    if isinstance(value, list):
        texts = [
            text for raw_id in value if (text := _option_text(options, raw_id)) is not None
        ]
        return ", ".join(texts) if texts else stringify_value(value)
    text = _option_text(options, value)
    return text if text is not None else stringify_value(value)


def _resolve_plain(field: FieldRecord) -> str:
    return stringify_value(field.value)


def _resolve_choice(field: FieldRecord) -> str:
    return _resolve_selection(field.options, field.value)


def _resolve_checkboxes(field: FieldRecord) -> str:
    if isinstance(field.value, bool):
        return CHECKBOX_YES if field.value else CHECKBOX_NO
    return _resolve_selection(field.options, field.value)


def _resolve_ranking(field: FieldRecord) -> str:
    if not isinstance(field.value, list):
        return stringify_value(field.value)
    lines = []
    for position, raw_id in enumerate(field.value, start=1):
        text = _option_text(field.options, raw_id)
        lines.append(f"{position}. {text if text is not None else stringify_value(raw_id)}")
    return "\n".join(lines)


def _resolve_matrix(field: FieldRecord) -> str:
    if not isinstance(field.value, Mapping):
        return stringify_value(field.value)
    lines = []
    for row_id, column_ids in field.value.items():
        if not isinstance(column_ids, list):
            continue
        row_text = _option_text(field.rows, row_id)
        columns = [
            text
            for column_id in column_ids
            if (text := _option_text(field.columns, column_id)) is not None
        ]
        lines.append(f"{row_text if row_text is not None else row_id}: {', '.join(columns)}")
    return "\n".join(lines)


def _file_resolver(prefix: str) -> Callable[[FieldRecord], str]:
    def _resolve(field: FieldRecord) -> str:
        if not isinstance(field.value, list):
            return stringify_value(field.value)
        lines = []
        for item in field.value:
            if not isinstance(item, Mapping):
                continue
            size = item.get("size")
            size_kb = (size if _is_number(size) else 0) / 1024
            lines.append(
                f"{prefix} [{item.get('name') or ''}]({item.get('url') or ''}) ({size_kb:.1f} KB)"
            )
        return "\n".join(lines)

    return _resolve


def _scale_resolver(prefix: str, maximum: int) -> Callable[[FieldRecord], str]:
    def _resolve(field: FieldRecord) -> str:
        if _is_number(field.value):
            return f"{prefix} {_format_number(field.value)}/{maximum}"
        return stringify_value(field.value)

    return _resolve


def _prefix_resolver(prefix: str) -> Callable[[FieldRecord], str]:
    def _resolve(field: FieldRecord) -> str:
        text = stringify_value(field.value)
        return f"{prefix} {text}" if text.strip() else ""

    return _resolve


def _resolve_payment(field: FieldRecord) -> str:
    text = stringify_value(field.value)
    if not text.strip():
        return ""
    for needle, template in _PAYMENT_BRANCHES:
        if needle in field.label:
            return template.format(value=text)
    return _PAYMENT_DEFAULT.format(value=text)


# Mapeamento de tipo de campo para resolução do valor
_RESOLVERS: dict[FieldType, Callable[[FieldRecord], str]] = {
    FieldType.INPUT_TEXT: _resolve_plain,
    FieldType.TEXTAREA: _resolve_plain,
    FieldType.INPUT_NUMBER: _resolve_plain,
    FieldType.INPUT_EMAIL: _prefix_resolver("📧"),
    FieldType.INPUT_PHONE_NUMBER: _prefix_resolver("📱"),
    FieldType.INPUT_LINK: _prefix_resolver("🔗"),
    FieldType.INPUT_DATE: _prefix_resolver("📅"),
    FieldType.INPUT_TIME: _prefix_resolver("🕐"),
    FieldType.MULTIPLE_CHOICE: _resolve_choice,
    FieldType.DROPDOWN: _resolve_choice,
    FieldType.MULTI_SELECT: _resolve_choice,
    FieldType.CHECKBOXES: _resolve_checkboxes,
    FieldType.RANKING: _resolve_ranking,
    FieldType.MATRIX: _resolve_matrix,
    FieldType.FILE_UPLOAD: _file_resolver("📎"),
    FieldType.SIGNATURE: _file_resolver("✍️"),
    FieldType.RATING: _scale_resolver("⭐", 5),
    FieldType.LINEAR_SCALE: _scale_resolver("📊", 10),
    FieldType.PAYMENT: _resolve_payment,
    FieldType.HIDDEN_FIELDS: _prefix_resolver("🔒"),
    FieldType.CALCULATED_FIELDS: _prefix_resolver("🧮"),
    FieldType.UNKNOWN: _resolve_plain,
}


def resolve_field_value(field: FieldRecord) -> str:
    """Resolve o valor bruto do campo em texto, conforme o tipo."""
    return _RESOLVERS.get(field.field_type, _resolve_plain)(field)


def transcode_field(field: FieldRecord, settings: DisplaySettings) -> DisplayEntry | None:
    """Converte um campo em entrada de embed, ou None se não deve aparecer."""
    if field.key in settings.hidden_fields:
        return None

    value = resolve_field_value(field)

    if field.key in settings.label_overrides:
        label = settings.label_overrides[field.key]
    else:
        label = field.label

    formatter_name = settings.formatter_overrides.get(field.key)
    if formatter_name:
        value = apply_formatter(formatter_name, value)

    if not value.strip():
        return None

    return DisplayEntry(
        name=truncate_text(label or field.key, MAX_FIELD_NAME_LENGTH),
        value=truncate_text(value, MAX_FIELD_VALUE_LENGTH),
        inline=False,
    )


def transcode_fields(
    fields: Sequence[FieldRecord],
    settings: DisplaySettings,
) -> list[DisplayEntry]:
    """Converte a lista de campos preservando a ordem da submissão."""
    entries = [
        entry for field in fields if (entry := transcode_field(field, settings)) is not None
    ]
    logger.debug(
        "fields_transcoded",
        extra={"field_count": len(fields), "entry_count": len(entries)},
    )
    return entries
