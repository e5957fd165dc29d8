"""Loader da configuração de formulários (YAML).

Lê o arquivo apontado por RELAY_FORMS_CONFIG_PATH e produz um
FormsConfig imutável. Erros de estrutura falham no startup, nunca
durante uma requisição.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from config.forms.models import (
    CustomMessage,
    EmbedColor,
    FieldSettings,
    FormsConfig,
    RateLimitSettings,
)

logger = logging.getLogger(__name__)


class FormsConfigError(Exception):
    """Erro ao carregar ou interpretar a configuração de formulários."""


def load_forms_config(path: str | Path) -> FormsConfig:
    """Carrega FormsConfig de um arquivo YAML.

    Arquivo inexistente gera configuração vazia (apenas X-Webhook-URL
    funciona nesse caso).

    Raises:
        FormsConfigError: Se o YAML for inválido ou a estrutura não bater
    """
    config_path = Path(path)
    if not config_path.exists():
        logger.warning(
            "forms_config_not_found",
            extra={"component": "forms_config", "path": str(config_path)},
        )
        return FormsConfig()

    try:
        with config_path.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise FormsConfigError(f"YAML inválido em {config_path}") from exc

    config = parse_forms_config(raw or {})
    logger.info(
        "forms_config_loaded",
        extra={
            "component": "forms_config",
            "form_count": len(config.form_webhooks),
            "hidden_field_count": len(config.field_settings.hidden_fields),
        },
    )
    return config


def parse_forms_config(raw: Any) -> FormsConfig:
    """Converte o documento YAML já parseado em FormsConfig."""
    if not isinstance(raw, Mapping):
        raise FormsConfigError("Configuração de formulários deve ser um dicionário")

    palette = _parse_palette(_section(raw, "colors"))
    return FormsConfig(
        form_webhooks=_frozen(_string_map(_section(raw, "form_webhooks"), "form_webhooks")),
        colors=_frozen(palette),
        form_colors=_frozen(
            {
                str(form_id): _parse_color(value, palette)
                for form_id, value in _section(raw, "form_colors").items()
            }
        ),
        custom_messages=_frozen(
            {
                str(form_id): _parse_custom_message(form_id, value)
                for form_id, value in _section(raw, "custom_messages").items()
            }
        ),
        field_settings=_parse_field_settings(_section(raw, "field_settings")),
        rate_limits=_parse_rate_limits(_section(raw, "rate_limits")),
    )


def _frozen(values: dict[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(values)


def _section(raw: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    value = raw.get(name)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise FormsConfigError(f"Seção '{name}' deve ser um dicionário")
    return value


def _string_map(values: Mapping[str, Any], name: str) -> dict[str, str]:
    result: dict[str, str] = {}
    for key, value in values.items():
        if not isinstance(value, str) or not value:
            raise FormsConfigError(f"'{name}.{key}' deve ser uma string não vazia")
        result[str(key)] = value
    return result


def _parse_palette(values: Mapping[str, Any]) -> dict[str, int]:
    palette = {color.name: int(color) for color in EmbedColor}
    for name, value in values.items():
        palette[str(name).upper()] = _parse_color(value, palette)
    return palette


def _parse_color(value: Any, palette: Mapping[str, int]) -> int:
    """Aceita inteiro, nome da paleta (INFO) ou hexadecimal (#0099ff, 0x0099ff)."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str):
        text = value.strip()
        if text.upper() in palette:
            return palette[text.upper()]
        hex_digits = text.removeprefix("#").removeprefix("0x").removeprefix("0X")
        try:
            return int(hex_digits, 16)
        except ValueError:
            pass
    raise FormsConfigError(f"Cor inválida: {value!r}")


def _parse_custom_message(form_id: Any, value: Any) -> CustomMessage:
    if not isinstance(value, Mapping):
        raise FormsConfigError(f"'custom_messages.{form_id}' deve ser um dicionário")
    title = value.get("title")
    description = value.get("description")
    return CustomMessage(
        title=str(title) if title else None,
        description=str(description) if description else None,
    )


def _parse_field_settings(values: Mapping[str, Any]) -> FieldSettings:
    hidden = values.get("hidden_fields") or []
    if not isinstance(hidden, list):
        raise FormsConfigError("'field_settings.hidden_fields' deve ser uma lista")
    labels = values.get("field_labels") or {}
    formatters = values.get("field_formatters") or {}
    if not isinstance(labels, Mapping) or not isinstance(formatters, Mapping):
        raise FormsConfigError(
            "'field_settings.field_labels' e 'field_formatters' devem ser dicionários"
        )
    return FieldSettings(
        hidden_fields=frozenset(str(key) for key in hidden),
        field_labels=_frozen(_string_map(labels, "field_settings.field_labels")),
        field_formatters=_frozen(_string_map(formatters, "field_settings.field_formatters")),
    )


def _parse_rate_limits(values: Mapping[str, Any]) -> RateLimitSettings:
    try:
        return RateLimitSettings(
            enabled=bool(values.get("enabled", False)),
            max_requests_per_minute=int(values.get("max_requests_per_minute", 60)),
            max_requests_per_hour=int(values.get("max_requests_per_hour", 1000)),
        )
    except (TypeError, ValueError) as exc:
        raise FormsConfigError("'rate_limits' contém valores não numéricos") from exc
