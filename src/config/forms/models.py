"""Tabelas estáticas por formulário (webhooks, cores, mensagens, campos)."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import IntEnum
from types import MappingProxyType


class EmbedColor(IntEnum):
    """Paleta padrão de cores de embed."""

    SUCCESS = 0x00FF00
    INFO = 0x0099FF
    WARNING = 0xFFCC00
    ERROR = 0xFF0000
    CUSTOM = 0x7289DA


def _empty_mapping() -> Mapping:
    return MappingProxyType({})


@dataclass(frozen=True)
class CustomMessage:
    """Título/descrição customizados de um formulário."""

    title: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class FieldSettings:
    """Settings globais de exibição de campos.

    Attributes:
        hidden_fields: Keys que nunca são enviadas ao Discord
        field_labels: key → rótulo exibido
        field_formatters: key → nome de transformação registrada
    """

    hidden_fields: frozenset[str] = frozenset()
    field_labels: Mapping[str, str] = field(default_factory=_empty_mapping)
    field_formatters: Mapping[str, str] = field(default_factory=_empty_mapping)


@dataclass(frozen=True)
class RateLimitSettings:
    """Limites de requisição. Lidos da configuração, não aplicados."""

    enabled: bool = False
    max_requests_per_minute: int = 60
    max_requests_per_hour: int = 1000


@dataclass(frozen=True)
class FormsConfig:
    """Configuração imutável carregada uma vez no startup.

    Attributes:
        form_webhooks: formId → URL do webhook Discord
        colors: nome da cor → valor inteiro
        form_colors: formId → cor do embed
        custom_messages: formId → título/descrição
        field_settings: visibilidade, rótulos e formatadores de campos
        rate_limits: placeholder de rate limiting
    """

    form_webhooks: Mapping[str, str] = field(default_factory=_empty_mapping)
    colors: Mapping[str, int] = field(default_factory=_empty_mapping)
    form_colors: Mapping[str, int] = field(default_factory=_empty_mapping)
    custom_messages: Mapping[str, CustomMessage] = field(default_factory=_empty_mapping)
    field_settings: FieldSettings = field(default_factory=FieldSettings)
    rate_limits: RateLimitSettings = field(default_factory=RateLimitSettings)

    def webhook_for(self, form_id: str) -> str | None:
        return self.form_webhooks.get(form_id)
