"""Modelos de apresentação: settings de exibição, entradas e envelope do embed."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from app.constants.discord import DEFAULT_EMBED_COLOR


def _frozen_mapping(values: Mapping[str, str] | None = None) -> Mapping[str, str]:
    return MappingProxyType(dict(values or {}))


@dataclass(frozen=True, slots=True)
class DisplaySettings:
    """Settings de exibição aplicados a uma submissão.

    Attributes:
        title: Título customizado do formulário (None = padrão)
        description: Descrição customizada (None = padrão)
        color: Cor do embed
        hidden_fields: Keys de campos que nunca são exibidos
        label_overrides: key → rótulo exibido
        formatter_overrides: key → nome de transformação registrada
    """

    title: str | None = None
    description: str | None = None
    color: int = DEFAULT_EMBED_COLOR
    hidden_fields: frozenset[str] = frozenset()
    label_overrides: Mapping[str, str] = field(default_factory=_frozen_mapping)
    formatter_overrides: Mapping[str, str] = field(default_factory=_frozen_mapping)


@dataclass(frozen=True, slots=True)
class DisplayEntry:
    """Par nome/valor já limitado aos tamanhos do Discord."""

    name: str
    value: str
    inline: bool = False

    def as_dict(self) -> dict[str, Any]:
        return {"name": self.name, "value": self.value, "inline": self.inline}


@dataclass(frozen=True, slots=True)
class Envelope:
    """Conteúdo renderizado de uma submissão, pronto para virar embed."""

    title: str
    description: str
    color: int
    entries: tuple[DisplayEntry, ...]
    footer_text: str
    timestamp_iso: str

    def as_embed(self) -> dict[str, Any]:
        """Formato de embed esperado pela API de webhooks do Discord."""
        return {
            "title": self.title,
            "description": self.description,
            "color": self.color,
            "fields": [entry.as_dict() for entry in self.entries],
            "footer": {"text": self.footer_text},
            "timestamp": self.timestamp_iso,
        }
