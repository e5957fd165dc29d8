"""Registro de transformações nomeadas para override de formatação.

A configuração associa a key de um campo a um nome deste registro; o
transcoder aplica a transformação sobre o valor já resolvido pelo tipo.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType

FieldFormatter = Callable[[str], str]


class UnknownFormatterError(KeyError):
    """Nome de transformação não registrado."""


def _prefixed(prefix: str) -> FieldFormatter:
    return lambda value: f"{prefix} {value}"


def _wrapped(marker: str) -> FieldFormatter:
    return lambda value: f"{marker}{value}{marker}"


_FORMATTERS: Mapping[str, FieldFormatter] = MappingProxyType(
    {
        "email": _prefixed("📧"),
        "phone": _prefixed("📱"),
        "link": _prefixed("🔗"),
        "bold": _wrapped("**"),
        "italic": _wrapped("*"),
        "code": _wrapped("`"),
        "spoiler": _wrapped("||"),
        "upper": str.upper,
        "lower": str.lower,
        "strip": str.strip,
        "redact": lambda _value: "",
    }
)


def available_formatters() -> frozenset[str]:
    """Nomes aceitos em ``field_formatters``."""
    return frozenset(_FORMATTERS)


def get_formatter(name: str) -> FieldFormatter:
    """Retorna a transformação registrada.

    Raises:
        UnknownFormatterError: Se o nome não existir no registro
    """
    try:
        return _FORMATTERS[name]
    except KeyError:
        raise UnknownFormatterError(name) from None


def apply_formatter(name: str, value: str) -> str:
    return get_formatter(name)(value)
