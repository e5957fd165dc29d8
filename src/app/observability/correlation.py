"""Contexto da requisição propagado para os logs.

Cada POST do Tally ganha um correlation_id (header ``X-Correlation-ID`` ou
UUID novo) e, depois do parse, o formId da submissão. O filter de logging
lê os dois sem que cada chamada de log precise repeti-los.
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")
_form_id: ContextVar[str] = ContextVar("form_id", default="")


def get_correlation_id() -> str:
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id; vazio ou None gera um UUID v4."""
    return _correlation_id.set(correlation_id or str(uuid.uuid4()))


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)


def get_form_id() -> str:
    return _form_id.get()


def bind_form_id(form_id: str | None) -> Token[str]:
    """Associa o formId da submissão aos logs seguintes desta requisição."""
    return _form_id.set(form_id or "")


def reset_form_id(token: Token[str]) -> None:
    _form_id.reset(token)
