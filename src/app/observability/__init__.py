"""Observabilidade: contexto da requisição (correlation_id, formId) para logs.

Uso:
    token = set_correlation_id(request.headers.get("x-correlation-id"))
    try:
        ...
    finally:
        reset_correlation_id(token)
"""

from app.observability.correlation import (
    bind_form_id,
    get_correlation_id,
    get_form_id,
    reset_correlation_id,
    reset_form_id,
    set_correlation_id,
)

__all__ = [
    "bind_form_id",
    "get_correlation_id",
    "get_form_id",
    "reset_correlation_id",
    "reset_form_id",
    "set_correlation_id",
]
