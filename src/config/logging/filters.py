"""Filter que injeta o contexto da requisição em cada record."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


def _empty() -> str:
    return ""


class RequestContextFilter(logging.Filter):
    """Adiciona ``service``, ``correlation_id`` e ``form_id`` ao record.

    Valores passados explicitamente via ``extra`` têm precedência sobre os
    getters. Nunca injeta token, URL de webhook ou respostas do formulário.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
        form_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._getters: dict[str, Callable[[], str]] = {
            "correlation_id": correlation_id_getter or _empty,
            "form_id": form_id_getter or _empty,
        }

    def filter(self, record: logging.LogRecord) -> bool:
        for attribute, getter in self._getters.items():
            if not getattr(record, attribute, None):
                setattr(record, attribute, getter())
        record.service = self._service_name
        return True
