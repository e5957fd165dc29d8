"""Modelos trocados entre use cases e adapters de envio."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DeliveryResult:
    """Resultado da única tentativa de POST ao webhook.

    Attributes:
        ok: True para status 2xx
        status_code: Status HTTP retornado
        body: Texto da resposta (mensagem de erro do Discord, se houver)
    """

    ok: bool
    status_code: int
    body: str = ""


@dataclass(frozen=True, slots=True)
class RelayOutcome:
    """Resumo de uma submissão entregue com sucesso."""

    response_id: str | None
    form_id: str | None
    entry_count: int
    destination_source: str
