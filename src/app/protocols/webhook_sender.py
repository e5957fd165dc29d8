"""Protocolo de envio ao webhook de destino."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from .models import DeliveryResult


class WebhookSenderProtocol(Protocol):
    """Contrato mínimo para enviar o corpo JSON a uma URL de webhook."""

    async def send(self, url: str, payload: dict[str, Any]) -> DeliveryResult: ...
