"""Protocolos e contratos do core da aplicação."""

from .models import DeliveryResult, RelayOutcome
from .webhook_sender import WebhookSenderProtocol

__all__ = [
    "DeliveryResult",
    "RelayOutcome",
    "WebhookSenderProtocol",
]
