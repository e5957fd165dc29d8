"""Builder do corpo enviado ao webhook do Discord."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.domain.display import Envelope


def build_webhook_payload(envelope: Envelope, username: str) -> dict[str, Any]:
    """Constrói o corpo JSON com um único embed.

    Args:
        envelope: Envelope renderizado da submissão
        username: Nome exibido pelo webhook

    Returns:
        Payload conforme API de webhooks do Discord
    """
    return {
        "username": username,
        "embeds": [envelope.as_embed()],
    }
