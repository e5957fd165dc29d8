"""Use case: relay de uma submissão do Tally para o webhook Discord.

Ordem: resolver destino (barato, falha rápido) → transcodificar campos →
montar envelope → uma única tentativa de envio.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from app.protocols.models import RelayOutcome
from app.services.destination_resolver import resolve_destination
from app.services.display_settings import display_settings_for
from app.services.envelope_builder import build_envelope
from app.services.field_transcoder import transcode_fields
from utils.errors import DeliveryFailedError

if TYPE_CHECKING:
    from app.domain.display import Envelope
    from app.domain.submission import Submission
    from app.protocols.webhook_sender import WebhookSenderProtocol
    from config.settings import RelayConfig

logger = logging.getLogger(__name__)

PayloadBuilder = Callable[["Envelope", str], dict[str, Any]]


def _utcnow() -> datetime:
    return datetime.now(UTC)


class RelaySubmissionUseCase:
    """Orquestra resolução de destino, transcodificação e envio."""

    def __init__(
        self,
        config: RelayConfig,
        sender: WebhookSenderProtocol,
        payload_builder: PayloadBuilder,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._config = config
        self._sender = sender
        self._payload_builder = payload_builder
        self._clock = clock

    async def execute(
        self,
        submission: Submission,
        override_url: str | None = None,
    ) -> RelayOutcome:
        """Entrega a submissão ao Discord.

        Args:
            submission: Submissão já validada
            override_url: Valor do header X-Webhook-URL (opcional)

        Returns:
            RelayOutcome da entrega

        Raises:
            ResolutionError: Destino ausente, inválido ou não configurado
            DeliveryFailedError: Discord rejeitou ou não respondeu
        """
        forms = self._config.forms
        url = resolve_destination(submission.form_id, forms, override_url)

        settings = display_settings_for(forms, submission.form_id)
        entries = transcode_fields(submission.fields, settings)
        envelope = build_envelope(submission, settings, entries, clock=self._clock)
        payload = self._payload_builder(envelope, self._config.relay.bot_username)

        result = await self._sender.send(url, payload)
        if not result.ok:
            raise DeliveryFailedError(result.body, upstream_status=result.status_code)

        outcome = RelayOutcome(
            response_id=submission.response_id,
            form_id=submission.form_id,
            entry_count=len(entries),
            destination_source="header" if override_url else "config",
        )
        logger.info(
            "submission_relayed",
            extra={
                "form_id": outcome.form_id,
                "response_id": outcome.response_id,
                "entry_count": outcome.entry_count,
                "destination_source": outcome.destination_source,
            },
        )
        return outcome
