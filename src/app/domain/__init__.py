"""Modelos de domínio: submissão recebida e apresentação renderizada."""

from app.domain.display import DisplayEntry, DisplaySettings, Envelope
from app.domain.submission import (
    ChoiceOption,
    FieldRecord,
    Submission,
    TallyWebhookPayload,
)

__all__ = [
    "ChoiceOption",
    "DisplayEntry",
    "DisplaySettings",
    "Envelope",
    "FieldRecord",
    "Submission",
    "TallyWebhookPayload",
]
