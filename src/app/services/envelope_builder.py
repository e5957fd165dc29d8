"""Montagem do envelope (título, descrição, cor, rodapé e timestamp)."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import UTC, datetime

from app.constants.discord import (
    DEFAULT_EMBED_TITLE,
    MISSING_ID_PLACEHOLDER,
    UNKNOWN_FORM_NAME,
)
from app.domain.display import DisplayEntry, DisplaySettings, Envelope
from app.domain.submission import Submission


def _utcnow() -> datetime:
    return datetime.now(UTC)


def build_footer_text(submission: Submission) -> str:
    response_id = submission.response_id or MISSING_ID_PLACEHOLDER
    submission_id = submission.submission_id or MISSING_ID_PLACEHOLDER
    return f"Response ID: {response_id} | Submission ID: {submission_id}"


def build_envelope(
    submission: Submission,
    settings: DisplaySettings,
    entries: Sequence[DisplayEntry],
    clock: Callable[[], datetime] = _utcnow,
) -> Envelope:
    """Monta o envelope de apresentação da submissão.

    Args:
        submission: Submissão recebida
        settings: Settings de exibição do formulário
        entries: Entradas já transcodificadas
        clock: Fonte do horário atual, usada quando ``createdAt`` falta

    Returns:
        Envelope pronto para virar embed
    """
    description = settings.description or (
        f"**Form:** {submission.form_name or UNKNOWN_FORM_NAME}"
    )
    return Envelope(
        title=settings.title or DEFAULT_EMBED_TITLE,
        description=description,
        color=settings.color,
        entries=tuple(entries),
        footer_text=build_footer_text(submission),
        timestamp_iso=submission.created_at or clock().isoformat(),
    )
