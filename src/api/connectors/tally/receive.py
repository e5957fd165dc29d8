"""Parse do corpo do webhook do Tally (sem logar respostas)."""

from __future__ import annotations

import json

from pydantic import ValidationError

from app.domain.submission import Submission, TallyWebhookPayload
from utils.errors import InvalidPayloadError

_MISSING_DATA_MESSAGE = "Missing required data field"


def parse_submission_request(raw_body: bytes) -> Submission:
    """Parseia o JSON e extrai a submissão do objeto ``data``.

    Args:
        raw_body: Corpo bruto do request

    Raises:
        InvalidPayloadError: JSON inválido, corpo não-objeto ou ``data`` ausente/inválido

    Returns:
        Submission validada
    """
    try:
        payload = json.loads(raw_body or b"null")
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise InvalidPayloadError("Request body is not valid JSON") from exc

    if not isinstance(payload, dict) or payload.get("data") is None:
        raise InvalidPayloadError(_MISSING_DATA_MESSAGE)

    try:
        return TallyWebhookPayload.model_validate(payload).data
    except ValidationError as exc:
        raise InvalidPayloadError(_MISSING_DATA_MESSAGE) from exc
