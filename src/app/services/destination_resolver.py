"""Resolução do webhook Discord de destino de uma submissão.

Precedência:
1. Header X-Webhook-URL, se presente (host precisa ser do Discord)
2. Mapeamento estático formId → URL da configuração

Limitação conhecida: o override é aceito apenas pelo hostname. Não há
verificação de assinatura nem de posse do webhook; quem tem o bearer
token pode apontar o relay para qualquer webhook em discord.com ou
discordapp.com.

Nenhuma exceção carrega a URL (configurada ou recebida).
"""

from __future__ import annotations

import logging
from urllib.parse import urlsplit

from app.constants.discord import TRUSTED_WEBHOOK_HOSTS
from config.forms import FormsConfig
from utils.errors import (
    InvalidUrlFormatError,
    MissingDestinationError,
    UnconfiguredFormError,
    UntrustedHostError,
)

logger = logging.getLogger(__name__)


def validate_override_url(override_url: str) -> str:
    """Valida a URL recebida no header e a retorna inalterada.

    Raises:
        InvalidUrlFormatError: Se não for uma URL absoluta com host
        UntrustedHostError: Se o host não for exatamente um host do Discord
    """
    try:
        parts = urlsplit(override_url)
        hostname = parts.hostname
        _ = parts.port  # porta inválida levanta ValueError
    except ValueError:
        raise InvalidUrlFormatError() from None

    if not parts.scheme or not hostname:
        raise InvalidUrlFormatError()

    if hostname not in TRUSTED_WEBHOOK_HOSTS:
        raise UntrustedHostError()

    return override_url


def resolve_destination(
    form_id: str | None,
    forms: FormsConfig,
    override_url: str | None = None,
) -> str:
    """Escolhe a URL do webhook de destino.

    Args:
        form_id: formId da submissão
        forms: Configuração estática de formulários
        override_url: Valor do header X-Webhook-URL (opcional)

    Returns:
        URL do webhook Discord

    Raises:
        InvalidUrlFormatError: Override malformado
        UntrustedHostError: Override fora dos hosts do Discord
        MissingDestinationError: Sem override e sem formId
        UnconfiguredFormError: formId sem webhook configurado
    """
    if override_url:
        url = validate_override_url(override_url)
        logger.info("destination_resolved", extra={"source": "header", "form_id": form_id})
        return url

    if not form_id:
        raise MissingDestinationError()

    url = forms.webhook_for(form_id)
    if not url:
        raise UnconfiguredFormError(form_id)

    logger.info("destination_resolved", extra={"source": "config", "form_id": form_id})
    return url
