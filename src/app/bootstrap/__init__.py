"""Bootstrap da aplicação: inicialização e wiring.

Composition root: configura logging, monta a configuração imutável do
relay e conecta implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, get_relay_use_case

    initialize_app()
    use_case = get_relay_use_case()
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from app.observability import get_correlation_id, get_form_id
from app.services.field_formatters import available_formatters
from config.forms import FormsConfigError, load_forms_config
from config.logging import configure_logging
from config.settings import (
    RelayConfig,
    get_base_settings,
    get_discord_relay_settings,
)

if TYPE_CHECKING:
    from app.use_cases.tally import RelaySubmissionUseCase

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging JSON com correlation_id. Chamar uma vez no startup."""
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
        form_id_getter=get_form_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    base = get_base_settings()
    errors = [f"base: {error}" for error in base.validate()]
    errors.extend(f"relay: {error}" for error in get_discord_relay_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.is_strict:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


def build_relay_config() -> RelayConfig:
    """Monta a RelayConfig a partir do ambiente e do YAML de formulários.

    Raises:
        FormsConfigError: YAML inválido ou formatador não registrado
    """
    relay = get_discord_relay_settings()
    forms = load_forms_config(relay.forms_config_path)

    unknown = set(forms.field_settings.field_formatters.values()) - available_formatters()
    if unknown:
        raise FormsConfigError(
            f"Formatadores não registrados: {', '.join(sorted(unknown))}"
        )

    if forms.rate_limits.enabled:
        logger.warning(
            "rate_limits_not_enforced",
            extra={
                "component": "bootstrap",
                "max_requests_per_minute": forms.rate_limits.max_requests_per_minute,
                "max_requests_per_hour": forms.rate_limits.max_requests_per_hour,
            },
        )

    return RelayConfig(base=get_base_settings(), relay=relay, forms=forms)


@lru_cache(maxsize=1)
def get_relay_config() -> RelayConfig:
    """Obtém a RelayConfig (singleton, imutável após o startup)."""
    return build_relay_config()


@lru_cache(maxsize=1)
def get_relay_use_case() -> RelaySubmissionUseCase:
    """Obtém o use case de relay com o cliente Discord (singleton)."""
    from app.bootstrap.relay_factory import create_relay_submission_use_case

    return create_relay_submission_use_case(get_relay_config())
