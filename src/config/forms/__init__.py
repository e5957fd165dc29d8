"""Configuração estática de formulários (webhooks, cores, campos).

Uso:
    from config.forms import load_forms_config

    forms = load_forms_config("forms.yaml")
    forms.webhook_for("w2XqYb")
"""

from config.forms.loader import FormsConfigError, load_forms_config, parse_forms_config
from config.forms.models import (
    CustomMessage,
    EmbedColor,
    FieldSettings,
    FormsConfig,
    RateLimitSettings,
)

__all__ = [
    "CustomMessage",
    "EmbedColor",
    "FieldSettings",
    "FormsConfig",
    "FormsConfigError",
    "RateLimitSettings",
    "load_forms_config",
    "parse_forms_config",
]
