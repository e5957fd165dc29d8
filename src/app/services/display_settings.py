"""Combina settings globais de campos com a apresentação de cada formulário."""

from __future__ import annotations

from app.constants.discord import DEFAULT_EMBED_COLOR
from app.domain.display import DisplaySettings
from config.forms import FormsConfig


def display_settings_for(forms: FormsConfig, form_id: str | None) -> DisplaySettings:
    """Monta os DisplaySettings aplicáveis a um formulário.

    Título, descrição e cor dependem do formId; visibilidade, rótulos e
    formatadores valem para todos os formulários.
    """
    message = forms.custom_messages.get(form_id) if form_id else None
    color = forms.form_colors.get(form_id) if form_id else None
    field_settings = forms.field_settings
    return DisplaySettings(
        title=message.title if message else None,
        description=message.description if message else None,
        color=color or DEFAULT_EMBED_COLOR,
        hidden_fields=field_settings.hidden_fields,
        label_overrides=field_settings.field_labels,
        formatter_overrides=field_settings.field_formatters,
    )
