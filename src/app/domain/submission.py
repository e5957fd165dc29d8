"""Submission - evento de resposta de formulário recebido do Tally.

Modelos construídos por requisição a partir do objeto ``data`` do webhook.
Nada é persistido; os valores de resposta nunca vão para logs.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.constants.tally import FieldType


class _TallyModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
        coerce_numbers_to_str=True,
    )


class ChoiceOption(_TallyModel):
    """Par ``{id, text}`` usado em options, rows e columns."""

    id: str
    text: str = ""


class FieldRecord(_TallyModel):
    """Uma pergunta (respondida ou não) dentro da submissão.

    ``value`` é polimórfico: string, número, booleano, lista de ids,
    lista de arquivos ou mapa linha → colunas, conforme ``type``.
    """

    key: str = ""
    label: str = ""
    type: str = ""
    value: Any = None
    options: list[ChoiceOption] | None = None
    rows: list[ChoiceOption] | None = None
    columns: list[ChoiceOption] | None = None

    @property
    def field_type(self) -> FieldType:
        return FieldType.from_raw(self.type)


class Submission(_TallyModel):
    """Resposta de formulário (objeto ``data`` do webhook)."""

    form_id: str | None = None
    form_name: str | None = None
    response_id: str | None = None
    submission_id: str | None = None
    respondent_id: str | None = None
    created_at: str | None = None
    fields: list[FieldRecord] = Field(default_factory=list)

    @field_validator("fields", mode="before")
    @classmethod
    def _null_fields_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class TallyWebhookPayload(_TallyModel):
    """Envelope completo enviado pelo Tally."""

    event_id: str | None = None
    event_type: str | None = None
    created_at: str | None = None
    data: Submission
