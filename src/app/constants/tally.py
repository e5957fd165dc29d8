"""Enums de domínio para tipos de campo do Tally."""

from __future__ import annotations

from enum import StrEnum


class FieldType(StrEnum):
    """Tipos de campo enviados pelo Tally no webhook de resposta.

    UNKNOWN cobre tipos novos que o Tally venha a introduzir.
    """

    INPUT_TEXT = "INPUT_TEXT"
    TEXTAREA = "TEXTAREA"
    INPUT_NUMBER = "INPUT_NUMBER"
    INPUT_EMAIL = "INPUT_EMAIL"
    INPUT_PHONE_NUMBER = "INPUT_PHONE_NUMBER"
    INPUT_LINK = "INPUT_LINK"
    INPUT_DATE = "INPUT_DATE"
    INPUT_TIME = "INPUT_TIME"
    MULTIPLE_CHOICE = "MULTIPLE_CHOICE"
    CHECKBOXES = "CHECKBOXES"
    DROPDOWN = "DROPDOWN"
    MULTI_SELECT = "MULTI_SELECT"
    RANKING = "RANKING"
    MATRIX = "MATRIX"
    FILE_UPLOAD = "FILE_UPLOAD"
    SIGNATURE = "SIGNATURE"
    RATING = "RATING"
    LINEAR_SCALE = "LINEAR_SCALE"
    PAYMENT = "PAYMENT"
    HIDDEN_FIELDS = "HIDDEN_FIELDS"
    CALCULATED_FIELDS = "CALCULATED_FIELDS"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def from_raw(cls, raw: str | None) -> FieldType:
        """Converte a string do provedor, caindo em UNKNOWN se não reconhecida."""
        try:
            return cls(raw or "")
        except ValueError:
            return cls.UNKNOWN
