"""Testes do transcoder de campos Tally → entradas de embed."""

from __future__ import annotations

from typing import Any

import pytest

from app.constants.discord import MAX_FIELD_NAME_LENGTH, MAX_FIELD_VALUE_LENGTH
from app.domain import DisplaySettings, FieldRecord
from app.services.field_transcoder import (
    CHECKBOX_NO,
    CHECKBOX_YES,
    resolve_field_value,
    stringify_value,
    transcode_field,
    transcode_fields,
    truncate_text,
)


def _field(field_type: str, value: Any, label: str = "Question", **extra: Any) -> FieldRecord:
    return FieldRecord.model_validate(
        {"key": extra.pop("key", "question_abc"), "label": label, "type": field_type,
         "value": value, **extra}
    )


_OPTIONS = [{"id": "a", "text": "Alpha"}, {"id": "b", "text": "Beta"}, {"id": "c", "text": "Gamma"}]


class TestTruncateText:
    def test_short_text_is_unchanged(self) -> None:
        assert truncate_text("abc", 10) == "abc"

    def test_exact_limit_is_unchanged(self) -> None:
        assert truncate_text("x" * 10, 10) == "x" * 10

    def test_long_text_ends_with_ellipsis(self) -> None:
        result = truncate_text("x" * 20, 10)
        assert result == "xxxxxxx..."
        assert len(result) == 10

    def test_truncation_is_idempotent(self) -> None:
        once = truncate_text("y" * 2000, MAX_FIELD_VALUE_LENGTH)
        assert truncate_text(once, MAX_FIELD_VALUE_LENGTH) == once


class TestStringifyValue:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (None, ""),
            ("text", "text"),
            (True, "true"),
            (False, "false"),
            (42, "42"),
            (4.0, "4"),
            (2.5, "2.5"),
            (["a", 1], "a, 1"),
            ({"k": "ç"}, '{"k": "ç"}'),
        ],
    )
    def test_values(self, raw: Any, expected: str) -> None:
        assert stringify_value(raw) == expected


class TestResolveFieldValue:
    def test_plain_text(self) -> None:
        assert resolve_field_value(_field("INPUT_TEXT", "Jane")) == "Jane"

    def test_number(self) -> None:
        assert resolve_field_value(_field("INPUT_NUMBER", 7)) == "7"

    @pytest.mark.parametrize(
        ("field_type", "prefix"),
        [
            ("INPUT_EMAIL", "📧"),
            ("INPUT_PHONE_NUMBER", "📱"),
            ("INPUT_LINK", "🔗"),
            ("INPUT_DATE", "📅"),
            ("INPUT_TIME", "🕐"),
            ("HIDDEN_FIELDS", "🔒"),
            ("CALCULATED_FIELDS", "🧮"),
        ],
    )
    def test_prefixed_kinds(self, field_type: str, prefix: str) -> None:
        assert resolve_field_value(_field(field_type, "v")) == f"{prefix} v"

    def test_prefixed_kind_with_blank_value_is_empty(self) -> None:
        assert resolve_field_value(_field("INPUT_EMAIL", "  ")) == ""

    def test_multiple_choice_resolves_option_text(self) -> None:
        field = _field("MULTIPLE_CHOICE", "b", options=_OPTIONS)
        assert resolve_field_value(field) == "Beta"

    def test_multiple_choice_with_unknown_id_falls_back_to_raw(self) -> None:
        field = _field("DROPDOWN", "zzz", options=_OPTIONS)
        assert resolve_field_value(field) == "zzz"

    def test_multi_select_keeps_value_order(self) -> None:
        field = _field("MULTI_SELECT", ["c", "a"], options=_OPTIONS)
        assert resolve_field_value(field) == "Gamma, Alpha"

    def test_multi_select_skips_unmatched_ids(self) -> None:
        field = _field("MULTI_SELECT", ["a", "nope"], options=_OPTIONS)
        assert resolve_field_value(field) == "Alpha"

    def test_multi_select_without_matches_uses_raw_ids(self) -> None:
        field = _field("MULTI_SELECT", ["x", "y"], options=_OPTIONS)
        assert resolve_field_value(field) == "x, y"

    def test_checkbox_boolean(self) -> None:
        assert resolve_field_value(_field("CHECKBOXES", True)) == CHECKBOX_YES
        assert resolve_field_value(_field("CHECKBOXES", False)) == CHECKBOX_NO

    def test_checkbox_list(self) -> None:
        field = _field("CHECKBOXES", ["a", "b"], options=_OPTIONS)
        assert resolve_field_value(field) == "Alpha, Beta"

    def test_ranking_numbers_each_line(self) -> None:
        field = _field("RANKING", ["c", "a", "b"], options=_OPTIONS)
        assert resolve_field_value(field) == "1. Gamma\n2. Alpha\n3. Beta"

    def test_matrix_renders_row_per_line(self) -> None:
        field = _field(
            "MATRIX",
            {"r1": ["c1"], "r2": ["c1", "c2"], "r3": "broken"},
            rows=[{"id": "r1", "text": "Speed"}, {"id": "r2", "text": "Quality"}],
            columns=[{"id": "c1", "text": "Good"}, {"id": "c2", "text": "Great"}],
        )
        assert resolve_field_value(field) == "Speed: Good\nQuality: Good, Great"

    def test_matrix_unknown_row_uses_row_id(self) -> None:
        field = _field("MATRIX", {"r9": ["c1"]}, rows=[], columns=[{"id": "c1", "text": "Ok"}])
        assert resolve_field_value(field) == "r9: Ok"

    def test_file_upload_lists_links_with_size(self) -> None:
        field = _field(
            "FILE_UPLOAD",
            [
                {"name": "cv.pdf", "url": "https://files.example/cv.pdf", "size": 2048},
                {"name": "photo.png", "url": "https://files.example/p.png", "size": 1536},
            ],
        )
        assert resolve_field_value(field) == (
            "📎 [cv.pdf](https://files.example/cv.pdf) (2.0 KB)\n"
            "📎 [photo.png](https://files.example/p.png) (1.5 KB)"
        )

    def test_file_upload_with_null_name_and_url_renders_empty(self) -> None:
        field = _field("FILE_UPLOAD", [{"name": None, "url": None, "size": 1024}])
        assert resolve_field_value(field) == "📎 []() (1.0 KB)"

    def test_signature_uses_pen_prefix(self) -> None:
        field = _field("SIGNATURE", [{"name": "sig.png", "url": "https://s/x", "size": 512}])
        assert resolve_field_value(field) == "✍️ [sig.png](https://s/x) (0.5 KB)"

    def test_rating_and_linear_scale(self) -> None:
        assert resolve_field_value(_field("RATING", 4)) == "⭐ 4/5"
        assert resolve_field_value(_field("LINEAR_SCALE", 8)) == "📊 8/10"

    def test_rating_with_non_numeric_value_is_plain(self) -> None:
        assert resolve_field_value(_field("RATING", "n/a")) == "n/a"

    @pytest.mark.parametrize(
        ("label", "expected"),
        [
            ("Payment price", "💰 $10"),
            ("Payment currency", "💱 10"),
            ("Payer name", "👤 10"),
            ("Payer email", "📧 10"),
            ("Payment link", "🔗 [Payment Link](10)"),
            ("Payment", "💳 10"),
        ],
    )
    def test_payment_branches_by_label(self, label: str, expected: str) -> None:
        assert resolve_field_value(_field("PAYMENT", "10", label=label)) == expected

    def test_unknown_type_is_stringified(self) -> None:
        assert resolve_field_value(_field("BRAND_NEW_KIND", ["a", "b"])) == "a, b"


class TestTranscodeField:
    def test_basic_entry(self) -> None:
        entry = transcode_field(_field("INPUT_TEXT", "Jane", label="Name"), DisplaySettings())
        assert entry is not None
        assert entry.as_dict() == {"name": "Name", "value": "Jane", "inline": False}

    def test_hidden_field_is_dropped(self) -> None:
        settings = DisplaySettings(hidden_fields=frozenset({"question_abc"}))
        assert transcode_field(_field("INPUT_TEXT", "secret"), settings) is None

    def test_hidden_field_wins_over_label_and_formatter_overrides(self) -> None:
        settings = DisplaySettings(
            hidden_fields=frozenset({"question_abc"}),
            label_overrides={"question_abc": "🔒 CPF"},
            formatter_overrides={"question_abc": "bold"},
        )
        field = _field("INPUT_TEXT", "123.456.789-00", label="CPF")
        assert transcode_field(field, settings) is None

        entries = transcode_fields(
            [field, _field("INPUT_TEXT", "Jane", label="Name", key="name_key")], settings
        )
        assert [entry.name for entry in entries] == ["Name"]
        assert all("CPF" not in entry.name for entry in entries)

    def test_label_override(self) -> None:
        settings = DisplaySettings(label_overrides={"question_abc": "👤 Full name"})
        entry = transcode_field(_field("INPUT_TEXT", "Jane"), settings)
        assert entry is not None
        assert entry.name == "👤 Full name"

    def test_blank_label_falls_back_to_key(self) -> None:
        entry = transcode_field(_field("INPUT_TEXT", "Jane", label=""), DisplaySettings())
        assert entry is not None
        assert entry.name == "question_abc"

    def test_formatter_override_applies_after_resolution(self) -> None:
        settings = DisplaySettings(formatter_overrides={"question_abc": "bold"})
        entry = transcode_field(_field("MULTIPLE_CHOICE", "a", options=_OPTIONS), settings)
        assert entry is not None
        assert entry.value == "**Alpha**"

    def test_formatter_producing_blank_drops_entry(self) -> None:
        settings = DisplaySettings(formatter_overrides={"question_abc": "redact"})
        assert transcode_field(_field("INPUT_TEXT", "Jane"), settings) is None

    def test_formatter_runs_on_blank_value_before_emptiness_check(self) -> None:
        settings = DisplaySettings(formatter_overrides={"question_abc": "email"})
        entry = transcode_field(_field("INPUT_TEXT", ""), settings)
        assert entry is not None
        assert entry.value == "📧 "

    @pytest.mark.parametrize("value", [None, "", "   ", []])
    def test_empty_values_are_dropped(self, value: Any) -> None:
        assert transcode_field(_field("INPUT_TEXT", value), DisplaySettings()) is None

    def test_long_name_and_value_are_truncated(self) -> None:
        entry = transcode_field(
            _field("TEXTAREA", "v" * 5000, label="l" * 500),
            DisplaySettings(),
        )
        assert entry is not None
        assert len(entry.name) == MAX_FIELD_NAME_LENGTH
        assert len(entry.value) == MAX_FIELD_VALUE_LENGTH
        assert entry.value.endswith("...")


class TestTranscodeFields:
    def test_preserves_submission_order_and_drops_empties(self) -> None:
        fields = [
            _field("INPUT_TEXT", "first", label="One", key="k1"),
            _field("INPUT_TEXT", "", label="Two", key="k2"),
            _field("INPUT_TEXT", "third", label="Three", key="k3"),
        ]
        entries = transcode_fields(fields, DisplaySettings())
        assert [entry.name for entry in entries] == ["One", "Three"]

    def test_empty_field_list(self) -> None:
        assert transcode_fields([], DisplaySettings()) == []
