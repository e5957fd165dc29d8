"""Testes da resolução do webhook de destino."""

from __future__ import annotations

import pytest

from app.services.destination_resolver import resolve_destination, validate_override_url
from config.forms import FormsConfig
from utils.errors import (
    InvalidUrlFormatError,
    MissingDestinationError,
    ResolutionError,
    UnconfiguredFormError,
    UntrustedHostError,
)

CONFIGURED = "https://discord.com/api/webhooks/1/configured"
OVERRIDE = "https://discordapp.com/api/webhooks/2/override"

_FORMS = FormsConfig(form_webhooks={"w2XqYb": CONFIGURED})


def test_configured_form_resolves_to_mapped_url() -> None:
    assert resolve_destination("w2XqYb", _FORMS) == CONFIGURED


def test_override_header_takes_precedence() -> None:
    assert resolve_destination("w2XqYb", _FORMS, OVERRIDE) == OVERRIDE


def test_override_works_without_form_id() -> None:
    assert resolve_destination(None, FormsConfig(), OVERRIDE) == OVERRIDE


def test_missing_form_id_and_override() -> None:
    with pytest.raises(MissingDestinationError) as exc_info:
        resolve_destination(None, _FORMS)
    assert exc_info.value.status_code == 400


def test_unconfigured_form_id() -> None:
    with pytest.raises(UnconfiguredFormError) as exc_info:
        resolve_destination("unknown", _FORMS)
    assert exc_info.value.status_code == 404
    assert exc_info.value.form_id == "unknown"
    assert "unknown" in exc_info.value.message


def test_empty_override_falls_back_to_config() -> None:
    assert resolve_destination("w2XqYb", _FORMS, "") == CONFIGURED


@pytest.mark.parametrize(
    "url",
    [
        "https://evil.example.com/api/webhooks/1/x",
        "https://discord.com.evil.example/api/webhooks/1/x",
        "https://canary.discord.com/api/webhooks/1/x",
    ],
)
def test_untrusted_host_is_rejected(url: str) -> None:
    with pytest.raises(UntrustedHostError):
        validate_override_url(url)


@pytest.mark.parametrize("url", ["not a url", "discord.com/api/webhooks", "https://", "http://[::1"])
def test_malformed_url_is_invalid_format(url: str) -> None:
    with pytest.raises(InvalidUrlFormatError):
        validate_override_url(url)


def test_host_comparison_ignores_case() -> None:
    url = "https://Discord.com/api/webhooks/1/x"
    assert validate_override_url(url) == url


def test_errors_never_expose_urls() -> None:
    with pytest.raises(ResolutionError) as exc_info:
        resolve_destination("w2XqYb", _FORMS, "https://evil.example.com/hook/secret")
    body = exc_info.value.as_body()
    assert "secret" not in str(body)
    assert "evil.example.com" not in str(body)
    assert CONFIGURED not in str(body)
