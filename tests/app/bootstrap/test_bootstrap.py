"""Testes do bootstrap: validação de settings e montagem da RelayConfig."""

from __future__ import annotations

from pathlib import Path

import pytest

import app.bootstrap as bootstrap
from config.forms import FormsConfigError
from config.settings import BaseSettings, DiscordRelaySettings


def _write_forms(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "forms.yaml"
    path.write_text(content, encoding="utf-8")
    return path


def test_build_relay_config_loads_forms(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    path = _write_forms(
        tmp_path,
        "form_webhooks:\n  f1: https://discord.com/api/webhooks/1/a\n",
    )
    relay = DiscordRelaySettings(auth_token="tok", forms_config_path=str(path))
    monkeypatch.setattr(bootstrap, "get_discord_relay_settings", lambda: relay)

    config = bootstrap.build_relay_config()

    assert config.relay is relay
    assert config.forms.webhook_for("f1") == "https://discord.com/api/webhooks/1/a"


def test_unknown_formatter_fails_at_startup(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    path = _write_forms(
        tmp_path,
        "field_settings:\n  field_formatters:\n    question_x: sparkles\n",
    )
    relay = DiscordRelaySettings(auth_token="tok", forms_config_path=str(path))
    monkeypatch.setattr(bootstrap, "get_discord_relay_settings", lambda: relay)

    with pytest.raises(FormsConfigError, match="sparkles"):
        bootstrap.build_relay_config()


def test_invalid_settings_fail_in_production(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        bootstrap, "get_base_settings", lambda: BaseSettings(environment="production")
    )
    monkeypatch.setattr(bootstrap, "get_discord_relay_settings", lambda: DiscordRelaySettings())

    with pytest.raises(RuntimeError, match="RELAY_AUTH_TOKEN"):
        bootstrap.validate_runtime_settings()


def test_invalid_settings_only_warn_in_development(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(bootstrap, "get_base_settings", lambda: BaseSettings())
    monkeypatch.setattr(bootstrap, "get_discord_relay_settings", lambda: DiscordRelaySettings())

    bootstrap.validate_runtime_settings()
