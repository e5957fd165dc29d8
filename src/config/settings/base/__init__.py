"""Settings de processo (ambiente, log, porta)."""

from __future__ import annotations

from config.settings.base.core import (
    DEFAULT_PORT,
    DEFAULT_SERVICE_NAME,
    BaseSettings,
    Environment,
    get_base_settings,
)

__all__ = [
    "DEFAULT_PORT",
    "DEFAULT_SERVICE_NAME",
    "BaseSettings",
    "Environment",
    "get_base_settings",
]
