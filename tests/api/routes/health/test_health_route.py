"""Testes do endpoint de health."""

from __future__ import annotations

import pytest

from api.routes.health.router import health_check


@pytest.mark.asyncio
async def test_health_check_reports_healthy() -> None:
    response = await health_check()

    assert response.status == "healthy"
    assert response.service
    assert response.environment in ("development", "staging", "production")
    assert response.timestamp
