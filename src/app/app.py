"""Aplicação ASGI do relay Tally → Discord.

    uvicorn app.app:app --host 0.0.0.0 --port 8080

Em desenvolvimento, ``tally-discord-relay`` (ou ``python -m app.app``) sobe
o uvicorn com reload quando ``DEBUG=true``.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import get_relay_config, initialize_app, validate_runtime_settings
from config.logging import get_logger
from config.settings import get_base_settings

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

# Logging precisa estar configurado antes dos demais módulos logarem
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Valida settings e carrega o YAML de formulários antes da primeira requisição."""
    validate_runtime_settings()
    config = get_relay_config()
    logger.info(
        "relay_started",
        extra={
            "environment": config.base.environment,
            "configured_forms": len(config.forms.form_webhooks),
        },
    )
    yield
    logger.info("relay_stopped")


def create_app() -> FastAPI:
    """Monta a aplicação com as rotas do relay.

    Os headers CORS saem das próprias rotas (inclusive o preflight OPTIONS).
    """
    fastapi_app = FastAPI(
        title="Tally Discord Relay",
        description="Encaminha respostas de formulários do Tally para webhooks do Discord",
        version="1.0.0",
        lifespan=lifespan,
    )
    fastapi_app.include_router(create_api_router())
    return fastapi_app


app = create_app()


def main() -> None:
    import uvicorn

    settings = get_base_settings()
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
