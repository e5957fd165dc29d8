"""Endpoint do webhook do Tally.

Endpoints (raiz e /webhook/tally):
- POST: recebe a resposta do formulário e encaminha ao Discord
- OPTIONS: preflight CORS
- demais métodos: 405

Fluxo do POST:
1. Bearer token (Authorization)
2. Parse do JSON e do objeto ``data``
3. Use case: destino → campos → envelope → uma tentativa de envio

Segurança:
- Corpos de erro nunca incluem token nem URL de webhook
- X-Webhook-URL só é aceito para hosts do Discord (ver destination_resolver)
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse

from api.connectors.tally import parse_submission_request, verify_bearer_token
from app.bootstrap import get_relay_config, get_relay_use_case
from app.observability import (
    bind_form_id,
    reset_correlation_id,
    reset_form_id,
    set_correlation_id,
)
from app.protocols import RelayOutcome
from utils.errors import MethodNotAllowedError, RelayError

logger = logging.getLogger(__name__)

router = APIRouter()

WEBHOOK_URL_HEADER = "x-webhook-url"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization, X-Webhook-URL",
}

SUCCESS_MESSAGE = "Form response sent to Discord successfully"
INTERNAL_ERROR_MESSAGE = "Unexpected error while processing the form response"


def _json_response(body: dict[str, Any], status_code: int) -> JSONResponse:
    return JSONResponse(content=body, status_code=status_code, headers=CORS_HEADERS)


@router.options("/", include_in_schema=False)
@router.options("/webhook/tally", include_in_schema=False)
async def preflight() -> Response:
    """Preflight CORS."""
    return Response(status_code=status.HTTP_200_OK, headers=CORS_HEADERS)


@router.api_route("/", methods=["GET", "HEAD", "PUT", "PATCH", "DELETE"], include_in_schema=False)
@router.api_route(
    "/webhook/tally",
    methods=["GET", "HEAD", "PUT", "PATCH", "DELETE"],
    include_in_schema=False,
)
async def method_not_allowed() -> JSONResponse:
    """Somente POST é suportado."""
    error = MethodNotAllowedError("Only POST requests are supported")
    return _json_response(error.as_body(), error.status_code)


async def _relay(request: Request) -> RelayOutcome:
    config = get_relay_config()
    verify_bearer_token(request.headers.get("authorization"), config.relay.auth_token)

    submission = parse_submission_request(await request.body())
    form_token = bind_form_id(submission.form_id)
    try:
        override_url = request.headers.get(WEBHOOK_URL_HEADER)
        logger.info(
            "tally_submission_received",
            extra={
                "response_id": submission.response_id,
                "field_count": len(submission.fields),
                "has_override": bool(override_url),
            },
        )
        return await get_relay_use_case().execute(submission, override_url=override_url)
    finally:
        reset_form_id(form_token)


@router.post("/", response_model=None)
@router.post("/webhook/tally", response_model=None)
async def receive_submission(request: Request) -> JSONResponse:
    """Recebe a resposta do Tally e encaminha ao webhook Discord.

    Returns:
        200 com ``{success, message, responseId}`` ou o corpo de erro classificado.
    """
    token = set_correlation_id(request.headers.get("x-correlation-id"))
    try:
        outcome = await _relay(request)
    except RelayError as exc:
        logger.warning(
            "relay_failed",
            extra={"error_type": type(exc).__name__, "status_code": exc.status_code},
        )
        return _json_response(exc.as_body(), exc.status_code)
    except Exception:
        logger.exception("relay_internal_error")
        return _json_response(
            {"error": "Internal server error", "message": INTERNAL_ERROR_MESSAGE},
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    finally:
        reset_correlation_id(token)

    return _json_response(
        {"success": True, "message": SUCCESS_MESSAGE, "responseId": outcome.response_id},
        status.HTTP_200_OK,
    )
