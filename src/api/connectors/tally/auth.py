"""Autenticação do webhook por bearer token."""

from __future__ import annotations

import hmac

from utils.errors import UnauthorizedError

BEARER_PREFIX = "Bearer "


def verify_bearer_token(authorization: str | None, expected_token: str) -> None:
    """Valida ``Authorization: Bearer <token>`` contra o token configurado.

    Token não configurado rejeita qualquer requisição.

    Raises:
        UnauthorizedError: Header ausente, sem prefixo Bearer ou token divergente
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise UnauthorizedError(
            "Missing or invalid authorization header. Expected: Bearer <token>"
        )

    token = authorization[len(BEARER_PREFIX) :]
    if not expected_token or not hmac.compare_digest(
        token.encode("utf-8"), expected_token.encode("utf-8")
    ):
        raise UnauthorizedError("Invalid authentication token")
