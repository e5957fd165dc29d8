"""Conector de entrada do Tally: autenticação e parsing do webhook."""

from .auth import verify_bearer_token
from .receive import parse_submission_request

__all__ = [
    "parse_submission_request",
    "verify_bearer_token",
]
