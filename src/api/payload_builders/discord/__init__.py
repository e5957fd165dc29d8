"""Payload builders do Discord."""

from .webhook import build_webhook_payload

__all__ = ["build_webhook_payload"]
