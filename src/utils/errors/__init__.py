"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    DeliveryFailedError,
    InvalidPayloadError,
    InvalidUrlFormatError,
    MethodNotAllowedError,
    MissingDestinationError,
    RelayError,
    ResolutionError,
    UnauthorizedError,
    UnconfiguredFormError,
    UntrustedHostError,
)

__all__ = [
    "DeliveryFailedError",
    "InvalidPayloadError",
    "InvalidUrlFormatError",
    "MethodNotAllowedError",
    "MissingDestinationError",
    "RelayError",
    "ResolutionError",
    "UnauthorizedError",
    "UnconfiguredFormError",
    "UntrustedHostError",
]
