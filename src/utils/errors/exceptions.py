"""Exceções de domínio do relay Tally → Discord.

Cada exceção carrega o status HTTP e o corpo de erro que a rota devolve.
Nenhuma mensagem inclui token, URL de webhook resolvida ou valores de resposta.
"""

from __future__ import annotations


class RelayError(Exception):
    """Base para falhas classificadas do relay.

    Attributes:
        status_code: Status HTTP correspondente
        error: Rótulo curto exposto no campo ``error``
        message: Texto exposto no campo ``message``
    """

    status_code: int = 500
    error: str = "Internal server error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def as_body(self) -> dict[str, object]:
        """Corpo JSON da resposta de erro."""
        return {"error": self.error, "message": self.message}


class UnauthorizedError(RelayError):
    """Header Authorization ausente, malformado ou com token divergente."""

    status_code = 401
    error = "Unauthorized"


class MethodNotAllowedError(RelayError):
    """Método HTTP diferente de POST."""

    status_code = 405
    error = "Method not allowed"


class InvalidPayloadError(RelayError):
    """Corpo ausente, JSON inválido ou sem o objeto ``data``."""

    status_code = 400
    error = "Invalid payload"


class ResolutionError(RelayError):
    """Base para falhas na escolha do webhook de destino."""

    status_code = 400


class InvalidUrlFormatError(ResolutionError):
    """Header X-Webhook-URL não é uma URL absoluta válida."""

    error = "Invalid webhook URL"

    def __init__(self) -> None:
        super().__init__("Webhook URL format is invalid")


class UntrustedHostError(ResolutionError):
    """Header X-Webhook-URL aponta para host fora da lista do Discord."""

    error = "Invalid webhook URL"

    def __init__(self) -> None:
        super().__init__("Webhook URL must be a valid Discord webhook URL")


class MissingDestinationError(ResolutionError):
    """Sem formId e sem header de override."""

    error = "Missing form ID or webhook URL"

    def __init__(self) -> None:
        super().__init__(
            "Either provide form ID (for configured forms) or X-Webhook-URL header"
        )


class UnconfiguredFormError(ResolutionError):
    """formId sem webhook configurado."""

    status_code = 404
    error = "Webhook not found"

    def __init__(self, form_id: str) -> None:
        super().__init__(
            f"No webhook configured for form ID: {form_id}. "
            "You can also provide X-Webhook-URL header."
        )
        self.form_id = form_id


class DeliveryFailedError(RelayError):
    """Discord respondeu com status de erro ou a chamada não completou."""

    status_code = 500
    error = "Discord webhook failed"

    def __init__(self, message: str, upstream_status: int | None = None) -> None:
        super().__init__(message)
        self.upstream_status = upstream_status

    def as_body(self) -> dict[str, object]:
        body = super().as_body()
        if self.upstream_status is not None:
            body["status"] = self.upstream_status
        return body
