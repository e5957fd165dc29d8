"""Use cases do relay Tally → Discord."""

from .relay_submission import RelaySubmissionUseCase

__all__ = ["RelaySubmissionUseCase"]
