"""Exceptions raised by the Hensachi pipeline.

All of them are recoverable: user-facing layers turn them into
informational messages rather than letting them escape.
"""

from __future__ import annotations


class HensachiError(Exception):
    """Base class for Hensachi errors."""


class EmptyInputError(HensachiError, ValueError):
    """No valid rows after filtering, or the total count is zero."""

    def __init__(self, message: str = "no valid score rows") -> None:
        super().__init__(message)


class DegenerateVarianceError(HensachiError, ValueError):
    """The standard deviation is zero, so no curve can be sampled."""

    def __init__(self, std_dev: float) -> None:
        super().__init__(f"standard deviation must be > 0, got {std_dev!r}")
        self.std_dev = std_dev


class InvalidCandidateScoreError(HensachiError, ValueError):
    """The candidate score is not a finite number."""

    def __init__(self, value: object) -> None:
        super().__init__(f"candidate score must be a finite number, got {value!r}")
        self.value = value


class ReportNotReadyError(HensachiError):
    """A report was requested before the deviation value was computed."""
