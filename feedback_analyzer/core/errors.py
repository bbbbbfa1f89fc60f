"""Error types raised by the feedback analyzer core.

Updates:
    v0.1.0 - 2026-10-12 - Added validation, export and durable-state errors.
"""

from __future__ import annotations


class FeedbackAnalyzerError(Exception):
    """Base class for recoverable feedback analyzer errors."""


class ValidationError(FeedbackAnalyzerError):
    """Raised when a submission is missing a required field or holds an invalid value."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class EmptyHistory(FeedbackAnalyzerError):
    """Raised when an export is requested while the history holds no records."""


class MalformedDurableState(FeedbackAnalyzerError):
    """Raised when persisted history cannot be parsed and strict loading is enabled."""

    def __init__(self, message: str, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key


__all__ = [
    "EmptyHistory",
    "FeedbackAnalyzerError",
    "MalformedDurableState",
    "ValidationError",
]
