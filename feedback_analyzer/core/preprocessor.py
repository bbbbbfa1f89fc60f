"""Text preprocessing utilities.

Updates:
    v0.1.0 - 2026-10-12 - Adapted whitespace normalization for feedback text.
"""

from __future__ import annotations

import re
from typing import Protocol


class TextPreprocessor(Protocol):
    """Protocol describing preprocessor capabilities."""

    def clean(self, text: str) -> str:
        """Strip surrounding whitespace from raw input.

        Args:
            text (str): Input string as typed by the user.

        Returns:
            str: Text without leading or trailing whitespace.
        """

        ...

    def count_words(self, text: str) -> int:
        """Count whitespace-separated tokens."""

        ...


class FeedbackPreprocessor:
    """Performs the light normalization the classifier and generators rely on."""

    _whitespace_regex = re.compile(r"\s+")

    def clean(self, text: str) -> str:
        return (text or "").strip()

    def fold(self, text: str) -> str:
        """Lower-case text for keyword matching."""

        return (text or "").lower()

    def count_words(self, text: str) -> int:
        """Count tokens separated by runs of whitespace.

        Args:
            text (str): Feedback text.

        Returns:
            int: Number of non-empty tokens; ``0`` for blank text.
        """

        return len([token for token in self._whitespace_regex.split(text or "") if token])


default_preprocessor = FeedbackPreprocessor()


__all__ = [
    "FeedbackPreprocessor",
    "TextPreprocessor",
    "default_preprocessor",
]
