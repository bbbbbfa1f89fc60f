"""Keyword-based sentiment classifier.

Updates:
    v0.1.0 - 2026-10-12 - Added fixed keyword lists and clamped scoring.
"""

from __future__ import annotations

import logging

from ..core.models import SentimentResult
from ..core.preprocessor import FeedbackPreprocessor, default_preprocessor

logger = logging.getLogger(__name__)

POSITIVE_KEYWORDS: tuple[str, ...] = (
    "good",
    "great",
    "excellent",
    "amazing",
    "love",
    "perfect",
    "wonderful",
    "fantastic",
    "awesome",
    "satisfied",
    "happy",
    "pleased",
)

NEGATIVE_KEYWORDS: tuple[str, ...] = (
    "bad",
    "terrible",
    "awful",
    "hate",
    "horrible",
    "worst",
    "disappointed",
    "frustrated",
    "angry",
    "poor",
    "useless",
    "broken",
)

BASELINE_SCORE = 50
KEYWORD_WEIGHT = 15


class SentimentClassifier:
    """Scores text by counting which fixed keywords it contains.

    Matching is substring based, so a keyword embedded in a longer word
    ("goodbye", "badge") still counts. Each keyword counts at most once.
    """

    def __init__(
        self,
        positive_keywords: tuple[str, ...] = POSITIVE_KEYWORDS,
        negative_keywords: tuple[str, ...] = NEGATIVE_KEYWORDS,
        *,
        preprocessor: FeedbackPreprocessor | None = None,
    ) -> None:
        self._positive = positive_keywords
        self._negative = negative_keywords
        self._preprocessor = preprocessor or default_preprocessor

    def count_hits(self, text: str) -> tuple[int, int]:
        """Return the number of positive and negative keywords present in ``text``."""

        folded = self._preprocessor.fold(text)
        positive_hits = sum(1 for word in self._positive if word in folded)
        negative_hits = sum(1 for word in self._negative if word in folded)
        return positive_hits, negative_hits

    def classify(self, text: str) -> SentimentResult:
        """Classify feedback text.

        Args:
            text (str): Feedback text; may be empty.

        Returns:
            SentimentResult: Score clamped to 0-100 and the derived label.
        """

        positive_hits, negative_hits = self.count_hits(text)
        raw_score = (
            BASELINE_SCORE
            + KEYWORD_WEIGHT * positive_hits
            - KEYWORD_WEIGHT * negative_hits
        )
        result = SentimentResult.from_score(raw_score)
        logger.debug(
            "sentiment_classified",
            extra={
                "positive_hits": positive_hits,
                "negative_hits": negative_hits,
                "score": result.score,
            },
        )
        return result


_default_classifier = SentimentClassifier()


def classify(text: str) -> SentimentResult:
    return _default_classifier.classify(text)


__all__ = [
    "BASELINE_SCORE",
    "KEYWORD_WEIGHT",
    "NEGATIVE_KEYWORDS",
    "POSITIVE_KEYWORDS",
    "SentimentClassifier",
    "classify",
]
