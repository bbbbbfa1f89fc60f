"""Assembly of analyzed feedback records.

Updates:
    v0.1.0 - 2026-10-12 - Added record assembly with injectable clock and randomness.
"""

from __future__ import annotations

import logging
import random

from ..core.clock import Clock, RecordIdSequence, SystemClock, isoformat_utc
from ..core.models import (
    Category,
    FeedbackMetadata,
    FeedbackRecord,
    Priority,
)
from ..core.preprocessor import FeedbackPreprocessor, default_preprocessor
from .insight_generator import InsightGenerator
from .recommendation_generator import RecommendationGenerator
from .sentiment_classifier import SentimentClassifier

logger = logging.getLogger(__name__)

CONFIDENCE_MIN = 85
CONFIDENCE_MAX = 95
DETECTED_LANGUAGE = "English"


class FeedbackAssembler:
    """Combines classifier and generator output into a single immutable record."""

    def __init__(
        self,
        classifier: SentimentClassifier | None = None,
        insight_generator: InsightGenerator | None = None,
        recommendation_generator: RecommendationGenerator | None = None,
        *,
        clock: Clock | None = None,
        rng: random.Random | None = None,
        id_sequence: RecordIdSequence | None = None,
        preprocessor: FeedbackPreprocessor | None = None,
    ) -> None:
        """Wire the analysis components.

        Args:
            classifier (SentimentClassifier | None): Sentiment classifier.
            insight_generator (InsightGenerator | None): Insight rule table.
            recommendation_generator (RecommendationGenerator | None): Recommendation rule table.
            clock (Clock | None): Source for record ids and timestamps.
            rng (random.Random | None): Source for the cosmetic confidence value.
            id_sequence (RecordIdSequence | None): Shared id sequence.
            preprocessor (FeedbackPreprocessor | None): Word counting helper.
        """

        self._classifier = classifier or SentimentClassifier()
        self._insights = insight_generator or InsightGenerator()
        self._recommendations = recommendation_generator or RecommendationGenerator()
        self._clock = clock or SystemClock()
        self._rng = rng or random.Random()
        self._ids = id_sequence or RecordIdSequence()
        self._preprocessor = preprocessor or default_preprocessor

    @property
    def id_sequence(self) -> RecordIdSequence:
        return self._ids

    def assemble(
        self,
        text: str,
        category: Category | str,
        priority: Priority | str,
        elapsed_ms: int,
    ) -> FeedbackRecord:
        """Analyze feedback and build its record.

        Input is expected to be validated by the caller: ``text`` non-empty
        after trimming and both enum values valid.

        Args:
            text (str): Feedback text.
            category (Category | str): Feedback category.
            priority (Priority | str): Submitted priority.
            elapsed_ms (int): Measured processing time in milliseconds.

        Returns:
            FeedbackRecord: Fully populated record.
        """

        category = Category(category)
        priority = Priority(priority)
        sentiment = self._classifier.classify(text)
        insights = self._insights.generate(text, category, sentiment)
        recommendations = self._recommendations.generate(sentiment, category, priority)

        created = self._clock.now()
        record = FeedbackRecord(
            id=self._ids.next_id(created),
            timestamp=isoformat_utc(created),
            original_text=text,
            category=category,
            priority=priority,
            sentiment=sentiment,
            insights=tuple(insights),
            recommendations=tuple(recommendations),
            metadata=FeedbackMetadata(
                confidence=self._rng.randint(CONFIDENCE_MIN, CONFIDENCE_MAX),
                processing_time_ms=max(0, int(elapsed_ms)),
                word_count=self._preprocessor.count_words(text),
                detected_language=DETECTED_LANGUAGE,
            ),
        )
        logger.info(
            "feedback_assembled",
            extra={
                "record_id": record.id,
                "category": category.value,
                "priority": priority.value,
                "sentiment": sentiment.label.value,
                "score": sentiment.score,
            },
        )
        return record


__all__ = [
    "CONFIDENCE_MAX",
    "CONFIDENCE_MIN",
    "DETECTED_LANGUAGE",
    "FeedbackAssembler",
]
