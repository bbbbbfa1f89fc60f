"""Domain models for analyzed customer feedback.

Updates:
    v0.1.0 - 2026-10-12 - Added immutable record types and wire serialization.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping


class Category(str, Enum):
    """Area of the business the feedback is about."""

    PRODUCT = "product"
    SERVICE = "service"
    SUPPORT = "support"
    GENERAL = "general"


class Priority(str, Enum):
    """Urgency assigned by the person submitting the feedback."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class SentimentLabel(str, Enum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


POSITIVE_THRESHOLD = 70
NEGATIVE_THRESHOLD = 30


def label_for_score(score: int) -> SentimentLabel:
    """Map a sentiment score onto its label.

    Args:
        score (int): Score in the range 0-100.

    Returns:
        SentimentLabel: ``positive`` at or above 70, ``negative`` at or below 30.
    """

    if score >= POSITIVE_THRESHOLD:
        return SentimentLabel.POSITIVE
    if score <= NEGATIVE_THRESHOLD:
        return SentimentLabel.NEGATIVE
    return SentimentLabel.NEUTRAL


@dataclass(slots=True, frozen=True)
class SentimentResult:
    """Score and label produced by the keyword classifier."""

    score: int
    label: SentimentLabel

    @classmethod
    def from_score(cls, score: int) -> "SentimentResult":
        clamped = max(0, min(100, int(score)))
        return cls(score=clamped, label=label_for_score(clamped))

    def as_dict(self) -> dict[str, Any]:
        return {"score": self.score, "label": self.label.value}


@dataclass(slots=True, frozen=True)
class Recommendation:
    """Actionable suggestion tagged with the rule that produced it."""

    type: str
    text: str

    def as_dict(self) -> dict[str, str]:
        return {"type": self.type, "text": self.text}


@dataclass(slots=True, frozen=True)
class FeedbackMetadata:
    """Cosmetic processing details shown next to an analysis."""

    confidence: int
    processing_time_ms: int
    word_count: int
    detected_language: str = "English"

    def as_dict(self) -> dict[str, Any]:
        return {
            "confidence": self.confidence,
            "processingTime": self.processing_time_ms,
            "wordCount": self.word_count,
            "detectedLanguage": self.detected_language,
        }


@dataclass(slots=True, frozen=True)
class FeedbackRecord:
    """Fully analyzed feedback submission.

    Records are immutable once assembled; sequences are stored as tuples so
    that holders of a record cannot alter the history through it.
    """

    id: int
    timestamp: str
    original_text: str
    category: Category
    priority: Priority
    sentiment: SentimentResult
    insights: tuple[str, ...]
    recommendations: tuple[Recommendation, ...]
    metadata: FeedbackMetadata

    def as_dict(self) -> dict[str, Any]:
        """Return the camelCase wire representation used for storage and export."""

        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "originalText": self.original_text,
            "category": self.category.value,
            "priority": self.priority.value,
            "sentiment": self.sentiment.as_dict(),
            "insights": list(self.insights),
            "recommendations": [item.as_dict() for item in self.recommendations],
            "metadata": self.metadata.as_dict(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FeedbackRecord":
        """Rebuild a record from its wire representation.

        Args:
            data (Mapping[str, Any]): Payload produced by :meth:`as_dict`.

        Returns:
            FeedbackRecord: Reconstructed record.

        Raises:
            KeyError: If a required field is missing.
            ValueError: If an enum value or number cannot be parsed, or the
                sentiment score and label are inconsistent.
            TypeError: If a field has the wrong shape.
        """

        sentiment = data["sentiment"]
        metadata = data["metadata"]
        return cls(
            id=int(data["id"]),
            timestamp=str(data["timestamp"]),
            original_text=str(data["originalText"]),
            category=Category(data["category"]),
            priority=Priority(data["priority"]),
            sentiment=_sentiment_from_dict(sentiment),
            insights=tuple(str(item) for item in data["insights"]),
            recommendations=tuple(
                Recommendation(type=str(item["type"]), text=str(item["text"]))
                for item in data["recommendations"]
            ),
            metadata=FeedbackMetadata(
                confidence=int(metadata["confidence"]),
                processing_time_ms=int(metadata["processingTime"]),
                word_count=int(metadata["wordCount"]),
                detected_language=str(metadata.get("detectedLanguage", "English")),
            ),
        )


def _sentiment_from_dict(data: Mapping[str, Any]) -> SentimentResult:
    score = int(data["score"])
    if not 0 <= score <= 100:
        raise ValueError(f"Sentiment score {score} is outside 0..100.")
    label = SentimentLabel(data["label"])
    if label is not label_for_score(score):
        raise ValueError(f"Sentiment label '{label.value}' does not match score {score}.")
    return SentimentResult(score=score, label=label)


__all__ = [
    "Category",
    "FeedbackMetadata",
    "FeedbackRecord",
    "NEGATIVE_THRESHOLD",
    "POSITIVE_THRESHOLD",
    "Priority",
    "Recommendation",
    "SentimentLabel",
    "SentimentResult",
    "label_for_score",
]
