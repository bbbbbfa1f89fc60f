from __future__ import annotations

from feedback_analyzer.core.models import Category, SentimentResult
from feedback_analyzer.services.insight_generator import (
    BRIEF_FEEDBACK,
    CATEGORY_INSIGHTS,
    DETAILED_FEEDBACK,
    HIGH_ENGAGEMENT,
    InsightGenerator,
    NEGATIVE_CONCERNS,
    NEGATIVE_RECOVERY,
    NEUTRAL_ROOM,
    POSITIVE_SATISFACTION,
    POSITIVE_TESTIMONIAL,
)

POSITIVE = SentimentResult.from_score(80)
NEUTRAL = SentimentResult.from_score(50)
NEGATIVE = SentimentResult.from_score(5)


def _medium_text() -> str:
    text = "The checkout flow works but the confirmation email arrives late. " * 3
    assert 100 <= len(text) <= 500
    return text


def test_brief_positive_product_feedback() -> None:
    insights = InsightGenerator().generate(
        "This product is great and I love it", Category.PRODUCT, POSITIVE
    )
    assert insights == [
        BRIEF_FEEDBACK,
        POSITIVE_SATISFACTION,
        POSITIVE_TESTIMONIAL,
        "Product-related feedback affects core offering quality",
    ]


def test_negative_sentiment_adds_two_entries() -> None:
    insights = InsightGenerator().generate(_medium_text(), Category.SERVICE, NEGATIVE)
    assert insights == [
        NEGATIVE_CONCERNS,
        NEGATIVE_RECOVERY,
        "Service feedback impacts customer experience directly",
    ]


def test_minimum_is_sentiment_plus_category() -> None:
    insights = InsightGenerator().generate(_medium_text(), Category.GENERAL, NEUTRAL)
    assert insights == [
        NEUTRAL_ROOM,
        "General feedback provides overall business insights",
    ]


def test_length_boundaries_produce_no_length_entry() -> None:
    generator = InsightGenerator()
    exactly_brief = "x" * 100
    exactly_detailed = "x" * 500
    assert BRIEF_FEEDBACK not in generator.generate(exactly_brief, Category.SUPPORT, NEUTRAL)
    assert DETAILED_FEEDBACK not in generator.generate(
        exactly_detailed, Category.SUPPORT, NEUTRAL
    )
    assert generator.generate("x" * 99, Category.SUPPORT, NEUTRAL)[0] == BRIEF_FEEDBACK
    assert generator.generate("x" * 501, Category.SUPPORT, NEUTRAL)[0] == DETAILED_FEEDBACK


def test_long_engaged_feedback_reaches_five_insights() -> None:
    text = " ".join(["excellent"] + ["word"] * 120)
    insights = InsightGenerator().generate(text, Category.SUPPORT, POSITIVE)
    assert insights == [
        DETAILED_FEEDBACK,
        POSITIVE_SATISFACTION,
        POSITIVE_TESTIMONIAL,
        "Support feedback indicates team performance levels",
        HIGH_ENGAGEMENT,
    ]


def test_engagement_requires_more_than_one_hundred_words() -> None:
    generator = InsightGenerator()
    hundred_words = " ".join(["word"] * 100)
    assert HIGH_ENGAGEMENT not in generator.generate(hundred_words, Category.GENERAL, NEUTRAL)
    assert generator.generate(hundred_words + " more", Category.GENERAL, NEUTRAL)[-1] == (
        HIGH_ENGAGEMENT
    )


def test_every_category_has_exactly_one_entry() -> None:
    generator = InsightGenerator()
    for category, expected in CATEGORY_INSIGHTS.items():
        insights = generator.generate(_medium_text(), category, NEUTRAL)
        assert insights.count(expected) == 1
        assert len(insights) == 2


def test_string_category_values_are_accepted() -> None:
    insights = InsightGenerator().generate(_medium_text(), "support", NEUTRAL)
    assert insights[-1] == CATEGORY_INSIGHTS[Category.SUPPORT]
