"""Insight generation from text shape, sentiment and category.

Updates:
    v0.1.0 - 2026-10-12 - Added canned insight rule table.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..core.models import Category, SentimentLabel, SentimentResult
from ..core.preprocessor import FeedbackPreprocessor, default_preprocessor
from .rules import Rule, RuleGroup, evaluate_groups

DETAILED_LENGTH = 500
BRIEF_LENGTH = 100
ENGAGED_WORD_COUNT = 100

DETAILED_FEEDBACK = "Detailed feedback provided with comprehensive information"
BRIEF_FEEDBACK = "Brief feedback - consider requesting more specific details"
POSITIVE_SATISFACTION = "Customer expresses satisfaction and positive experience"
POSITIVE_TESTIMONIAL = "Opportunity to leverage positive feedback for testimonials"
NEGATIVE_CONCERNS = "Customer concerns identified - immediate attention recommended"
NEGATIVE_RECOVERY = "Potential for service recovery and relationship improvement"
NEUTRAL_ROOM = "Neutral feedback indicates room for improvement"
HIGH_ENGAGEMENT = "Extensive feedback suggests high customer engagement"

CATEGORY_INSIGHTS: dict[Category, str] = {
    Category.PRODUCT: "Product-related feedback affects core offering quality",
    Category.SERVICE: "Service feedback impacts customer experience directly",
    Category.SUPPORT: "Support feedback indicates team performance levels",
    Category.GENERAL: "General feedback provides overall business insights",
}


@dataclass(slots=True, frozen=True)
class InsightContext:
    text: str
    category: Category
    sentiment: SentimentResult
    word_count: int

    @property
    def length(self) -> int:
        return len(self.text)


InsightGroup = RuleGroup[InsightContext, str]


def _category_group() -> InsightGroup:
    return RuleGroup(
        name="category",
        rules=tuple(
            Rule(
                predicate=lambda ctx, category=category: ctx.category is category,
                entries=(text,),
            )
            for category, text in CATEGORY_INSIGHTS.items()
        ),
    )


INSIGHT_RULES: tuple[InsightGroup, ...] = (
    RuleGroup(
        name="length",
        rules=(
            Rule(lambda ctx: ctx.length > DETAILED_LENGTH, (DETAILED_FEEDBACK,)),
            Rule(lambda ctx: ctx.length < BRIEF_LENGTH, (BRIEF_FEEDBACK,)),
        ),
    ),
    RuleGroup(
        name="sentiment",
        rules=(
            Rule(
                lambda ctx: ctx.sentiment.label is SentimentLabel.POSITIVE,
                (POSITIVE_SATISFACTION, POSITIVE_TESTIMONIAL),
            ),
            Rule(
                lambda ctx: ctx.sentiment.label is SentimentLabel.NEGATIVE,
                (NEGATIVE_CONCERNS, NEGATIVE_RECOVERY),
            ),
            Rule(lambda ctx: True, (NEUTRAL_ROOM,)),
        ),
    ),
    _category_group(),
    RuleGroup(
        name="engagement",
        rules=(Rule(lambda ctx: ctx.word_count > ENGAGED_WORD_COUNT, (HIGH_ENGAGEMENT,)),),
    ),
)


class InsightGenerator:
    """Derives human-readable observations about a piece of feedback."""

    def __init__(
        self,
        rules: tuple[InsightGroup, ...] = INSIGHT_RULES,
        *,
        preprocessor: FeedbackPreprocessor | None = None,
    ) -> None:
        self._rules = rules
        self._preprocessor = preprocessor or default_preprocessor

    def generate(
        self, text: str, category: Category, sentiment: SentimentResult
    ) -> list[str]:
        """Return insights in rule order: length, sentiment, category, engagement.

        Args:
            text (str): Feedback text.
            category (Category): Feedback category.
            sentiment (SentimentResult): Classifier output for ``text``.

        Returns:
            list[str]: Between two and five canned insight strings.
        """

        context = InsightContext(
            text=text,
            category=Category(category),
            sentiment=sentiment,
            word_count=self._preprocessor.count_words(text),
        )
        return evaluate_groups(self._rules, context)


__all__ = [
    "BRIEF_FEEDBACK",
    "CATEGORY_INSIGHTS",
    "DETAILED_FEEDBACK",
    "HIGH_ENGAGEMENT",
    "INSIGHT_RULES",
    "InsightContext",
    "InsightGenerator",
    "NEGATIVE_CONCERNS",
    "NEGATIVE_RECOVERY",
    "NEUTRAL_ROOM",
    "POSITIVE_SATISFACTION",
    "POSITIVE_TESTIMONIAL",
]
