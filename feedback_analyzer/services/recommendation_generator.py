"""Recommendation generation from sentiment, category and priority.

Updates:
    v0.1.0 - 2026-10-12 - Added canned recommendation rule table.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..core.models import (
    Category,
    Priority,
    Recommendation,
    SentimentLabel,
    SentimentResult,
)
from .rules import Rule, RuleGroup, evaluate_groups

IMMEDIATE = Recommendation(
    type="immediate",
    text="Immediate response required - escalate to senior management within 2 hours",
)
HIGH_PRIORITY = Recommendation(
    type="priority",
    text="High priority issue - respond within 24 hours with action plan",
)
RECOVERY = Recommendation(
    type="recovery",
    text="Implement service recovery protocol - personal follow-up recommended",
)
ROOT_CAUSE = Recommendation(
    type="analysis",
    text="Analyze root cause to prevent similar issues in the future",
)
TESTIMONIAL = Recommendation(
    type="leverage",
    text="Request customer testimonial or review for marketing purposes",
)
MAINTAIN = Recommendation(
    type="maintain",
    text="Maintain current service standards that generated positive feedback",
)
FOLLOW_UP = Recommendation(
    type="follow-up",
    text="Schedule follow-up communication to ensure customer satisfaction",
)

CATEGORY_RECOMMENDATIONS: dict[Category, Recommendation] = {
    Category.PRODUCT: Recommendation(
        type="product",
        text="Share feedback with product development team for future improvements",
    ),
    Category.SERVICE: Recommendation(
        type="training",
        text="Consider staff training if service issues are identified",
    ),
    Category.SUPPORT: Recommendation(
        type="process",
        text="Review support processes and knowledge base effectiveness",
    ),
}


@dataclass(slots=True, frozen=True)
class RecommendationContext:
    sentiment: SentimentResult
    category: Category
    priority: Priority


RecommendationGroup = RuleGroup[RecommendationContext, Recommendation]

RECOMMENDATION_RULES: tuple[RecommendationGroup, ...] = (
    RuleGroup(
        name="priority",
        rules=(
            Rule(lambda ctx: ctx.priority is Priority.URGENT, (IMMEDIATE,)),
            Rule(lambda ctx: ctx.priority is Priority.HIGH, (HIGH_PRIORITY,)),
        ),
    ),
    RuleGroup(
        name="sentiment",
        rules=(
            Rule(
                lambda ctx: ctx.sentiment.label is SentimentLabel.NEGATIVE,
                (RECOVERY, ROOT_CAUSE),
            ),
            Rule(
                lambda ctx: ctx.sentiment.label is SentimentLabel.POSITIVE,
                (TESTIMONIAL, MAINTAIN),
            ),
        ),
    ),
    RuleGroup(
        name="category",
        rules=tuple(
            Rule(
                predicate=lambda ctx, category=category: ctx.category is category,
                entries=(entry,),
            )
            for category, entry in CATEGORY_RECOMMENDATIONS.items()
        ),
    ),
    RuleGroup(name="follow-up", rules=(Rule(lambda ctx: True, (FOLLOW_UP,)),)),
)


class RecommendationGenerator:
    """Derives actionable suggestions for whoever triages the feedback."""

    def __init__(
        self, rules: tuple[RecommendationGroup, ...] = RECOMMENDATION_RULES
    ) -> None:
        self._rules = rules

    def generate(
        self,
        sentiment: SentimentResult,
        category: Category,
        priority: Priority,
    ) -> list[Recommendation]:
        """Return recommendations in rule order.

        Priority entries come first, then sentiment, then category, and a
        follow-up entry always closes the list.

        Args:
            sentiment (SentimentResult): Classifier output.
            category (Category): Feedback category.
            priority (Priority): Submitted priority.

        Returns:
            list[Recommendation]: Between one and five entries.
        """

        context = RecommendationContext(
            sentiment=sentiment,
            category=Category(category),
            priority=Priority(priority),
        )
        return evaluate_groups(self._rules, context)


__all__ = [
    "CATEGORY_RECOMMENDATIONS",
    "FOLLOW_UP",
    "HIGH_PRIORITY",
    "IMMEDIATE",
    "MAINTAIN",
    "RECOMMENDATION_RULES",
    "RECOVERY",
    "ROOT_CAUSE",
    "RecommendationContext",
    "RecommendationGenerator",
    "TESTIMONIAL",
]
