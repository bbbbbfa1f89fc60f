"""Rendering contract between the analysis core and a user interface."""

from __future__ import annotations

from typing import Protocol, Sequence

from .models import FeedbackRecord

HISTORY_PREVIEW_LENGTH = 100


class Renderer(Protocol):
    """Display surface the submit workflow reports to."""

    def render_result(self, record: FeedbackRecord) -> None:
        """Show a freshly analyzed record."""

        ...

    def render_history(self, records: Sequence[FeedbackRecord]) -> None:
        """Show the history listing, newest first."""

        ...


def truncate_preview(text: str, limit: int = HISTORY_PREVIEW_LENGTH) -> str:
    """Shorten text for history listings, marking the cut with an ellipsis."""

    if len(text) > limit:
        return text[:limit] + "..."
    return text


__all__ = ["HISTORY_PREVIEW_LENGTH", "Renderer", "truncate_preview"]
