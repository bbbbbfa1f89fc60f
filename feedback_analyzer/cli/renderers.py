"""Rich renderers for CLI outputs."""

from __future__ import annotations

from datetime import datetime
from typing import Sequence

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from feedback_analyzer.cli.io import console
from feedback_analyzer.core.models import FeedbackRecord, SentimentResult
from feedback_analyzer.core.renderer import truncate_preview

SENTIMENT_STYLES = {
    "positive": "green",
    "neutral": "yellow",
    "negative": "red",
}

EMPTY_HISTORY_MESSAGE = "No feedback processed yet"


def format_local_timestamp(timestamp: str) -> str:
    """Convert an ISO-8601 UTC timestamp into local time for display."""

    try:
        moment = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    except ValueError:
        return timestamp
    return moment.astimezone().strftime("%Y-%m-%d %H:%M:%S")


def sentiment_badge(sentiment: SentimentResult) -> str:
    label = sentiment.label.value
    style = SENTIMENT_STYLES.get(label, "white")
    return f"[{style}]{label} ({sentiment.score})[/]"


def render_sentiment(sentiment: SentimentResult) -> None:
    """Display a score and label on their own."""

    console.print(
        Panel(
            f"[bold]Score:[/] {sentiment.score}/100\n[bold]Label:[/] {sentiment_badge(sentiment)}",
            title="Sentiment",
        )
    )


def render_result(record: FeedbackRecord) -> None:
    """Display a freshly analyzed feedback record."""

    lines = [
        f"[bold]Sentiment:[/] {sentiment_badge(record.sentiment)}",
        f"[bold]Category:[/] {record.category.value}    "
        f"[bold]Priority:[/] {record.priority.value}",
        "",
        "[bold]Key insights:[/]",
    ]
    lines.extend(f"- {escape(insight)}" for insight in record.insights)
    console.print(Panel("\n".join(lines), title="Analysis Result"))

    recommendations = Table(title="Recommendations", show_lines=False)
    recommendations.add_column("Type", style="bold")
    recommendations.add_column("Action")
    for item in record.recommendations:
        recommendations.add_row(item.type.upper(), escape(item.text))
    console.print(recommendations)

    metadata = record.metadata
    details = Table(title="Processing Details", show_header=False)
    details.add_column("Field", style="bold")
    details.add_column("Value")
    details.add_row("Confidence", f"{metadata.confidence}%")
    details.add_row("Processing time", f"{metadata.processing_time_ms}ms")
    details.add_row("Word count", str(metadata.word_count))
    details.add_row("Language", metadata.detected_language)
    console.print(details)


def render_history(records: Sequence[FeedbackRecord]) -> None:
    """Display history entries newest first with truncated text."""

    if not records:
        console.print(Panel(EMPTY_HISTORY_MESSAGE, title="History"))
        return

    for record in records:
        header = (
            f"{format_local_timestamp(record.timestamp)}    "
            f"{sentiment_badge(record.sentiment)}"
        )
        console.print(
            Panel(
                escape(truncate_preview(record.original_text)),
                title=header,
                title_align="left",
            )
        )


class ConsoleRenderer:
    """Renderer implementation that writes to the shared Rich console."""

    def render_result(self, record: FeedbackRecord) -> None:
        render_result(record)

    def render_history(self, records: Sequence[FeedbackRecord]) -> None:
        render_history(records)


__all__ = [
    "ConsoleRenderer",
    "EMPTY_HISTORY_MESSAGE",
    "format_local_timestamp",
    "render_history",
    "render_result",
    "render_sentiment",
    "sentiment_badge",
]
