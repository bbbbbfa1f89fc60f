"""Primary CLI commands for the feedback analyzer."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Optional

import typer

from feedback_analyzer.cli.io import console
from feedback_analyzer.cli.renderers import render_sentiment
from feedback_analyzer.cli.utils import apply_log_override, fail, load_state
from feedback_analyzer.core.errors import EmptyHistory, ValidationError

logger = logging.getLogger(__name__)


def _cli() -> Any:
    return sys.modules["feedback_analyzer.cli"]


def submit(
    text: str = typer.Argument("", help="Customer feedback to analyze."),
    category: Optional[str] = typer.Option(
        None,
        "--category",
        "-c",
        help="Feedback category: product, service, support or general.",
    ),
    priority: Optional[str] = typer.Option(
        None,
        "--priority",
        "-p",
        help="Priority: low, medium, high or urgent.",
    ),
    no_delay: bool = typer.Option(
        False,
        "--no-delay",
        help="Skip the simulated processing delay.",
    ),
    raw: bool = typer.Option(
        False,
        "--raw",
        help="Emit the stored record as JSON instead of rendered panels.",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Override logging level for this invocation (e.g., DEBUG, INFO).",
    ),
) -> None:
    """Analyze a piece of feedback and add it to the history."""

    apply_log_override(log_level)

    state = load_state()
    if no_delay and state.latency is not None:
        state.latency.enabled = False

    orchestrator = _cli().get_orchestrator()
    context = {
        "text": text,
        "category": category,
        "priority": priority,
        "render": not raw,
    }
    try:
        with console.status("Analyzing feedback...", spinner="dots"):
            result = orchestrator.execute("submit_feedback", context)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc), param_hint=exc.field) from exc

    if raw:
        console.print_json(data=result["record"])


def classify(
    text: str = typer.Argument(..., help="Text to score."),
    raw: bool = typer.Option(False, "--raw", help="Emit the result as JSON."),
) -> None:
    """Score text with the keyword classifier without storing anything."""

    state = load_state()
    if state.classifier is None:
        raise typer.BadParameter("Sentiment classifier not initialized.")
    sentiment = state.classifier.classify(text)
    if raw:
        console.print_json(data=sentiment.as_dict())
        return
    render_sentiment(sentiment)


def export(
    output_dir: Optional[Path] = typer.Option(
        None,
        "--output-dir",
        "-o",
        file_okay=False,
        help="Directory for the export file (defaults to the configured export directory).",
    ),
    stdout: bool = typer.Option(
        False,
        "--stdout",
        help="Print the export JSON instead of writing a file.",
    ),
) -> None:
    """Export the feedback history as a JSON file."""

    state = load_state()
    orchestrator = _cli().get_orchestrator()
    context: dict[str, Any] = {}
    if not stdout:
        context["output_dir"] = output_dir or state.export_directory

    try:
        result = orchestrator.execute("export_history", context)
    except EmptyHistory as exc:
        fail(str(exc), style="yellow")

    if stdout:
        typer.echo(result["content"])
        return

    logger.info("History exported to %s", result["path"])
    console.print(
        f"[green]Exported {result['total_feedback']} feedback record(s) to "
        f"{result['path']}[/]"
    )


__all__ = ["classify", "export", "submit"]
