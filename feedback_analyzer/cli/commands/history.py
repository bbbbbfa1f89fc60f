"""History commands for the feedback analyzer CLI."""

from __future__ import annotations

import typer

from feedback_analyzer.cli.io import console
from feedback_analyzer.cli.renderers import render_history
from feedback_analyzer.cli.utils import load_state

CLEAR_CONFIRMATION = "Are you sure you want to clear all feedback history?"


def history_show(
    limit: int = typer.Option(
        0,
        "--limit",
        "-n",
        min=0,
        help="Number of most recent entries to display (0 = all).",
    ),
    raw: bool = typer.Option(
        False,
        "--raw",
        help="Emit raw JSON instead of rendered panels.",
    ),
) -> None:
    """Display stored feedback, newest first."""

    state = load_state()
    records = state.history.list()
    subset = records if limit == 0 else records[:limit]

    if raw:
        console.print_json(data=[record.as_dict() for record in subset])
        return
    render_history(subset)


def history_clear(
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Clear without confirmation prompt.",
    )
) -> None:
    """Erase the stored feedback history."""

    state = load_state()
    if not len(state.history):
        console.print("[yellow]History is already empty.[/]")
        return

    if not force and not typer.confirm(CLEAR_CONFIRMATION):
        console.print("[yellow]History unchanged.[/]")
        return

    state.history.clear()
    console.print("[green]History cleared.[/]")


__all__ = ["CLEAR_CONFIRMATION", "history_clear", "history_show"]
