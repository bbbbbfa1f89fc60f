"""Feedback analyzer CLI package."""

from __future__ import annotations

import logging

import typer

from feedback_analyzer.cli.commands.core import classify, export, submit
from feedback_analyzer.cli.commands.history import history_clear, history_show
from feedback_analyzer.cli.commands.settings import settings_show
from feedback_analyzer.cli.io import console, err_console
from feedback_analyzer.cli.renderers import (
    ConsoleRenderer,
    render_history,
    render_result,
    render_sentiment,
)
from feedback_analyzer.cli.runtime import (
    get_orchestrator,
    get_runtime,
    get_state,
    initialize_runtime,
    set_runtime,
    set_runtime_level,
)
from feedback_analyzer.cli.state import AppState, PROJECT_ROOT
from feedback_analyzer.cli.utils import apply_log_override
from feedback_analyzer.core.logging_setup import configure_logging
from feedback_analyzer.core.orchestrator import Orchestrator
from feedback_analyzer.db.storage import create_storage
from feedback_analyzer.services.config_service import ConfigService

logger = logging.getLogger(__name__)

# Typer applications ---------------------------------------------------------

app = typer.Typer(
    add_completion=False,
    help="Analyze customer feedback and keep a short local history.",
)
history_app = typer.Typer(
    add_completion=False, help="Inspect or clear the feedback history."
)
settings_app = typer.Typer(
    add_completion=False, help="Inspect application configuration."
)


@settings_app.callback(invoke_without_command=True)
def _settings_callback(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        settings_show()


# Command registration -------------------------------------------------------

app.command()(submit)
app.command()(classify)
app.command()(export)

history_app.command("show")(history_show)
history_app.command("clear")(history_clear)

settings_app.command("show")(settings_show)

app.add_typer(history_app, name="history")
app.add_typer(settings_app, name="settings")


def main() -> None:
    """CLI entry point."""

    app()


__all__: list[str] = [
    "app",
    "history_app",
    "settings_app",
    "main",
    "console",
    "err_console",
    "logger",
    "AppState",
    "PROJECT_ROOT",
    "get_orchestrator",
    "get_runtime",
    "get_state",
    "initialize_runtime",
    "set_runtime",
    "set_runtime_level",
    "apply_log_override",
    "submit",
    "classify",
    "export",
    "history_show",
    "history_clear",
    "settings_show",
    "ConsoleRenderer",
    "render_history",
    "render_result",
    "render_sentiment",
    "ConfigService",
    "configure_logging",
    "create_storage",
    "Orchestrator",
]
