"""Settings command group for the feedback analyzer CLI."""

from __future__ import annotations

import typer

from feedback_analyzer.cli.io import console
from feedback_analyzer.cli.utils import load_state


def settings_show() -> None:
    """Display the effective configuration."""

    state = load_state()
    if state.config_service is None:
        raise typer.BadParameter("Configuration service not initialized.")
    payload = state.config_service.as_dict()
    payload["config_dir"] = str(state.config_service.config_dir)
    console.print_json(data=payload)


__all__ = ["settings_show"]
