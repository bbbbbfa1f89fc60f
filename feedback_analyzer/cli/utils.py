"""Utility helpers shared across CLI command modules."""

from __future__ import annotations

import logging
import sys
from typing import Any, NoReturn, Optional

import typer

from feedback_analyzer.cli.io import err_console
from feedback_analyzer.core.errors import MalformedDurableState

logger = logging.getLogger(__name__)


def _cli():
    return sys.modules["feedback_analyzer.cli"]


def apply_log_override(log_level: Optional[str]) -> None:
    """Override logging level for the current invocation."""

    if not log_level or not isinstance(log_level, str):
        return
    try:
        _cli().set_runtime_level(log_level)
        logger.info("Log level overridden to %s", log_level.upper())
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def fail(message: str, *, style: str = "red", code: int = 1) -> NoReturn:
    """Report a recoverable error on stderr and end the command."""

    err_console.print(f"[{style}]{message}[/]")
    raise typer.Exit(code=code)


def load_state() -> Any:
    """Return the CLI state, reporting corrupt persisted history as a command error."""

    try:
        return _cli().get_state()
    except MalformedDurableState as exc:
        fail(f"Cannot load feedback history: {exc}")


__all__ = ["apply_log_override", "fail", "load_state"]
