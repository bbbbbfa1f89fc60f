"""Console handles shared by the feedback analyzer commands."""

from __future__ import annotations

from rich.console import Console

# Results and listings go to stdout so they can be piped.
console = Console()
# Warnings and failures go to stderr.
err_console = Console(stderr=True)

__all__ = ["console", "err_console"]
