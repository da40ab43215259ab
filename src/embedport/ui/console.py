"""Shared console for the embedport CLI."""

from __future__ import annotations

from rich.console import Console

from embedport.ui.theme import THEME

_CONSOLE = Console(theme=THEME, highlight=False)


def get_console() -> Console:
    return _CONSOLE
