"""Rich theme for the embedport CLI."""

from __future__ import annotations

from rich.theme import Theme

THEME = Theme(
    {
        "accent": "bright_blue",
        "step": "bold bright_blue",
        "subtitle": "dim",
        "info": "dim",
        "success": "green3",
        "error": "bold red3",
        "border": "bright_black",
        "label": "dim",
        "value": "white",
    }
)
