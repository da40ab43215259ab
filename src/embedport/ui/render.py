"""Render helpers for the embedport CLI."""

from __future__ import annotations

from typing import Mapping, Sequence

from rich import box
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from embedport.types import EmbeddingResponse
from embedport.ui.console import get_console

VECTOR_HEAD = 4


def render_banner(title: str, subtitle: str) -> None:
    console = get_console()
    panel = Panel(
        Text(subtitle, style="subtitle"),
        title=Text(title, style="step"),
        title_align="left",
        box=box.ROUNDED,
        border_style="border",
        padding=(0, 2),
        expand=True,
    )
    console.print(panel)


def render_info(text: str) -> None:
    get_console().print(text, style="info", markup=False)


def render_success(text: str) -> None:
    get_console().print(text, style="success", markup=False)


def render_error(text: str) -> None:
    console = get_console()
    panel = Panel(
        Text(text, style="error"),
        box=box.ROUNDED,
        border_style="error",
        padding=(0, 2),
        expand=True,
    )
    console.print(panel)


def render_summary_table(rows: Mapping[str, str] | Sequence[tuple[str, str]], title: str = "Summary") -> None:
    console = get_console()
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column(style="label", no_wrap=True, justify="right")
    table.add_column(style="value")

    items = rows.items() if hasattr(rows, "items") else rows
    for key, value in items:
        table.add_row(Text(str(key), style="label"), Text(str(value), style="value"))

    panel = Panel(
        table,
        title=Text(title, style="step"),
        title_align="left",
        border_style="border",
        box=box.ROUNDED,
        padding=(0, 2),
        expand=True,
    )
    console.print(panel)


def render_response(texts: Sequence[str], response: EmbeddingResponse) -> None:
    console = get_console()
    table = Table(box=box.SIMPLE_HEAD, pad_edge=False, header_style="label")
    table.add_column("#", justify="right", style="accent")
    table.add_column("Text", style="value", overflow="ellipsis", max_width=40)
    table.add_column("Dims", justify="right", style="value")
    table.add_column("Vector", style="info")
    for result in response.results:
        head = ", ".join(f"{value:+.4f}" for value in result.embedding[:VECTOR_HEAD])
        if result.dims > VECTOR_HEAD:
            head += ", ..."
        table.add_row(
            Text(str(result.index)),
            Text(texts[result.index]),
            Text(str(result.dims)),
            Text(f"[{head}]"),
        )
    console.print(table)
