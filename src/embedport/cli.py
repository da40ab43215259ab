"""CLI entrypoint for embedport."""

from __future__ import annotations

import asyncio
from dataclasses import replace
import json
from typing import List, Optional

import typer

from embedport.client import available_providers, create_from_settings
from embedport.env import load_dotenv
from embedport.errors import EmbeddingError
from embedport.logs import configure_logging
from embedport.model import PROBE_TEXT
from embedport.settings import EmbedportSettings
from embedport.types import EmbeddingResponse
from embedport.ui.render import (
    render_banner,
    render_error,
    render_info,
    render_response,
    render_success,
    render_summary_table,
)

app = typer.Typer(add_completion=False, help="Portable embedding-generation toolkit.")


@app.callback(invoke_without_command=True)
def root(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level for embedport loggers."),
) -> None:
    """embedport diagnostics CLI."""
    load_dotenv()
    try:
        settings = EmbedportSettings.from_env()
        configure_logging(log_level or settings.log_level)
    except EmbeddingError as exc:
        render_error(str(exc))
        raise typer.Exit(code=1)
    ctx.obj = settings
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=0)


@app.command("embed")
def embed_command(
    ctx: typer.Context,
    texts: List[str] = typer.Argument(..., help="Texts to embed, in order."),
    mode: Optional[str] = typer.Option(None, "--mode", "-m", help="Provider mode."),
    model: Optional[str] = typer.Option(None, "--model", help="Provider model identifier."),
    dims: Optional[int] = typer.Option(None, "--dims", help="Vector length for providers that accept one."),
    max_batch_size: Optional[int] = typer.Option(None, "--max-batch-size", help="Split requests into batches."),
    as_json: bool = typer.Option(False, "--json", help="Print the full response as JSON."),
) -> None:
    """Embed texts and show the resulting vectors."""
    settings = _resolve_settings(ctx, mode=mode, model=model, dims=dims, max_batch_size=max_batch_size)
    try:
        response = asyncio.run(_embed(settings, texts))
    except EmbeddingError as exc:
        render_error(str(exc))
        raise typer.Exit(code=1)

    if as_json:
        print(json.dumps(response.to_dict(), indent=2, sort_keys=True, ensure_ascii=True))
        return
    render_banner("embedport", f"{len(response)} embedding(s) via {settings.mode}")
    render_response(texts, response)
    render_summary_table(
        [
            ("Provider", settings.mode),
            ("Model", str(response.metadata.get("model", settings.model))),
            ("Dimensions", str(response.dimensions)),
            ("Batches", str(response.metadata.get("batches", 1))),
        ]
    )


@app.command("dimensions")
def dimensions_command(
    ctx: typer.Context,
    mode: Optional[str] = typer.Option(None, "--mode", "-m", help="Provider mode."),
    model: Optional[str] = typer.Option(None, "--model", help="Provider model identifier."),
    dims: Optional[int] = typer.Option(None, "--dims", help="Vector length for providers that accept one."),
) -> None:
    """Probe the provider once and report its vector length."""
    settings = _resolve_settings(ctx, mode=mode, model=model, dims=dims, max_batch_size=None)
    try:
        value = asyncio.run(_dimensions(settings))
    except EmbeddingError as exc:
        render_error(str(exc))
        raise typer.Exit(code=1)
    render_info(f"Probe text: {PROBE_TEXT!r}")
    render_success(f"{settings.mode} produces {value}-dimensional vectors.")


@app.command("providers")
def providers_command() -> None:
    """List registered provider modes."""
    for name in available_providers():
        typer.echo(name)


def _resolve_settings(
    ctx: typer.Context,
    *,
    mode: str | None,
    model: str | None,
    dims: int | None,
    max_batch_size: int | None,
) -> EmbedportSettings:
    settings = ctx.obj if isinstance(ctx.obj, EmbedportSettings) else EmbedportSettings()
    overrides: dict[str, object] = {}
    if mode:
        overrides["mode"] = mode.strip().lower()
    if model:
        overrides["model"] = model
    if dims is not None:
        overrides["dimensions"] = dims
    if max_batch_size is not None:
        overrides["max_batch_size"] = max_batch_size
    return replace(settings, **overrides)


async def _embed(settings: EmbedportSettings, texts: list[str]) -> EmbeddingResponse:
    async with create_from_settings(settings) as embedding_model:
        return await embedding_model.embed_for_response(texts)


async def _dimensions(settings: EmbedportSettings) -> int:
    async with create_from_settings(settings) as embedding_model:
        return await embedding_model.dimensions()


def main() -> None:
    app()


if __name__ == "__main__":
    main()
