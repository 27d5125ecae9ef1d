"""Typer CLI application for Covergen."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer
from loguru import logger

from covergen import __version__
from covergen.cli.display import (
    console,
    print_colors,
    print_error,
    print_result,
    print_success,
    print_warning,
)
from covergen.core.config import AppConfig, config_dir, data_dir
from covergen.core.models import DrawOutcome
from covergen.exceptions import CovergenError

app = typer.Typer(
    name="covergen",
    help="Deterministic placeholder covers for catalog records.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    if value:
        console.print(f"covergen {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", "-V", callback=version_callback, is_eager=True),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging"),
    ] = False,
) -> None:
    """Covergen: generate placeholder cover images."""
    if verbose:
        logger.enable("covergen")
    else:
        logger.disable("covergen")


def parse_overrides(items: list[str]) -> dict[str, str]:
    """Turn ``KEY=VALUE`` strings into a settings mapping."""
    overrides = {}
    for item in items:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            raise typer.BadParameter(f"Expected KEY=VALUE, got {item!r}", param_hint="--set")
        overrides[key.strip()] = value.strip()
    return overrides


def default_output(title: str | None) -> Path:
    safe_title = "".join(c if c.isalnum() or c in " -_" else "" for c in title or "").strip()
    return Path.cwd() / f"{safe_title or 'cover'}.png"


@app.command()
def generate(
    title: Annotated[Optional[str], typer.Argument(help="Title of the item")] = None,
    author: Annotated[
        Optional[str], typer.Option("--author", "-a", help="Author of the item")
    ] = None,
    call_number: Annotated[
        Optional[str], typer.Option("--call-number", "-c", help="Call number used as seed")
    ] = None,
    output: Annotated[
        Optional[Path], typer.Option("--output", "-o", help="Output PNG file path")
    ] = None,
    mode: Annotated[
        Optional[str], typer.Option("--mode", "-m", help="Background mode: grid or solid")
    ] = None,
    size: Annotated[
        Optional[int], typer.Option("--size", "-s", help="Side length in pixels")
    ] = None,
    settings: Annotated[
        Optional[list[str]],
        typer.Option("--set", help="Override a cover setting, e.g. --set accentColor=#336699"),
    ] = None,
    config: Annotated[
        Optional[Path], typer.Option("--config", help="Read settings from this TOML file")
    ] = None,
    strict_fonts: Annotated[
        bool, typer.Option("--strict-fonts", help="Fail when a theme font is missing")
    ] = False,
) -> None:
    """Generate a cover image and save it as PNG."""
    from covergen.render.generator import CoverGenerator

    overrides: dict[str, object] = dict(parse_overrides(settings or []))
    if mode is not None:
        overrides["mode"] = mode
    if size is not None:
        overrides["size"] = size

    try:
        app_config = AppConfig.load(config)
        generator = CoverGenerator.from_config(app_config, overrides, strict_fonts=strict_fonts)
        result = generator.render(title, author, call_number)
    except CovergenError as exc:
        print_error(str(exc))
        raise typer.Exit(1)

    if title is None and call_number is None:
        print_warning("No title or call number given; the background is random.")
    runs = (result.title.lines if result.title else []) + (
        [result.author.run] if result.author else []
    )
    if any(run.outcome == DrawOutcome.SKIPPED_NO_FONT for run in runs):
        print_warning("Some text was skipped because no usable font was found.")

    path = output or default_output(title)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(result.image)
    logger.info(f"Cover saved to {path}")
    print_result(result, path)
    print_success(f"Saved: {path}")


@app.command()
def colors() -> None:
    """List the named colours accepted in settings."""
    from covergen.render.colors import NAMED_COLORS

    print_colors(NAMED_COLORS)


@app.command(name="config-path")
def config_path() -> None:
    """Show config and theme directory paths."""
    console.print(f"[bold]Config:[/bold] {config_dir()}")
    console.print(f"[bold]Data:[/bold]   {data_dir()}")


def run() -> None:
    app()
