"""Rich display helpers for CLI output."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from covergen.core.models import RGB, CoverResult, DrawOutcome

console = Console()
error_console = Console(stderr=True)


def _outcome(outcome: DrawOutcome) -> str:
    if outcome == DrawOutcome.DRAWN:
        return "[green]drawn[/green]"
    return f"[yellow]{outcome.value}[/yellow]"


def print_result(result: CoverResult, path: Path) -> None:
    """Display what went into a generated cover."""
    lines = [
        f"[bold]Mode:[/bold] {result.mode.value}",
        f"[bold]Seed:[/bold] {result.seed}",
    ]
    if result.pattern:
        lines.append(f"[bold]Pattern:[/bold] {result.pattern}")
    if result.title is not None:
        for run in result.title.lines:
            lines.append(f"[bold]Title:[/bold] {run.text!r} ({_outcome(run.outcome)})")
        if result.title.truncated:
            lines.append("[dim]Title truncated[/dim]")
    if result.author is not None:
        run = result.author.run
        lines.append(
            f"[bold]Author:[/bold] {run.text!r} at {result.author.font_size}pt, "
            f"{run.align} ({_outcome(run.outcome)})"
        )

    panel = Panel(
        "\n".join(lines),
        title=f"[bold cyan]{path.name}[/bold cyan]",
        subtitle=f"[dim]{len(result.image):,} bytes[/dim]",
        border_style="cyan",
    )
    console.print(panel)


def print_colors(colors: dict[str, RGB]) -> None:
    """Display the named colours in a table."""
    table = Table(title="Named Colors", border_style="cyan")
    table.add_column("Name", style="bold")
    table.add_column("Hex")
    table.add_column("Swatch")
    for name, rgb in colors.items():
        hex_value = "#{:02X}{:02X}{:02X}".format(*rgb)
        table.add_row(name, hex_value, f"[on {hex_value}]      [/]")
    console.print(table)


def print_success(message: str) -> None:
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    error_console.print(f"[bold red]Error:[/bold red] {message}")


def print_warning(message: str) -> None:
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")
