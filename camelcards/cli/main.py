"""Typer entry-point wiring for the Camel Cards CLI."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from .. import parser, scoreboard
from .render import render_standings

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()
err_console = Console(stderr=True)


def _load_entries(path: Path) -> list[parser.HandBid]:
    try:
        return parser.read_entries(path)
    except parser.ParseError as exc:
        err_console.print(
            f"[red]Invalid input in {escape(str(path))}:[/red] {escape(str(exc))}",
            highlight=False,
            soft_wrap=True,
        )
        raise typer.Exit(code=1) from exc


@app.command()
def solve(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="Puzzle input file."),
) -> None:
    """Print total winnings under standard and wildcard ordering."""

    solution = scoreboard.solve(_load_entries(path))
    console.print(solution.standard, highlight=False)
    console.print(solution.wildcard, highlight=False)


@app.command()
def standings(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="Puzzle input file."),
    wildcard: bool = typer.Option(
        False,
        "--wildcard/--no-wildcard",
        help="Treat J as a wildcard that ranks lowest in tie-breaks.",
    ),
    limit: int | None = typer.Option(None, min=1, help="Only show the N strongest hands."),
) -> None:
    """Show every hand's rank, category and winnings as a table."""

    entries = _load_entries(path)
    console.print(render_standings(scoreboard.report(entries, wildcard=wildcard), limit=limit))


def main() -> None:
    """Entry-point for ``python -m camelcards.cli``."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
