"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from typing import Sequence

from rich import box
from rich.console import RenderableType
from rich.table import Table

from .. import encoding
from ..cards import Hand
from ..rules import HandCategory
from ..scoreboard import Standing, WinningsReport

_SYMBOL_COLORS = {
    "A": "bold red",
    "K": "red",
    "Q": "magenta",
    "J": "yellow",
    "T": "cyan",
}

_CATEGORY_COLORS = {
    HandCategory.FIVE_OF_A_KIND: "bold magenta",
    HandCategory.FOUR_OF_A_KIND: "magenta",
    HandCategory.FULL_HOUSE: "cyan",
    HandCategory.THREE_OF_A_KIND: "green",
    HandCategory.TWO_PAIR: "yellow",
    HandCategory.ONE_PAIR: "white",
    HandCategory.HIGH_CARD: "dim",
}


def format_hand(hand: Hand, *, wildcard: bool = False) -> str:
    """Return a Rich-marked-up label for ``hand``."""

    parts: list[str] = []
    for symbol in hand:
        if wildcard and symbol == encoding.WILDCARD:
            parts.append(f"[reverse yellow]{symbol}[/reverse yellow]")
            continue
        color = _SYMBOL_COLORS.get(symbol)
        parts.append(f"[{color}]{symbol}[/{color}]" if color else symbol)
    return "".join(parts)


def format_category(category: HandCategory) -> str:
    color = _CATEGORY_COLORS[category]
    return f"[{color}]{category.label}[/{color}]"


def _visible_rows(rows: Sequence[Standing], limit: int | None) -> list[Standing]:
    ordered = list(reversed(rows))
    if limit is None:
        return ordered
    return ordered[:limit]


def render_standings(report: WinningsReport, *, limit: int | None = None) -> RenderableType:
    """Return a table of standings, strongest hand first."""

    mode = "wildcard" if report.wildcard else "standard"
    table = Table(title=f"Standings ({mode} ordering)", box=box.SIMPLE_HEAVY)
    table.add_column("Rank", justify="right")
    table.add_column("Hand", justify="center")
    table.add_column("Category", justify="left")
    if report.wildcard:
        table.add_column("Played as", justify="center")
    table.add_column("Bid", justify="right")
    table.add_column("Winnings", justify="right")

    for standing in _visible_rows(report.standings, limit):
        ranked = standing.ranked
        row = [
            str(standing.rank),
            format_hand(ranked.hand, wildcard=report.wildcard),
            format_category(ranked.category),
        ]
        if report.wildcard:
            row.append(format_hand(ranked.improved))
        row.extend([str(standing.bid), str(standing.winnings)])
        table.add_row(*row)

    table.caption = f"Total winnings: [bold]{report.total}[/bold]"
    return table
