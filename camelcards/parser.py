"""Parsing helpers for ``<hand> <bid>`` puzzle input."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from .cards import Hand

__all__ = ["HandBid", "ParseError", "parse_line", "parse_lines", "read_entries"]


class ParseError(ValueError):
    """Raised when an input line is not a valid ``<hand> <bid>`` record."""

    def __init__(self, line_number: int, line: str, reason: str) -> None:
        super().__init__(f"line {line_number}: {reason}: {line!r}")
        self.line_number = line_number
        self.line = line
        self.reason = reason


@dataclass(frozen=True, slots=True)
class HandBid:
    """A hand together with the stake placed on it."""

    hand: Hand
    bid: int


def parse_line(line: str, line_number: int = 1) -> HandBid:
    parts = line.split()
    if len(parts) != 2:
        raise ParseError(line_number, line, "expected '<hand> <bid>'")
    code, bid_text = parts
    try:
        hand = Hand.from_code(code)
    except ValueError as exc:
        raise ParseError(line_number, line, str(exc)) from exc
    try:
        bid = int(bid_text)
    except ValueError as exc:
        raise ParseError(line_number, line, f"bid '{bid_text}' is not an integer") from exc
    if bid < 0:
        raise ParseError(line_number, line, "bid must be non-negative")
    return HandBid(hand=hand, bid=bid)


def parse_lines(lines: Iterable[str]) -> list[HandBid]:
    """Parse every non-blank line, numbering lines from 1."""

    entries: list[HandBid] = []
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        entries.append(parse_line(line, line_number))
    return entries


def read_entries(path: Path | str) -> list[HandBid]:
    """Read and parse the whole input file at ``path``."""

    text = Path(path).read_text(encoding="utf-8")
    return parse_lines(text.splitlines())
