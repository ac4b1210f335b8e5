"""Winnings aggregation over ranked hands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .parser import HandBid
from .rules import RankedHand, rank_hand

__all__ = ["Standing", "WinningsReport", "Solution", "standings", "total_winnings", "report", "solve"]


@dataclass(frozen=True, slots=True)
class Standing:
    """Final placement of one hand after sorting."""

    rank: int
    ranked: RankedHand
    bid: int

    @property
    def winnings(self) -> int:
        return self.rank * self.bid


@dataclass(frozen=True, slots=True)
class WinningsReport:
    """Sorted standings together with their summed winnings."""

    wildcard: bool
    standings: Sequence[Standing]

    @property
    def total(self) -> int:
        return sum(standing.winnings for standing in self.standings)


@dataclass(frozen=True, slots=True)
class Solution:
    """Totals under standard and wildcard ordering."""

    standard: int
    wildcard: int


def standings(entries: Sequence[HandBid], wildcard: bool = False) -> list[Standing]:
    """Rank ``entries`` weakest first and assign ranks ``1..N``."""

    ranked = [(rank_hand(entry.hand, wildcard), entry.bid) for entry in entries]
    # Stable sort keeps input order for hands that compare equal.
    ranked.sort(key=lambda pair: pair[0].sort_key)
    return [
        Standing(rank=idx, ranked=ranked_hand, bid=bid)
        for idx, (ranked_hand, bid) in enumerate(ranked, start=1)
    ]


def report(entries: Sequence[HandBid], wildcard: bool = False) -> WinningsReport:
    return WinningsReport(wildcard=wildcard, standings=standings(entries, wildcard))


def total_winnings(entries: Sequence[HandBid], wildcard: bool = False) -> int:
    """Return ``sum(bid * rank)`` over the sorted hands; 0 for no hands."""

    return report(entries, wildcard).total


def solve(entries: Sequence[HandBid]) -> Solution:
    return Solution(
        standard=total_winnings(entries, wildcard=False),
        wildcard=total_winnings(entries, wildcard=True),
    )
