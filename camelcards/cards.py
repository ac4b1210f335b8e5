"""Hand value object and helpers."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Sequence

from . import encoding


@dataclass(frozen=True, slots=True)
class Hand:
    """Immutable sequence of exactly five card symbols."""

    cards: str

    def __post_init__(self) -> None:
        if len(self.cards) != encoding.HAND_SIZE:
            raise ValueError(
                f"hand '{self.cards}' must have {encoding.HAND_SIZE} cards, got {len(self.cards)}"
            )
        for symbol in self.cards:
            if not encoding.is_symbol(symbol):
                raise ValueError(f"invalid card symbol '{symbol}' in hand '{self.cards}'")

    @classmethod
    def from_code(cls, code: str) -> "Hand":
        return cls(code.strip().upper())

    def __str__(self) -> str:
        return self.cards

    def __iter__(self):
        return iter(self.cards)

    def counts(self) -> Counter[str]:
        return Counter(self.cards)

    @property
    def wildcard_count(self) -> int:
        return self.cards.count(encoding.WILDCARD)

    def distinct(self) -> list[str]:
        """Return distinct symbols in first-seen order."""

        return list(dict.fromkeys(self.cards))

    def replace(self, old: str, new: str) -> "Hand":
        """Return a new hand with every ``old`` symbol swapped for ``new``."""

        return Hand(self.cards.replace(old, new))

    def strengths(self, wildcard: bool = False) -> tuple[int, ...]:
        return encoding.strengths(self.cards, wildcard)


def hands_from_codes(codes: Iterable[str]) -> list[Hand]:
    return [Hand.from_code(code) for code in codes]


def format_hands(hands: Sequence[Hand]) -> str:
    return " ".join(hand.cards for hand in hands)
