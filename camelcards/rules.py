"""Hand classification and ordering rules for Camel Cards."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Final, Iterable

from . import encoding
from .cards import Hand

__all__ = [
    "HandCategory",
    "RankedHand",
    "MixedModeComparison",
    "classify",
    "best_substitution",
    "rank_hand",
    "rank_hands",
    "compare",
]


class HandCategory(IntEnum):
    """Strength categories ordered from weakest to strongest."""

    HIGH_CARD = 1
    ONE_PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    FULL_HOUSE = 5
    FOUR_OF_A_KIND = 6
    FIVE_OF_A_KIND = 7

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()


_CATEGORY_BY_COUNTS: Final[dict[tuple[int, ...], HandCategory]] = {
    (5,): HandCategory.FIVE_OF_A_KIND,
    (4, 1): HandCategory.FOUR_OF_A_KIND,
    (3, 2): HandCategory.FULL_HOUSE,
    (3, 1, 1): HandCategory.THREE_OF_A_KIND,
    (2, 2, 1): HandCategory.TWO_PAIR,
    (2, 1, 1, 1): HandCategory.ONE_PAIR,
    (1, 1, 1, 1, 1): HandCategory.HIGH_CARD,
}


class MixedModeComparison(ValueError):
    """Raised when comparing hands ranked under different wildcard modes."""


def _as_hand(hand: Hand | str) -> Hand:
    return hand if isinstance(hand, Hand) else Hand(hand)


def classify(hand: Hand | str) -> HandCategory:
    """Return the category induced by the multiset of symbol counts."""

    counts = tuple(sorted(_as_hand(hand).counts().values(), reverse=True))
    return _CATEGORY_BY_COUNTS[counts]


def best_substitution(hand: Hand | str) -> tuple[HandCategory, Hand]:
    """Return the best category reachable by replacing every wildcard.

    All wildcards are swapped for the same symbol. Only symbols already in
    the hand are tried; the literal hand is the starting point, so the
    result never ranks below it.
    """

    original = _as_hand(hand)
    best_category = classify(original)
    best_hand = original
    if original.wildcard_count == 0:
        return best_category, best_hand

    for symbol in original.distinct():
        if symbol == encoding.WILDCARD:
            continue
        candidate = original.replace(encoding.WILDCARD, symbol)
        category = classify(candidate)
        if category > best_category:
            best_category = category
            best_hand = candidate
    # JJJJJ has no candidates and is already five of a kind literally.
    return best_category, best_hand


@dataclass(frozen=True, slots=True)
class RankedHand:
    """A hand paired with its category under one wildcard mode."""

    hand: Hand
    category: HandCategory
    improved: Hand
    wildcard: bool = False

    @property
    def tie_break(self) -> tuple[int, ...]:
        """Strengths of the original cards, never the substituted ones."""

        return self.hand.strengths(self.wildcard)

    @property
    def sort_key(self) -> tuple[int, tuple[int, ...]]:
        return int(self.category), self.tie_break


def rank_hand(hand: Hand | str, wildcard: bool = False) -> RankedHand:
    """Classify ``hand`` under the requested mode."""

    original = _as_hand(hand)
    if wildcard:
        category, improved = best_substitution(original)
    else:
        category, improved = classify(original), original
    return RankedHand(hand=original, category=category, improved=improved, wildcard=wildcard)


def rank_hands(hands: Iterable[Hand | str], wildcard: bool = False) -> list[RankedHand]:
    return [rank_hand(hand, wildcard) for hand in hands]


def compare(left: RankedHand, right: RankedHand) -> int:
    """Three-way comparison: negative, zero or positive like ``cmp``."""

    if left.wildcard != right.wildcard:
        raise MixedModeComparison("cannot compare hands ranked under different wildcard modes")
    if left.category != right.category:
        return -1 if left.category < right.category else 1
    for mine, theirs in zip(left.tie_break, right.tie_break):
        if mine != theirs:
            return -1 if mine < theirs else 1
    return 0
