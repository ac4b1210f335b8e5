from __future__ import annotations

import pytest

from camelcards.cards import Hand
from camelcards.parser import HandBid

_EXAMPLE_INPUT = """32T3K 765
T55J5 684
KK677 28
KTJJT 220
QQQJA 483
"""


@pytest.fixture
def example_entries() -> list[HandBid]:
    return [
        HandBid(Hand("32T3K"), 765),
        HandBid(Hand("T55J5"), 684),
        HandBid(Hand("KK677"), 28),
        HandBid(Hand("KTJJT"), 220),
        HandBid(Hand("QQQJA"), 483),
    ]


@pytest.fixture
def example_input() -> str:
    return _EXAMPLE_INPUT
