"""Card symbol constants and strength lookups for Camel Cards."""

from __future__ import annotations

from typing import Final

SYMBOLS: Final[str] = "23456789TJQKA"
WILDCARD: Final[str] = "J"
HAND_SIZE: Final[int] = 5
SYMBOL_TO_STRENGTH: Final[dict[str, int]] = {symbol: idx + 2 for idx, symbol in enumerate(SYMBOLS)}
WILDCARD_STRENGTH: Final[int] = 1


def is_symbol(symbol: str) -> bool:
    """Return ``True`` when ``symbol`` is part of the card alphabet."""

    return symbol in SYMBOL_TO_STRENGTH


def card_strength(symbol: str, wildcard: bool = False) -> int:
    """Return the ordering strength of ``symbol``.

    ``2`` through ``A`` map to 2..14. When ``wildcard`` is set the wildcard
    symbol drops below every other card.
    """

    if symbol not in SYMBOL_TO_STRENGTH:
        raise ValueError(f"unknown card symbol '{symbol}'")
    if wildcard and symbol == WILDCARD:
        return WILDCARD_STRENGTH
    return SYMBOL_TO_STRENGTH[symbol]


def strengths(symbols: str, wildcard: bool = False) -> tuple[int, ...]:
    """Return the positional strength tuple used for tie-breaks."""

    return tuple(card_strength(symbol, wildcard) for symbol in symbols)
