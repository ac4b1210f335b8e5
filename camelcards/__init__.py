"""Top-level package for the Camel Cards hand ranking engine."""

from . import cards, encoding, parser, rules, scoreboard

__all__ = [
    "cards",
    "encoding",
    "parser",
    "rules",
    "scoreboard",
]
