"""Sanity tests ensuring the scaffolding imports correctly."""

from __future__ import annotations

import importlib

import pytest


@pytest.mark.parametrize(
    "module_name",
    [
        "camelcards",
        "camelcards.cards",
        "camelcards.encoding",
        "camelcards.rules",
        "camelcards.parser",
        "camelcards.scoreboard",
        "camelcards.cli.main",
    ],
)
def test_modules_import(module_name: str) -> None:
    """Ensure all foundational modules can be imported."""

    assert importlib.import_module(module_name)
