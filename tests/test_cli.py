from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from camelcards.cli.main import app
from camelcards.cli.render import format_hand
from camelcards.cards import Hand

runner = CliRunner()


@pytest.fixture
def input_file(tmp_path: Path, example_input: str) -> Path:
    path = tmp_path / "day7.txt"
    path.write_text(example_input, encoding="utf-8")
    return path


def test_solve_prints_both_totals(input_file: Path) -> None:
    result = runner.invoke(app, ["solve", str(input_file)])

    assert result.exit_code == 0
    assert result.output.split() == ["6440", "5905"]


def test_solve_empty_input_prints_zeros(tmp_path: Path) -> None:
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")

    result = runner.invoke(app, ["solve", str(path)])

    assert result.exit_code == 0
    assert result.output.split() == ["0", "0"]


def test_solve_reports_malformed_line(tmp_path: Path) -> None:
    path = tmp_path / "bad.txt"
    path.write_text("32T3K 765\nKK677 lots\n", encoding="utf-8")

    result = runner.invoke(app, ["solve", str(path)])

    assert result.exit_code == 1
    assert "line 2" in result.output


def test_solve_rejects_missing_file(tmp_path: Path) -> None:
    result = runner.invoke(app, ["solve", str(tmp_path / "missing.txt")])

    assert result.exit_code != 0


def test_standings_table_lists_hands(input_file: Path) -> None:
    result = runner.invoke(app, ["standings", str(input_file), "--wildcard"])

    assert result.exit_code == 0
    assert "KTJJT" in result.output
    assert "KTTTT" in result.output
    assert "Total winnings: 5905" in result.output


def test_standings_limit_shows_strongest_first(input_file: Path) -> None:
    result = runner.invoke(app, ["standings", str(input_file), "--limit", "1"])

    assert result.exit_code == 0
    assert "QQQJA" in result.output
    assert "32T3K" not in result.output
    assert "Total winnings: 6440" in result.output


def test_format_hand_highlights_wildcards() -> None:
    assert "reverse yellow" in format_hand(Hand("KTJJT"), wildcard=True)
    assert "reverse" not in format_hand(Hand("KTJJT"))
