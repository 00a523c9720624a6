"""Tests for the command-line helper (one-shot and interactive modes)."""

from __future__ import annotations

import json

import pytest

from poker_helper.interface import poker_coach
from poker_helper.interface.poker_coach import run


@pytest.fixture
def no_weights(tmp_path) -> list[str]:
    """Point --weights at a missing file so the user's config is ignored."""
    return ["--weights", str(tmp_path / "absent.json")]


class TestOneShot:
    def test_preflop_recommendation(self, capsys, no_weights) -> None:
        code = run(["--hand", "AsKh", "--position", "late", "--pot", "30", "--bet", "10", *no_weights])

        out = capsys.readouterr().out
        assert code == 0
        assert "RECOMMENDATION: Raise $90" in out
        assert "Hand:       A♠ K♥" in out
        assert "Premium unpaired" in out
        assert "Made hand" not in out

    def test_postflop_shows_analysis(self, capsys, no_weights) -> None:
        code = run([
            "--hand", "A♠ 9♦", "--board", "A♥ 7♣ 2♠",
            "--position", "late", "--players", "2",
            "--pot", "100", "--bet", "10", *no_weights,
        ])

        out = capsys.readouterr().out
        assert code == 0
        assert "RECOMMENDATION: Call $10" in out
        assert "Board:      A♥ 7♣ 2♠" in out
        assert "Made hand:  Pair (strength: 0.50)" in out

    def test_default_fold(self, capsys, no_weights) -> None:
        run(["--hand", "7c2d", *no_weights])
        assert "RECOMMENDATION: Fold" in capsys.readouterr().out

    def test_bad_card_is_reported(self, capsys, no_weights) -> None:
        code = run(["--hand", "AsXx", *no_weights])
        assert code == 2
        assert "Invalid card string" in capsys.readouterr().err

    def test_one_hole_card_is_rejected(self, capsys, no_weights) -> None:
        code = run(["--hand", "As", *no_weights])
        assert code == 2
        assert "Please select both hole cards" in capsys.readouterr().err

    def test_player_count_out_of_range(self, capsys, no_weights) -> None:
        code = run(["--hand", "AsKh", "--players", "12", *no_weights])
        assert code == 2
        assert "Number of players" in capsys.readouterr().err

    @pytest.mark.parametrize("flag, value", [("--pot", "nan"), ("--bet", "inf"), ("--stack", "inf")])
    def test_non_finite_amount_is_reported(self, capsys, no_weights, flag, value) -> None:
        code = run(["--hand", "QsQh", flag, value, *no_weights])
        assert code == 2
        assert "must be a finite number" in capsys.readouterr().err

    def test_weights_file_is_used(self, capsys, tmp_path) -> None:
        path = tmp_path / "weights.json"
        path.write_text(json.dumps({"blind": 1.0}), encoding="utf-8")

        run([
            "--hand", "K♠ K♥", "--board", "K♦ K♣ 3♠", "--position", "blind",
            "--players", "2", "--pot", "100", "--weights", str(path),
        ])

        assert "RECOMMENDATION: Raise $75" in capsys.readouterr().out

    def test_invalid_weights_file(self, capsys, tmp_path) -> None:
        path = tmp_path / "weights.json"
        path.write_text(json.dumps({"late": -1}), encoding="utf-8")

        assert run(["--hand", "AsKh", "--weights", str(path)]) == 2
        assert "Error:" in capsys.readouterr().err


class TestInteractive:
    def _feed(self, monkeypatch, answers: list[str]) -> None:
        it = iter(answers)
        monkeypatch.setattr("builtins.input", lambda _prompt="": next(it))

    def test_session(self, monkeypatch, capsys, no_weights) -> None:
        self._feed(monkeypatch, ["AsKh", "", "late", "", "30", "10", "", ""])

        assert run(no_weights) == 0

        out = capsys.readouterr().out
        assert "POKER DECISION HELPER" in out
        assert "RECOMMENDATION: Raise $90" in out
        assert "Players:    6" in out
        assert "Good luck" in out

    def test_missing_hole_card_reprompts(self, monkeypatch, capsys, no_weights) -> None:
        self._feed(monkeypatch, ["As", ""])

        run(no_weights)

        assert "Please select both hole cards" in capsys.readouterr().out

    def test_out_of_range_players_falls_back_to_default(self, monkeypatch, capsys, no_weights) -> None:
        self._feed(monkeypatch, ["QsQh", "", "early", "15", "10", "0", "", ""])

        run(no_weights)

        out = capsys.readouterr().out
        assert "Must be between 2 and 9" in out
        assert "RECOMMENDATION: Raise $40" in out

    def test_non_finite_pot_falls_back_to_default(self, monkeypatch, capsys, no_weights) -> None:
        self._feed(monkeypatch, ["QsQh", "", "early", "", "nan", "inf", "", ""])

        assert run(no_weights) == 0

        out = capsys.readouterr().out
        assert out.count("Must be a finite number") == 2
        assert "RECOMMENDATION: Raise\n" in out
        assert "Pot:        0   Bet: 0" in out

    def test_eof_quits(self, monkeypatch, capsys, no_weights) -> None:
        def _eof(_prompt=""):
            raise EOFError

        monkeypatch.setattr("builtins.input", _eof)
        assert run(no_weights) == 0
        assert "Good luck" in capsys.readouterr().out


def test_interactive_defaults() -> None:
    assert poker_coach.DEFAULT_POSITION == "early"
    assert poker_coach.DEFAULT_PLAYERS == 6
    assert poker_coach.DEFAULT_STACK == 1000.0
