"""Tests for the DecisionMaker entry point: routing, validation, logging."""

from __future__ import annotations

import logging
import math

import pytest

from poker_helper import get_decision as package_get_decision
from poker_helper.core.config import PositionWeights
from poker_helper.core.exceptions import InvalidGameStateError, InvalidHandError
from poker_helper.strategy.decision_maker import (
    ActionType,
    Decision,
    DecisionMaker,
    get_decision,
)
from poker_helper.utils.card import Card, parse_cards
from poker_helper.utils.constants import Position


def _cards(s: str) -> list[Card]:
    return [Card.from_str(c) for c in s.split()]


class TestRouting:
    def test_empty_board_uses_preflop_rules(self) -> None:
        decision = get_decision(_cards("A♠ K♥"), [], Position.EARLY, 6, 20.0, 5.0, 1000.0)
        assert decision == Decision(
            action=ActionType.RAISE,
            amount=60,
            reasoning=decision.reasoning,
        )
        assert decision.strength == 0.0

    def test_board_uses_postflop_heuristic(self) -> None:
        decision = get_decision(
            _cards("A♠ K♠"), _cards("Q♠ J♠ 10♠"), Position.LATE, 2, 100.0, 0.0, 1000.0,
        )
        assert decision.action == ActionType.RAISE
        assert decision.amount == 75
        assert decision.strength == pytest.approx(0.9)

    def test_river_with_seven_cards(self) -> None:
        decision = get_decision(
            _cards("7♠ 7♥"), _cards("7♦ 2♣ 2♠ 9♥ 4♦"), Position.LATE, 2, 60.0, 0.0, 1000.0,
        )
        # Full house: 0.85 * 1.0 * 0.9 = 0.765, deep stack in late position
        assert decision.action == ActionType.RAISE
        assert decision.amount == 30

    def test_shell_style_token_lists(self) -> None:
        hole = parse_cards(["Q♠", "Q♥"])
        board = parse_cards(["", "", "", "", ""])
        decision = get_decision(hole, board, "early", 6, 0, 0, 1000)
        assert decision.action == ActionType.RAISE
        assert decision.amount == 0

    def test_package_level_export(self) -> None:
        assert package_get_decision is get_decision


class TestProperties:
    @pytest.mark.parametrize("pair", ["Q♠ Q♥", "K♠ K♥", "A♠ A♥"])
    @pytest.mark.parametrize("position", list(Position))
    @pytest.mark.parametrize("pot", [0.0, 7.5, 33.0])
    def test_premium_pairs_always_raise_four_pots(self, pair, position, pot) -> None:
        decision = get_decision(_cards(pair), [], position, 6, pot, 5.0, 500.0)
        assert decision.action == ActionType.RAISE
        assert decision.amount == math.floor(pot * 4)

    def test_identical_inputs_give_identical_decisions(self) -> None:
        args = (_cards("9♥ 8♥"), _cards("7♥ 6♣ 2♥"), Position.LATE, 5, 40.0, 10.0, 300.0)
        maker = DecisionMaker()
        assert maker.get_decision(*args) == maker.get_decision(*args)
        assert get_decision(*args) == get_decision(*args)

    def test_inputs_are_not_mutated(self) -> None:
        hole = _cards("A♠ K♥")
        board = _cards("2♦ 7♣ 9♠")
        get_decision(hole, board, Position.MIDDLE, 6, 40.0, 10.0, 300.0)
        assert [str(c) for c in hole] == ["A♠", "K♥"]
        assert [str(c) for c in board] == ["2♦", "7♣", "9♠"]


class TestPositionInput:
    def test_position_string_is_case_insensitive(self) -> None:
        late = get_decision(_cards("A♠ 5♥"), [], "LATE", 6, 30.0, 10.0, 1000.0)
        assert late.action == ActionType.CALL

    def test_unknown_position_logs_warning(self, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="poker_helper.core"):
            get_decision(_cards("7♣ 2♦"), [], "hijack", 6, 30.0, 10.0, 1000.0)
        assert any("hijack" in r.message for r in caplog.records)

    def test_injected_weights_change_postflop_only(self) -> None:
        maker = DecisionMaker(weights=PositionWeights(blind=1.0))
        hole, board = _cards("K♠ K♥"), _cards("K♦ K♣ 3♠")
        assert maker.weights.blind == 1.0
        assert maker.get_decision(hole, board, Position.BLIND, 2, 100.0, 0.0, 1000.0).action == ActionType.RAISE
        assert get_decision(hole, board, Position.BLIND, 2, 100.0, 0.0, 1000.0).action == ActionType.CALL


class TestValidation:
    @pytest.mark.parametrize("hole", ["A♠", "A♠ K♥ Q♦", ""])
    def test_hole_cards_must_be_two(self, hole: str) -> None:
        with pytest.raises(InvalidHandError, match="Exactly 2 hole cards"):
            get_decision(_cards(hole), [], Position.LATE, 6, 10.0, 0.0, 100.0)

    def test_at_most_five_community_cards(self) -> None:
        with pytest.raises(InvalidHandError, match="At most 5"):
            get_decision(
                _cards("A♠ K♥"), _cards("2♦ 3♦ 4♦ 5♦ 6♦ 7♦"),
                Position.LATE, 6, 10.0, 0.0, 100.0,
            )

    @pytest.mark.parametrize("players", [0, 1, 10])
    def test_player_count_range(self, players: int) -> None:
        with pytest.raises(InvalidGameStateError, match="Number of players"):
            get_decision(_cards("A♠ K♥"), [], Position.LATE, players, 10.0, 0.0, 100.0)

    @pytest.mark.parametrize("pot, bet, stack", [(-1, 0, 100), (10, -5, 100), (10, 0, -1)])
    def test_negative_amounts(self, pot, bet, stack) -> None:
        with pytest.raises(InvalidGameStateError, match="non-negative"):
            get_decision(_cards("A♠ K♥"), [], Position.LATE, 6, pot, bet, stack)

    @pytest.mark.parametrize("pot, bet, stack", [
        (math.nan, 0, 100),
        (math.inf, 0, 100),
        (10, math.inf, 100),
        (10, 0, math.nan),
    ])
    def test_non_finite_amounts(self, pot, bet, stack) -> None:
        with pytest.raises(InvalidGameStateError, match="finite"):
            get_decision(_cards("Q♠ Q♥"), [], Position.LATE, 6, pot, bet, stack)

    def test_validation_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError):
            get_decision(_cards("A♠"), [], Position.LATE, 6, 10.0, 0.0, 100.0)


class TestLogging:
    def test_decision_logs_info(self, caplog) -> None:
        with caplog.at_level(logging.INFO, logger="poker_helper.strategy"):
            get_decision(_cards("A♠ K♥"), [], Position.LATE, 6, 30.0, 10.0, 1000.0)

        infos = [r for r in caplog.records if r.levelname == "INFO"]
        assert infos
        assert "preflop" in infos[-1].message
        assert "ms" in infos[-1].message

    def test_postflop_logs_features_at_debug(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="poker_helper.strategy"):
            get_decision(_cards("A♠ 9♦"), _cards("A♥ 7♣ 2♠"), Position.LATE, 2, 100.0, 10.0, 1000.0)

        messages = [r.message for r in caplog.records]
        assert any("pot_odds=" in m for m in messages)
        assert any("marginal_priced_in" in m for m in messages)


class TestDescribe:
    def test_describe(self) -> None:
        assert Decision(ActionType.RAISE, 90).describe() == "Raise $90"
        assert Decision(ActionType.CALL, 12.5).describe() == "Call $12.5"
        assert Decision(ActionType.CALL, 0).describe() == "Call"
        assert Decision(ActionType.FOLD, 0).describe() == "Fold"
