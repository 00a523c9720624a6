"""Abstract view interface for the decision helper GUI.

The DecisionView Protocol is the contract between DecisionPresenter and
a concrete UI framework. The presenter never imports Qt.
"""

from __future__ import annotations

from typing import Protocol

from poker_helper.core.hand_evaluator import HandEvaluation
from poker_helper.strategy.decision_maker import Decision


class DecisionView(Protocol):
    """Interface that any GUI framework must implement."""

    # --- Input reading ---

    def get_hole_cards(self) -> list[str]:
        """Return the hole card tokens, e.g. ['A♠', 'K♥']; empty slots as ''."""
        ...

    def get_community_cards(self) -> list[str]:
        """Return the community card tokens; empty slots as ''."""
        ...

    def get_position(self) -> str:
        """Return 'early', 'middle', 'late' or 'blind'."""
        ...

    def get_num_players(self) -> int:
        ...

    def get_pot_size(self) -> float:
        ...

    def get_current_bet(self) -> float:
        ...

    def get_stack_size(self) -> float:
        ...

    # --- Output display ---

    def show_decision(self, decision: Decision, evaluation: HandEvaluation | None) -> None:
        """Display the recommended action; evaluation is None preflop."""
        ...

    def show_error(self, message: str) -> None:
        """Display a validation or engine error."""
        ...

    def clear_result(self) -> None:
        ...
