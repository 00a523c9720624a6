"""Framework-agnostic presenter for the decision helper GUI.

DecisionPresenter reads the inputs from a DecisionView, asks the
DecisionMaker for a recommendation and hands the result back to the
view. It has NO Qt/PySide6 imports.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from poker_helper.core.exceptions import PokerHelperError
from poker_helper.core.hand_evaluator import HandEvaluator
from poker_helper.strategy.decision_maker import Decision, DecisionMaker
from poker_helper.utils.card import parse_cards

if TYPE_CHECKING:
    from poker_helper.gui.view_protocol import DecisionView

logger = logging.getLogger("poker_helper.gui")

MISSING_HOLE_CARDS = "Please select both hole cards"


class DecisionPresenter:
    """Coordinates view inputs, the decision engine, and result display."""

    def __init__(self, view: DecisionView, maker: DecisionMaker | None = None) -> None:
        self._view = view
        self._maker = maker or DecisionMaker()

    def on_calculate_clicked(self) -> Decision | None:
        """Handle the 'Calculate Best Move' button.

        Returns the decision shown, or None when the inputs were rejected.
        """
        try:
            hole_cards = parse_cards(self._view.get_hole_cards())
            if len(hole_cards) != 2:
                self._view.show_error(MISSING_HOLE_CARDS)
                return None
            community_cards = parse_cards(self._view.get_community_cards())

            decision = self._maker.get_decision(
                hole_cards,
                community_cards,
                self._view.get_position(),
                self._view.get_num_players(),
                self._view.get_pot_size(),
                self._view.get_current_bet(),
                self._view.get_stack_size(),
            )
        except PokerHelperError as e:
            logger.debug("Rejected inputs: %s", e)
            self._view.show_error(str(e))
            return None

        evaluation = None
        if community_cards:
            evaluation = HandEvaluator.evaluate([*hole_cards, *community_cards])
        self._view.show_decision(decision, evaluation)
        return decision

    def on_inputs_changed(self) -> None:
        """Drop a stale recommendation once the inputs are edited."""
        self._view.clear_result()
