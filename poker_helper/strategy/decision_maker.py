"""Decision engine entry point.

Routes a request to the pre-flop rule tree when no community cards are
showing, and to the post-flop heuristic otherwise:

  hole cards + community cards + GameState
    → validation (2 hole cards, at most 5 community cards)
    → PreflopEngine  (no board)
    → PostflopEngine (flop, turn, river)
    → Decision(action, amount, reasoning)

Every call is independent; the only shared data is the frozen
PositionWeights table.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence

from poker_helper.core.config import DEFAULT_POSITION_WEIGHTS, PositionWeights
from poker_helper.core.exceptions import InvalidHandError
from poker_helper.core.game_state import GameState
from poker_helper.strategy.decision import ActionType, Decision
from poker_helper.strategy.postflop import PostflopEngine
from poker_helper.strategy.preflop import PreflopEngine
from poker_helper.utils.card import Card
from poker_helper.utils.constants import MAX_COMMUNITY_CARDS, Position

logger = logging.getLogger("poker_helper.strategy")

__all__ = ["ActionType", "Decision", "DecisionMaker", "get_decision"]


def _validate_cards(hole_cards: Sequence[Card], community_cards: Sequence[Card]) -> None:
    if len(hole_cards) != 2:
        raise InvalidHandError(f"Exactly 2 hole cards are required, got {len(hole_cards)}")
    if len(community_cards) > MAX_COMMUNITY_CARDS:
        raise InvalidHandError(
            f"At most {MAX_COMMUNITY_CARDS} community cards allowed, got {len(community_cards)}"
        )


class DecisionMaker:
    """Top-level decision engine combining pre-flop and post-flop logic.

    Usage:
        maker = DecisionMaker()
        decision = maker.get_decision(hole, board, Position.LATE, 6, 100, 20, 1000)
    """

    def __init__(self, weights: PositionWeights = DEFAULT_POSITION_WEIGHTS) -> None:
        self._weights = weights
        self._preflop = PreflopEngine()
        self._postflop = PostflopEngine(weights=weights)

    @property
    def weights(self) -> PositionWeights:
        return self._weights

    def get_decision(
        self,
        hole_cards: Sequence[Card],
        community_cards: Sequence[Card],
        position: Position | str,
        num_players: int,
        pot_size: float,
        current_bet: float,
        stack_size: float,
    ) -> Decision:
        """Recommend an action for the hero.

        Args:
            hole_cards: The hero's two private cards.
            community_cards: 0 to 5 board cards.
            position: Table position; unknown names get the default weight.
            num_players: Players at the table (2-9).
            pot_size: Current pot.
            current_bet: Bet the hero is facing.
            stack_size: Hero's remaining stack.

        Returns:
            Decision with action, amount, and reasoning.

        Raises:
            InvalidHandError: If there are not exactly 2 hole cards or more
                              than 5 community cards.
            InvalidGameStateError: If the player count or an amount is out
                                   of range.
        """
        _validate_cards(hole_cards, community_cards)
        state = GameState(
            position=position,
            num_players=num_players,
            pot_size=pot_size,
            current_bet=current_bet,
            stack_size=stack_size,
        )
        return self.decide(hole_cards, community_cards, state)

    def decide(
        self,
        hole_cards: Sequence[Card],
        community_cards: Sequence[Card],
        state: GameState,
    ) -> Decision:
        """Same as get_decision() for an already-built GameState."""
        _validate_cards(hole_cards, community_cards)
        t_start = time.perf_counter()

        if not community_cards:
            street = "preflop"
            decision = self._preflop.decide(hole_cards, state)
        else:
            street = f"postflop({len(community_cards)})"
            decision = self._postflop.decide(hole_cards, community_cards, state)

        elapsed_ms = (time.perf_counter() - t_start) * 1000
        logger.info(
            "%s %s %s -> %s %s (%s, %.2fms)",
            street,
            state.position,
            " ".join(str(c) for c in hole_cards),
            decision.action,
            decision.amount,
            decision.reasoning,
            elapsed_ms,
        )
        return decision


_DEFAULT_MAKER = DecisionMaker()


def get_decision(
    hole_cards: Sequence[Card],
    community_cards: Sequence[Card],
    position: Position | str,
    num_players: int,
    pot_size: float,
    current_bet: float,
    stack_size: float,
) -> Decision:
    """Module-level shortcut for DecisionMaker().get_decision()."""
    return _DEFAULT_MAKER.get_decision(
        hole_cards,
        community_cards,
        position,
        num_players,
        pot_size,
        current_bet,
        stack_size,
    )
