"""Post-flop heuristic.

Hand category strength is scaled by position and table size, then
compared against pot odds and the stack-to-pot ratio:

    final_strength = strength * position_weight * max(0.6, 1 - 0.05 * players)
    pot_odds       = bet / (pot + bet)
    spr            = stack / pot
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from poker_helper.core.config import DEFAULT_POSITION_WEIGHTS, PositionWeights
from poker_helper.core.game_state import GameState
from poker_helper.core.hand_evaluator import HandEvaluation, HandEvaluator
from poker_helper.strategy.decision import Decision, Rule, call, first_match, fold, raise_to
from poker_helper.utils.card import Card

logger = logging.getLogger("poker_helper.strategy.postflop")

MIN_PLAYER_ADJUSTMENT = 0.6
PER_PLAYER_PENALTY = 0.05


def player_adjustment(num_players: int) -> float:
    """Shrink strength as more players stay in the hand."""
    return max(MIN_PLAYER_ADJUSTMENT, 1 - num_players * PER_PLAYER_PENALTY)


def calculate_pot_odds(current_bet: float, pot_size: float) -> float:
    """Fraction of the final pot the call costs; 0 when nothing is at stake."""
    total = pot_size + current_bet
    if total <= 0:
        return 0.0
    return current_bet / total


def stack_to_pot_ratio(stack_size: float, pot_size: float) -> float:
    return stack_size / (pot_size or 1)


@dataclass(frozen=True)
class PostflopFeatures:
    """Everything the post-flop rules look at."""

    evaluation: HandEvaluation
    position_multiplier: float
    player_adjustment: float
    final_strength: float
    pot_odds: float
    spr: float
    state: GameState


def compute_features(
    cards: Sequence[Card],
    state: GameState,
    weights: PositionWeights = DEFAULT_POSITION_WEIGHTS,
) -> PostflopFeatures:
    """Classify the cards and derive the adjusted strength and ratios."""
    evaluation = HandEvaluator.evaluate(cards)
    multiplier = weights.weight_for(state.position)
    adjustment = player_adjustment(state.num_players)
    return PostflopFeatures(
        evaluation=evaluation,
        position_multiplier=multiplier,
        player_adjustment=adjustment,
        final_strength=evaluation.strength * multiplier * adjustment,
        pot_odds=calculate_pot_odds(state.current_bet, state.pot_size),
        spr=stack_to_pot_ratio(state.stack_size, state.pot_size),
        state=state,
    )


POSTFLOP_RULES: tuple[Rule[PostflopFeatures], ...] = (
    Rule(
        "monster",
        "Very strong hand: bet three quarters of the pot",
        lambda f: f.final_strength > 0.8,
        lambda f: raise_to(min(f.state.pot_size * 0.75, f.state.stack_size)),
    ),
    Rule(
        "strong_in_position",
        "Strong hand in late position with a deep stack: bet half the pot",
        lambda f: f.final_strength > 0.6 and f.spr > 3 and f.state.is_late,
        lambda f: raise_to(f.state.pot_size * 0.5),
    ),
    Rule(
        "strong_priced_in",
        "Strong hand and the pot odds justify a call",
        lambda f: f.final_strength > 0.6 and f.pot_odds < f.final_strength,
        lambda f: call(f.state.current_bet),
    ),
    Rule(
        "marginal_priced_in",
        "Marginal hand getting a good price: call",
        lambda f: f.final_strength > 0.4 and f.pot_odds < f.final_strength / 2,
        lambda f: call(f.state.current_bet),
    ),
)


class PostflopEngine:
    """Post-flop decisions from the ordered POSTFLOP_RULES."""

    def __init__(
        self,
        weights: PositionWeights = DEFAULT_POSITION_WEIGHTS,
        rules: Sequence[Rule[PostflopFeatures]] = POSTFLOP_RULES,
    ) -> None:
        self._weights = weights
        self._rules = tuple(rules)

    def decide(
        self,
        hole_cards: Sequence[Card],
        community_cards: Sequence[Card],
        state: GameState,
    ) -> Decision:
        features = compute_features([*hole_cards, *community_cards], state, self._weights)
        logger.debug(
            "%s strength=%.2f x pos=%.2f x players=%.2f -> %.3f, pot_odds=%.3f, spr=%.2f",
            features.evaluation.category.label,
            features.evaluation.strength,
            features.position_multiplier,
            features.player_adjustment,
            features.final_strength,
            features.pot_odds,
            features.spr,
        )

        matched = first_match(self._rules, features)
        if matched is None:
            decision = fold("Hand too weak for the price")
        else:
            rule, decision = matched
            logger.debug("Postflop rule %s matched", rule.name)

        return Decision(
            action=decision.action,
            amount=decision.amount,
            reasoning=f"{features.evaluation.category.label}: {decision.reasoning}",
            strength=features.final_strength,
            pot_odds=features.pot_odds,
        )
