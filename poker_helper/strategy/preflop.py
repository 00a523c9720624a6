"""Pre-flop rule tree.

Hands are matched against an ordered list of shape rules (pairs,
premium holdings, aces, suited connectors, broadway, late-position
speculation). The first rule whose predicate holds decides; a hand that
matches nothing is folded. Order matters: a weak ace in middle or blind
position matches no ace rule and falls through to the later rules.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

from poker_helper.core.game_state import GameState
from poker_helper.strategy.decision import Decision, Rule, call, first_match, fold, raise_to
from poker_helper.utils.card import Card

logger = logging.getLogger("poker_helper.strategy.preflop")


@dataclass(frozen=True)
class PreflopSituation:
    """Hole-card shape plus the table state, as seen by the rules."""

    high: int
    low: int
    suited: bool
    state: GameState

    @classmethod
    def from_cards(cls, hole_cards: Sequence[Card], state: GameState) -> PreflopSituation:
        first, second = hole_cards
        return cls(
            high=max(first.value, second.value),
            low=min(first.value, second.value),
            suited=first.suit == second.suit,
            state=state,
        )

    @property
    def is_pair(self) -> bool:
        return self.high == self.low

    @property
    def is_connected(self) -> bool:
        return self.high - self.low == 1

    @property
    def has_ace(self) -> bool:
        return self.high == 14


def _set_mining_odds(state: GameState) -> float:
    """Price of the call relative to a tenth of the stack."""
    implied = state.stack_size * 0.1
    if implied <= 0:
        return math.inf
    return state.current_bet / implied


def _medium_pair(s: PreflopSituation) -> Decision:
    if s.state.is_early:
        return call(s.state.current_bet)
    return raise_to(s.state.pot_size * 2.5)


def _small_pair(s: PreflopSituation) -> Decision:
    if s.state.is_late and s.state.num_players <= 4:
        return call(s.state.current_bet)
    if _set_mining_odds(s.state) <= 0.15:
        return call(s.state.current_bet)
    return fold()


def _strong_ace(s: PreflopSituation) -> Decision:
    if s.state.is_early:
        return call(s.state.current_bet)
    return raise_to(s.state.pot_size * 2)


def _late_call_else_fold(s: PreflopSituation) -> Decision:
    if s.state.is_late:
        return call(s.state.current_bet)
    return fold()


PREFLOP_RULES: tuple[Rule[PreflopSituation], ...] = (
    Rule(
        "premium_pair",
        "Premium pair (QQ+): raise 4x the pot",
        lambda s: s.is_pair and s.high >= 12,
        lambda s: raise_to(s.state.pot_size * 4),
    ),
    Rule(
        "medium_pair",
        "Medium pair (88-JJ): call from early position, otherwise raise",
        lambda s: s.is_pair and 8 <= s.high <= 11,
        _medium_pair,
    ),
    Rule(
        "small_pair",
        "Small pair (22-77): set mining only at the right price",
        lambda s: s.is_pair and s.high < 8,
        _small_pair,
    ),
    Rule(
        "premium_unpaired",
        "Premium unpaired hand (AK, AQ, KQ, AJs): raise 3x the pot",
        lambda s: (s.low >= 12 and s.high >= 13) or (s.has_ace and s.low >= 11 and s.suited),
        lambda s: raise_to(s.state.pot_size * 3),
    ),
    Rule(
        "strong_ace",
        "Ace with a ten-or-better kicker or suited: call early, raise later",
        lambda s: s.has_ace and (s.low >= 10 or s.suited),
        _strong_ace,
    ),
    Rule(
        "late_weak_ace",
        "Weak ace in late position: call",
        lambda s: s.has_ace and s.state.is_late,
        lambda s: call(s.state.current_bet),
    ),
    Rule(
        "suited_connector",
        "Suited connector: playable only in late position",
        lambda s: s.is_connected and s.suited and s.low >= 4,
        _late_call_else_fold,
    ),
    Rule(
        "broadway",
        "Broadway cards: playable only in late position",
        lambda s: s.low >= 11,
        _late_call_else_fold,
    ),
    Rule(
        "late_suited_speculative",
        "Suited high cards in late position: speculative call",
        lambda s: s.state.is_late and s.suited and s.low >= 9,
        lambda s: call(s.state.current_bet),
    ),
)


class PreflopEngine:
    """Pre-flop decisions from the ordered PREFLOP_RULES."""

    def __init__(self, rules: Sequence[Rule[PreflopSituation]] = PREFLOP_RULES) -> None:
        self._rules = tuple(rules)

    def decide(self, hole_cards: Sequence[Card], state: GameState) -> Decision:
        situation = PreflopSituation.from_cards(hole_cards, state)
        matched = first_match(self._rules, situation)
        if matched is None:
            logger.debug("No preflop rule for %s, folding", _describe(hole_cards))
            return fold("Hand is not strong enough to play from this position")
        rule, decision = matched
        logger.debug("Preflop rule %s matched %s", rule.name, _describe(hole_cards))
        return decision


def _describe(cards: Sequence[Card]) -> str:
    return " ".join(str(c) for c in cards)
