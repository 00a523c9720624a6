"""Decision value returned by the engine, and the ordered-rule machinery."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Generic, TypeVar


class ActionType(StrEnum):
    """The action types the decision engine can recommend."""

    FOLD = "FOLD"
    CALL = "CALL"
    RAISE = "RAISE"

    @property
    def label(self) -> str:
        return self.value.title()


@dataclass(frozen=True)
class Decision:
    """The engine's recommended action."""

    action: ActionType
    amount: float  # 0 for fold, current bet for call, raise target for raise
    reasoning: str = ""
    strength: float = 0.0  # Position/player adjusted strength (postflop only)
    pot_odds: float = 0.0  # Required equity to call (postflop only)

    def describe(self) -> str:
        """Short display text, e.g. 'Raise $40' or 'Fold'."""
        if self.action == ActionType.FOLD or self.amount <= 0:
            return self.action.label
        return f"{self.action.label} ${self.amount:g}"


def fold(reasoning: str = "") -> Decision:
    return Decision(action=ActionType.FOLD, amount=0, reasoning=reasoning)


def call(current_bet: float, reasoning: str = "") -> Decision:
    return Decision(action=ActionType.CALL, amount=current_bet, reasoning=reasoning)


def raise_to(amount: float, reasoning: str = "") -> Decision:
    """Raise decision with the target floored to a whole chip."""
    return Decision(action=ActionType.RAISE, amount=math.floor(amount), reasoning=reasoning)


# ---------------------------------------------------------------------------
# Ordered rules
# ---------------------------------------------------------------------------

S = TypeVar("S")


@dataclass(frozen=True)
class Rule(Generic[S]):
    """One entry of an ordered rule tree.

    When predicate(situation) is true, produce(situation) gives the
    decision and no later rule is consulted. The description becomes
    the decision's reasoning text.
    """

    name: str
    description: str
    predicate: Callable[[S], bool]
    produce: Callable[[S], Decision]


def first_match(rules: Sequence[Rule[S]], situation: S) -> tuple[Rule[S], Decision] | None:
    """Evaluate rules in order and return the first one that fires.

    The returned decision carries the rule's description as reasoning.
    """
    for rule in rules:
        if rule.predicate(situation):
            decision = replace(rule.produce(situation), reasoning=rule.description)
            return rule, decision
    return None
