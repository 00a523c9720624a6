"""Poker decision helper.

Recommends fold, call, or raise from the hero's hole cards, the board,
and the table state, using a pre-flop rule tree and a post-flop
hand-strength heuristic.

Key public API:
    get_decision    -- Recommend an action for one spot
    DecisionMaker   -- Engine with injectable position weights
    parse_card      -- Parse a token like 'A♠' or 'Td' (None when empty)
    HandEvaluator   -- Hand category classifier for 2-7 cards
"""

from poker_helper.core.config import PositionWeights, load_position_weights
from poker_helper.core.exceptions import (
    ConfigError,
    InvalidGameStateError,
    InvalidHandError,
    ParseError,
    PokerHelperError,
)
from poker_helper.core.hand_evaluator import HandEvaluation, HandEvaluator
from poker_helper.strategy.decision_maker import (
    ActionType,
    Decision,
    DecisionMaker,
    get_decision,
)
from poker_helper.utils.card import Card, parse_card, parse_cards
from poker_helper.utils.constants import HandCategory, Position

__all__ = [
    "ActionType",
    "Card",
    "ConfigError",
    "Decision",
    "DecisionMaker",
    "HandCategory",
    "HandEvaluation",
    "HandEvaluator",
    "InvalidGameStateError",
    "InvalidHandError",
    "ParseError",
    "PokerHelperError",
    "Position",
    "PositionWeights",
    "get_decision",
    "load_position_weights",
    "parse_card",
    "parse_cards",
]
