"""Hand category classification for 2 to 7 cards.

The evaluator only names the best category present and attaches a fixed
heuristic strength to it. It does not compare kickers and is not meant
for deciding showdowns between two players.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

from poker_helper.core.exceptions import InvalidHandError
from poker_helper.utils.card import Card
from poker_helper.utils.constants import HandCategory

CATEGORY_STRENGTH: dict[HandCategory, float] = {
    HandCategory.ROYAL_FLUSH: 1.00,
    HandCategory.STRAIGHT_FLUSH: 0.95,
    HandCategory.FOUR_OF_A_KIND: 0.90,
    HandCategory.FULL_HOUSE: 0.85,
    HandCategory.FLUSH: 0.80,
    HandCategory.STRAIGHT: 0.75,
    HandCategory.THREE_OF_A_KIND: 0.70,
    HandCategory.TWO_PAIR: 0.60,
    HandCategory.PAIR: 0.50,
    HandCategory.HIGH_CARD: 0.30,
}

MIN_CARDS = 2
MAX_CARDS = 7


@dataclass(frozen=True)
class HandEvaluation:
    """Result of classifying a set of cards."""

    category: HandCategory
    strength: float


class HandEvaluator:
    """Classifies hole + community cards into a HandCategory."""

    @staticmethod
    def evaluate(cards: Sequence[Card]) -> HandEvaluation:
        """Classify the best hand category available in the cards.

        Args:
            cards: 2 to 7 cards (hole cards + community cards).

        Returns:
            HandEvaluation with the category and its fixed strength.

        Raises:
            InvalidHandError: If fewer than 2 or more than 7 cards are given.
        """
        if not MIN_CARDS <= len(cards) <= MAX_CARDS:
            raise InvalidHandError(
                f"Need {MIN_CARDS} to {MAX_CARDS} cards, got {len(cards)}"
            )
        category = HandEvaluator._classify(cards)
        return HandEvaluation(category=category, strength=CATEGORY_STRENGTH[category])

    @staticmethod
    def _classify(cards: Sequence[Card]) -> HandCategory:
        value_counts = Counter(c.value for c in cards)
        counts = sorted(value_counts.values(), reverse=True)
        # Pad so counts[1] is always defined
        counts.append(0)

        is_flush = HandEvaluator._is_flush(cards)
        is_straight = HandEvaluator._is_straight(cards)

        if is_flush and is_straight:
            if 14 in value_counts:
                return HandCategory.ROYAL_FLUSH
            return HandCategory.STRAIGHT_FLUSH
        if counts[0] == 4:
            return HandCategory.FOUR_OF_A_KIND
        if counts[0] == 3 and counts[1] == 2:
            return HandCategory.FULL_HOUSE
        if is_flush:
            return HandCategory.FLUSH
        if is_straight:
            return HandCategory.STRAIGHT
        if counts[0] == 3:
            return HandCategory.THREE_OF_A_KIND
        if counts[0] == 2 and counts[1] == 2:
            return HandCategory.TWO_PAIR
        if counts[0] == 2:
            return HandCategory.PAIR
        return HandCategory.HIGH_CARD

    @staticmethod
    def _is_flush(cards: Sequence[Card]) -> bool:
        """Check if at least 5 cards share a suit."""
        suit_counts = Counter(c.suit for c in cards)
        return any(count >= 5 for count in suit_counts.values())

    @staticmethod
    def _is_straight(cards: Sequence[Card]) -> bool:
        """Check for 5 consecutive distinct values.

        The ace only plays high: A-2-3-4-5 is not a straight here.
        """
        values = sorted({c.value for c in cards})
        for i in range(len(values) - 4):
            if values[i + 4] - values[i] == 4:
                return True
        return False
