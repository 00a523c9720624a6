"""Card type and card-token parsing."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from functools import total_ordering

from poker_helper.core.exceptions import ParseError
from poker_helper.utils.constants import (
    RANK_ALIASES,
    RANK_VALUES,
    SUIT_ALIASES,
    Rank,
    Suit,
)


@total_ordering
@dataclass(frozen=True)
class Card:
    """Represents a single playing card."""

    rank: Rank
    suit: Suit

    @classmethod
    def from_str(cls, s: str) -> Card:
        """Create a Card from a token like 'A♠', '10♥' or 'Td'.

        Args:
            s: Rank characters followed by a single suit character.

        Returns:
            A new Card instance.

        Raises:
            ParseError: If the token is empty or contains an unknown
                        rank or suit.
        """
        card = parse_card(s)
        if card is None:
            raise ParseError("Card token must not be empty")
        return card

    @property
    def value(self) -> int:
        """Numeric value of the card's rank (2-14)."""
        return RANK_VALUES[self.rank]

    def __str__(self) -> str:
        return f"{self.rank.value}{self.suit.value}"

    def __repr__(self) -> str:
        return f"Card('{self}')"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.value < other.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank == other.rank and self.suit == other.suit

    def __hash__(self) -> int:
        return hash((self.rank, self.suit))


def _parse_rank(text: str, token: str) -> Rank:
    text = text.upper()
    if text in RANK_ALIASES:
        return RANK_ALIASES[text]
    try:
        return Rank(text)
    except ValueError:
        raise ParseError(f"Invalid rank '{text}' in card '{token}'") from None


def _parse_suit(char: str, token: str) -> Suit:
    alias = SUIT_ALIASES.get(char.lower())
    if alias is not None:
        return alias
    try:
        return Suit(char)
    except ValueError:
        raise ParseError(f"Invalid suit '{char}' in card '{token}'") from None


def parse_card(token: str | None) -> Card | None:
    """Parse a card token, returning None for an empty or missing token.

    The last character is the suit, everything before it is the rank.
    Suits may be given as symbols (♠♥♦♣) or letters (s h d c); the ten
    may be written '10' or 'T'.

    Raises:
        ParseError: If the rank or suit is not recognised.
    """
    if token is None:
        return None
    token = token.strip()
    if not token:
        return None
    if len(token) < 2:
        raise ParseError(f"Card token too short: '{token}'")
    rank = _parse_rank(token[:-1], token)
    suit = _parse_suit(token[-1], token)
    return Card(rank=rank, suit=suit)


def parse_cards(tokens: Iterable[str | None]) -> list[Card]:
    """Parse several tokens, dropping the empty ones and keeping order."""
    cards = []
    for token in tokens:
        card = parse_card(token)
        if card is not None:
            cards.append(card)
    return cards


# One card: rank (10, T or a single rank char) followed by one suit char
_CARD_PATTERN = re.compile(r"(10|[2-9TJQKAtjqka])([♠♥♦♣shdcSHDC])")


def parse_card_string(s: str) -> list[Card]:
    """Parse free text like 'A♠ K♥', 'AsKh' or '10h,Jh' into cards.

    Separators (spaces, commas) are optional.

    Raises:
        ParseError: If any part of the text is not a card.
    """
    text = re.sub(r"[\s,]+", "", s)
    if not text:
        return []
    cards = []
    pos = 0
    while pos < len(text):
        match = _CARD_PATTERN.match(text, pos)
        if match is None:
            raise ParseError(f"Invalid card string: '{s}' (at '{text[pos:]}')")
        cards.append(parse_card(match.group(0)))
        pos = match.end()
    return cards


def all_card_tokens() -> list[str]:
    """The 52 canonical tokens, aces first, e.g. 'A♠', '10♥'."""
    return [f"{rank.value}{suit.value}" for rank in reversed(Rank) for suit in Suit]
