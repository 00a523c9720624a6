"""Per-request table state supplied alongside the cards."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from poker_helper.core.exceptions import InvalidGameStateError
from poker_helper.utils.constants import MAX_PLAYERS, MIN_PLAYERS, Position

logger = logging.getLogger("poker_helper.core")


def coerce_position(position: Position | str) -> Position | str:
    """Match a position case-insensitively against the Position enum.

    Unknown names are returned unchanged: the preflop rules then treat
    the seat as neither early nor late, and the postflop heuristic uses
    the default position weight.
    """
    if isinstance(position, Position):
        return position
    try:
        return Position(str(position).strip().lower())
    except ValueError:
        logger.warning("Unrecognised position %r, using default weighting", position)
        return position


@dataclass(frozen=True)
class GameState:
    """Table state for one decision request.

    Amounts are in whatever chip unit the caller uses; they are never
    converted.
    """

    position: Position | str
    num_players: int
    pot_size: float
    current_bet: float
    stack_size: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", coerce_position(self.position))
        if not MIN_PLAYERS <= self.num_players <= MAX_PLAYERS:
            raise InvalidGameStateError(
                f"Number of players must be between {MIN_PLAYERS} and "
                f"{MAX_PLAYERS}, got {self.num_players}"
            )
        for name in ("pot_size", "current_bet", "stack_size"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise InvalidGameStateError(f"{name} must be a finite number, got {value}")
            if value < 0:
                raise InvalidGameStateError(f"{name} must be non-negative, got {value}")

    @property
    def is_early(self) -> bool:
        return self.position == Position.EARLY

    @property
    def is_late(self) -> bool:
        return self.position == Position.LATE
