"""Position weighting configuration.

The postflop heuristic scales hand strength by a per-position weight.
The weights live in an immutable PositionWeights object that is passed
to the decision engine, so tests and users can supply their own table.
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import asdict, dataclass
from pathlib import Path

from poker_helper.core.exceptions import ConfigError
from poker_helper.utils.constants import Position

logger = logging.getLogger("poker_helper.config")

DEFAULT_CONFIG_PATH = Path.home() / ".poker_helper" / "weights.json"


@dataclass(frozen=True)
class PositionWeights:
    """Multipliers applied to postflop hand strength by table position."""

    early: float = 0.70
    middle: float = 0.85
    late: float = 1.00
    blind: float = 0.60
    default: float = 0.80  # Used for positions outside the Position enum

    def weight_for(self, position: Position | str) -> float:
        """Return the weight for a position, or the default weight."""
        try:
            key = Position(position)
        except ValueError:
            return self.default
        return getattr(self, key.value)

    def as_dict(self) -> dict[str, float]:
        return asdict(self)


DEFAULT_POSITION_WEIGHTS = PositionWeights()


def load_position_weights(config_path: Path | None = None) -> PositionWeights:
    """Load position weights from a JSON file.

    Default path: ~/.poker_helper/weights.json

    Missing keys keep their default value. A missing or unreadable file
    yields the defaults.

    Expected JSON format:
        {
            "early": 0.7,
            "middle": 0.85,
            "late": 1.0,
            "blind": 0.6,
            "default": 0.8
        }

    Raises:
        ConfigError: If a weight is not a non-negative number or an
                     unknown key is present.
    """
    path = config_path or DEFAULT_CONFIG_PATH
    if not path.exists():
        logger.debug("No weights file at %s, using defaults", path)
        return DEFAULT_POSITION_WEIGHTS

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Failed to read weights config at %s: %s", path, e)
        return DEFAULT_POSITION_WEIGHTS

    if not isinstance(data, dict):
        raise ConfigError(f"Weights config at {path} must be a JSON object")

    known = DEFAULT_POSITION_WEIGHTS.as_dict()
    weights: dict[str, float] = {}
    for key, value in data.items():
        if key not in known:
            raise ConfigError(f"Unknown weight key '{key}' in {path}")
        if (isinstance(value, bool) or not isinstance(value, (int, float))
                or not math.isfinite(value) or value < 0):
            raise ConfigError(
                f"Weight '{key}' must be a finite non-negative number, got {value!r}"
            )
        weights[key] = float(value)

    logger.info("Loaded position weights from %s", path)
    return PositionWeights(**{**known, **weights})
