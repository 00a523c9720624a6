"""Tests for PositionWeights and loading them from JSON."""

from __future__ import annotations

import json
import logging
from dataclasses import FrozenInstanceError

import pytest

from poker_helper.core.config import (
    DEFAULT_POSITION_WEIGHTS,
    PositionWeights,
    load_position_weights,
)
from poker_helper.core.exceptions import ConfigError
from poker_helper.utils.constants import Position


class TestPositionWeights:
    @pytest.mark.parametrize("position, weight", [
        (Position.EARLY, 0.70),
        (Position.MIDDLE, 0.85),
        (Position.LATE, 1.00),
        (Position.BLIND, 0.60),
    ])
    def test_default_weights(self, position: Position, weight: float) -> None:
        assert DEFAULT_POSITION_WEIGHTS.weight_for(position) == weight

    def test_plain_string_lookup(self) -> None:
        assert DEFAULT_POSITION_WEIGHTS.weight_for("middle") == 0.85

    def test_unknown_position_gets_default(self) -> None:
        assert DEFAULT_POSITION_WEIGHTS.weight_for("button") == 0.80

    def test_frozen(self) -> None:
        with pytest.raises(FrozenInstanceError):
            DEFAULT_POSITION_WEIGHTS.late = 2.0

    def test_as_dict(self) -> None:
        assert PositionWeights(early=0.5).as_dict() == {
            "early": 0.5, "middle": 0.85, "late": 1.0, "blind": 0.6, "default": 0.8,
        }


class TestLoadPositionWeights:
    def test_missing_file_gives_defaults(self, tmp_path) -> None:
        assert load_position_weights(tmp_path / "absent.json") is DEFAULT_POSITION_WEIGHTS

    def test_partial_file_overrides_given_keys(self, tmp_path) -> None:
        path = tmp_path / "weights.json"
        path.write_text(json.dumps({"early": 0.9, "default": 1}), encoding="utf-8")

        weights = load_position_weights(path)

        assert weights.early == 0.9
        assert weights.default == 1.0
        assert weights.late == 1.0
        assert weights.blind == 0.6

    def test_bad_json_logs_warning_and_gives_defaults(self, tmp_path, caplog) -> None:
        path = tmp_path / "weights.json"
        path.write_text("{not json", encoding="utf-8")

        with caplog.at_level(logging.WARNING, logger="poker_helper.config"):
            weights = load_position_weights(path)

        assert weights == DEFAULT_POSITION_WEIGHTS
        assert any("Failed to read weights config" in r.message for r in caplog.records)

    @pytest.mark.parametrize("payload", [
        {"late": -0.1},
        {"late": "high"},
        {"late": True},
        {"cutoff": 0.9},
        [0.7, 0.85],
    ])
    def test_invalid_values_raise(self, tmp_path, payload) -> None:
        path = tmp_path / "weights.json"
        path.write_text(json.dumps(payload), encoding="utf-8")

        with pytest.raises(ConfigError):
            load_position_weights(path)

    @pytest.mark.parametrize("literal", ["NaN", "Infinity"])
    def test_non_finite_weight_raises(self, tmp_path, literal) -> None:
        path = tmp_path / "weights.json"
        path.write_text(f'{{"late": {literal}}}', encoding="utf-8")

        with pytest.raises(ConfigError, match="finite"):
            load_position_weights(path)
