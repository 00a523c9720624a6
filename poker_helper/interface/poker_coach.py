"""Command-line poker decision helper.

Interactive by default; pass --hand to get a single recommendation
without prompts.

Usage:
    python -m poker_helper.interface.poker_coach
    python -m poker_helper.interface.poker_coach --hand "A♠ K♥" --position late --pot 30

Example session:
    ==================================================
      POKER DECISION HELPER
    ==================================================
      Your hand (e.g. A♠K♥ or AsKh): AsKh
      Community cards (blank for preflop):
      Position (early/middle/late/blind) [early]: late
      Number of players (2-9) [6]:
      Pot size [0]: 30
      Current bet [0]: 10
      Your stack [1000]:

    ==================================================
      RECOMMENDATION: Raise $90
    ==================================================
      Hand:       A♠ K♥
      Position:   late
      Players:    6
      Pot:        30   Bet: 10   Stack: 1000

      -- Why this play? --
      Premium unpaired hand (AK, AQ, KQ, AJs): raise 3x the pot
    ==================================================
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
from pathlib import Path

from poker_helper.core.config import load_position_weights
from poker_helper.core.exceptions import PokerHelperError
from poker_helper.core.hand_evaluator import HandEvaluator
from poker_helper.strategy.decision_maker import Decision, DecisionMaker
from poker_helper.utils.card import Card, parse_card_string
from poker_helper.utils.constants import MAX_PLAYERS, MIN_PLAYERS, Position

# Interactive defaults
DEFAULT_POSITION = Position.EARLY
DEFAULT_PLAYERS = 6
DEFAULT_POT = 0.0
DEFAULT_BET = 0.0
DEFAULT_STACK = 1000.0


# ---------------------------------------------------------------------------
# Prompt helpers
# ---------------------------------------------------------------------------


def _prompt(msg: str, default: str = "") -> str:
    """Print a prompt and read user input."""
    suffix = f" [{default}]" if default else ""
    try:
        val = input(f"  {msg}{suffix}: ").strip()
    except (EOFError, KeyboardInterrupt):
        print()
        return default
    return val if val else default


def _prompt_float(msg: str, default: float = 0.0) -> float:
    """Prompt for a non-negative number."""
    val = _prompt(msg, f"{default:g}")
    try:
        number = float(val)
    except ValueError:
        print(f"    Invalid number, using {default:g}")
        return default
    if not math.isfinite(number):
        print(f"    Must be a finite number, using {default:g}")
        return default
    if number < 0:
        print(f"    Must not be negative, using {default:g}")
        return default
    return number


def _prompt_int(msg: str, default: int, low: int, high: int) -> int:
    """Prompt for an integer within [low, high]."""
    val = _prompt(msg, str(default))
    try:
        number = int(val)
    except ValueError:
        print(f"    Invalid number, using {default}")
        return default
    if not low <= number <= high:
        print(f"    Must be between {low} and {high}, using {default}")
        return default
    return number


# ---------------------------------------------------------------------------
# Output formatting
# ---------------------------------------------------------------------------


_DIVIDER = "=" * 50


def format_recommendation(
    decision: Decision,
    hole_cards: list[Card],
    community_cards: list[Card],
    position: Position | str,
    num_players: int,
    pot_size: float,
    current_bet: float,
    stack_size: float,
) -> str:
    """Render a decision as the boxed recommendation text."""
    lines = [
        "",
        _DIVIDER,
        f"  RECOMMENDATION: {decision.describe()}",
        _DIVIDER,
        f"  Hand:       {' '.join(str(c) for c in hole_cards)}",
    ]
    if community_cards:
        lines.append(f"  Board:      {' '.join(str(c) for c in community_cards)}")
    lines += [
        f"  Position:   {position}",
        f"  Players:    {num_players}",
        f"  Pot:        {pot_size:g}   Bet: {current_bet:g}   Stack: {stack_size:g}",
    ]

    if community_cards:
        evaluation = HandEvaluator.evaluate([*hole_cards, *community_cards])
        lines += [
            "",
            "  -- Analysis --",
            f"  Made hand:  {evaluation.category.label} (strength: {evaluation.strength:.2f})",
            f"  Adjusted:   {decision.strength:.2f}",
            f"  Pot odds:   {decision.pot_odds:.1%}",
        ]

    lines += [
        "",
        "  -- Why this play? --",
        f"  {decision.reasoning}",
        _DIVIDER,
        "",
    ]
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Modes
# ---------------------------------------------------------------------------


def _interactive(maker: DecisionMaker) -> None:
    """Prompt for one spot after another until the user quits."""
    print()
    print(_DIVIDER)
    print("  POKER DECISION HELPER")
    print(_DIVIDER)

    while True:
        print()
        hand_str = _prompt("Your hand (e.g. A♠K♥ or AsKh, blank to quit)")
        if not hand_str:
            print("  Good luck at the tables!")
            return
        try:
            hole_cards = parse_card_string(hand_str)
            if len(hole_cards) != 2:
                print("    Please select both hole cards")
                continue
            community_cards = parse_card_string(_prompt("Community cards (blank for preflop)"))
        except PokerHelperError as e:
            print(f"    {e}")
            continue

        position = _prompt("Position (early/middle/late/blind)", DEFAULT_POSITION.value)
        num_players = _prompt_int(
            f"Number of players ({MIN_PLAYERS}-{MAX_PLAYERS})",
            DEFAULT_PLAYERS, MIN_PLAYERS, MAX_PLAYERS,
        )
        pot_size = _prompt_float("Pot size", DEFAULT_POT)
        current_bet = _prompt_float("Current bet", DEFAULT_BET)
        stack_size = _prompt_float("Your stack", DEFAULT_STACK)

        try:
            decision = maker.get_decision(
                hole_cards, community_cards, position,
                num_players, pot_size, current_bet, stack_size,
            )
        except PokerHelperError as e:
            print(f"    {e}")
            continue

        print(format_recommendation(
            decision, hole_cards, community_cards, _display_position(position),
            num_players, pot_size, current_bet, stack_size,
        ))


def _one_shot(maker: DecisionMaker, args: argparse.Namespace) -> int:
    """Print a single recommendation from command-line flags."""
    try:
        hole_cards = parse_card_string(args.hand)
        community_cards = parse_card_string(args.board)
        if len(hole_cards) != 2:
            print("Please select both hole cards", file=sys.stderr)
            return 2
        decision = maker.get_decision(
            hole_cards, community_cards, args.position,
            args.players, args.pot, args.bet, args.stack,
        )
    except PokerHelperError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print(format_recommendation(
        decision, hole_cards, community_cards, _display_position(args.position),
        args.players, args.pot, args.bet, args.stack,
    ))
    return 0


def _display_position(raw: str) -> Position | str:
    """Display form of a position flag."""
    try:
        return Position(raw.strip().lower())
    except ValueError:
        return raw


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Recommend fold, call, or raise for a Texas Hold'em spot.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--hand", help="Hole cards, e.g. 'A♠ K♥' or 'AsKh' (omit for prompts)")
    parser.add_argument("--board", default="", help="Community cards, 0 to 5")
    parser.add_argument(
        "--position", default=DEFAULT_POSITION.value,
        help="early, middle, late, or blind (default: early)",
    )
    parser.add_argument("--players", type=int, default=DEFAULT_PLAYERS, help="Players at the table (2-9)")
    parser.add_argument("--pot", type=float, default=DEFAULT_POT, help="Pot size")
    parser.add_argument("--bet", type=float, default=DEFAULT_BET, help="Current bet to face")
    parser.add_argument("--stack", type=float, default=DEFAULT_STACK, help="Your stack")
    parser.add_argument(
        "--weights", type=Path, default=None,
        help="JSON file of position weights (default: ~/.poker_helper/weights.json)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log engine details")
    return parser


def run(argv: list[str] | None = None) -> int:
    """Main entry point for the command-line helper."""
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    try:
        weights = load_position_weights(args.weights)
    except PokerHelperError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    maker = DecisionMaker(weights=weights)

    if args.hand:
        return _one_shot(maker, args)
    _interactive(maker)
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
