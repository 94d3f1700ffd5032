#!/usr/bin/env python3
"""Evaluate a Hold'em hand and print a heuristic win probability.

Cards are rank + suit tokens: ranks 2-9 T J Q K A, suits s h d c.

Usage:
    # Pre-flop strength of the hole cards
    python scripts/evaluate_hand.py As Kd

    # Best hand and equity against three opponents on the turn
    python scripts/evaluate_hand.py As Kd --board Qs Js 2h 7c --opponents 3

    # Machine-readable output with custom tuning
    python scripts/evaluate_hand.py As Kd --board Qs Js Ts --json \\
        --config ~/.holdem_eval/equity_config.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

# Add project root to path so we can import holdem_eval
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from holdem_eval.core.equity_calculator import (
    EquityCalculator,
    load_equity_config,
)
from holdem_eval.core.hand_evaluator import HandEvaluator
from holdem_eval.utils.card import Card, parse_token, parse_tokens


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Rank a Hold'em hand and estimate its win probability.",
    )
    parser.add_argument("hole", nargs=2, metavar="CARD", help="hole cards, e.g. As Kd")
    parser.add_argument(
        "--board", nargs="*", default=[], metavar="CARD",
        help="0, 3, 4 or 5 community cards",
    )
    parser.add_argument(
        "--opponents", type=int, default=1,
        help="opponents still in the hand (default: 1)",
    )
    parser.add_argument("--config", type=Path, help="equity config JSON file")
    parser.add_argument("--json", action="store_true", help="print JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    bad = [t for t in [*args.hole, *args.board] if parse_token(t) is None]
    if bad:
        print(f"Invalid card(s): {', '.join(bad)}", file=sys.stderr)
        return 2
    seen: set[Card] = set()
    dupes = []
    for card in parse_tokens([*args.hole, *args.board]):
        if card in seen:
            dupes.append(str(card))
        seen.add(card)
    if dupes:
        print(f"Duplicate card(s): {', '.join(dupes)}", file=sys.stderr)
        return 2
    if args.opponents < 0:
        print("--opponents must be >= 0", file=sys.stderr)
        return 2

    config = None
    if args.config:
        config_path = args.config.expanduser()
        if not config_path.exists():
            print(
                f"Config file {config_path} not found, using defaults",
                file=sys.stderr,
            )
        config = load_equity_config(config_path)
    calc = EquityCalculator(config)

    best = HandEvaluator.select_best(args.hole + args.board)
    equity = calc.win_probability(args.hole, args.board, args.opponents)

    if args.json:
        print(json.dumps({
            "hand": best.name if best else None,
            "category": int(best.category) if best else None,
            "tiebreaker": list(best.tiebreaker) if best else None,
            "equity": round(equity, 4),
        }))
    else:
        if best is not None:
            print(f"Best hand: {best.name}")
        print(f"Win probability (approx.): {equity:.1%}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
