"""Heuristic equity estimates for Texas Hold'em.

Two calibration heuristics, not simulations:

  - pre-flop: a Chen-style score of the two hole cards, normalized to [0, 1];
  - post-flop: a fixed equity per made-hand category of the best hand.

Both are discounted for every opponent beyond the first. The numbers are
approximate and should not be read as true win probabilities.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from dataclasses import dataclass, fields
from pathlib import Path

import numpy as np

from holdem_eval.core.hand_evaluator import HandEvaluator
from holdem_eval.utils.card import parse_tokens
from holdem_eval.utils.constants import HandCategory, Rank

logger = logging.getLogger("holdem_eval.equity")

# Neutral answer when there isn't enough information to estimate anything.
NEUTRAL_EQUITY = 0.5


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class EquityConfig:
    """Tuning constants for the equity heuristics."""

    # Equity by HandCategory value, HIGH_CARD first.
    category_equity: tuple[float, ...] = (
        0.10, 0.38, 0.55, 0.68, 0.72, 0.77, 0.86, 0.93, 0.97,
    )
    opponent_discount: float = 0.88  # Multiplier per extra opponent
    min_equity: float = 0.01
    preflop_floor: float = 0.05
    preflop_ceiling: float = 0.98

    def __post_init__(self) -> None:
        object.__setattr__(self, "category_equity", tuple(self.category_equity))
        if len(self.category_equity) != len(HandCategory):
            raise ValueError(
                f"category_equity needs {len(HandCategory)} entries, "
                f"got {len(self.category_equity)}"
            )
        if any(not 0.0 <= e <= 1.0 for e in self.category_equity):
            raise ValueError("category_equity entries must be in [0, 1]")
        if not 0.0 < self.opponent_discount <= 1.0:
            raise ValueError(
                f"opponent_discount must be in (0, 1], got {self.opponent_discount}"
            )
        if not 0.0 <= self.preflop_floor <= self.preflop_ceiling <= 1.0:
            raise ValueError(
                "Need 0 <= preflop_floor <= preflop_ceiling <= 1, got "
                f"{self.preflop_floor}, {self.preflop_ceiling}"
            )
        if not 0.0 <= self.min_equity <= 1.0:
            raise ValueError(f"min_equity must be in [0, 1], got {self.min_equity}")


DEFAULT_EQUITY_CONFIG = EquityConfig()


def load_equity_config(config_path: Path | None = None) -> EquityConfig | None:
    """Load equity tuning from a JSON file.

    Default path: ~/.holdem_eval/equity_config.json

    Returns None if the file does not exist or is invalid, so the caller
    can fall back to DEFAULT_EQUITY_CONFIG. Keys left out of the file keep
    their default values.

    Expected JSON format:
        {
            "category_equity": [0.10, 0.38, 0.55, 0.68, 0.72,
                                0.77, 0.86, 0.93, 0.97],
            "opponent_discount": 0.88,
            "min_equity": 0.01
        }
    """
    path = config_path or Path.home() / ".holdem_eval" / "equity_config.json"
    if not path.exists():
        return None

    try:
        with open(path) as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Failed to read equity config at %s: %s", path, e)
        return None

    if not isinstance(data, dict):
        logger.warning("Equity config at %s is not a JSON object", path)
        return None

    known = {f.name for f in fields(EquityConfig)}
    for key in data.keys() - known:
        logger.warning("Ignoring unknown equity config key: %s", key)

    try:
        return EquityConfig(**{k: v for k, v in data.items() if k in known})
    except (TypeError, ValueError) as e:
        logger.warning("Invalid equity config at %s: %s", path, e)
        return None


# ---------------------------------------------------------------------------
# Calculator
# ---------------------------------------------------------------------------

# Pocket pairs scored above the 2x rank line.
_PREMIUM_PAIR_SCORES: dict[int, float] = {
    Rank.ACE: 20,
    Rank.KING: 16,
    Rank.QUEEN: 14,
    Rank.JACK: 12,
}
_MIN_PAIR_SCORE = 5
_SCORE_SCALE = 20


class EquityCalculator:
    """Heuristic win-probability estimates.

    Usage:
        calc = EquityCalculator()
        calc.win_probability(["Ah", "Kh"], ["Qh", "7c", "2h"], num_opponents=3)
    """

    def __init__(self, config: EquityConfig | None = None) -> None:
        self.config = config or DEFAULT_EQUITY_CONFIG

    def pre_flop_strength(self, hole_cards: Sequence[object] | None) -> float:
        """Score two hole cards before the flop.

        Args:
            hole_cards: Card tokens; the first two that parse are used.

        Returns:
            Strength in [preflop_floor, preflop_ceiling], or 0.5 when fewer
            than two cards are available.
        """
        if not hole_cards or len(hole_cards) < 2:
            return NEUTRAL_EQUITY
        parsed = parse_tokens(hole_cards)
        if len(parsed) < 2:
            return NEUTRAL_EQUITY
        c1, c2 = parsed[0], parsed[1]

        hi = max(c1.rank, c2.rank)
        lo = min(c1.rank, c2.rank)
        score = self._chen_score(hi, lo, c1.suit == c2.suit)
        return self._normalize(score)

    def win_probability(
        self,
        hole_cards: Sequence[object] | None,
        board_cards: Sequence[object] | None = (),
        num_opponents: int | None = 1,
    ) -> float:
        """Estimate the chance that the hole cards win at showdown.

        Pre-flop (empty board) this is pre_flop_strength(); afterwards it is
        the configured equity for the category of the best hand so far.
        Either way the result is multiplied by opponent_discount for each
        opponent beyond the first.

        Args:
            hole_cards: Hero's card tokens.
            board_cards: Community card tokens, possibly empty.
            num_opponents: Opponents still in the hand; None means 1.

        Returns:
            Equity in [min_equity, 1.0], or 0.5 with fewer than two hole cards.
        """
        hole_cards = list(hole_cards or [])
        board_cards = list(board_cards or [])
        if num_opponents is None:
            num_opponents = 1

        if len(hole_cards) < 2:
            return NEUTRAL_EQUITY

        if not board_cards:
            equity = self.pre_flop_strength(hole_cards)
        else:
            result = HandEvaluator.select_best(hole_cards + board_cards)
            if result is None:
                equity = NEUTRAL_EQUITY
            else:
                equity = self.config.category_equity[result.category]
                logger.debug("Made %s -> base equity %.2f", result.name, equity)

        discount = self.config.opponent_discount ** max(0, num_opponents - 1)
        return max(self.config.min_equity, equity * discount)

    def pre_flop_chart(self) -> np.ndarray:
        """13x13 chart of pre_flop_strength() for every starting hand.

        Rows and columns run Ace first. The diagonal holds pocket pairs,
        the upper triangle suited hands and the lower triangle offsuit ones,
        so chart[0, 1] is AKs and chart[1, 0] is AKo.
        """
        n = len(Rank)
        chart = np.empty((n, n), dtype=float)
        for i in range(n):
            for j in range(n):
                r1, r2 = n - 1 - i, n - 1 - j
                score = self._chen_score(max(r1, r2), min(r1, r2), j > i)
                chart[i, j] = self._normalize(score)
        return chart

    @staticmethod
    def _chen_score(hi: int, lo: int, suited: bool) -> float:
        """Raw pre-flop score on a 0-20 scale (can go negative for junk)."""
        if hi == lo:
            score = _PREMIUM_PAIR_SCORES.get(hi, hi * 2)
            return max(_MIN_PAIR_SCORE, score)

        gap = hi - lo
        score = hi * 0.5
        score += 2 if suited else 0
        score += 1 if gap <= 1 else 0
        score -= max(0, gap - 3)
        return score

    def _normalize(self, score: float) -> float:
        return max(
            self.config.preflop_floor,
            min(self.config.preflop_ceiling, score / _SCORE_SCALE),
        )


_DEFAULT_CALCULATOR = EquityCalculator()


def pre_flop_strength(hole_cards: Sequence[object] | None) -> float:
    """pre_flop_strength() with the default tuning."""
    return _DEFAULT_CALCULATOR.pre_flop_strength(hole_cards)


def win_probability(
    hole_cards: Sequence[object] | None,
    board_cards: Sequence[object] | None = (),
    num_opponents: int | None = 1,
) -> float:
    """win_probability() with the default tuning."""
    return _DEFAULT_CALCULATOR.win_probability(hole_cards, board_cards, num_opponents)
