"""Hand ranking and heuristic equity for Texas Hold'em.

Key public API:
    HandEvaluator     -- classify, compare and select the best 5-card hand
    HandEvaluation    -- category, tiebreaker and display name of a hand
    EquityCalculator  -- pre-flop strength and win-probability heuristics
    EquityConfig      -- tuning constants for EquityCalculator
"""

from holdem_eval.core.equity_calculator import (
    DEFAULT_EQUITY_CONFIG,
    EquityCalculator,
    EquityConfig,
    load_equity_config,
    pre_flop_strength,
    win_probability,
)
from holdem_eval.core.hand_evaluator import HandEvaluation, HandEvaluator

__all__ = [
    "DEFAULT_EQUITY_CONFIG",
    "EquityCalculator",
    "EquityConfig",
    "HandEvaluation",
    "HandEvaluator",
    "load_equity_config",
    "pre_flop_strength",
    "win_probability",
]
