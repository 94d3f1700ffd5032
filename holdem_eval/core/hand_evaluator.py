"""Texas Hold'em hand evaluation engine.

Classifies five-card hands, orders the results, and finds the best
five-card hand among 5-7 cards by checking every combination.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from itertools import combinations

from holdem_eval.utils.card import Card, parse_tokens
from holdem_eval.utils.constants import (
    CATEGORY_NAMES,
    ROYAL_FLUSH_NAME,
    WHEEL_HIGH,
    WHEEL_RANKS,
    HandCategory,
    Rank,
)

logger = logging.getLogger("holdem_eval.evaluator")

# Stand-in for a missing tiebreaker entry; lower than any rank.
_MISSING_RANK = -1


@dataclass(frozen=True)
class HandEvaluation:
    """Result of evaluating a poker hand.

    The tiebreaker layout depends on the category:
      STRAIGHT_FLUSH, STRAIGHT   -> (straight high,)
      FOUR_OF_A_KIND             -> (quad rank, kicker)
      FULL_HOUSE                 -> (trips rank, pair rank)
      FLUSH, HIGH_CARD           -> all five ranks, descending
      THREE_OF_A_KIND            -> (trips rank, kicker, kicker)
      TWO_PAIR                   -> (high pair, low pair, kicker)
      ONE_PAIR                   -> (pair rank, kicker, kicker, kicker)
    """

    category: HandCategory
    tiebreaker: tuple[int, ...]
    name: str = field(compare=False)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, HandEvaluation):
            return NotImplemented
        return HandEvaluator.compare(self, other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, HandEvaluation):
            return NotImplemented
        return HandEvaluator.compare(self, other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, HandEvaluation):
            return NotImplemented
        return HandEvaluator.compare(self, other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, HandEvaluation):
            return NotImplemented
        return HandEvaluator.compare(self, other) >= 0

    def __str__(self) -> str:
        return self.name


class HandEvaluator:
    """Evaluates poker hands and determines the best 5-card combination."""

    @staticmethod
    def select_best(tokens: Iterable[object]) -> HandEvaluation | None:
        """Evaluate the best 5-card hand from 5-7 card tokens.

        Unparseable tokens are dropped before the search.

        Args:
            tokens: Card tokens such as ["As", "Kh", "Qd", "Jc", "Ts"].

        Returns:
            The best HandEvaluation, or None if fewer than 5 tokens parse.
        """
        cards = parse_tokens(tokens)
        if len(cards) < 5:
            logger.debug("Only %d valid cards, need at least 5", len(cards))
            return None
        return HandEvaluator.evaluate_cards(cards)

    @staticmethod
    def evaluate_cards(cards: Sequence[Card]) -> HandEvaluation:
        """Evaluate the best 5-card hand from already parsed cards.

        Combinations are visited in index order; a later combination only
        replaces the running best when it is strictly stronger.

        Raises:
            ValueError: If fewer than 5 cards are provided.
        """
        if len(cards) < 5:
            raise ValueError(f"Need at least 5 cards, got {len(cards)}")

        best: HandEvaluation | None = None
        for combo in combinations(cards, 5):
            result = HandEvaluator.classify(combo)
            if best is None or HandEvaluator.compare(result, best) > 0:
                best = result
        assert best is not None
        logger.debug(
            "Best of %d cards: %s %s", len(cards), best.name, best.tiebreaker,
        )
        return best

    @staticmethod
    def classify(cards: Sequence[Card]) -> HandEvaluation:
        """Classify exactly 5 cards.

        Raises:
            ValueError: If not given exactly 5 cards.
        """
        if len(cards) != 5:
            raise ValueError(f"Need exactly 5 cards, got {len(cards)}")

        ranks = sorted((c.rank for c in cards), reverse=True)
        is_flush = HandEvaluator._is_flush(cards)
        straight_high = HandEvaluator._straight_high(ranks)
        is_straight = straight_high is not None
        groups = HandEvaluator._rank_groups(ranks)
        group_ranks = tuple(int(rank) for rank, _ in groups)
        top_count = groups[0][1]
        second_count = groups[1][1] if len(groups) > 1 else 0

        if is_flush and is_straight:
            name = (
                ROYAL_FLUSH_NAME if straight_high == Rank.ACE
                else CATEGORY_NAMES[HandCategory.STRAIGHT_FLUSH]
            )
            return HandEvaluation(
                HandCategory.STRAIGHT_FLUSH, (int(straight_high),), name,
            )

        if top_count == 4:
            return HandEvaluator._result(HandCategory.FOUR_OF_A_KIND, group_ranks)

        if top_count == 3 and second_count == 2:
            return HandEvaluator._result(HandCategory.FULL_HOUSE, group_ranks)

        if is_flush:
            return HandEvaluator._result(
                HandCategory.FLUSH, tuple(int(r) for r in ranks),
            )

        if is_straight:
            return HandEvaluator._result(
                HandCategory.STRAIGHT, (int(straight_high),),
            )

        if top_count == 3:
            return HandEvaluator._result(HandCategory.THREE_OF_A_KIND, group_ranks)

        if top_count == 2 and second_count == 2:
            return HandEvaluator._result(HandCategory.TWO_PAIR, group_ranks)

        if top_count == 2:
            return HandEvaluator._result(HandCategory.ONE_PAIR, group_ranks)

        return HandEvaluator._result(
            HandCategory.HIGH_CARD, tuple(int(r) for r in ranks),
        )

    @staticmethod
    def compare(a: HandEvaluation, b: HandEvaluation) -> int:
        """Order two evaluations.

        Returns:
            Positive if a beats b, negative if b beats a, 0 on a true tie.
        """
        if a.category != b.category:
            return int(a.category) - int(b.category)
        length = max(len(a.tiebreaker), len(b.tiebreaker))
        for i in range(length):
            av = a.tiebreaker[i] if i < len(a.tiebreaker) else _MISSING_RANK
            bv = b.tiebreaker[i] if i < len(b.tiebreaker) else _MISSING_RANK
            if av != bv:
                return av - bv
        return 0

    @staticmethod
    def _result(category: HandCategory, tiebreaker: tuple[int, ...]) -> HandEvaluation:
        return HandEvaluation(category, tiebreaker, CATEGORY_NAMES[category])

    @staticmethod
    def _is_flush(cards: Sequence[Card]) -> bool:
        """Check if all 5 cards share the same suit."""
        return len({c.suit for c in cards}) == 1

    @staticmethod
    def _straight_high(ranks: list[int]) -> int | None:
        """Return the high rank of a straight, or None.

        Expects ranks sorted descending. Handles the A-2-3-4-5 (wheel)
        straight as a special case, with the Five as its high card.
        """
        if len(set(ranks)) != 5:
            return None

        if ranks[0] - ranks[4] == 4:
            return ranks[0]

        if ranks == WHEEL_RANKS:
            return WHEEL_HIGH

        return None

    @staticmethod
    def _rank_groups(ranks: list[int]) -> list[tuple[int, int]]:
        """(rank, count) pairs ordered by count, then rank, both descending."""
        counts = Counter(ranks)
        return sorted(counts.items(), key=lambda g: (g[1], g[0]), reverse=True)
