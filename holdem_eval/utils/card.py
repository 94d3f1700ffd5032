"""Card value type and the textual card codec."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from holdem_eval.utils.constants import RANK_CHARS, SUIT_CHARS, Rank, Suit

logger = logging.getLogger("holdem_eval.card")

_RANK_INDEX: dict[str, Rank] = {c: Rank(i) for i, c in enumerate(RANK_CHARS)}
_SUIT_INDEX: dict[str, Suit] = {c: Suit(i) for i, c in enumerate(SUIT_CHARS)}


@dataclass(frozen=True)
class Card:
    """A single playing card: rank 0-12 (2 -> A), suit 0-3 (s, h, d, c)."""

    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        if not isinstance(self.rank, int) or not 0 <= self.rank < len(RANK_CHARS):
            raise ValueError(f"Invalid rank value: {self.rank!r}")
        if not isinstance(self.suit, int) or not 0 <= self.suit < len(SUIT_CHARS):
            raise ValueError(f"Invalid suit value: {self.suit!r}")
        object.__setattr__(self, "rank", Rank(self.rank))
        object.__setattr__(self, "suit", Suit(self.suit))

    @classmethod
    def from_str(cls, s: str) -> Card:
        """Create a Card from a token like 'Ah' or 'Td'.

        Unlike parse_token(), a malformed token is an error here.

        Raises:
            ValueError: If the token cannot be parsed.
        """
        card = parse_token(s)
        if card is None:
            raise ValueError(f"Invalid card token: {s!r}")
        return card

    def __str__(self) -> str:
        return format_card(self)

    def __repr__(self) -> str:
        return f"Card('{self}')"


def parse_token(token: object) -> Card | None:
    """Parse a card token such as 'As' or 'Td'.

    The final character is the suit (matched case-insensitively); everything
    before it is the rank prefix, which must be exactly one rank character
    from '23456789TJQKA'.

    Returns:
        The parsed Card, or None for anything malformed.
    """
    if not isinstance(token, str) or len(token) < 2:
        return None
    rank = _RANK_INDEX.get(token[:-1])
    suit = _SUIT_INDEX.get(token[-1].lower())
    if rank is None or suit is None:
        return None
    return Card(rank=rank, suit=suit)


def format_card(card: Card) -> str:
    """Inverse of parse_token(): canonical rank char plus lowercase suit."""
    return RANK_CHARS[card.rank] + SUIT_CHARS[card.suit]


def parse_tokens(tokens: Iterable[object]) -> list[Card]:
    """Parse many tokens, dropping the ones that don't parse."""
    cards: list[Card] = []
    for token in tokens:
        card = parse_token(token)
        if card is None:
            logger.debug("Dropping unparseable card token %r", token)
            continue
        cards.append(card)
    return cards


def full_deck() -> list[Card]:
    """All 52 cards, rank-major from the Deuces up."""
    return [Card(rank=rank, suit=suit) for rank in Rank for suit in Suit]
