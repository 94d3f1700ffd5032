"""Tests for the card codec."""

import pytest

from holdem_eval.utils.card import (
    Card,
    format_card,
    full_deck,
    parse_token,
    parse_tokens,
)
from holdem_eval.utils.constants import RANK_CHARS, SUIT_CHARS, Rank, Suit


class TestParseToken:
    def test_ace_of_spades(self) -> None:
        assert parse_token("As") == Card(Rank.ACE, Suit.SPADES)

    def test_ten_uses_t(self) -> None:
        assert parse_token("Td") == Card(Rank.TEN, Suit.DIAMONDS)

    def test_suit_is_case_insensitive(self) -> None:
        assert parse_token("KH") == Card(Rank.KING, Suit.HEARTS)
        assert parse_token("2C") == Card(Rank.TWO, Suit.CLUBS)

    def test_rank_is_case_sensitive(self) -> None:
        assert parse_token("ah") is None
        assert parse_token("th") is None

    @pytest.mark.parametrize("token", ["", "A", "Xx", "Ax", "1s", "10s", "AKs", None, 12, ["A", "s"]])
    def test_malformed_tokens_are_absent(self, token) -> None:
        assert parse_token(token) is None

    def test_every_valid_token_parses(self) -> None:
        for r in RANK_CHARS:
            for s in SUIT_CHARS:
                card = parse_token(r + s)
                assert card is not None
                assert card.rank == RANK_CHARS.index(r)
                assert card.suit == SUIT_CHARS.index(s)


class TestFormatCard:
    def test_canonical_form(self) -> None:
        assert format_card(Card(Rank.QUEEN, Suit.CLUBS)) == "Qc"
        assert str(Card(Rank.TWO, Suit.HEARTS)) == "2h"

    def test_normalizes_upper_case_suit(self) -> None:
        assert format_card(parse_token("JS")) == "Js"

    def test_round_trip_over_deck(self) -> None:
        for card in full_deck():
            assert parse_token(format_card(card)) == card

    def test_repr(self) -> None:
        assert repr(Card(Rank.ACE, Suit.SPADES)) == "Card('As')"


class TestCard:
    def test_accepts_plain_ints(self) -> None:
        card = Card(12, 0)
        assert card.rank is Rank.ACE
        assert card.suit is Suit.SPADES
        assert card == Card(Rank.ACE, Suit.SPADES)

    def test_rejects_out_of_range(self) -> None:
        with pytest.raises(ValueError, match="Invalid rank"):
            Card(13, 0)
        with pytest.raises(ValueError, match="Invalid suit"):
            Card(0, 4)
        with pytest.raises(ValueError, match="Invalid rank"):
            Card("A", 0)

    def test_is_immutable(self) -> None:
        card = Card(Rank.ACE, Suit.SPADES)
        with pytest.raises(AttributeError):
            card.rank = Rank.KING  # type: ignore[misc]

    def test_from_str(self) -> None:
        assert Card.from_str("9h") == Card(Rank.NINE, Suit.HEARTS)

    def test_from_str_rejects_bad_token(self) -> None:
        with pytest.raises(ValueError, match="Invalid card token"):
            Card.from_str("Zz")


class TestHelpers:
    def test_parse_tokens_drops_bad_ones(self) -> None:
        cards = parse_tokens(["As", "??", "Kh", "", None])
        assert [str(c) for c in cards] == ["As", "Kh"]

    def test_full_deck(self) -> None:
        deck = full_deck()
        assert len(deck) == 52
        assert len(set(deck)) == 52
        assert str(deck[0]) == "2s"
        assert str(deck[-1]) == "Ac"
