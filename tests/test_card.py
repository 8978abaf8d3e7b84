"""Tests for card module."""

import pytest
from headsup.card import Card, Rank, Suit, card, parse_cards
from headsup.errors import InvalidCardError


class TestCard:
    def test_card_creation(self):
        c = Card(Rank.ACE, Suit.SPADES)
        assert c.rank == Rank.ACE
        assert c.suit == Suit.SPADES

    def test_card_str(self):
        assert str(Card(Rank.ACE, Suit.SPADES)) == "A♠"
        assert str(Card(Rank.TEN, Suit.HEARTS)) == "10♥"

    def test_card_code(self):
        assert Card(Rank.TEN, Suit.HEARTS).code == "Th"
        assert Card(Rank.TWO, Suit.CLUBS).code == "2c"

    def test_card_from_str(self):
        assert Card.from_str("As") == Card(Rank.ACE, Suit.SPADES)
        assert Card.from_str("kh") == Card(Rank.KING, Suit.HEARTS)
        assert Card.from_str("10d") == Card(Rank.TEN, Suit.DIAMONDS)
        assert Card.from_str("2c") == Card(Rank.TWO, Suit.CLUBS)
        assert Card.from_str("Tc") == Card(Rank.TEN, Suit.CLUBS)

    def test_card_shorthand(self):
        assert card("As") == Card(Rank.ACE, Suit.SPADES)

    def test_parse_cards(self):
        assert parse_cards("As Kd, 2c") == [card("As"), card("Kd"), card("2c")]
        assert parse_cards("") == []

    def test_invalid_card(self):
        with pytest.raises(InvalidCardError):
            Card.from_str("Xx")
        with pytest.raises(InvalidCardError):
            Card.from_str("1s")
        with pytest.raises(ValueError):
            Card.from_str("A")

    def test_structural_equality(self):
        assert Card(Rank.QUEEN, Suit.DIAMONDS) == card("Qd")
        assert Card(Rank.QUEEN, Suit.DIAMONDS) != card("Qh")

    def test_card_is_immutable(self):
        c = card("As")
        with pytest.raises(AttributeError):
            c.rank = Rank.KING  # type: ignore[misc]

    def test_rank_comparison(self):
        assert Rank.ACE > Rank.KING
        assert Rank.TWO < Rank.THREE

    def test_card_hashable(self):
        cards = {card("As"), card("Kh"), card("As")}
        assert len(cards) == 2
