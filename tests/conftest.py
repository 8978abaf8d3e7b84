from typing import Callable, Sequence

import pytest

from headsup.card import Card, parse_cards
from headsup.deck import create_deck


def stacked_deck(p1: str, p2: str, board: str = "") -> list[Card]:
    """A full deck ordered so the hand deals the given hole cards and board.

    Deal order is player one's two cards, player two's two cards, then a
    burn card before the flop, turn and river.
    """
    first = parse_cards(p1) + parse_cards(p2)
    community = parse_cards(board)
    rest = [c for c in create_deck() if c not in first and c not in community]
    if not community:
        return first + rest

    burns, rest = rest[:3], rest[3:]
    return (
        first
        + [burns[0], *community[:3]]
        + [burns[1], community[3]]
        + [burns[2], community[4]]
        + rest
    )


@pytest.fixture
def make_deck() -> Callable[..., Sequence[Card]]:
    """Factory fixture for pre-arranged decks."""
    return stacked_deck
