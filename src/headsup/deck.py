"""Deck construction, shuffling and dealing.

All functions here are pure: they return new lists and never mutate
their input, so a hand can keep the pre-deal deck around for auditing.
"""

import random
from typing import NamedTuple, Protocol, Sequence

from .card import Card, Rank, Suit
from .errors import DeckError

DECK_SIZE = 52


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


class Deal(NamedTuple):
    """Result of dealing from the top of a deck."""

    dealt: list[Card]
    remaining: list[Card]


def create_deck() -> list[Card]:
    """A fresh 52-card deck, suit-major then rank-minor."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]


def shuffle_deck(deck: Sequence[Card], rng: RandomSource | None = None) -> list[Card]:
    """Return a Fisher-Yates shuffled copy of ``deck``."""
    rng = rng or random.SystemRandom()
    cards = list(deck)
    for i in range(len(cards) - 1, 0, -1):
        j = rng.randint(0, i)
        cards[i], cards[j] = cards[j], cards[i]
    return cards


def deal_cards(deck: Sequence[Card], count: int) -> Deal:
    """Split off the first ``count`` cards of the deck."""
    if count < 0:
        raise DeckError(f"Cannot deal a negative number of cards ({count})")
    if count > len(deck):
        raise DeckError(f"Cannot deal {count} cards, only {len(deck)} remaining")
    return Deal(dealt=list(deck[:count]), remaining=list(deck[count:]))


def validate_deck(deck: Sequence[Card]) -> None:
    """Raise DeckError if the deck holds a duplicate card."""
    seen: set[Card] = set()
    for c in deck:
        if c in seen:
            raise DeckError(f"Duplicate card in deck: {c}")
        seen.add(c)
