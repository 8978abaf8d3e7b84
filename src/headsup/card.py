"""Card representations for poker."""

from enum import IntEnum
from dataclasses import dataclass
from typing import Self

from .errors import InvalidCardError


class Suit(IntEnum):
    """Card suits. Values don't affect poker hand ranking."""

    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3

    @property
    def symbol(self) -> str:
        """Unicode symbol for the suit."""
        return ["♣", "♦", "♥", "♠"][self.value]

    @property
    def letter(self) -> str:
        """Single lowercase letter used in card codes."""
        return "cdhs"[self.value]

    @property
    def is_red(self) -> bool:
        return self in (Suit.HEARTS, Suit.DIAMONDS)

    def __str__(self) -> str:
        return self.symbol


class Rank(IntEnum):
    """Card ranks. Higher value = higher rank."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def symbol(self) -> str:
        """Short symbol for the rank."""
        if self.value <= 10:
            return str(self.value)
        return {11: "J", 12: "Q", 13: "K", 14: "A"}[self.value]

    @property
    def letter(self) -> str:
        """Single character code ('T' for ten)."""
        return "T" if self == Rank.TEN else self.symbol

    def __str__(self) -> str:
        return self.symbol


_SUITS = {"C": Suit.CLUBS, "D": Suit.DIAMONDS, "H": Suit.HEARTS, "S": Suit.SPADES}
_RANKS = {r.symbol: r for r in Rank} | {"T": Rank.TEN}


@dataclass(frozen=True, slots=True)
class Card:
    """A playing card with rank and suit."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank.symbol}{self.suit.symbol}"

    def __repr__(self) -> str:
        return f"Card({self.rank.symbol}{self.suit.symbol})"

    @property
    def code(self) -> str:
        """Two-character code such as 'Th' or 'As'."""
        return f"{self.rank.letter}{self.suit.letter}"

    @classmethod
    def from_str(cls, s: str) -> Self:
        """Parse a card from string like 'As', 'Kh', '10d', '2c'.

        Rank: 2-10 (or T), J, Q, K, A
        Suit: c(lubs), d(iamonds), h(earts), s(pades)
        """
        s = s.strip().upper()
        if len(s) < 2:
            raise InvalidCardError(f"Invalid card string: {s!r}")

        suit = _SUITS.get(s[-1])
        if suit is None:
            raise InvalidCardError(f"Invalid suit: {s[-1]}")

        rank = _RANKS.get(s[:-1])
        if rank is None:
            raise InvalidCardError(f"Invalid rank: {s[:-1]}")

        return cls(rank=rank, suit=suit)


# Convenience functions
def card(s: str) -> Card:
    """Shorthand for Card.from_str()."""
    return Card.from_str(s)


def parse_cards(s: str) -> list[Card]:
    """Parse space or comma separated cards."""
    return [card(part) for part in s.replace(",", " ").split()]
