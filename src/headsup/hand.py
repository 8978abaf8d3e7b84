"""Poker hand evaluation for Texas Hold'em."""

from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from itertools import combinations
from typing import Protocol, Sequence

from .card import Card, Rank
from .errors import InvalidHandError

MIN_CARDS = 5
MAX_CARDS = 7


class HandRank(IntEnum):
    """Poker hand rankings from lowest to highest."""

    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8

    def __str__(self) -> str:
        return self.name.replace("_", " ").title().replace(" Of A ", " of a ")


@dataclass(frozen=True, slots=True, order=True)
class HandValue:
    """Comparable hand value for determining winners.

    Comparison works by:
    1. HandRank (pair beats high card, etc.)
    2. Primary kickers (the cards that make the hand)
    3. Secondary kickers (remaining high cards)
    """

    rank: HandRank
    primary: tuple[int, ...]  # Main hand values (e.g., pair rank)
    kickers: tuple[int, ...]  # Remaining cards for tiebreakers

    def __str__(self) -> str:
        return self.description

    @property
    def strength(self) -> int:
        """Single integer ordered the same way as HandValue itself.

        The category sits above five 4-bit rank slots, so any hand of a
        higher category outranks every hand of a lower one.
        """
        values = (self.primary + self.kickers + (0,) * 5)[:5]
        total = int(self.rank)
        for v in values:
            total = total * 16 + v
        return total

    @property
    def description(self) -> str:
        """Human readable summary, e.g. "Full House, K's over 2's"."""
        p = [Rank(v).symbol for v in self.primary]
        match self.rank:
            case HandRank.HIGH_CARD:
                return f"{p[0]} High"
            case HandRank.ONE_PAIR:
                return f"Pair, {p[0]}'s"
            case HandRank.TWO_PAIR:
                return f"Two Pair, {p[0]}'s & {p[1]}'s"
            case HandRank.THREE_OF_A_KIND:
                return f"Three of a Kind, {p[0]}'s"
            case HandRank.STRAIGHT:
                return f"Straight, {p[0]} High"
            case HandRank.FLUSH:
                return f"Flush, {p[0]} High"
            case HandRank.FULL_HOUSE:
                return f"Full House, {p[0]}'s over {p[1]}'s"
            case HandRank.FOUR_OF_A_KIND:
                return f"Four of a Kind, {p[0]}'s"
            case HandRank.STRAIGHT_FLUSH:
                if self.primary[0] == Rank.ACE:
                    return "Royal Flush"
                return f"Straight Flush, {p[0]} High"


class HandEvaluator(Protocol):
    """Anything that turns 5-7 cards into a comparable HandValue."""

    def evaluate(self, cards: Sequence[Card]) -> HandValue: ...


class StandardEvaluator:
    """Best-of-five evaluator: scores every 5-card subset and keeps the best."""

    def evaluate(self, cards: Sequence[Card]) -> HandValue:
        _check_cards(cards)
        if len(cards) == 5:
            return _evaluate_five(list(cards))

        return max(_evaluate_five(list(five)) for five in combinations(cards, 5))


DEFAULT_EVALUATOR: HandEvaluator = StandardEvaluator()


@dataclass
class Hand:
    """A poker hand with evaluation capabilities."""

    cards: list[Card]

    def __post_init__(self) -> None:
        _check_cards(self.cards)

    def evaluate(self, evaluator: HandEvaluator | None = None) -> HandValue:
        """Evaluate the best 5-card hand from available cards.

        For Texas Hold'em, this finds the best 5-card combination
        from 7 cards (2 hole + 5 community).
        """
        return (evaluator or DEFAULT_EVALUATOR).evaluate(self.cards)

    @property
    def value(self) -> HandValue:
        """Shorthand for evaluate()."""
        return self.evaluate()


def evaluate_hand(
    hole_cards: Sequence[Card],
    community_cards: Sequence[Card],
    evaluator: HandEvaluator | None = None,
) -> HandValue:
    """Evaluate a player's best hand from hole cards plus the board.

    Raises:
        InvalidHandError: fewer than 5 or more than 7 cards in total, or
            the same card appears twice.
    """
    if len(community_cards) > 5:
        raise InvalidHandError(f"At most 5 community cards, got {len(community_cards)}")
    return Hand([*hole_cards, *community_cards]).evaluate(evaluator)


def _check_cards(cards: Sequence[Card]) -> None:
    if not MIN_CARDS <= len(cards) <= MAX_CARDS:
        raise InvalidHandError(
            f"Hand must have {MIN_CARDS}-{MAX_CARDS} cards, got {len(cards)}"
        )
    if len(set(cards)) != len(cards):
        raise InvalidHandError(f"Duplicate cards in hand: {' '.join(map(str, cards))}")


def _evaluate_five(cards: list[Card]) -> HandValue:
    """Evaluate exactly 5 cards."""
    ranks = sorted([c.rank for c in cards], reverse=True)
    suits = [c.suit for c in cards]
    rank_counts = Counter(ranks)

    is_flush = len(set(suits)) == 1
    is_straight, straight_high = _check_straight(ranks)

    # Straight flush (includes royal flush)
    if is_flush and is_straight:
        return HandValue(HandRank.STRAIGHT_FLUSH, (straight_high,), ())

    # Four of a kind
    if 4 in rank_counts.values():
        quad = _get_ranks_by_count(rank_counts, 4)[0]
        kicker = _get_ranks_by_count(rank_counts, 1)[0]
        return HandValue(HandRank.FOUR_OF_A_KIND, (quad,), (kicker,))

    # Full house
    if 3 in rank_counts.values() and 2 in rank_counts.values():
        trips = _get_ranks_by_count(rank_counts, 3)[0]
        pair = _get_ranks_by_count(rank_counts, 2)[0]
        return HandValue(HandRank.FULL_HOUSE, (trips, pair), ())

    if is_flush:
        return HandValue(HandRank.FLUSH, tuple(r.value for r in ranks), ())

    if is_straight:
        return HandValue(HandRank.STRAIGHT, (straight_high,), ())

    # Three of a kind
    if 3 in rank_counts.values():
        trips = _get_ranks_by_count(rank_counts, 3)[0]
        kickers = tuple(_get_ranks_by_count(rank_counts, 1)[:2])
        return HandValue(HandRank.THREE_OF_A_KIND, (trips,), kickers)

    # Two pair
    pairs = _get_ranks_by_count(rank_counts, 2)
    if len(pairs) == 2:
        kicker = _get_ranks_by_count(rank_counts, 1)[0]
        return HandValue(HandRank.TWO_PAIR, tuple(pairs), (kicker,))

    # One pair
    if len(pairs) == 1:
        kickers = tuple(_get_ranks_by_count(rank_counts, 1)[:3])
        return HandValue(HandRank.ONE_PAIR, (pairs[0],), kickers)

    return HandValue(HandRank.HIGH_CARD, (ranks[0].value,), tuple(r.value for r in ranks[1:]))


def _check_straight(ranks: list[Rank]) -> tuple[bool, int]:
    """Check if sorted ranks form a straight. Returns (is_straight, high_card)."""
    values = [r.value for r in ranks]

    if values == list(range(values[0], values[0] - 5, -1)):
        return True, values[0]

    # Wheel (A-2-3-4-5): ace plays low
    if values == [14, 5, 4, 3, 2]:
        return True, 5

    return False, 0


def _get_ranks_by_count(counts: Counter[Rank], count: int) -> list[int]:
    """Get rank values that appear exactly `count` times, sorted descending."""
    return sorted([r.value for r, c in counts.items() if c == count], reverse=True)
