"""Showdown - comparing hands, determining winners and splitting pots."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, Sequence

from .card import Card
from .errors import InvalidHandError
from .hand import HandEvaluator, HandValue, evaluate_hand


class Contender(Protocol):
    """Anything with an id, hole cards and a folded flag (e.g. Player)."""

    id: str
    hole_cards: list[Card]
    is_folded: bool


@dataclass
class ShowdownResult:
    """Result of resolving a pot between the remaining players."""

    winners: list[str]
    hands: dict[str, HandValue] = field(default_factory=dict)
    by_default: bool = False

    @property
    def is_split(self) -> bool:
        return len(self.winners) > 1

    @property
    def winner(self) -> str | None:
        """Get the single winner, or None on a split."""
        if len(self.winners) == 1:
            return self.winners[0]
        return None

    @property
    def winning_hand(self) -> HandValue | None:
        if self.by_default:
            return None
        return self.hands[self.winners[0]]

    @property
    def description(self) -> str | None:
        hand = self.winning_hand
        return hand.description if hand else None


def determine_winner(
    players: Sequence[Contender],
    community_cards: Sequence[Card],
    evaluator: HandEvaluator | None = None,
) -> ShowdownResult:
    """Find the winner(s) among players who have not folded.

    A lone survivor wins without any evaluation. Otherwise every live hand
    is evaluated and all players tied at the best value share the win.

    Raises:
        InvalidHandError: nobody is left in the hand, or a live hand can't
            be evaluated (e.g. the board is incomplete).
    """
    live = [p for p in players if not p.is_folded]
    if not live:
        raise InvalidHandError("No players left in the hand")
    if len(live) == 1:
        return ShowdownResult(winners=[live[0].id], by_default=True)

    hands = {p.id: evaluate_hand(p.hole_cards, community_cards, evaluator) for p in live}
    best = max(hands.values())
    winners = [p.id for p in live if hands[p.id] == best]
    return ShowdownResult(winners=winners, hands=hands)


def split_pot(amount: int, winner_ids: Sequence[str], odd_chip_order: Sequence[str]) -> dict[str, int]:
    """Divide ``amount`` equally among ``winner_ids``.

    Chips that don't divide evenly are handed out one at a time to winners
    in ``odd_chip_order`` (seats starting left of the button).
    """
    if not winner_ids:
        raise ValueError("Cannot split a pot with no winners")
    share, remainder = divmod(amount, len(winner_ids))
    payouts = {w: share for w in winner_ids}
    ordered = [p for p in odd_chip_order if p in payouts]
    ordered += [w for w in winner_ids if w not in ordered]
    for w in ordered[:remainder]:
        payouts[w] += 1
    return payouts


def compare_hands(hand1: HandValue, hand2: HandValue) -> int:
    """Compare two evaluated hands.

    Returns:
        1 if hand1 wins, -1 if hand2 wins, 0 if tie
    """
    if hand1 > hand2:
        return 1
    elif hand1 < hand2:
        return -1
    return 0
