"""Per-hand player state."""

from __future__ import annotations

from dataclasses import dataclass, field

from .card import Card


@dataclass
class Player:
    """A player seated in a heads-up game.

    Chips only leave the stack through ``bet`` and only come back through
    pot awards, so the stack never goes negative.
    """

    id: str
    chips: int
    name: str = ""

    hole_cards: list[Card] = field(default_factory=list)
    current_bet: int = 0
    total_bet_this_hand: int = 0
    is_folded: bool = False
    is_all_in: bool = False
    is_dealer: bool = False
    is_small_blind: bool = False
    is_big_blind: bool = False
    is_turn: bool = False

    def __post_init__(self) -> None:
        if self.chips < 0:
            raise ValueError(f"Chip stack cannot be negative: {self.chips}")
        if not self.name:
            self.name = self.id

    @property
    def can_act(self) -> bool:
        """Can still make betting decisions (not folded, not all-in)."""
        return not self.is_folded and not self.is_all_in

    @property
    def is_in_hand(self) -> bool:
        """Still competing for the pot (not folded)."""
        return not self.is_folded

    def reset_for_new_hand(self) -> None:
        """Reset per-hand state."""
        self.hole_cards = []
        self.current_bet = 0
        self.total_bet_this_hand = 0
        self.is_folded = False
        self.is_all_in = False
        self.is_dealer = False
        self.is_small_blind = False
        self.is_big_blind = False
        self.is_turn = False

    def reset_for_new_round(self) -> None:
        """Reset per-street state (current_bet resets, total_bet persists)."""
        self.current_bet = 0

    def bet(self, amount: int) -> int:
        """Place a bet, capped at stack. Returns the actual amount bet."""
        if amount < 0:
            raise ValueError(f"Bet amount cannot be negative: {amount}")
        actual = min(amount, self.chips)
        self.chips -= actual
        self.current_bet += actual
        self.total_bet_this_hand += actual
        if self.chips == 0:
            self.is_all_in = True
        return actual

    def fold(self) -> None:
        self.is_folded = True
