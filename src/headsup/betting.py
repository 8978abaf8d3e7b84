"""Betting legality for heads-up play.

Amounts are in chips. ``current_bet`` is the highest total committed by
either player on the current street, ``player_bet`` is what the acting
player has already committed on it. Raises are expressed as raise-to
totals for the street.
"""

from __future__ import annotations

from dataclasses import dataclass

from .action import Action, ActionType


@dataclass(frozen=True)
class AvailableActions:
    """What the player to act may legally do."""

    can_check: bool
    can_call: bool
    call_amount: int
    can_raise: bool
    min_raise: int
    can_fold: bool
    can_all_in: bool

    def allows(self, action_type: ActionType) -> bool:
        return {
            ActionType.FOLD: self.can_fold,
            ActionType.CHECK: self.can_check,
            ActionType.CALL: self.can_call,
            ActionType.RAISE: self.can_raise,
            ActionType.ALL_IN: self.can_all_in,
        }[action_type]

    @property
    def legal_types(self) -> list[ActionType]:
        return [t for t in ActionType if self.allows(t)]


@dataclass(frozen=True)
class BetCheck:
    """Outcome of a bet/raise validation."""

    valid: bool
    reason: str | None = None

    def __bool__(self) -> bool:
        return self.valid


def min_raise(current_bet: int, big_blind: int) -> int:
    """Smallest legal raise-to: double the current bet, floored at two big blinds."""
    return max(current_bet * 2, big_blind * 2)


def get_available_actions(
    stack: int,
    current_bet: int,
    player_bet: int,
    big_blind: int,
    opponent_stack: int | None = None,
) -> AvailableActions:
    """Compute the legal options for the player to act.

    ``opponent_stack`` of None means the opponent's stack is unknown and
    treated as not all-in. Against an all-in opponent nobody may raise,
    but a player who cannot cover the call may still call all-in for
    whatever is left.
    """
    call_amount = max(0, current_bet - player_bet)
    opponent_all_in = opponent_stack == 0
    minimum = min_raise(current_bet, big_blind)

    can_check = call_amount == 0
    can_all_in = stack > 0 and (not opponent_all_in or 0 < stack < call_amount)

    return AvailableActions(
        can_check=can_check,
        can_call=0 < call_amount <= stack,
        call_amount=call_amount,
        can_raise=stack >= minimum and not opponent_all_in,
        min_raise=minimum,
        can_fold=not can_check,
        can_all_in=can_all_in,
    )


def is_valid_bet(amount: int, stack: int, current_bet: int, player_bet: int) -> BetCheck:
    """Validate ``amount`` more chips going in to match or beat the current bet."""
    if amount < 0:
        return BetCheck(False, "Bet cannot be negative")
    if amount > stack:
        return BetCheck(False, "Not enough chips")
    if amount < current_bet - player_bet and amount != stack:
        return BetCheck(False, "Bet must be at least the current bet or all-in")
    return BetCheck(True)


def is_valid_raise(
    raise_to: int,
    stack: int,
    current_bet: int,
    player_bet: int,
    big_blind: int,
) -> BetCheck:
    """Validate a raise to ``raise_to`` total chips on this street."""
    needed = raise_to - player_bet
    if raise_to <= current_bet:
        return BetCheck(False, f"Raise must exceed the current bet of {current_bet}")
    if needed > stack:
        return BetCheck(False, "Not enough chips")
    minimum = min_raise(current_bet, big_blind)
    if raise_to < minimum and needed != stack:
        return BetCheck(False, f"Minimum raise is to {minimum}")
    return BetCheck(True)


def check_action(
    action: Action,
    stack: int,
    current_bet: int,
    player_bet: int,
    big_blind: int,
    opponent_stack: int | None = None,
) -> BetCheck:
    """Validate a full action against the betting state without changing it."""
    options = get_available_actions(stack, current_bet, player_bet, big_blind, opponent_stack)
    if not options.allows(action.type):
        return BetCheck(False, f"{action.type.value} is not allowed here")
    if action.type == ActionType.RAISE:
        return is_valid_raise(action.amount, stack, current_bet, player_bet, big_blind)
    if action.type == ActionType.CALL:
        return is_valid_bet(options.call_amount, stack, current_bet, player_bet)
    return BetCheck(True)
