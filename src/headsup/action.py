"""Action types a player can submit."""

from dataclasses import dataclass
from enum import Enum


class ActionType(Enum):
    """Possible actions a player can take."""

    FOLD = "fold"
    CHECK = "check"
    CALL = "call"
    RAISE = "raise"
    ALL_IN = "all_in"


@dataclass(frozen=True)
class Action:
    """A concrete poker action.

    Attributes:
        type: The action type.
        amount: Raise-to total for this street (chips) for raises, 0 otherwise.
    """

    type: ActionType
    amount: int = 0

    def __str__(self) -> str:
        if self.type == ActionType.RAISE:
            return f"Raise to {self.amount}"
        if self.type == ActionType.ALL_IN:
            return "All-in"
        return self.type.value.capitalize()

    @classmethod
    def fold(cls) -> "Action":
        return cls(ActionType.FOLD)

    @classmethod
    def check(cls) -> "Action":
        return cls(ActionType.CHECK)

    @classmethod
    def call(cls) -> "Action":
        return cls(ActionType.CALL)

    @classmethod
    def raise_to(cls, amount: int) -> "Action":
        return cls(ActionType.RAISE, amount)

    @classmethod
    def all_in(cls) -> "Action":
        return cls(ActionType.ALL_IN)
