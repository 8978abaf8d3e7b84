"""Serializable hand records for the persistence layer.

The engine works with ``Card`` objects throughout; this module is the one
place that turns them into plain JSON-friendly data and back.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Self

from .card import Card, Rank, Suit
from .errors import InvalidCardError

_SUIT_NAMES = {s: s.name.lower() for s in Suit}
_SUITS_BY_NAME = {name: s for s, name in _SUIT_NAMES.items()}
_RANKS_BY_LETTER = {r.letter: r for r in Rank}


def encode_card(c: Card) -> dict[str, str]:
    return {"rank": c.rank.letter, "suit": _SUIT_NAMES[c.suit]}


def decode_card(data: dict[str, str]) -> Card:
    try:
        return Card(_RANKS_BY_LETTER[data["rank"]], _SUITS_BY_NAME[data["suit"]])
    except (KeyError, TypeError) as e:
        raise InvalidCardError(f"Invalid card data: {data!r}") from e


def _encode_time(t: datetime | None) -> str | None:
    return t.isoformat() if t else None


def _decode_time(s: str | None) -> datetime | None:
    return datetime.fromisoformat(s) if s else None


@dataclass(frozen=True)
class ActionRecord:
    """One entry of a hand's action log (blinds included)."""

    player_id: str
    action: str
    amount: int
    street: str
    timestamp: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "playerId": self.player_id,
            "action": self.action,
            "amount": self.amount,
            "street": self.street,
            "timestamp": _encode_time(self.timestamp),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        return cls(
            player_id=data["playerId"],
            action=data["action"],
            amount=data.get("amount", 0),
            street=data.get("street", ""),
            timestamp=_decode_time(data["timestamp"]),
        )


@dataclass
class HandRecord:
    """Snapshot of a hand as it would be stored."""

    hand_number: int
    dealer_position: int
    player_ids: list[str]
    hole_cards: dict[str, list[Card]]
    community_cards: list[Card]
    bets: dict[str, dict[str, int]]
    pot: int
    street: str
    actions: list[ActionRecord] = field(default_factory=list)
    winners: list[str] = field(default_factory=list)
    winning_hand: str | None = None
    completed_at: datetime | None = None

    @property
    def is_complete(self) -> bool:
        return self.completed_at is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "handNumber": self.hand_number,
            "dealerPosition": self.dealer_position,
            "playerIds": list(self.player_ids),
            "holeCards": {
                pid: [encode_card(c) for c in cards] for pid, cards in self.hole_cards.items()
            },
            "communityCards": [encode_card(c) for c in self.community_cards],
            "bets": {street: dict(amounts) for street, amounts in self.bets.items()},
            "pot": self.pot,
            "currentRound": self.street,
            "actions": [a.to_dict() for a in self.actions],
            "winners": list(self.winners),
            "winningHand": self.winning_hand,
            "completedAt": _encode_time(self.completed_at),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        return cls(
            hand_number=data["handNumber"],
            dealer_position=data["dealerPosition"],
            player_ids=list(data["playerIds"]),
            hole_cards={
                pid: [decode_card(c) for c in cards]
                for pid, cards in data["holeCards"].items()
            },
            community_cards=[decode_card(c) for c in data["communityCards"]],
            bets={street: dict(amounts) for street, amounts in data["bets"].items()},
            pot=data["pot"],
            street=data["currentRound"],
            actions=[ActionRecord.from_dict(a) for a in data.get("actions", [])],
            winners=list(data.get("winners", [])),
            winning_hand=data.get("winningHand"),
            completed_at=_decode_time(data.get("completedAt")),
        )

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, s: str) -> Self:
        return cls.from_dict(json.loads(s))
