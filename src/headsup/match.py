"""Match loop - chip stacks, dealer rotation and game-over across hands."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

from .action import Action
from .card import Card
from .config import GameConfig
from .errors import HandStateError
from .hand import HandEvaluator
from .player import Player
from .record import HandRecord
from .table import Table

logger = logging.getLogger(__name__)

STARTING_CHIPS = 1000
SMALL_BLIND = 10
BIG_BLIND = 20


class MatchStatus(str, Enum):
    WAITING = "waiting"
    ACTIVE = "active"
    FINISHED = "finished"


@dataclass
class Match:
    """A heads-up match between two players, played one hand at a time.

    Player one holds the button for the first hand; it alternates after
    every completed hand. The match ends once a player has no chips left.
    """

    players: list[Player]
    small_blind: int = SMALL_BLIND
    big_blind: int = BIG_BLIND
    evaluator: HandEvaluator | None = None

    status: MatchStatus = MatchStatus.WAITING
    dealer_index: int = 0
    hand_number: int = 0
    winner_id: str | None = None
    table: Table | None = None
    history: list[HandRecord] = field(default_factory=list)

    @classmethod
    def create(
        cls,
        player_ids: Sequence[str],
        starting_chips: int = STARTING_CHIPS,
        small_blind: int = SMALL_BLIND,
        big_blind: int = BIG_BLIND,
        evaluator: HandEvaluator | None = None,
    ) -> Match:
        """Seat two fresh players with equal stacks.

        Raises:
            ConfigError: non-positive stack or blinds, or big blind below small blind.
        """
        if len(player_ids) != 2:
            raise ValueError(f"Heads-up needs exactly 2 players, got {len(player_ids)}")
        GameConfig(starting_chips, small_blind, big_blind)
        players = [Player(id=pid, chips=starting_chips) for pid in player_ids]
        return cls(
            players=players,
            small_blind=small_blind,
            big_blind=big_blind,
            evaluator=evaluator,
        )

    @property
    def total_chips(self) -> int:
        """Chips on both stacks plus whatever sits in the current pot."""
        pot = self.table.pot.total if self.table else 0
        return sum(p.chips for p in self.players) + pot

    @property
    def hand_in_progress(self) -> bool:
        return self.table is not None and not self.table.is_complete

    def start_hand(
        self,
        rng: random.Random | None = None,
        deck: Sequence[Card] | None = None,
    ) -> Table:
        """Deal the next hand."""
        if self.status == MatchStatus.FINISHED:
            raise HandStateError("Match is finished")
        if self.hand_in_progress:
            raise HandStateError("Hand already in progress")

        table = Table(
            players=self.players,
            dealer_index=self.dealer_index,
            small_blind=self.small_blind,
            big_blind=self.big_blind,
            hand_number=self.hand_number + 1,
            evaluator=self.evaluator,
        )
        # Nothing on the match changes until the deal has gone through.
        table.start_hand(rng=rng, deck=deck)
        self.hand_number = table.hand_number
        self.status = MatchStatus.ACTIVE
        self.table = table
        # Blinds alone can finish a hand when a stack is tiny.
        if table.is_complete:
            self._end_hand(table)
        return table

    def act(self, player_id: str, action: Action, expected_version: int | None = None) -> Table:
        """Apply a player action to the hand in progress."""
        table = self.table
        if table is None or table.is_complete:
            raise HandStateError("No active hand")
        table.apply_action(player_id, action, expected_version)
        if table.is_complete:
            self._end_hand(table)
        return table

    def _end_hand(self, table: Table) -> None:
        self.history.append(table.to_record())
        self.dealer_index = 1 - self.dealer_index

        busted = [p for p in self.players if p.chips == 0]
        if busted:
            survivor = next(p for p in self.players if p.chips > 0)
            self.status = MatchStatus.FINISHED
            self.winner_id = survivor.id
            logger.info("Match over after %d hands: %s wins", self.hand_number, survivor.id)
        else:
            self.status = MatchStatus.WAITING
