"""Single-hand orchestrator - blinds, streets, turn order and showdown.

A ``Table`` is driven one action at a time by its caller (typically a
request handler), so it holds the whole hand state between calls instead
of running a betting loop itself. It is not thread-safe: callers must
serialize ``apply_action`` calls per hand, and may use ``version`` with
``expected_version`` as an optimistic compare-and-swap.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Sequence

from .action import Action, ActionType
from .betting import AvailableActions, check_action, get_available_actions
from .card import Card
from .deck import create_deck, deal_cards, shuffle_deck, validate_deck
from .errors import DeckError, HandStateError, IllegalActionError, StaleStateError
from .hand import HandEvaluator
from .player import Player
from .pot import PotManager
from .record import ActionRecord, HandRecord
from .showdown import determine_winner, split_pot

logger = logging.getLogger(__name__)

HOLE_CARDS = 2


class Street(str, Enum):
    PREFLOP = "preflop"
    FLOP = "flop"
    TURN = "turn"
    RIVER = "river"
    SHOWDOWN = "showdown"

    def __str__(self) -> str:
        return self.value


STREETS = list(Street)
BOARD_CARDS = {Street.FLOP: 3, Street.TURN: 1, Street.RIVER: 1}


def next_street(street: Street) -> Street:
    """The street that follows ``street``. Showdown is terminal."""
    if street == Street.SHOWDOWN:
        raise HandStateError("Showdown is the last street")
    return STREETS[STREETS.index(street) + 1]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Table:
    """Orchestrates a single hand of heads-up Texas Hold'em.

    ``players`` are in seat order; ``dealer_index`` picks the button, who
    also posts the small blind and acts first preflop but last afterwards.
    """

    players: list[Player]
    dealer_index: int
    small_blind: int
    big_blind: int
    hand_number: int = 1
    evaluator: HandEvaluator | None = None
    clock: Callable[[], datetime] = _utcnow

    street: Street = Street.PREFLOP
    community: list[Card] = field(default_factory=list)
    current_bet: int = 0
    pot: PotManager = field(default_factory=PotManager)
    winners: list[str] = field(default_factory=list)
    winning_hand: str | None = None
    payouts: dict[str, int] = field(default_factory=dict)
    completed_at: datetime | None = None
    actions: list[ActionRecord] = field(default_factory=list)
    version: int = 0

    _deck: list[Card] = field(default_factory=list, repr=False)
    _burned: list[Card] = field(default_factory=list, repr=False)
    _acted: set[str] = field(default_factory=set, repr=False)
    _started: bool = field(default=False, repr=False)

    def __post_init__(self) -> None:
        if len(self.players) != 2:
            raise ValueError(f"Heads-up needs exactly 2 players, got {len(self.players)}")
        if self.players[0].id == self.players[1].id:
            raise ValueError("Player ids must be unique")
        if self.dealer_index not in (0, 1):
            raise ValueError(f"dealer_index must be 0 or 1, got {self.dealer_index}")
        if self.small_blind <= 0 or self.big_blind < self.small_blind:
            raise ValueError(
                f"Invalid blinds {self.small_blind}/{self.big_blind}"
            )

    # -- positions ---------------------------------------------------------

    @property
    def button(self) -> Player:
        return self.players[self.dealer_index]

    @property
    def big_blind_player(self) -> Player:
        return self.players[1 - self.dealer_index]

    def player(self, player_id: str) -> Player:
        for p in self.players:
            if p.id == player_id:
                return p
        raise IllegalActionError(f"Unknown player: {player_id}")

    def opponent_of(self, player: Player) -> Player:
        return self.players[1] if player is self.players[0] else self.players[0]

    @property
    def current_player(self) -> Player | None:
        for p in self.players:
            if p.is_turn:
                return p
        return None

    @property
    def is_complete(self) -> bool:
        return self.completed_at is not None

    @property
    def remaining_deck(self) -> list[Card]:
        return list(self._deck)

    @property
    def burned(self) -> list[Card]:
        return list(self._burned)

    @property
    def dealt_cards(self) -> list[Card]:
        return [c for p in self.players for c in p.hole_cards] + list(self.community)

    def _street_order(self) -> list[Player]:
        if self.street == Street.PREFLOP:
            return [self.button, self.big_blind_player]
        return [self.big_blind_player, self.button]

    # -- hand lifecycle ------------------------------------------------------

    def start_hand(
        self,
        rng: random.Random | None = None,
        deck: Sequence[Card] | None = None,
    ) -> None:
        """Shuffle, deal hole cards, post blinds and hand the turn to the button.

        ``deck`` lets a caller supply a pre-arranged 52-card order instead
        of shuffling.
        """
        if self._started:
            raise HandStateError("Hand has already started")
        for p in self.players:
            if p.chips <= 0:
                raise HandStateError(f"{p.name} has no chips to play a hand")

        if deck is None:
            deck = shuffle_deck(create_deck(), rng)
        validate_deck(deck)
        if set(deck) != set(create_deck()):
            raise DeckError(f"Deck must hold all 52 cards, got {len(deck)}")
        self._deck = list(deck)

        for p in self.players:
            p.reset_for_new_hand()
            p.hole_cards = self._draw(HOLE_CARDS)

        button, bb_player = self.button, self.big_blind_player
        button.is_dealer = True
        button.is_small_blind = True
        bb_player.is_big_blind = True

        self._post_blind(button, self.small_blind, "small_blind")
        self._post_blind(bb_player, self.big_blind, "big_blind")
        self.current_bet = max(p.current_bet for p in self.players)
        self.street = Street.PREFLOP
        self._started = True

        logger.debug(
            "Hand %d started: button=%s blinds=%d/%d pot=%d",
            self.hand_number, button.id, self.small_blind, self.big_blind, self.pot.total,
        )
        self._advance(None)

    def _post_blind(self, player: Player, amount: int, label: str) -> None:
        # A short stack posts whatever it has and is all-in.
        posted = player.bet(amount)
        self.pot.add(posted)
        self._log(player, label, posted)

    def _draw(self, count: int) -> list[Card]:
        dealt, self._deck = deal_cards(self._deck, count)
        return dealt

    def _deal_street(self) -> None:
        self.street = next_street(self.street)
        for p in self.players:
            p.reset_for_new_round()
        self.current_bet = 0
        self._acted = set()
        if self.street in BOARD_CARDS:
            self._burned.extend(self._draw(1))
            self.community.extend(self._draw(BOARD_CARDS[self.street]))
            logger.debug("Dealt %s: %s", self.street, " ".join(map(str, self.community)))

    # -- actions -------------------------------------------------------------

    def available_actions(self) -> AvailableActions:
        """Legal options for the player whose turn it is."""
        player = self.current_player
        if player is None:
            raise HandStateError("Nobody is due to act")
        return get_available_actions(
            player.chips,
            self.current_bet,
            player.current_bet,
            self.big_blind,
            self.opponent_of(player).chips,
        )

    def apply_action(
        self,
        player_id: str,
        action: Action,
        expected_version: int | None = None,
    ) -> None:
        """Apply one player action and move the hand forward.

        The action is fully validated first; a rejected action raises and
        leaves every bit of hand state untouched.

        Raises:
            HandStateError: the hand hasn't started or is already complete.
            StaleStateError: ``expected_version`` doesn't match ``version``.
            IllegalActionError: wrong player, or the action isn't legal now.
        """
        if not self._started:
            raise HandStateError("Hand has not started")
        if self.is_complete:
            raise HandStateError("Hand is already complete")
        if expected_version is not None and expected_version != self.version:
            raise StaleStateError(
                f"Hand is at version {self.version}, caller expected {expected_version}"
            )

        player = self.player(player_id)
        if player is not self.current_player:
            raise IllegalActionError(f"Not {player.name}'s turn")

        opponent = self.opponent_of(player)
        check = check_action(
            action,
            player.chips,
            self.current_bet,
            player.current_bet,
            self.big_blind,
            opponent.chips,
        )
        if not check:
            raise IllegalActionError(check.reason or "Illegal action")

        committed = 0
        match action.type:
            case ActionType.FOLD:
                player.fold()
            case ActionType.CHECK:
                pass
            case ActionType.CALL:
                committed = player.bet(self.current_bet - player.current_bet)
            case ActionType.RAISE:
                committed = player.bet(action.amount - player.current_bet)
            case ActionType.ALL_IN:
                committed = player.bet(player.chips)
        self.pot.add(committed)

        if player.current_bet > self.current_bet:
            # Aggression reopens the action for the opponent.
            self.current_bet = player.current_bet
            self._acted = set()
        self._acted.add(player.id)
        self.version += 1
        self._log(player, action.type.value, committed)
        logger.debug(
            "%s %s (%d), pot=%d", player.id, action.type.value, committed, self.pot.total
        )
        self._advance(player)

    def _advance(self, last_actor: Player | None) -> None:
        for p in self.players:
            p.is_turn = False

        live = [p for p in self.players if p.is_in_hand]
        if len(live) == 1:
            self._award_uncontested(live[0])
            return

        if not self._round_closed():
            self._next_to_act(last_actor).is_turn = True
            return

        if sum(1 for p in self.players if p.can_act) < 2:
            # Nobody can bet any more: run the board out.
            while self.street != Street.RIVER:
                self._deal_street()
            self._showdown()
        elif self.street == Street.RIVER:
            self._showdown()
        else:
            self._deal_street()
            self._next_to_act(None).is_turn = True

    def _round_closed(self) -> bool:
        actors = [p for p in self.players if p.can_act]
        if any(p.current_bet < self.current_bet for p in actors):
            return False
        if len(actors) <= 1:
            return True
        return all(p.id in self._acted for p in actors)

    def _next_to_act(self, last_actor: Player | None) -> Player:
        if last_actor is None:
            order = self._street_order()
        else:
            order = [self.opponent_of(last_actor), last_actor]
        for p in order:
            if p.can_act and (p.id not in self._acted or p.current_bet < self.current_bet):
                return p
        raise HandStateError("Betting round is open but nobody can act")

    # -- payout --------------------------------------------------------------

    def _award_uncontested(self, winner: Player) -> None:
        amount = self.pot.total
        self.pot.award(winner, amount)
        self.payouts = {winner.id: amount}
        self.winners = [winner.id]
        self.winning_hand = None
        self._complete()

    def _showdown(self) -> None:
        self.street = Street.SHOWDOWN
        odd_chip_order = [self.big_blind_player.id, self.button.id]
        payouts: dict[str, int] = {}

        for i, side_pot in enumerate(PotManager.calculate_side_pots(self.players)):
            eligible = side_pot.eligible_players
            result = determine_winner(eligible, self.community, self.evaluator)
            shares = split_pot(side_pot.amount, result.winners, odd_chip_order)
            for pid, amount in shares.items():
                self.pot.award(self.player(pid), amount)
                payouts[pid] = payouts.get(pid, 0) + amount
            if i == 0:
                self.winners = list(result.winners)
                self.winning_hand = result.description

        self.payouts = payouts
        self._complete()

    def _complete(self) -> None:
        for p in self.players:
            p.is_turn = False
        self.completed_at = self.clock()
        logger.info(
            "Hand %d complete: winners=%s hand=%s payouts=%s",
            self.hand_number, self.winners, self.winning_hand, self.payouts,
        )

    # -- records -------------------------------------------------------------

    def _log(self, player: Player, action: str, amount: int) -> None:
        self.actions.append(
            ActionRecord(
                player_id=player.id,
                action=action,
                amount=amount,
                street=self.street.value,
                timestamp=self.clock(),
            )
        )

    def street_bets(self) -> dict[str, dict[str, int]]:
        """Chips each player committed on every street reached so far."""
        bets: dict[str, dict[str, int]] = {}
        for record in self.actions:
            street = bets.setdefault(record.street, {p.id: 0 for p in self.players})
            street[record.player_id] += record.amount
        return bets

    def to_record(self) -> HandRecord:
        """Snapshot the hand for storage."""
        return HandRecord(
            hand_number=self.hand_number,
            dealer_position=self.dealer_index,
            player_ids=[p.id for p in self.players],
            hole_cards={p.id: list(p.hole_cards) for p in self.players},
            community_cards=list(self.community),
            bets=self.street_bets(),
            pot=self.pot.total,
            street=self.street.value,
            actions=list(self.actions),
            winners=list(self.winners),
            winning_hand=self.winning_hand,
            completed_at=self.completed_at,
        )
