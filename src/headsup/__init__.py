"""headsup - Heads-up Texas Hold'em engine."""

__version__ = "0.1.0"

from .action import Action, ActionType
from .betting import (
    AvailableActions,
    BetCheck,
    get_available_actions,
    is_valid_bet,
    is_valid_raise,
    min_raise,
)
from .card import Card, Rank, Suit, card, parse_cards
from .deck import Deal, create_deck, deal_cards, shuffle_deck
from .errors import (
    ConfigError,
    DeckError,
    HandStateError,
    IllegalActionError,
    InvalidCardError,
    InvalidHandError,
    PokerError,
    StaleStateError,
)
from .hand import Hand, HandEvaluator, HandRank, HandValue, StandardEvaluator, evaluate_hand
from .match import Match, MatchStatus
from .player import Player
from .pot import PotManager, SidePot
from .record import ActionRecord, HandRecord
from .showdown import ShowdownResult, compare_hands, determine_winner, split_pot
from .table import Street, Table, next_street

__all__ = [
    "Action",
    "ActionRecord",
    "ActionType",
    "AvailableActions",
    "BetCheck",
    "Card",
    "ConfigError",
    "Deal",
    "DeckError",
    "Hand",
    "HandEvaluator",
    "HandRank",
    "HandRecord",
    "HandStateError",
    "HandValue",
    "IllegalActionError",
    "InvalidCardError",
    "InvalidHandError",
    "Match",
    "MatchStatus",
    "Player",
    "PokerError",
    "PotManager",
    "Rank",
    "ShowdownResult",
    "SidePot",
    "StandardEvaluator",
    "StaleStateError",
    "Street",
    "Suit",
    "Table",
    "card",
    "compare_hands",
    "create_deck",
    "deal_cards",
    "determine_winner",
    "evaluate_hand",
    "get_available_actions",
    "is_valid_bet",
    "is_valid_raise",
    "min_raise",
    "next_street",
    "parse_cards",
    "shuffle_deck",
    "split_pot",
]
