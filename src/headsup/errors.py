"""Exceptions raised by the poker engine."""


class PokerError(Exception):
    """Base class for all engine errors."""


class InvalidCardError(PokerError, ValueError):
    """A card string or card value could not be understood."""


class DeckError(PokerError, ValueError):
    """Malformed deck, or more cards requested than remain."""


class InvalidHandError(PokerError, ValueError):
    """Wrong number of cards (or duplicates) handed to the evaluator."""


class IllegalActionError(PokerError):
    """A player action that the current betting state does not allow."""


class HandStateError(PokerError):
    """Operation not valid for the current stage of the hand or match."""


class StaleStateError(HandStateError):
    """The caller acted on an outdated version of the hand."""


class ConfigError(PokerError, ValueError):
    """Invalid game configuration."""
