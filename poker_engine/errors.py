from __future__ import annotations


class PokerError(Exception):
    """Base class for every rule violation raised by the engine."""


class InvalidBetError(PokerError, ValueError):
    """Illegal wager: negative, larger than the stack, or short of the bet to match."""


class InvalidHandError(PokerError, ValueError):
    """Ranking attempted on a hand with the wrong number of cards."""


class InsufficientCardsError(PokerError, RuntimeError):
    """More cards requested than the deck still holds."""
