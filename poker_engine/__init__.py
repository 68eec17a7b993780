"""Turn-based five-card poker engine: deck, hand ranking, betting and showdown."""

from .cards import Card, Deck, RANKS, SUITS, Suit, parse_cards, parse_label
from .errors import InsufficientCardsError, InvalidBetError, InvalidHandError, PokerError
from .evaluator import HandCategory, HandRank, rank_best, rank_five
from .game import GameEngine, HandResult, create_players, new_game
from .hand import Hand
from .models import Action, ActionType, GameConfig, Phase, Player, RoundState
from .providers import ActionProvider, SeatProviders

__all__ = [
    "Card",
    "Deck",
    "RANKS",
    "SUITS",
    "Suit",
    "parse_cards",
    "parse_label",
    "InsufficientCardsError",
    "InvalidBetError",
    "InvalidHandError",
    "PokerError",
    "HandCategory",
    "HandRank",
    "rank_best",
    "rank_five",
    "GameEngine",
    "HandResult",
    "create_players",
    "new_game",
    "Hand",
    "Action",
    "ActionType",
    "GameConfig",
    "Phase",
    "Player",
    "RoundState",
    "ActionProvider",
    "SeatProviders",
]
