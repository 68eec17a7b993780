from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterable, List, Optional, Sequence, Tuple

from .errors import InsufficientCardsError

if TYPE_CHECKING:
    from .hand import Hand

RANK_LABELS = "23456789TJQKA"
RANK_VALUE = {label: value for value, label in enumerate(RANK_LABELS, start=2)}
RANKS = tuple(range(2, 15))


class Suit(str, Enum):
    HEARTS = "h"
    SPADES = "s"
    CLUBS = "c"
    DIAMONDS = "d"

    @property
    def symbol(self) -> str:
        return SUIT_SYMBOLS[self]


SUIT_SYMBOLS = {Suit.HEARTS: "♥", Suit.SPADES: "♠", Suit.CLUBS: "♣", Suit.DIAMONDS: "♦"}
SUITS = tuple(Suit)


@dataclass(frozen=True)
class Card:
    rank: int
    suit: Suit

    def __post_init__(self) -> None:
        if self.rank not in RANKS:
            raise ValueError(f"Invalid rank: {self.rank}")
        if not isinstance(self.suit, Suit):
            raise ValueError(f"Invalid suit: {self.suit}")

    @property
    def label(self) -> str:
        return f"{RANK_LABELS[self.rank - 2]}{self.suit.value}"

    def __str__(self) -> str:
        return f"{RANK_LABELS[self.rank - 2]}{self.suit.symbol}"


def build_cards() -> List[Card]:
    return [Card(rank, suit) for suit in SUITS for rank in RANKS]


class Deck:
    """52 unique cards, shuffled once. Dealing pops from the end of the list."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._cards = build_cards()
        random.Random(seed).shuffle(self._cards)

    def deal(self, count: int) -> List[Card]:
        if count < 0:
            raise ValueError(f"Cannot deal a negative number of cards: {count}")
        if count > len(self._cards):
            raise InsufficientCardsError(
                f"Cannot deal {count} cards from deck of {len(self._cards)}"
            )
        split = len(self._cards) - count
        cards = self._cards[split:]
        del self._cards[split:]
        return cards

    def deal_to(self, hand: "Hand", count: int) -> List[Card]:
        cards = self.deal(count)
        hand.add_cards(cards)
        return cards

    def remaining_count(self) -> int:
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    @property
    def cards(self) -> Tuple[Card, ...]:
        return tuple(self._cards)


def cards_to_labels(cards: Iterable[Card]) -> List[str]:
    return [card.label for card in cards]


def parse_label(label: str) -> Card:
    if len(label) != 2:
        raise ValueError(f"Invalid card label: {label}")
    rank_label, suit_label = label[0].upper(), label[1].lower()
    if rank_label not in RANK_VALUE:
        raise ValueError(f"Invalid rank: {label[0]}")
    try:
        suit = Suit(suit_label)
    except ValueError:
        raise ValueError(f"Invalid suit: {label[1]}") from None
    return Card(RANK_VALUE[rank_label], suit)


def parse_cards(labels: Sequence[str]) -> List[Card]:
    return [parse_label(label) for label in labels]
