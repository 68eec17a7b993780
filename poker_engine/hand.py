from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from .cards import Card, cards_to_labels
from .evaluator import HandRank, rank_best, rank_five


class Hand:
    """Cards held by one player. Ranking needs exactly five of them."""

    def __init__(self, cards: Optional[Iterable[Card]] = None) -> None:
        self._cards: List[Card] = list(cards) if cards is not None else []

    def add_card(self, card: Card) -> None:
        self._cards.append(card)

    def add_cards(self, cards: Iterable[Card]) -> None:
        for card in cards:
            self.add_card(card)

    @property
    def cards(self) -> Tuple[Card, ...]:
        return tuple(self._cards)

    def labels(self) -> List[str]:
        return cards_to_labels(self._cards)

    def rank(self) -> HandRank:
        return rank_five(self._cards)

    def best_rank(self) -> HandRank:
        return rank_best(self._cards)

    def category_label(self) -> str:
        return self.rank().label

    def __len__(self) -> int:
        return len(self._cards)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.rank() == other.rank()

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: "Hand") -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.rank() < other.rank()

    def __le__(self, other: "Hand") -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.rank() <= other.rank()

    def __gt__(self, other: "Hand") -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.rank() > other.rank()

    def __ge__(self, other: "Hand") -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.rank() >= other.rank()

    def __repr__(self) -> str:
        return f"Hand({' '.join(self.labels())})"
