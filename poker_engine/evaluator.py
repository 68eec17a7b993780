from __future__ import annotations

import itertools
from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Sequence, Tuple

from .cards import Card
from .errors import InvalidHandError

HAND_SIZE = 5
MAX_CARDS = 7
WHEEL = (2, 3, 4, 5, 14)


class HandCategory(IntEnum):
    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", " ")


@dataclass(frozen=True, order=True)
class HandRank:
    """Strength of a five-card hand. Compares by category, then tiebreak."""

    category: HandCategory
    tiebreak: Tuple[int, ...]

    @property
    def label(self) -> str:
        return self.category.label


def rank_five(cards: Sequence[Card]) -> HandRank:
    if len(cards) != HAND_SIZE:
        raise InvalidHandError(f"Expected {HAND_SIZE} cards, got {len(cards)}")
    return _evaluate_five(cards)


def rank_best(cards: Sequence[Card]) -> HandRank:
    """Return the strongest five-card rank found among 5 to 7 cards."""
    if not HAND_SIZE <= len(cards) <= MAX_CARDS:
        raise InvalidHandError(
            f"Expected {HAND_SIZE} to {MAX_CARDS} cards, got {len(cards)}"
        )
    return max(_evaluate_five(combo) for combo in itertools.combinations(cards, HAND_SIZE))


def _evaluate_five(cards: Sequence[Card]) -> HandRank:
    ordered = sorted(cards, key=lambda card: card.rank)
    ranks = [card.rank for card in ordered]
    descending = tuple(reversed(ranks))

    is_flush = len({card.suit for card in ordered}) == 1
    straight_high = _straight_high(ranks)

    counts = Counter(ranks)
    # Highest multiplicity first, then highest rank.
    ordered_counts = sorted(counts.items(), key=lambda item: (item[1], item[0]), reverse=True)
    count_values = [count for _, count in ordered_counts]

    if straight_high and is_flush:
        if straight_high == 14:
            return HandRank(HandCategory.ROYAL_FLUSH, (straight_high,))
        return HandRank(HandCategory.STRAIGHT_FLUSH, (straight_high,))
    if count_values[0] == 4:
        quad_rank, kicker = ordered_counts[0][0], ordered_counts[1][0]
        return HandRank(HandCategory.FOUR_OF_A_KIND, (quad_rank, kicker))
    if count_values[0] == 3 and count_values[1] == 2:
        return HandRank(HandCategory.FULL_HOUSE, (ordered_counts[0][0], ordered_counts[1][0]))
    if is_flush:
        return HandRank(HandCategory.FLUSH, descending)
    if straight_high:
        return HandRank(HandCategory.STRAIGHT, (straight_high,))
    if count_values[0] == 3:
        return HandRank(HandCategory.THREE_OF_A_KIND, tuple(rank for rank, _ in ordered_counts))
    if count_values[0] == 2 and count_values[1] == 2:
        return HandRank(HandCategory.TWO_PAIR, tuple(rank for rank, _ in ordered_counts))
    if count_values[0] == 2:
        return HandRank(HandCategory.PAIR, tuple(rank for rank, _ in ordered_counts))
    return HandRank(HandCategory.HIGH_CARD, descending)


def _straight_high(ranks: Sequence[int]) -> Optional[int]:
    """High card of a straight over sorted ranks. The wheel plays ace low."""
    if tuple(ranks) == WHEEL:
        return 5
    for previous, current in zip(ranks, ranks[1:]):
        if current != previous + 1:
            return None
    return ranks[-1]
