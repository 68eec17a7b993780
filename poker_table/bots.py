from __future__ import annotations

import random
from collections import Counter
from typing import Dict, Optional, Sequence

from poker_engine.cards import Card
from poker_engine.evaluator import HAND_SIZE, HandCategory
from poker_engine.hand import Hand
from poker_engine.models import Action, Player
from poker_engine.providers import ActionProvider


def rough_hand_strength(cards: Sequence[Card]) -> int:
    """Very rough proxy for the quality of a partial hand used to drive aggression."""
    if not cards:
        return 0

    ranks = [card.rank for card in cards]
    score = max(ranks)
    for count in Counter(ranks).values():
        if count == 2:
            score += 14  # pairs are quite strong with few cards out
        elif count == 3:
            score += 30
        elif count == 4:
            score += 45

    distinct = sorted(set(ranks))
    if len(distinct) >= 2 and distinct[-1] - distinct[0] == len(distinct) - 1:
        score += 2 * len(distinct)
    if len(cards) >= 2 and len({card.suit for card in cards}) == 1:
        score += 3 * len(cards)
    return score


def hand_strength(hand: Hand) -> int:
    # Once a full hand is out, made categories outrank the partial-hand guess.
    strength = rough_hand_strength(hand.cards)
    if len(hand) < HAND_SIZE:
        return strength
    category = hand.best_rank().category
    if category >= HandCategory.TWO_PAIR:
        return max(strength, 40 + 5 * category)
    return strength


class PassiveBot(ActionProvider):
    """Checks when free, calls when it can afford to, folds otherwise."""

    def get_player_action(self, player: Player, bet_to_match: int) -> Action:
        to_call = player.amount_to_call(bet_to_match)
        if to_call == 0:
            return Action.check()
        if player.can_match(bet_to_match):
            return Action.bet(to_call)
        return Action.fold()


class AggressiveBot(ActionProvider):
    """Demo bot: mixes in random raises with a bias toward stronger cards."""

    def __init__(
        self,
        seed: Optional[int] = None,
        max_raises_per_round: int = 2,
        min_raise: int = 10,
    ) -> None:
        self.rng = random.Random(seed)
        self.max_raises_per_round = max_raises_per_round
        self.min_raise = min_raise
        self._raises: Dict[str, int] = {}

    def get_player_action(self, player: Player, bet_to_match: int) -> Action:
        # A bet of zero means the player has not put chips in this round yet.
        if player.bet == 0:
            self._raises[player.name] = 0

        if not player.can_match(bet_to_match):
            return Action.fold()

        to_call = player.amount_to_call(bet_to_match)
        strength = hand_strength(player.hand)
        facing_bet = to_call > 0
        spare = player.chips - to_call
        raises = self._raises.get(player.name, 0)

        if spare > 0 and raises < self.max_raises_per_round and self._should_raise(strength, facing_bet):
            self._raises[player.name] = raises + 1
            return Action.bet(to_call + self._choose_raise_amount(spare))

        if not facing_bet:
            return Action.check()
        # Weak holdings give up against large bets.
        if strength < 12 and to_call > player.chips // 4:
            return Action.fold()
        return Action.bet(to_call)

    def _should_raise(self, strength: int, facing_bet: bool) -> bool:
        # Always attack with trips or better.
        if strength >= 40:
            return True
        base = 0.15 if facing_bet else 0.3
        probability = min(0.8, base + min(strength / 60.0, 0.4))
        return self.rng.random() < probability

    def _choose_raise_amount(self, spare: int) -> int:
        if spare <= self.min_raise:
            return spare
        upper = max(self.min_raise, spare // 4)
        roll = self.rng.random()
        if roll < 0.35:
            return self.min_raise
        if roll > 0.95:
            return spare
        return self.rng.randint(self.min_raise, upper)
