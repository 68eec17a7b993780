from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from .cards import Deck
from .errors import InsufficientCardsError, InvalidBetError
from .models import (
    CARDS_PER_PLAYER,
    DEAL_SCHEDULE,
    Action,
    ActionType,
    GameConfig,
    Phase,
    Player,
    RoundState,
)
from .providers import ActionProvider

LOGGER = logging.getLogger("poker_engine")

# GameEngine keeps all table state in memory. Decisions come from an
# ActionProvider; nothing here prompts, prints or touches the network.


@dataclass
class HandResult:
    hand_number: int
    winner: str
    amount: int
    category: Optional[str] = None
    events: List[Dict[str, object]] = field(default_factory=list)


def create_players(count: int, starting_chips: int = 1_000) -> List[Player]:
    if count < 2:
        raise ValueError("At least two players are required")
    return [Player(name=f"Player{idx}", chips=starting_chips) for idx in range(1, count + 1)]


def new_game(
    players: Iterable[Player],
    action_provider: ActionProvider,
    config: Optional[GameConfig] = None,
) -> "GameEngine":
    return GameEngine(players, action_provider, config)


class GameEngine:
    """Single table: deal 2, 2 and 1 cards with a betting round after each deal."""

    def __init__(
        self,
        players: Iterable[Player],
        action_provider: ActionProvider,
        config: Optional[GameConfig] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.action_provider = action_provider
        self.state = RoundState()
        self.deck: Optional[Deck] = None
        self.phase: Optional[Phase] = None
        self.hand_number = 0
        self.events: List[Dict[str, object]] = []
        self._players: List[Player] = []
        for player in players:
            self.add_player(player)

    # Table state -----------------------------------------------------

    def add_player(self, player: Player) -> None:
        if any(seated.name == player.name for seated in self._players):
            raise ValueError(f"Duplicate player name: {player.name}")
        self._players.append(player)

    @property
    def players(self) -> List[Player]:
        return list(self._players)

    @property
    def pot(self) -> int:
        return self.state.pot

    @property
    def bet_to_match(self) -> int:
        return self.state.bet_to_match

    def active_players(self) -> List[Player]:
        return [player for player in self._players if not player.folded]

    def can_start_hand(self) -> bool:
        return len(self._players) >= 2

    def is_match_over(self) -> bool:
        return len(self._players) <= 1

    # Hand lifecycle --------------------------------------------------

    def play_hand(self) -> HandResult:
        if not self.can_start_hand():
            raise RuntimeError("Not enough players to start a hand")

        hand_number = self.hand_number + 1
        deck = Deck(self._deck_seed(hand_number))
        needed = len(self._players) * CARDS_PER_PLAYER
        if needed > deck.remaining_count():
            raise InsufficientCardsError(
                f"{len(self._players)} players need {needed} cards, deck has {deck.remaining_count()}"
            )

        self.hand_number = hand_number
        self.deck = deck
        self.events = []
        self.state.bet_to_match = 0
        for player in self._players:
            player.reset_for_hand()
        LOGGER.info("Hand %s started with %s players", hand_number, len(self._players))

        for phase, count in DEAL_SCHEDULE:
            if len(self.active_players()) <= 1:
                break
            self.phase = phase
            self._deal(phase, count)
            self.betting_round()

        self.phase = Phase.SHOWDOWN
        return self.showdown()

    play_one_hand = play_hand

    def run_until_one_player_remains(self, max_hands: Optional[int] = None) -> Optional[Player]:
        limit = max_hands if max_hands is not None else self.config.max_hands
        played = 0
        while not self.is_match_over():
            if limit is not None and played >= limit:
                LOGGER.info("Stopping after %s hands with %s players left", played, len(self._players))
                return None
            self.play_hand()
            played += 1
        winner = self._players[0] if self._players else None
        if winner:
            LOGGER.info("%s wins the match with %s chips", winner.name, winner.chips)
        return winner

    def _deck_seed(self, hand_number: int) -> Optional[int]:
        if self.config.seed is None:
            return None
        return self.config.seed + hand_number

    def _deal(self, phase: Phase, count: int) -> None:
        assert self.deck is not None
        for player in self.active_players():
            cards = self.deck.deal_to(player.hand, count)
            labels = [card.label for card in cards]
            LOGGER.debug("%s dealt %s (%s)", player.name, labels, phase.value)
            self.events.append({"ev": "DEAL", "phase": phase.value, "player": player.name, "cards": labels})

    # Betting ---------------------------------------------------------

    def betting_round(self) -> None:
        self.state.bet_to_match = 0
        for player in self._players:
            player.reset_for_round()

        active = self.active_players()
        if len(active) <= 1:
            return

        passes = 0
        while True:
            passes += 1
            for player in active:
                if player.folded:
                    continue
                self._take_turn(player)
                if len(self.active_players()) == 1:
                    return

            active = [player for player in active if not player.folded]
            if all(player.bet == self.state.bet_to_match for player in active):
                return

            if passes >= self.config.max_betting_passes:
                # The highest active bet stays in so the round can never empty the table.
                top_bet = max(player.bet for player in active)
                LOGGER.warning("Betting round unsettled after %s passes", passes)
                for player in active:
                    if player.bet < top_bet:
                        self._force_fold(player, "betting pass limit")
                return

    def _take_turn(self, player: Player) -> None:
        rejected = 0
        while True:
            action = self.action_provider.get_player_action(player, self.state.bet_to_match)
            try:
                self.apply_action(player, action)
                return
            except InvalidBetError as exc:
                rejected += 1
                LOGGER.warning("Rejected action from %s: %s", player.name, exc)
                self.events.append({"ev": "INVALID_ACTION", "player": player.name, "reason": str(exc)})
                if rejected > self.config.max_invalid_actions:
                    self._force_fold(player, "too many invalid actions")
                    return

    def apply_action(self, player: Player, action: Action) -> None:
        if not isinstance(action, Action):
            raise ValueError(f"Unsupported action {action!r}")

        if action.action == ActionType.FOLD:
            player.fold()
            self.events.append({"ev": "FOLD", "player": player.name})
        elif action.action == ActionType.CHECK:
            player.place_bet(0, self.state)
            self.events.append({"ev": "CHECK", "player": player.name})
        elif action.action == ActionType.BET:
            player.place_bet(action.amount, self.state)
            self.events.append(
                {
                    "ev": "BET",
                    "player": player.name,
                    "amount": action.amount,
                    "bet_to_match": self.state.bet_to_match,
                }
            )
        else:
            raise ValueError(f"Unsupported action {action!r}")
        LOGGER.debug("%s %s (pot=%s, to match=%s)", player.name, action.action.value, self.state.pot, self.state.bet_to_match)

    def _force_fold(self, player: Player, reason: str) -> None:
        player.fold()
        LOGGER.warning("%s force-folded: %s", player.name, reason)
        self.events.append({"ev": "FORCED_FOLD", "player": player.name, "reason": reason})

    # Showdown --------------------------------------------------------

    def showdown(self) -> HandResult:
        contenders = self.active_players()
        if not contenders:
            raise RuntimeError("No active players at showdown")

        winner = contenders[0]
        category: Optional[str] = None
        if len(contenders) > 1:
            best = None
            for player in contenders:
                rank = player.hand.rank()
                self.events.append(
                    {"ev": "SHOWDOWN", "player": player.name, "hand": player.hand.labels(), "rank": rank.label}
                )
                # Strictly greater only: the earliest seat keeps a tie.
                if best is None or rank > best:
                    winner, best = player, rank
            assert best is not None
            category = best.label

        amount = self.state.pot
        winner.chips += amount
        self.state.pot = 0
        self.events.append({"ev": "POT_AWARD", "player": winner.name, "amount": amount})
        if category:
            LOGGER.info("%s won %s chips with %s", winner.name, amount, category)
        else:
            LOGGER.info("%s won %s chips uncontested", winner.name, amount)

        self._remove_broke_players()
        return HandResult(
            hand_number=self.hand_number,
            winner=winner.name,
            amount=amount,
            category=category,
            events=list(self.events),
        )

    def _remove_broke_players(self) -> None:
        for player in self._players:
            if player.chips <= 0:
                LOGGER.info("%s eliminated", player.name)
                self.events.append({"ev": "ELIMINATED", "player": player.name})
        self._players = [player for player in self._players if player.chips > 0]
