from __future__ import annotations

from collections import deque
from typing import Deque, Dict, Iterable, List, Optional, Sequence, Tuple

from poker_engine.cards import Deck, parse_cards
from poker_engine.game import GameEngine, create_players, new_game
from poker_engine.hand import Hand
from poker_engine.models import DEAL_SCHEDULE, Action, GameConfig, Player
from poker_engine.providers import ActionProvider


class ScriptedActionProvider(ActionProvider):
    """Replays queued actions per player; checks or calls once a script runs dry."""

    def __init__(self, scripts: Optional[Dict[str, Iterable[Action]]] = None) -> None:
        self.scripts: Dict[str, Deque[Action]] = {
            name: deque(actions) for name, actions in (scripts or {}).items()
        }
        self.calls: List[Tuple[str, int]] = []

    def queue(self, name: str, *actions: Action) -> None:
        self.scripts.setdefault(name, deque()).extend(actions)

    def get_player_action(self, player: Player, bet_to_match: int) -> Action:
        self.calls.append((player.name, bet_to_match))
        script = self.scripts.get(player.name)
        if script:
            return script.popleft()
        to_call = max(bet_to_match - player.bet, 0)
        return Action.bet(to_call) if to_call else Action.check()


class StackedDeck(Deck):
    """Deck that deals the given five-card hands, in seat order, through the 2-2-1 schedule."""

    def __init__(self, hands: Sequence[Sequence[str]]) -> None:
        super().__init__(seed=0)
        dealt = [parse_cards(labels) for labels in hands]
        groups = []
        offset = 0
        for _, count in DEAL_SCHEDULE:
            for cards in dealt:
                groups.append(cards[offset : offset + count])
            offset += count

        used = {card for cards in dealt for card in cards}
        rest = [card for card in self._cards if card not in used]
        # deal() takes from the end, so the first group goes last.
        self._cards = rest + [card for group in reversed(groups) for card in group]


def make_hand(*labels: str) -> Hand:
    return Hand(parse_cards(labels))


def create_engine(
    count: int = 3,
    *,
    starting_chips: int = 1_000,
    scripts: Optional[Dict[str, Iterable[Action]]] = None,
    **config_overrides: object,
) -> Tuple[GameEngine, ScriptedActionProvider]:
    """Instantiate an engine seated with Player1..PlayerN and a scripted provider."""
    config = GameConfig(starting_chips=starting_chips, **config_overrides)  # type: ignore[arg-type]
    provider = ScriptedActionProvider(scripts)
    engine = new_game(create_players(count, starting_chips), provider, config)
    return engine, provider


def stack_deck(monkeypatch, hands: Sequence[Sequence[str]]) -> None:
    monkeypatch.setattr("poker_engine.game.Deck", lambda seed=None: StackedDeck(hands))


def total_chips(engine: GameEngine) -> int:
    return sum(player.chips for player in engine.players) + engine.pot
