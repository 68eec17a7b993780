from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Optional

from .models import Action, Player


class ActionProvider(ABC):
    """Decides what a player does when the engine hands them the turn."""

    @abstractmethod
    def get_player_action(self, player: Player, bet_to_match: int) -> Action:
        """Return the action for ``player`` facing ``bet_to_match``.

        The player's own ``bet``, ``chips`` and ``hand`` are available on the
        player object. Illegal bets are rejected by the engine with
        ``InvalidBetError`` and the provider is asked again.
        """
        ...


class SeatProviders(ActionProvider):
    """Routes each player to their own provider, falling back to a default."""

    def __init__(
        self,
        providers: Optional[Dict[str, ActionProvider]] = None,
        default: Optional[ActionProvider] = None,
    ) -> None:
        self.providers: Dict[str, ActionProvider] = dict(providers or {})
        self.default = default

    def assign(self, player_name: str, provider: ActionProvider) -> None:
        self.providers[player_name] = provider

    def get_player_action(self, player: Player, bet_to_match: int) -> Action:
        provider = self.providers.get(player.name, self.default)
        if provider is None:
            raise RuntimeError(f"No action provider for {player.name}")
        return provider.get_player_action(player, bet_to_match)
