from __future__ import annotations

from typing import Callable

from poker_engine.models import Action, Player
from poker_engine.providers import ActionProvider

# TerminalActionProvider asks a human at the keyboard for each decision.

PROMPT = "[C]heck, [B]et <amount>, or [F]old? "


class TerminalActionProvider(ActionProvider):
    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ) -> None:
        self.input_func = input_func
        self.output = output

    def get_player_action(self, player: Player, bet_to_match: int) -> Action:
        to_call = player.amount_to_call(bet_to_match)
        self._render(player, bet_to_match, to_call)
        while True:
            raw = self.input_func(PROMPT)
            try:
                return self.parse_action(raw, player, to_call)
            except ValueError as exc:
                self.output(str(exc))

    def parse_action(self, raw: str, player: Player, to_call: int) -> Action:
        tokens = raw.strip().lower().split()
        if not tokens:
            raise ValueError("Enter c, b <amount> or f")

        choice = tokens[0][0]
        if choice == "f":
            return Action.fold()
        if choice == "c":
            if to_call > 0:
                raise ValueError(f"Bet at least {to_call} or fold.")
            return Action.check()
        if choice == "b":
            amount = self._parse_amount(tokens)
            if amount < 0 or amount > player.chips:
                raise ValueError(f"Amount out of bounds (0-{player.chips})")
            if amount < to_call:
                raise ValueError(f"Bet at least {to_call} or fold.")
            return Action.bet(amount)
        raise ValueError("Illegal selection. Try again.")

    def _parse_amount(self, tokens: list[str]) -> int:
        if len(tokens) < 2:
            raise ValueError("Bet requires an amount, e.g. 'b 20'")
        try:
            return int(tokens[-1])
        except ValueError:
            raise ValueError("Enter a valid integer") from None

    def _render(self, player: Player, bet_to_match: int, to_call: int) -> None:
        cards = " ".join(str(card) for card in player.hand.cards) or "-"
        self.output(f"\n>>> {player.name}: {cards} | chips={player.chips} bet={player.bet}")
        self.output(f"The current bet is {bet_to_match}. To call: {to_call}.")
