from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from .errors import InvalidBetError
from .hand import Hand


class Phase(str, Enum):
    HOLE = "HOLE"
    TURN = "TURN"
    RIVER = "RIVER"
    SHOWDOWN = "SHOWDOWN"


# Cards dealt to every active player before each betting round.
DEAL_SCHEDULE: Tuple[Tuple[Phase, int], ...] = (
    (Phase.HOLE, 2),
    (Phase.TURN, 2),
    (Phase.RIVER, 1),
)
CARDS_PER_PLAYER = sum(count for _, count in DEAL_SCHEDULE)


class ActionType(str, Enum):
    CHECK = "CHECK"
    BET = "BET"
    FOLD = "FOLD"


@dataclass(frozen=True)
class Action:
    action: ActionType
    amount: int = 0

    @classmethod
    def check(cls) -> "Action":
        return cls(ActionType.CHECK)

    @classmethod
    def bet(cls, amount: int) -> "Action":
        return cls(ActionType.BET, amount)

    @classmethod
    def fold(cls) -> "Action":
        return cls(ActionType.FOLD)


@dataclass
class GameConfig:
    starting_chips: int = 1_000
    seed: Optional[int] = None
    max_betting_passes: int = 50
    max_invalid_actions: int = 3
    max_hands: Optional[int] = None

    def __post_init__(self) -> None:
        if self.starting_chips <= 0:
            raise ValueError("starting_chips must be positive")
        if self.max_betting_passes < 1:
            raise ValueError("max_betting_passes must be at least 1")
        if self.max_invalid_actions < 0:
            raise ValueError("max_invalid_actions cannot be negative")


@dataclass
class RoundState:
    # Shared by every player at the table; the engine owns the only instance.
    pot: int = 0
    bet_to_match: int = 0


@dataclass(eq=False)
class Player:
    name: str
    chips: int
    bet: int = 0
    folded: bool = False
    hand: Hand = field(default_factory=Hand)

    def place_bet(self, amount: int, state: RoundState) -> None:
        if self.folded:
            raise InvalidBetError(f"{self.name} has folded")
        if not isinstance(amount, int) or isinstance(amount, bool):
            raise InvalidBetError(f"Bet amount must be a whole number of chips, got {amount!r}")
        if amount < 0 or amount > self.chips:
            raise InvalidBetError(f"You can't bet {amount} with {self.chips} chips")
        if self.bet + amount < state.bet_to_match:
            raise InvalidBetError(
                f"Bet at least {state.bet_to_match - self.bet} or fold."
            )

        self.chips -= amount
        self.bet += amount
        state.pot += amount
        if self.bet > state.bet_to_match:
            state.bet_to_match = self.bet

    def fold(self) -> None:
        self.folded = True

    def amount_to_call(self, bet_to_match: int) -> int:
        return max(bet_to_match - self.bet, 0)

    def can_match(self, bet_to_match: int) -> bool:
        return self.amount_to_call(bet_to_match) <= self.chips

    def reset_for_hand(self) -> None:
        self.bet = 0
        self.folded = False
        self.hand = Hand()

    def reset_for_round(self) -> None:
        self.bet = 0
