from poker_engine.game import new_game
from poker_engine.models import Action, GameConfig, Player
from poker_engine.providers import ActionProvider

from .helpers import create_engine, total_chips


class AlwaysRaise(ActionProvider):
    """Faulty provider that never stops raising."""

    def get_player_action(self, player: Player, bet_to_match: int) -> Action:
        return Action.bet(bet_to_match - player.bet + 10)


def test_reraises_propagate_bet_to_match():
    engine, provider = create_engine(
        3,
        scripts={
            "Player1": [Action.bet(10), Action.bet(90)],
            "Player2": [Action.bet(40), Action.bet(60)],
            "Player3": [Action.bet(100)],
        },
    )
    engine.betting_round()

    # P1 10 -> P2 40 -> P3 100 -> P1 calls 90 -> P2 calls 60 -> P3 checks.
    assert engine.bet_to_match == 100
    assert engine.pot == 300
    assert [bet for _, bet in provider.calls] == [0, 10, 40, 100, 100, 100]


def test_pass_limit_force_folds_players_short_of_the_top_bet():
    config = GameConfig(max_betting_passes=3, seed=3)
    players = [Player("Alpha", 1000), Player("Beta", 1000)]
    engine = new_game(players, AlwaysRaise(), config)

    result = engine.play_hand()

    forced = [ev for ev in result.events if ev["ev"] == "FORCED_FOLD"]
    assert forced == [{"ev": "FORCED_FOLD", "player": "Alpha", "reason": "betting pass limit"}]
    assert result.winner == "Beta"
    assert result.amount == 110
    assert [player.chips for player in engine.players] == [950, 1050]
    assert total_chips(engine) == 2000


def test_invalid_actions_are_requested_again():
    engine, provider = create_engine(
        3,
        seed=9,
        scripts={"Player1": [Action.bet(-5), Action.bet(5_000), Action.check()]},
    )
    result = engine.play_hand()

    invalid = [ev for ev in result.events if ev["ev"] == "INVALID_ACTION"]
    assert [ev["player"] for ev in invalid] == ["Player1", "Player1"]
    assert not any(ev["ev"] == "FORCED_FOLD" for ev in result.events)
    assert provider.calls[:3] == [("Player1", 0)] * 3
    assert not engine.players[0].folded


def test_too_many_invalid_actions_force_fold():
    engine, _ = create_engine(
        3,
        seed=11,
        max_invalid_actions=1,
        scripts={"Player1": [Action.bet(-1), Action.bet(-1)]},
    )
    result = engine.play_hand()

    forced = [ev for ev in result.events if ev["ev"] == "FORCED_FOLD"]
    assert forced == [{"ev": "FORCED_FOLD", "player": "Player1", "reason": "too many invalid actions"}]
    assert engine.players[0].folded
    assert result.winner in ("Player2", "Player3")
    assert len(engine.players[0].hand) == 2


def test_check_facing_a_bet_is_rejected_then_call_accepted():
    engine, _ = create_engine(
        2,
        scripts={
            "Player1": [Action.bet(25)],
            "Player2": [Action.check(), Action.bet(25)],
        },
    )
    engine.betting_round()
    assert engine.events[1]["ev"] == "INVALID_ACTION"
    assert "Bet at least 25" in engine.events[1]["reason"]
    assert [player.bet for player in engine.players] == [25, 25]
