from poker_engine.game import new_game
from poker_engine.models import Action, GameConfig, Player

from .helpers import ScriptedActionProvider, create_engine, stack_deck, total_chips


def test_broke_player_is_eliminated_after_showdown(monkeypatch):
    stack_deck(
        monkeypatch,
        [
            ["2c", "3d", "5h", "7s", "9c"],
            ["Ah", "Ad", "Kc", "Qs", "Jh"],
        ],
    )
    short, big = Player("Short", 100), Player("Big", 1_000)
    engine = new_game([short, big], ScriptedActionProvider({"Short": [Action.bet(100)]}))

    result = engine.play_hand()

    assert result.winner == "Big"
    assert result.amount == 200
    assert {"ev": "ELIMINATED", "player": "Short"} in result.events
    assert engine.players == [big]
    assert big.chips == 1_100
    assert engine.is_match_over()
    assert engine.run_until_one_player_remains() is big
    assert engine.hand_number == 1


def test_state_resets_between_hands():
    engine, _ = create_engine(3, seed=21, scripts={"Player2": [Action.fold()]})
    engine.play_hand()
    first_hands = [player.hand for player in engine.players]

    engine.play_hand()
    assert engine.hand_number == 2
    assert engine.pot == 0
    assert not any(player.folded for player in engine.players)
    assert all(len(player.hand) == 5 for player in engine.players)
    assert all(new is not old for new, old in zip((p.hand for p in engine.players), first_hands))


def test_seeded_games_deal_identical_hands():
    first, _ = create_engine(3, seed=7)
    second, _ = create_engine(3, seed=7)
    a = first.play_hand()
    b = second.play_hand()
    assert [ev for ev in a.events if ev["ev"] == "DEAL"] == [ev for ev in b.events if ev["ev"] == "DEAL"]

    # Each hand gets its own deck order.
    c = first.play_hand()
    assert [ev["cards"] for ev in c.events if ev["ev"] == "DEAL"] != [
        ev["cards"] for ev in a.events if ev["ev"] == "DEAL"
    ]


def test_run_stops_at_hand_limit_without_a_winner():
    engine, _ = create_engine(3, seed=1)
    assert engine.run_until_one_player_remains(max_hands=3) is None
    assert engine.hand_number == 3
    assert len(engine.players) == 3


def test_run_uses_configured_hand_limit():
    engine, _ = create_engine(2, seed=1, max_hands=2)
    assert engine.run_until_one_player_remains() is None
    assert engine.hand_number == 2


def test_run_plays_until_one_player_remains(monkeypatch):
    stack_deck(
        monkeypatch,
        [
            ["Ah", "Ad", "Ac", "Qs", "Jh"],
            ["2c", "3d", "5h", "7s", "9c"],
            ["2d", "3c", "4h", "6s", "8c"],
        ],
    )
    provider = ScriptedActionProvider(
        {
            "Player1": [Action.bet(300)],
            "Player2": [Action.bet(300)],
            "Player3": [Action.bet(300)],
        }
    )
    players = [Player(f"Player{idx}", 300) for idx in range(1, 4)]
    engine = new_game(players, provider, GameConfig(starting_chips=300))

    winner = engine.run_until_one_player_remains(max_hands=5)

    assert winner is players[0]
    assert winner.chips == 900
    assert engine.hand_number == 1
    assert total_chips(engine) == 900


def test_accessors_reflect_round_state():
    engine, _ = create_engine(2)
    engine.state.pot = 70
    engine.state.bet_to_match = 30
    assert engine.pot == 70
    assert engine.bet_to_match == 30
    engine.players.clear()
    assert len(engine.players) == 2
