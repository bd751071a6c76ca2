"""
Tests for event formatting and player state.
"""

import pytest

from knockout.engine.events import (
    GameEvent,
    all_knocked_out,
    player_knocked_out,
    player_won,
    round_limit_reached,
    round_started,
    turn_played,
)
from knockout.engine.errors import InvalidConfiguration
from knockout.engine.game import KnockOut
from knockout.engine.state import Player
from knockout.engine.utils import format_event, format_events, print_game_log, print_standings


def test_outcome_messages():
    assert format_event(player_knocked_out(3, 8)) == "Player 3 is knocked out by rolling: 8"
    assert format_event(all_knocked_out()) == "All players have been knocked out!"
    assert format_event(player_won(2, 104)) == "Player 2 has won with a final score of 104."
    assert format_event(round_limit_reached(1000)) == "Round limit of 1000 reached with no winner."


def test_turn_events_only_shown_when_verbose():
    turn = turn_played(1, 4, [3, 5], 8, 37)
    assert format_event(turn) is None
    assert format_event(round_started(4)) is None
    assert format_event(turn, verbose=True) == "Round 4: Player 1 rolled 3 + 5 = 8 (score 37)"
    assert format_event(round_started(4), verbose=True) == "--- Round 4 ---"


def test_format_events_skips_hidden_events():
    events = [round_started(1), turn_played(1, 1, [3, 4], 7, 0), player_knocked_out(1, 7), all_knocked_out()]
    assert format_events(events) == [
        "Player 1 is knocked out by rolling: 7",
        "All players have been knocked out!",
    ]
    assert len(format_events(events, verbose=True)) == 4


def test_unknown_event_type_is_not_shown():
    assert format_event(GameEvent("something_else", {}), verbose=True) is None


def test_event_dict_round_trip():
    event = player_won(1, 100)
    assert event.to_dict() == {"type": "player_won", "payload": {"player_id": 1, "score": 100}}
    assert GameEvent.from_dict(event.to_dict()) == event


def test_print_game_log(capsys):
    print_game_log([player_knocked_out(1, 6), all_knocked_out()])
    assert capsys.readouterr().out.splitlines() == [
        "Player 1 is knocked out by rolling: 6",
        "All players have been knocked out!",
    ]


def test_print_standings(capsys):
    game = KnockOut(2, knock_out_numbers=[6, 9])
    game.players[1].add_score(12)
    game.players[0].knock_out()
    print_standings(game)
    out = capsys.readouterr().out
    assert "Player 2: score= 12 knock out number=9 (active)" in out
    assert "Player 1: score=  0 knock out number=6 (knocked out)" in out
    assert out.index("Player 2") < out.index("Player 1")


def test_player_defaults():
    player = Player(id=1, knock_out_number=7)
    assert player.score == 0
    assert player.is_active


def test_player_score_only_increases():
    player = Player(id=1, knock_out_number=7)
    assert player.add_score(5) == 5
    with pytest.raises(ValueError):
        player.add_score(-1)
    assert player.score == 5


def test_player_knocked_out_once():
    player = Player(id=1, knock_out_number=7)
    player.knock_out()
    assert not player.is_active
    with pytest.raises(ValueError):
        player.knock_out()


def test_player_from_dict_tolerates_bad_values():
    player = Player.from_dict({"id": "2", "knock_out_number": 8, "score": "x", "knocked_out": 1})
    assert player == Player(id=2, knock_out_number=8, score=0, knocked_out=True)
    assert Player.from_dict(Player(3, 6, 40).to_dict()) == Player(3, 6, 40)


def test_player_knock_out_number_is_fixed():
    player = Player(id=1, knock_out_number=7)
    with pytest.raises(AttributeError):
        player.knock_out_number = 6
    assert player.knock_out_number == 7
    player.add_score(3)
    player.knock_out()
    assert player.knock_out_number == 7


@pytest.mark.parametrize("number", [0, 5, 10, 7.5, "7", True, None])
def test_player_rejects_invalid_knock_out_number(number):
    with pytest.raises(InvalidConfiguration):
        Player(id=1, knock_out_number=number)


@pytest.mark.parametrize("data", [
    {"id": 1, "score": 3},
    {"id": 1, "knock_out_number": None},
    {"id": 1, "knock_out_number": 0},
    {"id": 1, "knock_out_number": "x"},
    {},
])
def test_player_from_dict_rejects_bad_knock_out_number(data):
    with pytest.raises(InvalidConfiguration):
        Player.from_dict(data)
