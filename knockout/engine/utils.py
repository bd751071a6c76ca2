"""
Helpers for setting up games and presenting their events as text.
"""

import random

from knockout.config import DEFAULT_DICE_SIDES, KNOCK_OUT_RANGE, WINNING_SCORE
from knockout.engine.dice import Dice
from knockout.engine.events import (
    ALL_KNOCKED_OUT,
    PLAYER_KNOCKED_OUT,
    PLAYER_WON,
    ROUND_LIMIT_REACHED,
    ROUND_STARTED,
    TURN_PLAYED,
    GameEvent,
)
from knockout.engine.game import KnockOut
from knockout.engine.random_source import OneThroughTen, UniformRandomSource


def initialize_game(
    number_of_players: int,
    seed: int | None = None,
    knock_out_numbers: list[int] | None = None,
    max_rounds: int | None = None,
    winning_score: int = WINNING_SCORE,
) -> KnockOut:
    """
    Create a game with the default d6.

    Args:
        number_of_players: Players to create
        seed: Optional random seed; one random.Random(seed) feeds both the dice
            and the knock out numbers, so the same seed replays the same game
        knock_out_numbers: Optional explicit knock out numbers, one per player
        max_rounds: Optional round cap
        winning_score: Score that wins the game
    """
    rng = random.Random(seed)
    low, high = KNOCK_OUT_RANGE
    return KnockOut(
        number_of_players,
        dice=Dice(DEFAULT_DICE_SIDES, OneThroughTen(rng)),
        knock_out_source=UniformRandomSource(low, high, rng),
        knock_out_numbers=knock_out_numbers,
        winning_score=winning_score,
        max_rounds=max_rounds,
    )


def format_event(event: GameEvent, verbose: bool = False) -> str | None:
    """
    Turn an event into a line of text.
    Returns None for events that are only shown when verbose is set.
    """
    payload = event.payload
    if event.type == PLAYER_KNOCKED_OUT:
        return f"Player {payload['player_id']} is knocked out by rolling: {payload['number']}"
    if event.type == ALL_KNOCKED_OUT:
        return "All players have been knocked out!"
    if event.type == PLAYER_WON:
        return f"Player {payload['player_id']} has won with a final score of {payload['score']}."
    if event.type == ROUND_LIMIT_REACHED:
        return f"Round limit of {payload['round_number']} reached with no winner."
    if not verbose:
        return None
    if event.type == ROUND_STARTED:
        return f"--- Round {payload['round_number']} ---"
    if event.type == TURN_PLAYED:
        rolls = " + ".join(str(r) for r in payload["rolls"])
        return (
            f"Round {payload['round_number']}: Player {payload['player_id']} rolled "
            f"{rolls} = {payload['total']} (score {payload['score']})"
        )
    return None


def format_events(events: list[GameEvent], verbose: bool = False) -> list[str]:
    lines = []
    for event in events:
        line = format_event(event, verbose)
        if line is not None:
            lines.append(line)
    return lines


def print_game_log(events: list[GameEvent], verbose: bool = False):
    """Print the text for each event, in order."""
    for line in format_events(events, verbose):
        print(line)


def print_standings(game: KnockOut):
    """Pretty-print every player's score and status."""
    print(f"\n{'='*60}")
    print(f"Knock Out! | Players: {len(game.players)} | Rounds played: {game.round_number}")
    print(f"{'='*60}")
    winner = game.winner()
    for player in sorted(game.players, key=lambda p: (-p.score, p.id)):
        if winner is not None and player.id == winner.id:
            status = "winner"
        elif player.knocked_out:
            status = "knocked out"
        else:
            status = "active"
        print(f"  Player {player.id}: score={player.score:>3} "
              f"knock out number={player.knock_out_number} ({status})")
    print()
