"""
The Knock Out! game loop.

Rules:
1. Each player has a knock out number: 6, 7, 8 or 9. Several players may share one.
2. Players take turns throwing both dice, once each turn. The sum is added to
   the player's running score.
3. A player who rolls their own knock out number is knocked out.
4. Play ends when all players have been knocked out, or a single player
   scores 100 points or more.

The game never prints; play() and play_round() return the events they produced.
"""

from typing import Any, Protocol

from knockout.config import DEFAULT_DICE_SIDES, KNOCK_OUT_RANGE, WINNING_SCORE
from knockout.engine import DICE_PER_TURN
from knockout.engine.dice import Dice
from knockout.engine.errors import InvalidConfiguration
from knockout.engine.events import (
    GameEvent,
    all_knocked_out,
    player_knocked_out,
    player_won,
    round_limit_reached,
    round_started,
    turn_played,
)
from knockout.engine.random_source import OneThroughTen, RandomSource, UniformRandomSource
from knockout.engine.state import Player, check_knock_out_number


class DiceGame(Protocol):
    """A game played with a single shared die."""

    dice: Dice

    def play(self) -> list[GameEvent]:
        ...


class KnockOut:
    """
    A game of Knock Out!

    Args:
        number_of_players: How many players to create (ids 1..number_of_players)
        dice: Die thrown twice per turn. Defaults to a d6 fed by OneThroughTen.
        knock_out_source: Random source for knock out numbers. Defaults to a
            uniform draw over KNOCK_OUT_RANGE.
        knock_out_numbers: Explicit knock out numbers, one per player in id
            order. Takes precedence over knock_out_source.
        winning_score: Score that wins the game
        max_rounds: Optional cap on rounds; reaching it ends the game with no winner
    """

    def __init__(
        self,
        number_of_players: int,
        dice: Dice | None = None,
        knock_out_source: RandomSource | None = None,
        knock_out_numbers: list[int] | None = None,
        winning_score: int = WINNING_SCORE,
        max_rounds: int | None = None,
    ):
        if isinstance(number_of_players, bool) or not isinstance(number_of_players, int):
            raise InvalidConfiguration(f"Number of players must be an integer, got {number_of_players!r}")
        if number_of_players < 1:
            raise InvalidConfiguration(f"A game needs at least one player, got {number_of_players}")
        if winning_score < 1:
            raise InvalidConfiguration(f"Winning score must be positive, got {winning_score}")
        if max_rounds is not None and max_rounds < 1:
            raise InvalidConfiguration(f"max_rounds must be at least 1, got {max_rounds}")

        self.dice = dice if dice is not None else Dice(DEFAULT_DICE_SIDES, OneThroughTen())
        self.winning_score = winning_score
        self.max_rounds = max_rounds

        numbers = _pick_knock_out_numbers(number_of_players, knock_out_source, knock_out_numbers)
        self.players: list[Player] = [
            Player(id=player_id, knock_out_number=number)
            for player_id, number in enumerate(numbers, start=1)
        ]

        self.round_number = 0
        self.terminated = False
        self.events: list[GameEvent] = []
        self._active_count = number_of_players
        self._winner_id: int | None = None
        # Index of the next player to act in an unfinished round; None between rounds
        self._next_turn: int | None = None

    # ===== Queries =====

    def active_players(self) -> list[Player]:
        return [p for p in self.players if p.is_active]

    def get_player(self, player_id: int) -> Player:
        if not 1 <= player_id <= len(self.players):
            raise KeyError(f"No player with id {player_id}")
        return self.players[player_id - 1]

    def winner(self) -> Player | None:
        if self._winner_id is None:
            return None
        return self.get_player(self._winner_id)

    def leader(self) -> Player:
        """Highest scoring player; ties go to the lower id."""
        return max(self.players, key=lambda p: (p.score, -p.id))

    # ===== Play =====

    def play(self) -> list[GameEvent]:
        """
        Play rounds until the game ends and return the events produced.
        A game that has already ended is left untouched and returns [].
        """
        produced: list[GameEvent] = []
        while not self.terminated:
            produced.extend(self.play_round())
        return produced

    def play_round(self) -> list[GameEvent]:
        """
        Give every active player one turn, in id order.

        The round stops as soon as a turn ends the game, so later players in the
        same round do not roll. Returns [] when the game has already ended.

        If the dice raise partway through, the round stays open and the next
        call resumes it at the player whose turn failed.
        """
        if self.terminated:
            return []

        produced: list[GameEvent] = []
        if self._next_turn is None:
            self.round_number += 1
            self._next_turn = 0
            self._emit(round_started(self.round_number), produced)

        for index in range(self._next_turn, len(self.players)):
            player = self.players[index]
            self._next_turn = index
            if player.knocked_out:
                continue
            self._play_turn(player, produced)
            if self.terminated:
                break
        self._next_turn = None

        if not self.terminated and self.max_rounds is not None and self.round_number >= self.max_rounds:
            self.terminated = True
            self._emit(round_limit_reached(self.round_number), produced)

        return produced

    def _play_turn(self, player: Player, produced: list[GameEvent]) -> None:
        rolls = self.dice.roll_many(DICE_PER_TURN)
        total = sum(rolls)

        if total == player.knock_out_number:
            player.knock_out()
            self._active_count -= 1
            self._emit(turn_played(player.id, self.round_number, rolls, total, player.score), produced)
            self._emit(player_knocked_out(player.id, player.knock_out_number), produced)
            if self._active_count == 0:
                self.terminated = True
                self._emit(all_knocked_out(), produced)
            return

        player.add_score(total)
        self._emit(turn_played(player.id, self.round_number, rolls, total, player.score), produced)
        if player.score >= self.winning_score:
            self.terminated = True
            self._winner_id = player.id
            self._emit(player_won(player.id, player.score), produced)

    def _emit(self, event: GameEvent, produced: list[GameEvent]) -> None:
        self.events.append(event)
        produced.append(event)

    def to_dict(self) -> dict[str, Any]:
        return {
            "number_of_players": len(self.players),
            "round_number": self.round_number,
            "terminated": self.terminated,
            "winning_score": self.winning_score,
            "max_rounds": self.max_rounds,
            "winner": self._winner_id,
            "players": [p.to_dict() for p in self.players],
        }


def _pick_knock_out_numbers(
    number_of_players: int,
    source: RandomSource | None,
    explicit: list[int] | None,
) -> list[int]:
    if explicit is not None:
        numbers = list(explicit)
        if len(numbers) != number_of_players:
            raise InvalidConfiguration(
                f"Expected {number_of_players} knock out numbers, got {len(numbers)}"
            )
    else:
        if source is None:
            source = UniformRandomSource(*KNOCK_OUT_RANGE)
        numbers = [source.random() for _ in range(number_of_players)]

    for number in numbers:
        check_knock_out_number(number)
    return numbers
