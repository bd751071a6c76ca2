"""
Game events for UI hooks and logging.
Events describe what happened while the game was played; formatting them into
text is left to the presentation helpers in utils.
"""

from dataclasses import dataclass
from typing import Any


@dataclass
class GameEvent:
    """Base event class. All events have a type and payload."""
    type: str
    payload: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "payload": self.payload}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GameEvent":
        return cls(type=data["type"], payload=data.get("payload") or {})


# ===== Event Type Constants =====

# Round/turn events
ROUND_STARTED = "round_started"
TURN_PLAYED = "turn_played"

# Elimination events
PLAYER_KNOCKED_OUT = "player_knocked_out"
ALL_KNOCKED_OUT = "all_knocked_out"

# End of game events
PLAYER_WON = "player_won"
ROUND_LIMIT_REACHED = "round_limit_reached"

# Events that end a game
TERMINAL_EVENTS = frozenset({ALL_KNOCKED_OUT, PLAYER_WON, ROUND_LIMIT_REACHED})


# ===== Event Factory Functions =====

def round_started(round_number: int) -> GameEvent:
    return GameEvent(ROUND_STARTED, {"round_number": round_number})


def turn_played(
    player_id: int,
    round_number: int,
    rolls: list[int],
    total: int,
    score: int,
) -> GameEvent:
    """
    Emitted after every turn, before any knock out or win event for that turn.

    score is the player's score after the turn (unchanged when the roll knocked
    them out).
    """
    return GameEvent(TURN_PLAYED, {
        "player_id": player_id,
        "round_number": round_number,
        "rolls": rolls,
        "total": total,
        "score": score,
    })


def player_knocked_out(player_id: int, number: int) -> GameEvent:
    return GameEvent(PLAYER_KNOCKED_OUT, {
        "player_id": player_id,
        "number": number,
    })


def all_knocked_out() -> GameEvent:
    return GameEvent(ALL_KNOCKED_OUT, {})


def player_won(player_id: int, score: int) -> GameEvent:
    return GameEvent(PLAYER_WON, {
        "player_id": player_id,
        "score": score,
    })


def round_limit_reached(round_number: int) -> GameEvent:
    """Emitted when a game capped with max_rounds runs out of rounds without a result."""
    return GameEvent(ROUND_LIMIT_REACHED, {"round_number": round_number})
