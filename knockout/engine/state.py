"""
Player state.
Players are owned by a single game; the game is the only thing that mutates them.
Includes JSON-friendly serialization for API responses and replays.
"""

from dataclasses import dataclass
from typing import Any

from knockout.config import KNOCK_OUT_RANGE
from knockout.engine.errors import InvalidConfiguration


def check_knock_out_number(number: Any) -> None:
    """Raise InvalidConfiguration unless number is an int inside KNOCK_OUT_RANGE."""
    low, high = KNOCK_OUT_RANGE
    if isinstance(number, bool) or not isinstance(number, int):
        raise InvalidConfiguration(f"Knock out number must be an integer, got {number!r}")
    if not low <= number <= high:
        raise InvalidConfiguration(f"Knock out number {number} is outside {low}-{high}")


@dataclass
class Player:
    """A player in a Knock Out! game."""
    id: int  # Sequential, starting at 1; also the turn order
    knock_out_number: int  # Rolling exactly this sum knocks the player out; fixed once set
    score: int = 0
    knocked_out: bool = False

    def __post_init__(self):
        check_knock_out_number(self.knock_out_number)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "knock_out_number" and "knock_out_number" in self.__dict__:
            raise AttributeError(f"Player {self.id} knock out number cannot change")
        super().__setattr__(name, value)

    @property
    def is_active(self) -> bool:
        return not self.knocked_out

    def add_score(self, points: int) -> int:
        """Add points to the running score and return the new total."""
        if points < 0:
            raise ValueError(f"Score can only increase, got {points} points for player {self.id}")
        self.score += points
        return self.score

    def knock_out(self) -> None:
        if self.knocked_out:
            raise ValueError(f"Player {self.id} is already knocked out")
        self.knocked_out = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "knock_out_number": self.knock_out_number,
            "score": self.score,
            "knocked_out": self.knocked_out,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Player":
        """
        Build a player from to_dict() output. Missing or bad counters fall back
        to defaults; a missing or invalid knock out number raises InvalidConfiguration.
        """
        if not isinstance(data, dict):
            data = {}
        def _int(v: Any, default: int) -> int:
            try:
                return int(v) if v is not None else default
            except (TypeError, ValueError):
                return default
        knock_out_number = data.get("knock_out_number")
        if knock_out_number is None:
            raise InvalidConfiguration("Player data has no knock out number")
        return cls(
            id=_int(data.get("id"), 0),
            knock_out_number=knock_out_number,
            score=max(0, _int(data.get("score"), 0)),
            knocked_out=bool(data.get("knocked_out", False)),
        )
