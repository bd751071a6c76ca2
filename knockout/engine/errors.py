"""
Engine exceptions.
"""


class KnockOutError(Exception):
    """Base class for all engine errors."""


class InvalidConfiguration(KnockOutError, ValueError):
    """Raised when a game, die or random source is built with invalid parameters."""


class RandomSourceExhausted(KnockOutError):
    """Raised when a scripted random source has no values left to return."""
