"""
Single place for default game configuration.
Change these to tune new games created by the CLI and the API.
"""
import os

# Faces on each die thrown during a turn
DEFAULT_DICE_SIDES = 6

# Inclusive range of the generator feeding the dice
GENERATOR_RANGE = (1, 10)

# Inclusive range a player's knock out number is drawn from
KNOCK_OUT_RANGE = (6, 9)

WINNING_SCORE = 100

DEFAULT_PLAYERS = 4

# Largest game the API will create in a single request
MAX_PLAYERS = 100

# Round cap for CLI/API games; None in the engine means play until a terminal condition
DEFAULT_MAX_ROUNDS = 1000

_raw_origins = os.environ.get("KNOCKOUT_CORS_ORIGINS")
if _raw_origins:
    CORS_ORIGINS = [o.strip() for o in _raw_origins.split(",") if o.strip()]
else:
    CORS_ORIGINS = ["http://localhost:5173", "http://localhost:5174", "http://localhost:3000"]
