"""
FastAPI backend for Knock Out!
Provides REST API endpoints for creating, stepping and inspecting games.
"""

import uuid
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from knockout.config import CORS_ORIGINS, DEFAULT_MAX_ROUNDS, MAX_PLAYERS
from knockout.engine.errors import InvalidConfiguration
from knockout.engine.events import GameEvent
from knockout.engine.game import KnockOut
from knockout.engine.utils import format_events, initialize_game

app = FastAPI(
    title="Knock Out! API",
    description="Backend API for Knock Out! - a two-dice elimination game",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request, call_next):
    """Log method and path so 500s can be traced to the failing endpoint."""
    method = getattr(request, "method", "?")
    url = getattr(request, "url", None)
    path = url.path if url else "?"
    try:
        response = await call_next(request)
        if response.status_code >= 500:
            print(f"[500] {method} {path}", flush=True)
        return response
    except Exception:
        print(f"[500] {method} {path} (exception)", flush=True)
        raise


@app.exception_handler(Exception)
async def unhandled_exception_handler(request, exc):
    """Return 500 with the error detail so clients can read it."""
    return JSONResponse(status_code=500, content={"detail": str(exc)})


# In-memory store of games, keyed by game_id
games: dict[str, KnockOut] = {}


# ===== Pydantic Models =====

class CreateGameRequest(BaseModel):
    number_of_players: int = Field(ge=1, le=MAX_PLAYERS)
    """Optional seed; the same seed and player count replay the same game."""
    seed: int | None = None
    """Explicit knock out numbers (6-9), one per player in id order."""
    knock_out_numbers: list[int] | None = None
    max_rounds: int | None = DEFAULT_MAX_ROUNDS


# ===== Helpers =====

def create_game(request: CreateGameRequest) -> tuple[str, KnockOut]:
    """Build and store a game; raise 400 on an invalid configuration."""
    try:
        game = initialize_game(
            request.number_of_players,
            seed=request.seed,
            knock_out_numbers=request.knock_out_numbers,
            max_rounds=request.max_rounds,
        )
    except InvalidConfiguration as e:
        raise HTTPException(status_code=400, detail=str(e))
    game_id = str(uuid.uuid4())
    games[game_id] = game
    return game_id, game


def get_game(game_id: str) -> KnockOut:
    """Get a game; raise 404 if not found."""
    game = games.get(game_id)
    if game is None:
        raise HTTPException(status_code=404, detail=f"Game {game_id} not found")
    return game


def events_response(game: KnockOut, events: list[GameEvent]) -> dict[str, Any]:
    return {
        "game": game.to_dict(),
        "events": [e.to_dict() for e in events],
        "messages": format_events(events),
    }


# ===== Endpoints =====

@app.get("/")
def root():
    return {"message": "Knock Out! API", "status": "running"}


@app.get("/games")
def list_games():
    """Summaries of every stored game."""
    return [
        {
            "game_id": game_id,
            "number_of_players": len(game.players),
            "terminated": game.terminated,
            "round_number": game.round_number,
        }
        for game_id, game in games.items()
    ]


@app.post("/games")
def create_and_play_game(request: CreateGameRequest):
    """Create a game and play it to the end."""
    game_id, game = create_game(request)
    events = game.play()
    return {"game_id": game_id, **events_response(game, events)}


@app.post("/games/new")
def create_new_game(request: CreateGameRequest):
    """Create a game without playing it; step it with /games/{game_id}/round."""
    game_id, game = create_game(request)
    return {"game_id": game_id, "game": game.to_dict()}


@app.get("/games/{game_id}")
def get_game_state(game_id: str):
    game = get_game(game_id)
    return {
        "game_id": game_id,
        "game": game.to_dict(),
        "messages": format_events(game.events),
    }


@app.get("/games/{game_id}/events")
def get_game_events(game_id: str):
    """Full event log of a game, in order."""
    game = get_game(game_id)
    return {"game_id": game_id, "events": [e.to_dict() for e in game.events]}


@app.post("/games/{game_id}/round")
def play_round(game_id: str):
    """Play a single round. A finished game returns no events."""
    game = get_game(game_id)
    events = game.play_round()
    return {"game_id": game_id, **events_response(game, events)}


@app.post("/games/{game_id}/play")
def play_game(game_id: str):
    """Play the remaining rounds. A finished game returns no events."""
    game = get_game(game_id)
    events = game.play()
    return {"game_id": game_id, **events_response(game, events)}


@app.delete("/games/{game_id}")
def delete_game(game_id: str):
    """Remove a game from the store."""
    get_game(game_id)
    del games[game_id]
    return {"game_id": game_id, "deleted": True}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
