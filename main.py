"""
Main entry point for the Knock Out! dice game.
Plays a single game in the terminal, or serves the API.

    python main.py 4 --seed 42 --verbose
    python main.py serve --port 8000
"""

import argparse
import sys

from knockout.config import DEFAULT_MAX_ROUNDS, DEFAULT_PLAYERS
from knockout.engine.errors import InvalidConfiguration
from knockout.engine.utils import initialize_game, print_game_log, print_standings


def play(args) -> int:
    print("Knock Out! - first to 100 wins, roll your knock out number and you're out")
    print("=" * 60)

    try:
        game = initialize_game(args.players, seed=args.seed, max_rounds=args.max_rounds)
    except InvalidConfiguration as e:
        print(f"✗ Could not start game: {e}")
        return 2

    print("Knock out numbers:")
    for player in game.players:
        print(f"  Player {player.id}: {player.knock_out_number}")
    print()

    events = game.play()
    print_game_log(events, verbose=args.verbose)
    print_standings(game)
    return 0


def serve(args) -> int:
    import uvicorn
    uvicorn.run("knockout.api.main:app", host=args.host, port=args.port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play a game of Knock Out!")
    parser.add_argument("players", nargs="?", type=int, default=DEFAULT_PLAYERS,
                        help=f"number of players (default {DEFAULT_PLAYERS})")
    parser.add_argument("--seed", type=int, default=None, help="random seed for a reproducible game")
    parser.add_argument("--verbose", "-v", action="store_true", help="show every roll")
    parser.add_argument("--max-rounds", type=int, default=DEFAULT_MAX_ROUNDS,
                        help="stop the game after this many rounds")
    return parser


def build_serve_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Serve the Knock Out! API")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8000)
    return parser


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if argv and argv[0] == "serve":
        return serve(build_serve_parser().parse_args(argv[1:]))
    return play(build_parser().parse_args(argv))


if __name__ == "__main__":
    sys.exit(main())
