"""
flappy_client.py

Entry point: builds the pygame console and drives the game state once per
rendered frame until the player quits or closes the window.
"""

import argparse
import random
import sys
from typing import List, Optional

from .constants import CELL_SIZE, WINDOW_TITLE
from .console import ConsoleError, PygameConsole
from .game_state import GameState


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="flappy", description=WINDOW_TITLE)
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for obstacle gaps (reproducible runs)")
    parser.add_argument("--cell-size", type=int, default=CELL_SIZE,
                        help="Pixels per character cell")
    return parser


def run(console: PygameConsole, state: GameState):
    """The main loop: one tick per rendered frame."""
    while not console.quit_requested:
        console.begin_frame()
        state.tick(console)
        console.present()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.cell_size <= 0:
        print(f"Invalid cell size: {args.cell_size}")
        return 2

    try:
        console = PygameConsole(cell_size=args.cell_size)
    except ConsoleError as e:
        print(f"{e}. Exiting.")
        return 1

    rng = random.Random(args.seed) if args.seed is not None else None
    state = GameState(rng=rng)

    print(f"{WINDOW_TITLE} started.")
    try:
        run(console, state)
    finally:
        console.close()
    print(f"{WINDOW_TITLE} stopped. Final score: {state.score}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
