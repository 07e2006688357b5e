"""Main entry point for the draughts engine."""

import sys
import argparse
import logging

from .config import get_config
from .engine import Engine, TurnResult
from .errors import Rejection
from .movegen import movable_pieces
from .utils import setup_logger, parse_move_list


def print_state(engine: Engine) -> None:
    """Print the board, the player to move and every selectable piece."""
    display = get_config().display
    state = engine.state

    print("=" * 40)
    print(f"Turn: Player {int(state.current_player)} | {engine.phase.value}")
    print("=" * 40)
    print()
    print(state.board.render(display.symbols(), display.show_coordinates))
    print()

    if engine.outcome.is_over:
        print(f"Game Over! Winner: Player {int(engine.outcome.winner)}")
        return

    pieces = movable_pieces(state)
    total = sum(len(moves) for moves in pieces.values())
    print(f"Legal moves for Player {int(state.current_player)}: {total}")
    for pos, moves in pieces.items():
        print(f"  {pos}: {', '.join(repr(m) for m in moves)}")
    print()


def main(argv=None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="8x8 draughts rules engine")
    parser.add_argument(
        "--moves",
        default="",
        help="Moves to play first, e.g. '2,1:3,0 5,2:4,1'",
    )
    parser.add_argument("--log-level", default=None, help="Override the configured log level")
    args = parser.parse_args(argv)

    settings = get_config().logging
    level = settings.level_number()
    if args.log_level:
        level = logging.getLevelName(args.log_level.upper())
        if not isinstance(level, int):
            parser.error(f"unknown log level: {args.log_level}")
    logger = setup_logger("checkers", settings.log_file, level)

    try:
        scripted = parse_move_list(args.moves)
    except ValueError as e:
        parser.error(str(e))

    engine = Engine()
    for origin, destination in scripted:
        result = engine.apply_move(origin, destination)
        if isinstance(result, Rejection):
            logger.error("Stopped at %s -> %s: %s", origin, destination, result.reason)
            print_state(engine)
            return 1
        if isinstance(result, TurnResult) and result.outcome.is_over:
            break

    print_state(engine)
    return 0


if __name__ == "__main__":
    sys.exit(main())
