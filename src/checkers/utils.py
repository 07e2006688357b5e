"""
Utilities for the draughts engine.
Logger setup and coordinate parsing shared by the entry point and tests.
"""

import sys
import logging
from pathlib import Path
from typing import List, Optional, Tuple

from .config import LOG_FORMAT, LOG_FORMAT_DETAILED, LOG_DATE_FORMAT
from .board import Board
from .types import Position


# =============================================================================
# LOGGING UTILITIES
# =============================================================================

def setup_logger(
    name: str = "checkers",
    log_file: Optional[str] = None,
    level: int = logging.INFO
) -> logging.Logger:
    """
    Setup a logger with console and optional file output.
    Uses centralized log format configuration.

    Args:
        name: Logger name
        log_file: Path to log file (optional)
        level: Logging level

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid duplicate handlers if logger already configured
    if logger.handlers:
        return logger

    # Console handler - uses simpler format
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger.addHandler(console_handler)

    # File handler - uses detailed format
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT_DETAILED, datefmt=LOG_DATE_FORMAT))
        logger.addHandler(file_handler)

    return logger


# =============================================================================
# COORDINATE UTILITIES
# =============================================================================

def parse_position(text: str) -> Position:
    """Parse "row,col" into a position tuple."""
    parts = text.strip().split(",")
    if len(parts) != 2:
        raise ValueError(f"Expected 'row,col', got {text!r}")
    row, col = int(parts[0]), int(parts[1])
    if not Board.in_bounds(row, col):
        raise ValueError(f"Position {text.strip()!r} is off the board")
    return row, col


def parse_move_list(text: str) -> List[Tuple[Position, Position]]:
    """
    Parse a scripted move list such as "2,1:3,0 5,2:4,1".

    Each whitespace-separated token is origin:destination.
    """
    moves = []
    for token in text.split():
        origin, sep, destination = token.partition(":")
        if not sep:
            raise ValueError(f"Expected 'row,col:row,col', got {token!r}")
        moves.append((parse_position(origin), parse_position(destination)))
    return moves
