"""
Puzzle Module - Reading and writing 81-character puzzle strings.

A puzzle string lists the grid row by row, one decimal digit per cell,
with 0 for a blank. Only the first 81 characters are used and leading
whitespace is not skipped; callers strip their own input lines.
"""

import logging
from typing import List, Sequence, Union

from .solver.grid import CandidateGrid, format_candidates

logger = logging.getLogger(__name__)

PUZZLE_LENGTH = 81

__all__ = [
    "PuzzleFormatError",
    "parse_puzzle",
    "to_puzzle_string",
    "format_board",
    "format_candidates",
]


class PuzzleFormatError(ValueError):
    """Raised when a puzzle string is too short or holds non-digits."""


def parse_puzzle(text: str) -> List[List[int]]:
    """
    Convert a puzzle string into a 9x9 board.

    Args:
        text: At least 81 characters; the first 81 must be digits 0-9

    Returns:
        9x9 nested list of ints, 0 for blanks

    Raises:
        PuzzleFormatError: If the string is too short or has non-digits
    """
    if len(text) < PUZZLE_LENGTH:
        raise PuzzleFormatError(
            f"Input string must have at least {PUZZLE_LENGTH} characters, got {len(text)}."
        )

    raw = text[:PUZZLE_LENGTH]
    # str.isdigit accepts non-ASCII digits such as superscripts
    if not all(ch in "0123456789" for ch in raw):
        raise PuzzleFormatError("Input string must contain only digits.")

    values = [int(ch) for ch in raw]
    return [values[r * 9:(r + 1) * 9] for r in range(9)]


def to_puzzle_string(source: Union[CandidateGrid, Sequence[Sequence[int]]]) -> str:
    """
    Serialize a grid or board back into an 81-digit string.

    Cells with more than one candidate (or none) are written as 0, so a
    partially solved grid never shows a spurious digit.

    Args:
        source: CandidateGrid or 9x9 board of ints

    Returns:
        81-character string of digits
    """
    board = source.to_board() if isinstance(source, CandidateGrid) else source
    return "".join(str(int(value)) for row in board for value in row)


def format_board(puzzle_string: str) -> str:
    """Lay an 81-digit string out as nine lines of nine digits."""
    return "\n".join(puzzle_string[i * 9:(i + 1) * 9] for i in range(9))
