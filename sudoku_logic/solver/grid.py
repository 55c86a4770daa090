"""
Candidate Grid Module - Mutable 9x9 candidate state for a logic solve.
"""

from typing import FrozenSet, Iterable, List, Optional, Sequence

import numpy as np

from .topology import Cell, SIZE

DIGITS = tuple(range(1, SIZE + 1))


class CandidateGrid:
    """
    9x9 grid of candidate sets backed by a boolean numpy mask.

    ``mask[r, c, d - 1]`` is True while digit ``d`` is still a candidate
    for cell (r, c). A cell is solved when exactly one candidate remains.
    Candidates are only ever removed, never added back.

    Attributes:
        mask: Boolean array of shape (9, 9, 9)
    """

    def __init__(self, mask: np.ndarray):
        if mask.shape != (SIZE, SIZE, SIZE):
            raise ValueError(f"Candidate mask must have shape (9, 9, 9), got {mask.shape}")
        self.mask = mask.astype(bool, copy=False)

    @classmethod
    def from_puzzle(cls, puzzle: Sequence[Sequence[int]]) -> 'CandidateGrid':
        """
        Pencil in candidates for a parsed puzzle.

        Givens become singleton candidate sets, blanks (0) get all of 1-9.

        Args:
            puzzle: 9x9 nested sequence of ints 0-9

        Returns:
            New CandidateGrid

        Raises:
            ValueError: If the puzzle is not 9x9 or holds values outside 0-9
        """
        board = np.asarray(puzzle, dtype=int)
        if board.shape != (SIZE, SIZE):
            raise ValueError(f"Puzzle must be 9x9, got shape {board.shape}")
        if board.min() < 0 or board.max() > SIZE:
            raise ValueError("Puzzle values must be in the range 0-9")

        mask = np.ones((SIZE, SIZE, SIZE), dtype=bool)
        given = board > 0
        mask[given] = False
        rows, cols = np.nonzero(given)
        mask[rows, cols, board[given] - 1] = True
        return cls(mask)

    def copy(self) -> 'CandidateGrid':
        return CandidateGrid(self.mask.copy())

    def candidates(self, cell: Cell) -> FrozenSet[int]:
        """Remaining candidate digits of a cell."""
        r, c = cell
        return frozenset(int(d) + 1 for d in np.flatnonzero(self.mask[r, c]))

    def size(self, cell: Cell) -> int:
        r, c = cell
        return int(self.mask[r, c].sum())

    def contains(self, cell: Cell, digit: int) -> bool:
        r, c = cell
        return bool(self.mask[r, c, digit - 1])

    def is_solved(self, cell: Cell) -> bool:
        return self.size(cell) == 1

    def value(self, cell: Cell) -> Optional[int]:
        """Final digit of a solved cell, or None while unsolved (or empty)."""
        r, c = cell
        found = np.flatnonzero(self.mask[r, c])
        if len(found) == 1:
            return int(found[0]) + 1
        return None

    def remove(self, cell: Cell, digits: Iterable[int]) -> int:
        """
        Remove digits from a cell's candidates.

        Args:
            cell: (row, col) coordinate
            digits: Digits to strike out (absent digits are ignored)

        Returns:
            Number of candidates actually removed
        """
        r, c = cell
        removed = 0
        for d in digits:
            if self.mask[r, c, d - 1]:
                self.mask[r, c, d - 1] = False
                removed += 1
        return removed

    def restrict(self, cell: Cell, digits: Iterable[int]) -> int:
        """
        Keep only the given digits in a cell's candidates.

        Args:
            cell: (row, col) coordinate
            digits: Digits allowed to remain

        Returns:
            Number of candidates removed
        """
        keep = set(digits)
        return self.remove(cell, [d for d in self.candidates(cell) if d not in keep])

    def sizes(self) -> np.ndarray:
        """Candidate count per cell as a (9, 9) int array."""
        return self.mask.sum(axis=2)

    def to_board(self) -> List[List[int]]:
        """
        Collapse to a 9x9 digit board.

        Returns:
            Nested list with the digit of solved cells and 0 elsewhere
        """
        solved = self.sizes() == 1
        digits = np.argmax(self.mask, axis=2) + 1
        return np.where(solved, digits, 0).tolist()

    def __eq__(self, other):
        if not isinstance(other, CandidateGrid):
            return False
        return bool(np.array_equal(self.mask, other.mask))

    def __repr__(self):
        solved = int((self.sizes() == 1).sum())
        return f"CandidateGrid(solved={solved}/81)"


def format_candidates(grid: CandidateGrid) -> str:
    """
    Render every cell's candidates as a 27x27 character grid.

    Each cell becomes a 3x3 block of sub-cells holding digit d at
    position d-1, or 0 when d is no longer a candidate. Sub-cells are
    separated by " | " every third column and a dashed rule every third
    row.

    Args:
        grid: Candidate grid

    Returns:
        Multi-line string
    """
    lines = []
    for subrow in range(27):
        if subrow % 3 == 0 and subrow != 0:
            lines.append("-" * 51)

        parts = []
        for subcol in range(27):
            if subcol % 3 == 0 and subcol != 0:
                parts.append(" | ")
            digit = (subrow % 3) * 3 + subcol % 3 + 1
            cell = (subrow // 3, subcol // 3)
            parts.append(str(digit) if grid.contains(cell, digit) else "0")
        lines.append("".join(parts))
    return "\n".join(lines)
