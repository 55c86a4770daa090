# tests/conftest.py
import sys
from pathlib import Path

import numpy as np
import pytest

# Add project root to sys.path so "sudoku_logic" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sudoku_logic.solver import CandidateGrid  # noqa: E402

# Widely published easy puzzle and its unique solution
EASY_PUZZLE = "530070000600195000098000060800060003400803001700020006060000280000419005000080079"
EASY_SOLUTION = "534678912672195348198342567859761423426853791713924856961537284287419635345286179"


def build_grid(cells=None, default=range(1, 10)):
    """
    Build a CandidateGrid cell by cell.

    Args:
        cells: Dict of (row, col) -> iterable of candidate digits
        default: Candidates for every cell not listed in `cells`
    """
    mask = np.zeros((9, 9, 9), dtype=bool)
    for r in range(9):
        for c in range(9):
            for d in (cells or {}).get((r, c), default):
                mask[r, c, d - 1] = True
    return CandidateGrid(mask)


@pytest.fixture
def make_grid():
    """Factory fixture returning build_grid."""
    return build_grid


@pytest.fixture
def easy_puzzle():
    return [[int(ch) for ch in EASY_PUZZLE[r * 9:(r + 1) * 9]] for r in range(9)]


@pytest.fixture
def easy_solution():
    return [[int(ch) for ch in EASY_SOLUTION[r * 9:(r + 1) * 9]] for r in range(9)]


@pytest.fixture
def easy_puzzle_text():
    return EASY_PUZZLE


@pytest.fixture
def easy_solution_text():
    return EASY_SOLUTION


# (puzzle, needs techniques beyond singles). The first hard puzzle takes
# X-Wing, naked triples and intersections; the second hidden and naked
# triples.
PUZZLE_CASES = [
    (EASY_PUZZLE, False),
    ("100000569492056108056109240009640801064010000218035604040500016905061402621000005", True),
    ("300000000970010000600583000200000900500621003008000005000435002000090056000000001", True),
]


def to_board(text):
    return [[int(ch) for ch in text[r * 9:(r + 1) * 9]] for r in range(9)]


def search_solution(board):
    """
    Reference solution by depth-first search, most constrained cell first.

    Args:
        board: 9x9 nested list, 0 for blanks (not modified)

    Returns:
        Solved 9x9 nested list

    Raises:
        ValueError: If the puzzle has no solution
    """
    board = [row[:] for row in board]

    def options(r, c):
        used = set(board[r]) | {board[i][c] for i in range(9)}
        r0, c0 = 3 * (r // 3), 3 * (c // 3)
        used |= {board[i][j] for i in range(r0, r0 + 3) for j in range(c0, c0 + 3)}
        return [d for d in range(1, 10) if d not in used]

    def fill():
        best = None
        for r in range(9):
            for c in range(9):
                if board[r][c] == 0:
                    choices = options(r, c)
                    if not choices:
                        return False
                    if best is None or len(choices) < len(best[2]):
                        best = (r, c, choices)
        if best is None:
            return True
        r, c, choices = best
        for d in choices:
            board[r][c] = d
            if fill():
                return True
        board[r][c] = 0
        return False

    if not fill():
        raise ValueError("puzzle has no solution")
    return board


@pytest.fixture(scope="module", params=PUZZLE_CASES, ids=["easy", "hard1", "hard2"])
def puzzle_case(request):
    """Dict with the puzzle board, its solution and whether singles suffice."""
    text, advanced = request.param
    board = to_board(text)
    return {"puzzle": board, "solution": search_solution(board), "advanced": advanced}
