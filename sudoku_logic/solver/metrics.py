"""
Grid Metrics Module - Read-only queries over a candidate grid.
"""

from typing import Dict, Iterable, List, Set

import numpy as np

from .grid import CandidateGrid, DIGITS
from .topology import Cell, Topology


def solved_count(grid: CandidateGrid) -> int:
    """Number of cells with exactly one candidate."""
    return int((grid.sizes() == 1).sum())


def remaining_count(grid: CandidateGrid) -> int:
    """
    Candidates still to remove before the grid is solved.

    Sum over all cells of (candidate count - 1); zero iff every cell is
    solved. Empty cells count as 0 rather than -1.
    """
    return int(np.maximum(grid.sizes() - 1, 0).sum())


def solved_count_in_group(group: Iterable[Cell], grid: CandidateGrid) -> int:
    return sum(1 for cell in group if grid.size(cell) == 1)


def unique_candidates(group: Iterable[Cell], grid: CandidateGrid) -> Set[int]:
    """Union of the candidate sets of every cell in the group."""
    union: Set[int] = set()
    for cell in group:
        union |= grid.candidates(cell)
    return union


def candidate_frequency(group: Iterable[Cell], grid: CandidateGrid) -> Dict[int, int]:
    """
    Count how many cells of a group hold each digit.

    Args:
        group: Cells to inspect (usually a house)
        grid: Candidate grid

    Returns:
        Dict mapping every digit 1-9 to the number of cells containing it
    """
    cells = list(group)
    if not cells:
        return {d: 0 for d in DIGITS}
    rows, cols = zip(*cells)
    counts = grid.mask[list(rows), list(cols)].sum(axis=0)
    return {d: int(counts[d - 1]) for d in DIGITS}


def find_contradictions(grid: CandidateGrid, topology: Topology) -> List[Cell]:
    """
    Find cells that make the grid inconsistent.

    A cell is contradictory when its candidate set is empty, or when it is
    solved with a digit that another solved cell in one of its houses
    already holds.

    Args:
        grid: Candidate grid
        topology: Houses of the grid

    Returns:
        Sorted list of offending cells (empty when consistent)
    """
    bad = set()
    sizes = grid.sizes()
    for r, c in zip(*np.nonzero(sizes == 0)):
        bad.add((int(r), int(c)))

    for house in topology.houses:
        holders: Dict[int, List[Cell]] = {}
        for cell in house:
            digit = grid.value(cell)
            if digit is not None:
                holders.setdefault(digit, []).append(cell)
        for cells in holders.values():
            if len(cells) > 1:
                bad.update(cells)

    return sorted(bad)
