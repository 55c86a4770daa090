"""
X-Wing - A digit locked to the same two columns in two rows.
"""

import logging
from collections import Counter
from itertools import combinations

from ..base import EliminationTechnique
from ..grid import CandidateGrid
from ..topology import Topology
from ..factory import register_technique

logger = logging.getLogger(__name__)


@register_technique
class XWing(EliminationTechnique):
    """
    Row-based X-Wing.

    For every rectangle of two rows and two columns whose four corners are
    all unsolved: a digit present in all four corners and nowhere else in
    either row must occupy one diagonal of the rectangle, so it is removed
    from the rest of both columns.
    """
    name = "x_wing"
    label = "X-Wing"
    description = "A digit confined to two columns in two rows leaves the rest of those columns"
    priority = 7
    weight = 0

    def apply(self, grid: CandidateGrid, topology: Topology) -> int:
        removed = 0
        for r1, r2 in combinations(range(len(topology.rows)), 2):
            for c1, c2 in combinations(range(len(topology.columns)), 2):
                corners = ((r1, c1), (r1, c2), (r2, c1), (r2, c2))
                if any(grid.size(cell) == 1 for cell in corners):
                    continue

                frequency = Counter(
                    digit for cell in corners for digit in grid.candidates(cell)
                )
                for digit in sorted(frequency):
                    if frequency[digit] != 4:
                        continue
                    row_cells = topology.rows[r1] + topology.rows[r2]
                    if any(grid.contains(cell, digit) for cell in row_cells
                           if cell not in corners):
                        continue

                    column_cells = topology.columns[c1] + topology.columns[c2]
                    count = self._purge(grid, column_cells, (digit,), skip=corners)
                    if count:
                        logger.debug(
                            f"X-Wing {digit} rows {r1},{r2} cols {c1},{c2} removed {count}"
                        )
                    removed += count
        return removed
