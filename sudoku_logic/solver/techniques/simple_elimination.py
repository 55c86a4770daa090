"""
Simple Elimination - Solved digits are struck from the rest of their houses.
"""

from ..base import EliminationTechnique
from ..grid import CandidateGrid
from ..topology import Topology
from ..factory import register_technique


@register_technique
class SimpleElimination(EliminationTechnique):
    """
    Baseline constraint propagation.

    For every house and every solved cell holding digit d, remove d from
    every other cell of that house. Always tried first in each round.
    """
    name = "simple_elimination"
    label = "Simple Elimination"
    description = "Remove solved digits from the other cells of each house"
    priority = 0
    weight = 1

    def apply(self, grid: CandidateGrid, topology: Topology) -> int:
        removed = 0
        for house in topology.houses:
            for cell in house:
                digit = grid.value(cell)
                if digit is None:
                    continue
                removed += self._purge(grid, house, (digit,), skip=(cell,))
        return removed
