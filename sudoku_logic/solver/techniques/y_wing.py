"""
Y-Wing - A bi-value pivot and two bi-value wings pinning a common digit.
"""

import logging
from itertools import combinations
from typing import FrozenSet, List, Set

from ..base import EliminationTechnique
from ..grid import CandidateGrid
from ..topology import Cell, Topology
from ..factory import register_technique

logger = logging.getLogger(__name__)


@register_technique
class YWing(EliminationTechnique):
    """
    Y-Wing (XY-Wing).

    Pivot {x, y} sees wing {x, z} and wing {y, z}. Whichever digit the
    pivot takes, one wing becomes z, so any cell that sees both wings
    cannot be z.

    Attributes:
        eliminate: When False, patterns are only logged and nothing is
            removed (the technique then always reports 0)
    """
    name = "y_wing"
    label = "Y-Wing"
    description = "A bi-value pivot and two wings remove their common digit from shared peers"
    priority = 8
    weight = 0

    def __init__(self, eliminate: bool = True):
        self.eliminate = eliminate

    def apply(self, grid: CandidateGrid, topology: Topology) -> int:
        removed = 0
        seen: Set[FrozenSet[Cell]] = set()

        bivalue = [cell for cell in topology.cells if grid.size(cell) == 2]
        for pivot in bivalue:
            if grid.size(pivot) != 2:
                continue
            pivot_digits = grid.candidates(pivot)
            wings = self._find_wings(grid, topology, pivot)

            for wing_a, wing_b in combinations(wings, 2):
                if grid.size(wing_a) != 2 or grid.size(wing_b) != 2:
                    continue
                digits_a = grid.candidates(wing_a)
                digits_b = grid.candidates(wing_b)
                shared_a = digits_a & pivot_digits
                shared_b = digits_b & pivot_digits
                if len(shared_a) != 1 or len(shared_b) != 1 or shared_a == shared_b:
                    continue
                if shared_a | shared_b != pivot_digits:
                    continue
                common = digits_a & digits_b
                if len(common) != 1 or common & pivot_digits:
                    continue

                pattern = frozenset((pivot, wing_a, wing_b))
                if pattern in seen:
                    continue
                seen.add(pattern)

                (digit,) = common
                logger.debug(f"Y-Wing pivot {pivot} wings {wing_a}, {wing_b} on {digit}")
                if not self.eliminate:
                    continue

                targets = sorted(topology.peers(wing_a) & topology.peers(wing_b))
                removed += self._purge(grid, targets, (digit,), skip=pattern)
        return removed

    def _find_wings(self, grid: CandidateGrid, topology: Topology, pivot: Cell) -> List[Cell]:
        """Bi-value peers of the pivot sharing exactly one of its digits."""
        pivot_digits = grid.candidates(pivot)
        return [
            cell for cell in sorted(topology.peers(pivot))
            if grid.size(cell) == 2 and len(grid.candidates(cell) & pivot_digits) == 1
        ]
