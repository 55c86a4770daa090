"""
Hidden Singles - A digit with only one home in a house is placed there.
"""

import logging

from ..base import EliminationTechnique
from ..grid import CandidateGrid
from ..metrics import candidate_frequency
from ..topology import Topology
from ..factory import register_technique

logger = logging.getLogger(__name__)


@register_technique
class HiddenSingles(EliminationTechnique):
    """
    Place digits that fit only one cell of a house.

    Frequencies are taken once per house. The credited count for a
    placement is the number of candidates the collapse removes.
    """
    name = "hidden_singles"
    label = "Hidden Singles"
    description = "Collapse a cell to the only digit no other cell of its house can hold"
    priority = 1
    weight = 5

    def apply(self, grid: CandidateGrid, topology: Topology) -> int:
        removed = 0
        for house in topology.houses:
            frequency = candidate_frequency(house, grid)
            for digit, count in frequency.items():
                if count != 1:
                    continue
                for cell in house:
                    if grid.size(cell) > 1 and grid.contains(cell, digit):
                        logger.debug(f"Hidden single {digit} at {cell}")
                        removed += grid.restrict(cell, (digit,))
                        break
        return removed
