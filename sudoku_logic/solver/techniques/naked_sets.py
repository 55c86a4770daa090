"""
Naked Sets - N cells of a house holding only N digits between them.

Covers naked pairs and naked triples. Combination keys are sorted digit
tuples.
"""

import logging
from collections import defaultdict
from itertools import combinations
from typing import Dict, List, Tuple

from ..base import EliminationTechnique
from ..grid import CandidateGrid
from ..topology import Cell, House, Topology
from ..factory import register_technique

logger = logging.getLogger(__name__)


@register_technique
class NakedPairs(EliminationTechnique):
    """
    Two cells of a house with the identical two-digit candidate set.

    Those two digits must go in those two cells, so they are removed from
    every other cell of the house.
    """
    name = "naked_pairs"
    label = "Naked Pairs"
    description = "Two cells sharing the same two candidates claim them for the house"
    priority = 2
    weight = 10

    def apply(self, grid: CandidateGrid, topology: Topology) -> int:
        removed = 0
        for house in topology.houses:
            pairs: Dict[Tuple[int, ...], List[Cell]] = defaultdict(list)
            for cell in house:
                if grid.size(cell) == 2:
                    pairs[tuple(sorted(grid.candidates(cell)))].append(cell)

            for pair, cells in pairs.items():
                if len(cells) != 2:
                    continue
                count = self._purge(grid, house, pair, skip=cells)
                if count:
                    logger.debug(f"Naked pair {pair} at {cells} removed {count}")
                removed += count
        return removed


@register_technique
class NakedTriples(EliminationTechnique):
    """
    Three cells of a house whose candidates all fall inside three digits.

    Only cells with two or three candidates take part. A two-candidate
    cell matches a triple when both its digits are in it; a
    three-candidate cell matches when it equals the triple.
    """
    name = "naked_triples"
    label = "Naked Triples"
    description = "Three cells confined to the same three digits claim them for the house"
    priority = 3
    weight = 10

    def apply(self, grid: CandidateGrid, topology: Topology) -> int:
        removed = 0
        for house in topology.houses:
            removed += self._apply_house(grid, house)
        return removed

    def _apply_house(self, grid: CandidateGrid, house: House) -> int:
        small = {
            cell: grid.candidates(cell)
            for cell in house
            if grid.size(cell) in (2, 3)
        }
        pool = sorted(set().union(*small.values())) if small else []

        # matches are gathered for the whole house before removing anything
        found: Dict[Tuple[int, ...], List[Cell]] = {}
        for triple in combinations(pool, 3):
            digits = set(triple)
            cells = [
                cell for cell, cands in small.items()
                if (len(cands) == 2 and len(cands & digits) >= 2)
                or (len(cands) == 3 and cands <= digits)
            ]
            if len(cells) == 3:
                found[triple] = cells

        removed = 0
        for triple, cells in found.items():
            count = self._purge(grid, house, triple, skip=cells)
            if count:
                logger.debug(f"Naked triple {triple} at {cells} removed {count}")
            removed += count
        return removed
