"""
Hidden Sets - N digits confined to the same N cells of a house.

Covers hidden pairs and hidden triples. The cells of the set are stripped
of every other candidate.
"""

import logging
from itertools import combinations
from typing import List, Tuple

from ..base import EliminationTechnique
from ..grid import CandidateGrid
from ..metrics import candidate_frequency, solved_count_in_group, unique_candidates
from ..topology import Cell, House, Topology
from ..factory import register_technique

logger = logging.getLogger(__name__)


def _confined(grid: CandidateGrid, house: House, cells: List[Cell],
              digits: Tuple[int, ...]) -> bool:
    """True if no cell of the house outside `cells` holds any of `digits`."""
    for cell in house:
        if cell in cells:
            continue
        if any(grid.contains(cell, d) for d in digits):
            return False
    return True


def _reduce(grid: CandidateGrid, cells: List[Cell], digits: Tuple[int, ...]) -> int:
    return sum(grid.restrict(cell, digits) for cell in cells)


@register_technique
class HiddenPairs(EliminationTechnique):
    """
    Two digits that appear together in exactly two cells and nowhere else
    in the house. Both cells are reduced to the pair.
    """
    name = "hidden_pairs"
    label = "Hidden Pairs"
    description = "Two digits confined to two cells strip those cells of other candidates"
    priority = 4
    weight = 20

    def apply(self, grid: CandidateGrid, topology: Topology) -> int:
        removed = 0
        for house in topology.houses:
            pool = sorted(unique_candidates(house, grid))
            for pair in combinations(pool, 2):
                cells = [
                    cell for cell in house
                    if len(grid.candidates(cell) & set(pair)) == 2
                ]
                if len(cells) != 2 or not _confined(grid, house, cells, pair):
                    continue
                count = _reduce(grid, cells, pair)
                if count:
                    logger.debug(f"Hidden pair {pair} at {cells} removed {count}")
                removed += count
        return removed


@register_technique
class HiddenTriples(EliminationTechnique):
    """
    Three digits confined to exactly three cells of a house.

    Houses with more than two solved cells are skipped. Only digits that
    occur two or three times in the house are combined.
    """
    name = "hidden_triples"
    label = "Hidden Triples"
    description = "Three digits confined to three cells strip those cells of other candidates"
    priority = 5
    weight = 20

    def apply(self, grid: CandidateGrid, topology: Topology) -> int:
        removed = 0
        for house in topology.houses:
            if solved_count_in_group(house, grid) > 2:
                continue

            frequency = candidate_frequency(house, grid)
            pool = [d for d, count in frequency.items() if count in (2, 3)]
            for triple in combinations(pool, 3):
                digits = set(triple)
                cells = [
                    cell for cell in house
                    if len(grid.candidates(cell) & digits) >= 2
                ]
                if len(cells) != 3 or not _confined(grid, house, cells, triple):
                    continue
                count = _reduce(grid, cells, triple)
                if count:
                    logger.debug(f"Hidden triple {triple} at {cells} removed {count}")
                removed += count
        return removed
