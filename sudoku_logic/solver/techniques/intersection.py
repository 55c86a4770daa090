"""
Intersection - Pointing pairs and box-line reduction.
"""

import logging

from ..base import EliminationTechnique
from ..grid import CandidateGrid, DIGITS
from ..metrics import unique_candidates
from ..topology import Topology
from ..factory import register_technique

logger = logging.getLogger(__name__)


@register_technique
class Intersection(EliminationTechnique):
    """
    Interaction between a block and a line (row or column).

    For each block/line pair that overlaps, the cells split into the
    overlap, the rest of the block, and the rest of the line. A digit
    that is in the overlap and in only one of the two remainders must sit
    in the overlap, so it is removed from that remainder.
    """
    name = "intersection"
    label = "Intersection"
    description = "Digits locked into a block/line overlap are removed from the rest"
    priority = 6
    weight = 50

    def apply(self, grid: CandidateGrid, topology: Topology) -> int:
        removed = 0
        for block in topology.blocks:
            block_cells = set(block)
            for line in topology.lines:
                line_cells = set(line)
                both = [cell for cell in block if cell in line_cells]
                if not both:
                    continue
                only_block = [cell for cell in block if cell not in line_cells]
                only_line = [cell for cell in line if cell not in block_cells]

                in_both = unique_candidates(both, grid)
                in_block = unique_candidates(only_block, grid)
                in_line = unique_candidates(only_line, grid)

                for digit in DIGITS:
                    if digit not in in_both:
                        continue
                    if digit in in_block and digit not in in_line:
                        # pointing: the line's copy of digit is locked in this block
                        count = self._purge(grid, only_block, (digit,))
                        if count:
                            logger.debug(f"Intersection {digit} cleared {count} from block rest")
                        removed += count
                    if digit in in_line and digit not in in_block:
                        count = self._purge(grid, only_line, (digit,))
                        if count:
                            logger.debug(f"Intersection {digit} cleared {count} from line rest")
                        removed += count
        return removed
