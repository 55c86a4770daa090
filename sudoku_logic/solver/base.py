"""
Base Technique Module - Abstract base class for elimination techniques.
"""

from abc import ABC, abstractmethod
from typing import Iterable

from .grid import CandidateGrid
from .topology import Cell, Topology


class EliminationTechnique(ABC):
    """
    Abstract base class for all deduction techniques.

    Subclasses must implement apply() and define the class attributes
    below. Techniques only ever remove candidates, so applying one
    repeatedly converges to a fixpoint where it reports 0.

    Attributes:
        name: Short identifier used in score reports and settings
        label: Human-readable name for reports
        description: One-line explanation of the rule
        priority: Position in the solve order (lower runs first)
        weight: Score points per candidate removed
    """
    name: str = "base"
    label: str = "Base technique"
    description: str = "Base technique"
    priority: int = 100
    weight: int = 0

    @abstractmethod
    def apply(self, grid: CandidateGrid, topology: Topology) -> int:
        """
        Apply the technique once over the whole grid.

        Args:
            grid: Candidate grid, mutated in place
            topology: Houses and lines of the grid

        Returns:
            Number of candidates removed
        """
        pass

    def _purge(self, grid: CandidateGrid, cells: Iterable[Cell],
               digits: Iterable[int], skip: Iterable[Cell] = ()) -> int:
        """
        Remove digits from every cell not in `skip`.

        Args:
            grid: Candidate grid
            cells: Cells to clean
            digits: Digits to remove
            skip: Cells left untouched (the pattern itself)

        Returns:
            Number of candidates removed
        """
        digits = tuple(digits)
        skipped = set(skip)
        removed = 0
        for cell in cells:
            if cell not in skipped:
                removed += grid.remove(cell, digits)
        return removed

    def __repr__(self):
        return f"{type(self).__name__}(name={self.name!r})"
