"""
Topology Module - Fixed house and line layout of a 9x9 Sudoku grid.
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Tuple

Cell = Tuple[int, int]
House = Tuple[Cell, ...]

SIZE = 9
BLOCK = 3


def generate_rows() -> Tuple[House, ...]:
    """Rows 0-8, each with columns 0-8."""
    return tuple(tuple((r, c) for c in range(SIZE)) for r in range(SIZE))


def generate_columns() -> Tuple[House, ...]:
    """Columns 0-8, each with rows 0-8."""
    return tuple(tuple((r, c) for r in range(SIZE)) for c in range(SIZE))


def generate_blocks() -> Tuple[House, ...]:
    """
    Blocks 0-8 in 3x3 tiling order.

    Block i spans rows [3*(i//3), +3) and columns [3*(i%3), +3).
    """
    blocks = []
    for i in range(SIZE):
        r0 = (i // BLOCK) * BLOCK
        c0 = (i % BLOCK) * BLOCK
        blocks.append(tuple(
            (r, c)
            for r in range(r0, r0 + BLOCK)
            for c in range(c0, c0 + BLOCK)
        ))
    return tuple(blocks)


@dataclass(frozen=True)
class Topology:
    """
    Immutable set of houses for one solve.

    Attributes:
        rows: 9 row houses
        columns: 9 column houses
        blocks: 9 block houses
        houses: All 27 houses (rows, then columns, then blocks)
        lines: The 18 lines (rows, then columns)
        cells: All 81 cells in row-major order
    """
    rows: Tuple[House, ...]
    columns: Tuple[House, ...]
    blocks: Tuple[House, ...]
    houses: Tuple[House, ...] = field(init=False)
    lines: Tuple[House, ...] = field(init=False)
    cells: Tuple[Cell, ...] = field(init=False)
    _peers: Dict[Cell, FrozenSet[Cell]] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        # frozen dataclass: derived fields go through object.__setattr__
        object.__setattr__(self, "houses", self.rows + self.columns + self.blocks)
        object.__setattr__(self, "lines", self.rows + self.columns)
        object.__setattr__(self, "cells", tuple(c for row in self.rows for c in row))

        peers: Dict[Cell, FrozenSet[Cell]] = {}
        for cell in self.cells:
            seen = set()
            for house in self.houses_of(cell):
                seen.update(house)
            seen.discard(cell)
            peers[cell] = frozenset(seen)
        object.__setattr__(self, "_peers", peers)

    def houses_of(self, cell: Cell) -> Tuple[House, House, House]:
        """
        Get the row, column and block containing a cell.

        Args:
            cell: (row, col) coordinate

        Returns:
            Tuple of (row house, column house, block house)
        """
        r, c = cell
        block = (r // BLOCK) * BLOCK + c // BLOCK
        return (self.rows[r], self.columns[c], self.blocks[block])

    def peers(self, cell: Cell) -> FrozenSet[Cell]:
        """The 20 cells sharing a house with `cell` (excluding itself)."""
        return self._peers[cell]

    def sees(self, a: Cell, b: Cell) -> bool:
        """True if two distinct cells share a row, column or block."""
        return b in self._peers[a]


def build_topology() -> Topology:
    """
    Build the fixed topology of a 9x9 grid.

    Returns:
        Topology with rows, columns, blocks, houses, lines and peers
    """
    return Topology(
        rows=generate_rows(),
        columns=generate_columns(),
        blocks=generate_blocks(),
    )
