"""
Sudoku Logic - Human-style deductive Sudoku solver.

Subpackages:
    - solver: candidate grid, elimination techniques and solve driver
    - puzzle: puzzle string parsing, serialization and pretty-printing
    - settings: persistent JSON preferences
"""

from .puzzle import PuzzleFormatError, parse_puzzle, to_puzzle_string
from .solver import LogicSolver, SolverConfig, SolveResult, SolveState, solve

__version__ = "0.1.0"

__all__ = [
    "PuzzleFormatError",
    "parse_puzzle",
    "to_puzzle_string",
    "LogicSolver",
    "SolverConfig",
    "SolveResult",
    "SolveState",
    "solve",
]
