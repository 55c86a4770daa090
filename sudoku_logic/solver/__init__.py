"""
Solver Package - Deductive candidate-elimination framework for 9x9 Sudoku.

This package narrows per-cell candidate sets with a fixed battery of
human-style techniques, applied in priority order one round at a time.
No guessing or backtracking is ever done.

Public API:
    - CandidateGrid: Mutable 9x9 candidate state
    - Topology / build_topology(): Rows, columns, blocks, houses, lines
    - EliminationTechnique: Abstract base for techniques
    - LogicSolver / solve(): Solve driver
    - SolverConfig: Round cap, verbosity, Y-Wing switch
    - SolveResult, SolveState, ScoreReport, RoundRecord: Results
    - create_technique(), get_technique_names(), get_technique_info()

Usage:
    from sudoku_logic.puzzle import parse_puzzle, to_puzzle_string
    from sudoku_logic.solver import LogicSolver, SolverConfig

    puzzle = parse_puzzle(text)
    result = LogicSolver(SolverConfig(verbose=True)).solve(puzzle)

    if result.is_solved:
        print(to_puzzle_string(result.grid))
    print(f"Score: {result.score}")
"""

# Core data structures
from .topology import Cell, House, Topology, build_topology
from .grid import CandidateGrid, DIGITS, format_candidates
from .context import SolverConfig, SolveContext, DEFAULT_MAX_ROUNDS
from .solution import (
    RoundRecord,
    ScoreReport,
    SolveMetrics,
    SolveResult,
    SolveState,
    format_report,
)
from . import metrics

# Technique framework
from .base import EliminationTechnique
from .factory import (
    create_technique,
    get_technique_names,
    get_technique_info,
    get_technique_weights,
    register_technique,
)

# Import techniques to register them
from . import techniques

from .driver import LogicSolver, solve

__all__ = [
    # Data structures
    "Cell",
    "House",
    "Topology",
    "build_topology",
    "CandidateGrid",
    "DIGITS",
    "format_candidates",
    "SolverConfig",
    "SolveContext",
    "DEFAULT_MAX_ROUNDS",
    "RoundRecord",
    "ScoreReport",
    "SolveMetrics",
    "SolveResult",
    "SolveState",
    "format_report",
    "metrics",
    # Technique framework
    "EliminationTechnique",
    "create_technique",
    "get_technique_names",
    "get_technique_info",
    "get_technique_weights",
    "register_technique",
    # Driver
    "LogicSolver",
    "solve",
]
