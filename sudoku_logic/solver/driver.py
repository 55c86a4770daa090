"""
Solve Driver Module - Runs the elimination techniques round by round.

Each round tries the techniques in priority order and stops at the first
one that removes anything. The solve ends when the grid is solved, a round
makes no progress, the round cap is hit, or the grid becomes inconsistent.

State Flow:
    INITIALIZING -> ROUND -> ROUND -> ... -> CONVERGED | CAPPED | INCONSISTENT
"""

import logging
import time
from typing import Callable, List, Optional, Sequence

from .base import EliminationTechnique
from .context import SolveContext, SolverConfig
from .factory import create_technique, get_technique_names
from .grid import CandidateGrid, format_candidates
from .metrics import find_contradictions, remaining_count, solved_count
from .solution import RoundRecord, ScoreReport, SolveMetrics, SolveResult, SolveState
from .topology import build_topology

logger = logging.getLogger(__name__)


class LogicSolver:
    """
    Deductive Sudoku solver.

    Never guesses: when the techniques run dry the solve stops and the
    result keeps its multi-candidate cells.
    """

    def __init__(self, config: Optional[SolverConfig] = None):
        """
        Initialize the solver.

        Args:
            config: Solver options (defaults to SolverConfig())
        """
        self.config = config or SolverConfig()
        self.techniques = self._build_techniques()

    def _build_techniques(self) -> List[EliminationTechnique]:
        names = get_technique_names()
        if self.config.techniques is not None:
            wanted = set(self.config.techniques)
            unknown = wanted - set(names)
            if unknown:
                available = ", ".join(names)
                raise ValueError(
                    f"Unknown technique: {', '.join(sorted(unknown))}. Available: {available}"
                )
            names = [name for name in names if name in wanted]

        options = {"y_wing": {"eliminate": self.config.ywing_eliminates}}
        return [create_technique(name, **options.get(name, {})) for name in names]

    def _new_report(self) -> ScoreReport:
        report = ScoreReport()
        for technique in self.techniques:
            report.counts[technique.name] = 0
            report.weights[technique.name] = technique.weight
            report.labels[technique.name] = technique.label
        return report

    def solve(self, puzzle: Sequence[Sequence[int]],
              progress_callback: Optional[Callable[[float, str], None]] = None) -> SolveResult:
        """
        Solve a parsed puzzle as far as the techniques allow.

        Args:
            puzzle: 9x9 nested sequence of ints, 0 for blanks
            progress_callback: Optional callback(percent, message) per round

        Returns:
            SolveResult with the final grid, state, trace and score report

        Raises:
            ValueError: If the puzzle is not a 9x9 board of digits 0-9
        """
        start_time = time.perf_counter()
        log = logger.info if self.config.verbose else logger.debug

        topology = build_topology()
        grid = CandidateGrid.from_puzzle(puzzle)
        context = SolveContext(
            grid=grid,
            topology=topology,
            config=self.config,
            progress_callback=progress_callback,
        )
        report = self._new_report()
        state = SolveState.INITIALIZING

        solved = solved_count(grid)
        remaining = remaining_count(grid)
        initial_remaining = remaining
        metrics = SolveMetrics(initial_solved=solved, initial_remaining=remaining)
        log(f"Initial puzzle: complete cells {solved}/81, candidates to remove {remaining}")

        trace: List[RoundRecord] = []
        contradictions = find_contradictions(grid, topology)
        if not contradictions:
            state = SolveState.ROUND

        while state == SolveState.ROUND and remaining != 0:
            if len(trace) >= self.config.max_rounds:
                state = SolveState.CAPPED
                logger.warning(f"Round cap of {self.config.max_rounds} reached, stopping")
                break

            record = self._run_round(context, report, len(trace) + 1)
            trace.append(record)
            solved, remaining = record.solved, record.remaining

            if record.technique:
                log(f"Round {record.index}: {record.technique} removed {record.removed} "
                    f"({solved}/81 complete, {remaining} to remove)")
            else:
                log(f"Round {record.index}: no technique made progress")
            if self.config.verbose and logger.isEnabledFor(logging.DEBUG):
                logger.debug(f"Candidates after round {record.index}:\n{format_candidates(grid)}")

            contradictions = find_contradictions(grid, topology)
            if contradictions:
                break
            if record.removed == 0:
                state = SolveState.CONVERGED

            if initial_remaining > 0:
                context.report_progress(
                    1.0 - remaining / initial_remaining,
                    f"round {record.index}, {remaining} candidates to remove",
                )

        if contradictions:
            state = SolveState.INCONSISTENT
            logger.warning(f"Grid inconsistent at {contradictions}")
        elif state == SolveState.ROUND:
            state = SolveState.CONVERGED

        if state == SolveState.CONVERGED and remaining != 0:
            log("Puzzle unsolvable with current methods")

        metrics.rounds = len(trace)
        metrics.computation_time_ms = (time.perf_counter() - start_time) * 1000

        result = SolveResult(
            grid=grid,
            state=state,
            report=report,
            solved=solved,
            remaining=remaining,
            trace=trace,
            contradictions=contradictions,
            metrics=metrics,
        )
        log(f"Finished in {state.name} after {metrics.rounds} rounds, score {result.score}")
        return result

    def _run_round(self, context: SolveContext, report: ScoreReport, index: int) -> RoundRecord:
        """
        Apply techniques in priority order until one makes progress.

        Args:
            context: Solve context holding the grid
            report: Score report to credit
            index: Round number (1-based)

        Returns:
            RoundRecord for the round
        """
        attempted = []
        credited = None
        removed = 0
        for technique in self.techniques:
            attempted.append(technique.name)
            count = technique.apply(context.grid, context.topology)
            report.add(technique.name, count)
            logger.debug(f"Round {index}: tried {technique.name}, removed {count}")
            if count:
                credited = technique.name
                removed = count
                break

        return RoundRecord(
            index=index,
            attempted=tuple(attempted),
            technique=credited,
            removed=removed,
            solved=solved_count(context.grid),
            remaining=remaining_count(context.grid),
        )


def solve(puzzle: Sequence[Sequence[int]], config: Optional[SolverConfig] = None) -> SolveResult:
    """
    Solve a parsed puzzle with a one-off LogicSolver.

    Args:
        puzzle: 9x9 nested sequence of ints, 0 for blanks
        config: Solver options

    Returns:
        SolveResult
    """
    return LogicSolver(config).solve(puzzle)
