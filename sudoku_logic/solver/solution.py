"""
Solution Module - Result of a logic solve and its score report.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, List, Optional, Tuple

from .grid import CandidateGrid
from .topology import Cell


class SolveState(Enum):
    """
    Solve driver states.

    States:
        INITIALIZING: Grid built, no round run yet
        ROUND: Applying techniques
        CONVERGED: Solved, or a round removed nothing (stalled)
        CAPPED: Round cap reached before converging
        INCONSISTENT: A cell lost every candidate or a digit repeats in a house
    """
    INITIALIZING = auto()
    ROUND = auto()
    CONVERGED = auto()
    CAPPED = auto()
    INCONSISTENT = auto()


@dataclass(frozen=True)
class RoundRecord:
    """
    Trace entry for one round.

    Attributes:
        index: Round number (1-based)
        attempted: Names of techniques tried, in order
        technique: Name of the technique that made progress, or None
        removed: Candidates removed this round
        solved: Solved cells after the round
        remaining: Candidates left to remove after the round
    """
    index: int
    attempted: Tuple[str, ...]
    technique: Optional[str]
    removed: int
    solved: int
    remaining: int


@dataclass
class ScoreReport:
    """
    Candidates removed per technique over a solve.

    Attributes:
        counts: Technique name -> candidates removed
        weights: Technique name -> points per candidate
        labels: Technique name -> display label
    """
    counts: Dict[str, int] = field(default_factory=dict)
    weights: Dict[str, int] = field(default_factory=dict)
    labels: Dict[str, str] = field(default_factory=dict)

    def add(self, name: str, removed: int) -> None:
        self.counts[name] = self.counts.get(name, 0) + removed

    @property
    def total_removed(self) -> int:
        return sum(self.counts.values())

    @property
    def score(self) -> int:
        """Final difficulty score: sum of count x weight."""
        return sum(
            count * self.weights.get(name, 0)
            for name, count in self.counts.items()
        )

    def lines(self) -> List[str]:
        """One 'Label: count' line per technique, in report order."""
        return [
            f"{self.labels.get(name, name)}: {count}"
            for name, count in self.counts.items()
        ]


@dataclass
class SolveMetrics:
    """
    Statistics for a solve.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        rounds: Rounds executed
        initial_solved: Solved cells before the first round
        initial_remaining: Candidates to remove before the first round
    """
    computation_time_ms: float = 0.0
    rounds: int = 0
    initial_solved: int = 0
    initial_remaining: int = 0


@dataclass
class SolveResult:
    """
    Outcome of a solve.

    Attributes:
        grid: Candidate grid at termination
        state: Terminal SolveState
        report: Per-technique score report
        solved: Solved cells at termination
        remaining: Candidates left to remove at termination
        trace: One RoundRecord per round
        contradictions: Offending cells when state is INCONSISTENT
        metrics: Timing and initial counts
    """
    grid: CandidateGrid
    state: SolveState
    report: ScoreReport
    solved: int = 0
    remaining: int = 0
    trace: List[RoundRecord] = field(default_factory=list)
    contradictions: List[Cell] = field(default_factory=list)
    metrics: SolveMetrics = field(default_factory=SolveMetrics)

    @property
    def is_solved(self) -> bool:
        """True if every cell holds a single, consistent digit."""
        return self.state == SolveState.CONVERGED and self.remaining == 0

    @property
    def is_stalled(self) -> bool:
        return self.state == SolveState.CONVERGED and self.remaining > 0

    @property
    def score(self) -> int:
        return self.report.score

    @property
    def round_count(self) -> int:
        return len(self.trace)

    def to_board(self) -> List[List[int]]:
        return self.grid.to_board()


def format_report(result: SolveResult) -> str:
    """
    Render the end-of-solve diagnostic summary.

    Args:
        result: Finished solve

    Returns:
        Multi-line report text
    """
    parts = []
    if result.state == SolveState.INCONSISTENT:
        cells = ", ".join(f"({r},{c})" for r, c in result.contradictions)
        parts.append(f"Puzzle Inconsistent at {cells}")
    elif not result.is_solved:
        parts.append("Puzzle Unsolvable with Current Methods")
        if result.state == SolveState.CAPPED:
            parts.append(f"Stopped after {result.round_count} rounds")

    parts.append("Solved with Methods")
    parts.append(f"Complete Cells: {result.solved}/81")
    parts.append(f"Candidates to Remove: {result.remaining}")
    parts.append("")
    parts.append("Methods Used:")
    parts.extend(result.report.lines())
    parts.append(f"Final Score: {result.score}")
    return "\n".join(parts)
