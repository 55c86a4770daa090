"""
Solve Context Module - Configuration and shared state for one solve.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Sequence

from .grid import CandidateGrid
from .topology import Topology

DEFAULT_MAX_ROUNDS = 50


@dataclass
class SolverConfig:
    """
    Tunable solver options.

    Attributes:
        max_rounds: Hard cap on technique rounds (runaway guard)
        verbose: Log the diagnostic trace at INFO instead of DEBUG
        ywing_eliminates: Let Y-Wing remove candidates (False = detect only)
        techniques: Optional subset of technique names to run; None runs all
    """
    max_rounds: int = DEFAULT_MAX_ROUNDS
    verbose: bool = False
    ywing_eliminates: bool = True
    techniques: Optional[Sequence[str]] = None

    def __post_init__(self):
        if self.max_rounds < 0:
            raise ValueError(f"max_rounds must be >= 0, got {self.max_rounds}")

    @classmethod
    def from_settings(cls, settings: Dict[str, Any]) -> 'SolverConfig':
        """
        Build a config from a settings dictionary.

        Args:
            settings: Dict as returned by load_settings(); unknown keys ignored

        Returns:
            SolverConfig instance
        """
        return cls(
            max_rounds=int(settings.get("max_rounds", DEFAULT_MAX_ROUNDS)),
            verbose=bool(settings.get("verbose", False)),
            ywing_eliminates=bool(settings.get("ywing_eliminates", True)),
            techniques=settings.get("techniques"),
        )


@dataclass
class SolveContext:
    """
    Shared context for the rounds of one solve.

    Attributes:
        grid: Candidate grid owned by the solve
        topology: Houses and lines of the grid
        config: Solver options
        progress_callback: Optional callback for progress updates
    """
    grid: CandidateGrid
    topology: Topology
    config: SolverConfig = field(default_factory=SolverConfig)
    progress_callback: Optional[Callable[[float, str], None]] = None

    def report_progress(self, percent: float, message: str = "") -> None:
        """
        Report progress to the caller.

        Args:
            percent: Progress from 0.0 to 1.0
            message: Optional status message
        """
        if self.progress_callback:
            self.progress_callback(percent, message)
