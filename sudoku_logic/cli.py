"""
Sudoku Logic Solver - Command line interface

Reads 81-digit puzzle strings, solves them with deductive techniques only,
and prints the result. Without --puzzle, puzzles are read interactively
until EOF or "quit".

Example:
    sudoku-logic
    sudoku-logic --puzzle 530070000600195000098000060800060003400803001700020006060000280000419005000080079 -v
    sudoku-logic --max-rounds 10 --no-ywing-elimination --candidates
"""

import sys
import logging
import argparse
from typing import Any, Dict, List, Optional, TextIO

from .puzzle import (
    PuzzleFormatError,
    format_board,
    format_candidates,
    parse_puzzle,
    to_puzzle_string,
)
from .settings import load_settings, save_settings
from .solver import LogicSolver, SolverConfig, format_report

logger = logging.getLogger(__name__)

QUIT_WORDS = {"quit", "exit", "q"}

# Exit codes
EXIT_SOLVED = 0
EXIT_BAD_INPUT = 1
EXIT_UNSOLVED = 2


def configure_logging(verbose: bool, log_file: Optional[str]) -> None:
    """Configure logging - output to console and, optionally, a file."""
    handlers: List[logging.Handler] = [logging.StreamHandler()]  # Console output
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=handlers,
        force=True,
    )


def solve_text(text: str, solver: LogicSolver, show_candidates: bool = False,
               out: Optional[TextIO] = None) -> int:
    """
    Parse, solve and print one puzzle.

    Args:
        text: Raw puzzle string
        solver: Configured solver
        show_candidates: Also print the 27x27 candidate grid
        out: Stream to print to (sys.stdout at call time when None)

    Returns:
        Exit code (EXIT_SOLVED, EXIT_BAD_INPUT or EXIT_UNSOLVED)
    """
    out = out or sys.stdout
    try:
        puzzle = parse_puzzle(text)
    except PuzzleFormatError as e:
        print(e, file=out)
        return EXIT_BAD_INPUT

    result = solver.solve(puzzle)

    if solver.config.verbose:
        print(format_report(result), file=out)
    if show_candidates:
        print(file=out)
        print(format_candidates(result.grid), file=out)

    print(file=out)
    print("Final Solution:\n", file=out)
    print(format_board(to_puzzle_string(result.grid)), file=out)

    return EXIT_SOLVED if result.is_solved else EXIT_UNSOLVED


def interactive_loop(solver: LogicSolver, show_candidates: bool = False,
                     stream: Optional[TextIO] = None, out: Optional[TextIO] = None) -> int:
    """
    Read-solve-print loop.

    Lines are stripped before parsing. Malformed puzzles print their error
    and the loop continues.

    Returns:
        Number of puzzles attempted
    """
    stream = stream or sys.stdin
    out = out or sys.stdout
    attempted = 0
    while True:
        print("Enter the puzzle in string form:", file=out)
        line = stream.readline()
        if not line:
            break
        line = line.strip()
        if not line:
            continue
        if line.lower() in QUIT_WORDS:
            break

        attempted += 1
        solve_text(line, solver, show_candidates, out)
        print(file=out)
    return attempted


def build_config(args: argparse.Namespace, settings: Dict[str, Any]) -> SolverConfig:
    """
    Apply command line overrides to the saved settings (CLI wins).

    Args:
        args: Parsed arguments
        settings: Settings dictionary, updated in place

    Returns:
        SolverConfig for the effective settings

    Raises:
        ValueError: If the effective settings are not a valid SolverConfig
    """
    if args.verbose:
        settings["verbose"] = True
    if args.max_rounds is not None:
        settings["max_rounds"] = args.max_rounds
    if args.no_ywing_elimination:
        settings["ywing_eliminates"] = False
    if args.candidates:
        settings["show_candidates"] = True
    return SolverConfig.from_settings(settings)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="sudoku-logic",
        description="Sudoku Logic Solver - Deductive solver with difficulty scoring"
    )
    parser.add_argument(
        "--puzzle", "-p",
        help="81-digit puzzle string (0 = blank); omit for interactive mode"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print the round trace and score report"
    )
    parser.add_argument(
        "--max-rounds",
        type=int,
        default=None,
        help="Round cap before giving up (default from settings, 50)"
    )
    parser.add_argument(
        "--no-ywing-elimination",
        action="store_true",
        help="Detect Y-Wings without removing candidates"
    )
    parser.add_argument(
        "--candidates", "-c",
        action="store_true",
        help="Print the remaining candidates as a 27x27 grid"
    )
    parser.add_argument(
        "--save-settings",
        action="store_true",
        help="Persist the effective options to config.json"
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write log output to this file"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the Sudoku logic solver."""
    args = parse_args(argv)
    settings = load_settings()
    try:
        config = build_config(args, settings)
        solver = LogicSolver(config)
    except (TypeError, ValueError) as e:
        print(f"Invalid options: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    configure_logging(config.verbose, args.log_file)

    if args.save_settings:
        save_settings(settings)
        logger.info("Settings saved")

    show_candidates = bool(settings.get("show_candidates", False))

    if args.puzzle is not None:
        return solve_text(args.puzzle, solver, show_candidates)

    interactive_loop(solver, show_candidates)
    return EXIT_SOLVED
