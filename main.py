"""
Sudoku Logic Solver - Entry Point

Runs the command line interface from a source checkout:
    python main.py --puzzle <81 digits> -v
"""

import sys

from sudoku_logic.cli import main

if __name__ == "__main__":
    sys.exit(main())
