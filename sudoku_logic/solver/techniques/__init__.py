"""
Techniques Package - Concrete elimination technique implementations.

Import this module to register all built-in techniques.
"""

from .simple_elimination import SimpleElimination
from .hidden_singles import HiddenSingles
from .naked_sets import NakedPairs, NakedTriples
from .hidden_sets import HiddenPairs, HiddenTriples
from .intersection import Intersection
from .x_wing import XWing
from .y_wing import YWing

__all__ = [
    "SimpleElimination",
    "HiddenSingles",
    "NakedPairs",
    "NakedTriples",
    "HiddenPairs",
    "HiddenTriples",
    "Intersection",
    "XWing",
    "YWing",
]
