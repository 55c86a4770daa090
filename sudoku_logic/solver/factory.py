"""
Technique Registry - Maps technique names to their classes.

Techniques register themselves on import (see techniques/__init__.py).
The registry is the single source of the solve order: techniques run by
ascending priority, and score weights and report labels are read from the
same classes.
"""

from typing import Any, Dict, List, Type

from .base import EliminationTechnique


_TECHNIQUES: Dict[str, Type[EliminationTechnique]] = {}


def register_technique(cls: Type[EliminationTechnique]) -> Type[EliminationTechnique]:
    """
    Class decorator adding a technique to the registry under cls.name.

    Two techniques may not share a priority, since the priority fixes
    their place in every round.

    Raises:
        ValueError: If another registered technique already has the priority
    """
    for other in _TECHNIQUES.values():
        if other.priority == cls.priority and other.name != cls.name:
            raise ValueError(
                f"Technique {cls.name} has priority {cls.priority}, "
                f"already used by {other.name}"
            )
    _TECHNIQUES[cls.name] = cls
    return cls


def create_technique(name: str, **kwargs: Any) -> EliminationTechnique:
    """
    Instantiate a registered technique.

    Args:
        name: Technique name, e.g. "naked_pairs" or "y_wing"
        **kwargs: Constructor options (y_wing takes eliminate=bool)

    Raises:
        ValueError: If no technique has that name
    """
    if name not in _TECHNIQUES:
        available = ", ".join(get_technique_names())
        raise ValueError(f"Unknown technique: {name}. Available: {available}")
    return _TECHNIQUES[name](**kwargs)


def get_technique_names() -> List[str]:
    """Registered technique names in the order a round tries them."""
    ordered = sorted(_TECHNIQUES.values(), key=lambda cls: cls.priority)
    return [cls.name for cls in ordered]


def get_technique_info() -> List[Dict[str, Any]]:
    """
    Describe every technique for reports and --help style listings.

    Returns:
        One dict per technique in solve order, with 'name', 'label',
        'description' and 'weight' (score points per candidate removed)
    """
    info = []
    for name in get_technique_names():
        cls = _TECHNIQUES[name]
        info.append({
            "name": cls.name,
            "label": cls.label,
            "description": cls.description,
            "weight": cls.weight,
        })
    return info


def get_technique_weights() -> Dict[str, int]:
    """Score weight per technique name."""
    return {name: _TECHNIQUES[name].weight for name in get_technique_names()}
