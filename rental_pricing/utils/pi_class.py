"""Forza Performance Index (PI) class lookups.

Ranges come from definitions/pi_classes.yaml (D 100-500 ... X 999+).
"""

from __future__ import annotations

from functools import lru_cache
from typing import List, Optional, Tuple

from .definitions import PiClassDef, load_pi_classes

UNKNOWN_COLOR = "#6b7280"


@lru_cache(maxsize=1)
def pi_classes() -> Tuple[PiClassDef, ...]:
    return tuple(load_pi_classes())


def pi_class_names() -> List[str]:
    return [c.name for c in pi_classes()]


def _lookup(pi: float) -> Optional[PiClassDef]:
    for cls in pi_classes():
        if cls.min <= pi <= cls.max:
            return cls
    return None


def pi_class_name(pi: float) -> str:
    cls = _lookup(pi)
    if cls is not None:
        return cls.name
    table = pi_classes()
    # out of range: clamp to the lowest or highest class
    return table[0].name if pi <= table[0].min else table[-1].name


def pi_to_class(pi: Optional[float]) -> Optional[str]:
    """Canonical class for a PI value using lower bounds only (gaps fall to the class below)."""
    if pi is None:
        return None
    table = pi_classes()
    for cls in reversed(table[1:]):
        if pi >= cls.min:
            return cls.name
    return table[0].name


def pi_class_color(pi: float) -> str:
    cls = _lookup(pi)
    return cls.color if cls is not None else UNKNOWN_COLOR


def pi_class_range(name: str) -> Tuple[int, int]:
    for cls in pi_classes():
        if cls.name == name:
            return (cls.min, cls.max)
    return (0, 9999)


__all__ = [
    "UNKNOWN_COLOR",
    "pi_class_color",
    "pi_class_name",
    "pi_class_names",
    "pi_class_range",
    "pi_classes",
    "pi_to_class",
]
