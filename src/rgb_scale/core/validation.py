"""Input predicates and validation with clear error messages."""

from __future__ import annotations

import math
from collections.abc import Sequence
from numbers import Real
from typing import Any

import numpy as np


def is_sequence(obj: Any) -> bool:
    """True for ordered sequences of values (lists, tuples, numpy arrays).

    Strings and bytes are sequences in Python but never valid input here.
    """
    if isinstance(obj, (str, bytes)):
        return False
    if isinstance(obj, np.ndarray):
        return obj.ndim >= 1
    return isinstance(obj, Sequence)


def is_number(obj: Any) -> bool:
    """True for real numbers, including numpy scalars. Booleans are excluded."""
    if isinstance(obj, (bool, np.bool_)):
        return False
    return isinstance(obj, Real)


def to_float(obj: Any) -> float:
    """float(obj) for a real number. Integers too large for a float become +/-inf."""
    try:
        return float(obj)
    except OverflowError:
        return math.inf if obj > 0 else -math.inf


def is_nan(obj: Any) -> bool:
    return is_number(obj) and math.isnan(to_float(obj))


def is_numeric_sequence(obj: Any, min_length: int = 0) -> bool:
    """True if obj is a sequence of at least min_length real numbers."""
    if not is_sequence(obj) or len(obj) < min_length:
        return False
    return all(is_number(v) for v in obj)


def validate_colormap_name(name: str) -> str:
    """Validate that a matplotlib colormap name exists."""
    import matplotlib

    if not isinstance(name, str) or name not in matplotlib.colormaps:
        raise ValueError(
            f"Unknown colormap '{name}'. Use a matplotlib colormap name "
            f"like 'viridis', 'plasma', 'RdBu_r', etc."
        )
    return name
