"""Scale domains: continuous ranges and classed (binned) breakpoints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .validation import is_numeric_sequence, to_float


def _count_class(edges: tuple[float, ...], value: float) -> int:
    """Number of edges <= value, minus 1 (linear scan, left-inclusive bins)."""
    value = to_float(value)
    i = 0
    n = len(edges)
    while i < n and value >= edges[i]:
        i += 1
    return i - 1


@dataclass(frozen=True)
class ContinuousDomain:
    """Linear normalization between two breakpoints."""

    min: float
    max: float

    @property
    def breakpoints(self) -> tuple[float, ...]:
        return (self.min, self.max)

    @property
    def num_classes(self) -> int:
        return 0

    def get_class(self, value: float) -> int:
        return _count_class(self.breakpoints, value)

    def fraction(self, value: float) -> float:
        """(value - min) / (max - min), clamped to [0, 1]. Zero when min == max."""
        if self.min == self.max:
            return 0.0
        t = (to_float(value) - self.min) / (self.max - self.min)
        return max(0.0, min(1.0, t))


@dataclass(frozen=True)
class ClassedDomain:
    """Quantized domain: N + 1 edges define N classes.

    A value equal to an edge belongs to the class starting at that edge.
    Values below the first edge get class -1 and values at or above the
    last edge get class N, so fractions fall outside [0, 1] there and
    resolve to the first or last color stop.
    """

    edges: tuple[float, ...]

    @property
    def breakpoints(self) -> tuple[float, ...]:
        return self.edges

    @property
    def min(self) -> float:
        return self.edges[0]

    @property
    def max(self) -> float:
        return self.edges[-1]

    @property
    def num_classes(self) -> int:
        return len(self.edges) - 1

    def get_class(self, value: float) -> int:
        return _count_class(self.edges, value)

    def fraction(self, value: float) -> float:
        """class index / (num_classes - 1). Not clamped."""
        return self.get_class(value) / (self.num_classes - 1)


Domain = ContinuousDomain | ClassedDomain

DEFAULT_DOMAIN = ContinuousDomain(0.0, 1.0)


def make_domain(breakpoints: Any) -> Domain | None:
    """Build the domain variant for a sequence of breakpoints.

    Two breakpoints give a ContinuousDomain, more give a ClassedDomain.
    Returns None for anything that is not a sequence of at least two numbers.
    """
    if not is_numeric_sequence(breakpoints, min_length=2):
        return None
    edges = tuple(to_float(v) for v in breakpoints)
    if len(edges) == 2:
        return ContinuousDomain(edges[0], edges[1])
    return ClassedDomain(edges)
