"""ColorScale: value → RGBA color through a domain and a set of color stops."""

from __future__ import annotations

import logging
import math
from typing import Any

import numpy as np
import pandas as pd

from .domain import DEFAULT_DOMAIN, ClassedDomain, Domain, make_domain
from .interpolation import (
    FALLBACK_COLOR,
    Color,
    clip_rgb,
    even_positions,
    resolve_stop_color,
)
from .validation import (
    is_number,
    is_numeric_sequence,
    is_sequence,
    to_float,
    validate_colormap_name,
)

logger = logging.getLogger(__name__)

# Interpolation fractions are quantized to 4 decimal digits for the cache.
CACHE_RESOLUTION = 10000


def _normalize_color(color: Any) -> Color | None:
    """Copy a color as a float tuple, adding alpha = 1 to RGB triples.

    Malformed colors are stored as None and resolve to opaque black.
    Components are not clamped here.
    """
    if not is_sequence(color) or len(color) < 3:
        return None
    channels = list(color[:4])
    if not all(is_number(c) for c in channels):
        return None
    if len(channels) == 3:
        channels.append(1.0)
    return tuple(to_float(c) for c in channels)


def _coerce_value(value: Any) -> float:
    """Input value as a float; non-numbers count as 0."""
    if not is_number(value):
        return 0.0
    return to_float(value)


class ColorScale:
    """Maps scalar values to RGBA colors.

    Colors are anchored at positions on a normalized [0, 1] axis. Input
    values are normalized through the domain: two breakpoints give a
    continuous scale, more give a classed scale where every value in a bin
    gets the same color. The scale never raises on bad input; invalid
    configuration is ignored and unmappable values come back opaque black.

    The instance is callable, ``scale(v)`` is ``scale.map(v)``, and all
    setters return the instance so calls can be chained::

        scale = ColorScale([[0, 0, 0], [255, 255, 255]]).set_domain([0, 100])
        scale(50)  # (127.5, 127.5, 127.5, 1.0)

    Returned colors are shared with the internal cache and are immutable
    tuples. Instances are not thread-safe.
    """

    __slots__ = ("_colors", "_positions", "_domain", "_cache")

    LUT_SIZE = 256

    def __init__(
        self,
        colors: Any = None,
        positions: Any = None,
        domain: Any = None,
    ) -> None:
        self._colors: list[Color | None] = []
        self._positions: list[float] = []
        self._domain: Domain = DEFAULT_DOMAIN
        self._cache: dict[int, Color] = {}

        self.set_colors(colors)
        self.set_positions(positions)
        self.set_domain(domain)

    # --- configuration ---

    def set_colors(self, colors: Any) -> ColorScale:
        """Replace the color stops. Non-sequence input is ignored."""
        if not is_sequence(colors):
            if colors is not None:
                logger.debug("Ignoring colors %r: not a sequence", colors)
            return self
        self._colors = [_normalize_color(c) for c in colors]
        self._cache.clear()
        return self

    def set_positions(self, positions: Any = None) -> ColorScale:
        """Replace the stop positions.

        Positions are taken verbatim (no range or order check). Without a
        numeric sequence, stops are spread evenly over the current colors.
        """
        if is_numeric_sequence(positions):
            self._positions = [to_float(p) for p in positions]
        else:
            if positions is not None:
                logger.debug("Ignoring positions %r: not a numeric sequence", positions)
            self._positions = even_positions(len(self._colors))
        self._cache.clear()
        return self

    def set_domain(self, domain: Any) -> ColorScale:
        """Replace the domain. Needs a sequence of at least two numbers."""
        new_domain = make_domain(domain)
        if new_domain is None:
            if domain is not None:
                logger.debug("Ignoring domain %r: need at least two numbers", domain)
            return self
        self._domain = new_domain
        self._cache.clear()
        return self

    def clear_cache(self) -> None:
        self._cache.clear()

    # --- state ---

    @property
    def colors(self) -> list[Color | None]:
        return list(self._colors)

    @property
    def positions(self) -> list[float]:
        return list(self._positions)

    @property
    def domain(self) -> list[float]:
        return list(self._domain.breakpoints)

    @property
    def min(self) -> float:
        return self._domain.min

    @property
    def max(self) -> float:
        return self._domain.max

    @property
    def num_classes(self) -> int:
        """0 for a continuous domain, else the number of bins."""
        return self._domain.num_classes

    @property
    def is_classed(self) -> bool:
        return isinstance(self._domain, ClassedDomain)

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    # --- mapping ---

    def get_class(self, value: Any) -> int:
        """Index of the domain bin holding value (edges are left-inclusive).

        -1 below the first edge, len(domain) - 1 at or above the last.
        """
        return self._domain.get_class(_coerce_value(value))

    def fraction(self, value: Any) -> float:
        """Interpolation fraction t for value. Classed fractions are unclamped."""
        return self._domain.fraction(_coerce_value(value))

    def color_at(self, t: float) -> Color:
        """Color at fraction t along the stops, bypassing the domain and cache."""
        color = resolve_stop_color(self._colors, self._positions, t)
        return color if color is not None else FALLBACK_COLOR

    def map(self, value: Any) -> Color:
        """Map a value to an RGBA color.

        Non-numeric values are treated as 0. On a continuous domain NaN maps
        to opaque black; on a classed domain it falls below every edge and
        gets the first color.
        """
        value = _coerce_value(value)
        if math.isnan(value) and not self.is_classed:
            return FALLBACK_COLOR

        t = self._domain.fraction(value)
        key = math.floor(t * CACHE_RESOLUTION)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        color = resolve_stop_color(self._colors, self._positions, t)
        if color is None:
            return FALLBACK_COLOR
        self._cache[key] = color
        return color

    __call__ = map

    def map_array(self, values: Any) -> np.ndarray:
        """Map every element of an array-like. Returns shape values.shape + (4,)."""
        arr = np.asarray(values, dtype=object)
        out = np.empty(arr.shape + (4,), dtype=np.float64)
        for idx, v in np.ndenumerate(arr):
            out[idx] = self.map(v)
        return out

    def map_series(self, series: pd.Series) -> pd.DataFrame:
        """Map a Series to a DataFrame of r, g, b, a columns on the same index."""
        return pd.DataFrame(
            self.map_array(series.to_numpy()),
            index=series.index,
            columns=["r", "g", "b", "a"],
        )

    # --- lookup table / matplotlib ---

    def to_lut(self, size: int | None = None) -> np.ndarray:
        """Build a (size, 4) uint8 RGBA lookup table across the stops.

        Entry i holds the color at fraction i / (size - 1). RGB channels are
        truncated, alpha is scaled to 0..255.
        """
        size = self.LUT_SIZE if size is None else int(size)
        fractions = np.linspace(0.0, 1.0, size)
        rgba = np.array(
            [clip_rgb(self.color_at(float(t))) for t in fractions],
            dtype=np.float64,
        ).reshape(size, 4)
        rgba[:, 3] *= 255.0
        return rgba.astype(np.uint8)

    def to_bytes(self) -> bytes:
        """Raw bytes of to_lut(): LUT_SIZE rows of R, G, B, A, row-major."""
        return self.to_lut().tobytes()

    def to_cmap(self, name: str = "rgb_scale"):
        """Return the stops as a matplotlib ListedColormap of LUT_SIZE entries."""
        from matplotlib.colors import ListedColormap

        return ListedColormap(self.to_lut() / 255.0, name=name)

    @classmethod
    def from_cmap(
        cls,
        cmap_name: str,
        n_stops: int = 8,
        domain: Any = None,
    ) -> ColorScale:
        """Sample a matplotlib colormap into n_stops evenly spaced color stops."""
        import matplotlib

        validate_colormap_name(cmap_name)
        if n_stops < 1:
            raise ValueError(f"n_stops must be at least 1, got {n_stops}.")
        cmap = matplotlib.colormaps[cmap_name]
        rgba = cmap(np.linspace(0.0, 1.0, n_stops))  # (n_stops, 4) float in [0, 1]
        rgba[:, :3] *= 255.0
        return cls(rgba.tolist(), None, domain)

    def to_dict(self) -> dict:
        """Configuration as plain lists, for JSON."""
        return {
            "colors": [list(c) if c is not None else None for c in self._colors],
            "positions": self.positions,
            "domain": self.domain,
            "numClasses": self.num_classes,
        }

    def __repr__(self) -> str:
        return (
            f"ColorScale(n_colors={len(self._colors)}, "
            f"domain={self.domain}, num_classes={self.num_classes})"
        )
