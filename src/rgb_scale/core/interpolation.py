"""Linear RGBA interpolation between color stops."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .validation import is_nan, is_number, is_sequence, to_float

Color = tuple[float, float, float, float]

FALLBACK_COLOR: Color = (0.0, 0.0, 0.0, 1.0)


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def clip_rgb(color: Any) -> Color:
    """Clamp R/G/B to [0, 255] and alpha to [0, 1].

    Returns a new 4-tuple; the input is left untouched. Anything that is not
    a sequence of at least three numbers becomes opaque black. A missing
    alpha is taken as 1.
    """
    if not is_sequence(color) or len(color) < 3:
        return FALLBACK_COLOR
    channels = list(color[:4])
    if not all(is_number(c) for c in channels):
        return FALLBACK_COLOR
    if len(channels) == 3:
        channels.append(1.0)
    r, g, b, a = (to_float(c) for c in channels)
    return (
        _clamp(r, 0.0, 255.0),
        _clamp(g, 0.0, 255.0),
        _clamp(b, 0.0, 255.0),
        _clamp(a, 0.0, 1.0),
    )


def clip_t(t: Any) -> float:
    """Clamp an interpolation fraction to [0, 1]. Non-numbers become 0."""
    if not is_number(t) or is_nan(t):
        return 0.0
    return _clamp(to_float(t), 0.0, 1.0)


def interpolate_rgb(color_a: Any, color_b: Any, t: Any) -> Color:
    """Blend two colors channel by channel: a + t * (b - a).

    Both colors and t are clipped first. Results are not rounded.
    """
    a = clip_rgb(color_a)
    b = clip_rgb(color_b)
    t = clip_t(t)
    return (
        a[0] + t * (b[0] - a[0]),
        a[1] + t * (b[1] - a[1]),
        a[2] + t * (b[2] - a[2]),
        a[3] + t * (b[3] - a[3]),
    )


def resolve_stop_color(
    colors: Sequence[Any],
    positions: Sequence[float],
    t: float,
) -> Any | None:
    """Find the color at fraction t along the stops.

    A t at or before a stop (or at or past the last one) resolves to that
    stop's color exactly. A t strictly between two stops is rescaled into
    the segment and blended. Returns None when no stop matches, e.g. for
    empty positions or a NaN last position.
    """
    last = len(positions) - 1
    for i, p in enumerate(positions):
        if t <= p or (t >= p and i == last):
            return colors[i] if i < len(colors) else None
        if i == last:
            break
        nxt = positions[i + 1]
        if p < t < nxt:
            if i + 1 >= len(colors):
                return None
            local_t = (t - p) / (nxt - p)
            return interpolate_rgb(colors[i], colors[i + 1], local_t)
    return None


def even_positions(n: int) -> list[float]:
    """Evenly spaced stop positions i / (n - 1) for n colors."""
    if n <= 0:
        return []
    if n == 1:
        return [0.0]
    return [i / (n - 1) for i in range(n)]
