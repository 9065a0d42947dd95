"""rgb-scale: map numbers to RGBA colors along multi-stop gradients."""

from ._version import __version__
from .core.color_scale import ColorScale
from .core.domain import ClassedDomain, ContinuousDomain, make_domain
from .core.interpolation import FALLBACK_COLOR, clip_rgb, clip_t, interpolate_rgb

__all__ = [
    "__version__",
    "ColorScale",
    "ContinuousDomain",
    "ClassedDomain",
    "make_domain",
    "FALLBACK_COLOR",
    "clip_rgb",
    "clip_t",
    "interpolate_rgb",
]
