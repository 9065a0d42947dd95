"""Serializers: convert color scales to JS-transferable formats."""

from __future__ import annotations

import json
from typing import Any

from ..core.color_scale import ColorScale


def serialize_color_lut(color_scale: ColorScale) -> bytes:
    """Stops sampled at 256 fractions across [0, 1], packed as uint8 RGBA rows."""
    return color_scale.to_bytes()


def serialize_config(color_scale: ColorScale, **extra: Any) -> str:
    """Serialize scale configuration as JSON string."""
    config = {
        **color_scale.to_dict(),
        **extra,
    }
    return json.dumps(config)
