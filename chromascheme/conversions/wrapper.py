import numpy as np
from typing import Sequence, cast

from boundednumbers.functions import clamp

from ..types.color_types import CHANNEL_MAX, ROUND_DECIMALS, HSLTuple, RGBTuple, element_to_array
from .to_hsl import unit_rgb_to_hsl
from .to_rgb import hsl_to_unit_rgb


def unit_to_channel(value: float) -> int:
    """Scale a [0, 1] float to an 8-bit channel, rounding half up."""
    scaled = float(np.floor(round(float(value) * CHANNEL_MAX, ROUND_DECIMALS) + 0.5))
    return int(clamp(scaled, 0, CHANNEL_MAX))


def np_unit_to_rgb255(color: np.ndarray) -> np.ndarray:
    """Vectorized ``unit_to_channel``: floats in [0, 1] to ints in [0, 255]."""
    scaled = np.floor(np.round(element_to_array(color) * CHANNEL_MAX, ROUND_DECIMALS) + 0.5)
    return np.clip(scaled, 0, CHANNEL_MAX).astype(int)


def rgb_to_hsl(rgb: Sequence[int]) -> HSLTuple:
    """8-bit RGB to (hue, saturation, lightness)."""
    r, g, b = (channel / CHANNEL_MAX for channel in rgb)
    h, s, l = unit_rgb_to_hsl(r, g, b)
    return h, float(s), float(l)


def hsl_to_rgb(h: float, s: float, l: float) -> RGBTuple:
    """(hue, saturation, lightness) to 8-bit RGB."""
    r, g, b = hsl_to_unit_rgb(h, s, l)
    return cast(RGBTuple, (unit_to_channel(r), unit_to_channel(g), unit_to_channel(b)))
