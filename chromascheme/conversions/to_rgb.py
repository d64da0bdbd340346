import math
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import HUE_360
from .to_hsl import normalize_hue


def hsl_to_unit_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to RGB.
    Based on: https://en.wikipedia.org/wiki/HSL_and_HSV#Converting_to_RGB

    Args:
        h: Hue in degrees, any value (wrapped to [0, 360))
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    h = normalize_hue(h)

    # m1 is the largest channel, 2l - m1 the smallest, m2 the one in between
    m1 = l + s * (l if l < 0.5 else 1 - l)
    m2 = m1 - (m1 - l) * 2 * abs(((h / 60) % 2) - 1)
    low = 2 * l - m1

    hue_section = int(math.floor(h / 60))

    if hue_section == 0:
        return m1, m2, low
    if hue_section == 1:
        return m2, m1, low
    if hue_section == 2:
        return low, m1, m2
    if hue_section == 3:
        return low, m2, m1
    if hue_section == 4:
        return m2, low, m1
    return m1, low, m2


# (r, g, b) picks per hue section: 0 = m1, 1 = m2, 2 = low
_SECTION_PICKS = np.array([
    [0, 1, 2],
    [1, 0, 2],
    [2, 0, 1],
    [2, 1, 0],
    [1, 2, 0],
    [0, 2, 1],
])


def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB.

    Args:
        h: array-like or scalar, hue in degrees
        s: array-like or scalar, saturation in [0, 1]
        l: array-like or scalar, lightness in [0, 1]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h = np.asarray(h, dtype=float) % HUE_360
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    m1 = l + s * np.where(l < 0.5, l, 1 - l)
    m2 = m1 - (m1 - l) * 2 * np.abs(((h / 60) % 2) - 1)
    low = 2 * l - m1

    candidates = np.stack([m1, m2, low], axis=-1)
    hue_section = np.clip(np.floor(h / 60).astype(int), 0, 5)
    picks = _SECTION_PICKS[hue_section]

    return np.take_along_axis(candidates, picks, axis=-1)
