"""
Color scales: a seed followed by N colors stepping toward an anchor.

Steps exclude both endpoints, ``t_i = i / (N + 1)`` for ``i = 1..N``, so no
generated color equals the seed or the anchor exactly (up to rounding).
Members are computed in one vectorized pass.
"""
from __future__ import annotations
from typing import List

import numpy as np
from numpy import ndarray as NDArray

from .colors.color import Color
from .conversions import np_hsl_to_unit_rgb, np_unit_to_rgb255
from .errors import InvalidCount
from .types.color_types import CHANNEL_MAX


def _validate_count(count: int) -> int:
    if isinstance(count, bool) or not isinstance(count, (int, np.integer)) or count <= 0:
        raise InvalidCount(count)
    return int(count)


def interior_steps(count: int) -> NDArray:
    """``count`` evenly spaced values strictly inside (0, 1)."""
    count = _validate_count(count)
    return np.linspace(0.0, 1.0, count + 2)[1:-1]


def _colors_from_rgb255(rgb: NDArray, alpha: int) -> List[Color]:
    return [Color(tuple(int(c) for c in row), alpha) for row in rgb]


def _colors_from_hsl(h: NDArray, s: NDArray, l: NDArray, alpha: int) -> List[Color]:
    rgb = np_unit_to_rgb255(np_hsl_to_unit_rgb(h, s, l))
    return _colors_from_rgb255(rgb, alpha)


def monochromatic(color: Color, count: int) -> List[Color]:
    """Seed, then ``count`` colors of its hue and saturation at evenly spaced lightness."""
    t = interior_steps(count)
    h, s, _ = color.hsl
    return [color] + _colors_from_hsl(h, s, t, color.alpha)


def shades(color: Color, count: int) -> List[Color]:
    """Seed, then ``count`` colors stepping its lightness toward black."""
    t = interior_steps(count)
    h, s, l = color.hsl
    return [color] + _colors_from_hsl(h, s, l * (1.0 - t), color.alpha)


def tints(color: Color, count: int) -> List[Color]:
    """Seed, then ``count`` colors stepping its lightness toward white."""
    t = interior_steps(count)
    h, s, l = color.hsl
    return [color] + _colors_from_hsl(h, s, l + (1.0 - l) * t, color.alpha)


def tones(color: Color, count: int) -> List[Color]:
    """Seed, then ``count`` colors stepping its saturation toward gray."""
    t = interior_steps(count)
    h, s, l = color.hsl
    return [color] + _colors_from_hsl(h, s * (1.0 - t), l, color.alpha)


def blends(color1: Color, color2: Color, count: int) -> List[Color]:
    """Both seeds, then ``count`` colors interpolated channel-wise in RGB between them."""
    u = interior_steps(count)
    start = np.array(color1.rgb, dtype=float)
    end = np.array(color2.rgb, dtype=float)

    colors = start * (1 - u[:, None]) + end * u[:, None]
    rgb = np.clip(np.floor(colors + 0.5), 0, CHANNEL_MAX).astype(int)

    return [color1, color2] + _colors_from_rgb255(rgb, color1.alpha)
