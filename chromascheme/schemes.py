"""
Hue-wheel color schemes.

Each scheme is the seed followed by fixed hue rotations of it. Saturation,
lightness and alpha are carried through unchanged.
"""
from __future__ import annotations
from typing import List, Sequence

from .colors.color import Color
from .tonal import hue_offset, complementary

TRIADIC_OFFSETS = (120, 240)
QUADRATIC_OFFSETS = (90, 180, 270)
ANALOGOUS_OFFSETS = (-30, 30)
SPLIT_COMPLEMENTARY_OFFSETS = (150, 210)


def rotations(color: Color, offsets: Sequence[float]) -> List[Color]:
    """``[color]`` followed by ``color`` rotated by each offset, in order."""
    return [color] + [hue_offset(color, degrees) for degrees in offsets]


def triadic(color: Color) -> List[Color]:
    return rotations(color, TRIADIC_OFFSETS)


def quadratic(color: Color) -> List[Color]:
    return rotations(color, QUADRATIC_OFFSETS)


def tetradic(color1: Color, color2: Color) -> List[Color]:
    """Both seeds, each immediately followed by its complement."""
    return [color1, complementary(color1), color2, complementary(color2)]


def analogous(color: Color) -> List[Color]:
    return rotations(color, ANALOGOUS_OFFSETS)


def split_complementary(color: Color) -> List[Color]:
    return rotations(color, SPLIT_COMPLEMENTARY_OFFSETS)
