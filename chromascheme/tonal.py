"""
Single-color operators: lightness, hue rotation, contrast and temperature.

Every function returns a new ``Color``; alpha is taken from the input.
"""
from __future__ import annotations

from boundednumbers.functions import clamp, cyclic_wrap_float

from .colors.color import Color, BLACK, WHITE
from .conversions import normalize_hue
from .types.color_types import (
    CHANNEL_MAX, CONTRAST_THRESHOLD, HUE_360, LUMINANCE_WEIGHTS, ROUND_DECIMALS,
    SRGB_GAMMA, SRGB_TO_LINEAR_TH, WARM_HUE_LIMIT, COOL_HUE_LIMIT,
)


def _unit(pct: float) -> float:
    return float(clamp(float(pct), 0.0, 1.0))


def darker(color: Color, pct: float) -> Color:
    """Scale lightness by ``1 - pct``. ``pct`` is clamped to [0, 1]."""
    _, _, l = color.hsl
    return color.with_hsl(l=l * (1.0 - _unit(pct)))


def lighter(color: Color, pct: float) -> Color:
    """Move lightness toward 1 by ``pct`` of the remaining headroom. ``pct`` is clamped to [0, 1]."""
    _, _, l = color.hsl
    return color.with_hsl(l=l + (1.0 - l) * _unit(pct))


def hue_offset(color: Color, degrees: float) -> Color:
    """Rotate the hue by ``degrees``; negative and >360 offsets wrap."""
    h, _, _ = color.hsl
    # reduce the offset first so d and d + 360 shift by the same float
    shifted = cyclic_wrap_float(h + degrees % HUE_360, 0.0, HUE_360)
    return color.with_hsl(h=round(normalize_hue(shifted), ROUND_DECIMALS))


def complementary(color: Color) -> Color:
    return hue_offset(color, 180)


def _srgb_to_linear(channel: int) -> float:
    c = channel / CHANNEL_MAX
    return c / 12.92 if c <= SRGB_TO_LINEAR_TH else ((c + 0.055) / 1.055) ** SRGB_GAMMA


def relative_luminance(color: Color) -> float:
    """WCAG relative luminance in [0, 1]."""
    return sum(w * _srgb_to_linear(c) for w, c in zip(LUMINANCE_WEIGHTS, color.rgb))


def contrast(color: Color) -> Color:
    """Black for light colors, white for dark ones."""
    base = BLACK if relative_luminance(color) > CONTRAST_THRESHOLD else WHITE
    return Color(base.rgb, color.alpha)


def is_warm(color: Color) -> bool:
    """True for hues in (-90°, 90°]: reds, oranges and yellows. Grays count as warm."""
    h = color.hue
    return h <= WARM_HUE_LIMIT or h > COOL_HUE_LIMIT


def is_cool(color: Color) -> bool:
    return not is_warm(color)
