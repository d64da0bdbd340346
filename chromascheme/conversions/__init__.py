"""
chromascheme Color Space Conversions
====================================

RGB ↔ HSL conversion utilities with scalar and vectorized (numpy)
implementations, plus the hex text codec.

Conversion Functions
-------------------

RGB → HSL:
    unit_rgb_to_hsl(r, g, b)
        Scalar RGB to HSL conversion

HSL → RGB:
    hsl_to_unit_rgb(h, s, l)
        Scalar HSL to RGB conversion
    np_hsl_to_unit_rgb(h, s, l)
        Vectorized HSL to RGB conversion

8-bit API
---------
    rgb_to_hsl(rgb) / hsl_to_rgb(h, s, l)
        Conversions at 8-bit channel scale
    unit_to_channel(x) / np_unit_to_rgb255(arr)
        Float [0, 1] to int [0, 255], rounding half up

Hex Codec
---------
    decode(text) -> Color
    encode(color) -> "#rrggbb"

Examples
--------
>>> from chromascheme.conversions import unit_rgb_to_hsl, hsl_to_unit_rgb
>>> h, s, l = unit_rgb_to_hsl(1.0, 0.0, 0.0)
>>> (h, float(s), float(l))
(0.0, 1.0, 0.5)
>>> hsl_to_unit_rgb(120.0, 1.0, 0.5)
(0.0, 1.0, 0.0)
"""

from .to_hsl import normalize_hue, unit_rgb_to_hsl
from .to_rgb import hsl_to_unit_rgb, np_hsl_to_unit_rgb
from .wrapper import rgb_to_hsl, hsl_to_rgb, unit_to_channel, np_unit_to_rgb255
from .hexcodec import decode, encode, parse_hex, format_hex

__all__ = [
    # RGB → HSL
    'normalize_hue',
    'unit_rgb_to_hsl',

    # HSL → RGB
    'hsl_to_unit_rgb',
    'np_hsl_to_unit_rgb',

    # 8-bit API
    'rgb_to_hsl',
    'hsl_to_rgb',
    'unit_to_channel',
    'np_unit_to_rgb255',

    # Hex codec
    'decode',
    'encode',
    'parse_hex',
    'format_hex',
]
