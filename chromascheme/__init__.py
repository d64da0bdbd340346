"""
chromascheme - Color Schemes and Scales from Hex Colors
=======================================================

Derive colors and palettes from one or two input colors: lighten/darken,
complementary and contrasting colors, hue rotation, warm/cool classification,
hue-wheel schemes and interpolated scales.

Key Features
------------
- Immutable ``Color`` values with RGB and HSL views
- Hex codec accepting ``#RRGGBB`` / ``#RGB`` with or without ``#``
- RGB ↔ HSL conversions, scalar and vectorized
- Schemes: triadic, quadratic, tetradic, analogous, split-complementary
- Scales: monochromatic, shades, tints, tones, blends
- A command-line front end printing JSON

Quick Start
-----------
>>> from chromascheme import decode, encode, complementary, triadic, blends
>>>
>>> red = decode("#FF0000")
>>> encode(complementary(red))
'#00ffff'
>>> [encode(c) for c in triadic(red)]
['#ff0000', '#00ff00', '#0000ff']
>>> [encode(c) for c in blends(decode("000"), decode("fff"), 1)]
['#000000', '#ffffff', '#808080']

Modules
-------
- colors: the ``Color`` value type
- conversions: RGB ↔ HSL conversions and the hex codec
- tonal: single-color operators
- schemes: fixed-size hue-wheel schemes
- scales: variable-length scales
- operations: ``Operation`` / ``OperationRequest`` dispatch
- cli: command-line front end
"""

__version__ = "1.0.0"

from .colors import Color, BLACK, WHITE
from .conversions import decode, encode, rgb_to_hsl, hsl_to_rgb
from .errors import (
    ChromaSchemeError, InvalidFormat, InvalidCount, MissingOperand,
    NoOperationSelected, ConflictingOperations,
)
from .tonal import (
    darker, lighter, hue_offset, complementary, contrast,
    relative_luminance, is_warm, is_cool,
)
from .schemes import triadic, quadratic, tetradic, analogous, split_complementary
from .scales import monochromatic, shades, tints, tones, blends
from .operations import Operation, OperationRequest, select_operation

__all__ = [
    # Color
    "Color", "BLACK", "WHITE",

    # Codec and conversions
    "decode", "encode", "rgb_to_hsl", "hsl_to_rgb",

    # Errors
    "ChromaSchemeError", "InvalidFormat", "InvalidCount", "MissingOperand",
    "NoOperationSelected", "ConflictingOperations",

    # Tonal operators
    "darker", "lighter", "hue_offset", "complementary", "contrast",
    "relative_luminance", "is_warm", "is_cool",

    # Schemes
    "triadic", "quadratic", "tetradic", "analogous", "split_complementary",

    # Scales
    "monochromatic", "shades", "tints", "tones", "blends",

    # Operation dispatch
    "Operation", "OperationRequest", "select_operation",

    # Version
    "__version__",
]
