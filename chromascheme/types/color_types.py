from __future__ import annotations
from typing import Literal, Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
RGBTuple = Tuple[int, int, int]
UnitRGBTuple = Tuple[float, float, float]
HSLTuple = Tuple[float, float, float]
ColorElement = Union[RGBTuple, UnitRGBTuple, HSLTuple]
HexCase = Literal["lower", "upper"]

HUE_360 = 360.0
CHANNEL_MAX = 255
DEFAULT_ALPHA = CHANNEL_MAX

# Decimals kept before half-up rounding so ulp-level noise cannot flip a channel
ROUND_DECIMALS = 9

# Hex digits emitted by encode()
HEX_CASE: HexCase = "lower"

# Relative luminance above this gets black as its contrast color
CONTRAST_THRESHOLD = 0.5

# Warm is the half-open arc (-90, 90] around red
WARM_HUE_LIMIT = 90.0
COOL_HUE_LIMIT = HUE_360 - WARM_HUE_LIMIT

# sRGB transfer function
SRGB_TO_LINEAR_TH = 0.04045
SRGB_GAMMA = 2.4
LUMINANCE_WEIGHTS = (0.2126, 0.7152, 0.0722)


def element_to_array(element: Union[ColorElement, ndarray]) -> np.ndarray:
    """
    Convert a color element to a float numpy array.

    Args:
        element: Tuple of channels, or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element.astype(float, copy=False)
    return np.array(element, dtype=float)
