from .color_types import (
    Scalar, RGBTuple, UnitRGBTuple, HSLTuple, ColorElement,
    HUE_360, CHANNEL_MAX, DEFAULT_ALPHA, ROUND_DECIMALS, HEX_CASE,
    CONTRAST_THRESHOLD, WARM_HUE_LIMIT, COOL_HUE_LIMIT,
    element_to_array,
)

__all__ = [
    "Scalar", "RGBTuple", "UnitRGBTuple", "HSLTuple", "ColorElement",
    "HUE_360", "CHANNEL_MAX", "DEFAULT_ALPHA", "ROUND_DECIMALS", "HEX_CASE",
    "CONTRAST_THRESHOLD", "WARM_HUE_LIMIT", "COOL_HUE_LIMIT",
    "element_to_array",
]
