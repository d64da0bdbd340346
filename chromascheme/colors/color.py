from __future__ import annotations
import math
from typing import Sequence, Tuple, cast

from boundednumbers.functions import clamp

from ..conversions import (
    rgb_to_hsl, hsl_to_rgb, unit_to_channel, normalize_hue, parse_hex, format_hex,
)
from ..types.color_types import CHANNEL_MAX, DEFAULT_ALPHA, HSLTuple, RGBTuple, Scalar


def _to_channel(value: Scalar) -> int:
    if not isinstance(value, int):
        value = math.floor(float(value) + 0.5)
    return int(clamp(value, 0, CHANNEL_MAX))


class Color:
    """
    Immutable 8-bit RGB color with an HSL view.

    The RGB channels are the stored truth; ``hsl`` is derived on demand.
    Alpha is carried along untouched by every operation.
    """
    __slots__ = ('_value', '_alpha', '_is_frozen')  # prevents adding new attributes → immutability

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Sequence[Scalar], alpha: Scalar = DEFAULT_ALPHA) -> None:
        if isinstance(value, Color):
            value, alpha = value.rgb, value.alpha

        if len(value) != 3:
            raise ValueError(f"Color expects 3 channels, got {len(value)}")

        # clamp value
        self._value = cast(RGBTuple, tuple(_to_channel(v) for v in value))
        self._alpha = _to_channel(alpha)

        # freeze instance, no more writes allowed
        object.__setattr__(self, '_is_frozen', True)

    # ------------------ ALTERNATE CONSTRUCTORS ------------------
    @classmethod
    def from_hsl(cls, h: float, s: float, l: float, alpha: Scalar = DEFAULT_ALPHA) -> Color:
        s = clamp(float(s), 0.0, 1.0)
        l = clamp(float(l), 0.0, 1.0)
        return cls(hsl_to_rgb(normalize_hue(h), s, l), alpha)

    @classmethod
    def from_unit_rgb(cls, r: float, g: float, b: float, alpha: Scalar = DEFAULT_ALPHA) -> Color:
        return cls(tuple(unit_to_channel(v) for v in (r, g, b)), alpha)

    @classmethod
    def from_hex(cls, text: str) -> Color:
        return cls(parse_hex(text))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> RGBTuple:
        return self._value

    rgb = value

    @property
    def red(self) -> int:
        return self._value[0]

    @property
    def green(self) -> int:
        return self._value[1]

    @property
    def blue(self) -> int:
        return self._value[2]

    @property
    def alpha(self) -> int:
        return self._alpha

    @property
    def rgba(self) -> Tuple[int, int, int, int]:
        return self._value + (self._alpha,)

    @property
    def hsl(self) -> HSLTuple:
        """(hue [0, 360), saturation [0, 1], lightness [0, 1]); hue is 0 for grays."""
        return rgb_to_hsl(self._value)

    @property
    def hue(self) -> float:
        return self.hsl[0]

    @property
    def saturation(self) -> float:
        return self.hsl[1]

    @property
    def lightness(self) -> float:
        return self.hsl[2]

    @property
    def hex(self) -> str:
        return format_hex(self._value)

    # ------------------ DERIVATION ------------------
    def with_hsl(self, h: float | None = None, s: float | None = None, l: float | None = None) -> Color:
        """New color with some HSL components replaced; alpha is kept."""
        h0, s0, l0 = self.hsl
        return Color.from_hsl(
            h0 if h is None else h,
            s0 if s is None else s,
            l0 if l is None else l,
            self._alpha,
        )

    # ------------------ VALUE SEMANTICS ------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.rgba == other.rgba

    def __hash__(self) -> int:
        return hash(self.rgba)

    def __iter__(self):
        return iter(self._value)

    def __repr__(self) -> str:
        if self._alpha == DEFAULT_ALPHA:
            return f"Color({self.hex!r})"
        return f"Color({self.hex!r}, alpha={self._alpha})"


BLACK = Color((0, 0, 0))
WHITE = Color((CHANNEL_MAX, CHANNEL_MAX, CHANNEL_MAX))
