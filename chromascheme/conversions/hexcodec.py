"""
Hex text codec.

Accepted input is ``#RRGGBB`` or the shorthand ``#RGB``, the ``#`` being
optional. Output is always the canonical ``#rrggbb`` form.
"""
from __future__ import annotations
from string import hexdigits
from typing import TYPE_CHECKING, Tuple

from ..errors import InvalidFormat
from ..types.color_types import HEX_CASE, RGBTuple

if TYPE_CHECKING:
    from ..colors.color import Color

_HEX_DIGITS = frozenset(hexdigits)
_VALID_LENGTHS = (3, 6)


def parse_hex(text: str) -> RGBTuple:
    """
    Validate hex text and return its 8-bit channels.

    Raises:
        InvalidFormat: if ``text`` is not a string, has the wrong number of
            digits after the optional ``#``, or contains a non-hex character.
    """
    if not isinstance(text, str):
        raise InvalidFormat(text, "expected a string")

    digits = text[1:] if text.startswith("#") else text

    if len(digits) not in _VALID_LENGTHS:
        raise InvalidFormat(text, f"expected 3 or 6 hex digits, got {len(digits)}")

    bad = [ch for ch in digits if ch not in _HEX_DIGITS]
    if bad:
        raise InvalidFormat(text, f"non-hex character {bad[0]!r}")

    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)

    channels: Tuple[int, ...] = tuple(int(digits[i:i + 2], 16) for i in (0, 2, 4))
    return channels  # type: ignore[return-value]


def format_hex(rgb: RGBTuple) -> str:
    text = "#{:02x}{:02x}{:02x}".format(*rgb)
    return text.upper() if HEX_CASE == "upper" else text


def decode(text: str) -> Color:
    """Decode hex text into an opaque ``Color``."""
    from ..colors.color import Color
    return Color(parse_hex(text))


def encode(color: Color) -> str:
    """Encode a ``Color`` as ``#rrggbb``. Alpha is not part of the hex form."""
    return format_hex(color.rgb)
