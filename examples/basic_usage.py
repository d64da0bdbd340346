"""Basic chromascheme usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from chromascheme import (
    decode,
    encode,
    darker,
    lighter,
    complementary,
    contrast,
    is_warm,
    triadic,
    tetradic,
    shades,
    blends,
)


def hexes(colors):
    return [encode(c) for c in colors]


def demonstrate_tonal() -> None:
    # Single-color operators return new colors; the input is never changed.
    accent = decode("#3a7bd5")
    print("HSL view:", accent.hsl)
    print("Darker by 30%:", encode(darker(accent, 0.3)))
    print("Lighter by 30%:", encode(lighter(accent, 0.3)))
    print("Complementary:", encode(complementary(accent)))
    print("Text color on top:", encode(contrast(accent)))
    print("Warm?", is_warm(accent))


def demonstrate_palettes() -> None:
    # Schemes and scales always start with their seed color(s).
    red, blue = decode("f00"), decode("00f")
    print("Triadic:", hexes(triadic(red)))
    print("Tetradic:", hexes(tetradic(red, blue)))
    print("Shades:", hexes(shades(red, 4)))
    print("Blends:", hexes(blends(red, blue, 3)))


if __name__ == "__main__":
    demonstrate_tonal()
    demonstrate_palettes()
