import pytest

from chromascheme import (
    Color, decode, encode, triadic, quadratic, tetradic, analogous,
    split_complementary, complementary,
)
from chromascheme.schemes import rotations
from tests.samples import samples_chromatic_hex


def hexes(colors):
    return [encode(c) for c in colors]

def hue_distance(a, b):
    d = abs(a - b) % 360
    return min(d, 360 - d)

def test_triadic_red():
    assert hexes(triadic(decode("#FF0000"))) == ["#ff0000", "#00ff00", "#0000ff"]

def test_quadratic_red():
    assert hexes(quadratic(decode("f00"))) == ["#ff0000", "#80ff00", "#00ffff", "#8000ff"]

def test_analogous_red():
    assert hexes(analogous(decode("f00"))) == ["#ff0000", "#ff0080", "#ff8000"]

def test_split_complementary_red():
    assert hexes(split_complementary(decode("f00"))) == ["#ff0000", "#00ff80", "#0080ff"]

def test_tetradic():
    red, blue = decode("#ff0000"), decode("#0000ff")
    assert hexes(tetradic(red, blue)) == ["#ff0000", "#00ffff", "#0000ff", "#ffff00"]

def test_tetradic_pairs_with_complements():
    c1, c2 = decode("#3a7bd5"), decode("#ff8800")
    out = tetradic(c1, c2)
    assert out[0] == c1 and out[2] == c2
    assert out[1] == complementary(c1)
    assert out[3] == complementary(c2)

@pytest.mark.parametrize("scheme, size", [
    (triadic, 3), (quadratic, 4), (analogous, 3), (split_complementary, 3),
])
@pytest.mark.parametrize("hex_text", samples_chromatic_hex)
def test_scheme_starts_with_seed(scheme, size, hex_text):
    color = decode(hex_text)
    out = scheme(color)
    assert len(out) == size
    assert out[0] is color

@pytest.mark.parametrize("hex_text", samples_chromatic_hex)
def test_triadic_closure(hex_text):
    seed, second, third = triadic(decode(hex_text))
    assert hue_distance(second.hue, seed.hue + 120) < 1.5
    assert hue_distance(third.hue, seed.hue + 240) < 1.5
    assert hue_distance(third.hue, second.hue + 120) < 1.5

@pytest.mark.parametrize("hex_text", samples_chromatic_hex)
def test_quadratic_spacing(hex_text):
    out = quadratic(decode(hex_text))
    for a, b in zip(out, out[1:]):
        assert abs(hue_distance(a.hue, b.hue) - 90) < 1.5

def test_schemes_keep_saturation_and_lightness():
    color = decode("#3a7bd5")
    for member in triadic(color) + split_complementary(color):
        assert abs(member.saturation - color.saturation) < 0.02
        assert abs(member.lightness - color.lightness) < 1/255

def test_schemes_keep_alpha():
    color = Color((10, 200, 30), alpha=42)
    assert all(c.alpha == 42 for c in quadratic(color))
    assert [c.alpha for c in tetradic(color, Color((1, 2, 3)))] == [42, 42, 255, 255]
    assert [c.alpha for c in tetradic(color, Color((1, 2, 3), alpha=7))] == [42, 42, 7, 7]

def test_rotations():
    red = decode("#ff0000")
    assert hexes(rotations(red, ())) == ["#ff0000"]
    assert hexes(rotations(red, (120, -120))) == ["#ff0000", "#00ff00", "#0000ff"]
