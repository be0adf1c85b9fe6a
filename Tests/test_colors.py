import pytest
from anglegradient.colors import (
    RGBA,
    formatColor,
    fromHSB,
    lerpColor,
    rescale,
    rescaleFromZero,
    toRGBA,
)


test_toRGBA_data = [
    ("#FF0000", (1, 0, 0, 1)),
    ("FF0000", (1, 0, 0, 1)),
    ("#F00", (1, 0, 0, 1)),
    ("#00ff0000", (0, 1, 0, 0)),
    ((0, 0, 1), (0, 0, 1, 1)),
    ((0.25, 0.5, 0.75, 0.5), (0.25, 0.5, 0.75, 0.5)),
    ([1, 1, 1, 1], (1, 1, 1, 1)),
]


@pytest.mark.parametrize("color, expectedRGBA", test_toRGBA_data)
def test_toRGBA(color, expectedRGBA):
    rgba = toRGBA(color)
    assert isinstance(rgba, RGBA)
    assert rgba == expectedRGBA


def test_toRGBA_halfAlpha():
    assert toRGBA("#00000080").alpha == pytest.approx(128 / 255)


@pytest.mark.parametrize("color", ["#12345", "zzzzzz", "", (1, 2), (1, 2, 3, 4, 5), 5])
def test_toRGBA_invalid(color):
    with pytest.raises(ValueError):
        toRGBA(color)


@pytest.mark.parametrize("a", [-1.0, 0.0, 0.5, 3.0])
@pytest.mark.parametrize("x", [-2.0, 0.0, 0.5, 1.0, 7.0])
def test_rescale_zeroRange(a, x):
    assert rescale(x, a, a, 10, 20) == 10


@pytest.mark.parametrize("a, b", [(0, 1), (0.25, 0.5), (2, -3), (-1, 1)])
def test_rescale_endpoints(a, b):
    assert rescale(a, a, b, 0, 1) == 0
    assert rescale(b, a, b, 0, 1) == 1


def test_rescale():
    assert rescale(0.75, 0.5, 1.0, 0, 1) == 0.5
    assert rescale(5, 0, 10, 100, 200) == 150
    # values outside the old range extrapolate
    assert rescale(1.5, 0.5, 1.0, 0, 1) == 2


def test_rescaleFromZero():
    assert rescaleFromZero(5, 10, 1) == 0.5
    assert rescaleFromZero(10, 10, 255) == 255


def test_fromHSB():
    assert fromHSB(0, 1, 1) == (1, 0, 0, 1)
    assert fromHSB(1 / 3, 1, 1) == pytest.approx((0, 1, 0, 1))
    assert fromHSB(2 / 3, 1, 1, 0.5) == pytest.approx((0, 0, 1, 0.5))
    assert fromHSB(0.5, 0, 1) == (1, 1, 1, 1)


def test_lerpColor():
    red = RGBA(1, 0, 0, 1)
    blue = RGBA(0, 0, 1, 0)
    assert lerpColor(red, blue, 0) == red
    assert lerpColor(red, blue, 1) == blue
    assert lerpColor(red, blue, 0.5) == (0.5, 0, 0.5, 0.5)
    assert isinstance(lerpColor(red, blue, 0.5), RGBA)


def test_lerpColor_extrapolates():
    assert lerpColor((0, 0, 0, 1), (0.5, 0, 0, 1), 2) == (1, 0, 0, 1)
    assert lerpColor((0.5, 0, 0, 1), (1, 0, 0, 1), -1) == (0, 0, 0, 1)


def test_formatColor():
    assert formatColor((1, 0, 0, 1)) == "#FF0000"
    assert formatColor((0, 0.5, 1)) == "#0080FF"
    # out of gamut components are clamped
    assert formatColor((1.5, -0.5, 0, 1)) == "#FF0000"
