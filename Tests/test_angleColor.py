from math import pi
import pytest
from anglegradient.angleColor import (
    MAX_ANGLE,
    colorForAngle,
    colorForPercent,
    percentForAngle,
    spectrumColorForPercent,
    transitionForPercent,
)
from anglegradient.colors import RGBA
from anglegradient.transitions import buildTransitions


red = RGBA(1, 0, 0, 1)
green = RGBA(0, 1, 0, 1)
blue = RGBA(0, 0, 1, 1)
gray = RGBA(0.5, 0.5, 0.5, 1)

percents = [i / 64 for i in range(65)]


def test_percentForAngle():
    assert percentForAngle(0) == 0
    assert percentForAngle(pi) == 0.5
    assert percentForAngle(MAX_ANGLE) == 1


@pytest.mark.parametrize("locations", [[], [0.3], [0, 1], [0, 0.5, 1]])
@pytest.mark.parametrize("percent", percents)
def test_singleColorUsesSpectrum(percent, locations):
    transitions = buildTransitions([gray], locations)
    assert transitions == []
    color = colorForPercent(percent, transitions)
    assert color == spectrumColorForPercent(percent)
    assert color != gray


def test_spectrum():
    assert spectrumColorForPercent(0) == (1, 0, 0, 1)
    assert spectrumColorForPercent(1 / 3) == pytest.approx((0, 1, 0, 1))
    assert spectrumColorForPercent(2 / 3) == pytest.approx((0, 0, 1, 1))
    # hue 1.0 wraps around to red
    assert spectrumColorForPercent(1) == pytest.approx((1, 0, 0, 1))


def test_twoColors():
    transitions = buildTransitions([red, blue], [])
    assert colorForPercent(0.0, transitions) == red
    assert colorForPercent(0.5, transitions) == (0.5, 0, 0.5, 1)
    # 1.0 is outside every half-open range, the last transition is used
    assert transitionForPercent(1.0, transitions) is transitions[-1]
    assert colorForPercent(1.0, transitions) == pytest.approx(blue)


def test_explicitLocations():
    transitions = buildTransitions([red, green, blue], [0.0, 0.5, 1.0])
    assert colorForPercent(0.25, transitions) == pytest.approx((0.5, 0.5, 0, 1))
    assert colorForPercent(0.75, transitions) == pytest.approx((0, 0.5, 0.5, 1))
    assert colorForPercent(0.5, transitions) == green


def test_firstMatchWins():
    # overlapping ranges: the earliest transition in build order is used
    transitions = buildTransitions([red, green, blue, gray], [0.0, 0.6, 0.2, 0.8])
    assert transitions[2].fromLocation <= 0.3 < transitions[2].toLocation
    assert transitionForPercent(0.3, transitions) is transitions[0]


def test_gapFallback():
    transitions = buildTransitions([red, green, blue], [0.0, 0.2, 0.4])
    # past the last location, up to 0.5: first transition
    assert transitionForPercent(0.45, transitions) is transitions[0]
    # past 0.5: last transition, extrapolated
    assert transitionForPercent(0.9, transitions) is transitions[-1]
    color = colorForPercent(0.9, transitions)
    assert color == transitions[-1].colorForPercent(0.9)
    assert color.blue > 1


def test_gapFallbackAtStart():
    transitions = buildTransitions([red, blue], [0.25, 0.75])
    assert transitionForPercent(0.0, transitions) is transitions[0]
    assert colorForPercent(0.0, transitions) == pytest.approx((1.5, 0, -0.5, 1))


def test_noTransitions():
    assert transitionForPercent(0.5, []) is None


@pytest.mark.parametrize(
    "colors",
    [
        [],
        [red],
        [red, blue],
        [red, green, blue],
        [RGBA(1, 1, 1, 0), gray, RGBA(0, 0.5, 1, 0.5), red],
    ],
)
def test_componentsInRange(colors):
    transitions = buildTransitions(colors)
    for percent in percents:
        color = colorForPercent(percent, transitions)
        assert len(color) == 4
        for component in color:
            assert -1e-9 <= component <= 1 + 1e-9


def test_colorForAngle():
    transitions = buildTransitions([red, green, blue], [0.0, 0.5, 1.0])
    assert colorForAngle(0, transitions) == red
    assert colorForAngle(pi / 2, transitions) == pytest.approx((0.5, 0.5, 0, 1))
    assert colorForAngle(MAX_ANGLE, transitions) == pytest.approx(blue)
