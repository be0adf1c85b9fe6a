from math import pi
from .colors import fromHSB, rescale, rescaleFromZero


MAX_ANGLE = 2 * pi
MAX_HUE = 255.0


def percentForAngle(angle):
    return rescaleFromZero(angle, MAX_ANGLE, 1.0)


def transitionForPercent(percent, transitions):
    """Return the transition to sample at 'percent', or None if there are
    no transitions.

    The first transition whose half-open range [fromLocation, toLocation)
    contains 'percent' wins. If none does, the first transition is used for
    percents up to 0.5 and the last one above that, so the result may be an
    extrapolation (this is what happens at exactly 1.0).
    """
    if not transitions:
        return None
    for transition in transitions:
        if transition.fromLocation <= percent < transition.toLocation:
            return transition
    return transitions[0] if percent <= 0.5 else transitions[-1]


def spectrumColorForPercent(percent):
    hue = rescale(percent, 0.0, 1.0, 0.0, MAX_HUE)
    return fromHSB(hue / MAX_HUE, 1.0, 1.0, 1.0)


def colorForPercent(percent, transitions):
    transition = transitionForPercent(percent, transitions)
    if transition is None:
        return spectrumColorForPercent(percent)
    return transition.colorForPercent(percent)


def colorForAngle(angle, transitions):
    return colorForPercent(percentForAngle(angle), transitions)
