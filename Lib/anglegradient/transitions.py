import logging
from typing import NamedTuple
from .colors import RGBA, lerpColor, rescale, toRGBA


logger = logging.getLogger(__name__)


class Transition(NamedTuple):
    fromLocation: float
    toLocation: float
    fromColor: RGBA
    toColor: RGBA

    def colorForPercent(self, percent):
        t = rescale(percent, self.fromLocation, self.toLocation, 0.0, 1.0)
        return lerpColor(self.fromColor, self.toColor, t)


def buildTransitions(colors, locations=()):
    """Build the list of color transitions for a gradient.

    There is one transition between each pair of adjacent colors. When
    'locations' has one entry per color, transition i runs from
    locations[i] to locations[i + 1]; otherwise the transitions are spread
    uniformly over 0..1. Locations are not validated: a non-monotonic list
    gives transitions that never match a percent, and sampling then falls
    back to the first or last transition.

    Fewer than two colors yields no transitions at all.
    """
    transitions = []
    if len(colors) <= 1:
        return transitions

    transitionsCount = len(colors) - 1
    useLocations = len(locations) == len(colors)
    if useLocations:
        logger.debug("building %d transitions from locations", transitionsCount)
    else:
        logger.debug("building %d uniformly spaced transitions", transitionsCount)
    locationStep = 1.0 / transitionsCount

    for i in range(transitionsCount):
        if useLocations:
            fromLocation = float(locations[i])
            toLocation = float(locations[i + 1])
        else:
            fromLocation = locationStep * i
            toLocation = locationStep * (i + 1)
        transitions.append(
            Transition(
                fromLocation=fromLocation,
                toLocation=toLocation,
                fromColor=toRGBA(colors[i]),
                toColor=toRGBA(colors[i + 1]),
            )
        )
    return transitions
