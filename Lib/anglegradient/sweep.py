import logging
from math import cos, pi, sin, sqrt
from typing import NamedTuple
from fontTools.misc.arrayTools import normRect, rectCenter
from .angleColor import MAX_ANGLE, colorForAngle
from .colors import RGBA
from .transitions import buildTransitions


logger = logging.getLogger(__name__)


class SweepLine(NamedTuple):
    point: tuple
    center: tuple
    color: RGBA


def sweepRadius(boundingBox):
    xMin, yMin, xMax, yMax = normRect(boundingBox)
    return max(xMax - xMin, yMax - yMin) * sqrt(2)


def sweepStep(radius):
    return (pi / 2) / radius


def buildSweepLines(boundingBox, transitions):
    """Provides the radial lines that together approximate an angle gradient
    filling 'boundingBox'.

    Each line runs from a point at distance 'radius' from the center of the
    box into the center, and carries the color for its angle. The radius is
    the longer side of the box times sqrt(2), so the lines always reach past
    the corners. Angles go from 0 up to and including 2 * pi, in steps of
    (pi / 2) / radius: larger boxes get proportionally more lines.

    Inverted boxes are normalized first; a box with no extent yields no
    lines."""
    boundingBox = normRect(boundingBox)
    radius = sweepRadius(boundingBox)
    if radius <= 0:
        return []
    center = rectCenter(boundingBox)
    step = sweepStep(radius)
    lines = []
    angle = 0.0
    while angle <= MAX_ANGLE:
        point = (radius * cos(angle) + center[0], radius * sin(angle) + center[1])
        lines.append(SweepLine(point, center, colorForAngle(angle, transitions)))
        angle += step
    return lines


def drawAngleGradient(canvas, boundingBox, colors, locations=(), strokeWidth=1):
    transitions = buildTransitions(colors, locations)
    lines = buildSweepLines(boundingBox, transitions)
    if not lines:
        logger.debug("empty bounding box %s, nothing to draw", boundingBox)
        return
    for point, center, color in lines:
        canvas.drawLine(point, center, color, strokeWidth)
    logger.debug("drew %d sweep lines in %s", len(lines), boundingBox)
