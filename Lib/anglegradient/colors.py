import colorsys
from typing import NamedTuple
from fontTools.misc.vector import Vector


class RGBA(NamedTuple):
    red: float
    green: float
    blue: float
    alpha: float = 1.0


def toRGBA(color):
    """Convert a color to normalized RGBA components.

    'color' may be an RGBA, a sequence of 3 or 4 floats in the 0..1 range
    (alpha defaults to 1), or a hex string of the form "#RGB", "#RRGGBB" or
    "#RRGGBBAA" (the leading "#" is optional).
    """
    if isinstance(color, RGBA):
        return color
    if isinstance(color, str):
        return _parseHexColor(color)
    try:
        components = tuple(float(c) for c in color)
    except TypeError:
        raise ValueError(f"can't convert to RGBA: {color!r}")
    if len(components) not in (3, 4):
        raise ValueError(f"expected 3 or 4 color components, got {color!r}")
    return RGBA(*components)


def _parseHexColor(src):
    digits = src.strip().lstrip("#")
    if len(digits) == 3:
        digits = "".join(d * 2 for d in digits)
    if len(digits) not in (6, 8):
        raise ValueError(f"invalid hex color: {src!r}")
    try:
        values = [int(digits[i : i + 2], 16) / 255 for i in range(0, len(digits), 2)]
    except ValueError:
        raise ValueError(f"invalid hex color: {src!r}")
    return RGBA(*values)


def fromHSB(hue, saturation, brightness, alpha=1.0):
    return RGBA(*colorsys.hsv_to_rgb(hue, saturation, brightness), alpha)


def lerpColor(fromColor, toColor, t):
    # t is not clamped: callers rely on extrapolation outside 0..1
    fromColor = Vector(fromColor)
    toColor = Vector(toColor)
    return RGBA(*(fromColor + t * (toColor - fromColor)))


def rescale(value, oldMin, oldMax, newMin, newMax):
    oldRange = oldMax - oldMin
    if oldRange == 0:
        return newMin
    newRange = newMax - newMin
    return newMin + (value - oldMin) * newRange / oldRange


def rescaleFromZero(value, oldMax, newMax):
    return value * newMax / oldMax


def formatColor(color):
    red, green, blue, _ = toRGBA(color)
    return "#%02X%02X%02X" % tuple(
        int(round(min(max(c, 0), 1) * 255)) for c in (red, green, blue)
    )
