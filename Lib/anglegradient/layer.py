import logging
from .sweep import drawAngleGradient


logger = logging.getLogger(__name__)


class AngleGradientLayer:
    """A drawable angle gradient, for hosts that redraw on demand.

    'colors' is the list of gradient stop colors and 'locations' the
    matching stop positions in the 0..1 range, which must increase
    monotonically. If 'locations' does not have one entry per color, the
    stops are spread uniformly. With fewer than two colors the layer draws
    a full hue spectrum instead.

    Assigning 'colors' or 'locations' calls every registered invalidation
    callback, so the host can schedule a redraw. The layer itself never
    draws until the host calls drawInCanvas().
    """

    def __init__(self, colors=(), locations=(), strokeWidth=1):
        self._colors = list(colors)
        self._locations = list(locations)
        self.strokeWidth = strokeWidth
        self._invalidationCallbacks = []

    @property
    def colors(self):
        return list(self._colors)

    @colors.setter
    def colors(self, colors):
        self._colors = list(colors)
        self.setNeedsDisplay()

    @property
    def locations(self):
        return list(self._locations)

    @locations.setter
    def locations(self, locations):
        self._locations = list(locations)
        self.setNeedsDisplay()

    def addInvalidationCallback(self, callback):
        self._invalidationCallbacks.append(callback)

    def removeInvalidationCallback(self, callback):
        self._invalidationCallbacks.remove(callback)

    def setNeedsDisplay(self):
        logger.debug(
            "invalidated, notifying %d callbacks", len(self._invalidationCallbacks)
        )
        for callback in list(self._invalidationCallbacks):
            callback()

    def drawInCanvas(self, canvas):
        with canvas.savedState():
            drawAngleGradient(
                canvas,
                canvas.clipBoundingBox(),
                self._colors,
                self._locations,
                self.strokeWidth,
            )
