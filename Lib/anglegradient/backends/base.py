from abc import ABC, abstractmethod
from contextlib import contextmanager
from fontTools.misc.arrayTools import calcBounds


class Canvas(ABC):
    @abstractmethod
    def newPath(self):
        ...

    @abstractmethod
    @contextmanager
    def savedState(self):
        ...

    @abstractmethod
    def transform(self, transform):
        ...

    @abstractmethod
    def clipPath(self, path):
        ...

    @abstractmethod
    def clipBoundingBox(self):
        # returns (xMin, yMin, xMax, yMax) in the current user space
        ...

    @abstractmethod
    def drawPathSolid(self, path, color):
        ...

    @abstractmethod
    def drawPathStroke(self, path, color, strokeWidth):
        ...

    # Generic convenience methods

    def translate(self, x, y):
        self.transform((1, 0, 0, 1, x, y))

    def scale(self, sx, sy=None):
        if sy is None:
            sy = sx
        self.transform((sx, 0, 0, sy, 0, 0))

    def drawRectSolid(self, rect, color):
        self.drawPathSolid(self._rectPath(rect), color)

    def clipRect(self, rect):
        self.clipPath(self._rectPath(rect))

    def drawLine(self, pt1, pt2, color, strokeWidth=1):
        path = self.newPath()
        path.moveTo(pt1)
        path.lineTo(pt2)
        path.endPath()
        self.drawPathStroke(path, color, strokeWidth)

    def _rectPath(self, rect):
        x, y, w, h = rect
        path = self.newPath()
        path.moveTo((x, y))
        path.lineTo((x, y + h))
        path.lineTo((x + w, y + h))
        path.lineTo((x + w, y))
        path.closePath()
        return path


class Surface(ABC):
    fileExtension = ".png"

    @abstractmethod
    def __init__(self):
        ...

    @abstractmethod
    @contextmanager
    def canvas(self, boundingBox):
        # boundingBox = (xMin, yMin, xMax, yMax)
        ...

    @abstractmethod
    def saveImage(self, path):
        ...


def inverseTransformBox(transform, box):
    """Map a device space box back to user space through the inverse of
    'transform', returning the bounds of the four mapped corners."""
    xMin, yMin, xMax, yMax = box
    corners = [(xMin, yMin), (xMin, yMax), (xMax, yMax), (xMax, yMin)]
    return calcBounds(transform.inverse().transformPoints(corners))
