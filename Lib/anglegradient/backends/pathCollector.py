from contextlib import contextmanager
from fontTools.misc.arrayTools import calcBounds
from fontTools.misc.transform import Identity
from fontTools.pens.recordingPen import RecordingPen
from fontTools.pens.transformPen import TransformPen
from .base import Canvas, Surface, inverseTransformBox


class PathCollectorRecordingPen(RecordingPen):
    def annotate(self, method, data):
        self.method = method
        self.data = data

    def __repr__(self):
        return f"PathCollectorRecordingPen({self.method}{list(self.data.keys())})"


class PathCollectorCanvas(Canvas):
    """Records every drawing call instead of rendering it. Paths are stored
    in device space, each annotated with the drawing method and its
    arguments. 'boundingBox' is the device space extent reported by
    clipBoundingBox()."""

    def __init__(self, boundingBox):
        self.boundingBox = boundingBox
        self.init()

    def init(self):
        self.paths = []
        self.currentTransform = Identity

    def _addPath(self, path, method, data):
        if self.currentTransform != Identity:
            path = transformPath(path, self.currentTransform)
        path.annotate(method, data)
        self.paths.append(path)

    def newPath(self):
        return PathCollectorRecordingPen()

    @contextmanager
    def savedState(self):
        savedTransform = self.currentTransform
        yield
        self.currentTransform = savedTransform

    def transform(self, transform):
        self.currentTransform = self.currentTransform.transform(transform)

    def clipPath(self, path):
        self._addPath(path, "clipPath", dict())

    def clipBoundingBox(self):
        return inverseTransformBox(self.currentTransform, self.boundingBox)

    def drawPathSolid(self, path, color):
        self._addPath(path, "drawPathSolid", dict(color=color))

    def drawPathStroke(self, path, color, strokeWidth):
        self._addPath(
            path, "drawPathStroke", dict(color=color, strokeWidth=strokeWidth)
        )


class PathCollectorSurface(Surface):
    fileExtension = None

    def __init__(self):
        self.paths = None

    @contextmanager
    def canvas(self, boundingBox):
        canvas = PathCollectorCanvas(boundingBox)
        yield canvas
        self.paths = canvas.paths

    def saveImage(self, path):
        raise Exception("PathCollectorSurface cannot be saved")


class PointCollector:
    def __init__(self):
        self.points = []

    def moveTo(self, pt):
        self.points.append(pt)

    def lineTo(self, pt):
        self.points.append(pt)

    def curveTo(self, *pts):
        self.points.extend(pts)

    qCurveTo = curveTo

    def closePath(self):
        pass

    def endPath(self):
        pass


class BoundsCanvas(PathCollectorCanvas):
    """Accumulates the device space bounds of everything drawn."""

    def init(self):
        self.points = []
        self.currentTransform = Identity

    @property
    def bounds(self):
        return calcBounds(self.points)

    def _addPath(self, path, method, data):
        points = path.points
        if self.currentTransform != Identity:
            points = self.currentTransform.transformPoints(points)
        self.points.extend(points)

    def newPath(self):
        return PointCollector()


def transformPath(path, transform):
    transformedPath = RecordingPen()
    tpen = TransformPen(transformedPath, transform)
    path.replay(tpen)
    # to keep the path ref the same
    path.value = transformedPath.value
    return path
