from contextlib import contextmanager
import os
from fontTools.pens.basePen import BasePen
from fontTools.pens.recordingPen import RecordingPen
import cairo
from .base import Canvas, Surface


class CairoPen(BasePen):
    def __init__(self, context):
        super().__init__(None)
        self.context = context

    def _moveTo(self, pt):
        self.context.move_to(*pt)

    def _lineTo(self, pt):
        self.context.line_to(*pt)

    def _curveToOne(self, pt1, pt2, pt3):
        self.context.curve_to(*pt1, *pt2, *pt3)

    def _closePath(self):
        self.context.close_path()


class CairoCanvas(Canvas):
    def __init__(self, context):
        self.context = context
        self._pen = CairoPen(context)

    @staticmethod
    def newPath():
        return RecordingPen()

    @contextmanager
    def savedState(self):
        self.context.save()
        yield
        self.context.restore()

    def transform(self, transform):
        m = cairo.Matrix()
        m.xx, m.yx, m.xy, m.yy, m.x0, m.y0 = transform
        self.context.transform(m)

    def clipPath(self, path):
        self.context.new_path()
        path.replay(self._pen)
        self.context.clip()

    def clipBoundingBox(self):
        return self.context.clip_extents()

    def drawPathSolid(self, path, color):
        self.context.set_source_rgba(*color)
        self.context.new_path()
        path.replay(self._pen)
        self.context.fill()

    def drawPathStroke(self, path, color, strokeWidth):
        self.context.set_source_rgba(*color)
        self.context.set_line_width(strokeWidth)
        self.context.new_path()
        path.replay(self._pen)
        self.context.stroke()


class CairoPixelSurface(Surface):
    fileExtension = ".png"

    def __init__(self):
        self._surface = None
        self._size = None

    @contextmanager
    def canvas(self, boundingBox):
        x, y, xMax, yMax = boundingBox
        width = xMax - x
        height = yMax - y
        self._surface = self._setupCairoSurface(width, height)
        self._size = width, height
        context = cairo.Context(self._surface)
        context.translate(-x, height + y)
        context.scale(1, -1)
        yield CairoCanvas(context)

    def _setupCairoSurface(self, width, height):
        return cairo.ImageSurface(cairo.FORMAT_ARGB32, width, height)

    def saveImage(self, path):
        self._surface.flush()
        self._surface.write_to_png(os.fspath(path))
        self._surface.finish()


class CairoPDFSurface(CairoPixelSurface):
    fileExtension = ".pdf"

    def _setupCairoSurface(self, width, height):
        return cairo.RecordingSurface(cairo.CONTENT_COLOR_ALPHA, (0, 0, width, height))

    def saveImage(self, path):
        width, height = self._size
        pdfSurface = cairo.PDFSurface(os.fspath(path), width, height)
        pdfContext = cairo.Context(pdfSurface)
        pdfContext.set_source_surface(self._surface, 0.0, 0.0)
        pdfContext.paint()
        pdfContext.show_page()
        pdfSurface.finish()
