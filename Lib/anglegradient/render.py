import logging
import tempfile
from .backends import Backend, RequestedFileType, getSurfaceClass
from .colors import toRGBA
from .sweep import drawAngleGradient


logger = logging.getLogger(__name__)


class AngleGradientSettings:
    width = 400
    height = 400
    strokeWidth = 1.0
    background = None
    backend = None


class BackendUnavailableError(Exception):
    pass


def renderAngleGradient(outputPath, colors, locations=(), settings=None):
    if settings is None:
        settings = AngleGradientSettings()
    fileType = RequestedFileType.from_filename(outputPath)
    backend = settings.backend
    if backend is None:
        backend = Backend.default_for_filetype(fileType)
    backend = Backend(backend)

    surfaceClass = getSurfaceClass(backend, fileType)
    if surfaceClass is None:
        raise BackendUnavailableError(backend.value)

    boundingBox = (0, 0, int(settings.width), int(settings.height))
    logger.info(
        "rendering %d colors to %s with the %s backend",
        len(colors),
        outputPath if outputPath is not None else "stdout",
        backend.value,
    )

    surface = surfaceClass()
    with surface.canvas(boundingBox) as canvas:
        if settings.background is not None:
            canvas.drawRectSolid(
                (0, 0, settings.width, settings.height), toRGBA(settings.background)
            )
        with canvas.savedState():
            canvas.clipRect((0, 0, settings.width, settings.height))
            drawAngleGradient(
                canvas, boundingBox, colors, locations, settings.strokeWidth
            )

    if outputPath is not None:
        surface.saveImage(outputPath)
    else:
        with tempfile.NamedTemporaryFile(suffix=".svg") as tmp:
            surface.saveImage(tmp.name)
            with open(tmp.name, "rb") as f:
                svgData = f.read().decode("utf-8").rstrip()
        print(svgData)
