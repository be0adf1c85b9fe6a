from enum import Enum, auto, unique
from collections import defaultdict
import argparse
import importlib
import os


_surfaces = {
    None: {
        "cairo": "anglegradient.backends.cairo.CairoPixelSurface",
        "coregraphics": "anglegradient.backends.coregraphics.CoreGraphicsPixelSurface",
        "skia": "anglegradient.backends.skia.SkiaPixelSurface",
        "svg": "anglegradient.backends.svg.SVGSurface",
    },
    ".png": {
        "cairo": "anglegradient.backends.cairo.CairoPixelSurface",
        "coregraphics": "anglegradient.backends.coregraphics.CoreGraphicsPixelSurface",
        "skia": "anglegradient.backends.skia.SkiaPixelSurface",
    },
    ".pdf": {
        "cairo": "anglegradient.backends.cairo.CairoPDFSurface",
    },
    ".svg": {
        "svg": "anglegradient.backends.svg.SVGSurface",
    },
}


@unique
class Backend(Enum):
    CAIRO = "cairo"
    COREGRAPHICS = "coregraphics"
    SKIA = "skia"
    PUREPYTHON_SVG = "svg"

    @staticmethod
    def default_for_filetype(fileType):
        if fileType == RequestedFileType.SVG:
            return Backend.PUREPYTHON_SVG
        elif fileType == RequestedFileType.PDF:
            return Backend.CAIRO
        else:
            return Backend.SKIA

    @classmethod
    def _missing_(cls, backendName):
        raise argparse.ArgumentTypeError(f"Non-existent backend: {backendName}")


@unique
class RequestedFileType(Enum):
    def _generate_next_value_(name, start, count, last_values):
        return "." + name.lower()

    PNG = auto()
    PDF = auto()
    SVG = auto()

    @staticmethod
    def from_filename(outputPath):
        if outputPath is None:
            return RequestedFileType.SVG
        suffix = os.path.splitext(outputPath)[1]
        return RequestedFileType(suffix)

    @classmethod
    def _missing_(cls, value):
        if value == "":
            return RequestedFileType.SVG
        value = value.lower()
        for member in cls:
            if member.value == value:
                return member
        raise argparse.ArgumentTypeError(f"Unsupported file extension: {value}")


def getSurfaceClass(backend, imageExtension=None):
    if isinstance(imageExtension, RequestedFileType):
        imageExtension = imageExtension.value
    if isinstance(backend, Backend):
        backend = backend.value
    fqName = _surfaces[imageExtension].get(backend)
    if fqName is None:
        raise argparse.ArgumentTypeError(
            f"backend {backend} can't write {imageExtension} files"
        )
    moduleName, className = fqName.rsplit(".", 1)
    try:
        module = importlib.import_module(moduleName)
    except ModuleNotFoundError:
        return None
    return getattr(module, className)


def listBackends():
    backends = defaultdict(list)
    for suffix in _surfaces:
        if suffix is None:
            continue
        for backendName in _surfaces[suffix]:
            backends[backendName].append(suffix)
    return [
        (backendName, sorted(suffixes)) for backendName, suffixes in backends.items()
    ]
