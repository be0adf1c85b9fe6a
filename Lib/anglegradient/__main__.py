import argparse
import logging
import pathlib
from .backends import RequestedFileType, listBackends
from .colors import toRGBA
from .render import AngleGradientSettings, renderAngleGradient

backendsAndSuffixes = listBackends()
backendNames = [backendName for backendName, _ in backendsAndSuffixes]

description = f"""\
Render an angle gradient to an image file. Available backends:
"""
for backendName, suffixes in backendsAndSuffixes:
    description += f" {backendName} ({', '.join(suffixes)})"


def main(args=None):
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        "output",
        metavar="OUTPUT",
        type=outputFilePath,
        help="an output file name, with .png, .pdf or .svg extension, "
        "or '-', to print SVG to stdout",
    )
    parser.add_argument("--width", type=positiveInt, default=400)
    parser.add_argument("--height", type=positiveInt, default=400)
    parser.add_argument(
        "--colors",
        type=parseColors,
        default=[],
        help="comma separated hex colors, e.g. '#FF0000,#0000FF'. With fewer "
        "than two colors, a full hue spectrum is drawn.",
    )
    parser.add_argument(
        "--locations",
        type=parseLocations,
        default=[],
        help="comma separated stop locations in the 0..1 range, one per color. "
        "If the count does not match the colors, stops are spread uniformly.",
    )
    parser.add_argument("--stroke-width", type=float, default=1.0)
    parser.add_argument("--background", type=parseColor, default=None)
    parser.add_argument(
        "--backend",
        default=None,
        choices=backendNames,
        help="The backend to use -- defaults to skia for .png, cairo for .pdf "
        "and the svg backend for .svg.",
    )
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(args)

    fileType = RequestedFileType.from_filename(args.output)
    if args.backend is not None:
        suffixes = dict(backendsAndSuffixes)[args.backend]
        if fileType.value not in suffixes:
            parser.error(
                f"backend {args.backend} can't write {fileType.value} files; "
                f"it supports {', '.join(suffixes)}"
            )

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    settings = AngleGradientSettings()
    settings.width = args.width
    settings.height = args.height
    settings.strokeWidth = args.stroke_width
    settings.background = args.background
    settings.backend = args.backend
    renderAngleGradient(args.output, args.colors, args.locations, settings=settings)


def outputFilePath(path):
    if path == "-":
        return None
    path = pathlib.Path(path).resolve()
    if path.suffix not in {".png", ".pdf", ".svg"}:
        raise argparse.ArgumentTypeError(
            f"path does not have the right extension; should be .png, .pdf or .svg: "
            f"'{path}'"
        )
    return path


def positiveInt(src):
    value = int(src)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive number: {src}")
    return value


def parseColor(src):
    try:
        return toRGBA(src)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def parseColors(src):
    return [parseColor(part) for part in src.split(",") if part.strip()]


def parseLocations(src):
    locations = []
    for part in src.split(","):
        if not part.strip():
            continue
        try:
            locations.append(float(part))
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid location: {part!r}")
    return locations


if __name__ == "__main__":
    main()
