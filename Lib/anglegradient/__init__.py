try:
    from ._version import version as __version__
except ImportError:
    __version__ = "<unknown>"

from .angleColor import colorForAngle, colorForPercent  # noqa: F401
from .layer import AngleGradientLayer  # noqa: F401
from .sweep import buildSweepLines, drawAngleGradient  # noqa: F401
from .transitions import Transition, buildTransitions  # noqa: F401
