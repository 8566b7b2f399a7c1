import logging
from dataclasses import asdict, dataclass
from typing import Optional

from curve_utils.coords import Coordinate, to_coordinate

logger = logging.getLogger(__name__)

DEFAULT_OPTIONS = {
    "color": "#ff0000",
    "opacity": 0.6,
    "weight": 5,
    "steps": 20,
    "control_point": None,
    "curve_factor": 0.4,
}

# camelCase option names used by the original map widget
OPTION_ALIASES = {
    "controlPoint": "control_point",
    "curveFactor": "curve_factor",
}


def merge_options(opts, defaults=DEFAULT_OPTIONS):
    """
    Merge user options into the defaults.

    Only keys present in defaults are kept. A user value replaces the default
    whenever it is given and not None, so falsy values such as 0 steps or a
    curve factor of 0.0 are honored.

    Args:
        opts: Dictionary of user options (may be None)
        defaults: Dictionary of default options

    Returns:
        New dictionary with one entry per default key
    """
    merged = dict(defaults)
    if not opts:
        return merged

    given = set()
    for key, value in opts.items():
        name = OPTION_ALIASES.get(key, key)
        if name not in defaults:
            logger.warning("Ignoring unknown curve option %r", key)
            continue
        if name in given:
            logger.warning("Curve option %r given more than once, using %r", name, key)
        given.add(name)
        if value is not None:
            merged[name] = value

    return merged


@dataclass(frozen=True)
class CurveConfig:
    """Options for a quadratic Bezier line. Only steps, control_point and curve_factor affect geometry."""

    color: str = DEFAULT_OPTIONS["color"]
    opacity: float = DEFAULT_OPTIONS["opacity"]
    weight: float = DEFAULT_OPTIONS["weight"]
    steps: int = DEFAULT_OPTIONS["steps"]
    control_point: Optional[Coordinate] = DEFAULT_OPTIONS["control_point"]
    curve_factor: float = DEFAULT_OPTIONS["curve_factor"]

    def __post_init__(self):
        object.__setattr__(self, "steps", int(self.steps))
        if self.control_point is not None and not isinstance(self.control_point, Coordinate):
            object.__setattr__(self, "control_point", to_coordinate(self.control_point))

    @classmethod
    def from_options(cls, opts=None):
        """Build a config from a dict of options, or return opts if it is already a CurveConfig"""
        if isinstance(opts, cls):
            return opts
        return cls(**merge_options(opts))

    def to_dict(self):
        return asdict(self)
