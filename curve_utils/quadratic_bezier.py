import logging

import numpy as np

from curve_utils.coords import Coordinate, to_coordinate
from curve_utils.curve_config import CurveConfig

logger = logging.getLogger(__name__)


def calculate_control_point(from_point, to_point, curve_factor):
    """
    Calculate the control point using the two endpoints and the curve factor.

    The middle point between the endpoints is offset away from the line that
    connects them. A factor of 1.0 makes the offset roughly equal to the length
    of the line, 0.5 makes it half the line length. Negative factors bend the
    curve to the other side.

    Args:
        from_point: Tuple (lat, lng) for the start of the line
        to_point: Tuple (lat, lng) for the end of the line
        curve_factor: Offset magnitude (typically between -1 and 1)

    Returns:
        Coordinate for the control point
    """
    mid_lat = (from_point[0] + to_point[0]) / 2.0
    mid_lng = (from_point[1] + to_point[1]) / 2.0

    # Fixed affine offset in lat/lng space, not a projected perpendicular
    control = Coordinate(
        (mid_lng - to_point[1]) * curve_factor + mid_lat,
        (to_point[0] - mid_lat) * curve_factor + mid_lng,
    )
    logger.debug("Control point %s for factor %s", control, curve_factor)
    return control


def bezier_point(t, from_point, control, to_point):
    """
    Evaluate the quadratic Bezier curve at parameter t.

    B(t) = (1-t)²P0 + 2t(1-t)P1 + t²P2, applied to latitude and longitude
    independently. t is not clamped, values outside [0, 1] extrapolate.
    Non-finite inputs propagate to the output unchanged. Since 0 * inf is NaN,
    a non-finite point also turns the endpoints at t=0 and t=1 into NaN.
    """
    p0 = np.asarray(from_point, dtype=float)
    p1 = np.asarray(control, dtype=float)
    p2 = np.asarray(to_point, dtype=float)

    value = ((1 - t) * (1 - t)) * p0 + (2 * t) * (1 - t) * p1 + (t * t) * p2
    return Coordinate(float(value[0]), float(value[1]))


def sample_bezier_curve(from_point, to_point, control, steps):
    """
    Sample the quadratic Bezier curve at evenly spaced parameter values.

    The number of steps is rounded up to an even number so that an exact
    middle sample exists.

    Args:
        from_point: Tuple (lat, lng) for the start of the curve
        to_point: Tuple (lat, lng) for the end of the curve
        control: Tuple (lat, lng) for the control point
        steps: Requested number of steps (non-negative integer)

    Returns:
        Tuple (points, midpoint) where points is a tuple of steps + 1
        Coordinates (steps rounded up to even)
    """
    if steps < 0:
        raise ValueError(f"steps must be non-negative, got {steps}")

    effective_steps = steps if steps % 2 == 0 else steps + 1

    if effective_steps == 0:
        # Degenerate single sample at t=0
        point = bezier_point(0.0, from_point, control, to_point)
        return (point,), point

    points = []
    midpoint = None
    for i in range(effective_steps + 1):
        t = i / effective_steps
        point = bezier_point(t, from_point, control, to_point)
        if i == effective_steps // 2:
            midpoint = point
        points.append(point)

    logger.debug("Sampled %d points between %s and %s", len(points), from_point, to_point)
    return tuple(points), midpoint


class QuadraticBezierLine:
    """
    A quadratic Bezier line going from one coordinate to another.

    The control point, the sampled points and the midpoint are resolved once
    when the line is created. A line is never modified afterwards: to change
    it, create another one.

    Usage:
        line = QuadraticBezierLine((32.97, -117.27), (33.0, -117.2), {"steps": 30})
        folium.PolyLine(line.get_points(), color=line.color).add_to(m)
    """

    def __init__(self, from_point, to_point, opts=None):
        self.config = CurveConfig.from_options(opts)
        self.from_point = to_coordinate(from_point)
        self.to_point = to_coordinate(to_point)

        if self.config.control_point is not None:
            self.control = self.config.control_point
        else:
            self.control = calculate_control_point(
                self.from_point, self.to_point, self.config.curve_factor
            )

        self._points, self._midpoint = sample_bezier_curve(
            self.from_point, self.to_point, self.control, self.config.steps
        )

    def get_points(self):
        """Return the cached tuple of Coordinates along the line"""
        return self._points

    def get_midpoint(self):
        """Return the point at the exact center step"""
        return self._midpoint

    @property
    def points(self):
        return self._points

    @property
    def midpoint(self):
        return self._midpoint

    @property
    def color(self):
        return self.config.color

    @property
    def weight(self):
        return self.config.weight

    @property
    def opacity(self):
        return self.config.opacity

    @property
    def steps(self):
        return self.config.steps

    @property
    def curve_factor(self):
        return self.config.curve_factor

    def __repr__(self):
        return (
            f"QuadraticBezierLine(from_point={self.from_point}, to_point={self.to_point}, "
            f"control={self.control}, steps={self.config.steps})"
        )
