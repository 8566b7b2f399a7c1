import logging

import folium
from geopy.distance import geodesic

from curve_utils.quadratic_bezier import QuadraticBezierLine

logger = logging.getLogger(__name__)


def polyline_length_m(points):
    """
    Calculate the length of a polyline by summing geodesic distances between consecutive points.

    Args:
        points: Sequence of (lat, lng) tuples

    Returns:
        Length in meters (0 for fewer than two points)
    """
    total = 0.0
    for start, end in zip(points, points[1:]):
        total += geodesic(tuple(start), tuple(end)).meters
    return total


def add_quadratic_bezier_to_map(m, curve, tooltip=None, add_markers=False, show_control_point=False):
    """
    Add a quadratic Bezier line to a Folium map.

    The geometry comes from curve.get_points(); color, weight and opacity are
    taken from the curve's options unchanged.

    Args:
        m: Folium map object (if None, nothing is drawn)
        curve: QuadraticBezierLine to draw
        tooltip: Optional tooltip text for the line
        add_markers: If True, add markers at the start, middle and end points
        show_control_point: If True, add a marker at the control point and dashed
            guide lines from it to both endpoints

    Returns:
        List of coordinate tuples (lat, lng) forming the line
    """
    curve_coords = list(curve.get_points())

    if m is None:
        return curve_coords

    folium.PolyLine(
        locations=curve_coords,
        color=curve.color,
        weight=curve.weight,
        opacity=curve.opacity,
        tooltip=tooltip or "Bezier Line"
    ).add_to(m)

    if add_markers and curve_coords:
        folium.Marker(
            location=curve.from_point,
            tooltip="Line Start",
            icon=folium.Icon(color="blue", icon="info-sign")
        ).add_to(m)

        folium.Marker(
            location=curve.get_midpoint(),
            tooltip="Line Midpoint",
            icon=folium.Icon(color="orange", icon="info-sign")
        ).add_to(m)

        folium.Marker(
            location=curve.to_point,
            tooltip="Line End",
            icon=folium.Icon(color="green", icon="info-sign")
        ).add_to(m)

    if show_control_point:
        folium.CircleMarker(
            location=curve.control,
            radius=5,
            color=curve.color,
            fill=True,
            fill_opacity=0.8,
            tooltip=f"Control Point ({curve.control.lat:.6f}, {curve.control.lng:.6f})"
        ).add_to(m)

        # Guide lines from the endpoints to the control point
        folium.PolyLine(
            locations=[curve.from_point, curve.control, curve.to_point],
            color="gray",
            weight=1,
            opacity=0.7,
            dash_array="5, 5"
        ).add_to(m)

    logger.debug("Added bezier line with %d points to map", len(curve_coords))
    return curve_coords


def create_bezier_line_on_map(m, from_point, to_point, opts=None, **kwargs):
    """
    Create a quadratic Bezier line and add it to a Folium map.

    Args:
        m: Folium map object
        from_point: Tuple (lat, lng) for the start of the line
        to_point: Tuple (lat, lng) for the end of the line
        opts: Curve options (dict or CurveConfig)
        **kwargs: Passed on to add_quadratic_bezier_to_map

    Returns:
        The QuadraticBezierLine that was drawn
    """
    curve = QuadraticBezierLine(from_point, to_point, opts)
    add_quadratic_bezier_to_map(m, curve, **kwargs)
    return curve
