"""Folium rendering adapter and curved path unit tests."""

import folium
import pytest
from geopy.distance import geodesic

from curve_utils.bezier_overlay import (
    add_quadratic_bezier_to_map,
    create_bezier_line_on_map,
    polyline_length_m,
)
from curve_utils.curved_path import create_curved_path
from curve_utils.quadratic_bezier import QuadraticBezierLine

FROM_POINT = (32.9740081, -117.2669915)
TO_POINT = (32.9536, -117.243)


def _children_of_type(m, cls):
    return [child for child in m._children.values() if type(child) is cls]


@pytest.fixture
def folium_map():
    return folium.Map(location=FROM_POINT, zoom_start=13, tiles="OpenStreetMap")


class TestAddQuadraticBezierToMap:
    def test_adds_polyline_with_curve_style(self, folium_map):
        curve = QuadraticBezierLine(FROM_POINT, TO_POINT, {"color": "#00ff00", "weight": 3, "opacity": 0.9})
        coords = add_quadratic_bezier_to_map(folium_map, curve)

        lines = _children_of_type(folium_map, folium.PolyLine)
        assert len(lines) == 1
        assert len(lines[0].locations) == len(curve.get_points())
        assert lines[0].options["color"] == "#00ff00"
        assert lines[0].options["weight"] == 3
        assert lines[0].options["opacity"] == 0.9
        assert coords == list(curve.get_points())

    def test_markers(self, folium_map):
        curve = QuadraticBezierLine(FROM_POINT, TO_POINT)
        add_quadratic_bezier_to_map(folium_map, curve, add_markers=True)
        assert len(_children_of_type(folium_map, folium.Marker)) == 3

    def test_control_point_guide(self, folium_map):
        curve = QuadraticBezierLine(FROM_POINT, TO_POINT)
        add_quadratic_bezier_to_map(folium_map, curve, show_control_point=True)
        assert len(_children_of_type(folium_map, folium.CircleMarker)) == 1
        assert len(_children_of_type(folium_map, folium.PolyLine)) == 2

    def test_no_map_returns_points(self):
        curve = QuadraticBezierLine(FROM_POINT, TO_POINT, {"steps": 4})
        coords = add_quadratic_bezier_to_map(None, curve, add_markers=True)
        assert coords == list(curve.get_points())

    def test_create_bezier_line_on_map(self, folium_map):
        curve = create_bezier_line_on_map(folium_map, FROM_POINT, TO_POINT, {"steps": 10}, tooltip="Test")
        assert isinstance(curve, QuadraticBezierLine)
        assert len(curve.get_points()) == 11
        assert len(_children_of_type(folium_map, folium.PolyLine)) == 1


class TestPolylineLength:
    def test_empty_and_single_point(self):
        assert polyline_length_m([]) == 0.0
        assert polyline_length_m([FROM_POINT]) == 0.0

    def test_two_points_is_geodesic(self):
        assert polyline_length_m([FROM_POINT, TO_POINT]) == pytest.approx(geodesic(FROM_POINT, TO_POINT).meters)

    def test_curve_longer_than_chord(self):
        curve = QuadraticBezierLine(FROM_POINT, TO_POINT, {"curve_factor": 0.4})
        straight = geodesic(FROM_POINT, TO_POINT).meters
        assert polyline_length_m(curve.get_points()) > straight


class TestCreateCurvedPath:
    def test_too_few_points(self):
        assert create_curved_path([]) == []
        assert create_curved_path([FROM_POINT]) == [FROM_POINT]

    def test_single_segment(self):
        path = create_curved_path([FROM_POINT, TO_POINT], steps=4)
        assert len(path) == 5
        assert path[0] == FROM_POINT
        assert path[-1] == TO_POINT

    def test_junctions_not_duplicated(self):
        waypoints = [(0.0, 0.0), (1.0, 1.0), (2.0, 0.0)]
        path = create_curved_path(waypoints, curve_factor=0.2, steps=4)
        assert len(path) == 2 * 5 - 1
        assert path[4] == (1.0, 1.0)
        assert path[-1] == (2.0, 0.0)
        assert all(a != b for a, b in zip(path, path[1:]))

    def test_zero_steps_keeps_every_waypoint(self):
        waypoints = [(0.0, 0.0), (1.0, 1.0), (2.0, 0.0)]
        path = create_curved_path(waypoints, steps=0)
        assert path == waypoints
