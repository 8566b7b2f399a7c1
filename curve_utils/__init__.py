from curve_utils.coords import Coordinate
from curve_utils.curve_config import CurveConfig, DEFAULT_OPTIONS, merge_options
from curve_utils.quadratic_bezier import QuadraticBezierLine, calculate_control_point, bezier_point, sample_bezier_curve
from curve_utils.bezier_overlay import add_quadratic_bezier_to_map, create_bezier_line_on_map, polyline_length_m
from curve_utils.curved_path import create_curved_path

__all__ = [
    'Coordinate',
    'CurveConfig',
    'DEFAULT_OPTIONS',
    'merge_options',
    'QuadraticBezierLine',
    'calculate_control_point',
    'bezier_point',
    'sample_bezier_curve',
    'add_quadratic_bezier_to_map',
    'create_bezier_line_on_map',
    'polyline_length_m',
    'create_curved_path'
]
