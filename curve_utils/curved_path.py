from curve_utils.quadratic_bezier import QuadraticBezierLine


def create_curved_path(coords, curve_factor=0.4, steps=20):
    """
    Convert a sequence of points into a curved path using quadratic bezier curves.

    Each pair of consecutive waypoints is joined by its own Bezier line; the
    shared junction point is only kept once.

    Args:
        coords: List of coordinate tuples (lat, lng)
        curve_factor: How curved each segment should be
        steps: Number of steps along each segment

    Returns:
        List of interpolated coordinates for a curved path
    """
    if len(coords) < 2:
        return list(coords)  # Nothing to curve

    opts = {"curve_factor": curve_factor, "steps": steps}
    curved_coords = []

    for i in range(len(coords) - 1):
        segment = QuadraticBezierLine(coords[i], coords[i + 1], opts)
        points = segment.get_points()
        if len(points) < 2:
            points = (points[0], segment.to_point)  # Zero steps still keeps every waypoint
        if curved_coords:
            points = points[1:]  # Skip the junction shared with the previous segment
        curved_coords.extend(points)

    return curved_coords
