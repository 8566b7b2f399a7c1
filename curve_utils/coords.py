from collections import namedtuple

# Immutable (lat, lng) pair; still a plain tuple for folium
Coordinate = namedtuple("Coordinate", ["lat", "lng"])


def to_coordinate(point):
    """Convert a (lat, lng) pair to a Coordinate of floats"""
    if isinstance(point, Coordinate):
        return point
    return Coordinate(float(point[0]), float(point[1]))
