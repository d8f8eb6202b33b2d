"""Pure Python point-in-polygon using ray casting. No external dependencies.

Points are (lon, lat) pairs. Boundary membership follows the half-open
crossing rule as written: for an axis-aligned square, points on the bottom
and left edges test inside, points on the top and right edges test outside.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Polygon:
    """Outer ring followed by zero or more hole rings."""
    rings: tuple


@dataclass(frozen=True)
class MultiPolygon:
    """Ordered sub-polygons, each a tuple of rings shaped like Polygon.rings."""
    polygons: tuple


def _freeze_ring(ring):
    return tuple((float(x), float(y)) for x, y, *_ in ring)


def _freeze_rings(rings):
    return tuple(_freeze_ring(ring) for ring in rings)


def geometry_from_geojson(geom):
    """Build a Polygon or MultiPolygon from a GeoJSON geometry dict.

    Returns None for missing geometries and for any other geometry type.
    """
    if not geom:
        return None

    if geom.get('type') == 'Polygon':
        return Polygon(_freeze_rings(geom['coordinates']))
    if geom.get('type') == 'MultiPolygon':
        return MultiPolygon(tuple(_freeze_rings(polygon) for polygon in geom['coordinates']))
    return None


def ray_cast_contains(point_lon, point_lat, polygon_coords):
    """Check if point (lon, lat) is inside a polygon ring.

    Uses the ray casting algorithm. polygon_coords is a sequence of (lon, lat) pairs.
    """
    n = len(polygon_coords)
    inside = False
    x, y = point_lon, point_lat
    j = n - 1

    for i in range(n):
        xi, yi = polygon_coords[i]
        xj, yj = polygon_coords[j]

        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            inside = not inside
        j = i

    return inside


def polygon_contains(polygon_rings, point):
    """Check the outer ring, then make sure the point is in none of the holes."""
    if not polygon_rings:
        return False

    lon, lat = point
    if not ray_cast_contains(lon, lat, polygon_rings[0]):
        return False
    for hole in polygon_rings[1:]:
        if ray_cast_contains(lon, lat, hole):
            return False
    return True


def contains_point(geometry, point):
    """Check if a Polygon or MultiPolygon contains point (lon, lat).

    MultiPolygon parts are tested in order and the first containing part wins.
    """
    if isinstance(geometry, Polygon):
        return polygon_contains(geometry.rings, point)
    if isinstance(geometry, MultiPolygon):
        for polygon_rings in geometry.polygons:
            if polygon_contains(polygon_rings, point):
                return True
        return False
    raise TypeError(f'Unsupported geometry: {type(geometry).__name__}')


def geometry_bbox(geometry):
    """Return (min_x, min_y, max_x, max_y) over the outer rings of a geometry."""
    if isinstance(geometry, Polygon):
        outers = geometry.rings[:1]
    else:
        outers = [rings[0] for rings in geometry.polygons if rings]

    min_x = min_y = float('inf')
    max_x = max_y = float('-inf')
    for ring in outers:
        for x, y in ring:
            min_x = min(min_x, x)
            min_y = min(min_y, y)
            max_x = max(max_x, x)
            max_y = max(max_y, y)
    return min_x, min_y, max_x, max_y


def bbox_contains(bbox, point):
    """Inclusive bounding-box check; never rejects a point the ray cast accepts."""
    min_x, min_y, max_x, max_y = bbox
    x, y = point
    return min_x <= x <= max_x and min_y <= y <= max_y
