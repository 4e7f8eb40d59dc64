"""Geometric predicates used to classify rings against a geometry.

This module provides the mathematical utilities behind within_code:
- A point on the border of a ring or box
- Point-in-ring and point-in-geometry classification (ray casting)

Classification results follow one convention throughout:
+1 inside, 0 on the border, -1 outside.

All functions are pure and stateless.
"""

import math

from ringselect.domain import Box, Geometry, MultiPolygon, Point, Polygon, Ring
from ringselect.exceptions import UnsupportedGeometryError

INSIDE = 1
ON_BORDER = 0
OUTSIDE = -1


def point_on_border(shape: Ring | Box) -> Point:
    """Return a point lying on the border of a ring or box.

    Raises:
        EmptyRingError: If the ring has no points
    """
    return shape.point_on_border()


def distance_to_segment(point: Point, seg_start: Point, seg_end: Point) -> float:
    """Euclidean distance from a point to a line segment."""
    dx = seg_end.x - seg_start.x
    dy = seg_end.y - seg_start.y

    segment_length_sq = dx * dx + dy * dy
    if segment_length_sq < 1e-20:
        return math.hypot(point.x - seg_start.x, point.y - seg_start.y)

    # Project onto the segment and clamp to its endpoints
    t = ((point.x - seg_start.x) * dx + (point.y - seg_start.y) * dy) / segment_length_sq
    t = max(0.0, min(1.0, t))

    return math.hypot(point.x - (seg_start.x + t * dx), point.y - (seg_start.y + t * dy))


def point_in_ring(point: Point, ring: Ring, tolerance: float = 1e-9) -> int:
    """Classify a point against a ring, ignoring the ring's orientation.

    Args:
        point: The point to test
        ring: Closed or open ring
        tolerance: Distance under which the point counts as on the border

    Returns:
        +1 inside, 0 on the border, -1 outside. Rings with fewer than three
        points enclose nothing; a point on them still reports 0.

    Examples:
        >>> square = Ring([Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)])
        >>> point_in_ring(Point(1, 1), square)
        1
        >>> point_in_ring(Point(2, 1), square)
        0
        >>> point_in_ring(Point(3, 3), square)
        -1
    """
    points = ring.points
    n = len(points)
    if n == 0:
        return OUTSIDE

    for i in range(n):
        if distance_to_segment(point, points[i], points[(i + 1) % n]) <= tolerance:
            return ON_BORDER

    if n < 3:
        return OUTSIDE

    inside = False
    x, y = point.x, point.y
    j = n - 1

    for i in range(n):
        xi, yi = points[i].x, points[i].y
        xj, yj = points[j].x, points[j].y

        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            inside = not inside

        j = i

    return INSIDE if inside else OUTSIDE


def _point_in_box(point: Point, box: Box, tolerance: float) -> int:
    lo, hi = box.min_corner, box.max_corner
    if not (
        lo.x - tolerance <= point.x <= hi.x + tolerance
        and lo.y - tolerance <= point.y <= hi.y + tolerance
    ):
        return OUTSIDE
    if (
        abs(point.x - lo.x) <= tolerance
        or abs(point.x - hi.x) <= tolerance
        or abs(point.y - lo.y) <= tolerance
        or abs(point.y - hi.y) <= tolerance
    ):
        return ON_BORDER
    return INSIDE


def _point_in_polygon(point: Point, polygon: Polygon, tolerance: float) -> int:
    code = point_in_ring(point, polygon.exterior, tolerance)
    if code != INSIDE:
        return code

    for hole in polygon.interiors:
        hole_code = point_in_ring(point, hole, tolerance)
        if hole_code == INSIDE:
            return OUTSIDE
        if hole_code == ON_BORDER:
            return ON_BORDER

    return INSIDE


def point_in_geometry(point: Point, geometry: Geometry, tolerance: float = 1e-9) -> int:
    """Classify a point against any supported geometry.

    Polygons count as inside when the point is inside the exterior and
    outside every hole. Multi-polygons report the strongest result over
    their members.

    Args:
        point: The point to test
        geometry: Box, Ring, Polygon or MultiPolygon
        tolerance: Distance under which the point counts as on a border

    Returns:
        +1 inside, 0 on the border, -1 outside

    Raises:
        UnsupportedGeometryError: If geometry is not a known shape
    """
    if isinstance(geometry, Box):
        return _point_in_box(point, geometry, tolerance)
    if isinstance(geometry, Ring):
        return point_in_ring(point, geometry, tolerance)
    if isinstance(geometry, Polygon):
        return _point_in_polygon(point, geometry, tolerance)
    if isinstance(geometry, MultiPolygon):
        return max(
            (_point_in_polygon(point, p, tolerance) for p in geometry.polygons),
            default=OUTSIDE,
        )
    raise UnsupportedGeometryError(geometry)
