"""
Geometric Predicates
====================

Orientation test and winding-number point-in-polygon.

Reference: http://geomalgorithms.com/a03-_inclusion.html (wn_PnPoly)
"""

from tilequery_geometry.shapes import Point, Polygon


def is_left(p0: Point, p1: Point, p2: Point) -> float:
    """
    Signed area test of p2 against the directed line p0 -> p1.

    Uses cross product: (p1 - p0) x (p2 - p0)

    Returns:
        > 0: p2 is left of the line
        < 0: p2 is right of the line
        0: p2 is on the line
    """
    return (p1.x - p0.x) * (p2.y - p0.y) - (p2.x - p0.x) * (p1.y - p0.y)


def point_in_polygon(point: Point, polygon: Polygon) -> bool:
    """
    Winding number inclusion test.

    One counter is shared by all rings, so a point inside any ring counts as
    contained (rings are a union of areas, not shell minus holes). The closing
    edge of each ring is not walked: rings are expected to repeat their first
    point at the end.

    Points exactly on an edge are decided by the strict sign of is_left and
    the half-open y test: against the counter-clockwise square (0,0)-(4,4),
    (0, 2) and (2, 0) come out inside while (4, 2) and (2, 4) come out outside.

    Args:
        point: Point to test
        polygon: Reference polygon

    Returns:
        True if the winding number is non-zero
    """
    wn = 0
    for ring in polygon.rings:
        for start, end in zip(ring, ring[1:]):
            if start.y <= point.y:
                # upward crossing
                if end.y > point.y and is_left(start, end, point) > 0:
                    wn += 1
            else:
                # downward crossing
                if end.y <= point.y and is_left(start, end, point) < 0:
                    wn -= 1
        if wn != 0:
            return True
    return wn != 0
