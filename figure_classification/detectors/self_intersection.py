"""
Self-intersection detection.

This module provides:
    • edges_adjacent(edges, i, j)
    • segments_intersect(a, b, c, d)
    • find_self_intersection(points, edges)
    • has_self_intersection(points, edges)

Every pair of non-adjacent edges is tested for a proper crossing. The
check is quadratic in the number of edges, which is fine for figures of
a few dozen vertices.
"""

from typing import Optional, Sequence, Tuple

from figure_classification.models.edge import Edge
from figure_classification.models.point import Point
from figure_classification.utils.geometry import ccw


# ----------------------------------------------------------------------
# 1. ADJACENCY
# ----------------------------------------------------------------------

def edges_adjacent(edges: Sequence[Edge], i: int, j: int) -> bool:
    """
    Edges at positions i and j are adjacent (never tested) when:
      - they are consecutive in the list, or
      - they are the first and the last edge (closing edge), or
      - they share an endpoint index.
    """
    if i > j:
        i, j = j, i

    return (
        j - i == 1
        or (i == 0 and j == len(edges) - 1)
        or edges[i].sharesVertex(edges[j])
    )


# ----------------------------------------------------------------------
# 2. PROPER SEGMENT INTERSECTION
# ----------------------------------------------------------------------

def segments_intersect(a: Point, b: Point, c: Point, d: Point) -> bool:
    """
    Returns True if segment a-b properly crosses segment c-d.

    Segments with a coordinate-equal endpoint never count as crossing.
    The orientation test is strict, so collinear touching or overlap is
    not a crossing either.
    """
    if a == c or a == d or b == c or b == d:
        return False

    return ccw(a, c, d) != ccw(b, c, d) and ccw(a, b, c) != ccw(a, b, d)


# ----------------------------------------------------------------------
# 3. FIGURE-LEVEL CHECK
# ----------------------------------------------------------------------

def find_self_intersection(points: Sequence[Point], edges: Sequence[Edge]) -> Optional[Tuple[int, int]]:
    """
    Returns the (i, j) positions of the first pair of non-adjacent edges
    that cross, or None.

    Edge endpoints are looked up in `points`; an index outside that list
    raises IndexError.
    """
    for i in range(len(edges)):
        a1, a2 = edges[i].resolve(points)

        for j in range(i + 1, len(edges)):
            if edges_adjacent(edges, i, j):
                continue

            b1, b2 = edges[j].resolve(points)
            if segments_intersect(a1, a2, b1, b2):
                return i, j

    return None


def has_self_intersection(points: Sequence[Point], edges: Sequence[Edge]) -> bool:
    return find_self_intersection(points, edges) is not None
