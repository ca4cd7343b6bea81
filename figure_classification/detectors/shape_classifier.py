"""
Triangle and quadrilateral sub-classification.

This module provides:
    • side_lengths(points)
    • interior_angles(points)
    • classify_triangle(points)        -> right / isosceles / scalene
    • classify_quadrilateral(points)   -> square / rectangle / rhombus /
                                          trapezoid / general

Side lengths and parallelism are compared with EPSILON. Corner angles
are compared to 90 degrees with the looser RIGHT_ANGLE_TOLERANCE, since
the angle computation amplifies floating error.
"""

from itertools import permutations
from typing import List, Sequence

from figure_classification.config import get_active_params
from figure_classification.models.figure import (
    GENERAL,
    ISOSCELES,
    RECTANGLE,
    RHOMBUS,
    RIGHT,
    SCALENE,
    SQUARE,
    TRAPEZOID,
)
from figure_classification.models.point import Point
from figure_classification.utils.geometry import (
    angleAt,
    distance,
    isParallel,
    nearlyEqual,
)


# ----------------------------------------------------------------------
# SHARED MEASUREMENTS
# ----------------------------------------------------------------------

def side_lengths(points: Sequence[Point]) -> List[float]:
    """Cyclic consecutive distances: |p0p1|, |p1p2|, ..., |pn-1p0|."""
    n = len(points)
    return [distance(points[i], points[(i + 1) % n]) for i in range(n)]


def interior_angles(points: Sequence[Point]) -> List[float]:
    """Unsigned angle at every vertex between its cyclic neighbours."""
    n = len(points)
    return [angleAt(points[(i - 1) % n], points[i], points[(i + 1) % n]) for i in range(n)]


def _expect(points, n, kind):
    if len(points) != n:
        raise ValueError(f"A {kind} needs exactly {n} points, got {len(points)}")


# ----------------------------------------------------------------------
# TRIANGLES
# ----------------------------------------------------------------------

def isRightTriangle(a, b, c, epsilon=None) -> bool:
    """Pythagorean identity on any arrangement of the squared sides."""
    return any(
        nearlyEqual(x * x + y * y, z * z, epsilon)
        for x, y, z in permutations((a, b, c))
    )


def isIsoscelesTriangle(a, b, c, epsilon=None) -> bool:
    return (
        nearlyEqual(a, b, epsilon)
        or nearlyEqual(b, c, epsilon)
        or nearlyEqual(a, c, epsilon)
    )


def classify_triangle(points: Sequence[Point], epsilon=None) -> str:
    """
    right > isosceles > scalene: a right isosceles triangle is "right".
    """
    _expect(points, 3, "triangle")
    a, b, c = side_lengths(points)

    if isRightTriangle(a, b, c, epsilon):
        return RIGHT
    if isIsoscelesTriangle(a, b, c, epsilon):
        return ISOSCELES
    return SCALENE


# ----------------------------------------------------------------------
# QUADRILATERALS
# ----------------------------------------------------------------------

def classify_quadrilateral(points: Sequence[Point], epsilon=None, angle_tolerance=None) -> str:
    """
    First match wins:

        square      all corners right, all sides equal
        rectangle   all corners right, opposite sides equal
        rhombus     not all corners right, all sides equal
        trapezoid   at least one pair of opposite sides parallel
        general     anything else
    """
    _expect(points, 4, "quadrilateral")
    if angle_tolerance is None:
        angle_tolerance = get_active_params()["RIGHT_ANGLE_TOLERANCE"]

    sides = side_lengths(points)
    opposite_sides_equal = (
        nearlyEqual(sides[0], sides[2], epsilon)
        and nearlyEqual(sides[1], sides[3], epsilon)
    )
    all_sides_equal = all(nearlyEqual(s, sides[0], epsilon) for s in sides)

    angles = interior_angles(points)
    all_right = all(abs(ang - 90) < angle_tolerance for ang in angles)

    p0, p1, p2, p3 = points
    has_parallel_pair = (
        isParallel(p0, p1, p2, p3, epsilon)
        or isParallel(p1, p2, p3, p0, epsilon)
    )

    if all_right and all_sides_equal:
        return SQUARE
    if all_right and opposite_sides_equal:
        return RECTANGLE
    if not all_right and all_sides_equal:
        return RHOMBUS
    if has_parallel_pair:
        return TRAPEZOID
    return GENERAL
