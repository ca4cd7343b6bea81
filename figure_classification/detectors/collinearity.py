from typing import Sequence

from figure_classification.models.point import Point
from figure_classification.utils.geometry import isCollinear


def all_collinear(points: Sequence[Point], epsilon=None) -> bool:
    """
    True if every point lies on the line through the first two.
    Fewer than three points are trivially collinear.
    """
    if len(points) < 3:
        return True

    a, b = points[0], points[1]
    return all(isCollinear(a, b, p, epsilon) for p in points[2:])
