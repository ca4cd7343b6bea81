"""
Point normalization.

This module provides:
    • deduplicate_points(points)
    • remove_inline_points(points)
    • normalize_points(points)

Normalization runs before every classification: exact duplicates are
dropped first, then every point lying on the line through its cyclic
neighbours is stripped.
"""

from typing import List, Sequence

from figure_classification.models.point import Point
from figure_classification.utils.geometry import isCollinear


# -------------------------------------------------------------------------
#  1. EXACT DEDUPLICATION
# -------------------------------------------------------------------------

def deduplicate_points(points: Sequence[Point]) -> List[Point]:
    """
    Keeps the first occurrence of every (x, y) pair, in original order.
    Comparison is exact; no tolerance is applied.
    """
    seen = set()
    result = []

    for p in points:
        if p.coords in seen:
            continue
        seen.add(p.coords)
        result.append(p)

    return result


# -------------------------------------------------------------------------
#  2. INTERIOR COLLINEAR POINT REMOVAL
# -------------------------------------------------------------------------

def remove_inline_points(points: Sequence[Point], epsilon=None) -> List[Point]:
    """
    Drops every point that is collinear with its cyclic predecessor and
    successor.

    The sequence is treated as a closed loop even when it describes an
    open chain. This is a single pass: every point is tested against
    its neighbours in the input, not against the survivors, so a run of
    collinear points can disappear completely.
    """
    n = len(points)
    if n < 3:
        return list(points)

    filtered = []
    for i in range(n):
        prev = points[(i - 1) % n]
        curr = points[i]
        nxt = points[(i + 1) % n]

        if not isCollinear(prev, curr, nxt, epsilon):
            filtered.append(curr)

    return filtered


def normalize_points(points: Sequence[Point], epsilon=None) -> List[Point]:
    return remove_inline_points(deduplicate_points(points), epsilon)
