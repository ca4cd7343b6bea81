"""
This module provides:
    - distance
    - cross / dot
    - angleAt          (unsigned angle at a vertex, degrees)
    - isCollinear      (with auto EPSILON from config)
    - ccw              (strict orientation sign)
    - isParallel       (with auto EPSILON from config)
"""

import math

from figure_classification.config import get_active_params


def _resolve_epsilon(epsilon):
    if epsilon is None:
        return get_active_params()["EPSILON"]
    return epsilon


# ----------------------------------------------------------------------
#  SCALAR PRIMITIVES
# ----------------------------------------------------------------------

def distance(p, q):
    """Euclidean distance between two points."""
    return math.hypot(q.x - p.x, q.y - p.y)


def cross(o, a, b):
    """
    2-D cross product of (a - o) and (b - o).

    Positive when o → a → b turns counter-clockwise, negative when it
    turns clockwise, zero when the three points are collinear.
    """
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def dot(o, a, b):
    """Dot product of (a - o) and (b - o)."""
    return (a.x - o.x) * (b.x - o.x) + (a.y - o.y) * (b.y - o.y)


# ----------------------------------------------------------------------
#  ANGLE AT A VERTEX
# ----------------------------------------------------------------------

def angleAt(prev, vertex, nxt):
    """
    Unsigned angle in degrees, in [0, 180], between the vectors
    (prev - vertex) and (nxt - vertex).
    """
    return math.degrees(math.atan2(abs(cross(vertex, prev, nxt)), dot(vertex, prev, nxt)))


# ----------------------------------------------------------------------
#  PREDICATES
# ----------------------------------------------------------------------

def isCollinear(a, b, c, epsilon=None):
    """
    Returns True if the three points lie on one line, i.e. the cross
    product |(b - a) x (c - a)| is below epsilon.
    """
    return abs(cross(a, b, c)) < _resolve_epsilon(epsilon)


def ccw(a, b, c):
    """
    Strict orientation test: True only if a → b → c turns
    counter-clockwise. Collinear triples give False.
    """
    return (c.y - a.y) * (b.x - a.x) > (b.y - a.y) * (c.x - a.x)


def isParallel(a1, a2, b1, b2, epsilon=None):
    """
    Returns True if segment a1→a2 is parallel (or anti-parallel) to
    segment b1→b2: the cross product of their direction vectors is
    below epsilon.
    """
    dx1 = a2.x - a1.x
    dy1 = a2.y - a1.y
    dx2 = b2.x - b1.x
    dy2 = b2.y - b1.y
    return abs(dx1 * dy2 - dy1 * dx2) < _resolve_epsilon(epsilon)


def nearlyEqual(u, v, epsilon=None):
    return abs(u - v) < _resolve_epsilon(epsilon)
