"""
Utility Functions

Provides the geometry primitives and predicates used across detectors.
"""

from .geometry import (
    distance,
    cross,
    dot,
    angleAt,
    isCollinear,
    ccw,
    isParallel,
    nearlyEqual,
)

__all__ = [
    "distance",
    "cross",
    "dot",
    "angleAt",
    "isCollinear",
    "ccw",
    "isParallel",
    "nearlyEqual",
]
