"""
Data Models

Defines the core data structures:
- Point, ColoredPoint
- Edge
- Figure, GeneratedFigure
"""

from .point import Point, ColoredPoint, as_point
from .edge import Edge, as_edge, build_edges
from .figure import Figure, GeneratedFigure, polygon_name, polygon_tag

__all__ = [
    "Point",
    "ColoredPoint",
    "as_point",
    "Edge",
    "as_edge",
    "build_edges",
    "Figure",
    "GeneratedFigure",
    "polygon_name",
    "polygon_tag",
]
