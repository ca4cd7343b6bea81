"""
Classification results.

This module provides:
    • Figure
    • GeneratedFigure
    • polygon_tag(n)
    • polygon_name(n, language)
"""

from dataclasses import dataclass, field
from typing import List, Optional

from figure_classification.config import get_labels
from figure_classification.models.edge import Edge
from figure_classification.models.point import ColoredPoint


# -------------------------------------------------------------------------
#  CATEGORY / SUBTYPE TAGS
# -------------------------------------------------------------------------

POINT = "point"
SEGMENT = "segment"
FRAGMENT = "fragment"
SELF_INTERSECTING = "self-intersecting"
TRIANGLE = "triangle"
QUADRILATERAL = "quadrilateral"
PENTAGON = "pentagon"
HEXAGON = "hexagon"
N_GON = "n-gon"

RIGHT = "right"
ISOSCELES = "isosceles"
SCALENE = "scalene"

SQUARE = "square"
RECTANGLE = "rectangle"
RHOMBUS = "rhombus"
TRAPEZOID = "trapezoid"
GENERAL = "general"

_POLYGON_TAGS = {
    3: TRIANGLE,
    4: QUADRILATERAL,
    5: PENTAGON,
    6: HEXAGON,
}


def polygon_tag(n: int) -> str:
    return _POLYGON_TAGS.get(n, N_GON)


def polygon_name(n: int, language: Optional[str] = None) -> str:
    """
    3 → triangle, 4 → quadrilateral, 5 → pentagon, 6 → hexagon,
    anything else → "{n}-gon", in the requested label set.
    """
    labels = get_labels(language)
    return labels[polygon_tag(n)].format(n=n)


# -------------------------------------------------------------------------
#  FIGURE
# -------------------------------------------------------------------------

@dataclass(frozen=True)
class Figure:
    """
    Result of classifying one figure.

    category:
        point, segment, fragment, self-intersecting, triangle,
        quadrilateral, pentagon, hexagon or n-gon
    subtype:
        set only for non-self-intersecting triangles and quadrilaterals
    vertex_count:
        number of points left after normalization; names the polygon
        for self-intersecting figures and n-gons
    """

    category: str
    vertex_count: int
    subtype: Optional[str] = None

    def label(self, language: Optional[str] = None) -> str:
        """
        Render the classification string, e.g. "triangle: right",
        "self-intersecting: pentagon" or "7-gon".
        """
        labels = get_labels(language)

        if self.category == SELF_INTERSECTING:
            return f"{labels[SELF_INTERSECTING]}: {polygon_name(self.vertex_count, language)}"

        if self.category in (POINT, SEGMENT, FRAGMENT):
            name = labels[self.category]
        else:
            name = polygon_name(self.vertex_count, language)

        if self.subtype is not None:
            return f"{name}: {labels[self.subtype]}"
        return name

    def __str__(self):
        return self.label()


# -------------------------------------------------------------------------
#  GENERATED FIGURE (handed to a presentation layer)
# -------------------------------------------------------------------------

@dataclass
class GeneratedFigure:
    """
    A generated figure in drawing order together with its classification.
    """

    points: List[ColoredPoint] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)
    figure: Optional[Figure] = None

    @property
    def category(self):
        return self.figure.category if self.figure else None

    @property
    def subtype(self):
        return self.figure.subtype if self.figure else None

    @property
    def type(self):
        return self.figure.label() if self.figure else None
