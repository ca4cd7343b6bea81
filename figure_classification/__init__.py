"""
Figure Classification Package

Classifies small polygonal figures on an integer grid, including:

- Point normalization (deduplication, interior collinear points)
- Collinearity detection
- Self-intersection detection
- Triangle / quadrilateral sub-classification
- Seedable random figure generation
"""

from figure_classification.detectors.figure_identifier import classify, identify_figure
from figure_classification.models import ColoredPoint, Edge, Figure, GeneratedFigure, Point

__all__ = [
    "config",
    "main",
    "detectors",
    "generation",
    "models",
    "utils",
    "classify",
    "identify_figure",
    "Point",
    "ColoredPoint",
    "Edge",
    "Figure",
    "GeneratedFigure",
]
