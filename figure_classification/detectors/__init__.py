"""
Detectors Package

Contains the classification stages of the figure pipeline:
- Point normalization
- Collinearity check
- Self-intersection detection
- Triangle / quadrilateral sub-classification
- Figure identification (orchestration)
"""

from .point_normalizer import deduplicate_points, remove_inline_points, normalize_points
from .collinearity import all_collinear
from .self_intersection import (
    edges_adjacent,
    segments_intersect,
    find_self_intersection,
    has_self_intersection,
)
from .shape_classifier import (
    side_lengths,
    interior_angles,
    classify_triangle,
    classify_quadrilateral,
)
from .figure_identifier import identify_figure, classify

__all__ = [
    "deduplicate_points",
    "remove_inline_points",
    "normalize_points",
    "all_collinear",
    "edges_adjacent",
    "segments_intersect",
    "find_self_intersection",
    "has_self_intersection",
    "side_lengths",
    "interior_angles",
    "classify_triangle",
    "classify_quadrilateral",
    "identify_figure",
    "classify",
]
