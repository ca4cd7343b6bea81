"""
Figure Generation

Seedable random figures in drawing order, ready for classification.
"""

from .figure_generator import (
    make_rng,
    generate_points,
    center_points,
    sort_by_angle,
    build_edges,
    generate_figure,
    generate_figures,
)

__all__ = [
    "make_rng",
    "generate_points",
    "center_points",
    "sort_by_angle",
    "build_edges",
    "generate_figure",
    "generate_figures",
]
