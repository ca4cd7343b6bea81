"""
Figure identification.

This module provides:
    • identify_figure(points, edges)  -> Figure
    • classify(points, edges)         -> str

Pipeline, each step terminal on a match:
    1. Normalize points (deduplicate, strip interior collinear points)
    2. 1 point → point, 2 points → segment
    3. All points collinear → fragment
    4. Non-adjacent edges cross → self-intersecting
    5. 3 points → triangle + subtype, 4 points → quadrilateral + subtype,
       otherwise the polygon name
"""

from typing import Optional

from figure_classification.config import EDGE_RESOLUTION_MODES, get_active_params
from figure_classification.models.edge import as_edge, build_edges
from figure_classification.models.figure import (
    FRAGMENT,
    POINT,
    QUADRILATERAL,
    SEGMENT,
    SELF_INTERSECTING,
    TRIANGLE,
    Figure,
    polygon_tag,
)
from figure_classification.models.point import as_point
from figure_classification.detectors.point_normalizer import normalize_points
from figure_classification.detectors.collinearity import all_collinear
from figure_classification.detectors.self_intersection import has_self_intersection
from figure_classification.detectors.shape_classifier import (
    classify_quadrilateral,
    classify_triangle,
)


def identify_figure(points, edges, edge_resolution: Optional[str] = None) -> Figure:
    """
    Classify a figure given in drawing order.

    Parameters
    ----------
    points : sequence
        Vertices in drawing order, as Point / ColoredPoint / (x, y).
    edges : sequence
        Edges as Edge / (start, end), indexing into `points` as given.
    edge_resolution : {"original", "normalized"}, optional
        How edges are matched to the normalized polygon for the crossing
        check. Defaults to config.EDGE_RESOLUTION.

        "original"    indices are checked against the list as received;
                      if normalization dropped any point, the crossing
                      check runs on the closed loop over the surviving
                      vertices, the same polygon that is sub-classified
        "normalized"  indices are resolved against the normalized list
                      as given; raises IndexError if normalization
                      removed a referenced position

    Returns
    -------
    Figure
    """
    params = get_active_params()
    if edge_resolution is None:
        edge_resolution = params["EDGE_RESOLUTION"]
    if edge_resolution not in EDGE_RESOLUTION_MODES:
        raise ValueError(f"Unknown edge_resolution {edge_resolution!r}")

    received = [as_point(p) for p in points]
    edges = [as_edge(e) for e in edges]

    # ------------------------------
    # STEP 1 — NORMALIZE
    # ------------------------------
    normalized = normalize_points(received)
    count = len(normalized)

    # ------------------------------
    # STEP 2 — DEGENERATE FIGURES
    # ------------------------------
    if count == 1:
        return Figure(POINT, count)
    if count == 2:
        return Figure(SEGMENT, count)

    # ------------------------------
    # STEP 3 — COLLINEAR SET
    # ------------------------------
    if all_collinear(normalized):
        return Figure(FRAGMENT, count)

    # ------------------------------
    # STEP 4 — SELF-INTERSECTION
    # ------------------------------
    if edge_resolution == "original":
        for edge in edges:
            edge.resolve(received)
        if count != len(received):
            edges = build_edges(count)

    if has_self_intersection(normalized, edges):
        return Figure(SELF_INTERSECTING, count)

    # ------------------------------
    # STEP 5 — POLYGONS
    # ------------------------------
    if count == 3:
        return Figure(TRIANGLE, count, classify_triangle(normalized))
    if count == 4:
        return Figure(QUADRILATERAL, count, classify_quadrilateral(normalized))
    return Figure(polygon_tag(count), count)


def classify(points, edges, language: Optional[str] = None) -> str:
    """
    Classification string for a figure, e.g. "quadrilateral: square".
    """
    return identify_figure(points, edges).label(language)
