"""
Random figure generation.

This module provides:
    • make_rng(seed)
    • generate_points(rng, count)
    • center_points(points)
    • sort_by_angle(points)
    • generate_figure(rng)
    • generate_figures(count, seed)

All randomness comes from the numpy Generator passed in, so a fixed
seed reproduces the same figures.
"""

from typing import Iterator, List, Optional

import numpy as np

from figure_classification.config import get_active_params
from figure_classification.models.edge import build_edges
from figure_classification.models.figure import GeneratedFigure
from figure_classification.models.point import ColoredPoint, Point
from figure_classification.detectors.figure_identifier import identify_figure


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    return np.random.default_rng(seed)


# -------------------------------------------------------------------------
#  POINT DRAWING
# -------------------------------------------------------------------------

def generate_points(rng: np.random.Generator, count: int, min_coord=None, max_coord=None) -> List[Point]:
    """
    Draws `count` distinct integer grid points uniformly from
    [min_coord, max_coord] x [min_coord, max_coord], rejecting repeats.
    """
    params = get_active_params()
    if min_coord is None:
        min_coord = params["MIN_COORD"]
    if max_coord is None:
        max_coord = params["MAX_COORD"]

    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")
    side = max_coord - min_coord + 1
    if side < 1 or count > side * side:
        raise ValueError(
            f"Cannot draw {count} distinct points from the grid "
            f"[{min_coord}, {max_coord}]^2"
        )

    used = set()
    points = []
    while len(points) < count:
        x, y = (int(v) for v in rng.integers(min_coord, max_coord, size=2, endpoint=True))
        if (x, y) in used:
            continue
        used.add((x, y))
        points.append(Point(x, y))

    return points


def center_points(points: List[Point], threshold=None, shift=None) -> List[Point]:
    """
    Pulls points near the upper grid border inward: any coordinate
    >= threshold is reduced by shift. May produce duplicates.
    """
    params = get_active_params()
    if threshold is None:
        threshold = params["CENTER_SHIFT_THRESHOLD"]
    if shift is None:
        shift = params["CENTER_SHIFT"]

    centered = []
    for p in points:
        x = p.x - shift if p.x >= threshold else p.x
        y = p.y - shift if p.y >= threshold else p.y
        centered.append(Point(x, y))
    return centered


# -------------------------------------------------------------------------
#  DRAWING ORDER
# -------------------------------------------------------------------------

def sort_by_angle(points: List[Point]) -> List[int]:
    """
    Indices of `points` ordered by polar angle around their centroid.
    Ties keep their original order.
    """
    if not points:
        return []

    xy = np.array([p.coords for p in points], dtype=float)
    cx, cy = xy.mean(axis=0)
    angles = np.arctan2(xy[:, 1] - cy, xy[:, 0] - cx)
    return [int(i) for i in np.argsort(angles, kind="stable")]


# -------------------------------------------------------------------------
#  FULL FIGURE
# -------------------------------------------------------------------------

def generate_figure(rng: np.random.Generator, count: Optional[int] = None) -> GeneratedFigure:
    """
    Generate one random figure and classify it.

    Steps:
      1. Pick the point count (MIN_POINTS..MAX_POINTS) unless given
      2. Draw distinct grid points
      3. Center them
      4. Order by angle for >= 3 points
      5. Color by position, build the closed edge loop
      6. Classify
    """
    params = get_active_params()
    colors = params["POINT_COLORS"]

    if count is None:
        count = int(rng.integers(params["MIN_POINTS"], params["MAX_POINTS"], endpoint=True))

    points = center_points(generate_points(rng, count))

    if len(points) >= 3:
        order = sort_by_angle(points)
    else:
        order = list(range(len(points)))

    ordered = [points[i] for i in order]
    colored = [ColoredPoint(p, colors[i % len(colors)]) for i, p in enumerate(ordered)]
    edges = build_edges(len(ordered))

    return GeneratedFigure(
        points=colored,
        edges=edges,
        figure=identify_figure(ordered, edges),
    )


def generate_figures(count: int, seed: Optional[int] = None) -> Iterator[GeneratedFigure]:
    """Yields `count` figures drawn from a single generator seeded with `seed`."""
    rng = make_rng(seed)
    for _ in range(count):
        yield generate_figure(rng)
