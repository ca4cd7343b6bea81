from dataclasses import dataclass
from typing import List, Sequence

from figure_classification.models.point import Point


@dataclass(frozen=True)
class Edge:
    """
    A segment between two vertices, given as indices into the point
    list the edge was built against. Indices are never renumbered.
    """

    start: int
    end: int

    def sharesVertex(self, other: "Edge") -> bool:
        """True if the two edges have an endpoint index in common."""
        return (
            self.start == other.start
            or self.start == other.end
            or self.end == other.start
            or self.end == other.end
        )

    def resolve(self, points: Sequence[Point]):
        """
        Look up both endpoints in `points`.

        Raises IndexError for any index outside [0, len(points)),
        negative indices included.
        """
        n = len(points)
        for idx in (self.start, self.end):
            if not 0 <= idx < n:
                raise IndexError(
                    f"{self!r} references vertex {idx}, "
                    f"but the point list has {n} point(s)"
                )
        return points[self.start], points[self.end]

    def __repr__(self):
        return f"Edge({self.start}->{self.end})"


def as_edge(value) -> Edge:
    """
    Accepts an Edge or any (start, end) pair of integers.
    """
    if isinstance(value, Edge):
        return value

    start, end = value
    if isinstance(start, bool) or isinstance(end, bool):
        raise TypeError(f"Edge indices must be integers, got {value!r}")
    if int(start) != start or int(end) != end:
        raise ValueError(f"Edge indices must be whole numbers, got {value!r}")
    return Edge(int(start), int(end))


def build_edges(n: int) -> List[Edge]:
    """
    Consecutive edges (i, i+1), closed with (n-1, 0) when n >= 3.
    """
    edges = [Edge(i, i + 1) for i in range(n - 1)]
    if n >= 3:
        edges.append(Edge(n - 1, 0))
    return edges
