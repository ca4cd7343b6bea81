from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Point:
    """
    A vertex of a figure.

    Coordinates are integer-valued in practice (grid points) but all
    arithmetic on them is done in floating point. Equality and hashing
    are exact coordinate equality, which is what deduplication relies on.
    """

    x: float
    y: float

    @property
    def coords(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def __repr__(self):
        return f"Point({self.x}, {self.y})"


@dataclass(frozen=True)
class ColoredPoint:
    """
    A point paired with the color it is drawn in.

    Color is presentation data only; the classifier works on `.point`.
    """

    point: Point
    color: str

    @property
    def x(self):
        return self.point.x

    @property
    def y(self):
        return self.point.y

    def __repr__(self):
        return f"ColoredPoint({self.x}, {self.y}, color={self.color!r})"


# ------------------------------------------------------------------
# Coercion
# ------------------------------------------------------------------

def as_point(value) -> Point:
    """
    Accepts a Point, a ColoredPoint, or any (x, y) pair.
    """
    if isinstance(value, Point):
        return value
    if isinstance(value, ColoredPoint):
        return value.point

    x, y = value
    return Point(x, y)
