"""Point type and planar predicates consumed by the DCEL engine.

Only ``midpoint`` is needed by the core mutations; the orientation and
in-circle predicates are kept for predicate-driven operations such as edge
flips.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np

from .constants import EPS_COLINEAR

__all__ = [
    'Point2', 'midpoint', 'area_of_parallelogram', 'area_of_triangle',
    'is_lht', 'is_lht_or_on', 'is_rht', 'is_rht_or_on', 'is_same_side',
    'in_circle', 'polygon_signed_area', 'points_to_array',
]


@dataclass(frozen=True)
class Point2:
    """A point in the plane."""

    x: float
    y: float

    @classmethod
    def from_pair(cls, pair: Sequence[float]) -> 'Point2':
        """Build a point from an ``(x, y)`` pair (tuple, list or array)."""
        if len(pair) != 2:
            raise ValueError(f"expected a coordinate pair, got {len(pair)} values")
        return cls(float(pair[0]), float(pair[1]))

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)

    def dist_sq(self, other: 'Point2') -> float:
        dx = other.x - self.x
        dy = other.y - self.y
        return dx * dx + dy * dy

    def __iter__(self):
        yield self.x
        yield self.y


def midpoint(a: Point2, b: Point2) -> Point2:
    return Point2(0.5 * (a.x + b.x), 0.5 * (a.y + b.y))


def area_of_parallelogram(a: Point2, b: Point2, c: Point2) -> float:
    """Signed area (cross product) of the parallelogram spanned by a->b and a->c.

    Positive when (a, b, c) turn counter-clockwise, negative when clockwise and
    zero when colinear.
    """
    return (b.x - a.x) * (c.y - a.y) - (c.x - a.x) * (b.y - a.y)


def area_of_triangle(a: Point2, b: Point2, c: Point2) -> float:
    return 0.5 * area_of_parallelogram(a, b, c)


def is_lht(a: Point2, b: Point2, c: Point2) -> bool:
    """Left-hand (counter-clockwise) turn."""
    return area_of_parallelogram(a, b, c) > EPS_COLINEAR


def is_lht_or_on(a: Point2, b: Point2, c: Point2) -> bool:
    return area_of_parallelogram(a, b, c) >= -EPS_COLINEAR


def is_rht(a: Point2, b: Point2, c: Point2) -> bool:
    """Right-hand (clockwise) turn."""
    return area_of_parallelogram(a, b, c) < -EPS_COLINEAR


def is_rht_or_on(a: Point2, b: Point2, c: Point2) -> bool:
    return area_of_parallelogram(a, b, c) <= EPS_COLINEAR


def is_same_side(a: Point2, b: Point2, c: Point2, d: Point2) -> bool:
    """True if c and d lie strictly on the same side of the line through a and b."""
    return (is_lht(a, b, c) and is_lht(a, b, d)) or (is_rht(a, b, c) and is_rht(a, b, d))


def in_circle(a: Point2, b: Point2, c: Point2, d: Point2) -> bool:
    """True if d lies strictly inside the circle through a, b, c.

    a, b, c must be in counter-clockwise order; for clockwise input the sign
    of the determinant (and hence the answer) flips.
    """
    adx = a.x - d.x; ady = a.y - d.y
    bdx = b.x - d.x; bdy = b.y - d.y
    cdx = c.x - d.x; cdy = c.y - d.y

    abdet = adx * bdy - bdx * ady
    bcdet = bdx * cdy - cdx * bdy
    cadet = cdx * ady - adx * cdy
    alift = adx * adx + ady * ady
    blift = bdx * bdx + bdy * bdy
    clift = cdx * cdx + cdy * cdy

    return (alift * bcdet + blift * cadet + clift * abdet) > 0.0


def points_to_array(points: Iterable[Point2]) -> np.ndarray:
    """Stack points into a C-contiguous (N,2) float64 array."""
    coords = [(p.x, p.y) for p in points]
    if not coords:
        return np.empty((0, 2), dtype=np.float64)
    return np.ascontiguousarray(np.asarray(coords, dtype=np.float64))


def polygon_signed_area(points) -> float:
    """Shoelace signed area of a closed polygon given as (N,2) array-like.

    Positive for counter-clockwise vertex order.
    """
    pts = np.asarray(points, dtype=np.float64)
    if pts.ndim != 2 or pts.shape[0] < 3:
        return 0.0
    x = pts[:, 0]; y = pts[:, 1]
    return 0.5 * float(np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y))
