"""
Geometric primitives over point sequences.

Points are [x, y] pairs. Nothing here mutates its input; every function
returns new values.
"""

import math
from typing import NamedTuple

import numpy as np


class BoundingBox(NamedTuple):
    """Axis-aligned bounds of a point set."""
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self):
        return self.max_x - self.min_x

    @property
    def height(self):
        return self.max_y - self.min_y

    @property
    def diagonal(self):
        return math.hypot(self.width, self.height)

    @property
    def center(self):
        return (self.min_x + self.width / 2, self.min_y + self.height / 2)

    @property
    def area(self):
        return self.width * self.height


def compute_bbox(points):
    """
    Compute bounding box from a list of [x, y] points.

    An empty list gives a zero box at the origin.
    """
    if len(points) == 0:
        return BoundingBox(0.0, 0.0, 0.0, 0.0)

    arr = np.asarray(points, dtype=float)
    min_x, min_y = arr.min(axis=0)
    max_x, max_y = arr.max(axis=0)
    return BoundingBox(float(min_x), float(min_y), float(max_x), float(max_y))


def path_length(points):
    """Total length of the polyline through points."""
    if len(points) < 2:
        return 0.0
    diffs = np.diff(np.asarray(points, dtype=float), axis=0)
    return float(np.sum(np.linalg.norm(diffs, axis=1)))


def polygon_area(points):
    """
    Unsigned polygon area by the shoelace formula.

    The ring is closed implicitly, so an explicit repeat of the first point
    contributes nothing.
    """
    if len(points) < 3:
        return 0.0
    arr = np.asarray(points, dtype=float)
    x = arr[:, 0]
    y = arr[:, 1]
    x_prev = np.roll(x, 1)
    y_prev = np.roll(y, 1)
    return float(abs(np.sum(x_prev * y - x * y_prev)) / 2)


def endpoint_gap(points):
    """Distance between the first and last point."""
    if len(points) < 2:
        return 0.0
    (x0, y0), (xn, yn) = points[0], points[-1]
    return math.hypot(x0 - xn, y0 - yn)


def is_closed(points, min_threshold=10.0, perimeter_ratio=0.05):
    """
    Check whether a stroke ends near where it started.

    The allowed gap grows with the stroke's traversed length so that small
    and large drawings are judged alike. Needs at least 3 points.
    """
    if len(points) < 3:
        return False
    threshold = max(min_threshold, path_length(points) * perimeter_ratio)
    return endpoint_gap(points) < threshold


def close_path(points, min_close_px=8.0):
    """
    Return a closed copy of points.

    Appends a copy of the first point unless the endpoints are already within
    min_close_px of each other.
    """
    closed = [[float(p[0]), float(p[1])] for p in points]
    if len(closed) < 2 or endpoint_gap(closed) <= min_close_px:
        return closed
    closed.append(list(closed[0]))
    return closed


def circularity(area, perimeter):
    """Isoperimetric quotient 4*pi*A / P^2; 1.0 for a perfect circle."""
    p = perimeter or 1.0
    return 4 * math.pi * area / (p * p)


def rectangularity(area, bbox):
    """Share of the bounding box covered by the polygon."""
    return area / max(1.0, bbox.area)
