"""
Per-family shape classifiers.

Each classifier looks at the same stroke measurements and proposes one
candidate shape with a confidence in [0, 1]. A rejected candidate carries no
shape, zero confidence and a short reason for the trace log.
"""

import itertools
import math
from dataclasses import dataclass
from typing import List

from strokeshape.features.circle_fit import angular_coverage, fit_circle
from strokeshape.features.corners import count_corners, ring_vertices
from strokeshape.geometry.primitives import (
    BoundingBox, circularity, close_path, compute_bbox, is_closed,
    path_length, polygon_area, rectangularity,
)
from strokeshape.geometry.simplify import simplify_stroke
from strokeshape.models import Candidate, Circle, Rectangle, ShapeKind, Triangle


@dataclass(frozen=True)
class StrokeMeasurements:
    """Everything the classifiers need to know about one stroke."""
    raw_closed: List[List[float]]
    bbox: BoundingBox
    epsilon: float
    simplified: List[List[float]]
    perimeter: float
    area: float
    closed: bool

    @property
    def circularity(self):
        return circularity(self.area, self.perimeter)

    @property
    def rectangularity(self):
        return rectangularity(self.area, self.bbox)


def measure_stroke(points, config):
    """
    Close, simplify and measure a raw stroke.

    Closure is judged on the stroke as drawn; bounds come from the closed
    copy; perimeter and area from the simplified polygon.
    """
    raw_closed = close_path(points, config.closure.min_close_px)
    simplified, epsilon = simplify_stroke(raw_closed, config.simplify)

    return StrokeMeasurements(
        raw_closed=raw_closed,
        bbox=compute_bbox(raw_closed),
        epsilon=epsilon,
        simplified=simplified,
        perimeter=path_length(simplified),
        area=polygon_area(simplified),
        closed=is_closed(
            points,
            min_threshold=config.closure.min_threshold,
            perimeter_ratio=config.closure.perimeter_ratio,
        ),
    )


def _rejected(kind, reason):
    return Candidate(kind=kind, reason=reason)


def _clamp(value):
    return min(1.0, max(0.0, value))


def classify_rectangle(measurements, style, config):
    """
    Propose an axis-aligned rectangle.

    Scores high rectangularity and low circularity. Near-square bounds are
    snapped to a square centered on the original box.
    """
    kind = ShapeKind.RECTANGLE
    if not measurements.closed:
        return _rejected(kind, "open stroke")

    bbox = measurements.bbox
    width, height = bbox.width, bbox.height
    if width <= 0 or height <= 0:
        return _rejected(kind, "flat bounding box")

    rect = measurements.rectangularity
    circ = measurements.circularity
    if rect < config.min_rectangularity:
        return _rejected(kind, f"rectangularity {rect:.2f} < {config.min_rectangularity}")
    if circ > config.max_circularity:
        return _rejected(kind, f"circularity {circ:.2f} > {config.max_circularity}")

    confidence = rect * config.rectangularity_weight + (1 - circ) * config.circularity_weight

    x, y = bbox.min_x, bbox.min_y
    if abs(width / height - 1) < config.square_tolerance:
        center_x, center_y = bbox.center
        side = min(width, height)
        x, y = center_x - side / 2, center_y - side / 2
        width = height = side

    shape = Rectangle(x=x, y=y, width=width, height=height, style=style)
    return Candidate(kind=kind, shape=shape, confidence=_clamp(confidence))


def classify_circle(measurements, style, config):
    """
    Propose a circle.

    A good least-squares fit earns a bonus; otherwise the circle inscribed in
    the bounding box is used. Either way the stroke must sweep most of a full
    turn around the chosen center.
    """
    kind = ShapeKind.CIRCLE
    if not measurements.closed:
        return _rejected(kind, "open stroke")

    bbox = measurements.bbox
    if min(bbox.width, bbox.height) < config.min_size:
        return _rejected(kind, f"smaller than {config.min_size}")

    circ = measurements.circularity
    if circ < config.min_circularity:
        return _rejected(kind, f"circularity {circ:.2f} < {config.min_circularity}")

    confidence = circ * config.circularity_weight

    fit = fit_circle(
        measurements.simplified,
        min_points=config.min_fit_points,
        singular_tolerance=config.singular_tolerance,
    )
    if fit and fit.radius > config.min_fit_radius and fit.std_rel < config.max_std_rel:
        center_x, center_y, radius = fit.center_x, fit.center_y, fit.radius
        confidence += config.fit_bonus
    else:
        center_x, center_y = bbox.center
        radius = min(bbox.width, bbox.height) / 2

    coverage = angular_coverage(measurements.raw_closed, center_x, center_y)
    if coverage < config.min_coverage_ratio * 2 * math.pi:
        return _rejected(kind, f"coverage {math.degrees(coverage):.0f}deg too small")

    shape = Circle(center_x=center_x, center_y=center_y, radius=radius, style=style)
    return Candidate(kind=kind, shape=shape, confidence=_clamp(confidence))


def classify_triangle(measurements, style, config, angle_threshold=35.0):
    """
    Propose a triangle.

    Confidence peaks at exactly three corners and grows as circularity
    drops. Vertices are the most spread-out triple of simplified points.
    """
    kind = ShapeKind.TRIANGLE
    if not measurements.closed:
        return _rejected(kind, "open stroke")

    vertices = ring_vertices(measurements.simplified)
    if len(vertices) > config.max_search_vertices:
        return _rejected(kind, f"{len(vertices)} vertices > {config.max_search_vertices}")

    corners = count_corners(vertices, angle_threshold)
    if not config.min_corners <= corners <= config.max_corners:
        return _rejected(kind, f"{corners} corners")

    circ = measurements.circularity
    if circ >= config.max_circularity:
        return _rejected(kind, f"circularity {circ:.2f} >= {config.max_circularity}")

    proximity = max(0.0, 1 - config.corner_penalty * abs(corners - 3))
    confidence = proximity * config.corner_weight + (1 - circ) * config.circularity_weight
    if confidence < config.min_confidence:
        return _rejected(kind, f"confidence {confidence:.2f} < {config.min_confidence}")

    best = widest_triangle(vertices)
    if best is None:
        return _rejected(kind, "fewer than three vertices")

    shape = Triangle(vertices=best, style=style)
    return Candidate(kind=kind, shape=shape, confidence=_clamp(confidence))


def widest_triangle(points):
    """
    Triple of points with the largest perimeter, or None for < 3 points.

    Brute force over all combinations, so callers cap the input size.
    """
    best = None
    best_perimeter = -1.0
    for a, b, c in itertools.combinations(points, 3):
        perimeter = (
            math.hypot(a[0] - b[0], a[1] - b[1])
            + math.hypot(b[0] - c[0], b[1] - c[1])
            + math.hypot(c[0] - a[0], c[1] - a[1])
        )
        if perimeter > best_perimeter:
            best_perimeter = perimeter
            best = [a, b, c]

    if best is None:
        return None
    return [[float(p[0]), float(p[1])] for p in best]
