"""
Boundary sampling for recognized shapes.

Turns a shape back into a closed stroke, e.g. to feed a produced shape
through the recognizer again.
"""

import math

import numpy as np

from strokeshape.models import ShapeKind


def shape_outline(shape, spacing=5.0):
    """
    Sample points along a shape's boundary.

    Polygon vertices are always kept exactly. The returned stroke ends with a
    copy of its first point.
    """
    if shape.kind == ShapeKind.RECTANGLE:
        x0, y0 = shape.x, shape.y
        x1, y1 = shape.x + shape.width, shape.y + shape.height
        return densify_polygon([[x0, y0], [x1, y0], [x1, y1], [x0, y1]], spacing)

    if shape.kind == ShapeKind.TRIANGLE:
        return densify_polygon(shape.vertices, spacing)

    if shape.kind == ShapeKind.CIRCLE:
        return sample_circle(shape.center_x, shape.center_y, shape.radius, spacing)

    return [list(p) for p in shape.points]


def densify_polygon(vertices, spacing):
    """
    Resample each polygon edge at roughly uniform spacing.

    The ring is closed back to the first vertex.
    """
    ring = [np.asarray(v, dtype=float) for v in vertices]
    ring.append(ring[0])

    result = []
    for start, end in zip(ring[:-1], ring[1:]):
        length = float(np.linalg.norm(end - start))
        steps = max(1, int(math.ceil(length / spacing)))
        for t in np.linspace(0, 1, steps, endpoint=False):
            result.append((start + t * (end - start)).tolist())

    result.append(ring[0].tolist())
    return result


def sample_circle(center_x, center_y, radius, spacing, min_samples=12):
    """Evenly spaced points on a circle, starting at angle 0."""
    samples = max(min_samples, int(math.ceil(2 * math.pi * radius / spacing)))
    angles = np.linspace(0, 2 * math.pi, samples, endpoint=False)

    result = [
        [center_x + radius * math.cos(a), center_y + radius * math.sin(a)]
        for a in angles
    ]
    result.append(list(result[0]))
    return result
