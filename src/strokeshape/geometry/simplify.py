"""
Stroke simplification using the Ramer-Douglas-Peucker algorithm.

Reduces a noisy stroke to a polygon whose vertices stay within epsilon of the
original path. Epsilon scales with the stroke's size.
"""

import numpy as np

from strokeshape.geometry.primitives import compute_bbox
from strokeshape.tracer import get_tracer


def simplification_epsilon(bbox, min_epsilon=3.0, diagonal_ratio=0.01):
    """Tolerance for a stroke with the given bounding box."""
    return max(min_epsilon, bbox.diagonal * diagonal_ratio)


def simplify_stroke(points, config):
    """
    Simplify a (closed) stroke with a size-relative tolerance.

    Args:
        points: list of [x, y] points
        config: SimplifyConfig

    Returns:
        (simplified points, epsilon used)
    """
    tracer = get_tracer()

    epsilon = simplification_epsilon(
        compute_bbox(points),
        min_epsilon=config.min_epsilon,
        diagonal_ratio=config.diagonal_ratio,
    )
    simplified = rdp_simplify(points, epsilon)

    reduction = 1 - (len(simplified) / len(points)) if points else 0
    tracer.event(
        f"Simplified: {len(points)} -> {len(simplified)} points ({reduction:.1%} reduction)",
        epsilon=epsilon,
    )

    return simplified, epsilon


def rdp_simplify(points, epsilon):
    """
    Ramer-Douglas-Peucker algorithm for polyline simplification.

    Recursively removes points that are within epsilon distance
    of the line between endpoints.

    Args:
        points: list of [x, y] points
        epsilon: maximum perpendicular distance threshold

    Returns:
        simplified list of points, always keeping the first and last
    """
    if len(points) <= 2:
        return list(points)

    points_arr = np.asarray(points, dtype=float)

    distances = _perpendicular_distances(points_arr, points_arr[0], points_arr[-1])
    max_idx = int(np.argmax(distances))
    max_dist = distances[max_idx]

    if max_dist > epsilon:
        left = rdp_simplify(points[:max_idx + 1], epsilon)
        right = rdp_simplify(points[max_idx:], epsilon)

        # max_idx point ends left and starts right
        return left[:-1] + right
    return [points[0], points[-1]]


def _perpendicular_distances(points, start, end):
    """
    Distances from each point to the infinite line through start and end.

    When start and end coincide the line degenerates to that point.
    """
    line_vec = end - start
    line_len = np.linalg.norm(line_vec)

    if line_len == 0:
        return np.linalg.norm(points - start, axis=1)

    point_vecs = points - start
    cross = line_vec[0] * point_vecs[:, 1] - line_vec[1] * point_vecs[:, 0]
    return np.abs(cross) / line_len


def remove_duplicate_points(points, tolerance=1e-9):
    """
    Remove consecutive duplicate or near-duplicate points.
    """
    if len(points) <= 1:
        return list(points)

    result = [points[0]]

    for point in points[1:]:
        last = result[-1]
        dist = np.hypot(point[0] - last[0], point[1] - last[1])
        if dist > tolerance:
            result.append(point)

    return result
