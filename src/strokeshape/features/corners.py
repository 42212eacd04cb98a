"""
Corner detection on closed polygons.
"""

import math

import numpy as np

from strokeshape.geometry.simplify import remove_duplicate_points


def ring_vertices(polygon):
    """
    Distinct vertices of a closed polygon.

    Drops consecutive repeats and a trailing copy of the first vertex.
    """
    ring = remove_duplicate_points(polygon)
    if len(ring) > 1 and math.hypot(ring[0][0] - ring[-1][0], ring[0][1] - ring[-1][1]) <= 1e-9:
        ring = ring[:-1]
    return ring


def vertex_angles(polygon):
    """
    Angle in degrees at every vertex of the ring, between its two edges.

    180 means the vertex lies on a straight run.
    """
    ring = np.asarray(ring_vertices(polygon), dtype=float)
    n = len(ring)
    if n < 3:
        return []

    angles = []
    for i in range(n):
        v1 = ring[(i - 1) % n] - ring[i]
        v2 = ring[(i + 1) % n] - ring[i]
        mag1 = np.linalg.norm(v1) or 1.0
        mag2 = np.linalg.norm(v2) or 1.0
        cos_angle = np.clip(np.dot(v1, v2) / (mag1 * mag2), -1.0, 1.0)
        angles.append(math.degrees(math.acos(cos_angle)))

    return angles


def count_corners(polygon, angle_threshold=35.0):
    """
    Count vertices whose angle deviates from straight by more than the threshold.

    Angles at or below the threshold are spikes, not corners.
    """
    return sum(
        1 for deg in vertex_angles(polygon)
        if angle_threshold < deg < 180 - angle_threshold
    )
