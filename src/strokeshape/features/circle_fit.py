"""
Circle fitting and angular coverage.

The fit is the algebraic (Kasa) least-squares circle on centroid-centered
coordinates. Coverage tells a closed loop apart from an arc or scribble that
merely fits a circle numerically.
"""

import math
from typing import NamedTuple

import numpy as np


class CircleFit(NamedTuple):
    """Result of a least-squares circle fit."""
    center_x: float
    center_y: float
    radius: float
    std_rel: float  # std of per-point radii / radius; lower is rounder


def fit_circle(points, min_points=6, singular_tolerance=1e-6):
    """
    Fit a circle to points (Kasa method).

    Returns None when there are fewer than min_points points or the normal
    equations are near singular (e.g. collinear input).
    """
    if len(points) < min_points:
        return None

    arr = np.asarray(points, dtype=float)
    mean_x, mean_y = arr.mean(axis=0)
    u = arr[:, 0] - mean_x
    v = arr[:, 1] - mean_y

    suu = np.sum(u * u)
    suv = np.sum(u * v)
    svv = np.sum(v * v)
    suuu = np.sum(u * u * u)
    svvv = np.sum(v * v * v)
    suvv = np.sum(u * v * v)
    svuu = np.sum(v * u * u)

    den = 2 * (suu * svv - suv * suv)
    if abs(den) < singular_tolerance:
        return None

    uc = (svv * (suuu + suvv) - suv * (svvv + svuu)) / den
    vc = (suu * (svvv + svuu) - suv * (suuu + suvv)) / den
    cx = mean_x + uc
    cy = mean_y + vc

    radii = np.hypot(arr[:, 0] - cx, arr[:, 1] - cy)
    radius = float(radii.mean())
    std_rel = float(radii.std()) / (radius or 1.0)

    return CircleFit(float(cx), float(cy), radius, std_rel)


def angular_coverage(points, center_x, center_y):
    """
    Angle in radians swept by points around a center, within [0, 2*pi].

    Computed as a full turn minus the largest gap between sorted bearings,
    the wrap-around gap included.
    """
    if len(points) < 3:
        return 0.0

    arr = np.asarray(points, dtype=float)
    bearings = np.sort(np.arctan2(arr[:, 1] - center_y, arr[:, 0] - center_x))

    gaps = np.diff(bearings)
    wrap_gap = bearings[0] + 2 * math.pi - bearings[-1]
    max_gap = max(float(gaps.max()) if len(gaps) else 0.0, float(wrap_gap))

    return float(np.clip(2 * math.pi - max_gap, 0.0, 2 * math.pi))
