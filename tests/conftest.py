"""Pytest fixtures for strokeshape tests."""

import math

import numpy as np
import pytest


@pytest.fixture(autouse=True)
def reset_tracer():
    """Leave the global tracer disabled after every test."""
    yield
    from strokeshape.tracer import configure_tracer
    configure_tracer(enabled=False)


@pytest.fixture
def default_config():
    """Create default recognizer configuration."""
    from strokeshape.config import RecognizerConfig
    return RecognizerConfig()


@pytest.fixture
def square_stroke():
    """Exact 100x100 square, closed by repeating the first corner."""
    return [[0, 0], [100, 0], [100, 100], [0, 100], [0, 0]]


@pytest.fixture
def triangle_stroke():
    """Three well separated corners joined back to the start."""
    return [[0, 0], [100, 0], [50, 90], [0, 0]]


@pytest.fixture
def circle_stroke():
    """36 evenly spaced points on a radius-50 circle around (200, 150)."""
    return [
        [200 + 50 * math.cos(math.radians(a)), 150 + 50 * math.sin(math.radians(a))]
        for a in range(0, 360, 10)
    ]


@pytest.fixture
def zigzag_stroke():
    """Dense back-and-forth scribble that ends far from where it started."""
    return [[i * 10, 0 if i % 2 == 0 else 20] for i in range(41)]


@pytest.fixture
def hand_rectangle_stroke():
    """A 200x120 rectangle traced with small jitter, ending near its start."""
    rng = np.random.default_rng(7)
    corners = [[10, 10], [210, 10], [210, 130], [10, 130], [10, 10]]

    points = []
    for (x0, y0), (x1, y1) in zip(corners[:-1], corners[1:]):
        for t in np.linspace(0, 1, 40, endpoint=False):
            x = x0 + t * (x1 - x0) + rng.uniform(-0.8, 0.8)
            y = y0 + t * (y1 - y0) + rng.uniform(-0.8, 0.8)
            points.append([float(x), float(y)])

    points.append([12.0, 11.0])
    return points
