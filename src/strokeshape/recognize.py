"""
Stroke recognition pipeline.

raw points -> closed path -> simplified polygon -> features -> per-family
candidates -> arbitration -> final shape.
"""

from strokeshape.classify.candidates import (
    classify_circle, classify_rectangle, classify_triangle, measure_stroke,
)
from strokeshape.config import RecognizerConfig
from strokeshape.models import Freeform
from strokeshape.tracer import get_tracer, trace


@trace(label="recognize")
def recognize(points, style=None, config=None):
    """
    Classify one stroke as a rectangle, circle, triangle or freeform polygon.

    Args:
        points: sequence of [x, y] points in drawing order, at least one
        style: opaque tag copied into the result (e.g. a color)
        config: RecognizerConfig (optional)

    Returns:
        a Rectangle, Circle, Triangle or Freeform model
    """
    tracer = get_tracer()

    if config is None:
        config = RecognizerConfig()

    if len(points) == 0:
        raise ValueError("Cannot recognize an empty stroke")

    measurements = measure_stroke(points, config)

    if len(measurements.simplified) < 3:
        tracer.event("Too few vertices, keeping freeform", points=measurements.raw_closed)
        return Freeform(points=measurements.raw_closed, style=style)

    candidates = score_candidates(measurements, style, config)
    best = select_candidate(candidates, config.arbitration.confidence_floor)

    if best is None:
        tracer.event("No candidate above floor, keeping freeform", points=measurements.simplified)
        return Freeform(points=measurements.simplified, style=style)

    tracer.event(f"Recognized {best.kind.value}", confidence=best.confidence)
    return best.shape


def classify_candidates(points, style=None, config=None):
    """
    Scored candidates for a stroke, one per shape family.

    Returns an empty list when the stroke is too short to classify.
    """
    if config is None:
        config = RecognizerConfig()

    if len(points) == 0:
        raise ValueError("Cannot classify an empty stroke")

    measurements = measure_stroke(points, config)
    if len(measurements.simplified) < 3:
        return []
    return score_candidates(measurements, style, config)


def score_candidates(measurements, style, config):
    """Run every family classifier over the same measurements."""
    tracer = get_tracer()

    candidates = [
        classify_rectangle(measurements, style, config.rectangle),
        classify_circle(measurements, style, config.circle),
        classify_triangle(
            measurements, style, config.triangle,
            angle_threshold=config.corners.angle_threshold,
        ),
    ]

    for candidate in candidates:
        if candidate.accepted:
            tracer.event(f"{candidate.kind.value}: confidence {candidate.confidence:.3f}", level="DEBUG")
        else:
            tracer.event(f"{candidate.kind.value}: rejected ({candidate.reason})", level="DEBUG")

    return candidates


def select_candidate(candidates, confidence_floor):
    """
    Highest-confidence candidate strictly above the floor, or None.

    Ties keep the earlier candidate.
    """
    survivors = [c for c in candidates if c.accepted and c.confidence > confidence_floor]
    if not survivors:
        return None
    return max(survivors, key=lambda c: c.confidence)
