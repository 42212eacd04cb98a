"""
JSON file handling for strokes and recognition results.
"""

import json
import os

from pydantic import BaseModel, ValidationError

from strokeshape.models import StrokeInput
from strokeshape.tracer import get_tracer


def ensure_dir(path):
    """Create directory if it does not exist."""
    if path:
        os.makedirs(path, exist_ok=True)


def load_stroke(path):
    """
    Load a stroke from a JSON file.

    Accepts {"points": [[x, y], ...], "style": ...} or a bare point list.

    Returns:
        StrokeInput
    """
    if not os.path.exists(path):
        raise ValueError(f"Stroke file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e

    if isinstance(data, list):
        data = {"points": data}

    try:
        stroke = StrokeInput.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid stroke in {path}: {e.error_count()} error(s)") from e

    get_tracer().event(f"Loaded stroke: {path}", points=stroke.points)
    return stroke


def save_json(data, path, indent=2):
    """
    Save a dictionary or Pydantic model to JSON.
    """
    if isinstance(data, BaseModel):
        data = data.model_dump(mode="json")

    ensure_dir(os.path.dirname(path))
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent)

    get_tracer().event(f"Saved JSON: {path}")
