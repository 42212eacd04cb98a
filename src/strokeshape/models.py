"""
Pydantic data models for recognized shapes.

Every stroke classification ends in exactly one of the four shape variants
below. The variants are frozen and carry the caller's style tag untouched.
"""

from enum import Enum
from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class ShapeKind(str, Enum):
    """Shape families the recognizer can emit."""
    RECTANGLE = "rectangle"
    CIRCLE = "circle"
    TRIANGLE = "triangle"
    FREEFORM = "freeform"


Point = Annotated[List[float], Field(min_length=2, max_length=2)]


class Rectangle(BaseModel):
    """Axis-aligned rectangle anchored at its top-left corner."""
    kind: Literal["rectangle"] = "rectangle"
    x: float
    y: float
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    style: Any = None

    model_config = ConfigDict(extra="forbid", frozen=True)


class Circle(BaseModel):
    """Circle given by center and radius."""
    kind: Literal["circle"] = "circle"
    center_x: float
    center_y: float
    radius: float = Field(..., gt=0)
    style: Any = None

    model_config = ConfigDict(extra="forbid", frozen=True)


class Triangle(BaseModel):
    """Triangle whose vertices are picked from the simplified stroke."""
    kind: Literal["triangle"] = "triangle"
    vertices: List[Point] = Field(..., min_length=3, max_length=3)
    style: Any = None

    model_config = ConfigDict(extra="forbid", frozen=True)


class Freeform(BaseModel):
    """Fallback polygon; always a closed path."""
    kind: Literal["freeform"] = "freeform"
    points: List[Point] = Field(..., min_length=1)
    style: Any = None

    model_config = ConfigDict(extra="forbid", frozen=True)


Shape = Annotated[
    Union[Rectangle, Circle, Triangle, Freeform],
    Field(discriminator="kind"),
]

_shape_adapter = TypeAdapter(Shape)


class Candidate(BaseModel):
    """A scored proposal from one shape family."""
    kind: ShapeKind
    shape: Optional[Shape] = None
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    reason: str = ""

    model_config = ConfigDict(extra="forbid")

    @property
    def accepted(self):
        """True when the family produced a shape at all."""
        return self.shape is not None and self.confidence > 0.0


class StrokeInput(BaseModel):
    """A stroke as read from a JSON file."""
    points: List[Point] = Field(..., min_length=1)
    style: Any = None

    model_config = ConfigDict(extra="forbid")


def parse_shape(data):
    """
    Validate a dict (e.g. loaded JSON) into the matching shape variant.
    """
    return _shape_adapter.validate_python(data)


def shape_to_dict(shape):
    """Dump a shape to plain JSON-compatible data."""
    return _shape_adapter.dump_python(shape, mode="json")
