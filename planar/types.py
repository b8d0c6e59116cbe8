"""Shared type definitions: points, path variants, models, and errors."""
from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar, NamedTuple

import numpy as np

Point = tuple[float, float]

# ============================================================
# Error Types
# ============================================================
class GeometryError(ValueError):
    """Raised for impossible geometry operations."""

class UnsupportedPathVariant(GeometryError):
    """Path carries no recognized variant tag (raised only in strict mode)."""

class MalformedPath(GeometryError):
    """Path is missing a field its variant requires."""

class MalformedModel(GeometryError):
    """Model children are not laid out as lists."""

class UnknownUnit(GeometryError):
    """Unit tag is not one of the supported unit types."""

# ============================================================
# Tags
# ============================================================
class PathType(StrEnum):
    """Variant tags. These literal strings are part of the exported format."""
    LINE = "line"
    CIRCLE = "circle"
    ARC = "arc"

class UnitType(StrEnum):
    MILLIMETER = "mm"
    CENTIMETER = "cm"
    METER = "m"
    INCH = "inch"
    FOOT = "foot"

# ============================================================
# Paths
# ============================================================
@dataclass
class Line:
    origin: Point
    end: Point
    id: str | None = None
    type: ClassVar[str] = PathType.LINE

@dataclass
class Circle:
    origin: Point
    radius: float
    id: str | None = None
    type: ClassVar[str] = PathType.CIRCLE

@dataclass
class Arc:
    """Circular arc swept counterclockwise from start_angle to end_angle (degrees).

    Angles are unbounded; end_angle < start_angle wraps through 360.
    start_angle == end_angle is a zero-length arc, not a full circle.
    """
    origin: Point
    radius: float
    start_angle: float
    end_angle: float
    id: str | None = None
    type: ClassVar[str] = PathType.ARC

Path = Line | Circle | Arc

# ============================================================
# Models
# ============================================================
@dataclass
class Model:
    """Group of paths and sub-models positioned relative to its parent.

    Child coordinates are relative to this model's origin. An absent
    origin reads as (0, 0). The tree must be acyclic.
    """
    id: str | None = None
    origin: Point | None = None
    paths: list | None = None
    models: list["Model"] | None = None
    units: UnitType | None = None
    type: str | None = None

class Measure(NamedTuple):
    """Axis-aligned bounding box; both corners None when nothing was measured."""
    low: Point | None
    high: Point | None

# ============================================================
# Structural Checks
# ============================================================
def is_point(item) -> bool:
    """True for a tuple, list or 1-D numpy array holding at least two coordinates."""
    if isinstance(item, np.ndarray):
        return item.ndim == 1 and item.shape[0] > 1
    return isinstance(item, (tuple, list)) and len(item) > 1

def is_path(item) -> bool:
    return (getattr(item, "type", None) is not None
            and getattr(item, "origin", None) is not None)

def is_model(item) -> bool:
    return (getattr(item, "paths", None) is not None
            or getattr(item, "models", None) is not None)
