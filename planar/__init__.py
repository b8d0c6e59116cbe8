"""2D geometry kernel: paths, nested models, transforms, measurement, and units."""

from .types import (
    Point, Path, Line, Circle, Arc, Model, Measure, PathType, UnitType,
    GeometryError, UnsupportedPathVariant, MalformedPath, MalformedModel, UnknownUnit,
    is_point, is_path, is_model,
)
from . import angle, point, path, model, measure, units
from .units import UnitConversionTable, conversion_scale
from .traversal import Exporter, round_value, try_get_model_units
