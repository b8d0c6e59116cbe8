"""Recursive model-tree operations.

Child coordinates are relative to the parent model's origin, so moving a
model never touches its children. move, rotate, scale and flatten edit
the tree in place and return it; mirror builds a new tree.
"""
from typing import NamedTuple
from . import path, point
from .types import Model, Point, MalformedModel

class Found(NamedTuple):
    index: int
    item: object

def children(model: Model, attr: str) -> list:
    """model.paths or model.models as a list; empty when absent."""
    items = getattr(model, attr, None)
    if items is None:
        return []
    if not isinstance(items, list):
        raise MalformedModel(
            f"model {getattr(model, 'id', None)!r}: {attr} must be a list, "
            f"got {type(items).__name__}")
    return items

def find_by_id(items: list | None, item_id: str) -> Found | None:
    """First (index, item) in items whose id equals item_id."""
    for i, item in enumerate(items or []):
        if item.id == item_id:
            return Found(i, item)
    return None

# ============================================================
# In-place Composition
# ============================================================
def move(model: Model, origin: Point) -> Model:
    """Place a model at an absolute position within its parent."""
    model.origin = point.clone(origin)
    return model

def rotate(model: Model, degrees: float, center: Point, *, strict: bool = False) -> Model:
    """Rotate every path in the tree about center (given in the model's parent frame).

    Model origins are left as they are; the rotation is carried entirely
    by the paths.
    """
    offset = point.subtract(center, point.clone(model.origin))
    for p in children(model, "paths"):
        path.rotate(p, degrees, offset, strict=strict)
    for child in children(model, "models"):
        rotate(child, degrees, offset, strict=strict)
    return model

def scale(model: Model, factor: float, scale_origin: bool = False,
          *, strict: bool = False) -> Model:
    """Scale every path in the tree. Nested model origins are always scaled;
    this model's own origin only when scale_origin is set (normally False at the root).
    """
    if scale_origin and model.origin is not None:
        model.origin = point.scale(model.origin, factor)
    for p in children(model, "paths"):
        path.scale(p, factor, strict=strict)
    for child in children(model, "models"):
        scale(child, factor, True, strict=strict)
    return model

def flatten(model: Model, origin: Point | None = None, *, strict: bool = False) -> Model:
    """Fold every origin in the tree into path coordinates.

    Afterwards all paths hold absolute coordinates and every model origin
    is (0, 0). The nesting itself is kept.
    """
    new_origin = point.add(point.clone(model.origin), origin)
    for p in children(model, "paths"):
        path.move_relative(p, new_origin, strict=strict)
    for child in children(model, "models"):
        flatten(child, new_origin, strict=strict)
    model.origin = point.zero()
    return model

# ============================================================
# Copies
# ============================================================
def mirror(model: Model, mirror_x: bool, mirror_y: bool, *, strict: bool = False) -> Model:
    """New model reflected on either or both axes.

    Only fields present on the source are set on the copy. Paths keep
    their ids; the model id gets a "_mirror" suffix.
    """
    new_model = Model()
    if model.id:
        new_model.id = model.id + "_mirror"
    if model.origin is not None:
        new_model.origin = point.mirror(model.origin, mirror_x, mirror_y)
    if model.type:
        new_model.type = model.type
    if model.units:
        new_model.units = model.units
    if model.paths is not None:
        mirrored = (path.mirror(p, mirror_x, mirror_y, strict=strict)
                    for p in children(model, "paths"))
        new_model.paths = [p for p in mirrored if p is not None]
    if model.models is not None:
        new_model.models = [mirror(m, mirror_x, mirror_y, strict=strict)
                            for m in children(model, "models")]
    return new_model
