"""Per-variant path transforms.

mirror and clone return new paths; move_relative, rotate and scale edit
the path in place and return it for chaining. Objects that are not one
of the three variants are skipped (origin still transformed where it
exists), or rejected with UnsupportedPathVariant when strict=True.
"""
import logging
from . import angle, point
from .types import Line, Circle, Arc, MalformedPath, UnsupportedPathVariant

log = logging.getLogger(__name__)

_REQUIRED = {
    Line: ("origin", "end"),
    Circle: ("origin", "radius"),
    Arc: ("origin", "radius", "start_angle", "end_angle"),
}

# ============================================================
# Dispatch Helpers
# ============================================================
def is_known_variant(p, op: str, strict: bool = False) -> bool:
    """True if p is a Line, Circle or Arc with every field its variant needs.

    Unknown variants return False, or raise UnsupportedPathVariant if strict.
    Known variants with a missing field raise MalformedPath.
    """
    fields = next((f for cls, f in _REQUIRED.items() if isinstance(p, cls)), None)
    if fields is None:
        tag = getattr(p, "type", None)
        if strict:
            raise UnsupportedPathVariant(f"{op}: unsupported path variant {tag!r}")
        log.debug("%s: skipping unknown path variant %r", op, tag)
        return False
    for name in fields:
        if getattr(p, name) is None:
            raise MalformedPath(f"{op}: {p.type} {p.id!r} has no {name}")
    return True

def _move_origin(p, fn):
    if getattr(p, "origin", None) is not None:
        p.origin = fn(p.origin)

# ============================================================
# Copies
# ============================================================
def clone(p, new_id: str | None = None):
    """Independent copy of a path, optionally under a new id."""
    pid = new_id or p.id
    if isinstance(p, Line):
        return Line(point.clone(p.origin), point.clone(p.end), pid)
    if isinstance(p, Circle):
        return Circle(point.clone(p.origin), p.radius, pid)
    if isinstance(p, Arc):
        return Arc(point.clone(p.origin), p.radius, p.start_angle, p.end_angle, pid)
    raise UnsupportedPathVariant(f"clone: unsupported path variant {getattr(p, 'type', None)!r}")

def mirror(p, mirror_x: bool, mirror_y: bool, new_id: str | None = None,
           *, strict: bool = False):
    """New path reflected across the y axis (mirror_x) and/or x axis (mirror_y).

    Arcs reflected on exactly one axis have start and end swapped so the
    sweep stays counterclockwise. Returns None for an unknown variant.
    """
    if not is_known_variant(p, "mirror", strict):
        return None
    origin = point.mirror(p.origin, mirror_x, mirror_y)
    pid = new_id or p.id
    if isinstance(p, Line):
        return Line(origin, point.mirror(p.end, mirror_x, mirror_y), pid)
    if isinstance(p, Circle):
        return Circle(origin, p.radius, pid)
    start = angle.mirror(p.start_angle, mirror_x, mirror_y)
    end = angle.mirror(angle.arc_end_angle_past_zero(p), mirror_x, mirror_y)
    if mirror_x != mirror_y:
        start, end = end, start
    return Arc(origin, p.radius, start, end, pid)

# ============================================================
# In-place Transforms
# ============================================================
def move_relative(p, delta, *, strict: bool = False):
    """Shift a path by delta. Mutates p."""
    known = is_known_variant(p, "move_relative", strict)
    _move_origin(p, lambda o: point.add(o, delta))
    if known and isinstance(p, Line):
        p.end = point.add(p.end, delta)
    return p

def rotate(p, degrees: float, center, *, strict: bool = False):
    """Rotate a path counterclockwise about center. Mutates p."""
    if degrees == 0:
        return p
    known = is_known_variant(p, "rotate", strict)
    _move_origin(p, lambda o: point.rotate(o, degrees, center))
    if not known:
        return p
    if isinstance(p, Line):
        p.end = point.rotate(p.end, degrees, center)
    elif isinstance(p, Arc):
        # angles live in the arc's own frame, which only translates
        p.start_angle += degrees
        p.end_angle += degrees
    return p

def scale(p, factor: float, *, strict: bool = False):
    """Scale a path about (0, 0) of its parent frame. Mutates p."""
    if factor == 1:
        return p
    known = is_known_variant(p, "scale", strict)
    _move_origin(p, lambda o: point.scale(o, factor))
    if not known:
        return p
    if isinstance(p, Line):
        p.end = point.scale(p.end, factor)
    else:
        p.radius *= factor
    return p
