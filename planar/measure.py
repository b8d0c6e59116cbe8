"""Bounding boxes and lengths of paths and model trees."""
import math
from . import angle, point
from .model import children
from .path import is_known_variant
from .types import Point, Line, Circle, Arc, Model, Measure, MalformedPath

def point_distance(a, b) -> float:
    return math.hypot(b[0]-a[0], b[1]-a[1])

def arc_angle(arc: Arc) -> float:
    """Total counterclockwise sweep of an arc in degrees (>= 0)."""
    return angle.arc_end_angle_past_zero(arc) - arc.start_angle

def _extreme_point(a: Point, b: Point, fn) -> list[float]:
    return [fn(a[0], b[0]), fn(a[1], b[1])]

# ============================================================
# Path Measurement
# ============================================================
def _arc_extents(arc: Arc) -> Measure:
    sweep = arc_angle(arc)
    if sweep >= 360:
        raise MalformedPath(f"arc {arc.id!r} sweeps {sweep} degrees; must be < 360")
    r = arc.radius
    start_pt = point.from_polar(angle.to_radians(arc.start_angle), r)
    end_pt = point.from_polar(angle.to_radians(arc.end_angle), r)
    start = arc.start_angle % 360
    end = start + sweep

    def _extreme(cardinals: tuple[float, float], value: float, fn) -> Point:
        # cardinals[i] is the direction where axis i reaches value
        ext = _extreme_point(start_pt, end_pt, fn)
        for i, c in enumerate(cardinals):
            if start < c < end or start < c + 360 < end:
                ext[i] = value
        return point.add(arc.origin, ext)

    return Measure(_extreme((180, 270), -r, min), _extreme((0, 90), r, max))

def path_extents(p, *, strict: bool = False) -> Measure:
    """Smallest axis-aligned box containing a path, in the path's parent frame."""
    if not is_known_variant(p, "path_extents", strict):
        return Measure(None, None)
    if isinstance(p, Line):
        return Measure(tuple(_extreme_point(p.origin, p.end, min)),
                       tuple(_extreme_point(p.origin, p.end, max)))
    if isinstance(p, Circle):
        r = p.radius
        return Measure(point.add(p.origin, (-r, -r)), point.add(p.origin, (r, r)))
    return _arc_extents(p)

def path_length(p, *, strict: bool = False) -> float:
    if not is_known_variant(p, "path_length", strict):
        return 0.0
    if isinstance(p, Line):
        return point_distance(p.origin, p.end)
    circumference = 2 * math.pi * p.radius
    if isinstance(p, Circle):
        return circumference
    return circumference * arc_angle(p) / 360

# ============================================================
# Model Measurement
# ============================================================
def model_extents(model: Model, *, strict: bool = False) -> Measure:
    """Smallest axis-aligned box containing every path in the tree.

    Coordinates are in the model's parent frame (the model's own origin
    is applied). A tree without measurable paths gives Measure(None, None).
    """
    low: list[float | None] = [None, None]
    high: list[float | None] = [None, None]

    def _fold(acc: list, p: Point, fn):
        for i in range(2):
            acc[i] = p[i] if acc[i] is None else fn(acc[i], p[i])

    def _measure(m: Model, offset: Point | None):
        new_origin = point.add(point.clone(m.origin), offset)
        for p in children(m, "paths"):
            ext = path_extents(p, strict=strict)
            if ext.low is None:
                continue
            _fold(low, point.add(ext.low, new_origin), min)
            _fold(high, point.add(ext.high, new_origin), max)
        for child in children(m, "models"):
            _measure(child, new_origin)

    _measure(model, None)
    if low[0] is None:
        return Measure(None, None)
    return Measure((low[0], low[1]), (high[0], high[1]))
