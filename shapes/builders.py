"""Shape builders.

Each builder returns a fresh Model whose paths are relative to (0, 0)
and whose `type` is the builder name. Builders share primitives, never
state: rectangle and square are connect_the_dots, oval is round_rectangle.
"""
import math
from planar import angle, path, point
from planar.types import Point, Line, Circle, Arc, Model, GeometryError

def _positive(**dims: float):
    for name, value in dims.items():
        if value <= 0:
            raise GeometryError(f"{name} must be positive, got {value}")

# ============================================================
# Hole Patterns
# ============================================================
def bolt_circle(bolt_radius: float, hole_radius: float, bolt_count: int,
                first_bolt_angle: float = 0) -> Model:
    """bolt_count holes evenly spaced on a circle of bolt_radius."""
    _positive(bolt_radius=bolt_radius, hole_radius=hole_radius, bolt_count=bolt_count)
    a1 = angle.to_radians(first_bolt_angle)
    a = 2*math.pi / bolt_count
    paths = [Circle(point.from_polar(a*i + a1, bolt_radius), hole_radius, f"bolt {i}")
             for i in range(bolt_count)]
    return Model(paths=paths, type="bolt_circle")

def bolt_rectangle(width: float, height: float, hole_radius: float) -> Model:
    """Four holes at the corners of a width x height rectangle."""
    _positive(width=width, height=height, hole_radius=hole_radius)
    holes = {
        "BottomLeft": (0.0, 0.0),
        "BottomRight": (width, 0.0),
        "TopRight": (width, height),
        "TopLeft": (0.0, height),
    }
    paths = [Circle(o, hole_radius, f"{name}_bolt") for name, o in holes.items()]
    return Model(paths=paths, type="bolt_rectangle")

# ============================================================
# Outlines
# ============================================================
def connect_the_dots(is_closed: bool, points: list[Point]) -> Model:
    """Polyline through points; closed back to the first point when is_closed (3+ points)."""
    pts = [point.clone(p) for p in points]
    paths = [Line(pts[i-1], pts[i], f"ShapeLine{i}") for i in range(1, len(pts))]
    if is_closed and len(pts) > 2:
        paths.append(Line(pts[-1], pts[0], f"ShapeLine{len(pts)}"))
    return Model(paths=paths, type="connect_the_dots")

def rectangle(width: float, height: float) -> Model:
    _positive(width=width, height=height)
    m = connect_the_dots(True, [(0, 0), (width, 0), (width, height), (0, height)])
    m.type = "rectangle"
    return m

def square(side: float) -> Model:
    m = rectangle(side, side)
    m.type = "square"
    return m

def round_rectangle(width: float, height: float, radius: float) -> Model:
    """Rectangle with corner arcs. radius is clamped to half the shorter side.

    Edges that would have no length are left out, so a fully rounded
    side is just its two arcs.
    """
    _positive(width=width, height=height)
    if radius < 0:
        raise GeometryError(f"radius must not be negative, got {radius}")
    radius = min(radius, min(width, height) / 2)
    wr = width - radius; hr = height - radius
    paths: list = []
    if radius > 0:
        paths += [
            Arc((radius, radius), radius, 180, 270, "BottomLeft"),
            Arc((wr, radius), radius, 270, 0, "BottomRight"),
            Arc((wr, hr), radius, 0, 90, "TopRight"),
            Arc((radius, hr), radius, 90, 180, "TopLeft"),
        ]
    if wr - radius > 0:
        paths += [Line((radius, 0), (wr, 0), "Bottom"),
                  Line((wr, height), (radius, height), "Top")]
    if hr - radius > 0:
        paths += [Line((width, radius), (width, hr), "Right"),
                  Line((0, hr), (0, radius), "Left")]
    return Model(paths=paths, type="round_rectangle")

def oval(width: float, height: float) -> Model:
    """Stadium shape: a round rectangle with the largest possible radius."""
    m = round_rectangle(width, height, min(width, height) / 2)
    m.type = "oval"
    return m

def oval_arc(start_angle: float, end_angle: float, sweep_radius: float,
             slot_radius: float) -> Model:
    """Curved slot of half-width slot_radius centered on an arc of sweep_radius."""
    _positive(sweep_radius=sweep_radius, slot_radius=slot_radius)
    if slot_radius >= sweep_radius:
        raise GeometryError(
            f"slot_radius {slot_radius} must be less than sweep_radius {sweep_radius}")

    def cap(cap_id: str, tilt: float, start_offset: float, end_offset: float) -> Arc:
        center = point.from_polar(angle.to_radians(tilt), sweep_radius)
        return Arc(center, slot_radius, tilt + start_offset, tilt + end_offset, cap_id)

    def sweep(sweep_id: str, offset_radius: float) -> Arc:
        return Arc(point.zero(), sweep_radius + offset_radius, start_angle, end_angle, sweep_id)

    paths = [
        sweep("Inner", -slot_radius),
        sweep("Outer", slot_radius),
        cap("StartCap", start_angle, 180, 0),
        cap("EndCap", end_angle, 0, 180),
    ]
    return Model(paths=paths, type="oval_arc")

def s_curve(width: float, height: float) -> Model:
    """Two tangent arcs joining (0, 0) to (width, height).

    The second arc is the first rotated half a turn (mirrored on both axes)
    about the center of the box.
    """
    _positive(width=width, height=height)

    def find_radius(x: float, y: float) -> float:
        return x + (y*y - x*x) / (2*x)

    h2 = height / 2; w2 = width / 2
    if width > height:
        radius = find_radius(h2, w2)
        start = 270.0
        end = 360 - angle.to_degrees(math.acos(w2 / radius))
        arc_origin = (0.0, radius)
    else:
        radius = find_radius(w2, h2)
        start = 180 - angle.to_degrees(math.asin(h2 / radius))
        end = 180.0
        arc_origin = (radius, 0.0)
    curve = Arc(arc_origin, radius, start, end, "curve_start")
    curve_end = path.move_relative(path.mirror(curve, True, True, "curve_end"), (width, height))
    return Model(paths=[curve, curve_end], type="s_curve")

# ============================================================
# Catalog
# ============================================================
# name -> zero-argument factory with representative dimensions (mm)
CATALOG = {
    "bolt_circle": lambda: bolt_circle(30, 4, 6),
    "bolt_rectangle": lambda: bolt_rectangle(60, 40, 3),
    "connect_the_dots": lambda: connect_the_dots(False, [(0, 0), (20, 30), (40, 0), (60, 30)]),
    "rectangle": lambda: rectangle(60, 40),
    "square": lambda: square(40),
    "round_rectangle": lambda: round_rectangle(60, 40, 8),
    "oval": lambda: oval(60, 20),
    "oval_arc": lambda: oval_arc(30, 150, 40, 5),
    "s_curve": lambda: s_curve(60, 20),
}
