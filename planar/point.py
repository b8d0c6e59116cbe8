"""Point arithmetic. All functions return new tuples and never mutate inputs."""
import math
from .types import Point, Arc
from . import angle

def zero() -> Point:
    return (0.0, 0.0)

def clone(p) -> Point:
    """Copy of p as a tuple; an absent point becomes the zero point."""
    if p is None:
        return zero()
    return (p[0], p[1])

def add(a, b=None, subtract: bool = False) -> Point:
    """Component-wise a + b (or a - b). Returns a clone of a when b is absent."""
    if b is None:
        return clone(a)
    if subtract:
        return (a[0]-b[0], a[1]-b[1])
    return (a[0]+b[0], a[1]+b[1])

def subtract(a, b) -> Point:
    return add(a, b, subtract=True)

def scale(p, k: float) -> Point:
    return (p[0]*k, p[1]*k)

def mirror(p, mirror_x: bool, mirror_y: bool) -> Point:
    """Negate x when mirror_x, negate y when mirror_y."""
    x, y = p[0], p[1]
    return (-x if mirror_x else x, -y if mirror_y else y)

def from_polar(angle_rad: float, radius: float) -> Point:
    return (radius*math.cos(angle_rad), radius*math.sin(angle_rad))

def rotate(p, degrees: float, center) -> Point:
    """Rotate p counterclockwise about center.

    A point equal to its center has angle atan2(0, 0) = 0 and distance 0,
    so it stays where it is.
    """
    a = angle.from_point_to_radians(p, center)
    d = math.hypot(p[0]-center[0], p[1]-center[1])
    return add(center, from_polar(a + angle.to_radians(degrees), d))

def from_arc(arc: Arc) -> tuple[Point, Point]:
    """Start and end points of an arc, in the arc's parent frame."""
    def _at(angle_deg: float) -> Point:
        return add(arc.origin, from_polar(angle.to_radians(angle_deg), arc.radius))
    return _at(arc.start_angle), _at(arc.end_angle)
