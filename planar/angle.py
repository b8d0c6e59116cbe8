"""Angle utilities. Angles are degrees unless a name says radians."""
import math

def to_radians(angle_deg: float) -> float:
    """Degrees to radians, with 360 mapped to exactly 0."""
    if angle_deg == 360:
        return 0.0
    return angle_deg * math.pi / 180.0

def to_degrees(angle_rad: float) -> float:
    return angle_rad * 180.0 / math.pi

def arc_end_angle_past_zero(arc) -> float:
    """End angle of an arc, made >= its start angle by adding whole turns.

    end - start is then the total sweep. For an end angle within one turn
    below the start this is end + 360.
    """
    if arc.end_angle < arc.start_angle:
        turns = math.ceil((arc.start_angle - arc.end_angle) / 360)
        return arc.end_angle + 360 * turns
    return arc.end_angle

def from_point_to_radians(p, origin=None) -> float:
    """Angle of the ray from origin (default 0,0) through p."""
    ox, oy = (0.0, 0.0) if origin is None else (origin[0], origin[1])
    return math.atan2(p[1]-oy, p[0]-ox)

def mirror(angle_deg: float, mirror_x: bool, mirror_y: bool) -> float:
    """Reflect an angle. The y mirror is applied before the x mirror."""
    if mirror_y:
        angle_deg = 360 - angle_deg
    if mirror_x:
        angle_deg = (180 if angle_deg < 180 else 540) - angle_deg
    return angle_deg
