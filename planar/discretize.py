"""Sample paths into numpy point arrays."""
from __future__ import annotations

import math
import numpy as np

from .constants import DEFAULT_SAMPLES
from .measure import arc_angle
from .path import is_known_variant
from .traversal import Exporter
from .types import Line, Circle, Model, PathType

def path_points(p, n_pts: int = DEFAULT_SAMPLES, offset=None,
                *, strict: bool = False) -> np.ndarray:
    """(k, 2) array of points along a path, shifted by offset.

    Lines give their two endpoints; circles and arcs give n_pts + 1
    points, counterclockwise from the start angle (0 for circles).
    Unknown variants give an empty (0, 2) array.
    """
    if n_pts < 1:
        raise ValueError(f"n_pts must be >= 1, got {n_pts}")
    if not is_known_variant(p, "path_points", strict):
        return np.empty((0, 2))
    ox, oy = (0.0, 0.0) if offset is None else (offset[0], offset[1])
    if isinstance(p, Line):
        return np.array([[p.origin[0]+ox, p.origin[1]+oy],
                         [p.end[0]+ox, p.end[1]+oy]], dtype=float)
    if isinstance(p, Circle):
        sa, sweep = 0.0, 2*math.pi
    else:
        sa, sweep = math.radians(p.start_angle), math.radians(arc_angle(p))
    theta = sa + sweep*np.linspace(0.0, 1.0, n_pts + 1)
    cx, cy = p.origin[0]+ox, p.origin[1]+oy
    return np.c_[cx + p.radius*np.cos(theta), cy + p.radius*np.sin(theta)]

def model_points(model: Model, n_pts: int = DEFAULT_SAMPLES,
                 *, strict: bool = False) -> list[np.ndarray]:
    """Samples of every path in the tree at absolute coordinates, in traversal order.

    Unknown variants are left out, or raise UnsupportedPathVariant if strict.
    """
    out: list[np.ndarray] = []
    def _sample(p, offset):
        out.append(path_points(p, n_pts, offset, strict=strict))
    handlers = {tag: _sample for tag in PathType}
    def _reject(p, offset):
        is_known_variant(p, "model_points", strict=True)
    Exporter(handlers, unhandled=_reject if strict else None).export_item(model, None)
    return out
