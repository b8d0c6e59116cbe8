"""Generic traversal of models, paths and lists of either.

An Exporter walks an item and calls a per-variant handler for every path
with the accumulated absolute offset of its parent models. Exporters for
text formats supply the handlers; optional hooks let them transform each
model origin (fix_point) and each path (fix_path) before it is handled.
"""
from typing import Callable
from . import point
from .constants import ROUND_ACCURACY
from .types import Point, Model, is_model, is_path

PathHandler = Callable[[object, Point], None]

def round_value(n: float, accuracy: float = ROUND_ACCURACY) -> float:
    """Round n to the decimal places of accuracy (e.g. .001 -> 3 places)."""
    places = 1 / accuracy
    return round(n * places) / places

def fmt_num(n: float, accuracy: float = ROUND_ACCURACY) -> str:
    """Rounded number without trailing zeros, e.g. 2.50 -> "2.5", 3.0 -> "3"."""
    s = f"{round_value(n, accuracy):.10f}".rstrip("0").rstrip(".")
    return "0" if s in ("-0", "") else s

def try_get_model_units(item):
    """Unit tag of a model, or None for anything else."""
    if is_model(item):
        return item.units
    return None


class Exporter:
    """Walks a tree and renders each path through a handler map.

    handlers maps a variant tag ("line", "circle", "arc") to a function of
    (path, offset). Paths whose tag has no handler go to unhandled(path,
    offset) when given, and are skipped otherwise.
    fix_point(origin) -> point is applied to each model origin.
    fix_path(path, offset) -> path may return a transformed copy, or None
    to drop the path.
    """

    def __init__(self, handlers: dict[str, PathHandler],
                 fix_point: Callable[[Point], Point] | None = None,
                 fix_path: Callable[[object, Point], object] | None = None,
                 unhandled: PathHandler | None = None):
        self.handlers = handlers
        self.fix_point = fix_point
        self.fix_path = fix_path
        self.unhandled = unhandled

    def export_path(self, p, offset: Point):
        fn = self.handlers.get(getattr(p, "type", None))
        if not fn:
            if self.unhandled:
                self.unhandled(p, offset)
            return
        if self.fix_path:
            p = self.fix_path(p, offset)
            if p is None:
                return
        fn(p, offset)

    def export_model(self, model: Model, offset: Point | None):
        origin = point.clone(model.origin)
        if self.fix_point:
            origin = self.fix_point(origin)
        new_offset = point.add(origin, offset)
        for p in model.paths or []:
            self.export_path(p, new_offset)
        for child in model.models or []:
            self.export_model(child, new_offset)

    def export_item(self, item, origin: Point | None = None):
        """Export a model, a path, or a (nested) list of models and paths."""
        if is_model(item):
            self.export_model(item, origin)
        elif isinstance(item, list):
            for sub in item:
                self.export_item(sub, origin)
        elif is_path(item):
            self.export_path(item, point.clone(origin))
