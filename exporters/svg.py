"""SVG rendering of models and paths."""
import logging
from html import escape
from typing import NamedTuple

from planar import angle, measure, path, point
from planar.constants import DEFAULT_STROKE_WIDTH, STROKE_ACCURACY
from planar.model import children
from planar.traversal import Exporter, fmt_num, round_value, try_get_model_units
from planar.types import Point, Model, Circle, Arc, PathType, UnitType, is_model, is_path
from planar.units import UnitConversionTable, conversion_scale

log = logging.getLogger(__name__)

# SVG length unit suffixes (no suffix for units SVG has no identifier for)
SVG_UNIT = {
    UnitType.INCH: "in",
    UnitType.MILLIMETER: "mm",
    UnitType.CENTIMETER: "cm",
}

class SvgOptions(NamedTuple):
    annotate: bool = False            # render path ids as <text>
    origin: Point | None = None       # reference origin; default fits extents
    scale: float = 1.0
    stroke: str = "#000"
    stroke_width: float | None = None # default: 0.2 mm in drawing units
    units: UnitType | None = None     # default: the model's units
    use_svg_path_only: bool = True    # <path> for everything, else <line>/<circle>
    view_box: bool = True

# ============================================================
# Helpers
# ============================================================
def _as_model(item) -> Model:
    """Wrap a path or a list of paths/models so it can be measured."""
    if is_model(item):
        return item
    items = item if isinstance(item, list) else [item]
    return Model(paths=[i for i in items if is_path(i) and not is_model(i)],
                 models=[i for i in items if is_model(i)])

def _is_full_turn(p) -> bool:
    return (isinstance(p, Arc) and p.start_angle is not None and p.end_angle is not None
            and measure.arc_angle(p) >= 360)

def _sizing_model(model: Model) -> Model:
    """Copy of the tree for measuring, with full-turn arcs standing in as circles."""
    paths = [Circle(p.origin, p.radius, p.id) if _is_full_turn(p) else p
             for p in children(model, "paths")]
    return Model(origin=model.origin, paths=paths,
                 models=[_sizing_model(m) for m in children(model, "models")])

def _attrs(attrs: dict) -> str:
    return "".join(f' {k}="{escape(str(v))}"' for k, v in attrs.items())

def _arc_data(radius: float, end: Point, large_arc: bool) -> list:
    # x-axis rotation 0; sweep flag 1 = increasing angle
    return [fmt_num(radius), fmt_num(radius), 0, int(large_arc), 1,
            fmt_num(end[0]), fmt_num(end[1])]

def default_stroke_width(units, table: UnitConversionTable | None = None) -> float:
    """Default stroke width (0.2 mm) expressed in the given units."""
    if not units:
        return DEFAULT_STROKE_WIDTH
    return round_value(conversion_scale(UnitType.MILLIMETER, units, table) * DEFAULT_STROKE_WIDTH,
                       STROKE_ACCURACY)

# ============================================================
# Renderer
# ============================================================
def to_svg(item, options: SvgOptions | None = None,
           table: UnitConversionTable | None = None) -> str:
    """Render a model, a path, or a list of them as SVG markup.

    Model y coordinates increase upward; SVG y increases downward, so every
    path is mirrored on y and scaled before rendering. Arcs sweeping a full
    turn or more are drawn and measured as circles. The input is not modified.
    """
    opts = options or SvgOptions()
    size = measure.model_extents(_sizing_model(_as_model(item)))
    if opts.origin is None:
        origin = (0.0, 0.0) if size.low is None else (-size.low[0]*opts.scale,
                                                      size.high[1]*opts.scale)
        opts = opts._replace(origin=origin)
    if opts.units is None:
        opts = opts._replace(units=try_get_model_units(item))
    if opts.stroke_width is None:
        opts = opts._replace(stroke_width=default_stroke_width(opts.units, table))

    elements: list[str] = []

    def fix_point(p: Point) -> Point:
        return point.scale(point.mirror(p, False, True), opts.scale)

    def fix_path(p, offset: Point):
        mirrored = path.mirror(p, False, True)
        if mirrored is None:
            return None
        return path.move_relative(path.scale(mirrored, opts.scale), offset)

    def create_element(tag: str, attrs: dict, inner_text: str | None = None,
                       use_stroke: bool = True):
        if use_stroke:
            attrs = {**attrs, "fill": "none", "stroke": opts.stroke,
                     "stroke-width": fmt_num(opts.stroke_width)}
        if inner_text:
            elements.append(f"<{tag}{_attrs(attrs)}>{escape(inner_text)}</{tag}>")
        else:
            elements.append(f"<{tag}{_attrs(attrs)}/>")

    def annotate(pid, at: Point):
        if opts.annotate and pid is not None:
            create_element("text", {"id": f"{pid}_text", "x": fmt_num(at[0]), "y": fmt_num(at[1])},
                           str(pid), use_stroke=False)

    def draw_path(pid, x: float, y: float, d: list):
        attrs = {"d": " ".join(str(v) for v in ["M", fmt_num(x), fmt_num(y), *d])}
        if pid is not None:
            attrs = {"id": pid, **attrs}
        create_element("path", attrs)

    def render_line(line, offset):
        start, end = line.origin, line.end
        if opts.use_svg_path_only:
            draw_path(line.id, start[0], start[1], ["L", fmt_num(end[0]), fmt_num(end[1])])
        else:
            attrs = {"x1": fmt_num(start[0]), "y1": fmt_num(start[1]),
                     "x2": fmt_num(end[0]), "y2": fmt_num(end[1])}
            if line.id is not None:
                attrs = {"id": line.id, **attrs}
            create_element("line", attrs)
        annotate(line.id, ((start[0]+end[0])/2, (start[1]+end[1])/2))

    def render_circle(circle, offset):
        c, r = circle.origin, circle.radius
        if opts.use_svg_path_only:
            # two half circles: left edge -> right edge -> left edge
            d = ["m", fmt_num(-r), 0,
                 "a", *_arc_data(r, (2*r, 0), False),
                 "a", *_arc_data(r, (-2*r, 0), False)]
            draw_path(circle.id, c[0], c[1], d)
        else:
            attrs = {"r": fmt_num(r), "cx": fmt_num(c[0]), "cy": fmt_num(c[1])}
            if circle.id is not None:
                attrs = {"id": circle.id, **attrs}
            create_element("circle", attrs)
        annotate(circle.id, c)

    def render_arc(arc: Arc, offset):
        if _is_full_turn(arc):
            render_circle(Circle(arc.origin, arc.radius, arc.id), offset)
            return
        start, end = point.from_arc(arc)
        sweep = measure.arc_angle(arc)
        d = ["A", *_arc_data(arc.radius, end, sweep > 180)]
        draw_path(arc.id, start[0], start[1], d)
        mid = angle.to_radians(arc.start_angle + sweep/2)
        annotate(arc.id, point.add(arc.origin, point.from_polar(mid, arc.radius)))

    handlers = {
        PathType.LINE: render_line,
        PathType.CIRCLE: render_circle,
        PathType.ARC: render_arc,
    }
    Exporter(handlers, fix_point, fix_path).export_item(item, opts.origin)
    log.debug("rendered %d svg elements", len(elements))

    svg_attrs = {"xmlns": "http://www.w3.org/2000/svg"}
    if opts.view_box and size.low is not None:
        width = round_value((size.high[0]-size.low[0]) * opts.scale)
        height = round_value((size.high[1]-size.low[1]) * opts.scale)
        unit = SVG_UNIT.get(opts.units, "")
        svg_attrs.update(width=f"{fmt_num(width)}{unit}", height=f"{fmt_num(height)}{unit}",
                         viewBox=f"0 0 {fmt_num(width)} {fmt_num(height)}")
    return "\n".join([f"<svg{_attrs(svg_attrs)}>", *elements, "</svg>"])
