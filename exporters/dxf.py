"""DXF entity rendering of models and paths.

Group codes: 0 entity type, 8 layer, 10/20 first point, 11/21 second
point, 40 radius, 50/51 start/end angle.
"""
from planar.traversal import Exporter, fmt_num, try_get_model_units
from planar.types import Point, PathType, UnitType

# $INSUNITS codes
DXF_UNIT = {
    UnitType.INCH: 1,
    UnitType.FOOT: 2,
    UnitType.MILLIMETER: 4,
    UnitType.CENTIMETER: 5,
    UnitType.METER: 6,
}

def to_dxf(item, units: UnitType | None = None) -> str:
    """Render a model, a path, or a list of them as DXF text at absolute coordinates.

    A HEADER section with $INSUNITS is written when units are given or the
    model declares them.
    """
    dxf: list[str] = []

    def append(*values):
        dxf.extend(v if isinstance(v, str) else fmt_num(v) for v in values)

    def layer(p) -> str:
        return "0" if p.id is None else str(p.id)

    def render_line(line, origin: Point):
        append("0", "LINE", "8", layer(line),
               "10", line.origin[0]+origin[0], "20", line.origin[1]+origin[1],
               "11", line.end[0]+origin[0], "21", line.end[1]+origin[1])

    def render_circle(circle, origin: Point):
        append("0", "CIRCLE", "8", layer(circle),
               "10", circle.origin[0]+origin[0], "20", circle.origin[1]+origin[1],
               "40", circle.radius)

    def render_arc(arc, origin: Point):
        append("0", "ARC", "8", layer(arc),
               "10", arc.origin[0]+origin[0], "20", arc.origin[1]+origin[1],
               "40", arc.radius, "50", arc.start_angle, "51", arc.end_angle)

    def section(fn):
        append("0", "SECTION")
        fn()
        append("0", "ENDSEC")

    if units is None:
        units = try_get_model_units(item)

    def header():
        append("2", "HEADER", "9", "$INSUNITS", "70", str(DXF_UNIT[units]))

    def entities():
        append("2", "ENTITIES")
        handlers = {
            PathType.LINE: render_line,
            PathType.CIRCLE: render_circle,
            PathType.ARC: render_arc,
        }
        Exporter(handlers).export_item(item, (0.0, 0.0))

    if units in DXF_UNIT:
        section(header)
    section(entities)
    append("0", "EOF")
    return "\n".join(dxf)
