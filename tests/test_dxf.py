"""Tests for exporters/dxf.py."""
from exporters.dxf import to_dxf
from planar.types import Line, Circle, Arc, Model


def _entities(dxf: str) -> list[str]:
    lines = dxf.split("\n")
    return lines[lines.index("ENTITIES") + 1:]


def test_nested_coordinates(nested_model):
    lines = _entities(to_dxf(nested_model))
    assert lines[:12] == ["0", "LINE", "8", "r_line",
                          "10", "5", "20", "5", "11", "6", "21", "5"]
    i = lines.index("CIRCLE")
    assert lines[i:i+9] == ["CIRCLE", "8", "c_circle", "10", "15", "20", "5", "40", "1"]
    i = lines.index("g_line")
    assert lines[i+1:i+9] == ["10", "15", "20", "15", "11", "16", "21", "16"]


def test_arc_codes():
    lines = _entities(to_dxf(Arc((1, 2), 3, 45, 135, "bend")))
    assert lines[:14] == ["0", "ARC", "8", "bend", "10", "1", "20", "2",
                          "40", "3", "50", "45", "51", "135"]


def test_default_layer():
    lines = _entities(to_dxf(Circle((0, 0), 1)))
    assert lines[:4] == ["0", "CIRCLE", "8", "0"]


def test_units_header():
    dxf = to_dxf(Model(paths=[Line((0, 0), (1, 0))], units="mm"))
    assert dxf.startswith("0\nSECTION\n2\nHEADER\n9\n$INSUNITS\n70\n4\n0\nENDSEC")


def test_units_argument_overrides():
    dxf = to_dxf(Model(paths=[Line((0, 0), (1, 0))], units="mm"), units="inch")
    assert "$INSUNITS\n70\n1\n" in dxf


def test_no_header_without_units():
    dxf = to_dxf(Line((0, 0), (1, 0)))
    assert "HEADER" not in dxf
    assert dxf.startswith("0\nSECTION\n2\nENTITIES")


def test_ends_with_eof():
    dxf = to_dxf([Line((0, 0), (1, 0)), Model(paths=[])])
    assert dxf.endswith("0\nENDSEC\n0\nEOF")
