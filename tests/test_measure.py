"""Tests for planar/measure.py extents and lengths."""
import math
from dataclasses import dataclass

import pytest
from planar import measure
from planar.types import Line, Circle, Arc, Model, Measure, MalformedPath, UnsupportedPathVariant
from conftest import Spline, close


# --- arc_angle ---

def test_arc_angle():
    assert measure.arc_angle(Arc((0, 0), 1, 350, 10)) == 20
    assert measure.arc_angle(Arc((0, 0), 1, 10, 350)) == 340
    assert measure.arc_angle(Arc((0, 0), 1, 45, 45)) == 0


# --- path_extents ---

class TestPathExtents:
    def test_circle(self):
        assert measure.path_extents(Circle((5, 5), 2)) == Measure((3, 3), (7, 7))

    def test_line(self):
        assert measure.path_extents(Line((4, -1), (1, 3))) == Measure((1, -1), (4, 3))

    def test_quarter_arc(self, quarter_arc):
        low, high = measure.path_extents(quarter_arc)
        assert close(low, (0, 0))
        assert close(high, (1, 1))

    def test_arc_across_zero_reaches_x_extreme(self):
        low, high = measure.path_extents(Arc((0, 0), 1, 350, 10))
        s10 = math.sin(math.radians(10))
        assert high[0] == 1
        assert abs(low[0] - math.cos(math.radians(10))) < 1e-12
        assert abs(high[1] - s10) < 1e-12
        assert abs(low[1] + s10) < 1e-12

    def test_half_arc_with_origin(self):
        low, high = measure.path_extents(Arc((2, 3), 2, 0, 180))
        assert close(low, (0, 3))
        assert close(high, (4, 5))

    def test_negative_start(self):
        low, high = measure.path_extents(Arc((0, 0), 1, -90, 90))
        assert close(low, (0, -1))
        assert close(high, (1, 1))

    def test_negative_angles_wide_sweep(self):
        # 270 degrees counterclockwise from -90 through 0 and 90 to 180
        low, high = measure.path_extents(Arc((0, 0), 1, -90, -180))
        assert close(low, (-1, -1))
        assert close(high, (1, 1))

    def test_start_past_full_turn(self):
        low, high = measure.path_extents(Arc((0, 0), 1, 400, 460))
        assert high[1] == 1
        assert abs(high[0] - math.cos(math.radians(40))) < 1e-12

    def test_zero_length_arc(self):
        low, high = measure.path_extents(Arc((0, 0), 2, 45, 45))
        assert close(low, high)

    def test_full_sweep_rejected(self):
        with pytest.raises(MalformedPath, match="sweeps 360"):
            measure.path_extents(Arc((0, 0), 1, 0, 360))

    def test_unknown_variant(self):
        assert measure.path_extents(Spline((0, 0))) == Measure(None, None)
        with pytest.raises(UnsupportedPathVariant):
            measure.path_extents(Spline((0, 0)), strict=True)


# --- path_length ---

class TestPathLength:
    def test_line(self):
        assert measure.path_length(Line((0, 0), (3, 4))) == 5

    def test_circle(self):
        assert abs(measure.path_length(Circle((9, 9), 1)) - 2 * math.pi) < 1e-12

    def test_arc(self):
        assert abs(measure.path_length(Arc((0, 0), 2, 0, 90)) - math.pi) < 1e-12

    def test_zero_radius(self):
        assert measure.path_length(Circle((0, 0), 0)) == 0

    def test_unknown_variant(self):
        assert measure.path_length(Spline((0, 0))) == 0


# --- model_extents ---

class TestModelExtents:
    def test_child_offset(self):
        child = Model(origin=(10, 0), paths=[Circle((0, 0), 1)])
        assert measure.model_extents(Model(models=[child])) == Measure((9, -1), (11, 1))

    def test_root_origin_applied(self):
        m = Model(origin=(1, 1), paths=[Line((0, 0), (2, 2))])
        assert measure.model_extents(m) == Measure((1, 1), (3, 3))

    def test_nested(self, nested_model):
        # r_line (5,5)-(6,5), circle box (14,4)-(16,6), g_line (15,15)-(16,16)
        assert measure.model_extents(nested_model) == Measure((5, 4), (16, 16))

    def test_empty_model(self):
        assert measure.model_extents(Model()) == Measure(None, None)
        assert measure.model_extents(Model(models=[Model(paths=[])])) == Measure(None, None)

    def test_unknown_paths_ignored(self):
        m = Model(paths=[Spline((100, 100)), Circle((0, 0), 1)])
        assert measure.model_extents(m) == Measure((-1, -1), (1, 1))


# --- subclasses of the variants measure like their base ---

@dataclass
class LabeledLine(Line):
    label: str = ""


@dataclass
class NamedArc(Arc):
    name: str = ""


def test_subclass_extents_and_length():
    ln = LabeledLine((0, 0), (3, 4), label="diag")
    assert measure.path_extents(ln, strict=True) == Measure((0, 0), (3, 4))
    assert measure.path_length(ln) == 5
    low, high = measure.path_extents(NamedArc((0, 0), 1, 0, 90))
    assert close(low, (0, 0)) and close(high, (1, 1))
