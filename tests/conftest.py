"""Shared test fixtures for kernel tests."""
import pytest
from planar.types import Line, Circle, Arc, Model
from planar.units import UnitConversionTable


class Spline:
    """Path-like object of a variant the kernel does not know."""
    type = "spline"

    def __init__(self, origin, id=None):
        self.origin = origin
        self.id = id


def close(a, b, tol=1e-9) -> bool:
    """Points a and b agree to within tol on both axes."""
    return abs(a[0] - b[0]) < tol and abs(a[1] - b[1]) < tol


@pytest.fixture
def unit_table():
    """Fresh conversion table, isolated from the process-wide default."""
    return UnitConversionTable()


@pytest.fixture
def nested_model():
    """Root at (5, 5) with a line, a child at (10, 0) with a circle,
    and a grandchild at (0, 10) with a line."""
    grandchild = Model(id="grandchild", origin=(0, 10), paths=[Line((0, 0), (1, 1), "g_line")])
    child = Model(id="child", origin=(10, 0), paths=[Circle((0, 0), 1, "c_circle")],
                  models=[grandchild])
    return Model(id="root", origin=(5, 5), paths=[Line((0, 0), (1, 0), "r_line")],
                 models=[child])


@pytest.fixture
def quarter_arc():
    return Arc((0, 0), 1, 0, 90, "quarter")
