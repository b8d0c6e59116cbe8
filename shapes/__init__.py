"""Parametric shape builders. Each returns a new planar Model."""

from .builders import (
    bolt_circle, bolt_rectangle, connect_the_dots,
    rectangle, square, round_rectangle, oval, oval_arc, s_curve,
    CATALOG,
)
