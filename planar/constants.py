"""Named kernel constants.

Lengths in millimeters unless noted. Angles in degrees.
"""
from .types import UnitType

# Unit conversion
BASE_UNIT = UnitType.MILLIMETER
BASE_CONVERSIONS = {                  # millimeters per unit
    UnitType.CENTIMETER: 10.0,
    UnitType.METER: 1000.0,
    UnitType.INCH: 25.4,
    UnitType.FOOT: 25.4 * 12,
}

# Rendering
DEFAULT_STROKE_WIDTH = 0.2            # mm, converted to drawing units on export
ROUND_ACCURACY = 1e-7                 # decimal exemplar for exported numbers
STROKE_ACCURACY = 1e-3

# Discretization
DEFAULT_SAMPLES = 20                  # segments per arc/circle
