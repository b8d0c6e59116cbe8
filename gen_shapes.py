"""Render every catalog shape to SVG and DXF.

Usage: python gen_shapes.py [OUT_DIR]   (default: ./out)
"""
import logging
import os
import sys

from planar.logging_config import setup_logging
from planar.measure import model_extents
from planar.types import UnitType
from shapes import CATALOG
from exporters import to_svg, to_dxf

log = logging.getLogger("planar.gen_shapes")

_DIR = os.path.dirname(os.path.abspath(__file__))
DEFAULT_OUT_DIR = os.path.join(_DIR, "out")


def write_shape(name: str, out_dir: str) -> list[str]:
    """Write <name>.svg and <name>.dxf for one catalog shape; returns the paths written."""
    model = CATALOG[name]()
    model.units = UnitType.MILLIMETER
    written = []
    for ext, render in (("svg", to_svg), ("dxf", to_dxf)):
        out_path = os.path.join(out_dir, f"{name}.{ext}")
        with open(out_path, "w", encoding="utf-8") as f:
            f.write(render(model))
        written.append(out_path)
    low, high = model_extents(model)
    log.info("%-17s %d paths, extents (%.2f, %.2f) - (%.2f, %.2f)",
             name, len(model.paths), low[0], low[1], high[0], high[1])
    return written


def main(out_dir: str | None = None) -> list[str]:
    out_dir = out_dir or DEFAULT_OUT_DIR
    os.makedirs(out_dir, exist_ok=True)
    written = []
    for name in CATALOG:
        written.extend(write_shape(name, out_dir))
    log.info("wrote %d files to %s", len(written), out_dir)
    return written


if __name__ == "__main__":
    setup_logging()
    main(sys.argv[1] if len(sys.argv) > 1 else None)
