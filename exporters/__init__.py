"""Text exporters (SVG, DXF) built on the kernel's tree traversal."""

from .svg import SvgOptions, to_svg
from .dxf import to_dxf
