"""Shared types, geometry, formatting, and SVG utilities."""

from .types import Point, Rebar, SectionBar
from .geometry import (
    GeometryError,
    stepped, seg_length, bar_length,
    fmt_num, fmt_fixed, fmt_mm,
)
from .svg import (
    git_describe, make_svg_transform,
    arrow_marker, dim_line_h, dim_line_v,
    title_block, title_block_height,
)
