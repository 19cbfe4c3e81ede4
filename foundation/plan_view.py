"""Plan view SVG: foundation outline, wall line, rebar grid, dimensions.

Foundation length runs along SVG x, width along SVG y.
"""
from typing import Callable, NamedTuple

from shared.types import Point, Rebar
from shared.geometry import fmt_num, fmt_mm
from shared.svg import (
    make_svg_transform, arrow_marker, dim_line_h, dim_line_v,
    title_block, title_block_height,
)
from foundation.config import FoundationConfig
from foundation.constants import (
    PLAN_SCALE, PLAN_ORIGIN, PLAN_PAD_W, PLAN_PAD_H, PLAN_DIM_OFFSET,
    PLAN_BAR_STROKE, PLAN_NODE_RADIUS,
    REBAR_COLOR, REBAR_NODE_COLOR,
)
from foundation.rebar import plan_grid, grid_intersections
from foundation.metrics import FoundationSpecs, compute_specs, format_specs

_TB_W = 130


class PlanData(NamedTuple):
    config: FoundationConfig
    to_svg: Callable[[float, float], tuple[float, float]]
    scale: float
    grid: list[Rebar]
    nodes: list[Point]
    specs: FoundationSpecs
    svg_w: float
    svg_h: float


# ============================================================
# Geometry computation
# ============================================================

def build_plan_data(config: FoundationConfig) -> PlanData:
    """Compute everything the plan SVG needs."""
    grid = plan_grid(config)
    return PlanData(
        config=config,
        to_svg=make_svg_transform(PLAN_SCALE, PLAN_ORIGIN),
        scale=PLAN_SCALE,
        grid=grid,
        nodes=grid_intersections(grid),
        specs=compute_specs(config),
        svg_w=config.length * PLAN_SCALE + PLAN_PAD_W,
        svg_h=config.width * PLAN_SCALE + PLAN_PAD_H,
    )


# ============================================================
# SVG rendering
# ============================================================

def render_plan_svg(data: PlanData, stamp=None) -> str:
    """Render the plan view. Returns SVG string.

    stamp, when given, is (generated, describe) for the title block.
    """
    cfg = data.config
    to_svg = data.to_svg
    s = data.scale

    leg_x, leg_y = to_svg(cfg.length, 0)
    leg_x += 20
    tb_top = leg_y + 80
    svg_h = data.svg_h
    if stamp is not None:
        svg_h = max(svg_h, tb_top + title_block_height(3) + 10)

    out = []
    out.append(f'<svg xmlns="http://www.w3.org/2000/svg" width="{data.svg_w:.1f}" height="{svg_h:.1f}"'
               f' viewBox="0 0 {data.svg_w:.1f} {svg_h:.1f}">')
    out.append(f'<rect x="0" y="0" width="{data.svg_w:.1f}" height="{svg_h:.1f}" fill="white"/>')
    out.append('<defs>')
    out.append('  <pattern id="concrete" patternUnits="userSpaceOnUse" width="20" height="20">'
               '<circle cx="10" cy="10" r="1" fill="#ccc"/></pattern>')
    arrow_marker(out)
    out.append('</defs>')

    # Outer foundation perimeter
    x0, y0 = to_svg(0, 0)
    out.append(f'<rect x="{x0:.1f}" y="{y0:.1f}" width="{cfg.length * s:.1f}" height="{cfg.width * s:.1f}"'
               f' fill="url(#concrete)" stroke="#333" stroke-width="2"/>')

    # Inner wall face, dashed; omitted when the walls meet
    wt = cfg.wall_thickness
    if cfg.length > 2 * wt and cfg.width > 2 * wt:
        ix, iy = to_svg(wt, wt)
        out.append(f'<rect x="{ix:.1f}" y="{iy:.1f}" width="{(cfg.length - 2*wt) * s:.1f}"'
                   f' height="{(cfg.width - 2*wt) * s:.1f}" fill="none" stroke="#666"'
                   f' stroke-width="1" stroke-dasharray="5,5"/>')

    # Rebars
    bar_w = cfg.rebar_diameter * s * PLAN_BAR_STROKE
    for bar in data.grid:
        sx1, sy1 = to_svg(bar.x1, bar.y1); sx2, sy2 = to_svg(bar.x2, bar.y2)
        out.append(f'<line x1="{sx1:.2f}" y1="{sy1:.2f}" x2="{sx2:.2f}" y2="{sy2:.2f}"'
                   f' stroke="{REBAR_COLOR}" stroke-width="{bar_w:.2f}"/>')

    # Bar crossings
    node_r = cfg.rebar_diameter * s * PLAN_NODE_RADIUS
    for x, y in data.nodes:
        cx, cy = to_svg(x, y)
        out.append(f'<circle cx="{cx:.2f}" cy="{cy:.2f}" r="{node_r:.2f}" fill="{REBAR_NODE_COLOR}"/>')

    # Dimension lines
    off = PLAN_DIM_OFFSET / s
    dim_line_h(out, 0, -off, cfg.length, fmt_mm(cfg.length), to_svg)
    dim_line_v(out, -off, 0, cfg.width, fmt_mm(cfg.width), to_svg)

    # Legend
    out.append(f'<text x="{leg_x:.1f}" y="{leg_y:.1f}" font-family="Arial" font-size="14"'
               f' font-weight="bold" fill="#333">PLAN VIEW</text>')
    out.append(f'<line x1="{leg_x:.1f}" y1="{leg_y+30:.1f}" x2="{leg_x+30:.1f}" y2="{leg_y+30:.1f}"'
               f' stroke="{REBAR_COLOR}" stroke-width="3"/>')
    out.append(f'<text x="{leg_x+35:.1f}" y="{leg_y+35:.1f}" font-family="Arial" font-size="11"'
               f' fill="#333">Rebar Ø{fmt_num(cfg.rebar_diameter)}mm</text>')
    out.append(f'<rect x="{leg_x:.1f}" y="{leg_y+45:.1f}" width="30" height="15"'
               f' fill="url(#concrete)" stroke="#333"/>')
    out.append(f'<text x="{leg_x+35:.1f}" y="{leg_y+57:.1f}" font-family="Arial" font-size="11"'
               f' fill="#333">Concrete</text>')

    if stamp is not None:
        rows = [(value, caption) for caption, value in format_specs(data.specs).items()]
        title_block(out, leg_x, tb_top, _TB_W, rows, stamp)

    out.append('</svg>')
    return "\n".join(out)
