"""Section view SVG: a cut-out of the footing showing bar layers and stirrups.

The cut-out is at most SECTION_MAX_WIDTH wide and is always drawn
SECTION_TARGET_PX wide, so the scale changes with the foundation length.
"""
from typing import Callable, NamedTuple

from shared.types import SectionBar
from shared.geometry import fmt_num, fmt_mm
from shared.svg import (
    make_svg_transform, arrow_marker, dim_line_h, dim_line_v,
    title_block, title_block_height,
)
from foundation.config import FoundationConfig
from foundation.constants import (
    SECTION_TARGET_PX, SECTION_ORIGIN, SECTION_PAD_W, SECTION_PAD_H,
    SECTION_HATCH_PX, SECTION_GROUND_PX,
    SECTION_BAR_RADIUS, SECTION_STIRRUP_STROKE,
    REBAR_COLOR, TOP_REBAR_COLOR, REBAR_EDGE_COLOR, CONCRETE_FILL, COVER_COLOR,
)
from foundation.rebar import section_width, section_bars
from foundation.metrics import FoundationSpecs, compute_specs, format_specs

_TB_W = 130


class SectionData(NamedTuple):
    config: FoundationConfig
    to_svg: Callable[[float, float], tuple[float, float]]
    scale: float
    cut_width: float     # mm
    draw_w: float        # px
    draw_h: float        # px
    bars: list[SectionBar]
    specs: FoundationSpecs
    svg_w: float
    svg_h: float


# ============================================================
# Geometry computation
# ============================================================

def build_section_data(config: FoundationConfig) -> SectionData:
    """Compute everything the section SVG needs."""
    cut_w = section_width(config)
    scale = SECTION_TARGET_PX / cut_w
    draw_w = cut_w * scale
    draw_h = config.depth * scale
    return SectionData(
        config=config,
        to_svg=make_svg_transform(scale, SECTION_ORIGIN),
        scale=scale,
        cut_width=cut_w,
        draw_w=draw_w,
        draw_h=draw_h,
        bars=section_bars(config),
        specs=compute_specs(config),
        svg_w=draw_w + SECTION_PAD_W,
        svg_h=draw_h + SECTION_PAD_H,
    )


# ============================================================
# SVG rendering
# ============================================================

def render_section_svg(data: SectionData, stamp=None) -> str:
    """Render the section view. Returns SVG string.

    stamp, when given, is (generated, describe) for the title block.
    """
    cfg = data.config
    to_svg = data.to_svg
    sc = data.scale
    cover = cfg.cover_concrete
    ox, oy = to_svg(0, 0)
    dw, dh = data.draw_w, data.draw_h

    leg_x, leg_y = ox + dw + 20, oy
    tb_top = leg_y + 95
    svg_h = data.svg_h
    if stamp is not None:
        svg_h = max(svg_h, tb_top + title_block_height(3) + 10)

    out = []
    out.append(f'<svg xmlns="http://www.w3.org/2000/svg" width="{data.svg_w:.1f}" height="{svg_h:.1f}"'
               f' viewBox="0 0 {data.svg_w:.1f} {svg_h:.1f}">')
    out.append(f'<rect x="0" y="0" width="{data.svg_w:.1f}" height="{svg_h:.1f}" fill="white"/>')
    out.append('<defs>')
    out.append('  <pattern id="ground" patternUnits="userSpaceOnUse" width="15" height="15">'
               '<path d="M0,15 L15,0" stroke="#8b7355" stroke-width="1"/></pattern>')
    out.append('  <pattern id="sectionHatch" patternUnits="userSpaceOnUse" width="8" height="8"'
               ' patternTransform="rotate(45)"><line x1="0" y1="0" x2="0" y2="8" stroke="#999"'
               ' stroke-width="1"/></pattern>')
    arrow_marker(out)
    out.append('</defs>')

    # Ground below the footing
    out.append(f'<rect x="{ox-20:.1f}" y="{oy+dh:.1f}" width="{dw+40:.1f}" height="{SECTION_GROUND_PX}"'
               f' fill="url(#ground)"/>')

    # Concrete body and hatched cut edges
    out.append(f'<rect x="{ox:.1f}" y="{oy:.1f}" width="{dw:.1f}" height="{dh:.1f}"'
               f' fill="{CONCRETE_FILL}" stroke="#333" stroke-width="3"/>')
    for hx in (ox, ox + dw - SECTION_HATCH_PX):
        out.append(f'<rect x="{hx:.1f}" y="{oy:.1f}" width="{SECTION_HATCH_PX}" height="{dh:.1f}"'
                   f' fill="url(#sectionHatch)"/>')

    # Bars: cut bars as circles, stirrups as lines
    bar_r = cfg.rebar_diameter * sc * SECTION_BAR_RADIUS
    stirrup_w = cfg.rebar_diameter * sc * SECTION_STIRRUP_STROKE
    for bar in data.bars:
        if bar.orientation == "horizontal":
            cx, cy = to_svg(bar.x, bar.y)
            fill = REBAR_COLOR if bar.layer == "bottom" else TOP_REBAR_COLOR
            out.append(f'<circle cx="{cx:.2f}" cy="{cy:.2f}" r="{bar_r:.2f}" fill="{fill}"'
                       f' stroke="{REBAR_EDGE_COLOR}" stroke-width="1"/>')
        else:
            sx, sy1 = to_svg(bar.x, cover); _, sy2 = to_svg(bar.x, cfg.depth - cover)
            out.append(f'<line x1="{sx:.2f}" y1="{sy1:.2f}" x2="{sx:.2f}" y2="{sy2:.2f}"'
                       f' stroke="{REBAR_COLOR}" stroke-width="{stirrup_w:.2f}"/>')

    # Dimension lines: cut-out width below, depth on the left
    dim_line_h(out, 0, cfg.depth + 20 / sc, data.cut_width,
               f"{fmt_mm(data.cut_width)} (section cutout)", to_svg, text_dy=15)
    dim_line_v(out, -30 / sc, 0, cfg.depth, fmt_mm(cfg.depth), to_svg)

    # Cover dimension at the bottom-left corner
    cov_px = cover * sc
    bar_y = oy + dh - cov_px
    out.append(f'<line x1="{ox:.1f}" y1="{bar_y:.1f}" x2="{ox+cov_px:.1f}" y2="{bar_y:.1f}"'
               f' stroke="{COVER_COLOR}" stroke-width="1" stroke-dasharray="3,3"/>')
    out.append(f'<line x1="{ox+cov_px:.1f}" y1="{bar_y:.1f}" x2="{ox+cov_px:.1f}" y2="{oy+dh:.1f}"'
               f' stroke="{COVER_COLOR}" stroke-width="1" stroke-dasharray="3,3"/>')
    out.append(f'<text x="{ox+cov_px/2-5:.1f}" y="{oy+dh-5:.1f}" font-family="Arial" font-size="10"'
               f' fill="{COVER_COLOR}">{fmt_num(cover)}</text>')

    # Callout 1: bottom layer bar mark with leader
    out.append(f'<circle cx="{ox-80:.1f}" cy="{bar_y:.1f}" r="15" fill="none" stroke="#333" stroke-width="2"/>')
    out.append(f'<text x="{ox-80:.1f}" y="{bar_y+5:.1f}" text-anchor="middle" font-family="Arial"'
               f' font-size="14" font-weight="bold" fill="#333">1</text>')
    out.append(f'<line x1="{ox-65:.1f}" y1="{bar_y:.1f}" x2="{ox+cov_px+cfg.rebar_spacing*sc:.1f}" y2="{bar_y:.1f}"'
               f' stroke="#333" stroke-width="1"/>')
    out.append(f'<text x="{ox-55:.1f}" y="{bar_y-10:.1f}" font-family="Arial" font-size="12"'
               f' font-weight="bold" fill="#333">Ø{fmt_num(cfg.rebar_diameter)}</text>')
    out.append(f'<text x="{ox-55:.1f}" y="{bar_y+15:.1f}" font-family="Arial" font-size="10"'
               f' fill="#333">Bottom layer</text>')

    # Legend
    out.append(f'<text x="{leg_x:.1f}" y="{leg_y:.1f}" font-family="Arial" font-size="14"'
               f' font-weight="bold" fill="#333">SECTION A-A</text>')
    for dy, fill, label in [(30, REBAR_COLOR, "Bottom rebar"), (50, TOP_REBAR_COLOR, "Top rebar")]:
        out.append(f'<circle cx="{leg_x+10:.1f}" cy="{leg_y+dy:.1f}" r="5" fill="{fill}" stroke="{REBAR_EDGE_COLOR}"/>')
        out.append(f'<text x="{leg_x+20:.1f}" y="{leg_y+dy+5:.1f}" font-family="Arial" font-size="11"'
                   f' fill="#333">{label}</text>')
    out.append(f'<rect x="{leg_x:.1f}" y="{leg_y+65:.1f}" width="15" height="15"'
               f' fill="url(#sectionHatch)" stroke="#999"/>')
    out.append(f'<text x="{leg_x+20:.1f}" y="{leg_y+77:.1f}" font-family="Arial" font-size="11"'
               f' fill="#333">Section cut</text>')

    if stamp is not None:
        rows = [(value, caption) for caption, value in format_specs(data.specs).items()]
        title_block(out, leg_x, tb_top, _TB_W, rows, stamp)

    out.append('</svg>')
    return "\n".join(out)
