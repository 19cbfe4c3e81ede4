"""SVG transform factory, drawing helpers, and version stamp."""
import os, subprocess
from typing import Callable

from .types import Point

_UNVERSIONED = "unversioned"


def git_describe() -> str:
    """Return git describe string, or "unversioned" outside a checkout."""
    try:
        return subprocess.check_output(
            ["git", "describe", "--always", "--dirty=-DEV"],
            cwd=os.path.dirname(os.path.abspath(__file__)),
            text=True, stderr=subprocess.DEVNULL,
        ).strip()
    except (OSError, subprocess.CalledProcessError):
        return _UNVERSIONED


def make_svg_transform(scale: float, origin: Point = (0.0, 0.0)) -> Callable[[float, float], tuple[float, float]]:
    """Create to_svg closure mapping drawing mm to SVG px.

    SVG y grows downward, same as the drawing's plan and section axes.
    """
    ox, oy = origin
    def to_svg(x: float, y: float) -> tuple[float, float]:
        return (ox + x * scale, oy + y * scale)
    return to_svg


# ============================================================
# Shared defs and annotations
# ============================================================

def arrow_marker(out):
    """Arrowhead marker used by dimension lines (id="arrowhead")."""
    out.append('  <marker id="arrowhead" markerWidth="10" markerHeight="7" refX="9" refY="3.5" orient="auto">'
               '<polygon points="0 0, 10 3.5, 0 7" fill="#666"/></marker>')


def dim_line_h(out, x1, y, x2, label, to_svg, text_dy=-5):
    """Horizontal dimension line with arrowheads, label centered above."""
    sx1, sy = to_svg(x1, y); sx2, _ = to_svg(x2, y)
    out.append(f'<line x1="{sx1:.1f}" y1="{sy:.1f}" x2="{sx2:.1f}" y2="{sy:.1f}" stroke="#666" stroke-width="1"'
               f' marker-start="url(#arrowhead)" marker-end="url(#arrowhead)"/>')
    out.append(f'<text x="{(sx1+sx2)/2:.1f}" y="{sy+text_dy:.1f}" text-anchor="middle" font-family="Arial"'
               f' font-size="12" fill="#333">{label}</text>')


def dim_line_v(out, x, y1, y2, label, to_svg):
    """Vertical dimension line with arrowheads and rotated label."""
    sx, sy1 = to_svg(x, y1); _, sy2 = to_svg(x, y2)
    out.append(f'<line x1="{sx:.1f}" y1="{sy1:.1f}" x2="{sx:.1f}" y2="{sy2:.1f}" stroke="#666" stroke-width="1"'
               f' marker-start="url(#arrowhead)" marker-end="url(#arrowhead)"/>')
    lx, ly = sx - 5, (sy1 + sy2) / 2
    out.append(f'<text x="{lx:.1f}" y="{ly:.1f}" text-anchor="middle" font-family="Arial" font-size="12"'
               f' fill="#333" transform="rotate(-90,{lx:.1f},{ly:.1f})">{label}</text>')


def title_block_height(n_rows: int) -> float:
    return 14 + 26 * n_rows + 22


def title_block(out, left, top, width, rows, stamp):
    """Boxed text rows plus a generated-at / git describe footer.

    rows is a list of (value, caption) pairs; stamp is (generated, describe).
    Returns the block height.
    """
    cx = left + width / 2
    height = title_block_height(len(rows))
    out.append(f'<rect x="{left:.1f}" y="{top:.1f}" width="{width}" height="{height}"'
               f' fill="white" stroke="#333" stroke-width="1"/>')
    y = top + 14
    for value, caption in rows:
        out.append(f'<text x="{cx:.1f}" y="{y:.1f}" text-anchor="middle" font-family="Arial"'
                   f' font-size="11" font-weight="bold" fill="#333">{value}</text>')
        out.append(f'<text x="{cx:.1f}" y="{y+12:.1f}" text-anchor="middle" font-family="Arial"'
                   f' font-size="8" fill="#666">{caption}</text>')
        y += 26
    generated, describe = stamp
    out.append(f'<text x="{cx:.1f}" y="{y:.1f}" text-anchor="middle" font-family="Arial"'
               f' font-size="7.5" fill="#999">Generated {generated}</text>')
    out.append(f'<text x="{cx:.1f}" y="{y+10:.1f}" text-anchor="middle" font-family="Arial"'
               f' font-size="7.5" fill="#999">from {describe}</text>')
    return height
