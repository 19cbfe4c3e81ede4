"""Rebar layout: plan grid, bar crossings, and bars in the section cut-out.

Every function is pure and rebuilds its result from the arguments; nothing
is cached between calls.
"""
from shared.types import Point, Rebar, SectionBar
from shared.geometry import stepped
from foundation.config import FoundationConfig
from foundation.constants import SECTION_MAX_WIDTH, STIRRUP_SPACING_FACTOR


def generate_grid(plan_width: float, plan_height: float,
                  spacing: float, cover: float) -> list[Rebar]:
    """Bars tiling the rectangle inset by *cover*, *spacing* apart.

    Horizontal bars (increasing y) come first, then vertical bars
    (increasing x). Positions accumulate from *cover* by repeated
    addition of *spacing*; a cover larger than half a side yields no
    bars in that direction.
    """
    x_start, x_end = cover, plan_width - cover
    y_start, y_end = cover, plan_height - cover
    grid = [Rebar("horizontal", x_start, y, x_end, y)
            for y in stepped(y_start, y_end, spacing)]
    grid.extend(Rebar("vertical", x, y_start, x, y_end)
                for x in stepped(x_start, x_end, spacing))
    return grid


def plan_grid(config: FoundationConfig) -> list[Rebar]:
    """Plan grid for a configuration: length along x, width along y."""
    return generate_grid(config.length, config.width,
                         config.rebar_spacing, config.cover_concrete)


def split_grid(grid: list[Rebar]) -> tuple[list[Rebar], list[Rebar]]:
    """(horizontal bars, vertical bars), each in grid order."""
    return ([r for r in grid if r.type == "horizontal"],
            [r for r in grid if r.type == "vertical"])


def grid_intersections(grid: list[Rebar]) -> list[Point]:
    """Crossing point of every horizontal bar with every vertical bar."""
    horiz, vert = split_grid(grid)
    return [(v.x1, h.y1) for h in horiz for v in vert]


# ============================================================
# Section cut-out
# ============================================================

def section_width(config: FoundationConfig) -> float:
    """Width of the section cut-out, capped at SECTION_MAX_WIDTH."""
    return min(SECTION_MAX_WIDTH, config.length)


def section_bars(config: FoundationConfig) -> list[SectionBar]:
    """Bars visible in the cut-out: bottom layer, top layer, then stirrups."""
    cover = config.cover_concrete
    end = section_width(config) - cover
    bars = [SectionBar(x, config.depth - cover, "bottom", "horizontal")
            for x in stepped(cover, end, config.rebar_spacing)]
    bars.extend(SectionBar(x, cover, "top", "horizontal")
                for x in stepped(cover, end, config.rebar_spacing))
    bars.extend(SectionBar(x, config.depth / 2, "stirrup", "vertical")
                for x in stepped(cover, end, config.rebar_spacing * STIRRUP_SPACING_FACTOR))
    return bars
