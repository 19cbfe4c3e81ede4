"""Derived quantities: concrete volume, bar count, total bar length."""
from typing import NamedTuple

from shared.types import Rebar
from shared.geometry import bar_length, fmt_fixed
from foundation.config import FoundationConfig
from foundation.rebar import plan_grid


class FoundationSpecs(NamedTuple):
    """Metrics shown beside the drawing."""
    volume: float         # m^3
    rebar_count: int
    rebar_length: float   # m, one layer


def concrete_volume(config: FoundationConfig) -> float:
    """Gross concrete volume in m^3 (mm^3 / 1e9)."""
    return config.length * config.width * config.depth / 1e9


def rebar_count(grid: list[Rebar]) -> int:
    return len(grid)


def total_rebar_length(grid: list[Rebar]) -> float:
    """Summed bar length in m for a single layer.

    Callers multiply for top/bottom layers themselves.
    """
    total = 0.0
    for bar in grid:
        total += bar_length(bar)
    return total / 1000


def compute_specs(config: FoundationConfig) -> FoundationSpecs:
    grid = plan_grid(config)
    return FoundationSpecs(
        volume=concrete_volume(config),
        rebar_count=rebar_count(grid),
        rebar_length=total_rebar_length(grid),
    )


def format_specs(specs: FoundationSpecs) -> dict[str, str]:
    """Display strings keyed by caption."""
    return {
        "Foundation Volume": f"{fmt_fixed(specs.volume, 2)} m³",
        "Rebar Count (Plan)": str(specs.rebar_count),
        "Total Rebar Length": f"{fmt_fixed(specs.rebar_length, 1)} m (per layer)",
    }
