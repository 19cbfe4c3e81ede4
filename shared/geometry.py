"""Pure geometry helpers and number formatting for drawings."""
import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterator

from .types import Point, Rebar

# ============================================================
# Error Type
# ============================================================
class GeometryError(ValueError):
    """Raised for impossible geometry operations."""

# ============================================================
# Positions and Lengths
# ============================================================
def stepped(start: float, stop: float, step: float) -> Iterator[float]:
    """Yield start, start+step, ... while the value is <= stop.

    Positions accumulate by repeated addition (not start + k*step), so
    the last value near *stop* carries the accumulated rounding drift.
    """
    if not step > 0:
        raise GeometryError(f"Step must be positive: step={step!r}")
    v = start
    while v <= stop:
        yield v
        v += step

def seg_length(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points."""
    return math.sqrt((p2[0]-p1[0])**2 + (p2[1]-p1[1])**2)

def bar_length(bar: Rebar) -> float:
    """Length of a plan bar in mm."""
    return seg_length((bar.x1, bar.y1), (bar.x2, bar.y2))

# ============================================================
# Formatting Helpers
# ============================================================
def fmt_num(v: float) -> str:
    """Shortest display form of a number: 8000.0 -> '8000', 62.5 -> '62.5'."""
    if math.isfinite(v) and float(v).is_integer():
        return str(int(v))
    return repr(float(v))

def fmt_fixed(v: float, digits: int) -> str:
    """Fixed-point string rounding exact halves away from zero.

    f-string formatting rounds binary ties to even; drawings show the
    same text a half-up fixed formatter would.
    """
    q = Decimal(1).scaleb(-digits)
    return str(Decimal(v).quantize(q, rounding=ROUND_HALF_UP))

def fmt_mm(v: float) -> str:
    """Dimension label in millimetres, e.g. '8000 mm'."""
    return f"{fmt_num(v)} mm"
