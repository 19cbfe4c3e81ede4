"""Shared type definitions for the foundation drawing project."""
from typing import Literal, NamedTuple

Point = tuple[float, float]

class Rebar(NamedTuple):
    """Straight bar in plan, coordinates in mm."""
    type: Literal["horizontal", "vertical"]
    x1: float; y1: float
    x2: float; y2: float

class SectionBar(NamedTuple):
    """Bar position in the section cut-out, coordinates in mm."""
    x: float; y: float
    layer: Literal["bottom", "top", "stirrup"]
    orientation: Literal["horizontal", "vertical"]
