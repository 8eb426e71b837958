"""Core layout data model."""

from .element import ANCHOR_EDGES, AnchorX, AnchorY, Axis, Edge, Element, LayoutConfig, LayoutValue, Unit
from .rect import Rect, RuntimeRect, Viewport

__all__ = [
    "ANCHOR_EDGES",
    "AnchorX",
    "AnchorY",
    "Axis",
    "Edge",
    "Element",
    "LayoutConfig",
    "LayoutValue",
    "Rect",
    "RuntimeRect",
    "Unit",
    "Viewport",
]
