"""LayoutFlow - anchored layout resolution for visual layout editors."""

from .core import AnchorX, AnchorY, Element, LayoutConfig, LayoutValue, Rect, RuntimeRect, Unit, Viewport
from .layout import LayoutEngine, LayoutLoader, calculate_runtime_positions

__all__ = [
    "AnchorX",
    "AnchorY",
    "Element",
    "LayoutConfig",
    "LayoutEngine",
    "LayoutLoader",
    "LayoutValue",
    "Rect",
    "RuntimeRect",
    "Unit",
    "Viewport",
    "calculate_runtime_positions",
]
