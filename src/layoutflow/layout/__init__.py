"""Layout resolution: units, anchors, containment and hierarchy."""

from .anchors import absolute_to_offset, offset_to_absolute, reference_rect, resolve_anchor
from .containment import resolve_parents
from .engine import LayoutEngine, calculate_runtime_positions, estimate_geometry
from .hierarchy import resolve_hierarchy, resolve_rect
from .loader import LayoutDocument, LayoutFormatError, LayoutLoader
from .units import from_pixels, to_pixels

__all__ = [
    "LayoutDocument",
    "LayoutEngine",
    "LayoutFormatError",
    "LayoutLoader",
    "absolute_to_offset",
    "calculate_runtime_positions",
    "estimate_geometry",
    "from_pixels",
    "offset_to_absolute",
    "reference_rect",
    "resolve_anchor",
    "resolve_hierarchy",
    "resolve_parents",
    "resolve_rect",
    "to_pixels",
]
