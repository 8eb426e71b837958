"""Conversion between layout units and pixel lengths."""

from __future__ import annotations

from ..core.element import LayoutValue, Unit
from ..core.rect import Rect, Viewport


def _reference_dimension(unit: Unit, viewport: Viewport, reference: Rect) -> float | None:
    """Dimension a percent-style unit is measured against, or None for px."""
    if unit is Unit.PERCENT_PARENT_W:
        return reference.width
    if unit is Unit.PERCENT_PARENT_H:
        return reference.height
    if unit is Unit.VW:
        return viewport.width
    if unit is Unit.VH:
        return viewport.height
    return None


def to_pixels(value: LayoutValue, viewport: Viewport, reference: Rect) -> float:
    """Resolve a layout value to a pixel length (a magnitude, not a position).

    Args:
        value: Magnitude and unit to resolve
        viewport: Active viewport, used by ``vw``/``vh``
        reference: Parent rectangle, used by the percent-of-parent units

    Returns:
        Length in pixels. Percent units against a zero-sized reference are 0.
    """
    dimension = _reference_dimension(value.unit, viewport, reference)
    if dimension is None:
        return value.value
    if dimension == 0:
        return 0.0
    return (value.value / 100) * dimension


def from_pixels(pixels: float, unit: Unit, viewport: Viewport, reference: Rect) -> float:
    """Express a pixel length as a magnitude in ``unit``.

    Inverse of :func:`to_pixels`. A zero reference dimension yields 0 rather
    than a division error.
    """
    dimension = _reference_dimension(Unit(unit), viewport, reference)
    if dimension is None:
        return pixels
    if dimension == 0:
        return 0.0
    return (pixels / dimension) * 100
