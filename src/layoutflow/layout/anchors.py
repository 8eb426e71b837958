"""Anchor system for converting between relative offsets and absolute coordinates.

An offset is measured from one edge of a reference rectangle:

- start (left/top): offsets grow inwards from the start edge
- end (right/bottom): offsets grow inwards from the end edge, so a positive
  offset moves the element towards the start
- center: offsets are measured from the reference center to the element center

The reference rectangle is the viewport (at the origin) for ``vw``/``vh``
values and the resolved parent rectangle for everything else.
"""

from __future__ import annotations

from ..core.element import ANCHOR_EDGES, AnchorX, AnchorY, Edge, LayoutValue, Unit
from ..core.rect import Rect, Viewport
from .units import from_pixels, to_pixels


def resolve_anchor(anchor: AnchorX | AnchorY | str, axis: str | None = None) -> AnchorX | AnchorY:
    """Normalize an anchor given as enum member or persisted token.

    Args:
        anchor: The anchor (enum or token such as ``"right"``)
        axis: ``"x"`` or ``"y"``; needed only for tokens valid on both axes
            (``"center"``)

    Returns:
        The anchor as an AnchorX or AnchorY member
    """
    if isinstance(anchor, (AnchorX, AnchorY)):
        return anchor
    if axis == "x":
        return AnchorX(anchor)
    if axis == "y":
        return AnchorY(anchor)
    horizontal = anchor in {a.value for a in AnchorX}
    vertical = anchor in {a.value for a in AnchorY}
    if horizontal and not vertical:
        return AnchorX(anchor)
    if vertical and not horizontal:
        return AnchorY(anchor)
    raise ValueError(f"Cannot infer axis for anchor {anchor!r}")


def anchor_axis(anchor: AnchorX | AnchorY) -> str:
    """Axis ('x' or 'y') an anchor applies to."""
    return "x" if isinstance(anchor, AnchorX) else "y"


def reference_rect(unit: Unit, viewport: Viewport, parent_rect: Rect) -> Rect:
    """Select the rectangle a value in ``unit`` is positioned against."""
    if Unit(unit).is_viewport:
        return viewport.rect
    return parent_rect


def offset_to_absolute(
    value: LayoutValue,
    anchor: AnchorX | AnchorY | str,
    element_size: float,
    viewport: Viewport,
    parent_rect: Rect,
    axis: str | None = None,
) -> float:
    """Convert an anchored offset to an absolute canvas coordinate.

    Args:
        value: The offset (magnitude + unit); negative offsets are allowed
        anchor: Edge the offset is measured from
        element_size: Element size along the anchor's axis, in pixels
        viewport: Active viewport
        parent_rect: Resolved rectangle of the element's parent
        axis: Axis for ambiguous string anchors

    Returns:
        Absolute coordinate of the element's start edge along the axis
    """
    anchor = resolve_anchor(anchor, axis)
    length = to_pixels(value, viewport, parent_rect)
    axis = anchor_axis(anchor)
    origin, size = reference_rect(value.unit, viewport, parent_rect).span(axis)

    edge = ANCHOR_EDGES[axis, anchor.value]
    if edge is Edge.START:
        return origin + length
    if edge is Edge.END:
        return origin + size - length - element_size
    return origin + (size / 2) + length - (element_size / 2)


def absolute_to_offset(
    position: float,
    anchor: AnchorX | AnchorY | str,
    element_size: float,
    unit: Unit,
    viewport: Viewport,
    parent_rect: Rect,
    axis: str | None = None,
) -> float:
    """Convert an absolute canvas coordinate to an anchored offset magnitude.

    Exact inverse of :func:`offset_to_absolute` for the same anchor, unit and
    reference, so re-expressing a position never moves the element.

    Args:
        position: Absolute coordinate of the element's start edge
        anchor: Edge the resulting offset is measured from
        element_size: Element size along the anchor's axis, in pixels
        unit: Unit of the returned magnitude
        viewport: Active viewport
        parent_rect: Resolved rectangle of the element's parent
        axis: Axis for ambiguous string anchors

    Returns:
        Offset magnitude in ``unit``
    """
    anchor = resolve_anchor(anchor, axis)
    unit = Unit(unit)
    axis = anchor_axis(anchor)
    origin, size = reference_rect(unit, viewport, parent_rect).span(axis)

    edge = ANCHOR_EDGES[axis, anchor.value]
    if edge is Edge.START:
        pixel_offset = position - origin
    elif edge is Edge.END:
        pixel_offset = origin + size - position - element_size
    else:
        pixel_offset = (position + element_size / 2) - (origin + size / 2)

    return from_pixels(pixel_offset, unit, viewport, parent_rect)
