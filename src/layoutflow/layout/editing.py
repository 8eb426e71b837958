"""Editor operations on top of the layout engine.

These are the conversions the editor performs when the user changes a unit
or an anchor, finishes a drag, or reorders layers. Each keeps the element
visually where it is by round-tripping through absolute pixels, and each
returns new objects rather than modifying its inputs.
"""

from __future__ import annotations

import logging
from typing import Literal, Sequence

from ..config import NEW_ELEMENT_NAMES, NEW_ELEMENT_POSITION, NEW_ELEMENT_SIZE
from ..core.element import AnchorX, AnchorY, Axis, Element, ElementKind, LayoutConfig, LayoutValue, Unit
from ..core.rect import Rect, RuntimeRect, Viewport
from .anchors import absolute_to_offset, resolve_anchor
from .containment import priority_key
from .engine import calculate_runtime_positions
from .units import from_pixels

logger = logging.getLogger(__name__)

UnitCategory = Literal["px", "percent", "viewport"]

ROOT_ID = "root"


def find_element(elements: Sequence[Element], element_id: str) -> Element:
    """Return the element with the given id.

    Raises:
        KeyError: If no element has that id
    """
    for element in elements:
        if element.id == element_id:
            return element
    raise KeyError(element_id)


def _require_runtime(element: Element) -> RuntimeRect:
    if element.runtime is None:
        raise ValueError(f"Element {element.id!r} has not been resolved")
    return element.runtime


def parent_rect(parent_id: str | None, elements: Sequence[Element], viewport: Viewport) -> Rect:
    """Resolved rectangle of a parent, falling back to the viewport.

    The viewport is used for ``None``, the ``"root"`` id, unknown ids and
    parents that have not been resolved yet.
    """
    if not parent_id or parent_id == ROOT_ID:
        return viewport.rect
    for element in elements:
        if element.id == parent_id and element.runtime is not None:
            return element.runtime.to_rect()
    return viewport.rect


def pixel_offset(element: Element, axis: Axis, elements: Sequence[Element], viewport: Viewport) -> float:
    """Current pixel offset (x/y) or size (width/height) of a resolved element.

    Offsets are measured from the element's anchor within its logical parent.
    """
    return _value_in_unit(element, axis, Unit.PX, None, elements, viewport)


def _value_in_unit(
    element: Element, axis: Axis, unit: Unit, anchor: AnchorX | AnchorY | None,
    elements: Sequence[Element], viewport: Viewport,
) -> float:
    """Magnitude that places ``element`` where it is now, expressed in ``unit``."""
    runtime = _require_runtime(element)
    reference = parent_rect(runtime.parent_id, elements, viewport)

    if axis == "width":
        return from_pixels(runtime.width, unit, viewport, reference)
    if axis == "height":
        return from_pixels(runtime.height, unit, viewport, reference)

    position = runtime.x if axis == "x" else runtime.y
    size = runtime.width if axis == "x" else runtime.height
    if anchor is None:
        anchor = element.layout.anchor_for(axis)
    return absolute_to_offset(position, anchor, size, unit, viewport, reference)


def next_unit(current: Unit, axis: Axis, category: UnitCategory) -> Unit:
    """Unit selected by the editor's unit toggle.

    Picking the category already in use flips between its width and height
    variants; picking a new category starts with the variant matching the
    axis.
    """
    current = Unit(current)
    horizontal = axis in ("x", "width")

    if category == "px":
        return Unit.PX
    if category == "percent":
        if current.is_percent:
            return Unit.PERCENT_PARENT_H if current is Unit.PERCENT_PARENT_W else Unit.PERCENT_PARENT_W
        return Unit.PERCENT_PARENT_W if horizontal else Unit.PERCENT_PARENT_H
    if category == "viewport":
        if current.is_viewport:
            return Unit.VH if current is Unit.VW else Unit.VW
        return Unit.VW if horizontal else Unit.VH
    raise ValueError(f"Unknown unit category: {category}")


def change_unit(
    element: Element, axis: Axis, unit: Unit | str, elements: Sequence[Element], viewport: Viewport
) -> Element:
    """Re-express one layout property in another unit without moving the element.

    Args:
        element: A resolved element
        axis: Which property to convert ('x', 'y', 'width' or 'height')
        unit: Target unit
        elements: The resolved element set the element belongs to
        viewport: Active viewport

    Returns:
        Copy of the element with the converted value
    """
    unit = Unit(unit)
    magnitude = _value_in_unit(element, axis, unit, None, elements, viewport)
    layout = element.layout.replace(**{axis: LayoutValue(magnitude, unit)})
    return element.with_layout(layout)


def change_anchor(
    element: Element,
    axis: Literal["x", "y"],
    anchor: AnchorX | AnchorY | str,
    elements: Sequence[Element],
    viewport: Viewport,
) -> Element:
    """Switch the anchor of one axis, keeping the absolute position fixed.

    The offset keeps its current unit; only its magnitude is recomputed.
    """
    anchor = resolve_anchor(anchor, axis)
    current = element.layout.value_for(axis)
    magnitude = _value_in_unit(element, axis, current.unit, anchor, elements, viewport)

    anchor_field = "anchor_x" if axis == "x" else "anchor_y"
    layout = element.layout.replace(
        **{axis: LayoutValue(magnitude, current.unit), anchor_field: anchor}
    )
    return element.with_layout(layout)


def commit_rect(
    element_id: str, rect: Rect, elements: Sequence[Element], viewport: Viewport
) -> list[Element]:
    """Write the end result of a drag or resize gesture back into the layout.

    The dragged element is re-parented by center containment against the
    other elements' current runtime geometry, raised above its new parent if
    needed, and its layout values are back-calculated in their existing units
    so that they reproduce ``rect``. Its runtime is set to ``rect`` exactly;
    no other element is touched and no re-resolution happens, so nothing
    jumps when the gesture ends.

    Args:
        element_id: Id of the dragged element
        rect: Final absolute rectangle of the gesture
        elements: The resolved element set
        viewport: Active viewport

    Returns:
        New element list in the original order
    """
    element = find_element(elements, element_id)
    cx, cy = rect.center

    candidates = [
        (index, other)
        for index, other in enumerate(elements)
        if other.id != element_id
        and other.runtime is not None
        and other.layout.accepts_children
        and other.runtime.contains_point(cx, cy)
    ]
    candidates.sort(key=lambda item: priority_key(item[1], item[1].runtime, item[0]))
    new_parent = candidates[0][1] if candidates else None
    new_parent_id = new_parent.id if new_parent is not None else None

    z_index = element.layout.z_index
    if new_parent is not None and z_index <= new_parent.layout.z_index:
        z_index = new_parent.layout.z_index + 1

    reference = parent_rect(new_parent_id, elements, viewport)
    layout = element.layout
    layout = layout.replace(
        z_index=z_index,
        x=LayoutValue(
            absolute_to_offset(rect.x, layout.anchor_x, rect.width, layout.x.unit, viewport, reference),
            layout.x.unit,
        ),
        y=LayoutValue(
            absolute_to_offset(rect.y, layout.anchor_y, rect.height, layout.y.unit, viewport, reference),
            layout.y.unit,
        ),
        width=LayoutValue(from_pixels(rect.width, layout.width.unit, viewport, reference), layout.width.unit),
        height=LayoutValue(from_pixels(rect.height, layout.height.unit, viewport, reference), layout.height.unit),
    )
    runtime = RuntimeRect(rect.x, rect.y, rect.width, rect.height, parent_id=new_parent_id)
    logger.debug("Committed %r under %r at z=%d", element_id, new_parent_id, z_index)

    committed = element.with_layout(layout).with_runtime(runtime)
    return [committed if other.id == element_id else other for other in elements]


def reorder_layers(
    sorted_ids: Sequence[str], elements: Sequence[Element], viewport: Viewport
) -> list[Element]:
    """Apply a layer panel ordering and re-resolve.

    ``sorted_ids`` lists elements topmost first; the element at position
    ``i`` gets z-index ``len(sorted_ids) - i``. Elements not listed keep their
    z-index. Z-order affects parenting, so the whole set is re-resolved.
    """
    total = len(sorted_ids)
    positions = {element_id: index for index, element_id in enumerate(sorted_ids)}

    updated = []
    for element in elements:
        index = positions.get(element.id)
        if index is None:
            updated.append(element)
        else:
            updated.append(element.with_layout(element.layout.replace(z_index=total - index)))
    return calculate_runtime_positions(updated, viewport)


def layer_order(elements: Sequence[Element]) -> list[Element]:
    """Elements as the layer panel lists them: topmost (highest z) first."""
    indexed = list(enumerate(elements))
    indexed.sort(key=lambda item: (-item[1].layout.z_index, item[0]))
    return [element for _, element in indexed]


def visual_parent(element: Element, elements: Sequence[Element]) -> Element | None:
    """Smallest other element fully enclosing this one (display hint only).

    Unlike the logical parent this ignores z-order and the container flag.
    """
    runtime = _require_runtime(element)
    enclosing = [
        other
        for other in elements
        if other.id != element.id
        and other.runtime is not None
        and other.runtime.contains_rect(runtime)
    ]
    if not enclosing:
        return None
    return min(enclosing, key=lambda other: other.runtime.area)


def _unique_id(elements: Sequence[Element]) -> str:
    taken = {element.id for element in elements}
    counter = len(elements) + 1
    while f"el-{counter}" in taken:
        counter += 1
    return f"el-{counter}"


def add_element(
    elements: Sequence[Element],
    viewport: Viewport,
    kind: ElementKind = "rect",
    *,
    element_id: str | None = None,
    name: str | None = None,
) -> list[Element]:
    """Append a new pixel-sized element on top of the stack and re-resolve."""
    if element_id is None:
        element_id = _unique_id(elements)
    elif any(element.id == element_id for element in elements):
        raise ValueError(f"Duplicate element id {element_id!r}")

    x, y = NEW_ELEMENT_POSITION
    width, height = NEW_ELEMENT_SIZE
    element = Element(
        id=element_id,
        name=name or NEW_ELEMENT_NAMES.get(kind, "New Element"),
        kind=kind,
        layout=LayoutConfig(
            x=LayoutValue(x),
            y=LayoutValue(y),
            width=LayoutValue(width),
            height=LayoutValue(height),
            z_index=len(elements) + 1,
        ),
    )
    return calculate_runtime_positions([*elements, element], viewport)


def remove_element(elements: Sequence[Element], element_id: str, viewport: Viewport) -> list[Element]:
    """Remove an element and re-resolve; former children find new parents."""
    find_element(elements, element_id)
    return calculate_runtime_positions(
        [element for element in elements if element.id != element_id], viewport
    )


def update_layout(
    elements: Sequence[Element], element_id: str, viewport: Viewport, **changes
) -> list[Element]:
    """Change layout fields of one element and re-resolve the whole set.

    Example:
        update_layout(elements, "box-1", viewport, z_index=5)
    """
    find_element(elements, element_id)
    updated = [
        element.with_layout(element.layout.replace(**changes)) if element.id == element_id else element
        for element in elements
    ]
    return calculate_runtime_positions(updated, viewport)
