"""Final geometry resolution along the derived parent hierarchy."""

from __future__ import annotations

import logging
from typing import Mapping, Sequence

from ..core.element import Element, LayoutConfig
from ..core.rect import Rect, RuntimeRect, Viewport
from .anchors import offset_to_absolute
from .units import to_pixels

logger = logging.getLogger(__name__)


def resolve_rect(layout: LayoutConfig, viewport: Viewport, parent_rect: Rect) -> Rect:
    """Resolve one layout config to absolute geometry against a parent rectangle.

    Size is resolved first because the end and center anchors need it to
    place the element.
    """
    width = to_pixels(layout.width, viewport, parent_rect)
    height = to_pixels(layout.height, viewport, parent_rect)
    x = offset_to_absolute(layout.x, layout.anchor_x, width, viewport, parent_rect)
    y = offset_to_absolute(layout.y, layout.anchor_y, height, viewport, parent_rect)
    return Rect(x, y, width, height)


def resolve_hierarchy(
    elements: Sequence[Element],
    parents: Mapping[str, str | None],
    estimates: Mapping[str, Rect],
    viewport: Viewport,
) -> dict[str, RuntimeRect]:
    """Compute final geometry for every element, parents before children.

    Resolution is an explicit depth-first walk up the parent chain with a
    memo table keyed by element id, so arbitrarily deep or malformed chains
    never recurse.

    If a parent is already in progress on the active chain the graph has a
    cycle; the parent's estimated rectangle stands in for its final one for
    that step only.

    Args:
        elements: Elements in input order
        parents: Parent assignment per element id (``None`` = viewport)
        estimates: Pass-1 rectangle per element id
        viewport: Active viewport

    Returns:
        Runtime rectangle per element id. Parent ids that do not name a known
        element are reported as ``None``.
    """
    table: dict[str, Element] = {}
    for element in elements:
        table.setdefault(element.id, element)

    def parent_of(element_id: str) -> str | None:
        parent_id = parents.get(element_id)
        if parent_id is not None and parent_id not in table:
            logger.debug("Unknown parent %r for %r; using viewport", parent_id, element_id)
            return None
        return parent_id

    final: dict[str, Rect] = {}

    for start_id in table:
        if start_id in final:
            continue

        stack = [start_id]
        in_progress = {start_id}

        while stack:
            current = stack[-1]
            parent_id = parent_of(current)

            if parent_id is None:
                parent_rect = viewport.rect
            elif parent_id in final:
                parent_rect = final[parent_id]
            elif parent_id in in_progress:
                logger.debug(
                    "Parent cycle at %r -> %r; using estimated geometry", current, parent_id
                )
                parent_rect = estimates.get(parent_id, viewport.rect)
            else:
                stack.append(parent_id)
                in_progress.add(parent_id)
                continue

            final[current] = resolve_rect(table[current].layout, viewport, parent_rect)
            stack.pop()
            in_progress.discard(current)

    return {
        element_id: RuntimeRect(
            x=rect.x,
            y=rect.y,
            width=rect.width,
            height=rect.height,
            parent_id=parent_of(element_id),
        )
        for element_id, rect in final.items()
    }
