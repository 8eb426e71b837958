"""Layout engine: resolves persisted layout configs into absolute geometry.

Resolution runs in three passes over the whole element set:

1. **Estimate**: every element is resolved as if the viewport were its
   parent. This gives comparable absolute geometry for containment testing.
2. **Assign**: each element's parent is derived from the estimates by
   center-point containment (see :mod:`.containment`).
3. **Finalize**: geometry is recomputed against each element's real parent,
   parents first (see :mod:`.hierarchy`).

The engine holds no state between calls. Parent assignment is global, so
any change to any element or to the viewport needs a full re-resolution.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from ..core.element import Element
from ..core.rect import Rect, Viewport
from .containment import resolve_parents
from .hierarchy import resolve_hierarchy, resolve_rect

logger = logging.getLogger(__name__)


def estimate_geometry(elements: Sequence[Element], viewport: Viewport) -> list[Rect]:
    """Pass 1: resolve every element against the viewport, ignoring nesting."""
    root = viewport.rect
    return [resolve_rect(element.layout, viewport, root) for element in elements]


def calculate_runtime_positions(
    elements: Iterable[Element], viewport: Viewport
) -> list[Element]:
    """Resolve runtime geometry and parents for a set of elements.

    Args:
        elements: Elements in input order; existing runtime values are ignored
        viewport: Active viewport

    Returns:
        New Element objects in input order, each with ``runtime`` set. The
        input elements are not modified.
    """
    elements = list(elements)
    if not elements:
        return []

    estimated = estimate_geometry(elements, viewport)
    parents = resolve_parents(elements, estimated)

    estimates: dict[str, Rect] = {}
    for element, rect in zip(elements, estimated):
        estimates.setdefault(element.id, rect)

    runtimes = resolve_hierarchy(elements, parents, estimates, viewport)

    logger.debug(
        "Resolved %d elements against %gx%g viewport",
        len(elements),
        viewport.width,
        viewport.height,
    )
    return [element.with_runtime(runtimes[element.id]) for element in elements]


class LayoutEngine:
    """Convenience wrapper binding the engine to one viewport.

    Example:
        engine = LayoutEngine(Viewport(1280, 800))
        resolved = engine.resolve(elements)
        mobile = engine.with_viewport(Viewport(375, 667)).resolve(resolved)
    """

    def __init__(self, viewport: Viewport) -> None:
        self._viewport = viewport

    @property
    def viewport(self) -> Viewport:
        return self._viewport

    def with_viewport(self, viewport: Viewport) -> LayoutEngine:
        """Return an engine for a different viewport."""
        return LayoutEngine(viewport)

    def resolve(self, elements: Iterable[Element]) -> list[Element]:
        return calculate_runtime_positions(elements, self._viewport)

    def estimate(self, elements: Sequence[Element]) -> list[Rect]:
        return estimate_geometry(elements, self._viewport)
