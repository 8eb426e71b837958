"""Parent inference from geometric containment.

Parent/child relationships are never stored. Each resolution derives them
from estimated absolute rectangles: an element's parent is the highest
priority container whose closed rectangle contains the element's center.

Priority is a total order:
    1. z-index descending (the visually topmost container wins)
    2. area ascending (the tightest container wins)
    3. input order ascending
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from ..core.element import Element
from ..core.rect import Rect

logger = logging.getLogger(__name__)


def _bounds(rects: Sequence[Rect]) -> NDArray[np.float64]:
    """Stack rectangles into an Nx4 array of (left, top, right, bottom)."""
    return np.array(
        [(r.x, r.y, r.x + r.width, r.y + r.height) for r in rects],
        dtype=np.float64,
    )


def containment_matrix(
    elements: Sequence[Element], estimates: Sequence[Rect]
) -> NDArray[np.bool_]:
    """Compute which elements may parent which.

    Args:
        elements: Elements in input order
        estimates: Estimated absolute rectangle of each element (same order)

    Returns:
        NxN boolean matrix where ``m[child, parent]`` is True when ``parent``
        is a container with an id other than ``child``'s whose rectangle contains the
        center of ``child`` (edges inclusive)
    """
    if not elements:
        return np.zeros((0, 0), dtype=bool)

    bounds = _bounds(estimates)
    centers_x = np.array([r.x + r.width / 2 for r in estimates], dtype=np.float64)
    centers_y = np.array([r.y + r.height / 2 for r in estimates], dtype=np.float64)

    inside = (
        (centers_x[:, None] >= bounds[None, :, 0])
        & (centers_x[:, None] <= bounds[None, :, 2])
        & (centers_y[:, None] >= bounds[None, :, 1])
        & (centers_y[:, None] <= bounds[None, :, 3])
    )

    is_container = np.array([el.layout.accepts_children for el in elements], dtype=bool)
    inside &= is_container[None, :]
    # An element never parents itself or a copy sharing its id
    ids = np.array([el.id for el in elements], dtype=object)
    inside &= ids[:, None] != ids[None, :]
    return inside


def priority_key(element: Element, rect: Rect, index: int) -> tuple[int, float, int]:
    """Sort key ranking candidate parents; smallest key wins."""
    return (-element.layout.z_index, rect.width * rect.height, index)


def candidate_parents(
    child_index: int,
    elements: Sequence[Element],
    estimates: Sequence[Rect],
    matrix: NDArray[np.bool_] | None = None,
) -> list[int]:
    """Indices of every valid parent of one element, best first."""
    if matrix is None:
        matrix = containment_matrix(elements, estimates)
    indices = np.flatnonzero(matrix[child_index]).tolist()
    return sorted(indices, key=lambda i: priority_key(elements[i], estimates[i], i))


def resolve_parents(
    elements: Sequence[Element], estimates: Sequence[Rect]
) -> dict[str, str | None]:
    """Assign each element its logical parent.

    Args:
        elements: Elements in input order
        estimates: Pass-1 rectangles, all computed against the viewport

    Returns:
        Mapping of element id to parent id, ``None`` meaning the viewport.
        When ids repeat, the first occurrence's assignment is kept.
    """
    matrix = containment_matrix(elements, estimates)
    parents: dict[str, str | None] = {}

    for index, element in enumerate(elements):
        if element.id in parents:
            logger.warning("Duplicate element id %r; keeping first occurrence", element.id)
            continue
        candidates = candidate_parents(index, elements, estimates, matrix)
        parents[element.id] = elements[candidates[0]].id if candidates else None

    logger.debug(
        "Assigned parents for %d elements (%d nested)",
        len(parents),
        sum(1 for parent in parents.values() if parent is not None),
    )
    return parents
