"""Flat preview rendering of resolved layouts."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from PIL import Image, ImageDraw

from ..core.element import Element
from ..core.rect import Viewport

logger = logging.getLogger(__name__)

BACKGROUND = (17, 24, 39)
FILL = (55, 65, 81)
CONTAINER_OUTLINE = (59, 130, 246)
LEAF_OUTLINE = (156, 163, 175)
LABEL = (229, 231, 235)


def paint_order(elements: Sequence[Element]) -> list[Element]:
    """Elements sorted bottom to top: z-index ascending, then input order."""
    indexed = list(enumerate(elements))
    indexed.sort(key=lambda item: (item[1].layout.z_index, item[0]))
    return [element for _, element in indexed]


def render_preview(
    elements: Sequence[Element],
    viewport: Viewport,
    path: str | Path | None = None,
    scale: float = 1.0,
    labels: bool = True,
) -> Image.Image:
    """Draw each element as a flat absolute box, the way the editor canvas shows them.

    Args:
        elements: Resolved elements (``runtime`` set)
        viewport: Viewport the elements were resolved against
        path: If given, the image is also saved there
        scale: Pixel scale applied to the viewport and all geometry
        labels: Whether to write element names inside their boxes

    Returns:
        RGB image of size ``viewport * scale``
    """
    size = (max(1, round(viewport.width * scale)), max(1, round(viewport.height * scale)))
    image = Image.new("RGB", size, BACKGROUND)
    draw = ImageDraw.Draw(image)

    for element in paint_order(elements):
        runtime = element.runtime
        if runtime is None:
            logger.warning("Skipping unresolved element %r", element.id)
            continue
        if runtime.width <= 0 or runtime.height <= 0:
            continue

        box = [
            runtime.x * scale,
            runtime.y * scale,
            runtime.right * scale,
            runtime.bottom * scale,
        ]
        outline = CONTAINER_OUTLINE if element.layout.accepts_children else LEAF_OUTLINE
        if element.kind == "circle":
            draw.ellipse(box, fill=FILL, outline=outline, width=2)
        else:
            draw.rectangle(box, fill=FILL, outline=outline, width=2)

        if labels and element.name:
            draw.text((box[0] + 4, box[1] + 4), element.name, fill=LABEL)

    if path is not None:
        image.save(str(path))
        logger.debug("Saved preview to %s", path)
    return image
