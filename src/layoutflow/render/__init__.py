"""Preview rendering of resolved layouts."""

from .preview import paint_order, render_preview

__all__ = ["paint_order", "render_preview"]
