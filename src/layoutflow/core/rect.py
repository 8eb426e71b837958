"""Rectangle, runtime geometry and viewport types."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in absolute canvas pixels.

    The origin is the top-left corner of the viewport, with Y growing
    downwards.
    """

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> tuple[float, float]:
        """Center point (cx, cy)."""
        return self.x + self.width / 2, self.y + self.height / 2

    @property
    def area(self) -> float:
        return self.width * self.height

    def contains_point(self, px: float, py: float) -> bool:
        """Test a point against the closed bounds of this rectangle.

        Points lying exactly on an edge are inside.
        """
        return self.x <= px <= self.right and self.y <= py <= self.bottom

    def contains_rect(self, other: Rect) -> bool:
        """Whether ``other`` lies fully within this rectangle (edges inclusive)."""
        return (
            self.x <= other.x
            and self.y <= other.y
            and self.right >= other.right
            and self.bottom >= other.bottom
        )

    def span(self, axis: str) -> tuple[float, float]:
        """Return (origin, size) along ``axis`` ('x' or 'y')."""
        if axis == "x":
            return self.x, self.width
        return self.y, self.height


@dataclass(frozen=True)
class RuntimeRect(Rect):
    """Resolved absolute geometry of an element plus its derived parent.

    Never persisted: always recomputed from the layout configs and the
    active viewport.
    """

    parent_id: str | None = None

    def to_rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)


@dataclass(frozen=True)
class Viewport:
    """The root canvas the layout is resolved against.

    Attributes:
        width: Viewport width in pixels
        height: Viewport height in pixels
        name: Display name of the preset (``"Custom"`` for ad-hoc sizes)
    """

    width: float
    height: float
    name: str = "Custom"

    @property
    def rect(self) -> Rect:
        """The viewport as a rectangle positioned at the origin."""
        return Rect(0.0, 0.0, self.width, self.height)

    def resized(self, width: float | None = None, height: float | None = None) -> Viewport:
        """Copy with a new size; the result is always a custom viewport."""
        return Viewport(
            width=self.width if width is None else width,
            height=self.height if height is None else height,
        )
