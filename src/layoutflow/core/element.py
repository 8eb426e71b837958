"""Persisted layout description of editor elements."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Literal

from .rect import RuntimeRect


Axis = Literal["x", "y", "width", "height"]
ElementKind = Literal["rect", "circle"]


class Unit(str, Enum):
    """Unit of a layout value; the value itself is the persisted token."""

    PX = "px"
    PERCENT_PARENT_W = "%p_w"
    PERCENT_PARENT_H = "%p_h"
    VW = "vw"
    VH = "vh"

    @property
    def is_viewport(self) -> bool:
        """Whether the unit is measured against the viewport, not the parent."""
        return self in (Unit.VW, Unit.VH)

    @property
    def is_percent(self) -> bool:
        return self in (Unit.PERCENT_PARENT_W, Unit.PERCENT_PARENT_H)


class Edge(Enum):
    """Axis-neutral anchor edge."""

    START = "start"
    CENTER = "center"
    END = "end"


class AnchorX(str, Enum):
    """Horizontal anchor of an element within its reference rectangle."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class AnchorY(str, Enum):
    """Vertical anchor of an element within its reference rectangle."""

    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


# Mapping from (axis, anchor token) to the edge offsets are measured from.
# Keyed by axis since "center" is a token of both anchor enums.
ANCHOR_EDGES: dict[tuple[str, str], Edge] = {
    ("x", AnchorX.LEFT.value): Edge.START,
    ("x", AnchorX.CENTER.value): Edge.CENTER,
    ("x", AnchorX.RIGHT.value): Edge.END,
    ("y", AnchorY.TOP.value): Edge.START,
    ("y", AnchorY.CENTER.value): Edge.CENTER,
    ("y", AnchorY.BOTTOM.value): Edge.END,
}


@dataclass(frozen=True)
class LayoutValue:
    """A magnitude together with the unit that gives it meaning."""

    value: float = 0.0
    unit: Unit = Unit.PX

    def __post_init__(self) -> None:
        # Accept persisted tokens as well as enum members
        object.__setattr__(self, "unit", Unit(self.unit))
        object.__setattr__(self, "value", float(self.value))


@dataclass(frozen=True)
class LayoutConfig:
    """Source-of-truth layout of an element.

    Attributes:
        x: Horizontal offset from the anchored edge
        y: Vertical offset from the anchored edge
        width: Element width
        height: Element height
        z_index: Stacking order; higher is visually on top
        anchor_x: Horizontal edge the x offset is measured from
        anchor_y: Vertical edge the y offset is measured from
        is_container: Whether other elements may be parented to this one.
            ``None`` means not specified, which counts as a container.
    """

    x: LayoutValue = field(default_factory=LayoutValue)
    y: LayoutValue = field(default_factory=LayoutValue)
    width: LayoutValue = field(default_factory=LayoutValue)
    height: LayoutValue = field(default_factory=LayoutValue)
    z_index: int = 0
    anchor_x: AnchorX = AnchorX.LEFT
    anchor_y: AnchorY = AnchorY.TOP
    is_container: bool | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "anchor_x", AnchorX(self.anchor_x))
        object.__setattr__(self, "anchor_y", AnchorY(self.anchor_y))

    @property
    def accepts_children(self) -> bool:
        return self.is_container is not False

    def value_for(self, axis: Axis) -> LayoutValue:
        return getattr(self, axis)

    def anchor_for(self, axis: str) -> AnchorX | AnchorY:
        return self.anchor_x if axis == "x" else self.anchor_y

    def replace(self, **changes) -> LayoutConfig:
        """Return a copy with the given fields changed."""
        return replace(self, **changes)


@dataclass(frozen=True)
class Element:
    """An editor element: identity, metadata, layout and derived geometry.

    ``runtime`` is filled in by the layout engine and must never be treated
    as authoritative.
    """

    id: str
    name: str = ""
    kind: ElementKind = "rect"
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    runtime: RuntimeRect | None = field(default=None, compare=False)

    def with_layout(self, layout: LayoutConfig) -> Element:
        return replace(self, layout=layout)

    def with_runtime(self, runtime: RuntimeRect | None) -> Element:
        return replace(self, runtime=runtime)

    @property
    def parent_id(self) -> str | None:
        return self.runtime.parent_id if self.runtime is not None else None

    def __repr__(self) -> str:
        return f"Element({self.id!r}, name={self.name!r}, kind={self.kind!r})"
