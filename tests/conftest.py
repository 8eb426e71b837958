"""Shared fixtures for layout tests."""

import pytest

from layoutflow.core import AnchorX, AnchorY, Element, LayoutConfig, LayoutValue, Unit, Viewport


def make_box(
    element_id: str,
    x: float = 0,
    y: float = 0,
    width: float = 100,
    height: float = 100,
    *,
    units: tuple[Unit, Unit, Unit, Unit] = (Unit.PX, Unit.PX, Unit.PX, Unit.PX),
    z: int = 0,
    anchor_x: AnchorX = AnchorX.LEFT,
    anchor_y: AnchorY = AnchorY.TOP,
    is_container: bool | None = None,
    kind: str = "rect",
) -> Element:
    """Build an element from plain numbers."""
    return Element(
        id=element_id,
        name=element_id.title(),
        kind=kind,
        layout=LayoutConfig(
            x=LayoutValue(x, units[0]),
            y=LayoutValue(y, units[1]),
            width=LayoutValue(width, units[2]),
            height=LayoutValue(height, units[3]),
            z_index=z,
            anchor_x=anchor_x,
            anchor_y=anchor_y,
            is_container=is_container,
        ),
    )


@pytest.fixture
def box():
    """Factory for pixel-based test elements."""
    return make_box


@pytest.fixture
def desktop() -> Viewport:
    return Viewport(1280, 800, "Desktop")
