"""Sample layout documents."""

from .config import ASSETS_PATH
from .core.element import AnchorX, AnchorY, Element, LayoutConfig, LayoutValue, Unit
from .layout import LayoutLoader


def create_starter_layout() -> list[Element]:
    """The document a new editor session starts with.

    A full-width header, a centered container and a floating circle pinned
    to the bottom-right corner.
    """
    return [
        Element(
            id="box-1",
            name="Header",
            kind="rect",
            layout=LayoutConfig(
                x=LayoutValue(0, Unit.PX),
                y=LayoutValue(0, Unit.PX),
                width=LayoutValue(100, Unit.VW),
                height=LayoutValue(80, Unit.PX),
                z_index=1,
            ),
        ),
        Element(
            id="box-2",
            name="Container",
            kind="rect",
            layout=LayoutConfig(
                x=LayoutValue(0, Unit.PX),
                y=LayoutValue(100, Unit.PX),
                width=LayoutValue(80, Unit.PERCENT_PARENT_W),
                height=LayoutValue(400, Unit.PX),
                z_index=2,
                anchor_x=AnchorX.CENTER,
            ),
        ),
        Element(
            id="box-3",
            name="Floater",
            kind="circle",
            layout=LayoutConfig(
                x=LayoutValue(20, Unit.PX),
                y=LayoutValue(20, Unit.PX),
                width=LayoutValue(50, Unit.PX),
                height=LayoutValue(50, Unit.PX),
                z_index=3,
                anchor_x=AnchorX.RIGHT,
                anchor_y=AnchorY.BOTTOM,
            ),
        ),
    ]


def create_dashboard_layout() -> list[Element]:
    """A nested sidebar/content layout loaded from the bundled assets."""
    return LayoutLoader().load(ASSETS_PATH / "dashboard.yaml")


SAMPLES = {
    "starter": create_starter_layout,
    "dashboard": create_dashboard_layout,
}
