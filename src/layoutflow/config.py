"""Defaults, viewport presets and resource paths."""

from pathlib import Path

from .core.element import AnchorX, AnchorY, Unit
from .core.rect import Viewport


ASSETS_PATH = Path(__file__).parent.parent.parent / "assets"

# Persisted-format defaults for absent fields
DEFAULT_UNIT = Unit.PX
DEFAULT_Z_INDEX = 0
DEFAULT_ANCHOR_X = AnchorX.LEFT
DEFAULT_ANCHOR_Y = AnchorY.TOP

# Geometry given to elements created in the editor
NEW_ELEMENT_POSITION = (100.0, 100.0)
NEW_ELEMENT_SIZE = (100.0, 100.0)
NEW_ELEMENT_NAMES = {"rect": "New Box", "circle": "New Circle"}

VIEWPORTS: dict[str, Viewport] = {
    "desktop": Viewport(1280, 800, "Desktop"),
    "tablet": Viewport(768, 1024, "Tablet"),
    "mobile": Viewport(375, 667, "Mobile"),
    "wide": Viewport(1920, 1080, "Wide"),
}

DEFAULT_VIEWPORT = VIEWPORTS["desktop"]


def get_viewport(name: str) -> Viewport:
    """Look up a viewport preset by name (case-insensitive).

    Raises:
        ValueError: If no preset has that name
    """
    try:
        return VIEWPORTS[name.lower()]
    except KeyError:
        choices = ", ".join(VIEWPORTS)
        raise ValueError(f"Unknown viewport {name!r} (choose from: {choices})") from None


def parse_size(text: str) -> Viewport:
    """Parse a ``WxH`` string such as ``"1024x768"`` into a custom viewport.

    Raises:
        ValueError: If the text is not two positive numbers separated by 'x'
    """
    try:
        width, height = (float(part) for part in text.lower().split("x"))
    except ValueError:
        raise ValueError(f"Invalid size {text!r}, expected WxH") from None
    if width <= 0 or height <= 0:
        raise ValueError(f"Invalid size {text!r}, dimensions must be positive")
    return Viewport(width, height)
