"""YAML persistence of layout documents.

Only the persisted description is read and written: identity, metadata and
the layout config of each element. Runtime geometry is never stored and must
be recomputed against the active viewport after loading.

YAML format (a bare list of elements is accepted as well):

    viewport:            # optional
      name: Desktop
      width: 1280
      height: 800

    elements:
      - id: box-1
        type: rect       # rect | circle
        name: Header
        layout:
          x: {value: 0, unit: px}
          y: {value: 0, unit: px}
          width: {value: 100, unit: vw}
          height: {value: 80, unit: px}
          zIndex: 1        # default 0
          anchorX: left    # left | center | right, default left
          anchorY: top     # top | center | bottom, default top
          isContainer: false   # optional, default true
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Sequence

import yaml

from ..config import DEFAULT_ANCHOR_X, DEFAULT_ANCHOR_Y, DEFAULT_UNIT, DEFAULT_Z_INDEX
from ..core.element import AnchorX, AnchorY, Element, LayoutConfig, LayoutValue, Unit
from ..core.rect import Viewport

logger = logging.getLogger(__name__)

ELEMENT_KINDS = ("rect", "circle")
LAYOUT_VALUE_KEYS = ("x", "y", "width", "height")


class LayoutFormatError(ValueError):
    """Raised when a layout document is structurally invalid."""


@dataclass
class LayoutDocument:
    """A loaded layout file: its elements and the viewport it was saved with."""

    elements: list[Element]
    viewport: Viewport | None = None


class LayoutLoader:
    """Loads and dumps layout documents in YAML form."""

    def load(self, path: str | Path) -> list[Element]:
        """Load the elements of a layout file.

        Args:
            path: Path to the YAML file

        Returns:
            Elements in file order, without runtime geometry
        """
        return self.load_document(path).elements

    def load_string(self, yaml_string: str) -> list[Element]:
        """Load elements from a YAML string."""
        return self.parse(yaml.safe_load(yaml_string)).elements

    def load_document(self, path: str | Path) -> LayoutDocument:
        """Load a layout file including its optional viewport block."""
        path = Path(path)
        with open(path) as f:
            data = yaml.safe_load(f)
        logger.debug("Loaded layout document %s", path)
        return self.parse(data)

    def parse(self, data: Any) -> LayoutDocument:
        """Build a document from already-parsed YAML data."""
        viewport = None
        if data is None:
            items: Any = []
        elif isinstance(data, list):
            items = data
        elif isinstance(data, dict):
            items = data.get("elements", [])
            if data.get("viewport") is not None:
                viewport = self._parse_viewport(data["viewport"])
        else:
            raise LayoutFormatError("Layout document must be a list or a mapping")

        if not isinstance(items, list):
            raise LayoutFormatError("'elements' must be a list")

        elements = []
        seen: set[str] = set()
        for index, item in enumerate(items):
            element = self._parse_element(item, index)
            if element.id in seen:
                raise LayoutFormatError(f"Duplicate element id {element.id!r}")
            seen.add(element.id)
            elements.append(element)
        return LayoutDocument(elements=elements, viewport=viewport)

    def dump(self, elements: Sequence[Element], viewport: Viewport | None = None) -> str:
        """Serialize elements to YAML, leaving out runtime geometry.

        Args:
            elements: Elements to write, in order
            viewport: Optional viewport to record alongside the elements

        Returns:
            YAML text. Without a viewport this is a bare list of elements.
        """
        items = [self._element_to_dict(element) for element in elements]
        if viewport is None:
            data: Any = items
        else:
            data = {
                "viewport": {"name": viewport.name, "width": viewport.width, "height": viewport.height},
                "elements": items,
            }
        return yaml.safe_dump(data, sort_keys=False)

    def save(self, path: str | Path, elements: Sequence[Element], viewport: Viewport | None = None) -> None:
        """Write elements to a YAML file."""
        path = Path(path)
        with open(path, "w") as f:
            f.write(self.dump(elements, viewport))

    def _element_to_dict(self, element: Element) -> dict[str, Any]:
        layout = element.layout
        layout_data: dict[str, Any] = {
            key: {"value": layout.value_for(key).value, "unit": layout.value_for(key).unit.value}
            for key in LAYOUT_VALUE_KEYS
        }
        layout_data["zIndex"] = layout.z_index
        layout_data["anchorX"] = layout.anchor_x.value
        layout_data["anchorY"] = layout.anchor_y.value
        if layout.is_container is not None:
            layout_data["isContainer"] = layout.is_container

        return {
            "id": element.id,
            "type": element.kind,
            "name": element.name,
            "layout": layout_data,
        }

    def _parse_viewport(self, data: Any) -> Viewport:
        if not isinstance(data, dict):
            raise LayoutFormatError("'viewport' must be a mapping")
        try:
            return Viewport(
                width=float(data["width"]),
                height=float(data["height"]),
                name=str(data.get("name") or "Custom"),
            )
        except KeyError as e:
            raise LayoutFormatError(f"Viewport is missing {e.args[0]!r}") from None
        except (TypeError, ValueError):
            raise LayoutFormatError("Viewport width and height must be numbers") from None

    def _parse_element(self, data: Any, index: int) -> Element:
        if not isinstance(data, dict):
            raise LayoutFormatError(f"Element #{index} must be a mapping")
        if "id" not in data:
            raise LayoutFormatError(f"Element #{index} has no 'id'")

        element_id = str(data["id"])
        kind = data.get("type", "rect")
        if kind not in ELEMENT_KINDS:
            raise LayoutFormatError(f"Element {element_id!r}: unknown type {kind!r}")

        layout_data = data.get("layout")
        if not isinstance(layout_data, dict):
            raise LayoutFormatError(f"Element {element_id!r} has no 'layout' mapping")

        return Element(
            id=element_id,
            name=str(data.get("name") or element_id),
            kind=kind,
            layout=self._parse_layout(layout_data, element_id),
        )

    def _parse_layout(self, data: dict[str, Any], element_id: str) -> LayoutConfig:
        values = {}
        for key in LAYOUT_VALUE_KEYS:
            if key not in data:
                raise LayoutFormatError(f"Element {element_id!r}: layout is missing {key!r}")
            values[key] = self._parse_value(data[key], f"{element_id}.{key}")

        try:
            anchor_x = AnchorX(data.get("anchorX") or DEFAULT_ANCHOR_X)
            anchor_y = AnchorY(data.get("anchorY") or DEFAULT_ANCHOR_Y)
        except ValueError as e:
            raise LayoutFormatError(f"Element {element_id!r}: {e}") from None

        z_index = data.get("zIndex")
        if z_index is None:
            z_index = DEFAULT_Z_INDEX
        if isinstance(z_index, bool) or not isinstance(z_index, int):
            raise LayoutFormatError(f"Element {element_id!r}: zIndex must be an integer")

        is_container = data.get("isContainer")
        if is_container is not None and not isinstance(is_container, bool):
            raise LayoutFormatError(f"Element {element_id!r}: isContainer must be a boolean")

        return LayoutConfig(
            **values,
            z_index=z_index,
            anchor_x=anchor_x,
            anchor_y=anchor_y,
            is_container=is_container,
        )

    def _parse_value(self, data: Any, where: str) -> LayoutValue:
        if isinstance(data, (int, float)) and not isinstance(data, bool):
            return LayoutValue(data, DEFAULT_UNIT)
        if not isinstance(data, dict) or "value" not in data:
            raise LayoutFormatError(f"{where}: expected a mapping with 'value' and 'unit'")

        value = data["value"]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise LayoutFormatError(f"{where}: value must be a number")
        try:
            unit = Unit(data.get("unit", DEFAULT_UNIT))
        except ValueError:
            raise LayoutFormatError(f"{where}: unknown unit {data.get('unit')!r}") from None
        return LayoutValue(value, unit)
