"""Tests for anchored offset conversion."""

import itertools

import pytest

from layoutflow.core import ANCHOR_EDGES, AnchorX, AnchorY, Edge, LayoutValue, Rect, Unit, Viewport
from layoutflow.layout.anchors import (
    absolute_to_offset,
    offset_to_absolute,
    reference_rect,
    resolve_anchor,
)

VIEWPORT = Viewport(1280, 800)
PARENT = Rect(200, 120, 300, 250)


@pytest.mark.parametrize(
    "anchor,expected",
    [
        (AnchorX.LEFT, 200 + 10),
        (AnchorX.RIGHT, 200 + 300 - 10 - 50),
        (AnchorX.CENTER, 200 + 150 + 10 - 25),
    ],
)
def test_forward_horizontal(anchor, expected):
    value = LayoutValue(10, Unit.PX)
    assert offset_to_absolute(value, anchor, 50, VIEWPORT, PARENT) == expected


@pytest.mark.parametrize(
    "anchor,expected",
    [
        (AnchorY.TOP, 120 + 20),
        (AnchorY.BOTTOM, 120 + 250 - 20 - 40),
        (AnchorY.CENTER, 120 + 125 + 20 - 20),
    ],
)
def test_forward_vertical(anchor, expected):
    value = LayoutValue(20, Unit.PX)
    assert offset_to_absolute(value, anchor, 40, VIEWPORT, PARENT) == expected


def test_negative_offset_is_legal():
    value = LayoutValue(-30, Unit.PX)
    assert offset_to_absolute(value, AnchorX.LEFT, 50, VIEWPORT, PARENT) == 170
    assert offset_to_absolute(value, AnchorX.RIGHT, 50, VIEWPORT, PARENT) == 480


def test_viewport_units_use_viewport_as_reference():
    """A vw offset ignores the parent and measures from the viewport edge."""
    value = LayoutValue(10, Unit.VW)
    assert offset_to_absolute(value, AnchorX.LEFT, 50, VIEWPORT, PARENT) == 128
    assert offset_to_absolute(value, AnchorX.RIGHT, 50, VIEWPORT, PARENT) == 1280 - 128 - 50


def test_reference_rect_selection():
    assert reference_rect(Unit.VH, VIEWPORT, PARENT) == Rect(0, 0, 1280, 800)
    assert reference_rect(Unit.PX, VIEWPORT, PARENT) is PARENT
    assert reference_rect(Unit.PERCENT_PARENT_H, VIEWPORT, PARENT) is PARENT


def test_string_anchor_tokens():
    value = LayoutValue(5, Unit.PX)
    assert offset_to_absolute(value, "right", 10, VIEWPORT, PARENT) == 485
    assert offset_to_absolute(value, "bottom", 10, VIEWPORT, PARENT) == 355
    assert offset_to_absolute(value, "center", 10, VIEWPORT, PARENT, axis="y") == 245 + 5 - 5


def test_center_token_needs_axis():
    with pytest.raises(ValueError):
        resolve_anchor("center")
    assert resolve_anchor("center", "x") is AnchorX.CENTER
    assert resolve_anchor("center", "y") is AnchorY.CENTER


def test_edge_table_covers_both_axes():
    assert len(ANCHOR_EDGES) == len(AnchorX) + len(AnchorY)
    assert ANCHOR_EDGES["x", "right"] is Edge.END
    assert ANCHOR_EDGES["y", "top"] is Edge.START
    assert ANCHOR_EDGES["x", "center"] is ANCHOR_EDGES["y", "center"] is Edge.CENTER


HORIZONTAL = [(anchor, "x") for anchor in AnchorX]
VERTICAL = [(anchor, "y") for anchor in AnchorY]


@pytest.mark.parametrize(
    "anchor_axis,unit,position",
    list(itertools.product(HORIZONTAL + VERTICAL, list(Unit), [-40.0, 0.0, 233.7])),
)
def test_inverse_then_forward_round_trip(anchor_axis, unit, position):
    """Re-expressing an absolute position never moves the element."""
    anchor, _ = anchor_axis
    size = 64.0
    magnitude = absolute_to_offset(position, anchor, size, unit, VIEWPORT, PARENT)
    back = offset_to_absolute(LayoutValue(magnitude, unit), anchor, size, VIEWPORT, PARENT)
    assert back == pytest.approx(position, abs=1e-9)


def test_round_trip_is_exact_for_percent_of_parent():
    parent = Rect(0, 0, 640, 400)
    magnitude = absolute_to_offset(10, AnchorX.LEFT, 50, Unit.PERCENT_PARENT_W, VIEWPORT, parent)
    assert magnitude == 1.5625
    back = offset_to_absolute(LayoutValue(magnitude, Unit.PERCENT_PARENT_W), AnchorX.LEFT, 50, VIEWPORT, parent)
    assert back == 10


def test_anchor_switch_keeps_position():
    """Moving from a left to a right anchor re-measures from the other edge."""
    parent = Rect(0, 0, 300, 200)
    magnitude = absolute_to_offset(100, AnchorX.RIGHT, 50, Unit.PX, VIEWPORT, parent)
    assert magnitude == 150
    assert offset_to_absolute(LayoutValue(magnitude), AnchorX.RIGHT, 50, VIEWPORT, parent) == 100


def test_inverse_against_zero_sized_reference():
    empty = Rect(30, 30, 0, 0)
    assert absolute_to_offset(90, AnchorX.LEFT, 10, Unit.PERCENT_PARENT_W, VIEWPORT, empty) == 0
