"""Tests for parent inference by center containment."""

from layoutflow.core import Rect
from layoutflow.layout.containment import candidate_parents, containment_matrix, resolve_parents

from conftest import make_box


def _rects(elements):
    return [
        Rect(el.layout.x.value, el.layout.y.value, el.layout.width.value, el.layout.height.value)
        for el in elements
    ]


def test_smaller_container_wins_on_equal_z():
    """Two overlapping containers at the same z: the tighter one is the parent."""
    elements = [
        make_box("big", 0, 0, 500, 500, z=1),
        make_box("small", 0, 0, 300, 300, z=1),
        make_box("child", 100, 100, 20, 20, z=5),
    ]
    parents = resolve_parents(elements, _rects(elements))
    assert parents["child"] == "small"


def test_higher_z_beats_smaller_area():
    elements = [
        make_box("big", 0, 0, 500, 500, z=3),
        make_box("small", 0, 0, 300, 300, z=1),
        make_box("child", 100, 100, 20, 20, z=5),
    ]
    assert resolve_parents(elements, _rects(elements))["child"] == "big"


def test_input_order_breaks_full_ties():
    elements = [
        make_box("first", 0, 0, 200, 200),
        make_box("second", 0, 0, 200, 200),
        make_box("child", 50, 50, 10, 10),
    ]
    assert resolve_parents(elements, _rects(elements))["child"] == "first"

    reordered = [elements[1], elements[0], elements[2]]
    assert resolve_parents(reordered, _rects(reordered))["child"] == "second"


def test_non_container_is_never_a_parent():
    elements = [
        make_box("frame", 0, 0, 400, 400, z=9, is_container=False),
        make_box("child", 10, 10, 20, 20),
    ]
    assert resolve_parents(elements, _rects(elements))["child"] is None


def test_closed_bounds():
    """A center lying exactly on the container edge still counts as inside."""
    elements = [
        make_box("container", 0, 0, 100, 100),
        make_box("child", 90, 90, 20, 20),
    ]
    assert resolve_parents(elements, _rects(elements))["child"] == "container"


def test_center_outside_means_root():
    elements = [
        make_box("container", 0, 0, 100, 100),
        make_box("child", 95, 95, 20, 20),
    ]
    assert resolve_parents(elements, _rects(elements))["child"] is None


def test_element_is_not_its_own_candidate():
    elements = [make_box("solo", 0, 0, 100, 100)]
    matrix = containment_matrix(elements, _rects(elements))
    assert not matrix.any()
    assert resolve_parents(elements, _rects(elements)) == {"solo": None}


def test_candidates_are_ordered_best_first():
    elements = [
        make_box("a", 0, 0, 500, 500, z=1),
        make_box("b", 0, 0, 300, 300, z=1),
        make_box("c", 0, 0, 600, 600, z=2),
        make_box("child", 10, 10, 10, 10),
    ]
    assert candidate_parents(3, elements, _rects(elements)) == [2, 1, 0]


def test_negative_z_orders_below_zero():
    elements = [
        make_box("below", 0, 0, 100, 100, z=-1),
        make_box("default", 0, 0, 200, 200),
        make_box("child", 10, 10, 10, 10),
    ]
    assert resolve_parents(elements, _rects(elements))["child"] == "default"


def test_repeated_runs_are_identical():
    elements = [make_box(f"el-{i}", i * 10, i * 10, 300 - i * 20, 300 - i * 20, z=i % 3) for i in range(12)]
    rects = _rects(elements)
    first = resolve_parents(elements, rects)
    for _ in range(5):
        assert resolve_parents(elements, rects) == first


def test_empty_input():
    assert resolve_parents([], []) == {}
