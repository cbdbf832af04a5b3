import numpy as np
import pytest

from sheet_packer import Layout, Position, Shape, pack, pack_sizes


def test_pack_wraps_packer_result():
    layout = pack([Shape(10, 10), Shape(10, 10), Shape(3, 3, is_alias=True)])

    assert layout.positions == [Position(0, 0), Position(10, 0), Position(0, 0)]
    assert layout.size == (20, 10)
    assert len(layout) == 3
    assert layout[1] == Position(10, 0)
    assert list(layout) == layout.positions


def test_pack_sizes():
    layout = pack_sizes([(10, 30), (10, 10)])

    assert layout.positions == [Position(0, 0), Position(10, 0)]
    assert layout.size == (20, 30)


def test_empty_layout():
    layout = pack([])

    assert layout.positions == []
    assert layout.size == (0, 0)
    assert layout.utilization == 0.0
    assert layout.rectangles().shape == (0, 4)
    assert layout.overlapping_pairs() == []
    assert layout.out_of_bounds() == []


def test_rectangles_skip_aliases():
    layout = Layout(
        [Shape(4, 2), Shape(9, 9, is_alias=True), Shape(1, 3)],
        [Position(0, 0), Position(0, 0), Position(4, 0)],
        5,
        3,
    )

    assert layout.packed_indices() == [0, 2]
    np.testing.assert_array_equal(layout.rectangles(), [[0, 0, 4, 2], [4, 0, 5, 3]])


def test_utilization():
    layout = pack_sizes([(10, 10), (10, 10)])

    assert layout.utilization == pytest.approx(1.0)

    layout = Layout([Shape(5, 10)], [Position(0, 0)], 10, 10)
    assert layout.utilization == pytest.approx(0.5)


def test_overlapping_pairs_reports_input_indices():
    layout = Layout(
        [Shape(4, 4), Shape(1, 1, is_alias=True), Shape(4, 4), Shape(2, 2)],
        [Position(0, 0), Position(0, 0), Position(3, 3), Position(4, 0)],
        8,
        8,
    )

    assert layout.overlapping_pairs() == [(0, 2)]


def test_touching_edges_do_not_overlap():
    layout = Layout(
        [Shape(2, 2), Shape(2, 2), Shape(2, 2)],
        [Position(0, 0), Position(2, 0), Position(0, 2)],
        4,
        4,
    )

    assert layout.overlapping_pairs() == []


def test_overlap_tolerance():
    layout = Layout(
        [Shape(2.0, 2.0), Shape(2.0, 2.0)],
        [Position(0.0, 0.0), Position(1.9999999, 0.0)],
        4.0,
        2.0,
    )

    assert layout.overlapping_pairs() == [(0, 1)]
    assert layout.overlapping_pairs(tolerance=1e-6) == []


def test_out_of_bounds():
    layout = Layout(
        [Shape(4, 4), Shape(4, 4), Shape(4, 4, is_alias=True)],
        [Position(0, 0), Position(3, 0), Position(50, 50)],
        6,
        4,
    )

    assert layout.out_of_bounds() == [1]


def test_mismatched_lengths_rejected():
    with pytest.raises(ValueError):
        Layout([Shape(1, 1)], [], 1, 1)
