"""Tests for the rectangle primitives."""

import pytest

from atlas_packer.utils.packers import (
    DisjointRectCollection,
    PlacedRect,
    RectSize,
    compare_rect_short_side,
    is_contained_in,
    is_disjoint,
    node_sort_key,
)


class TestPlacedRect:
    def test_edges_and_area(self):
        rect = PlacedRect("a", 2, 3, 4, 5)

        assert rect.right == 6
        assert rect.bottom == 8
        assert rect.area == 20

    def test_empty_sentinel_is_falsy(self):
        assert not PlacedRect.empty()
        assert not PlacedRect("a", 3, 3, 0, 5)
        assert PlacedRect("a", 0, 0, 1, 1)

    def test_is_immutable(self):
        rect = PlacedRect("a", 0, 0, 1, 1)
        with pytest.raises(AttributeError):
            rect.x = 4

    def test_rect_size_area(self):
        assert RectSize("a", 3, 7).area == 21


class TestPredicates:
    def test_touching_rectangles_are_disjoint(self):
        a = PlacedRect("a", 0, 0, 10, 10)

        assert is_disjoint(a, PlacedRect("b", 10, 0, 5, 5))
        assert is_disjoint(a, PlacedRect("c", 0, 10, 5, 5))

    def test_overlapping_rectangles_are_not_disjoint(self):
        a = PlacedRect("a", 0, 0, 10, 10)
        b = PlacedRect("b", 9, 9, 5, 5)

        assert not is_disjoint(a, b)
        assert not is_disjoint(b, a)

    def test_containment(self):
        outer = PlacedRect("", 0, 0, 10, 10)
        inner = PlacedRect("", 2, 2, 3, 3)

        assert is_contained_in(inner, outer)
        assert not is_contained_in(outer, inner)
        assert not is_contained_in(PlacedRect("", 8, 8, 3, 3), outer)

    def test_identical_rectangles_contain_each_other(self):
        a = PlacedRect("", 1, 1, 4, 4)
        b = PlacedRect("", 1, 1, 4, 4)

        assert is_contained_in(a, b)
        assert is_contained_in(b, a)

    @pytest.mark.parametrize("a, b, expected", [
        ((2, 5), (3, 1), 1),
        ((3, 1), (2, 5), -1),
        ((2, 5), (5, 2), 0),
        ((2, 5), (2, 6), -1),
    ])
    def test_compare_rect_short_side(self, a, b, expected):
        rect_a = PlacedRect("a", 0, 0, *a)
        rect_b = PlacedRect("b", 0, 0, *b)

        assert compare_rect_short_side(rect_a, rect_b) == expected

    def test_node_sort_key(self):
        rects = [
            PlacedRect("c", 1, 0, 1, 1),
            PlacedRect("b", 0, 1, 1, 1),
            PlacedRect("a", 0, 0, 2, 1),
            PlacedRect("d", 0, 0, 1, 1),
        ]

        assert [r.name for r in sorted(rects, key=node_sort_key)] == ["d", "a", "b", "c"]


class TestDisjointRectCollection:
    def test_refuses_overlapping_rectangle(self):
        collection = DisjointRectCollection()

        assert collection.add(PlacedRect("a", 0, 0, 4, 4))
        assert collection.add(PlacedRect("b", 4, 0, 4, 4))
        assert not collection.add(PlacedRect("c", 3, 3, 2, 2))
        assert len(collection) == 2

    def test_ignores_degenerate_rectangles(self):
        collection = DisjointRectCollection()
        collection.add(PlacedRect("a", 0, 0, 4, 4))

        assert collection.add(PlacedRect("b", 1, 1, 0, 2))
        assert collection.disjoint(PlacedRect.empty())
        assert len(collection) == 1

    def test_clear(self):
        collection = DisjointRectCollection()
        collection.add(PlacedRect("a", 0, 0, 4, 4))
        collection.clear()

        assert collection.add(PlacedRect("b", 0, 0, 4, 4))
