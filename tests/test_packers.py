"""Tests for choosing a packer and the one-call pack helper."""

import pytest

from atlas_packer.utils.packers import (
    BinPacker,
    FreeRectChoiceHeuristic,
    InvalidDimensionError,
    MaxRectsBinPacker,
    PackerKind,
    PackingError,
    RectSize,
    UninitializedBinError,
    create_packer,
    pack,
)


class TestCreatePacker:
    def test_default_packer_is_uninitialized_max_rects(self):
        packer = create_packer()

        assert isinstance(packer, MaxRectsBinPacker)
        assert isinstance(packer, BinPacker)
        assert not packer.is_initialized

    def test_with_bin_size(self):
        packer = create_packer(PackerKind.MAX_RECTS, 32, 16)

        assert (packer.bin_width, packer.bin_height) == (32, 16)

    def test_accepts_kind_value(self):
        assert isinstance(create_packer("MAX_RECTS"), MaxRectsBinPacker)

    def test_unknown_kind(self):
        with pytest.raises(PackingError):
            create_packer("GUILLOTINE")

    def test_invalid_bin(self):
        with pytest.raises(InvalidDimensionError):
            create_packer(PackerKind.MAX_RECTS, 0, 5)


class TestPack:
    def test_returns_placements_and_occupancy(self):
        requests = [RectSize("a", 2, 2), RectSize("b", 2, 2)]

        placed, occupancy = pack(requests, 4, 2)

        assert sorted(r.name for r in placed) == ["a", "b"]
        assert occupancy == 1.0

    def test_does_not_consume_requests(self):
        requests = [RectSize("a", 2, 2)]

        pack(requests, 4, 4, FreeRectChoiceHeuristic.BOTTOM_LEFT_RULE)

        assert requests == [RectSize("a", 2, 2)]


class TestErrors:
    def test_error_hierarchy(self):
        assert issubclass(InvalidDimensionError, PackingError)
        assert issubclass(InvalidDimensionError, ValueError)
        assert issubclass(UninitializedBinError, PackingError)
        assert issubclass(UninitializedBinError, RuntimeError)


class TestHeuristic:
    def test_values_follow_conventional_order(self):
        assert [h.value for h in FreeRectChoiceHeuristic] == [0, 1, 2, 3, 4]
        assert FreeRectChoiceHeuristic(4) is FreeRectChoiceHeuristic.CONTACT_POINT_RULE

    @pytest.mark.parametrize("code, heuristic", [
        ("bssf", FreeRectChoiceHeuristic.BEST_SHORT_SIDE_FIT),
        ("BLSF", FreeRectChoiceHeuristic.BEST_LONG_SIDE_FIT),
        ("baf", FreeRectChoiceHeuristic.BEST_AREA_FIT),
        ("bl", FreeRectChoiceHeuristic.BOTTOM_LEFT_RULE),
        ("Cp", FreeRectChoiceHeuristic.CONTACT_POINT_RULE),
    ])
    def test_from_code(self, code, heuristic):
        assert FreeRectChoiceHeuristic.from_code(code) is heuristic
        assert heuristic.code == code.upper()

    def test_unknown_code(self):
        with pytest.raises(ValueError):
            FreeRectChoiceHeuristic.from_code("tetris")
