# MIT License

# Copyright (c) 2018 shotariya

# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:

# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.

# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

from enum import Enum
from typing import List, Tuple

from .base_bin_packer import (
    BinPacker,
    InvalidDimensionError,
    PackingError,
    UninitializedBinError,
)
from .max_rects_bin_packer import (
    FreeRectChoiceHeuristic,
    MaxRectsBinPacker,
    PlacementScore,
)
from .rectangles import (
    DisjointRectCollection,
    PlacedRect,
    RectSize,
    compare_rect_short_side,
    is_contained_in,
    is_disjoint,
    node_sort_key,
)


class PackerKind(Enum):
    MAX_RECTS = "MAX_RECTS"


_PACKERS = {
    PackerKind.MAX_RECTS: MaxRectsBinPacker,
}


def create_packer(kind: PackerKind = PackerKind.MAX_RECTS, width: int = 0, height: int = 0) -> BinPacker:
    try:
        packer_type = _PACKERS[PackerKind(kind)]
    except (KeyError, ValueError) as e:
        raise PackingError("Unknown packer type: {}".format(kind)) from e
    return packer_type(width, height)


def pack(
    requests: List[RectSize],
    width: int,
    height: int,
    heuristic: FreeRectChoiceHeuristic = FreeRectChoiceHeuristic.BEST_SHORT_SIDE_FIT,
    kind: PackerKind = PackerKind.MAX_RECTS,
) -> Tuple[List[PlacedRect], float]:
    """Packs a copy of `requests` into a new bin.

    Returns:
        The placements and the resulting occupancy of the bin.
    """
    packer = create_packer(kind, width, height)
    placed = packer.insert_batch(list(requests), heuristic)
    return placed, packer.occupancy()


__all__ = [
    "BinPacker",
    "DisjointRectCollection",
    "FreeRectChoiceHeuristic",
    "InvalidDimensionError",
    "MaxRectsBinPacker",
    "PackerKind",
    "PackingError",
    "PlacedRect",
    "PlacementScore",
    "RectSize",
    "UninitializedBinError",
    "compare_rect_short_side",
    "create_packer",
    "is_contained_in",
    "is_disjoint",
    "node_sort_key",
    "pack",
]
