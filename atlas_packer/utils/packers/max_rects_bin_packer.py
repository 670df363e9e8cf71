"""MaxRects algorithm for packing rectangles into a single fixed-size bin.

MIT License

Copyright (c) 2017 Yi

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.

The packer keeps a list of maximal free rectangles. When a rectangle is
placed, every free rectangle it overlaps is split into up to four smaller
ones around it, and free rectangles contained in another one are pruned.
Five heuristics decide where a new rectangle goes; all of them consider the
upright and the 90 degree rotated orientation.

Based on Jukka Jylanki's MAXRECTS data structure from "A Thousand Ways to
Pack the Bin", released to the public domain.

Typical usage example:
    packer = MaxRectsBinPacker(512, 512)
    requests = [RectSize("a", 100, 200), RectSize("b", 150, 100)]
    placed = packer.insert_batch(requests, FreeRectChoiceHeuristic.BEST_SHORT_SIDE_FIT)
    print(packer.occupancy())
"""

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional, Union

from .base_bin_packer import (
    BinPacker,
    UninitializedBinError,
    check_dimensions,
)
from .rectangles import PlacedRect, RectSize, is_contained_in

Score = Union[int, float]


class FreeRectChoiceHeuristic(IntEnum):
    """Rules for deciding where to place a new rectangle."""

    # Positions the rectangle against the short side of the free rectangle it fits best.
    BEST_SHORT_SIDE_FIT = 0
    # Positions the rectangle against the long side of the free rectangle it fits best.
    BEST_LONG_SIDE_FIT = 1
    # Positions the rectangle into the smallest free rectangle it fits.
    BEST_AREA_FIT = 2
    # Tetris placement.
    BOTTOM_LEFT_RULE = 3
    # Chooses the placement where the rectangle touches other rects the most.
    CONTACT_POINT_RULE = 4

    @property
    def code(self) -> str:
        return HEURISTIC_CODES[self]

    @classmethod
    def from_code(cls, code: str) -> "FreeRectChoiceHeuristic":
        """Looks a heuristic up by its short code, e.g. 'bssf' or 'CP'."""
        for heuristic, heuristic_code in HEURISTIC_CODES.items():
            if heuristic_code == code.upper():
                return heuristic
        raise ValueError("Unknown heuristic: {}".format(code))


HEURISTIC_CODES = {
    FreeRectChoiceHeuristic.BEST_SHORT_SIDE_FIT: "BSSF",
    FreeRectChoiceHeuristic.BEST_LONG_SIDE_FIT: "BLSF",
    FreeRectChoiceHeuristic.BEST_AREA_FIT: "BAF",
    FreeRectChoiceHeuristic.BOTTOM_LEFT_RULE: "BL",
    FreeRectChoiceHeuristic.CONTACT_POINT_RULE: "CP",
}


@dataclass(frozen=True)
class PlacementScore:
    """Where a rectangle would go and how good that spot is.

    Lower scores are better. When nothing fits, `placement` is the empty
    sentinel and both scores are infinite.

    Attributes:
        placement: The candidate placement.
        primary_score: The main ranking score of the heuristic.
        secondary_score: Breaks ties between equal primary scores.
    """

    placement: PlacedRect
    primary_score: Score
    secondary_score: Score

    @property
    def fits(self) -> bool:
        return bool(self.placement)

    def better_than(self, other: "PlacementScore") -> bool:
        return self.primary_score < other.primary_score or (
            self.primary_score == other.primary_score
            and self.secondary_score < other.secondary_score
        )

    @classmethod
    def no_fit(cls, name: str = "") -> "PlacementScore":
        return cls(PlacedRect.empty(name), math.inf, math.inf)


def _common_interval_length(
    i1_start: int, i1_end: int, i2_start: int, i2_end: int
) -> int:
    """Calculates the length of the overlap between two 1D intervals.

    Returns:
        The length of the common interval, 0 if there is no overlap.
    """
    if i1_end < i2_start or i2_end < i1_start:
        return 0
    return min(i1_end, i2_end) - max(i1_start, i2_start)


class MaxRectsBinPacker(BinPacker):
    """Implements the MaxRects algorithm for packing rectangles into one bin.

    A packer built with a (0, 0) size is uninitialized; call `init` before
    inserting. Calling `init` again discards every placement.

    Attributes:
        bin_width: Width of the bin, 0 while uninitialized.
        bin_height: Height of the bin, 0 while uninitialized.
    """

    def __init__(self, width: int = 0, height: int = 0) -> None:
        """Initializes the packer, creating a bin unless the size is (0, 0).

        Args:
            width: Width of the bin.
            height: Height of the bin.

        Raises:
            InvalidDimensionError: If the size is not (0, 0) and a side is
                not positive.
        """
        self.bin_width = 0
        self.bin_height = 0
        self._used_rectangles: List[PlacedRect] = []
        self._free_rectangles: List[PlacedRect] = []

        if width != 0 or height != 0:
            self.init(width, height)

    @property
    def is_initialized(self) -> bool:
        return self.bin_width > 0 and self.bin_height > 0

    @property
    def used_rectangles(self) -> List[PlacedRect]:
        return list(self._used_rectangles)

    def get_used_rectangles(self) -> List[PlacedRect]:
        return self.used_rectangles

    @property
    def free_rectangles(self) -> List[PlacedRect]:
        return list(self._free_rectangles)

    def init(self, width: int, height: int) -> None:
        """(Re)initializes the packer to an empty bin of width x height.

        Raises:
            InvalidDimensionError: If a side is not positive. The packer is
                left uninitialized.
        """
        self.bin_width = 0
        self.bin_height = 0
        self._used_rectangles = []
        self._free_rectangles = []

        check_dimensions(width, height, "Bin")

        self.bin_width = width
        self.bin_height = height
        self._free_rectangles.append(PlacedRect("", 0, 0, width, height))

    def _check_initialized(self) -> None:
        if not self.is_initialized:
            raise UninitializedBinError(
                "The packer has no bin, call init(width, height) first"
            )

    def insert(
        self,
        width: int,
        height: int,
        heuristic: FreeRectChoiceHeuristic,
        name: str = "",
    ) -> PlacedRect:
        """Inserts a single rectangle into the bin, possibly rotated.

        Args:
            width: Width of the rectangle.
            height: Height of the rectangle.
            heuristic: The placement rule to use.
            name: Identifier copied to the placement.

        Returns:
            The placement, or the empty sentinel if the rectangle does not
            fit. Nothing changes when it does not fit.

        Raises:
            InvalidDimensionError: If a side is not positive.
            UninitializedBinError: If the packer has no bin.
        """
        self._check_initialized()
        check_dimensions(width, height, "Rectangle '{}'".format(name))

        score = self.score_rect(width, height, heuristic, name)
        if not score.fits:
            return score.placement

        self._place_rect(score.placement)
        return score.placement

    def insert_one(
        self,
        width: int,
        height: int,
        heuristic: FreeRectChoiceHeuristic,
        name: str = "",
    ) -> PlacedRect:
        return self.insert(width, height, heuristic, name)

    def insert_batch(
        self,
        rects: List[RectSize],
        heuristic: FreeRectChoiceHeuristic,
        dst: Optional[List[PlacedRect]] = None,
    ) -> List[PlacedRect]:
        """Inserts a list of rectangles in offline mode, possibly rotated.

        Every round scores all pending rectangles and places the one with
        the best score, so the output order does not follow the input.
        Rectangles that fit nowhere are dropped and the remaining ones are
        still tried.

        Args:
            rects: The rectangles to insert. The packer takes ownership of
                this list and empties it.
            heuristic: The placement rule to use.
            dst: Optional list that receives the placements.

        Returns:
            The placements made by this call (`dst` itself when given).

        Raises:
            InvalidDimensionError: If a request has a non-positive side.
                Nothing is placed in that case.
            UninitializedBinError: If the packer has no bin.
        """
        self._check_initialized()
        for rect in rects:
            check_dimensions(rect.width, rect.height, "Rectangle '{}'".format(rect.name))

        if dst is None:
            dst = []

        while rects:
            best_score = PlacementScore.no_fit()
            best_index = -1

            for i, rect in enumerate(rects):
                score = self.score_rect(rect.width, rect.height, heuristic, rect.name)
                if score.fits and score.better_than(best_score):
                    best_score = score
                    best_index = i

            if best_index == -1:
                # Whatever is left fits nowhere.
                rects.clear()
                break

            self._place_rect(best_score.placement)
            dst.append(best_score.placement)
            rects.pop(best_index)

        return dst

    def occupancy(self) -> float:
        """Computes the ratio of used surface area to the total bin area."""
        self._check_initialized()
        used_surface_area = sum(rect.area for rect in self._used_rectangles)
        return used_surface_area / (self.bin_width * self.bin_height)

    def score_rect(
        self,
        width: int,
        height: int,
        heuristic: FreeRectChoiceHeuristic,
        name: str = "",
    ) -> PlacementScore:
        """Computes where a rectangle would go with the given heuristic.

        Nothing is placed.

        Returns:
            The best placement and its scores, or a no-fit score.
        """
        if heuristic == FreeRectChoiceHeuristic.BEST_SHORT_SIDE_FIT:
            score = self._find_position_bssf(width, height, name)
        elif heuristic == FreeRectChoiceHeuristic.BEST_LONG_SIDE_FIT:
            score = self._find_position_blsf(width, height, name)
        elif heuristic == FreeRectChoiceHeuristic.BEST_AREA_FIT:
            score = self._find_position_baf(width, height, name)
        elif heuristic == FreeRectChoiceHeuristic.BOTTOM_LEFT_RULE:
            score = self._find_position_bl(width, height, name)
        elif heuristic == FreeRectChoiceHeuristic.CONTACT_POINT_RULE:
            score = self._find_position_cp(width, height, name)
        else:
            raise ValueError("Unknown heuristic: {}".format(heuristic))

        # Cannot fit the current rectangle.
        if not score.fits:
            return PlacementScore.no_fit(name)
        return score

    def _candidates(self, width: int, height: int):
        """Yields (free_rect, width, height) for each orientation that fits."""
        for free_rect in self._free_rectangles:
            if free_rect.width >= width and free_rect.height >= height:
                yield free_rect, width, height
            if free_rect.width >= height and free_rect.height >= width:
                yield free_rect, height, width

    def _find_position_bssf(self, width: int, height: int, name: str) -> PlacementScore:
        best = PlacementScore.no_fit(name)

        for free_rect, w, h in self._candidates(width, height):
            leftover_horiz = free_rect.width - w
            leftover_vert = free_rect.height - h
            short_side_fit = min(leftover_horiz, leftover_vert)
            long_side_fit = max(leftover_horiz, leftover_vert)

            candidate = PlacementScore(
                PlacedRect(name, free_rect.x, free_rect.y, w, h),
                short_side_fit,
                long_side_fit,
            )
            if candidate.better_than(best):
                best = candidate

        return best

    def _find_position_blsf(self, width: int, height: int, name: str) -> PlacementScore:
        best = PlacementScore.no_fit(name)

        for free_rect, w, h in self._candidates(width, height):
            leftover_horiz = free_rect.width - w
            leftover_vert = free_rect.height - h
            short_side_fit = min(leftover_horiz, leftover_vert)
            long_side_fit = max(leftover_horiz, leftover_vert)

            candidate = PlacementScore(
                PlacedRect(name, free_rect.x, free_rect.y, w, h),
                long_side_fit,
                short_side_fit,
            )
            if candidate.better_than(best):
                best = candidate

        return best

    def _find_position_baf(self, width: int, height: int, name: str) -> PlacementScore:
        best = PlacementScore.no_fit(name)

        for free_rect, w, h in self._candidates(width, height):
            leftover_horiz = free_rect.width - w
            leftover_vert = free_rect.height - h
            area_fit = free_rect.area - w * h
            short_side_fit = min(leftover_horiz, leftover_vert)

            candidate = PlacementScore(
                PlacedRect(name, free_rect.x, free_rect.y, w, h),
                area_fit,
                short_side_fit,
            )
            if candidate.better_than(best):
                best = candidate

        return best

    def _find_position_bl(self, width: int, height: int, name: str) -> PlacementScore:
        """Places the rectangle where its bottom edge is highest up, then leftmost."""
        best = PlacementScore.no_fit(name)

        for free_rect, w, h in self._candidates(width, height):
            candidate = PlacementScore(
                PlacedRect(name, free_rect.x, free_rect.y, w, h),
                free_rect.y + h,
                free_rect.x,
            )
            if candidate.better_than(best):
                best = candidate

        return best

    def _find_position_cp(self, width: int, height: int, name: str) -> PlacementScore:
        """Maximizes the contact with the bin edges and placed rectangles.

        The contact score is negated so that lower is better, as for the
        other heuristics.
        """
        best = PlacementScore.no_fit(name)

        for free_rect, w, h in self._candidates(width, height):
            contact_score = self.contact_point_score_node(free_rect.x, free_rect.y, w, h)
            candidate = PlacementScore(
                PlacedRect(name, free_rect.x, free_rect.y, w, h),
                -contact_score,
                0,
            )
            if candidate.better_than(best):
                best = candidate

        return best

    def contact_point_score_node(self, x: int, y: int, width: int, height: int) -> int:
        """Calculates the contact point score for a potential placement.

        The score is the total length of the rectangle's edges that touch
        the bin boundaries or placed rectangles.

        Args:
            x: The left x-coordinate of the potential placement.
            y: The top y-coordinate of the potential placement.
            width: The width of the rectangle being placed.
            height: The height of the rectangle being placed.

        Returns:
            The contact point score.
        """
        score = 0
        right = x + width
        bottom = y + height

        if x == 0 or right == self.bin_width:
            score += height
        if y == 0 or bottom == self.bin_height:
            score += width

        for rect in self._used_rectangles:
            if rect.x == right or rect.right == x:
                score += _common_interval_length(rect.y, rect.bottom, y, bottom)
            if rect.y == bottom or rect.bottom == y:
                score += _common_interval_length(rect.x, rect.right, x, right)
        return score

    def _place_rect(self, node: PlacedRect) -> None:
        """Commits a placement and updates the free rectangles list.

        Every free rectangle the placement overlaps is replaced by its
        split pieces, then redundant free rectangles are pruned.
        """
        i = 0
        num_free_rects = len(self._free_rectangles)
        while i < num_free_rects:
            if self.split_free_node(self._free_rectangles[i], node):
                # The split pieces were appended past num_free_rects.
                self._free_rectangles.pop(i)
                num_free_rects -= 1
            else:
                i += 1

        self.prune_free_list()
        self._used_rectangles.append(node)

    def split_free_node(self, free_node: PlacedRect, used_node: PlacedRect) -> bool:
        """Splits a free rectangle around an overlapping used rectangle.

        The pieces left over above, below, left and right of `used_node`
        inside `free_node` are appended to the free list. The caller removes
        `free_node` itself.

        Args:
            free_node: The free rectangle to potentially split.
            used_node: The rectangle that has been placed.

        Returns:
            True if the rectangles overlap and `free_node` was split, False
            if they do not overlap.
        """
        if (
            used_node.x >= free_node.right
            or used_node.right <= free_node.x
            or used_node.y >= free_node.bottom
            or used_node.bottom <= free_node.y
        ):
            return False

        if free_node.y < used_node.y < free_node.bottom:
            self._free_rectangles.append(
                PlacedRect(
                    "",
                    free_node.x,
                    free_node.y,
                    free_node.width,
                    used_node.y - free_node.y,
                )
            )

        if used_node.bottom < free_node.bottom:
            self._free_rectangles.append(
                PlacedRect(
                    "",
                    free_node.x,
                    used_node.bottom,
                    free_node.width,
                    free_node.bottom - used_node.bottom,
                )
            )

        if free_node.x < used_node.x < free_node.right:
            self._free_rectangles.append(
                PlacedRect(
                    "",
                    free_node.x,
                    free_node.y,
                    used_node.x - free_node.x,
                    free_node.height,
                )
            )

        if used_node.right < free_node.right:
            self._free_rectangles.append(
                PlacedRect(
                    "",
                    used_node.right,
                    free_node.y,
                    free_node.right - used_node.right,
                    free_node.height,
                )
            )

        return True

    def prune_free_list(self) -> None:
        """Removes free rectangles contained in another free rectangle.

        Of two identical free rectangles, the one later in the list is kept.
        """
        pruned = []
        for k_idx, rect_k in enumerate(self._free_rectangles):
            redundant = False
            for m_idx, rect_m in enumerate(self._free_rectangles):
                if k_idx == m_idx or not is_contained_in(rect_k, rect_m):
                    continue
                # Identical rectangles contain each other, keep the last one.
                if rect_k != rect_m or k_idx < m_idx:
                    redundant = True
                    break
            if not redundant:
                pruned.append(rect_k)

        self._free_rectangles = pruned
