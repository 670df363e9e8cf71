"""Common interface and errors for fixed-size bin packers.

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

Every packing strategy manages exactly one bin and exposes the same set of
operations, so callers can swap strategies without code changes.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from .rectangles import PlacedRect, RectSize


class PackingError(Exception):
    """Indicates an error occurred during the packing process."""

    pass


class InvalidDimensionError(PackingError, ValueError):
    """A bin or a requested rectangle has a non-positive width or height."""

    pass


class UninitializedBinError(PackingError, RuntimeError):
    """A packer was used before it was given a bin."""

    pass


def check_dimensions(width: int, height: int, what: str) -> None:
    """Raises `InvalidDimensionError` unless both sides are positive.

    Args:
        width: The width to check.
        height: The height to check.
        what: Describes the checked object in the error message.
    """
    if not (width > 0 and height > 0):
        raise InvalidDimensionError(
            "{} has non-positive dimensions: ({}x{})".format(what, width, height)
        )


class BinPacker(ABC):
    """A packer that places rectangles into a single bin of fixed size."""

    @abstractmethod
    def init(self, width: int, height: int) -> None:
        """(Re)initializes the packer to an empty bin of width x height."""

    @abstractmethod
    def insert_one(
        self, width: int, height: int, heuristic, name: str = ""
    ) -> PlacedRect:
        """Inserts a single rectangle, returning the empty sentinel on no fit."""

    @abstractmethod
    def insert_batch(
        self,
        rects: List[RectSize],
        heuristic,
        dst: Optional[List[PlacedRect]] = None,
    ) -> List[PlacedRect]:
        """Inserts a list of rectangles, consuming the list."""

    @abstractmethod
    def occupancy(self) -> float:
        """Returns the ratio of used surface area to the total bin area."""

    @property
    @abstractmethod
    def used_rectangles(self) -> List[PlacedRect]:
        """Returns a snapshot of the placed rectangles."""
