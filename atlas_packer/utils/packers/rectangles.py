"""Rectangle primitives shared by the bin packers.

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

A packing request is a `RectSize` (a named width and height), and the outcome
of a placement is a `PlacedRect`. A placed rectangle whose width or height is
zero is the sentinel for "no placement found".

Coordinates treat (0, 0) as the top left corner of the bin, so `bottom` is
the larger y coordinate.

Typical usage example:
    a = PlacedRect("a", 0, 0, 10, 10)
    b = PlacedRect("b", 10, 0, 5, 5)
    assert is_disjoint(a, b)
"""

from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class RectSize:
    """A packing request.

    Attributes:
        name: An identifier for the request, copied to its placement.
        width: The requested width.
        height: The requested height.
    """

    name: str
    width: int
    height: int

    @property
    def area(self) -> int:
        return self.width * self.height


@dataclass(frozen=True)
class PlacedRect:
    """A rectangle with position and dimensions.

    Attributes:
        name: An identifier for the rectangle.
        x: The x-coordinate of the left edge.
        y: The y-coordinate of the top edge.
        width: The width of the rectangle.
        height: The height of the rectangle.
    """

    name: str
    x: int
    y: int
    width: int
    height: int

    @classmethod
    def empty(cls, name: str = "") -> "PlacedRect":
        """Returns the zero-area sentinel used when nothing could be placed."""
        return cls(name, 0, 0, 0, 0)

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    def __bool__(self) -> bool:
        return self.width > 0 and self.height > 0

    def __str__(self) -> str:
        return "[Rect(name:{}, x:{}, y:{}, w:{}, h:{})]".format(
            self.name, self.x, self.y, self.width, self.height
        )


def is_disjoint(a: PlacedRect, b: PlacedRect) -> bool:
    """Checks that two rectangles share no area.

    Rectangles that only touch along an edge are disjoint.

    Args:
        a: The first rectangle.
        b: The second rectangle.

    Returns:
        True if the rectangles do not overlap, False otherwise.
    """
    return (
        a.right <= b.x
        or b.right <= a.x
        or a.bottom <= b.y
        or b.bottom <= a.y
    )


def is_contained_in(a: PlacedRect, b: PlacedRect) -> bool:
    """Checks if `a` lies completely inside `b`.

    Args:
        a: The rectangle to test.
        b: The potential container.

    Returns:
        True if a is contained in b, False otherwise. Identical rectangles
        contain each other.
    """
    return (
        a.x >= b.x
        and a.y >= b.y
        and a.right <= b.right
        and a.bottom <= b.bottom
    )


def compare_rect_short_side(a: PlacedRect, b: PlacedRect) -> int:
    """Performs a lexicographic compare on (short side, long side).

    Returns:
        -1 if the smaller side of a is shorter than the smaller side of b,
        1 if the other way around. If they are equal, the larger side is
        used as a tie-breaker. Rectangles of the same size return 0.
    """
    key_a = (min(a.width, a.height), max(a.width, a.height))
    key_b = (min(b.width, b.height), max(b.width, b.height))
    return (key_a > key_b) - (key_a < key_b)


def node_sort_key(rect: PlacedRect) -> Tuple[int, int, int, int]:
    """Sort key giving a lexicographic order on (x, y, width, height)."""
    return rect.x, rect.y, rect.width, rect.height


class DisjointRectCollection:
    """Collects rectangles while guaranteeing that none of them overlap.

    Used to verify the output of a packer. Degenerate rectangles are
    ignored.

    Attributes:
        rects: The rectangles accepted so far.
    """

    def __init__(self) -> None:
        self.rects: List[PlacedRect] = []

    def add(self, rect: PlacedRect) -> bool:
        """Adds a rectangle if it does not overlap any collected one.

        Returns:
            False if the rectangle overlaps a collected one, True otherwise.
        """
        if not rect:
            return True

        if not self.disjoint(rect):
            return False
        self.rects.append(rect)
        return True

    def clear(self) -> None:
        self.rects.clear()

    def disjoint(self, rect: PlacedRect) -> bool:
        if not rect:
            return True
        return all(is_disjoint(other, rect) for other in self.rects)

    def __len__(self) -> int:
        return len(self.rects)
