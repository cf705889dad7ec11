"""
Core type definitions for the Mondrian compositor.

Canvas coordinates follow the pixel buffer: canvas[row][col], where row is the
vertical (height) axis and col is the horizontal (width) axis. Regions use
(x, y) = (col, row) origins, so a region's pixels live at canvas[y..y2)[x..x2).
"""

from dataclasses import dataclass

# RGB triple, each channel 0..255
Color = tuple[int, int, int]

# Canvas[r][c] = color
Canvas = list[list[Color]]


class InvalidArgument(ValueError):
    """Raised when a canvas (or paint request) fails validation."""


@dataclass(frozen=True)
class Region:
    """
    Rectangular subrange of a canvas.

    Created on each recursive step and never stored:
    - x, y: origin (column, row) of the top-left pixel
    - width, height: extents in pixels; x2/y2 are exclusive far edges
    """
    x: int
    y: int
    width: int
    height: int

    @property
    def x2(self) -> int:
        return self.x + self.width

    @property
    def y2(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def is_empty(self) -> bool:
        """True when either extent is non-positive."""
        return self.width <= 0 or self.height <= 0

    def __iter__(self):
        """Allow tuple unpacking: x, y, w, h = region"""
        return iter((self.x, self.y, self.width, self.height))
