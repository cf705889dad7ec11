"""
Fixed fill palette.

The palette is an immutable value owned by the Compositor. BLACK is the
background color of a blank canvas and therefore of every border; it is never
a fill candidate.
"""

from dataclasses import dataclass

from .rng import RandomSource
from .types import Canvas, Color

RED: Color = (255, 0, 0)
YELLOW: Color = (255, 255, 0)
CYAN: Color = (0, 255, 255)
WHITE: Color = (255, 255, 255)
BLACK: Color = (0, 0, 0)


@dataclass(frozen=True)
class Palette:
    """Ordered set of candidate fill colors."""

    colors: tuple[Color, ...]

    def __post_init__(self):
        if not self.colors:
            raise ValueError("Palette requires at least one color")

    def __len__(self) -> int:
        return len(self.colors)

    def __contains__(self, color: object) -> bool:
        return color in self.colors

    def choose(self, rng: RandomSource) -> Color:
        """Pick one color uniformly at random."""
        return self.colors[rng.next_int(len(self.colors))]


DEFAULT_PALETTE = Palette((RED, YELLOW, CYAN, WHITE))


def color_histogram(canvas: Canvas) -> dict[Color, int]:
    """
    Count pixels per color.

    Args:
        canvas: Painted (or blank) canvas

    Returns:
        Dict mapping color -> pixel count, colors in first-appearance order
    """
    counts: dict[Color, int] = {}
    for row in canvas:
        for color in row:
            counts[color] = counts.get(color, 0) + 1
    return counts
