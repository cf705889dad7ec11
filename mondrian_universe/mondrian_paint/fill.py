"""
Region fill.

Paints the interior of a region with one palette color, leaving the
outermost ring of the region untouched. Sibling regions share edges, so the
untouched rings of neighbours add up to the black lines between blocks.
"""

from mondrian_core.palette import Palette
from mondrian_core.rng import RandomSource
from mondrian_core.types import Canvas, Color, Region


def paint_interior(canvas: Canvas, region: Region, color: Color) -> None:
    """
    Paint columns x+1..x2-2 and rows y+1..y2-2 of region with color.

    Regions with width or height <= 2 have no interior and are left as is.
    """
    for r in range(region.y + 1, region.y2 - 1):
        row = canvas[r]
        for c in range(region.x + 1, region.x2 - 1):
            row[c] = color


def fill_region(canvas: Canvas, region: Region, palette: Palette, rng: RandomSource) -> None:
    """
    Fill region with one randomly chosen palette color.

    Exactly one color is drawn per call, even when the region has no
    interior, so the random stream does not depend on region size.
    """
    paint_interior(canvas, region, palette.choose(rng))
