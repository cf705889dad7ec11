"""
Complex composition: recursive grid splitting.

Each large region is cut into a grid of 1..max_cuts columns by 1..max_cuts
rows, and every cell is subdivided again. A region stops (and is filled) as
soon as either extent drops below a quarter of the canvas.

Interior cuts on an axis are drawn independently, then sorted and
de-duplicated before pairing into intervals. Unsorted draws would pair a
larger cut with a smaller one and yield cells of zero or negative extent.
"""

from mondrian_core.config import PaintConfig
from mondrian_core.rng import RandomSource
from mondrian_core.types import Region

from .basic import draw_cut
from .context import PaintContext
from .fill import fill_region


def cut_positions(
    rng: RandomSource,
    start: int,
    extent: int,
    count: int,
    config: PaintConfig,
) -> list[int]:
    """
    Boundaries of the intervals along one axis.

    Args:
        rng: Random source
        start: Axis origin of the region
        extent: Region extent along the axis
        count: Number of interior cuts to draw
        config: Paint configuration (margin, min_split_extent)

    Returns:
        Strictly increasing interior cuts followed by the far edge
        start + extent. With no interior cuts this is just [start + extent].
    """
    cuts: set[int] = set()
    if extent > config.min_split_extent:
        for _ in range(count):
            cuts.add(draw_cut(rng, start, extent, config.margin))
    return sorted(cuts) + [start + extent]


def is_leaf(region: Region, ctx: PaintContext) -> bool:
    """True if region is too small on either axis to be split further."""
    guard = ctx.config.min_split_extent
    return (
        region.width < ctx.width_threshold
        or region.height < ctx.height_threshold
        or region.width <= guard
        or region.height <= guard
    )


def split_complex(ctx: PaintContext, region: Region, depth: int = 0) -> None:
    """
    Recursively subdivide region in complex mode, filling the leaves.

    Args:
        ctx: Paint context for the current top-level call
        region: Region to subdivide
        depth: Recursion depth (0 for the full canvas)
    """
    ctx.visit(region, depth)

    if is_leaf(region, ctx):
        fill_region(ctx.canvas, region, ctx.palette, ctx.rng)
        return

    x, y, w, h = region
    max_cuts = ctx.config.max_cuts

    # Interval counts are drawn before any cut position
    columns = 1 + ctx.rng.next_int(max_cuts)
    rows = 1 + ctx.rng.next_int(max_cuts)

    x_lines = cut_positions(ctx.rng, x, w, columns - 1, ctx.config)
    y_lines = cut_positions(ctx.rng, y, h, rows - 1, ctx.config)

    prev_x = x
    for curr_x in x_lines:
        prev_y = y
        for curr_y in y_lines:
            split_complex(ctx, Region(prev_x, prev_y, curr_x - prev_x, curr_y - prev_y), depth + 1)
            prev_y = curr_y
        prev_x = curr_x
