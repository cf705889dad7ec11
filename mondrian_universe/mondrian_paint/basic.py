"""
Basic composition: recursive quadrant splitting.

A region is "wide" while its width is at least a quarter of the canvas width
and "tall" while its height is at least a quarter of the canvas height.

    wide and tall  → one cut on each axis, recurse into four quadrants
    wide only      → one vertical cut line, recurse into left/right
    tall only      → one horizontal cut line, recurse into top/bottom
    neither        → fill

Cuts land at least `margin` pixels inside the region, so every child keeps a
non-empty extent.
"""

from mondrian_core.rng import RandomSource
from mondrian_core.types import Region

from .context import PaintContext
from .fill import fill_region


def draw_cut(rng: RandomSource, start: int, extent: int, margin: int) -> int:
    """
    Draw one cut coordinate in [start + margin, start + extent - margin).

    When extent <= 2 * margin the range collapses to start + margin.
    """
    return rng.next_int(max(1, extent - 2 * margin)) + start + margin


def is_splittable(extent: int, threshold: int, ctx: PaintContext) -> bool:
    """True if an axis of this extent is still large enough to cut."""
    return extent >= threshold and extent > ctx.config.min_split_extent


def split_basic(ctx: PaintContext, region: Region, depth: int = 0) -> None:
    """
    Recursively subdivide region in basic mode, filling the leaves.

    Args:
        ctx: Paint context for the current top-level call
        region: Region to subdivide
        depth: Recursion depth (0 for the full canvas)
    """
    ctx.visit(region, depth)

    x, y, w, h = region
    wide = is_splittable(w, ctx.width_threshold, ctx)
    tall = is_splittable(h, ctx.height_threshold, ctx)
    margin = ctx.config.margin

    if not wide and not tall:
        fill_region(ctx.canvas, region, ctx.palette, ctx.rng)
        return

    if wide and tall:
        cx = draw_cut(ctx.rng, x, w, margin)
        cy = draw_cut(ctx.rng, y, h, margin)
        children = [
            Region(x, y, cx - x, cy - y),
            Region(cx, y, x + w - cx, cy - y),
            Region(x, cy, cx - x, y + h - cy),
            Region(cx, cy, x + w - cx, y + h - cy),
        ]
    elif wide:
        cx = draw_cut(ctx.rng, x, w, margin)
        children = [
            Region(x, y, cx - x, h),
            Region(cx, y, x + w - cx, h),
        ]
    else:
        cy = draw_cut(ctx.rng, y, h, margin)
        children = [
            Region(x, y, w, cy - y),
            Region(x, cy, w, y + h - cy),
        ]

    for child in children:
        split_basic(ctx, child, depth + 1)
