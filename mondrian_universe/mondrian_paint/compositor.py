"""
Compositor: validated entry points for both composition styles.

The Compositor owns a random source, a palette and a PaintConfig. It borrows
the caller's canvas for the duration of a single paint call, writes colors in
place, and keeps no reference to it afterwards.

Validation is all-or-nothing: a canvas that fails validation raises
InvalidArgument before a single pixel is written.
"""

import logging
from typing import Callable, Optional

from mondrian_core.config import DEFAULT_CONFIG, PaintConfig
from mondrian_core.palette import BLACK, DEFAULT_PALETTE, Palette
from mondrian_core.rng import PythonRandom, RandomSource
from mondrian_core.types import Canvas, Color, InvalidArgument, Region

from .basic import split_basic
from .complex import split_complex
from .context import PaintContext, RegionTrace

logger = logging.getLogger(__name__)

Splitter = Callable[[PaintContext, Region, int], None]

STYLES: dict[str, Splitter] = {
    "basic": split_basic,
    "complex": split_complex,
}


def validate_canvas(canvas: Optional[Canvas], min_size: int = DEFAULT_CONFIG.min_canvas_size) -> tuple[int, int]:
    """
    Check that canvas is present, rectangular and at least min_size on both axes.

    Args:
        canvas: Canvas to check (may be None)
        min_size: Minimum height and width

    Returns:
        (height, width) of the canvas

    Raises:
        InvalidArgument: If any check fails
    """
    if canvas is None:
        raise InvalidArgument("canvas is required")
    if len(canvas) == 0 or len(canvas[0]) == 0:
        raise InvalidArgument("canvas must have at least one row and one column")

    height, width = len(canvas), len(canvas[0])

    for r, row in enumerate(canvas):
        if len(row) != width:
            raise InvalidArgument(
                f"canvas must be rectangular: row {r} has {len(row)} columns, expected {width}"
            )

    if height < min_size or width < min_size:
        raise InvalidArgument(
            f"canvas must be at least {min_size}×{min_size}, got {height}×{width} (rows×cols)"
        )

    return height, width


def blank_canvas(width: int, height: int, color: Color = BLACK) -> Canvas:
    """Allocate a height×width canvas filled with color (independent rows)."""
    return [[color] * width for _ in range(height)]


class Compositor:
    """
    Mondrian-style painter.

    Args:
        rng: Random source; defaults to PythonRandom(seed)
        palette: Fill colors
        config: Subdivision thresholds
        seed: Seed for the default random source (ignored when rng is given)
    """

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        palette: Palette = DEFAULT_PALETTE,
        config: PaintConfig = DEFAULT_CONFIG,
        seed: Optional[int] = None,
    ):
        self.rng = rng if rng is not None else PythonRandom(seed)
        self.palette = palette
        self.config = config

    def paint_basic(self, canvas: Canvas, trace: Optional[RegionTrace] = None) -> None:
        """
        Paint a basic composition (quadrant splitting) onto canvas in place.

        Raises:
            InvalidArgument: If canvas is None, ragged, or smaller than the minimum size
        """
        self.paint(canvas, "basic", trace)

    def paint_complex(self, canvas: Canvas, trace: Optional[RegionTrace] = None) -> None:
        """
        Paint a complex composition (grid splitting) onto canvas in place.

        Raises:
            InvalidArgument: If canvas is None, ragged, or smaller than the minimum size
        """
        self.paint(canvas, "complex", trace)

    def paint(self, canvas: Canvas, style: str, trace: Optional[RegionTrace] = None) -> None:
        """
        Paint canvas in place using the named style.

        Args:
            canvas: Canvas to paint
            style: "basic" or "complex"
            trace: Optional callback invoked with (region, depth) on every recursion step

        Raises:
            InvalidArgument: If style is unknown or canvas fails validation
        """
        if style not in STYLES:
            raise InvalidArgument(f"Unknown style '{style}'. Must be one of {sorted(STYLES)}")

        try:
            height, width = validate_canvas(canvas, self.config.min_canvas_size)
        except InvalidArgument as e:
            logger.debug("Rejected %s paint request: %s", style, e)
            raise

        visits = 0

        def counting_trace(region: Region, depth: int) -> None:
            nonlocal visits
            visits += 1
            if trace is not None:
                trace(region, depth)

        ctx = PaintContext(
            canvas=canvas,
            canvas_width=width,
            canvas_height=height,
            rng=self.rng,
            palette=self.palette,
            config=self.config,
            trace=counting_trace,
        )
        STYLES[style](ctx, Region(0, 0, width, height), 0)

        logger.debug("Painted %s composition on %d×%d canvas (%d regions visited)", style, height, width, visits)
