"""
Per-call painting context shared by the recursive splitters.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from mondrian_core.config import PaintConfig
from mondrian_core.palette import Palette
from mondrian_core.rng import RandomSource
from mondrian_core.types import Canvas, Region

# trace(region, depth): called once per recursion visit, depth 0 = full canvas
RegionTrace = Callable[[Region, int], None]


@dataclass(frozen=True)
class PaintContext:
    """
    Everything one top-level paint call needs besides the region.

    Lives for the duration of a single paint call; the Compositor never keeps
    a context (or the canvas inside it) once the call returns.
    """
    canvas: Canvas
    canvas_width: int
    canvas_height: int
    rng: RandomSource
    palette: Palette
    config: PaintConfig
    trace: Optional[RegionTrace] = None

    @property
    def width_threshold(self) -> int:
        return self.config.split_threshold(self.canvas_width)

    @property
    def height_threshold(self) -> int:
        return self.config.split_threshold(self.canvas_height)

    def visit(self, region: Region, depth: int) -> None:
        if self.trace is not None:
            self.trace(region, depth)
