"""
Subdivision thresholds.

Defaults reproduce the classic composition: 300px minimum canvas, cuts kept
10px from region edges, regions "large" while at least a quarter of the
canvas, and up to 4 intervals per axis in complex mode.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PaintConfig:
    """Immutable paint parameters passed to the Compositor."""

    min_canvas_size: int = 300
    margin: int = 10  # Minimum distance of a cut from a region edge
    split_divisor: int = 4  # Large on an axis while extent >= canvas_extent // split_divisor
    max_cuts: int = 4  # Complex mode: 1..max_cuts intervals per axis
    min_split_extent: int = 20  # Axes at or below this extent are never split

    def __post_init__(self):
        for name in ("min_canvas_size", "margin", "split_divisor", "max_cuts", "min_split_extent"):
            value = getattr(self, name)
            if value < 1:
                raise ValueError(f"{name} must be positive, got {value}")
        if self.min_split_extent < 2 * self.margin:
            raise ValueError(
                f"min_split_extent ({self.min_split_extent}) must be at least "
                f"2 * margin ({2 * self.margin})"
            )

    def split_threshold(self, canvas_extent: int) -> int:
        """Extent at which a region counts as large on an axis."""
        return canvas_extent // self.split_divisor


DEFAULT_CONFIG = PaintConfig()
