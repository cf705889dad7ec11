"""
mondrian_core: Core primitives for the Mondrian compositor.

Provides:
- types: Color, Canvas, Region and the InvalidArgument error
- palette: Named colors and the fixed fill palette
- rng: Injectable bounded-integer random sources (stdlib and numpy backed)
- config: PaintConfig thresholds for subdivision
- order_hash: Deterministic hashing and canvas fingerprints
"""

from .config import DEFAULT_CONFIG, PaintConfig
from .palette import BLACK, CYAN, DEFAULT_PALETTE, RED, WHITE, YELLOW, Palette
from .rng import NumpyRandom, PythonRandom, RandomSource, make_random
from .types import Canvas, Color, InvalidArgument, Region

__all__ = [
    "BLACK",
    "CYAN",
    "Canvas",
    "Color",
    "DEFAULT_CONFIG",
    "DEFAULT_PALETTE",
    "InvalidArgument",
    "NumpyRandom",
    "PaintConfig",
    "Palette",
    "PythonRandom",
    "RED",
    "RandomSource",
    "Region",
    "WHITE",
    "YELLOW",
    "make_random",
]
