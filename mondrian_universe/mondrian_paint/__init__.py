"""
mondrian_paint: Recursive subdivision painters.

Modules:
- fill.py: Region fill with a 1px unpainted border
- basic.py: Quadrant splitting with size-threshold termination
- complex.py: Grid splitting with 1..4 random cut lines per axis
- compositor.py: Validation and the Compositor entry points
- render.py: Canvas → numpy array → PNG
- cli.py: mondrian-paint command line tool
"""

from .compositor import STYLES, Compositor, blank_canvas, validate_canvas

__all__ = [
    "Compositor",
    "STYLES",
    "blank_canvas",
    "validate_canvas",
]
