"""
Canvas serialization: canvas → numpy array → PNG.

The compositor never allocates or saves canvases; this module is the thin
collaborator the CLI uses once painting is done.
"""

from pathlib import Path

import numpy as np
from PIL import Image

from mondrian_core.types import Canvas


def canvas_to_array(canvas: Canvas) -> np.ndarray:
    """
    Convert a canvas to an H×W×3 uint8 array.

    Args:
        canvas: Rectangular canvas of (r, g, b) colors

    Returns:
        Array indexed [row, col, channel]
    """
    array = np.asarray(canvas, dtype=np.uint8)
    if array.ndim != 3 or array.shape[2] != 3:
        raise ValueError(f"Expected an H×W canvas of RGB triples, got array shape {array.shape}")
    return array


def save_png(canvas: Canvas, path: Path) -> Path:
    """
    Write canvas to path as an RGB PNG, creating parent directories.

    Returns:
        The path written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(canvas_to_array(canvas)).save(path, format="PNG")
    return path
