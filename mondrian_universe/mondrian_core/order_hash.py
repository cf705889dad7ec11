"""
Deterministic hashing.

Provides:
- hash64: SHA-256 canonical hash truncated to 64-bit int
- canvas_hash: Fingerprint of a painted canvas

No use of Python's built-in hash() (salted per process).
"""

import hashlib
import json
from typing import Any

from .types import Canvas


def hash64(obj: Any) -> int:
    """
    Deterministic 64-bit hash using SHA-256 on canonical JSON.

    Args:
        obj: Any JSON-serializable Python object

    Returns:
        64-bit integer hash (0 to 2^64-1)

    Examples:
        >>> hash64([1, 2, 3]) == hash64([1, 2, 3])
        True
        >>> hash64({"a": 1, "b": 2}) == hash64({"b": 2, "a": 1})
        True
    """
    canonical_json = json.dumps(obj, sort_keys=True, separators=(",", ":"))
    sha = hashlib.sha256(canonical_json.encode("utf-8"))
    return int.from_bytes(sha.digest()[:8], byteorder="big", signed=False)


def canvas_hash(canvas: Canvas) -> int:
    """
    Fingerprint a canvas.

    Two canvases hash equal iff they have the same shape and the same color at
    every pixel. Tuples and lists serialize identically, so a canvas holding
    list colors hashes like one holding tuple colors.
    """
    return hash64([[list(color) for color in row] for row in canvas])
