#!/usr/bin/env python3
"""
mondrian-paint: paint one composition and optionally save it.

Allocates a blank canvas, paints it with the chosen style, then writes a PNG
and/or a JSON receipt (style, size, seed, canvas hash, color histogram).

Usage:
    mondrian-paint --style complex --width 800 --height 600 --seed 7 --output out.png
"""

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from mondrian_core.order_hash import canvas_hash
from mondrian_core.palette import color_histogram
from mondrian_core.rng import BACKENDS, make_random
from mondrian_core.types import Canvas, InvalidArgument

from .compositor import STYLES, Compositor, blank_canvas
from .render import save_png

EXIT_OK = 0
EXIT_INVALID = 2


def setup_logger(name: str, log_file: Optional[Path] = None, level=logging.INFO) -> logging.Logger:
    """
    Setup logger for the CLI.

    Args:
        name: Logger name
        log_file: Optional path to log file
        level: Logging level

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Clear any existing handlers
    logger.handlers = []

    formatter = logging.Formatter(
        "[%(asctime)s] %(levelname)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="w")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def build_receipt(
    canvas: Canvas,
    style: str,
    seed: Optional[int],
    backend: str,
    output: Optional[Path] = None,
) -> Dict[str, Any]:
    """
    Build a receipt dictionary describing a painted canvas.

    Colors are keyed as "r,g,b" strings so the receipt is plain JSON.
    """
    height, width = len(canvas), len(canvas[0])
    histogram = color_histogram(canvas)

    receipt = {
        "style": style,
        "width": width,
        "height": height,
        "seed": seed,
        "backend": backend,
        "canvas_hash": canvas_hash(canvas),
        "colors": {",".join(str(v) for v in color): count for color, count in histogram.items()},
        "timestamp": datetime.now().isoformat(),
    }

    if output is not None:
        receipt["output"] = str(output)

    return receipt


def save_receipt(receipt: Dict[str, Any], receipt_file: Path) -> None:
    """Save receipt to a JSON file."""
    receipt_file.parent.mkdir(parents=True, exist_ok=True)
    with open(receipt_file, "w") as f:
        json.dump(receipt, f, indent=2)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Paint a Mondrian-style composition")
    parser.add_argument("--style", type=str, default="basic", choices=sorted(STYLES),
                        help="Composition style")
    parser.add_argument("--width", type=int, default=600, help="Canvas width in pixels")
    parser.add_argument("--height", type=int, default=600, help="Canvas height in pixels")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--backend", type=str, default="python", choices=sorted(BACKENDS),
                        help="Random number backend")
    parser.add_argument("--output", type=Path, default=None, help="PNG file to write")
    parser.add_argument("--receipt", type=Path, default=None, help="JSON receipt to write")
    parser.add_argument("--log-file", type=Path, default=None, help="Also log to this file")
    parser.add_argument("--verbose", action="store_true", help="Log painter debug output")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logger = setup_logger("mondrian_paint", args.log_file, level)

    compositor = Compositor(rng=make_random(args.seed, args.backend))
    canvas = blank_canvas(max(args.width, 0), max(args.height, 0))

    try:
        compositor.paint(canvas, args.style)
    except InvalidArgument as e:
        logger.error(f"Cannot paint {args.height}×{args.width} canvas: {e}")
        return EXIT_INVALID

    logger.info(f"Painted {args.style} composition {args.width}×{args.height} (seed={args.seed}, backend={args.backend})")

    if args.output is not None:
        save_png(canvas, args.output)
        logger.info(f"Saved image to {args.output}")

    if args.receipt is not None:
        receipt = build_receipt(canvas, args.style, args.seed, args.backend, args.output)
        save_receipt(receipt, args.receipt)
        logger.info(f"Saved receipt to {args.receipt} (canvas_hash={receipt['canvas_hash']})")

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
