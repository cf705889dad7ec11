"""
Unit tests for mondrian_paint/compositor.py.

Covers:
- Validation: absent, empty, ragged and undersized canvases are rejected
  before any pixel is written
- Properties over 100 seeds per style: termination, bounded depth, regions
  inside the canvas, only palette colors or black on the canvas
- Seeded reproducibility and the no-retention contract
"""

import copy
import logging

import pytest

from mondrian_core.config import PaintConfig
from mondrian_core.order_hash import canvas_hash
from mondrian_core.palette import BLACK, DEFAULT_PALETTE, Palette, RED, WHITE
from mondrian_core.rng import NumpyRandom, PythonRandom
from mondrian_core.types import InvalidArgument, Region
from mondrian_paint.compositor import STYLES, Compositor, blank_canvas, validate_canvas

# Generous bound: the expected maximum over 100 seeds is around 10
MAX_DEPTH = 16


def paint_entry(compositor: Compositor, style: str):
    return compositor.paint_basic if style == "basic" else compositor.paint_complex


# =============================================================================
# Validation
# =============================================================================

class TestValidateCanvas:
    """validate_canvas() checks."""

    def test_returns_height_width(self):
        assert validate_canvas(blank_canvas(320, 310)) == (310, 320)

    def test_none(self):
        with pytest.raises(InvalidArgument, match="required"):
            validate_canvas(None)

    @pytest.mark.parametrize("canvas", [[], [[]]])
    def test_empty(self, canvas):
        with pytest.raises(InvalidArgument):
            validate_canvas(canvas)

    def test_ragged(self):
        canvas = blank_canvas(300, 300)
        canvas[150] = canvas[150][:-1]
        with pytest.raises(InvalidArgument, match="rectangular"):
            validate_canvas(canvas)

    @pytest.mark.parametrize("width,height", [(400, 299), (299, 400), (299, 299)])
    def test_too_small(self, width, height):
        with pytest.raises(InvalidArgument, match="at least 300"):
            validate_canvas(blank_canvas(width, height))

    def test_exact_minimum_accepted(self):
        assert validate_canvas(blank_canvas(300, 300)) == (300, 300)

    def test_custom_minimum(self):
        assert validate_canvas(blank_canvas(50, 60), min_size=50) == (60, 50)


@pytest.mark.parametrize("style", sorted(STYLES))
class TestPaintRejectsInvalid:
    """Both entry points fail with InvalidArgument and leave the canvas unmutated."""

    def test_none_canvas(self, style):
        with pytest.raises(InvalidArgument):
            paint_entry(Compositor(seed=1), style)(None)

    def test_height_below_minimum(self, style):
        """299 rows × 400 columns."""
        canvas = blank_canvas(400, 299)
        before = copy.deepcopy(canvas)

        with pytest.raises(InvalidArgument):
            paint_entry(Compositor(seed=1), style)(canvas)

        assert canvas == before, "A rejected canvas must not be mutated"

    def test_width_below_minimum(self, style):
        canvas = blank_canvas(299, 400)
        before = copy.deepcopy(canvas)

        with pytest.raises(InvalidArgument):
            paint_entry(Compositor(seed=1), style)(canvas)

        assert canvas == before

    def test_ragged_canvas_untouched(self, style):
        canvas = blank_canvas(300, 300)
        canvas[-1].append(BLACK)
        before = copy.deepcopy(canvas)

        with pytest.raises(InvalidArgument):
            paint_entry(Compositor(seed=1), style)(canvas)

        assert canvas == before

    def test_no_random_draws_on_failure(self, style, scripted):
        rng = scripted([])
        with pytest.raises(InvalidArgument):
            paint_entry(Compositor(rng=rng), style)(blank_canvas(100, 100))
        assert rng.bounds == []


class TestPaintDispatch:
    def test_unknown_style(self):
        with pytest.raises(InvalidArgument, match="Unknown style"):
            Compositor(seed=1).paint(blank_canvas(300, 300), "cubist")

    @pytest.mark.parametrize("style", ["basic", "complex"])
    def test_paint_matches_named_entry(self, style):
        a = blank_canvas(300, 300)
        b = blank_canvas(300, 300)

        Compositor(seed=11).paint(a, style)
        paint_entry(Compositor(seed=11), style)(b)

        assert canvas_hash(a) == canvas_hash(b)


# =============================================================================
# Properties Over Many Seeds
# =============================================================================

@pytest.mark.parametrize("style", sorted(STYLES))
@pytest.mark.parametrize("seed", range(100))
class TestPaintProperties:
    """Stress properties on a 300×300 canvas."""

    def test_terminates_within_bounds(self, style, seed):
        width = height = 300
        canvas = blank_canvas(width, height)
        visits = []

        paint_entry(Compositor(seed=seed), style)(canvas, trace=lambda r, d: visits.append((r, d)))

        # Canvas shape unchanged
        assert len(canvas) == height
        assert all(len(row) == width for row in canvas)

        assert visits[0] == (Region(0, 0, width, height), 0)

        max_depth = max(depth for _, depth in visits)
        assert max_depth <= MAX_DEPTH, f"seed={seed}: recursion depth {max_depth} > {MAX_DEPTH}"

        for region, depth in visits:
            assert not region.is_empty, f"seed={seed}: empty region {region} at depth {depth}"
            assert 0 <= region.x and region.x2 <= width, f"seed={seed}: {region} outside columns"
            assert 0 <= region.y and region.y2 <= height, f"seed={seed}: {region} outside rows"

        # Non-degenerate output using only palette colors and black borders
        colors = {color for row in canvas for color in row}
        assert colors - {BLACK}, f"seed={seed}: nothing was painted"
        assert colors <= set(DEFAULT_PALETTE.colors) | {BLACK}

        # Outer frame stays black
        assert all(canvas[0][c] == BLACK and canvas[-1][c] == BLACK for c in range(width))
        assert all(canvas[r][0] == BLACK and canvas[r][-1] == BLACK for r in range(height))


class TestReproducibility:
    """Injected randomness makes paintings deterministic."""

    @pytest.mark.parametrize("style", sorted(STYLES))
    def test_same_seed_same_canvas(self, style):
        a = blank_canvas(320, 300)
        b = blank_canvas(320, 300)

        Compositor(seed=42).paint(a, style)
        Compositor(seed=42).paint(b, style)

        assert canvas_hash(a) == canvas_hash(b)

    @pytest.mark.parametrize("style", sorted(STYLES))
    def test_different_seeds_differ(self, style):
        a = blank_canvas(300, 300)
        b = blank_canvas(300, 300)

        Compositor(seed=1).paint(a, style)
        Compositor(seed=2).paint(b, style)

        assert canvas_hash(a) != canvas_hash(b)

    def test_numpy_backend(self):
        a = blank_canvas(300, 300)
        b = blank_canvas(300, 300)

        Compositor(rng=NumpyRandom(5)).paint_complex(a)
        Compositor(rng=NumpyRandom(5)).paint_complex(b)

        assert canvas_hash(a) == canvas_hash(b)

    def test_default_rng_is_python_random(self):
        assert isinstance(Compositor().rng, PythonRandom)

    def test_explicit_rng_wins_over_seed(self, scripted):
        rng = scripted([])
        assert Compositor(rng=rng, seed=3).rng is rng


class TestCompositorState:
    """The compositor borrows the canvas only for one call."""

    def test_does_not_retain_canvas(self):
        compositor = Compositor(seed=3)
        canvas = blank_canvas(300, 300)

        compositor.paint_basic(canvas)

        assert all(value is not canvas for value in vars(compositor).values())

    def test_returns_none(self):
        assert Compositor(seed=3).paint_complex(blank_canvas(300, 300)) is None

    def test_custom_palette(self):
        canvas = blank_canvas(300, 300)
        Compositor(seed=8, palette=Palette((RED, WHITE))).paint_basic(canvas)

        assert {color for row in canvas for color in row} <= {RED, WHITE, BLACK}

    @pytest.mark.parametrize("style", sorted(STYLES))
    def test_small_custom_config(self, style):
        """A relaxed minimum size still terminates with positive regions."""
        config = PaintConfig(min_canvas_size=40)
        canvas = blank_canvas(40, 40)
        visits = []

        Compositor(seed=4, config=config).paint(canvas, style, trace=lambda r, d: visits.append(r))

        assert all(not region.is_empty for region in visits)

    def test_logs_debug_summary(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="mondrian_paint.compositor"):
            Compositor(seed=1).paint_basic(blank_canvas(300, 300))

        assert any("basic composition" in record.getMessage() for record in caplog.records)

    def test_logs_rejection(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="mondrian_paint.compositor"):
            with pytest.raises(InvalidArgument):
                Compositor(seed=1).paint_complex(None)

        assert any("Rejected complex" in record.getMessage() for record in caplog.records)


class TestBlankCanvas:
    def test_shape_and_color(self):
        canvas = blank_canvas(5, 3, WHITE)
        assert len(canvas) == 3
        assert all(row == [WHITE] * 5 for row in canvas)

    def test_rows_independent(self):
        canvas = blank_canvas(3, 3)
        canvas[0][0] = RED
        assert canvas[1][0] == BLACK
