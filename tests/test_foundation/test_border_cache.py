"""Tests for the border geometry cache and its invalidation rules."""

from __future__ import annotations

import math

import pytest

from borderkit.foundation.border import BorderGeometryCache, Tracked, border
from borderkit.graphics.brush import SolidColor, horizontal_gradient
from borderkit.graphics.color import Color
from borderkit.graphics.shapes import CIRCLE_SHAPE, RECTANGLE_SHAPE, GenericShape, RoundedCornerShape
from borderkit.units import Density, Dp, Rect, Size, dp


def _draw(cache, canvas, content=lambda: None, size=Size(100.0, 100.0), density=Density(1.0)):
    cache.draw(density, size, content, canvas)


class TestTracked:
    def test_first_update_reports_change(self):
        t = Tracked()
        assert not t.is_set
        assert t.update(Size(1, 1)) is True
        assert t.value == Size(1, 1)

    def test_equal_value_is_noop(self):
        t = Tracked(Dp(2.0))
        assert t.update(Dp(2.0)) is False
        assert t.update(Dp(3.0)) is True

    def test_unset_value_raises(self):
        with pytest.raises(ValueError):
            Tracked().value


class TestEndToEnd:
    def test_square_ring(self, canvas, red, content, density, size100):
        decoration = border(RECTANGLE_SHAPE, dp(10), red)
        decoration.draw(density, size100, content, canvas)
        cache = decoration.cache

        assert cache.outer_path.bounds == Rect(0, 0, 100, 100)
        assert cache.inner_path.bounds == Rect(10, 10, 90, 90)
        assert cache.diff_path.bounds == Rect(0, 0, 100, 100)
        assert cache.diff_path.area == pytest.approx(100 * 100 - 80 * 80)
        assert len(cache.diff_path.geometry.interiors) == 1

        assert len(canvas.commands) == 1
        cmd = canvas.last
        assert cmd.geometry.equals(cache.diff_path.geometry)
        assert cmd.paint.color == Color.RED
        assert cmd.paint.anti_alias is True
        assert cmd.paint.shader is None

    def test_content_is_drawn_under_border(self, canvas, red, content, density, size100):
        border(RECTANGLE_SHAPE, dp(4), red).draw(density, size100, content, canvas)
        assert content.calls == 1
        # Content ran before the border ring was issued
        assert content.commands_before == 0
        assert len(canvas.commands) == 1

    def test_color_overload_wraps_solid_color(self, canvas, density, size100):
        decoration = border(RECTANGLE_SHAPE, dp(1), Color.BLUE)
        assert decoration.cache.brush == SolidColor(Color.BLUE)
        decoration.draw(density, size100, lambda: None, canvas)
        assert canvas.last.paint.color == Color.BLUE


class TestInvalidation:
    def test_initial_flags_invalid(self, red):
        cache = BorderGeometryCache(RECTANGLE_SHAPE, dp(1), red)
        assert cache.outer_valid is False
        assert cache.diff_valid is False
        assert cache.parent_size is None

    def test_identical_redraw_recomputes_nothing(self, canvas, red):
        cache = BorderGeometryCache(RECTANGLE_SHAPE, dp(5), red)
        _draw(cache, canvas)
        outer, diff = cache.outer_path.geometry, cache.diff_path.geometry

        for _ in range(3):
            _draw(cache, canvas)
            assert cache.outer_path.geometry is outer
            assert cache.diff_path.geometry is diff

        assert cache.outer_computations == 1
        assert cache.diff_computations == 1
        assert len(canvas.commands) == 4

    def test_shape_change_rebuilds_both(self, canvas, red):
        cache = BorderGeometryCache(RECTANGLE_SHAPE, dp(5), red)
        _draw(cache, canvas)
        assert cache.update_shape(CIRCLE_SHAPE) is True
        assert not cache.outer_valid and not cache.diff_valid
        _draw(cache, canvas)
        assert cache.outer_computations == 2
        assert cache.diff_computations == 2

    def test_equal_shape_does_not_invalidate(self, canvas, red):
        cache = BorderGeometryCache(RoundedCornerShape.uniform(dp(8)), dp(5), red)
        _draw(cache, canvas)
        assert cache.update_shape(RoundedCornerShape.uniform(dp(8))) is False
        assert cache.outer_valid and cache.diff_valid

    def test_size_change_rebuilds_both(self, canvas, red):
        cache = BorderGeometryCache(RECTANGLE_SHAPE, dp(5), red)
        _draw(cache, canvas)
        _draw(cache, canvas, size=Size(120.0, 80.0))
        assert cache.outer_computations == 2
        assert cache.diff_computations == 2
        assert cache.outer_path.bounds == Rect(0, 0, 120, 80)
        assert cache.inner_path.bounds == Rect(5, 5, 115, 75)

    def test_width_change_rebuilds_diff_only(self, canvas, red):
        cache = BorderGeometryCache(RECTANGLE_SHAPE, dp(5), red)
        _draw(cache, canvas)
        outer = cache.outer_path.geometry

        assert cache.update_width(dp(20)) is True
        assert cache.outer_valid is True
        assert cache.diff_valid is False
        _draw(cache, canvas)

        assert cache.outer_path.geometry is outer
        assert cache.outer_computations == 1
        assert cache.diff_computations == 2
        assert cache.inner_path.bounds == Rect(20, 20, 80, 80)

    def test_brush_change_rebuilds_nothing(self, canvas, red):
        cache = BorderGeometryCache(RECTANGLE_SHAPE, dp(5), red)
        _draw(cache, canvas)
        cache.update_brush(SolidColor(Color.GREEN))
        assert cache.outer_valid and cache.diff_valid
        _draw(cache, canvas)

        assert cache.outer_computations == 1
        assert cache.diff_computations == 1
        assert canvas.commands[0].paint.color == Color.RED
        assert canvas.last.paint.color == Color.GREEN

    def test_gradient_then_solid_clears_shader(self, canvas, red):
        gradient = horizontal_gradient([Color.RED, Color.BLUE], 0.0, 100.0)
        cache = BorderGeometryCache(RECTANGLE_SHAPE, dp(5), gradient)
        _draw(cache, canvas)
        assert canvas.last.paint.shader is not None
        cache.update_brush(red)
        _draw(cache, canvas)
        assert canvas.last.paint.shader is None
        assert canvas.last.paint.color == Color.RED

    def test_retained_cache_is_updated_in_place(self, canvas, red, density, size100):
        first = border(RECTANGLE_SHAPE, dp(5), red)
        first.draw(density, size100, lambda: None, canvas)

        second = border(RECTANGLE_SHAPE, dp(8), red, cache=first.cache)
        assert second.cache is first.cache
        second.draw(density, size100, lambda: None, canvas)
        assert first.cache.outer_computations == 1
        assert first.cache.diff_computations == 2


class TestThickness:
    @pytest.mark.parametrize("scale", [1.0, 2.0, 3.0])
    def test_hairline_is_one_device_pixel(self, canvas, red, scale):
        cache = BorderGeometryCache(RECTANGLE_SHAPE, Dp.HAIRLINE, red)
        _draw(cache, canvas, density=Density(scale))
        assert cache.resolve_thickness(Density(scale)) == 1.0
        assert cache.inner_path.bounds == Rect(1, 1, 99, 99)

    def test_width_scales_with_density(self, canvas, red):
        cache = BorderGeometryCache(RECTANGLE_SHAPE, dp(2), red)
        _draw(cache, canvas, density=Density(3.0))
        assert cache.resolve_thickness(Density(3.0)) == 6.0
        assert cache.inner_path.bounds == Rect(6, 6, 94, 94)

    @pytest.mark.parametrize("width", [1.0, 7.5, 25.0])
    def test_inset_is_centered(self, canvas, red, width):
        cache = BorderGeometryCache(RECTANGLE_SHAPE, dp(width), red)
        _draw(cache, canvas)
        assert cache.inner_path.bounds == Rect(width, width, 100 - width, 100 - width)


class TestDegenerate:
    @pytest.mark.parametrize("width", [50.0, 60.0, 500.0])
    def test_overwide_border_fills_shape(self, canvas, red, width):
        cache = BorderGeometryCache(RECTANGLE_SHAPE, dp(width), red)
        _draw(cache, canvas)
        assert cache.inner_path.is_empty
        assert cache.diff_path.geometry.equals(cache.outer_path.geometry)
        assert canvas.last.geometry.area == pytest.approx(100 * 100)

    def test_overwide_rounded_border_fills_shape(self, canvas, red):
        cache = BorderGeometryCache(CIRCLE_SHAPE, dp(80), red)
        _draw(cache, canvas)
        assert cache.diff_path.geometry.equals(cache.outer_path.geometry)

    def test_empty_parent_size_paints_nothing(self, canvas, red):
        cache = BorderGeometryCache(RECTANGLE_SHAPE, dp(2), red)
        _draw(cache, canvas, size=Size(0.0, 40.0))
        assert cache.outer_path.is_empty
        assert cache.diff_path.is_empty
        assert canvas.last.geometry.is_empty


class TestShapes:
    def test_circle_ring_area(self, canvas, red):
        cache = BorderGeometryCache(CIRCLE_SHAPE, dp(10), red)
        _draw(cache, canvas)
        expected = math.pi * (50**2 - 40**2)
        assert cache.diff_path.area == pytest.approx(expected, rel=0.01)
        bounds = cache.inner_path.bounds
        assert bounds.left == pytest.approx(10)
        assert bounds.right == pytest.approx(90)

    def test_generic_shape_failure_propagates(self, canvas, red):
        def explode(path, size):
            raise RuntimeError("no outline")

        cache = BorderGeometryCache(GenericShape(explode), dp(2), red)
        with pytest.raises(RuntimeError):
            _draw(cache, canvas)
        assert cache.outer_valid is False
        assert canvas.commands == []


class TestValidation:
    def test_negative_width_rejected(self, red):
        with pytest.raises(ValueError):
            border(RECTANGLE_SHAPE, Dp(-1.0), red)

    def test_non_finite_width_rejected(self, red):
        with pytest.raises(ValueError):
            border(RECTANGLE_SHAPE, Dp(float("nan")), red)

    def test_plain_number_width_rejected(self, red):
        with pytest.raises(ValueError):
            border(RECTANGLE_SHAPE, 2.0, red)

    def test_shape_without_outline_rejected(self, red):
        with pytest.raises(ValueError):
            border(object(), dp(1), red)

    def test_bad_brush_rejected(self):
        with pytest.raises(ValueError):
            border(RECTANGLE_SHAPE, dp(1), "red")
