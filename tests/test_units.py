"""Tests for unit and geometry value types."""

from __future__ import annotations

import pytest

from borderkit.units import Density, Dp, Offset, Rect, RoundRect, Size, dp


class TestDp:
    def test_hairline_sentinel(self):
        assert Dp.HAIRLINE == Dp(0.0)
        assert dp(0).is_hairline
        assert not dp(1).is_hairline
        assert repr(Dp.HAIRLINE) == "Dp.HAIRLINE"

    def test_arithmetic(self):
        assert dp(2) + dp(3) == dp(5)
        assert dp(5) - dp(3) == dp(2)
        assert dp(2) * 3 == dp(6)
        assert 3 * dp(2) == dp(6)
        assert dp(6) / 2 == dp(3)
        assert dp(1) < dp(2)

    def test_to_px(self):
        assert dp(4).to_px(Density(2.75)) == 11.0


class TestDensity:
    @pytest.mark.parametrize("value", [0.0, -1.0, float("inf"), float("nan")])
    def test_rejects_invalid(self, value):
        with pytest.raises(ValueError):
            Density(value)

    def test_font_scale_validated(self):
        with pytest.raises(ValueError):
            Density(1.0, font_scale=0.0)


class TestSize:
    def test_shrink_can_go_negative(self):
        s = Size(100, 40).shrink(60)
        assert s == Size(40, -20)
        assert s.is_empty

    def test_min_dimension(self):
        assert Size(30, 10).min_dimension == 10


class TestRect:
    def test_from_size_and_translate(self):
        r = Rect.from_size(Size(10, 20), Offset(1, 2))
        assert r == Rect(1, 2, 11, 22)
        assert r.translate(4, 4).as_tuple() == (5, 6, 15, 26)
        assert r.size == Size(10, 20)

    def test_round_rect_scaling_keeps_fitting_radii(self):
        rr = RoundRect(Rect(0, 0, 100, 100), 10, 20, 30, 40)
        assert rr.scaled_radii() == (10, 20, 30, 40)
        assert not rr.is_rect
        assert RoundRect(Rect(0, 0, 1, 1)).is_rect
