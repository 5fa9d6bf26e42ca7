"""Tests for value blends and the pre-bound tween types."""
import pytest

from tick_tween import (
    AngleTween,
    ColorTween,
    FloatTween,
    VectorTween,
    lerp,
    lerp_angle,
    lerp_color,
    lerp_vector,
)


class TestLerp:
    """Test scalar lerp."""

    def test_midpoint(self):
        assert lerp(0.0, 10.0, 0.5) == 5.0

    def test_extrapolates_for_overshoot(self):
        assert lerp(0.0, 10.0, 1.2) == pytest.approx(12.0)
        assert lerp(0.0, 10.0, -0.1) == pytest.approx(-1.0)


class TestLerpVector:
    """Test component-wise vector lerp."""

    def test_three_components(self):
        assert lerp_vector((0.0, 0.0, 0.0), (2.0, 4.0, -6.0), 0.5) == (1.0, 2.0, -3.0)

    def test_length_mismatch_raises(self):
        with pytest.raises(ValueError):
            lerp_vector((0.0, 0.0), (1.0, 1.0, 1.0), 0.5)


class TestLerpColor:
    """Test color channel lerp."""

    def test_rounds_channels(self):
        assert lerp_color((0, 0, 0), (255, 100, 51), 0.5) == (128, 50, 26)

    def test_clamps_overshoot(self):
        assert lerp_color((0, 0, 0), (255, 255, 255), 1.5) == (255, 255, 255)
        assert lerp_color((10, 10, 10), (255, 255, 255), -0.5) == (0, 0, 0)

    def test_rgba(self):
        assert lerp_color((0, 0, 0, 0), (200, 200, 200, 255), 1.0) == (200, 200, 200, 255)

    def test_channel_mismatch_raises(self):
        with pytest.raises(ValueError):
            lerp_color((0, 0, 0), (0, 0, 0, 0), 0.5)


class TestLerpAngle:
    """Test shortest-arc angle lerp."""

    def test_crosses_zero(self):
        """350 -> 10 goes forward through 360, not back through 180."""
        assert lerp_angle(350.0, 10.0, 0.5) == pytest.approx(360.0)

    def test_goes_backward_when_shorter(self):
        assert lerp_angle(10.0, 350.0, 0.5) == pytest.approx(0.0)

    def test_plain_range(self):
        assert lerp_angle(0.0, 90.0, 0.5) == pytest.approx(45.0)


class TestBoundTweens:
    """Test the pre-bound tween subclasses."""

    def test_float_tween(self):
        tween = FloatTween().start(0.0, 4.0, 1.0)
        tween.update(0.25)
        assert tween.current_value == pytest.approx(1.0)

    def test_vector_tween(self):
        tween = VectorTween().start((0.0, 0.0), (10.0, 20.0), 2.0)
        tween.update(1.0)
        assert tween.current_value == pytest.approx((5.0, 10.0))

    def test_color_tween(self):
        tween = ColorTween().start((0, 0, 0), (100, 200, 50), 1.0)
        tween.update(1.0)
        assert tween.current_value == (100, 200, 50)

    def test_angle_tween(self):
        tween = AngleTween().start(270.0, 0.0, 1.0)
        tween.update(0.5)
        assert tween.current_value == pytest.approx(315.0)

    def test_back_easing_overshoots_vector(self):
        tween = VectorTween().start((0.0,), (10.0,), 1.0, "back_out")
        tween.update(0.8)
        assert tween.current_value[0] > 10.0
