"""Blend functions for plain Python value types, and tweens pre-bound to them.

Every blend accepts shaped progress outside [0, 1] and extrapolates, so
overshooting easings (back, elastic) work unchanged.
"""
from __future__ import annotations

from tick_tween.config import TweenConfig
from tick_tween.tween import Tween

Vector = tuple[float, ...]
Color = tuple[int, ...]


def lerp(start: float, end: float, t: float) -> float:
    return start + (end - start) * t


def lerp_vector(start: Vector, end: Vector, t: float) -> Vector:
    """Component-wise lerp of equal-length tuples."""
    if len(start) != len(end):
        raise ValueError(
            f"vector lengths differ: {len(start)} vs {len(end)}"
        )
    return tuple(a + (b - a) * t for a, b in zip(start, end))


def lerp_color(start: Color, end: Color, t: float) -> Color:
    """Lerp RGB/RGBA channels, rounded and clamped to 0..255."""
    if len(start) != len(end):
        raise ValueError(
            f"color channel counts differ: {len(start)} vs {len(end)}"
        )
    return tuple(
        max(0, min(255, round(a + (b - a) * t))) for a, b in zip(start, end)
    )


def lerp_angle(start: float, end: float, t: float) -> float:
    """Lerp degrees along the shortest arc. Result is not wrapped."""
    delta = (end - start) % 360.0
    if delta > 180.0:
        delta -= 360.0
    return start + delta * t


class FloatTween(Tween[float]):
    def __init__(self, config: TweenConfig | None = None) -> None:
        super().__init__(lerp, config)


class VectorTween(Tween[Vector]):
    def __init__(self, config: TweenConfig | None = None) -> None:
        super().__init__(lerp_vector, config)


class ColorTween(Tween[Color]):
    def __init__(self, config: TweenConfig | None = None) -> None:
        super().__init__(lerp_color, config)


class AngleTween(Tween[float]):
    def __init__(self, config: TweenConfig | None = None) -> None:
        super().__init__(lerp_angle, config)
