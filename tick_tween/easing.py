"""Easing functions for tween interpolation.

Each function maps normalized progress ``t`` to shaped progress. Inputs are
meaningful on [0, 1] and are not clamped. Back and elastic curves leave
[0, 1] near the ends on purpose (overshoot).
"""
from __future__ import annotations

import math
from typing import Callable

_BACK_S = 1.70158
_BACK_S_IN_OUT = _BACK_S * 1.525
_ELASTIC_PERIOD = 0.3
_ELASTIC_PERIOD_IN_OUT = 0.45
_BOUNCE_N = 7.5625
_BOUNCE_D = 2.75


def linear(t: float) -> float:
    return t


# --- Polynomial ---


def quad_in(t: float) -> float:
    return t * t


def quad_out(t: float) -> float:
    return t * (2 - t)


def quad_in_out(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return 1 - (-2 * t + 2) ** 2 / 2


def cubic_in(t: float) -> float:
    return t * t * t


def cubic_out(t: float) -> float:
    return 1 - (1 - t) ** 3


def cubic_in_out(t: float) -> float:
    if t < 0.5:
        return 4 * t * t * t
    return 1 - (-2 * t + 2) ** 3 / 2


def quart_in(t: float) -> float:
    return t ** 4


def quart_out(t: float) -> float:
    return 1 - (1 - t) ** 4


def quart_in_out(t: float) -> float:
    if t < 0.5:
        return 8 * t ** 4
    return 1 - (-2 * t + 2) ** 4 / 2


def quint_in(t: float) -> float:
    return t ** 5


def quint_out(t: float) -> float:
    return 1 - (1 - t) ** 5


def quint_in_out(t: float) -> float:
    if t < 0.5:
        return 16 * t ** 5
    return 1 - (-2 * t + 2) ** 5 / 2


# --- Sine ---


def sine_in(t: float) -> float:
    return 1 - math.cos(t * math.pi / 2)


def sine_out(t: float) -> float:
    return math.sin(t * math.pi / 2)


def sine_in_out(t: float) -> float:
    return 0.5 * (1 - math.cos(t * math.pi))


# --- Exponential ---


def expo_in(t: float) -> float:
    """Special-cased at 0 so the curve starts exactly at rest."""
    if t == 0:
        return 0.0
    return 2 ** (10 * (t - 1))


def expo_out(t: float) -> float:
    if t == 1:
        return 1.0
    return 1 - 2 ** (-10 * t)


def expo_in_out(t: float) -> float:
    if t == 0:
        return 0.0
    if t == 1:
        return 1.0
    if t < 0.5:
        return 2 ** (20 * t - 10) / 2
    return 1 - 2 ** (-20 * t + 10) / 2


# --- Circular ---


def circ_in(t: float) -> float:
    return 1 - math.sqrt(1 - t * t)


def circ_out(t: float) -> float:
    return math.sqrt((2 - t) * t)


def circ_in_out(t: float) -> float:
    if t < 0.5:
        return (1 - math.sqrt(1 - 4 * t * t)) / 2
    return (math.sqrt(1 - (-2 * t + 2) ** 2) + 1) / 2


# --- Elastic ---


def elastic_in(t: float) -> float:
    if t == 0 or t == 1:
        return t
    s = _ELASTIC_PERIOD / 4
    u = t - 1
    return -(2 ** (10 * u)) * math.sin((u - s) * (2 * math.pi) / _ELASTIC_PERIOD)


def elastic_out(t: float) -> float:
    if t == 0 or t == 1:
        return t
    s = _ELASTIC_PERIOD / 4
    return 2 ** (-10 * t) * math.sin((t - s) * (2 * math.pi) / _ELASTIC_PERIOD) + 1


def elastic_in_out(t: float) -> float:
    if t == 0 or t == 1:
        return t
    s = _ELASTIC_PERIOD_IN_OUT / 4
    u = 2 * t - 1
    wave = math.sin((u - s) * (2 * math.pi) / _ELASTIC_PERIOD_IN_OUT)
    if u < 0:
        return -0.5 * 2 ** (10 * u) * wave
    return 0.5 * 2 ** (-10 * u) * wave + 1


# --- Back ---


def back_in(t: float) -> float:
    return t * t * ((_BACK_S + 1) * t - _BACK_S)


def back_out(t: float) -> float:
    u = t - 1
    return u * u * ((_BACK_S + 1) * u + _BACK_S) + 1


def back_in_out(t: float) -> float:
    s = _BACK_S_IN_OUT
    u = 2 * t
    if u < 1:
        return 0.5 * (u * u * ((s + 1) * u - s))
    u -= 2
    return 0.5 * (u * u * ((s + 1) * u + s) + 2)


# --- Bounce ---


def bounce_out(t: float) -> float:
    if t < 1 / _BOUNCE_D:
        return _BOUNCE_N * t * t
    if t < 2 / _BOUNCE_D:
        t -= 1.5 / _BOUNCE_D
        return _BOUNCE_N * t * t + 0.75
    if t < 2.5 / _BOUNCE_D:
        t -= 2.25 / _BOUNCE_D
        return _BOUNCE_N * t * t + 0.9375
    t -= 2.625 / _BOUNCE_D
    return _BOUNCE_N * t * t + 0.984375


def bounce_in(t: float) -> float:
    return 1 - bounce_out(1 - t)


def bounce_in_out(t: float) -> float:
    if t < 0.5:
        return bounce_in(t * 2) / 2
    return bounce_out(t * 2 - 1) / 2 + 0.5


# --- Hermite ---


def smoothstep(t: float) -> float:
    return t * t * (3 - 2 * t)


def smootherstep(t: float) -> float:
    """Zero first and second derivative at both ends."""
    return t * t * t * (t * (6 * t - 15) + 10)


EASINGS: dict[str, Callable[[float], float]] = {
    "linear": linear,
    "quad_in": quad_in,
    "quad_out": quad_out,
    "quad_in_out": quad_in_out,
    "cubic_in": cubic_in,
    "cubic_out": cubic_out,
    "cubic_in_out": cubic_in_out,
    "quart_in": quart_in,
    "quart_out": quart_out,
    "quart_in_out": quart_in_out,
    "quint_in": quint_in,
    "quint_out": quint_out,
    "quint_in_out": quint_in_out,
    "sine_in": sine_in,
    "sine_out": sine_out,
    "sine_in_out": sine_in_out,
    "expo_in": expo_in,
    "expo_out": expo_out,
    "expo_in_out": expo_in_out,
    "circ_in": circ_in,
    "circ_out": circ_out,
    "circ_in_out": circ_in_out,
    "elastic_in": elastic_in,
    "elastic_out": elastic_out,
    "elastic_in_out": elastic_in_out,
    "back_in": back_in,
    "back_out": back_out,
    "back_in_out": back_in_out,
    "bounce_in": bounce_in,
    "bounce_out": bounce_out,
    "bounce_in_out": bounce_in_out,
    "smoothstep": smoothstep,
    "smootherstep": smootherstep,
}


def resolve_easing(ease: str | Callable[[float], float]) -> Callable[[float], float]:
    """Return the easing callable for a registry name or pass a callable through.

    Raises KeyError for unknown names and TypeError for anything else.
    """
    if isinstance(ease, str):
        try:
            return EASINGS[ease]
        except KeyError:
            raise KeyError(f"Unknown easing: {ease!r}") from None
    if not callable(ease):
        raise TypeError(f"easing must be a name or a callable, got {type(ease).__name__}")
    return ease
