"""tick-tween - Time-driven value interpolation with easing, loops and sequences."""
from __future__ import annotations

from tick_tween.blends import (
    AngleTween,
    ColorTween,
    FloatTween,
    VectorTween,
    lerp,
    lerp_angle,
    lerp_color,
    lerp_vector,
)
from tick_tween.config import TweenConfig
from tick_tween.easing import EASINGS, resolve_easing
from tick_tween.helpers import sequence, to
from tick_tween.manager import TweenManager
from tick_tween.sequence import Sequence
from tick_tween.systems import make_tween_system
from tick_tween.tween import Tween
from tick_tween.types import (
    EmptySequenceError,
    LoopType,
    Playback,
    StopBehavior,
    TweenState,
)

__all__ = [
    "AngleTween",
    "ColorTween",
    "EASINGS",
    "EmptySequenceError",
    "FloatTween",
    "LoopType",
    "Playback",
    "Sequence",
    "StopBehavior",
    "Tween",
    "TweenConfig",
    "TweenManager",
    "TweenState",
    "VectorTween",
    "lerp",
    "lerp_angle",
    "lerp_color",
    "lerp_vector",
    "make_tween_system",
    "resolve_easing",
    "sequence",
    "to",
]
