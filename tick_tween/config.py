"""Tween configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from tick_tween.easing import linear
from tick_tween.types import LoopType


@dataclass(frozen=True)
class TweenConfig:
    """Immutable playback defaults applied to a Tween before it starts.

    Attributes:
        delay: Seconds to wait after ``start`` before the value begins to move.
        time_scale: Multiplier on every ``dt`` passed to ``update`` (0 freezes).
        loop_type: How the tween repeats once it reaches its end.
        loop_count: Extra iterations after the first; -1 loops forever.
        ease: Easing function or registry name.
    """

    delay: float = 0.0
    time_scale: float = 1.0
    loop_type: LoopType = LoopType.NONE
    loop_count: int = 0
    ease: str | Callable[[float], float] = linear

    def __post_init__(self) -> None:
        if self.delay < 0:
            raise ValueError(f"delay must be >= 0, got {self.delay}")
        if self.time_scale < 0:
            raise ValueError(f"time_scale must be >= 0, got {self.time_scale}")
        if self.loop_count < -1:
            raise ValueError(f"loop_count must be >= -1, got {self.loop_count}")
