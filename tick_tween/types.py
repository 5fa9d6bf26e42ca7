"""Shared enums, protocols and errors for tick-tween."""
from __future__ import annotations

from enum import Enum
from typing import Callable, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")

Easing = Callable[[float], float]
Blend = Callable[[T, T, float], T]


class TweenState(Enum):
    DELAYED = "delayed"
    RUNNING = "running"
    PAUSED = "paused"
    STOPPED = "stopped"


class StopBehavior(Enum):
    AS_IS = "as_is"
    FORCE_COMPLETE = "force_complete"


class LoopType(Enum):
    NONE = "none"
    RESTART = "restart"
    PING_PONG = "ping_pong"
    YOYO = "yoyo"


class EmptySequenceError(ValueError):
    """Raised when starting a Sequence that has no members."""


@runtime_checkable
class Playback(Protocol):
    """Playback control shared by Tween and Sequence.

    ``update`` returns the part of ``dt`` left unused when the unit finished
    during that call (0.0 otherwise), so containers can hand it on.
    """

    @property
    def state(self) -> TweenState: ...

    @property
    def is_complete(self) -> bool: ...

    @property
    def progress(self) -> float: ...

    @progress.setter
    def progress(self, value: float) -> None: ...

    @property
    def time_scale(self) -> float: ...

    @time_scale.setter
    def time_scale(self, value: float) -> None: ...

    def update(self, dt: float) -> float: ...
    def stop(self, behavior: StopBehavior = StopBehavior.AS_IS) -> None: ...
    def pause(self) -> None: ...
    def resume(self) -> None: ...
    def restart(self) -> None: ...
    def reverse(self) -> None: ...
