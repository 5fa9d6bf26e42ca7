"""Generic tween: timing state machine over a host-supplied blend function."""
from __future__ import annotations

import logging
from typing import Callable, Generic

from tick_tween.config import TweenConfig
from tick_tween.easing import linear, resolve_easing
from tick_tween.types import Blend, LoopType, StopBehavior, T, TweenState

logger = logging.getLogger(__name__)

_Hook = Callable[[], None]


class Tween(Generic[T]):
    """Interpolates between two values of any type over time.

    The tween is inert until ``start`` is called. The host then drives it
    with ``update(dt)`` once per frame. ``current_value`` always reflects the
    blend of the endpoints at the current (eased) progress.

    Callbacks registered through ``on_start``/``on_update``/``on_loop``/
    ``on_complete`` run synchronously in registration order. Internal
    bookkeeping is settled before each callback, so a callback may stop,
    restart or reverse the tween.
    """

    def __init__(self, blend: Blend[T], config: TweenConfig | None = None) -> None:
        if blend is None or not callable(blend):
            raise TypeError("Tween requires a callable blend function")
        self._blend = blend
        self._ease: Callable[[float], float] = linear

        self._has_values = False
        self._start_value: T | None = None
        self._end_value: T | None = None
        self._current_value: T | None = None

        self._duration = 0.0
        self._elapsed = 0.0
        self._delay = 0.0
        self._delay_remaining = 0.0
        self._time_scale = 1.0
        self._state = TweenState.STOPPED

        self._loop_type = LoopType.NONE
        self._loop_count = 0
        self._loops_remaining = 0
        self._reversed_phase = False
        # Bumped on every start/restart so update() can tell that a callback
        # began a new run underneath it.
        self._run_id = 0

        self._start_hooks: list[_Hook] = []
        self._update_hooks: list[Callable[[T], None]] = []
        self._loop_hooks: list[_Hook] = []
        self._complete_hooks: list[_Hook] = []

        if config is not None:
            self.configure(config)

    # --- Configuration ---

    def configure(self, config: TweenConfig) -> Tween[T]:
        """Apply delay, time scale, loop and easing defaults from a config."""
        self.set_delay(config.delay)
        self.set_time_scale(config.time_scale)
        self.set_loop(config.loop_type, config.loop_count)
        self.set_ease(config.ease)
        return self

    def set_delay(self, delay: float) -> Tween[T]:
        """Seconds to wait before moving. Takes effect on the next start/restart."""
        if delay < 0:
            raise ValueError(f"delay must be >= 0, got {delay}")
        self._delay = delay
        return self

    def set_loop(self, loop_type: LoopType, count: int = -1) -> Tween[T]:
        """Set the loop mode. ``count`` is extra iterations; -1 loops forever."""
        if count < -1:
            raise ValueError(f"loop_count must be >= -1, got {count}")
        self._loop_type = loop_type
        self._loop_count = count
        self._loops_remaining = count
        return self

    def set_time_scale(self, scale: float) -> Tween[T]:
        self.time_scale = scale
        return self

    def set_ease(self, ease: str | Callable[[float], float]) -> Tween[T]:
        """Replace the easing function and refresh the current value."""
        self._ease = resolve_easing(ease)
        self._recompute()
        return self

    # --- Callbacks ---

    def on_start(self, hook: _Hook) -> Tween[T]:
        self._start_hooks.append(hook)
        return self

    def on_update(self, hook: Callable[[T], None]) -> Tween[T]:
        self._update_hooks.append(hook)
        return self

    def on_loop(self, hook: _Hook) -> Tween[T]:
        self._loop_hooks.append(hook)
        return self

    def on_complete(self, hook: _Hook) -> Tween[T]:
        self._complete_hooks.append(hook)
        return self

    # --- Properties ---

    @property
    def state(self) -> TweenState:
        return self._state

    @property
    def current_value(self) -> T | None:
        return self._current_value

    @property
    def start_value(self) -> T | None:
        return self._start_value

    @property
    def end_value(self) -> T | None:
        return self._end_value

    @property
    def duration(self) -> float:
        return self._duration

    @property
    def elapsed(self) -> float:
        return self._elapsed

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def delay_remaining(self) -> float:
        return self._delay_remaining

    @property
    def ease(self) -> Callable[[float], float]:
        return self._ease

    @property
    def loop_type(self) -> LoopType:
        return self._loop_type

    @property
    def loop_count(self) -> int:
        return self._loop_count

    @property
    def loops_remaining(self) -> int:
        return self._loops_remaining

    @property
    def time_scale(self) -> float:
        return self._time_scale

    @time_scale.setter
    def time_scale(self, value: float) -> None:
        if value < 0:
            raise ValueError(f"time_scale must be >= 0, got {value}")
        self._time_scale = value

    @property
    def progress(self) -> float:
        """Fraction of the current iteration played, in [0, 1]."""
        if self._duration <= 0:
            return 0.0
        return self._elapsed / self._duration

    @progress.setter
    def progress(self, value: float) -> None:
        value = max(0.0, min(1.0, value))
        self._elapsed = value * self._duration
        self._recompute()

    @property
    def is_complete(self) -> bool:
        """True once the tween has played to its end (not merely been stopped)."""
        return (
            self._has_values
            and self._state is TweenState.STOPPED
            and self._elapsed >= self._duration
        )

    # --- Playback ---

    def start(
        self,
        start: T,
        end: T,
        duration: float,
        ease: str | Callable[[float], float] | None = None,
    ) -> Tween[T]:
        """Begin a new run from ``start`` to ``end`` over ``duration`` seconds.

        Raises ValueError if ``duration`` is not positive; nothing is
        changed in that case.
        """
        if duration <= 0:
            logger.debug("rejected start with duration=%r", duration)
            raise ValueError(f"duration must be > 0, got {duration}")
        resolved = resolve_easing(ease) if ease is not None else self._ease

        self._start_value = start
        self._end_value = end
        self._duration = duration
        self._ease = resolved
        self._has_values = True
        self._begin_run()

        logger.debug(
            "tween started: duration=%s delay=%s loop=%s/%s",
            duration, self._delay, self._loop_type.value, self._loop_count,
        )
        if self._state is TweenState.RUNNING:
            self._emit(self._start_hooks)
        return self

    def update(self, dt: float) -> float:
        """Advance by ``dt`` host seconds.

        Returns the host time left over when the tween finished during this
        call, 0.0 otherwise.
        """
        if self._state not in (TweenState.DELAYED, TweenState.RUNNING):
            return 0.0
        if self._time_scale == 0:
            return 0.0

        step = dt * self._time_scale
        if self._state is TweenState.DELAYED:
            self._delay_remaining -= step
            if self._delay_remaining > 0:
                return 0.0
            step = -self._delay_remaining
            self._delay_remaining = 0.0
            self._state = TweenState.RUNNING
            run_id = self._run_id
            self._emit(self._start_hooks)
            if self._run_id != run_id or self._state is not TweenState.RUNNING:
                return 0.0

        leftover = self._advance(step)
        if leftover > 0 and self._time_scale > 0:
            return leftover / self._time_scale
        return 0.0

    def stop(self, behavior: StopBehavior = StopBehavior.AS_IS) -> None:
        """Stop in place, or jump to the end and fire completion.

        FORCE_COMPLETE on an already stopped tween does nothing.
        """
        if behavior is StopBehavior.FORCE_COMPLETE:
            if self._state is TweenState.STOPPED:
                return
            self._elapsed = self._duration
            self._delay_remaining = 0.0
            self._state = TweenState.STOPPED
            self._recompute()
            logger.debug("tween force-completed")
            self._emit(self._complete_hooks)
            return
        self._state = TweenState.STOPPED

    def pause(self) -> None:
        if self._state in (TweenState.DELAYED, TweenState.RUNNING):
            self._state = TweenState.PAUSED

    def resume(self) -> None:
        if self._state is not TweenState.PAUSED:
            return
        if self._delay_remaining > 0:
            self._state = TweenState.DELAYED
        else:
            self._state = TweenState.RUNNING

    def restart(self) -> None:
        """Replay from time zero with the current endpoints and loop settings."""
        if not self._has_values:
            return
        self._begin_run()

    def reverse(self) -> None:
        """Swap endpoints and mirror elapsed time so motion heads back."""
        if not self._has_values:
            return
        self._start_value, self._end_value = self._end_value, self._start_value
        self._elapsed = self._duration - self._elapsed
        self._recompute()

    # --- Internals ---

    def _begin_run(self) -> None:
        self._run_id += 1
        self._elapsed = 0.0
        self._loops_remaining = self._loop_count
        self._reversed_phase = False
        self._delay_remaining = self._delay
        if self._delay > 0:
            self._state = TweenState.DELAYED
        else:
            self._state = TweenState.RUNNING
        self._recompute()

    def _advance(self, step: float) -> float:
        """Move the running clock; returns unused scaled time on final completion."""
        self._elapsed += step
        if self._elapsed < self._duration:
            self._recompute()
            self._emit_update()
            return 0.0

        overflow = self._elapsed - self._duration
        self._elapsed = self._duration
        self._recompute()
        run_id = self._run_id
        self._emit_update()
        if self._run_id != run_id or self._state is not TweenState.RUNNING:
            return 0.0
        if self._finish_iteration():
            return overflow
        return 0.0

    def _finish_iteration(self) -> bool:
        """Loop or stop at the end of an iteration. True if the tween completed."""
        if self._loop_type is not LoopType.NONE and (
            self._loop_count == -1 or self._loops_remaining > 0
        ):
            if self._loop_count != -1:
                self._loops_remaining -= 1
            self._elapsed = 0.0
            if self._loop_type is LoopType.RESTART:
                self._reversed_phase = False
            elif self._loop_type is LoopType.PING_PONG:
                self._reversed_phase = not self._reversed_phase
                self._start_value, self._end_value = self._end_value, self._start_value
            elif self._loop_type is LoopType.YOYO:
                self._reversed_phase = not self._reversed_phase
            self._recompute()
            logger.debug(
                "tween looped (%s), %s remaining",
                self._loop_type.value, self._loops_remaining,
            )
            self._emit(self._loop_hooks)
            return False

        self._state = TweenState.STOPPED
        logger.debug("tween completed")
        self._emit(self._complete_hooks)
        return True

    def _recompute(self) -> None:
        if not self._has_values:
            return
        t = self.progress
        if self._reversed_phase and self._loop_type is LoopType.YOYO:
            t = 1.0 - t
        self._current_value = self._blend(self._start_value, self._end_value, self._ease(t))

    def _emit_update(self) -> None:
        value = self._current_value
        for hook in list(self._update_hooks):
            hook(value)

    @staticmethod
    def _emit(hooks: list[_Hook]) -> None:
        for hook in list(hooks):
            hook()
