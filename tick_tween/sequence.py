"""Sequence: plays playback units strictly one after another."""
from __future__ import annotations

import logging
from typing import Callable

from tick_tween.types import EmptySequenceError, Playback, StopBehavior, TweenState

logger = logging.getLogger(__name__)


class Sequence:
    """Ordered composition of tweens and nested sequences.

    Only the unit at ``current_index`` receives time. When it reports
    completion the sequence moves on; time the finished unit did not use is
    handed to the next one within the same ``update`` call.

    The progress setter is approximate: it seeks only the member that the
    target falls in and leaves earlier members as they were.
    """

    def __init__(self) -> None:
        self._units: list[Playback] = []
        self._index = 0
        self._state = TweenState.STOPPED
        self._time_scale = 1.0
        self._complete_hooks: list[Callable[[], None]] = []

    def append(self, unit: Playback) -> Sequence:
        """Add a unit to the end; it inherits the sequence's current time scale."""
        unit.time_scale = self._time_scale
        self._units.append(unit)
        return self

    def on_complete(self, hook: Callable[[], None]) -> Sequence:
        self._complete_hooks.append(hook)
        return self

    # --- Properties ---

    @property
    def units(self) -> tuple[Playback, ...]:
        return tuple(self._units)

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def state(self) -> TweenState:
        return self._state

    @property
    def is_complete(self) -> bool:
        return (
            bool(self._units)
            and self._state is TweenState.STOPPED
            and self._index >= len(self._units)
        )

    @property
    def time_scale(self) -> float:
        return self._time_scale

    @time_scale.setter
    def time_scale(self, value: float) -> None:
        if value < 0:
            raise ValueError(f"time_scale must be >= 0, got {value}")
        self._time_scale = value
        for unit in self._units:
            unit.time_scale = value

    @property
    def progress(self) -> float:
        """Approximate overall progress: (index + active unit progress) / count."""
        count = len(self._units)
        if count == 0:
            return 0.0
        if self._index >= count:
            return 1.0
        return (self._index + self._units[self._index].progress) / count

    @progress.setter
    def progress(self, value: float) -> None:
        count = len(self._units)
        if count == 0:
            return
        scaled = max(0.0, min(1.0, value)) * count
        index = min(int(scaled), count - 1)
        self._index = index
        self._units[index].progress = scaled - index

    def __len__(self) -> int:
        return len(self._units)

    # --- Playback ---

    def start(self) -> Sequence:
        """Play from the first unit. Raises EmptySequenceError with no units."""
        if not self._units:
            raise EmptySequenceError("cannot start an empty Sequence")
        self._index = 0
        self._state = TweenState.RUNNING
        logger.debug("sequence started with %d units", len(self._units))
        return self

    def update(self, dt: float) -> float:
        """Advance the active unit. Returns unused time once the sequence ends."""
        remaining = dt
        while self._state is TweenState.RUNNING and self._index < len(self._units):
            index = self._index
            unit = self._units[index]
            remaining = unit.update(remaining)
            # A member callback may have re-entered this sequence.
            if self._state is not TweenState.RUNNING or self._index != index:
                return 0.0
            if not unit.is_complete:
                return 0.0
            self._index += 1
            if self._index >= len(self._units):
                self._finish()
                return remaining
            if remaining <= 0:
                return 0.0
        return 0.0

    def stop(self, behavior: StopBehavior = StopBehavior.AS_IS) -> None:
        if behavior is StopBehavior.FORCE_COMPLETE:
            if self._state is TweenState.STOPPED:
                return
            for unit in list(self._units):
                unit.stop(StopBehavior.FORCE_COMPLETE)
            self._index = len(self._units)
            self._finish()
            return
        self._state = TweenState.STOPPED

    def pause(self) -> None:
        """Pause the active unit only."""
        if self._state is not TweenState.RUNNING:
            return
        self._state = TweenState.PAUSED
        if self._index < len(self._units):
            self._units[self._index].pause()

    def resume(self) -> None:
        if self._state is not TweenState.PAUSED:
            return
        self._state = TweenState.RUNNING
        if self._index < len(self._units):
            self._units[self._index].resume()

    def restart(self) -> None:
        """Restart every unit, reached or not, and play from the first."""
        if not self._units:
            return
        for unit in self._units:
            unit.restart()
        self._index = 0
        self._state = TweenState.RUNNING

    def reverse(self) -> None:
        raise NotImplementedError("Sequence does not support reverse")

    def _finish(self) -> None:
        self._state = TweenState.STOPPED
        logger.debug("sequence completed")
        for hook in list(self._complete_hooks):
            hook()
