"""TweenManager: drives a collection of playback units from one clock."""
from __future__ import annotations

import logging
from typing import Iterator

from tick_tween.types import Playback, StopBehavior

logger = logging.getLogger(__name__)


class TweenManager:
    """Holds active tweens and sequences, advancing them together.

    Works only through the public playback contract. Units are evicted on
    the ``update`` that sees them complete.
    """

    def __init__(self) -> None:
        self._units: list[Playback] = []
        self._time_scale = 1.0

    def add(self, unit: Playback) -> Playback:
        """Track a unit and return it. Adding the same unit twice is a no-op."""
        if unit not in self._units:
            self._units.append(unit)
        return unit

    def remove(self, unit: Playback) -> bool:
        """Stop tracking ``unit``. Returns False if it was not tracked."""
        try:
            self._units.remove(unit)
        except ValueError:
            return False
        return True

    def update(self, dt: float) -> None:
        # Snapshot: callbacks may add or remove units mid-pass.
        for unit in list(self._units):
            if unit not in self._units:
                continue
            unit.update(dt)
            if unit.is_complete and unit in self._units:
                self._units.remove(unit)
                logger.debug("evicted completed %s", type(unit).__name__)

    def stop_all(self, behavior: StopBehavior = StopBehavior.AS_IS) -> None:
        """Stop every unit with ``behavior``, then forget them all."""
        units, self._units = self._units, []
        for unit in units:
            unit.stop(behavior)
        logger.debug("stopped %d units (%s)", len(units), behavior.value)

    def pause_all(self) -> None:
        for unit in list(self._units):
            unit.pause()

    def resume_all(self) -> None:
        for unit in list(self._units):
            unit.resume()

    def clear(self) -> None:
        """Forget every unit without touching its state."""
        self._units.clear()

    @property
    def time_scale(self) -> float:
        """Last scale broadcast to the tracked units."""
        return self._time_scale

    @time_scale.setter
    def time_scale(self, value: float) -> None:
        if value < 0:
            raise ValueError(f"time_scale must be >= 0, got {value}")
        self._time_scale = value
        for unit in self._units:
            unit.time_scale = value

    def __len__(self) -> int:
        return len(self._units)

    def __contains__(self, unit: object) -> bool:
        return unit in self._units

    def __iter__(self) -> Iterator[Playback]:
        return iter(list(self._units))
