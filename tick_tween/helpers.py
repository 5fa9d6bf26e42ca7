"""One-call construction helpers."""
from __future__ import annotations

from typing import Any, Callable

from tick_tween.blends import lerp
from tick_tween.sequence import Sequence
from tick_tween.tween import Tween
from tick_tween.types import Blend, Playback


def to(
    start: Any,
    end: Any,
    duration: float,
    on_update: Callable[[Any], None] | None = None,
    ease: str | Callable[[float], float] = "linear",
    blend: Blend | None = None,
) -> Tween:
    """Build and start a tween from ``start`` to ``end``.

    Numbers are lerped unless ``blend`` is given. ``on_update`` is
    registered before starting, so it sees every frame.
    """
    tween: Tween = Tween(blend if blend is not None else lerp)
    if on_update is not None:
        tween.on_update(on_update)
    return tween.start(start, end, duration, ease)


def sequence(*units: Playback) -> Sequence:
    """Build an unstarted Sequence from ``units`` in order."""
    seq = Sequence()
    for unit in units:
        seq.append(unit)
    return seq
