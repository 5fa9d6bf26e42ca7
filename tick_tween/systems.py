"""System factory that drives tweens from the tick engine's clock."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from tick_tween.manager import TweenManager

if TYPE_CHECKING:
    from tick import TickContext, World


def make_tween_system(
    manager: TweenManager,
) -> Callable[[World, TickContext], None]:
    """Return a system that advances ``manager`` by ``ctx.dt`` every tick."""

    def tween_system(world: World, ctx: TickContext) -> None:
        manager.update(ctx.dt)

    return tween_system
