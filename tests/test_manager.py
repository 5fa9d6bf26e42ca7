"""Tests for TweenManager, the helpers and the tick system factory."""
from types import SimpleNamespace

import pytest

from tick_tween import (
    FloatTween,
    LoopType,
    Sequence,
    StopBehavior,
    TweenConfig,
    TweenManager,
    TweenState,
    VectorTween,
    lerp_vector,
    make_tween_system,
    sequence,
    to,
)


class TestTweenManager:
    """Test bulk management over the playback contract."""

    def test_add_and_contains(self):
        manager = TweenManager()
        tween = manager.add(FloatTween().start(0.0, 1.0, 1.0))
        assert tween in manager
        assert len(manager) == 1

    def test_add_twice_tracks_once(self):
        manager = TweenManager()
        tween = FloatTween().start(0.0, 1.0, 1.0)
        manager.add(tween)
        manager.add(tween)
        assert len(manager) == 1

    def test_update_evicts_completed(self):
        manager = TweenManager()
        short = manager.add(FloatTween().start(0.0, 1.0, 0.5))
        long = manager.add(FloatTween().start(0.0, 1.0, 2.0))
        manager.update(1.0)
        assert short not in manager
        assert long in manager
        assert short.is_complete

    def test_update_drives_sequences(self):
        manager = TweenManager()
        seq = sequence(
            FloatTween().start(0.0, 1.0, 1.0),
            FloatTween().start(1.0, 2.0, 1.0),
        ).start()
        manager.add(seq)
        manager.update(1.0)
        assert seq in manager
        manager.update(1.0)
        assert seq not in manager
        assert seq.is_complete

    def test_remove(self):
        manager = TweenManager()
        tween = manager.add(FloatTween().start(0.0, 1.0, 1.0))
        assert manager.remove(tween)
        assert not manager.remove(tween)
        assert len(manager) == 0

    def test_stop_all_force_complete_clears(self):
        manager = TweenManager()
        tweens = [manager.add(FloatTween().start(0.0, 1.0, 1.0)) for _ in range(3)]
        manager.stop_all(StopBehavior.FORCE_COMPLETE)
        assert len(manager) == 0
        assert all(t.is_complete for t in tweens)

    def test_stop_all_as_is(self):
        manager = TweenManager()
        tween = manager.add(FloatTween().start(0.0, 10.0, 1.0))
        manager.update(0.5)
        manager.stop_all()
        assert tween.state is TweenState.STOPPED
        assert tween.current_value == pytest.approx(5.0)
        assert len(manager) == 0

    def test_pause_and_resume_all(self):
        manager = TweenManager()
        a = manager.add(FloatTween().start(0.0, 1.0, 1.0))
        b = manager.add(FloatTween().set_delay(1.0).start(0.0, 1.0, 1.0))
        manager.pause_all()
        assert a.state is TweenState.PAUSED
        assert b.state is TweenState.PAUSED
        manager.update(5.0)
        assert len(manager) == 2
        manager.resume_all()
        assert a.state is TweenState.RUNNING
        assert b.state is TweenState.DELAYED

    def test_time_scale_broadcast(self):
        manager = TweenManager()
        a = manager.add(FloatTween().start(0.0, 1.0, 1.0))
        b = manager.add(FloatTween().start(0.0, 1.0, 1.0))
        manager.time_scale = 0.0
        manager.update(1.0)
        assert a.time_scale == 0.0
        assert b.elapsed == 0.0

    def test_negative_time_scale_raises(self):
        with pytest.raises(ValueError):
            TweenManager().time_scale = -0.5

    def test_callback_can_add_units(self):
        manager = TweenManager()
        follow = FloatTween()
        first = FloatTween()
        first.on_complete(lambda: manager.add(follow.start(0.0, 1.0, 1.0)))
        manager.add(first.start(0.0, 1.0, 1.0))
        manager.update(1.0)
        assert first not in manager
        assert follow in manager
        assert follow.elapsed == 0.0

    def test_restarted_unit_is_kept(self):
        manager = TweenManager()
        tween = FloatTween()
        tween.on_complete(tween.restart)
        manager.add(tween.start(0.0, 1.0, 1.0))
        manager.update(1.0)
        assert tween in manager

    def test_iteration_and_clear(self):
        manager = TweenManager()
        tweens = [manager.add(FloatTween().start(0.0, 1.0, 1.0)) for _ in range(2)]
        assert list(manager) == tweens
        manager.clear()
        assert len(manager) == 0
        assert tweens[0].state is TweenState.RUNNING


class TestHelpers:
    """Test construction helpers."""

    def test_to_starts_float_tween(self):
        seen = []
        tween = to(0.0, 100.0, 2.0, seen.append, "quad_in")
        assert tween.state is TweenState.RUNNING
        tween.update(1.0)
        assert seen == [pytest.approx(25.0)]

    def test_to_with_custom_blend(self):
        tween = to((0.0, 0.0), (2.0, 2.0), 1.0, blend=lerp_vector)
        tween.update(0.5)
        assert tween.current_value == pytest.approx((1.0, 1.0))

    def test_sequence_helper_keeps_order(self):
        a = FloatTween().start(0.0, 1.0, 1.0)
        b = FloatTween().start(1.0, 2.0, 1.0)
        seq = sequence(a, b)
        assert isinstance(seq, Sequence)
        assert seq.units == (a, b)
        assert seq.state is TweenState.STOPPED


class TestTweenConfig:
    """Test config validation."""

    def test_defaults(self):
        config = TweenConfig()
        assert config.delay == 0.0
        assert config.time_scale == 1.0
        assert config.loop_type is LoopType.NONE
        assert config.loop_count == 0

    @pytest.mark.parametrize(
        "kwargs",
        [{"delay": -1.0}, {"time_scale": -0.1}, {"loop_count": -2}],
    )
    def test_invalid_values_raise(self, kwargs):
        with pytest.raises(ValueError):
            TweenConfig(**kwargs)

    def test_configure_is_chainable(self):
        tween = VectorTween().configure(TweenConfig(loop_type=LoopType.PING_PONG, loop_count=-1))
        assert tween.loop_type is LoopType.PING_PONG
        assert tween.loop_count == -1


class TestTweenSystem:
    """Test the tick-engine system factory."""

    def test_system_advances_manager_by_ctx_dt(self):
        manager = TweenManager()
        tween = manager.add(FloatTween().start(0.0, 10.0, 1.0))
        system = make_tween_system(manager)
        ctx = SimpleNamespace(dt=0.25)
        system(None, ctx)
        assert tween.current_value == pytest.approx(2.5)
        for _ in range(3):
            system(None, ctx)
        assert tween.is_complete
        assert len(manager) == 0
