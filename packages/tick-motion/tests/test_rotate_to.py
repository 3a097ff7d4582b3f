"""Tests for the rotate-to tween and automatic direction resolution."""
from __future__ import annotations

import math

import pytest
from tick import Engine

from tick_motion import (
    MotionConfig,
    MotionEvent,
    MotionEvents,
    MotionManager,
    RotateDirection,
    Transform,
    TweenHandler,
    make_motion_system,
    resolve_direction,
)

DEGREES = MotionConfig(full_turn=360.0)


class RecordingHandler(TweenHandler):
    """Tween handler that records notification names."""

    def __init__(self) -> None:
        self.log: list[str] = []

    def on_complete(self, world, eid):
        self.log.append("complete")

    def on_cancel(self, world, eid):
        self.log.append("cancel")


def _setup(rotation: float = 0.0, config: MotionConfig | None = None, tps: int = 10):
    engine = Engine(tps=tps)
    events = MotionEvents()
    manager = MotionManager(engine.clock, events=events, config=config)
    engine.add_system(make_motion_system(manager))
    eid = engine.world.spawn()
    kin = manager.add_body(engine.world, eid, rotation=rotation)
    return engine, manager, events, eid, kin


class TestResolveDirection:
    """Test the automatic direction table."""

    @pytest.mark.parametrize(
        ("rotation", "target", "direction", "start"),
        [
            (10.0, 350.0, RotateDirection.ANTI_CLOCKWISE, 370.0),
            (10.0, 185.0, RotateDirection.CLOCKWISE, 10.0),
            (10.0, 90.0, RotateDirection.CLOCKWISE, 10.0),
            (90.0, 10.0, RotateDirection.ANTI_CLOCKWISE, 90.0),
            (200.0, 300.0, RotateDirection.ANTI_CLOCKWISE, 200.0),
            (300.0, 200.0, RotateDirection.CLOCKWISE, 300.0),
            (200.0, 100.0, RotateDirection.ANTI_CLOCKWISE, 200.0),
            (300.0, 100.0, RotateDirection.CLOCKWISE, 300.0),
        ],
    )
    def test_decision_table_in_degrees(self, rotation, target, direction, start):
        """Each branch of the table picks the expected sweep."""
        assert resolve_direction(rotation, target, DEGREES) == (direction, start)

    def test_radians_wrap_adds_full_turn(self):
        """The wrap case shifts the start up by 2 pi."""
        rotation = math.radians(10)
        direction, start = resolve_direction(rotation, math.radians(350), MotionConfig())
        assert direction is RotateDirection.ANTI_CLOCKWISE
        assert start == pytest.approx(math.radians(370))


class TestRotateTo:
    """Test rotation interpolation and completion."""

    def test_wrap_sweeps_down_through_zero(self):
        """10 -> 350 degrees runs 370 -> 350 instead of 10 -> 350 forward."""
        engine, manager, _, eid, _ = _setup(rotation=10.0, config=DEGREES)
        rotate = manager.rotate_to(engine.world, eid, 350.0, 10)
        assert rotate.direction is RotateDirection.ANTI_CLOCKWISE
        assert rotate.start_angle == 370.0

        samples = []
        for _ in range(10):
            engine.step()
            samples.append(engine.world.get(eid, Transform).rotation)
        assert samples[4] == pytest.approx(360.0)
        assert samples == sorted(samples, reverse=True)
        assert all(350.0 <= s <= 370.0 for s in samples)
        assert samples[-1] == 350.0

    def test_clockwise_interpolation_in_radians(self):
        """Clockwise interpolation increases rotation."""
        engine, manager, _, eid, _ = _setup(rotation=0.5)
        rotate = manager.rotate_to(engine.world, eid, 2.0, 4)
        assert rotate.direction is RotateDirection.CLOCKWISE
        engine.run(2)
        assert engine.world.get(eid, Transform).rotation == pytest.approx(1.25)

    def test_explicit_anticlockwise(self):
        """An explicit direction bypasses the table."""
        engine, manager, _, eid, _ = _setup(rotation=1.0)
        manager.rotate_to(
            engine.world, eid, 0.0, 10, direction=RotateDirection.ANTI_CLOCKWISE
        )
        engine.run(5)
        assert engine.world.get(eid, Transform).rotation == pytest.approx(0.5)

    def test_rotation_normalized_before_start(self):
        """Rotation beyond a full turn is wrapped before starting."""
        engine, manager, _, eid, _ = _setup(rotation=2 * math.pi + 1.0)
        rotate = manager.rotate_to(
            engine.world, eid, 2.0, 10, direction=RotateDirection.CLOCKWISE
        )
        assert rotate.start_angle == pytest.approx(1.0)
        assert engine.world.get(eid, Transform).rotation == pytest.approx(1.0)

    def test_negative_rotation_normalizes_into_one_turn(self):
        """Negative rotation wraps into [0, full_turn)."""
        engine, manager, _, eid, _ = _setup(rotation=-90.0, config=DEGREES)
        rotate = manager.rotate_to(
            engine.world, eid, 0.0, 10, direction=RotateDirection.CLOCKWISE
        )
        assert rotate.start_angle == 270.0

    def test_completion_snaps_and_notifies(self):
        """Completion snaps to the target and clears angular state."""
        engine, manager, events, eid, kin = _setup(rotation=0.0)
        handler = RecordingHandler()
        named = []
        events.connect(MotionEvent.ROTATE_TO_COMPLETE, lambda e, i: named.append(i))
        manager.rotate_to(engine.world, eid, 1.5, 5, easing="smooth", handler=handler)
        engine.run(3)
        kin.set_angular_velocity(4.0)
        engine.run(10)
        assert engine.world.get(eid, Transform).rotation == 1.5
        assert kin.angular_velocity == 0.0
        assert handler.log == ["complete"]
        assert named == [eid]
        assert not manager.is_rotating_to(engine.world, eid)

    def test_zero_duration_completes_on_first_tick(self):
        """A zero duration snaps on the next tick."""
        engine, manager, _, eid, _ = _setup(rotation=0.2)
        manager.rotate_to(engine.world, eid, 3.0, 0)
        engine.step()
        assert engine.world.get(eid, Transform).rotation == 3.0


class TestRotateCancellation:
    """Test superseding a rotate-to."""

    def test_second_rotate_cancels_first(self):
        """The replaced tween is cancelled and the new one completes."""
        engine, manager, events, eid, _ = _setup()
        first = RecordingHandler()
        second = RecordingHandler()
        cancels = []
        events.connect(MotionEvent.ROTATE_TO_CANCEL, lambda e, i: cancels.append(i))
        manager.rotate_to(engine.world, eid, 1.0, 10, handler=first)
        engine.run(2)
        manager.rotate_to(engine.world, eid, 2.0, 10, handler=second)
        engine.run(20)
        assert first.log == ["cancel"]
        assert second.log == ["complete"]
        assert cancels == [eid]

    def test_superseding_rotate_without_handler_emits_one_cancel(self):
        """A handlerless rotate-to that gets replaced still emits exactly one cancel."""
        engine, manager, events, eid, _ = _setup()
        log = []
        events.connect(MotionEvent.ROTATE_TO_CANCEL, lambda e, i: log.append((e, i)))
        events.connect(MotionEvent.ROTATE_TO_COMPLETE, lambda e, i: log.append((e, i)))
        manager.rotate_to(engine.world, eid, 1.0, 10)
        engine.run(2)
        second = RecordingHandler()
        manager.rotate_to(engine.world, eid, 2.0, 10, handler=second)
        assert log == [(MotionEvent.ROTATE_TO_CANCEL, eid)]

        engine.run(20)
        assert log == [
            (MotionEvent.ROTATE_TO_CANCEL, eid),
            (MotionEvent.ROTATE_TO_COMPLETE, eid),
        ]
        assert second.log == ["complete"]
        assert engine.world.get(eid, Transform).rotation == 2.0

    def test_rotate_resets_angular_but_not_linear(self):
        """Starting a rotate-to clears angular state only."""
        engine, manager, _, eid, kin = _setup()
        kin.set_speed_x(3.0)
        kin.set_angular_velocity(2.0)
        kin.set_angular_acceleration(1.0, 5.0)
        manager.rotate_to(engine.world, eid, 1.0, 10)
        assert kin.speed_x == 3.0
        assert kin.angular_velocity == 0.0
        assert kin.angular_acceleration == 0.0
        assert kin.terminal_angular_velocity == 0.0

    def test_move_and_rotate_run_together(self):
        """Move-to and rotate-to advance independently."""
        engine, manager, _, eid, _ = _setup()
        manager.move_to(engine.world, eid, 10.0, 0.0, 10)
        manager.rotate_to(engine.world, eid, 1.0, 10)
        engine.run(5)
        transform = engine.world.get(eid, Transform)
        assert transform.x == pytest.approx(5.0)
        assert transform.rotation == pytest.approx(0.5)
