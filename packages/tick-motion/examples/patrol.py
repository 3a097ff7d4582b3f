"""Patrol -- a ship that accelerates, glides to waypoints and turns to face them.

Demonstrates:
- Attaching a motion body and driving it with make_motion_system
- Accelerating up to a terminal speed
- Chaining move-to tweens from a completion handler
- Rotate-to with automatic direction and named events

Run: python examples/patrol.py
"""

import logging
import math

from tick import Engine, EntityId, World
from tick_motion import (
    Axis,
    CallbackHandler,
    MotionEvent,
    MotionEvents,
    MotionManager,
    TerminalHandler,
    Transform,
    make_motion_system,
)

WAYPOINTS = [(40.0, 0.0), (40.0, 30.0), (0.0, 30.0), (0.0, 0.0)]


class AnnounceTerminal(TerminalHandler):
    def on_terminal_speed(self, world: World, eid: EntityId, axis: Axis) -> None:
        print(f"  ship {eid} reached cruising speed on {axis.value}")


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    print("=== Patrol ===\n")

    engine = Engine(tps=20)
    events = MotionEvents()
    manager = MotionManager(engine.clock, events=events)
    engine.add_system(make_motion_system(manager))

    world = engine.world
    ship = world.spawn()
    kin = manager.add_body(world, ship, terminal_handler=AnnounceTerminal())

    events.connect(
        MotionEvent.ROTATE_TO_COMPLETE,
        lambda event, eid: print(f"  ship {eid} facing new heading"),
    )

    # Phase 1: accelerate east until capped at 8 units/s.
    kin.accelerate_x(4.0, 8.0)
    engine.run(60)

    # Phase 2: glide through the waypoints, turning toward each one.
    remaining = list(WAYPOINTS)

    def next_leg(w: World, eid: EntityId) -> None:
        if not remaining:
            print("  patrol complete")
            return
        x, y = remaining.pop(0)
        here = w.get(eid, Transform)
        heading = math.atan2(x - here.x, y - here.y) % (2 * math.pi)
        manager.rotate_to(w, eid, heading, 10, easing="smooth")
        manager.move_to(
            w, eid, x, y, 40, easing="ease_in_out",
            handler=CallbackHandler(on_complete=next_leg),
        )

    next_leg(world, ship)
    engine.run(200)

    t = world.get(ship, Transform)
    print(f"\nDone at tick {engine.clock.tick_number}: ({t.x:.1f}, {t.y:.1f})")


if __name__ == "__main__":
    main()
