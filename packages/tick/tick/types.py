"""Shared type aliases and protocols for the tick engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

EntityId = int


@dataclass(frozen=True, slots=True)
class TickContext:
    """Per-tick view of the clock handed to every system.

    ``dt`` is the tick fraction: the share of a second this tick covers.
    Rates are expressed per second and scaled by it.
    """

    tick_number: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]


class DeadEntityError(KeyError):
    """Raised when operating on an entity that is not alive."""

    def __init__(self, entity_id: int, message: str) -> None:
        self.entity_id = entity_id
        super().__init__(message)


if TYPE_CHECKING:
    from tick.world import World

System = Callable[["World", TickContext], None]
