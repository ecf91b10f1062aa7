"""Entrance, exit and special room selection.

All three come from the dead ends: rooms with exactly one neighbor. Picking
entrance and exit among dead ends keeps them from being adjacent to each
other unless the whole level is just two rooms.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional

from .model import LevelState, Room
from .result import Marker, SpecialMarker
from .rng import LevelRandom
from .tiles import Tile

ENTER_MISSING = "Unable to find a dead end room for Enter!"
EXIT_MISSING = "Unable to find a dead end room for Exit!"


class SelectionFailure(NamedTuple):
    which: str
    message: str


@dataclass
class FinishOutcome:
    enter: Optional[Marker] = None
    exit: Optional[Marker] = None
    special: Optional[SpecialMarker] = None
    deadends: List[int] = field(default_factory=list)
    failure: Optional[SelectionFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None


def classify_deadends(state: LevelState) -> List[int]:
    deadends = []
    for room in state.rooms:
        if room.degree == 1:
            room.deadend = True
            deadends.append(room.id)
    return deadends


def smallest_room(state: LevelState, room_ids: List[int]) -> int:
    """Smallest floor area wins; ties go to the earliest candidate."""
    best_id, best_area = None, None
    for room_id in room_ids:
        area = state.rooms[room_id].area
        if best_area is None or area < best_area:
            best_id, best_area = room_id, area
    return best_id


def mark_special(state: LevelState, room_id: int) -> SpecialMarker:
    room = state.rooms[room_id]
    door = state.doors[room.doors[0]]
    door.special = True
    room.special = True
    state.stamp(door.x, door.y, Tile.SPECIAL_DOOR)
    return SpecialMarker(room_id=room.id, door_id=door.id)


def random_non_edge_in_room(room: Room, rng: LevelRandom):
    x = rng.uniform_int(room.left + 1, room.right - 2)
    y = rng.uniform_int(room.top + 1, room.bottom - 2)
    return x, y


def _mark_endpoint(state: LevelState, rng: LevelRandom, room_id: int, tile: Tile, flag: str) -> Marker:
    room = state.rooms[room_id]
    x, y = random_non_edge_in_room(room, rng)
    state.stamp(x, y, tile)
    setattr(room, flag, True)
    setattr(state.doors[room.doors[0]], flag, True)
    return Marker(x=x, y=y, room_id=room_id)


def finish_level(state: LevelState, rng: LevelRandom, want_special: bool) -> FinishOutcome:
    outcome = FinishOutcome()
    deadends = classify_deadends(state)

    if want_special and len(deadends) >= 2:
        special_id = smallest_room(state, deadends)
        deadends.remove(special_id)
        outcome.special = mark_special(state, special_id)

    rng.shuffle(deadends)

    if not deadends:
        outcome.failure = SelectionFailure("enter", ENTER_MISSING)
        return outcome
    outcome.enter = _mark_endpoint(state, rng, deadends.pop(), Tile.ENTER, "enter")

    if not deadends:
        outcome.failure = SelectionFailure("exit", EXIT_MISSING)
        return outcome
    outcome.exit = _mark_endpoint(state, rng, deadends.pop(), Tile.EXIT, "exit")

    outcome.deadends = deadends
    return outcome


__all__ = [
    "ENTER_MISSING",
    "EXIT_MISSING",
    "SelectionFailure",
    "FinishOutcome",
    "classify_deadends",
    "smallest_room",
    "mark_special",
    "random_non_edge_in_room",
    "finish_level",
]
