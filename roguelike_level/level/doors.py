"""Door creation between a freshly slid room and the room it bumped into."""

from __future__ import annotations

from typing import Tuple

from .errors import LevelGenerationError
from .model import Door, LevelState, Orientation
from .rng import LevelRandom
from .tiles import Tile


def door_span(a_start: int, a_end: int, b_start: int, b_end: int) -> Tuple[int, int]:
    """Return the inclusive range a door may occupy along the shared edge.

    The overlap of both rooms is shrunk by one tile at each end to keep doors
    off corners. When the overlap is too short for that the full overlap is
    used instead; an empty overlap cannot host a door at all.
    """
    lo = max(a_start, b_start)
    hi = min(a_end, b_end) - 1
    if hi < lo:
        raise LevelGenerationError(f"rooms share no edge span ({lo}..{hi})", which="door")
    if hi - lo >= 2:
        return lo + 1, hi - 1
    return lo, hi


def add_door_between_rooms(state: LevelState, rng: LevelRandom, dx: int, dy: int, existing_id: int, new_id: int) -> Door:
    existing = state.rooms[existing_id]
    new = state.rooms[new_id]

    if dx == 1:
        # slid east: new room sits west of the existing one
        x = existing.left - 1
        y = rng.uniform_int(*door_span(existing.top, existing.bottom, new.top, new.bottom))
        orientation = Orientation.HORIZONTAL
    elif dx == -1:
        x = new.left - 1
        y = rng.uniform_int(*door_span(new.top, new.bottom, existing.top, existing.bottom))
        orientation = Orientation.HORIZONTAL
    elif dy == -1:
        # slid north: new room sits south of the existing one
        x = rng.uniform_int(*door_span(existing.left, existing.right, new.left, new.right))
        y = new.top - 1
        orientation = Orientation.VERTICAL
    else:
        x = rng.uniform_int(*door_span(new.left, new.right, existing.left, existing.right))
        y = existing.top - 1
        orientation = Orientation.VERTICAL

    door = add_door(state, x, y, existing_id, new_id, orientation)
    existing.neighbors.append(new_id)
    new.neighbors.append(existing_id)
    return door


def add_door(state: LevelState, x: int, y: int, room1: int, room2: int, orientation: Orientation) -> Door:
    state.stamp(x, y, Tile.DOOR)
    door = state.doors.add(lambda door_id: Door(door_id, x, y, orientation, (room1, room2)))
    state.rooms[room1].doors.append(door.id)
    state.rooms[room2].doors.append(door.id)
    return door


__all__ = ["door_span", "add_door_between_rooms", "add_door"]
