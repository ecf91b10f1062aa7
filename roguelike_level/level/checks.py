"""Structural diagnostics for finished levels.

``analyze`` never raises on a malformed level; it returns one list of
offending items per check so that tests and ``scripts/diagnose_seeds.py``
can report everything at once. An empty list means the check passed.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Dict, List

from .result import LevelResult
from .tiles import Tile

_DOOR_TILES = (Tile.DOOR, Tile.SPECIAL_DOOR)
_ROOM_TILES = (Tile.FLOOR, Tile.ENTER, Tile.EXIT)


def rooms_touch(a, b) -> bool:
    """True when two rooms are closer than the mandatory one-tile gap."""
    return not (a.left > b.right or a.right < b.left or a.top > b.bottom or a.bottom < b.top)


def _adjacent_rooms(level: LevelResult, x: int, y: int) -> List[int]:
    found = []
    for room in level.rooms:
        if any(room.contains(nx, ny) for nx, ny in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1))):
            found.append(room.id)
    return found


def analyze(level: LevelResult) -> Dict[str, List[Any]]:
    issues: Dict[str, List[Any]] = {
        "bad_dimensions": [],
        "unknown_tiles": [],
        "overlapping_rooms": [],
        "not_a_tree": [],
        "orphan_floor": [],
        "unregistered_doors": [],
        "misplaced_doors": [],
        "bad_markers": [],
        "duplicate_walls": [],
        "non_wall_walls": [],
    }

    if len(level.world) != level.height or any(len(row) != level.width for row in level.world):
        issues["bad_dimensions"].append((level.width, level.height))

    rooms = list(level.rooms)
    for i, a in enumerate(rooms):
        for b in rooms[i + 1 :]:
            if rooms_touch(a, b):
                issues["overlapping_rooms"].append((a.id, b.id))

    if rooms and level.door_count != level.room_count - 1:
        issues["not_a_tree"].append((level.room_count, level.door_count))

    door_at = {(d.x, d.y): d for d in level.doors}
    for y, row in enumerate(level.world):
        for x, tile in enumerate(row):
            if tile not in Tile.__members__.values():
                issues["unknown_tiles"].append((x, y))
            elif tile in _ROOM_TILES:
                owners = sum(1 for r in rooms if r.contains(x, y))
                if owners != 1:
                    issues["orphan_floor"].append((x, y))
            elif tile in _DOOR_TILES and (x, y) not in door_at:
                issues["unregistered_doors"].append((x, y))

    for door in level.doors:
        tile = level.tile_at(door.x, door.y)
        touching = _adjacent_rooms(level, door.x, door.y)
        if tile not in _DOOR_TILES or sorted(touching) != sorted(door.rooms):
            issues["misplaced_doors"].append(door.id)

    marked = [("enter", level.enter.room_id), ("exit", level.exit.room_id)]
    if level.special is not None:
        marked.append(("special", level.special.room_id))
    for name, room_id in marked:
        if level.rooms[room_id].degree != 1:
            issues["bad_markers"].append((name, room_id))
    if len({room_id for _, room_id in marked}) != len(marked):
        issues["bad_markers"].append(("distinct", [room_id for _, room_id in marked]))

    counts = Counter(level.walls)
    issues["duplicate_walls"] = sorted(c for c, n in counts.items() if n > 1)
    issues["non_wall_walls"] = [c for c in level.walls if level.tile_at(*c) != Tile.WALL]
    return issues


def is_clean(issues: Dict[str, List[Any]]) -> bool:
    return all(not v for v in issues.values())


__all__ = ["analyze", "is_clean", "rooms_touch"]
