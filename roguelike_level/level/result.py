"""Immutable snapshot handed to callers once a build succeeds."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, NamedTuple, Optional, Tuple

from .model import Coord, Door, DoorShape, Orientation, Room, RoomShape
from .tiles import Tile


class Marker(NamedTuple):
    x: int
    y: int
    room_id: int


class SpecialMarker(NamedTuple):
    room_id: int
    door_id: int


@dataclass(frozen=True)
class RoomRecord(RoomShape):
    """Read-only copy of a placed room."""

    id: int
    left: int
    top: int
    width: int
    height: int
    walls: Tuple[Coord, ...]
    neighbors: Tuple[int, ...]
    doors: Tuple[int, ...]
    deadend: bool
    special: bool
    enter: bool
    exit: bool

    @classmethod
    def from_room(cls, room: Room) -> "RoomRecord":
        return cls(
            id=room.id,
            left=room.left,
            top=room.top,
            width=room.width,
            height=room.height,
            walls=tuple(room.walls),
            neighbors=tuple(room.neighbors),
            doors=tuple(room.doors),
            deadend=room.deadend,
            special=room.special,
            enter=room.enter,
            exit=room.exit,
        )


@dataclass(frozen=True)
class DoorRecord(DoorShape):
    id: int
    x: int
    y: int
    orientation: Orientation
    rooms: Tuple[int, int]
    special: bool
    enter: bool
    exit: bool

    @classmethod
    def from_door(cls, door: Door) -> "DoorRecord":
        return cls(door.id, door.x, door.y, door.orientation, tuple(door.rooms), door.special, door.enter, door.exit)


@dataclass(frozen=True)
class LevelResult:
    """Finished level. Rooms, doors and the grid are copies; nothing here aliases builder state."""

    width: int
    height: int
    seed: int
    enter: Marker
    exit: Marker
    special: Optional[SpecialMarker]
    rooms: Tuple[RoomRecord, ...]
    doors: Tuple[DoorRecord, ...]
    walls: Tuple[Coord, ...]
    deadends: Tuple[int, ...]
    world: Tuple[Tuple[Tile, ...], ...]
    metrics: Dict[str, Any] = field(default_factory=dict, compare=False)

    @property
    def room_count(self) -> int:
        return len(self.rooms)

    @property
    def door_count(self) -> int:
        return len(self.doors)

    def tile_at(self, x: int, y: int) -> Tile:
        return self.world[y][x]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "seed": self.seed,
            "enter": self.enter._asdict(),
            "exit": self.exit._asdict(),
            "special": self.special._asdict() if self.special else None,
            "door_count": self.door_count,
            "doors": [d.to_dict() for d in self.doors],
            "room_count": self.room_count,
            "rooms": [r.to_dict() for r in self.rooms],
            "walls": [list(c) for c in self.walls],
            "deadends": list(self.deadends),
            "world": [[int(t) for t in row] for row in self.world],
        }


__all__ = ["Marker", "SpecialMarker", "RoomRecord", "DoorRecord", "LevelResult"]
