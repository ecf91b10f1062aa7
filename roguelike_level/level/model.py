"""Grid, room and door records shared by the generation phases.

Rooms and doors live in append-only registries whose ids are dense and
assigned in creation order. Coordinates are ``(x, y)`` with the origin at
the top-left; the world grid is row-major (``world[y][x]``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Generic, Iterator, List, Tuple, TypeVar

from .tiles import Tile

Coord = Tuple[int, int]


class Orientation(str, Enum):
    HORIZONTAL = "h"
    VERTICAL = "v"


class RoomShape:
    """Geometry and serialization shared by live rooms and result records."""

    @property
    def right(self) -> int:
        return self.left + self.width

    @property
    def bottom(self) -> int:
        return self.top + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def degree(self) -> int:
        return len(self.neighbors)

    def cells(self):
        for iy in range(self.top, self.bottom):
            for ix in range(self.left, self.right):
                yield ix, iy

    def contains(self, x: int, y: int) -> bool:
        return self.left <= x < self.right and self.top <= y < self.bottom

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "left": self.left,
            "top": self.top,
            "width": self.width,
            "height": self.height,
            "walls": [list(c) for c in self.walls],
            "neighbors": list(self.neighbors),
            "doors": list(self.doors),
            "deadend": self.deadend,
            "special": self.special,
            "enter": self.enter,
            "exit": self.exit,
        }


@dataclass
class Room(RoomShape):
    id: int
    left: int
    top: int
    width: int
    height: int
    walls: List[Coord] = field(default_factory=list)
    neighbors: List[int] = field(default_factory=list)
    doors: List[int] = field(default_factory=list)
    deadend: bool = False
    special: bool = False
    enter: bool = False
    exit: bool = False


class DoorShape:
    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "x": self.x,
            "y": self.y,
            "orientation": self.orientation.value,
            "rooms": list(self.rooms),
            "special": self.special,
            "enter": self.enter,
            "exit": self.exit,
        }


@dataclass
class Door(DoorShape):
    id: int
    x: int
    y: int
    orientation: Orientation
    rooms: Tuple[int, int]
    special: bool = False
    enter: bool = False
    exit: bool = False


T = TypeVar("T")


class Registry(Generic[T]):
    """Append-only arena; an item's id is its index."""

    def __init__(self):
        self._items: List[T] = []

    def add(self, factory: Callable[[int], T]) -> T:
        item = factory(len(self._items))
        self._items.append(item)
        return item

    def __getitem__(self, item_id: int) -> T:
        return self._items[item_id]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)


@dataclass
class LevelState:
    """Builder-local state mutated in place by each phase."""

    width: int
    height: int
    world: List[List[Tile]] = field(default_factory=list)
    rooms: Registry[Room] = field(default_factory=Registry)
    doors: Registry[Door] = field(default_factory=Registry)
    walls: List[Coord] = field(default_factory=list)
    metrics: Dict[str, Any] = field(default_factory=dict)

    def tile_at(self, x: int, y: int) -> Tile:
        return self.world[y][x]

    def stamp(self, x: int, y: int, tile: Tile) -> None:
        self.world[y][x] = tile


def create_void(width: int, height: int) -> List[List[Tile]]:
    return [[Tile.VOID for _ in range(width)] for _ in range(height)]


__all__ = ["Coord", "Orientation", "RoomShape", "Room", "DoorShape", "Door", "Registry", "LevelState", "create_void"]
