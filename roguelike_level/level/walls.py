from __future__ import annotations

from .model import LevelState, Room
from .tiles import Tile


def build_walls(state: LevelState) -> None:
    """Ring every room with walls, one tile outside its floor."""
    for room in state.rooms:
        # top row, corners included
        for x in range(room.left - 1, room.right + 1):
            add_wall(state, x, room.top - 1, room)
        for y in range(room.top, room.bottom):
            add_wall(state, room.right, y, room)
        # bottom row, corners included
        for x in range(room.left - 1, room.right + 1):
            add_wall(state, x, room.bottom, room)
        for y in range(room.top, room.bottom):
            add_wall(state, room.left - 1, y, room)


def add_wall(state: LevelState, x: int, y: int, room: Room) -> None:
    # The global list and the grid see each wall once; rooms sharing a
    # boundary both list it.
    if state.tile_at(x, y) == Tile.VOID:
        state.stamp(x, y, Tile.WALL)
        state.walls.append((x, y))
    if state.tile_at(x, y) in (Tile.VOID, Tile.WALL):
        room.walls.append((x, y))


__all__ = ["build_walls", "add_wall"]
