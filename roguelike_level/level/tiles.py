# Tile kinds centralized for modular imports
from enum import IntEnum


class Tile(IntEnum):
    VOID = 0
    FLOOR = 1
    WALL = 2
    DOOR = 3
    SPECIAL_DOOR = 4
    ENTER = 5
    EXIT = 6


TILE_CHARS = {
    Tile.VOID: " ",
    Tile.FLOOR: ".",
    Tile.WALL: "#",
    Tile.DOOR: "+",
    Tile.SPECIAL_DOOR: "*",
    Tile.ENTER: "<",
    Tile.EXIT: ">",
}

_CHAR_TILES = {ch: tile for tile, ch in TILE_CHARS.items()}


def char_to_tile(ch: str) -> Tile:
    return _CHAR_TILES[ch]


__all__ = ["Tile", "TILE_CHARS", "char_to_tile"]
