from __future__ import annotations

from typing import Dict, Optional

from .result import LevelResult
from .tiles import TILE_CHARS, Tile


def to_ascii(level: LevelResult, palette: Optional[Dict[Tile, str]] = None, reset: str = "") -> str:
    """Render the world one row per line.

    ``palette`` maps tiles to a prefix (e.g. a terminal color code) written
    before the tile character, followed by ``reset``.
    """
    lines = []
    for row in level.world:
        if palette:
            lines.append("".join(f"{palette.get(t, '')}{TILE_CHARS[t]}{reset}" for t in row))
        else:
            lines.append("".join(TILE_CHARS[t] for t in row))
    return "\n".join(lines)


__all__ = ["to_ascii"]
