"""Public level generation interface.

    from roguelike_level.level import generate_level
    level = generate_level({"room": {"ideal": 12}, "special": True}, seed=7)
"""

from .config import LevelConfig, LevelConfigError, RoomConfig
from .errors import LevelGenerationError
from .model import Door, Orientation, Room
from .pipeline import PHASES, BuildOutcome, LevelBuilder, generate_level
from .result import DoorRecord, LevelResult, Marker, RoomRecord, SpecialMarker
from .rng import LevelRandom
from .tiles import TILE_CHARS, Tile  # noqa: F401

__all__ = [
    "generate_level",
    "LevelBuilder",
    "BuildOutcome",
    "PHASES",
    "LevelConfig",
    "RoomConfig",
    "LevelConfigError",
    "LevelGenerationError",
    "LevelRandom",
    "LevelResult",
    "RoomRecord",
    "DoorRecord",
    "Marker",
    "SpecialMarker",
    "Room",
    "Door",
    "Orientation",
    "Tile",
    "TILE_CHARS",
]
