"""Room placement by sliding.

The starter room is dropped at a random odd position. Every further room
starts pinned against one grid edge and slides one tile at a time towards
the opposite edge until the next step would bump an existing room. It is
committed at its last free position and joined to the room it bumped by a
single door, so the rooms always form a tree.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple, Optional, Tuple

from ..logging_utils import get_logger
from .config import LevelConfig
from .doors import add_door_between_rooms
from .model import LevelState, Room
from .rng import LevelRandom
from .tiles import Tile

ROOM_GAP = 1

log = get_logger("level.placement")


class Slide(NamedTuple):
    name: str
    dx: int
    dy: int


# Indexed by the 0..3 draw; the name is the direction of travel.
SLIDES = (
    Slide("south", 0, 1),  # from the top edge
    Slide("east", 1, 0),  # from the left edge
    Slide("north", 0, -1),  # from the bottom edge
    Slide("west", -1, 0),  # from the right edge
)


class AttemptOutcome(str, Enum):
    PLACED = "placed"
    BLOCKED_AT_START = "blocked_at_start"
    OUT_OF_BOUNDS = "out_of_bounds"


def room_dimensions(config: LevelConfig, rng: LevelRandom) -> Tuple[int, int]:
    r = config.room
    width = rng.uniform_odd_int(r.min_width, r.max_width)
    height = rng.uniform_odd_int(r.min_height, r.max_height)
    return width, height


def add_room(state: LevelState, left: int, top: int, width: int, height: int) -> Room:
    room = state.rooms.add(lambda room_id: Room(room_id, left, top, width, height))
    for x, y in room.cells():
        state.stamp(x, y, Tile.FLOOR)
    return room


def add_starter_room(state: LevelState, config: LevelConfig, rng: LevelRandom) -> Room:
    width, height = room_dimensions(config, rng)
    max_left = state.width - (width + ROOM_GAP * 2) + ROOM_GAP
    max_top = state.height - (height + ROOM_GAP * 2) + ROOM_GAP
    left = rng.uniform_odd_int(ROOM_GAP, max_left)
    top = rng.uniform_odd_int(ROOM_GAP, max_top)
    return add_room(state, left, top, width, height)


def collides(state: LevelState, left: int, top: int, width: int, height: int) -> Optional[int]:
    """Return the id of the first room the rectangle touches, gap included."""
    right = left + width
    bottom = top + height
    for room in state.rooms:
        if not (left > room.right or right < room.left or top > room.bottom or bottom < room.top):
            return room.id
    return None


def out_of_bounds(state: LevelState, left: int, top: int, width: int, height: int) -> bool:
    return (
        top <= ROOM_GAP
        or left <= ROOM_GAP
        or top + height >= state.height - ROOM_GAP
        or left + width >= state.width - ROOM_GAP
    )


def start_position(state: LevelState, rng: LevelRandom, slide: Slide, width: int, height: int) -> Tuple[int, int]:
    """Return ``(left, top)`` pinned against the edge the slide starts from."""
    if slide.dy == 1:
        return rng.uniform_odd_int(ROOM_GAP, state.width - width - ROOM_GAP * 2), ROOM_GAP
    if slide.dx == 1:
        return ROOM_GAP, rng.uniform_odd_int(ROOM_GAP, state.height - height - ROOM_GAP * 2)
    if slide.dy == -1:
        return (
            rng.uniform_odd_int(ROOM_GAP, state.width - width - ROOM_GAP * 2),
            state.height - height - ROOM_GAP,
        )
    return state.width - width - ROOM_GAP, rng.uniform_odd_int(ROOM_GAP, state.height - height - ROOM_GAP * 2)


def try_place_room(state: LevelState, config: LevelConfig, rng: LevelRandom) -> AttemptOutcome:
    """Make one sliding attempt; nothing is committed unless it succeeds."""
    slide = SLIDES[rng.uniform_int(0, 3)]
    width, height = room_dimensions(config, rng)
    left, top = start_position(state, rng, slide, width, height)

    if collides(state, left, top, width, height) is not None:
        return AttemptOutcome.BLOCKED_AT_START

    while True:
        hit = collides(state, left + slide.dx, top + slide.dy, width, height)
        if hit is not None:
            break
        left += slide.dx
        top += slide.dy
        if out_of_bounds(state, left, top, width, height):
            return AttemptOutcome.OUT_OF_BOUNDS

    room = add_room(state, left, top, width, height)
    add_door_between_rooms(state, rng, slide.dx, slide.dy, hit, room.id)
    log.debug(event="room_placed", room_id=room.id, slide=slide.name, neighbor=hit)
    return AttemptOutcome.PLACED


def generate_rooms(state: LevelState, config: LevelConfig, rng: LevelRandom) -> int:
    """Slide rooms in until the ideal count is reached or the retry budget runs out.

    Returns the unused retry budget.
    """
    retries = config.retry
    metrics = state.metrics
    while len(state.rooms) < config.room.ideal:
        outcome = try_place_room(state, config, rng)
        if metrics:
            metrics["attempts"] += 1
            if outcome is not AttemptOutcome.PLACED:
                metrics[f"attempts_{outcome.value}"] += 1
        if outcome is AttemptOutcome.PLACED:
            continue
        retries -= 1
        if retries <= 0:
            log.debug(event="retry_budget_exhausted", rooms=len(state.rooms), ideal=config.room.ideal)
            break
    return retries


__all__ = [
    "ROOM_GAP",
    "SLIDES",
    "Slide",
    "AttemptOutcome",
    "room_dimensions",
    "add_room",
    "add_starter_room",
    "collides",
    "out_of_bounds",
    "start_position",
    "try_place_room",
    "generate_rooms",
]
