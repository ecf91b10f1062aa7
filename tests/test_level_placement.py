"""Sliding placement, checked step by step with scripted draws.

Draw order for one attempt: slide index, room width, room height, the odd
coordinate across the slide axis, then the door position on success.
"""

from roguelike_level.level import LevelBuilder, LevelConfig, Orientation, RoomConfig, Tile
from roguelike_level.level.metrics import init_metrics
from roguelike_level.level.placement import (
    AttemptOutcome,
    collides,
    generate_rooms,
    out_of_bounds,
    try_place_room,
)
from tests.level_test_utils import ScriptedRandom, empty_state, rooms_at


def test_collision_requires_one_tile_gap():
    state = empty_state()
    rooms_at(state, (5, 5, 3, 3))  # floor x 5..7, y 5..7
    assert collides(state, 8, 5, 3, 3) == 0  # flush against the room
    assert collides(state, 9, 5, 3, 3) is None  # one free column between
    assert collides(state, 5, 9, 3, 3) is None
    assert collides(state, 1, 1, 3, 3) is None
    assert collides(state, 2, 2, 3, 3) == 0  # diagonal corner contact


def test_collision_reports_first_room_in_id_order():
    state = empty_state()
    rooms_at(state, (1, 1, 3, 3), (7, 1, 3, 3))
    assert collides(state, 3, 1, 5, 3) == 0


def test_out_of_bounds_region():
    state = empty_state()
    assert out_of_bounds(state, 3, 1, 3, 3)
    assert out_of_bounds(state, 1, 3, 3, 3)
    assert out_of_bounds(state, 3, 17, 3, 3)  # bottom edge reaches row 20
    assert out_of_bounds(state, 17, 3, 3, 3)
    assert not out_of_bounds(state, 2, 2, 3, 3)
    assert not out_of_bounds(state, 16, 16, 3, 3)


def test_starter_room_respects_gap_and_parity():
    for seed in range(30):
        builder = LevelBuilder(LevelConfig(seed=seed))
        state = builder.run_until("place_starter")
        assert len(state.rooms) == 1
        room = state.rooms[0]
        assert room.left % 2 == 1 and room.top % 2 == 1
        assert room.width % 2 == 1 and room.height % 2 == 1
        assert 3 <= room.width <= 7 and 3 <= room.height <= 7
        assert room.left >= 1 and room.top >= 1
        assert room.right <= state.width - 1 and room.bottom <= state.height - 1
        assert all(state.tile_at(x, y) == Tile.FLOOR for x, y in room.cells())


def test_east_slide_stops_one_tile_short_and_adds_door():
    state = empty_state()
    rooms_at(state, (9, 9, 3, 3))
    rng = ScriptedRandom([1, 3, 3, 9, 10])  # east, 3x3, top=9, door y=10
    outcome = try_place_room(state, LevelConfig(), rng)
    assert outcome is AttemptOutcome.PLACED
    new = state.rooms[1]
    assert (new.left, new.top, new.width, new.height) == (5, 9, 3, 3)
    door = state.doors[0]
    assert (door.x, door.y) == (8, 10)
    assert door.orientation is Orientation.HORIZONTAL
    assert door.rooms == (0, 1)
    assert state.tile_at(8, 10) == Tile.DOOR
    assert state.rooms[0].neighbors == [1] and new.neighbors == [0]
    assert state.rooms[0].doors == [0] and new.doors == [0]


def test_south_slide_from_top_edge():
    state = empty_state()
    rooms_at(state, (9, 9, 3, 3))
    rng = ScriptedRandom([0, 3, 3, 9, 10])  # south, 3x3, left=9, door x=10
    assert try_place_room(state, LevelConfig(), rng) is AttemptOutcome.PLACED
    new = state.rooms[1]
    assert (new.left, new.top) == (9, 5)
    door = state.doors[0]
    assert (door.x, door.y) == (10, 8)
    assert door.orientation is Orientation.VERTICAL


def test_north_slide_with_narrow_overlap_uses_full_span():
    state = empty_state()
    rooms_at(state, (1, 9, 3, 3))
    # north from the bottom edge, left=3 overlaps the starter by one column
    rng = ScriptedRandom([2, 3, 3, 3, 3])
    assert try_place_room(state, LevelConfig(), rng) is AttemptOutcome.PLACED
    new = state.rooms[1]
    assert (new.left, new.top) == (3, 13)
    door = state.doors[0]
    assert (door.x, door.y) == (3, 12)
    assert rng.calls[-1] == ("int", 3, 3, 3)


def test_blocked_start_commits_nothing():
    state = empty_state()
    rooms_at(state, (1, 9, 3, 3))
    rng = ScriptedRandom([1, 3, 3, 9])  # east start (1, 9) sits on the room
    assert try_place_room(state, LevelConfig(), rng) is AttemptOutcome.BLOCKED_AT_START
    assert len(state.rooms) == 1 and len(state.doors) == 0
    assert not rng.values


def test_slide_out_of_bounds_commits_nothing():
    state = empty_state()
    rooms_at(state, (9, 9, 3, 3))
    # east along the top row never meets the room; the first step leaves the region
    rng = ScriptedRandom([1, 3, 3, 1])
    assert try_place_room(state, LevelConfig(), rng) is AttemptOutcome.OUT_OF_BOUNDS
    assert len(state.rooms) == 1 and len(state.doors) == 0
    floor = sum(1 for row in state.world for t in row if t == Tile.FLOOR)
    assert floor == 9


def test_retry_budget_is_shared_and_not_reset_by_success():
    state = empty_state()
    state.metrics = init_metrics()
    rooms_at(state, (1, 9, 3, 3))
    blocked = [1, 3, 3, 9]
    placed = [2, 3, 3, 3, 3]
    rng = ScriptedRandom(blocked + placed + blocked)
    config = LevelConfig(retry=2, room=RoomConfig(ideal=5))
    remaining = generate_rooms(state, config, rng)
    assert remaining == 0
    assert len(state.rooms) == 2
    assert state.metrics["attempts"] == 3
    assert state.metrics["attempts_blocked_at_start"] == 2
    assert not rng.values


def test_generation_stops_at_ideal_count():
    for seed in range(10):
        config = LevelConfig(seed=seed, retry=500, room=RoomConfig(ideal=4))
        state = LevelBuilder(config).run_until("place_rooms")
        assert len(state.rooms) == 4
        assert len(state.doors) == 3
