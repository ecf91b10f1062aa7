import pytest

from roguelike_level.level import Orientation, Tile
from roguelike_level.level.checks import analyze, is_clean, rooms_touch
from tests.level_test_utils import successful_levels

CONFIGS = [
    {},
    {"special": True},
    {"width": 41, "height": 31, "retry": 60, "room": {"ideal": 20}, "special": True},
    {"width": 61, "height": 61, "retry": 200, "room": {"ideal": 40, "min_width": 5, "max_width": 9}},
    {"width": 15, "height": 25, "retry": 30, "room": {"max_width": 5, "max_height": 5}},
]


@pytest.mark.parametrize("config", CONFIGS)
def test_levels_are_structurally_sound(config):
    levels = list(successful_levels(config, range(40)))
    assert levels, f"no seed produced a level for {config}"
    for level in levels:
        issues = analyze(level)
        assert is_clean(issues), f"seed {level.seed}: {issues}"


@pytest.mark.parametrize("config", CONFIGS[:3])
def test_rooms_have_odd_geometry_and_stay_inside(config):
    for level in successful_levels(config, range(25)):
        for room in level.rooms:
            assert room.left % 2 == 1 and room.top % 2 == 1
            assert room.width % 2 == 1 and room.height % 2 == 1
            assert room.left >= 1 and room.top >= 1
            assert room.right <= level.width - 1 and room.bottom <= level.height - 1


def test_doors_sit_between_their_rooms():
    for level in successful_levels({"width": 41, "height": 41, "retry": 80, "room": {"ideal": 25}}, range(20)):
        for door in level.doors:
            a, b = (level.rooms[i] for i in door.rooms)
            if door.orientation is Orientation.HORIZONTAL:
                # east/west neighbors: floor on both sides of the door column
                assert {level.tile_at(door.x - 1, door.y), level.tile_at(door.x + 1, door.y)} <= {
                    Tile.FLOOR,
                    Tile.ENTER,
                    Tile.EXIT,
                }
            else:
                assert level.tile_at(door.x, door.y - 1) != Tile.WALL
                assert level.tile_at(door.x, door.y + 1) != Tile.WALL
            assert b.id in a.neighbors and a.id in b.neighbors
            assert door.id in a.doors and door.id in b.doors


def test_room_graph_is_connected():
    for level in successful_levels({"width": 41, "height": 41, "retry": 80, "room": {"ideal": 25}}, range(20)):
        seen = {0}
        frontier = [0]
        while frontier:
            room = level.rooms[frontier.pop()]
            for n in room.neighbors:
                if n not in seen:
                    seen.add(n)
                    frontier.append(n)
        assert len(seen) == level.room_count


def test_deadends_exclude_marked_rooms():
    for level in successful_levels({"width": 41, "height": 41, "retry": 80, "special": True}, range(20)):
        used = {level.enter.room_id, level.exit.room_id}
        if level.special is not None:
            used.add(level.special.room_id)
        assert not used & set(level.deadends)
        expected = {r.id for r in level.rooms if r.degree == 1} - used
        assert set(level.deadends) == expected
        assert all(level.rooms[i].deadend for i in level.deadends)


def test_special_room_has_smallest_area_among_dead_ends():
    checked = 0
    for level in successful_levels({"width": 41, "height": 41, "retry": 80, "special": True}, range(30)):
        if level.special is None:
            continue
        checked += 1
        leaves = [r for r in level.rooms if r.degree == 1]
        assert level.rooms[level.special.room_id].area == min(r.area for r in leaves)
    assert checked


def test_rooms_touch_helper():
    from roguelike_level.level.model import Room

    a = Room(0, 1, 1, 3, 3)
    assert rooms_touch(a, Room(1, 4, 1, 3, 3))
    assert not rooms_touch(a, Room(1, 5, 1, 3, 3))
    assert not rooms_touch(a, Room(1, 1, 5, 3, 3))


@pytest.mark.parametrize("config", CONFIGS)
def test_ids_are_dense_and_in_creation_order(config):
    for level in successful_levels(config, range(25)):
        assert [r.id for r in level.rooms] == list(range(level.room_count))
        assert [d.id for d in level.doors] == list(range(level.door_count))
        for door in level.doors:
            existing, new = door.rooms
            # the starter room is 0 and every slid room brings exactly one door
            assert existing < new
            assert new == door.id + 1
            assert level.rooms[new].doors[0] == door.id
