import random

import pytest

from roguelike_level.level import LevelRandom


def test_uniform_int_inclusive_bounds():
    rng = LevelRandom(5)
    seen = {rng.uniform_int(1, 7) for _ in range(500)}
    assert seen == set(range(1, 8))


def test_uniform_odd_int_moves_even_bounds_inward():
    # e.g. 2,9 => 3,5,7,9
    rng = LevelRandom(9)
    seen = {rng.uniform_odd_int(2, 9) for _ in range(500)}
    assert seen == {3, 5, 7, 9}


def test_uniform_odd_int_single_value_and_empty_range():
    rng = LevelRandom(1)
    assert rng.uniform_odd_int(3, 3) == 3
    assert rng.uniform_odd_int(3, 4) == 3
    with pytest.raises(ValueError):
        rng.uniform_odd_int(4, 4)


def test_same_seed_same_sequence():
    a, b = LevelRandom(1234), LevelRandom(1234)
    draws_a = [a.uniform_int(0, 100) for _ in range(20)] + [a.uniform_odd_int(1, 99) for _ in range(20)]
    draws_b = [b.uniform_int(0, 100) for _ in range(20)] + [b.uniform_odd_int(1, 99) for _ in range(20)]
    assert draws_a == draws_b


def test_shuffle_is_in_place_permutation():
    rng = LevelRandom(3)
    items = list(range(10))
    rng.shuffle(items)
    assert sorted(items) == list(range(10))


def test_unseeded_source_records_its_seed():
    rng = LevelRandom()
    assert isinstance(rng.seed, int)
    replay = LevelRandom(rng.seed)
    assert [rng.uniform_int(0, 1000) for _ in range(5)] == [replay.uniform_int(0, 1000) for _ in range(5)]


def test_global_random_state_untouched():
    random.seed(99)
    expected = random.random()
    random.seed(99)
    rng = LevelRandom(1)
    rng.uniform_int(0, 10)
    rng.shuffle([1, 2, 3])
    assert random.random() == expected
