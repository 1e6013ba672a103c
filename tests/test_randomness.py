import pytest

from gemswap.randomness import RandomSource, get_random


def test_same_seed_gives_same_sequence():
    first = RandomSource(seed=7)
    second = RandomSource(seed=7)
    assert [first.integer(0, 100) for _ in range(20)] == [
        second.integer(0, 100) for _ in range(20)
    ]


def test_reseed_restarts_sequence():
    source = RandomSource(seed=3)
    values = [source.real(0.0, 1.0) for _ in range(5)]
    source.reseed(3)
    assert [source.real(0.0, 1.0) for _ in range(5)] == values


def test_integer_is_inclusive_range():
    source = RandomSource(seed=1)
    seen = {source.integer(0, 4) for _ in range(500)}
    assert seen == {0, 1, 2, 3, 4}


def test_real_stays_in_range():
    source = RandomSource(seed=2)
    assert all(2.0 <= source.real(2.0, 5.0) <= 5.0 for _ in range(200))


def test_inside_unit_sphere_components_in_range():
    source = RandomSource(seed=5)
    for _ in range(100):
        point = source.inside_unit_sphere()
        assert all(0.0 <= c <= 1.1 for c in point)


def test_integer_rejects_empty_range():
    with pytest.raises(ValueError):
        RandomSource(seed=0).integer(5, 1)


def test_get_random_keeps_state_between_calls():
    get_random().reseed(11)
    shared_values = [get_random().integer(0, 1000) for _ in range(10)]
    reference = RandomSource(seed=11)
    assert shared_values == [reference.integer(0, 1000) for _ in range(10)]