"""
Verification script for the NonRepeatingPicker state machine.
"""

import sys
import os
import itertools

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from config.config import PickerConfig
from core.picker import (
    DegeneratePoolError,
    InvalidArgumentError,
    NonRepeatingPicker,
    RetryExhaustedError,
    create,
)
from core.retry_policy import RetryPolicy
from utils.rng import CentralizedRNG, ReplayRNG


def test_unique_until_exhaustion():
    for seed in range(5):
        picker = create(10, config=PickerConfig(seed=seed))
        values = picker.draw_many(10)
        assert sorted(values) == list(range(10))
        assert picker.seen == tuple(values)
        assert picker.exhausted


def test_reset_avoids_last_and_neighbours():
    # pool of 5 ends on 4; 3 and 4 are rejected before 0 is accepted
    rng = ReplayRNG([2, 2, 0, 1, 3, 4, 3, 4, 0])
    picker = NonRepeatingPicker(5, rng=rng)

    assert picker.draw_many(5) == [2, 0, 1, 3, 4]
    assert picker.next() == 0
    assert picker.seen == (0,)
    assert rng.consumed == 9


def test_reset_distance_random_sources():
    for seed in range(20):
        picker = NonRepeatingPicker(10, rng=CentralizedRNG(seed))
        pool = picker.draw_many(10)
        first = picker.next()
        assert abs(first - pool[-1]) > 1


def test_no_wraparound_at_range_edges():
    # last value 0: the "neighbour" -1 never occurs, and size - 1 is allowed
    rng = ReplayRNG([4, 3, 2, 1, 0, 1, 4])
    picker = NonRepeatingPicker(5, rng=rng)
    picker.draw_many(5)
    assert picker.last == 0
    assert picker.next() == 4


def test_post_reset_pool_is_fresh():
    picker = NonRepeatingPicker(8, rng=CentralizedRNG(123))
    picker.draw_many(8)

    first = picker.next()
    assert picker.seen == (first,)

    rest = picker.draw_many(7)
    assert first not in rest
    assert sorted([first] + rest) == list(range(8))


def test_set_capacity_forgets_history():
    picker = NonRepeatingPicker(10, rng=CentralizedRNG(1))
    picker.draw_many(10)
    assert len(picker.seen) == 10

    picker.set_capacity(3)
    assert picker.size == 3
    assert picker.seen == ()
    assert picker.last is None

    values = picker.draw_many(3)
    assert sorted(values) == [0, 1, 2]


def test_set_capacity_mid_pool():
    picker = NonRepeatingPicker(10, rng=CentralizedRNG(2))
    picker.draw_many(5)
    picker.set_capacity(20)
    values = picker.draw_many(20)
    assert sorted(values) == list(range(20))


def test_range_containment():
    picker = NonRepeatingPicker(7, rng=CentralizedRNG(99))
    for _ in range(200):
        value = picker.next()
        assert 0 <= value < 7
        assert len(picker.seen) <= 7
        assert len(set(picker.seen)) == len(picker.seen)


def test_size_three_bounded_retry_exhausts():
    # pool ends on 0, so only 2 may open the next pool; three draws never reach it
    rng = ReplayRNG([1, 2, 0, 1, 0, 1])
    picker = NonRepeatingPicker(3, rng=rng, retry_policy=RetryPolicy(max_attempts=3))

    assert picker.draw_many(3) == [1, 2, 0]
    with pytest.raises(RetryExhaustedError):
        picker.next()
    assert rng.consumed == 6
    assert picker.seen == (1, 2, 0)


def test_size_three_reset_reaches_far_value():
    rng = ReplayRNG([1, 2, 0, 1, 0, 1, 2])
    picker = NonRepeatingPicker(3, rng=rng)
    assert picker.draw_many(3) == [1, 2, 0]
    assert picker.next() == 2
    assert picker.seen == (2,)


def test_size_three_middle_value_blocks_reset():
    rng = ReplayRNG([0, 2, 1, 0, 2, 1, 0, 2])
    picker = NonRepeatingPicker(3, rng=rng, retry_policy=RetryPolicy(max_attempts=5))
    assert picker.draw_many(3) == [0, 2, 1]
    with pytest.raises(RetryExhaustedError):
        picker.next()


def test_size_two_never_resets():
    picker = NonRepeatingPicker(2, rng=CentralizedRNG(5), retry_policy=RetryPolicy(max_attempts=50))
    assert sorted(picker.draw_many(2)) == [0, 1]
    with pytest.raises(RetryExhaustedError):
        picker.next()


def test_invalid_construction():
    for size in (0, -5):
        with pytest.raises(InvalidArgumentError):
            create(size)
    with pytest.raises(InvalidArgumentError):
        create(2.5)
    with pytest.raises(InvalidArgumentError):
        create(True)
    # still a ValueError for callers that only know the builtin
    with pytest.raises(ValueError):
        NonRepeatingPicker(0)


def test_invalid_capacity_keeps_state():
    picker = NonRepeatingPicker(4, rng=CentralizedRNG(3))
    values = picker.draw_many(2)
    with pytest.raises(InvalidArgumentError):
        picker.set_capacity(0)
    assert picker.size == 4
    assert picker.seen == tuple(values)


def test_degenerate_pool_rejected_when_configured():
    config = PickerConfig(allow_degenerate=False)
    with pytest.raises(DegeneratePoolError):
        create(1, config=config)

    picker = create(5, config=config)
    with pytest.raises(DegeneratePoolError):
        picker.set_capacity(1)
    assert picker.size == 5


def test_degenerate_pool_bounded_retry():
    picker = create(1, config=PickerConfig(seed=0, max_attempts=10))
    assert picker.next() == 0
    with pytest.raises(RetryExhaustedError):
        picker.next()


def test_draw_many_and_iteration():
    picker = NonRepeatingPicker(5, rng=CentralizedRNG(8))
    assert picker.draw_many(0) == []
    with pytest.raises(InvalidArgumentError):
        picker.draw_many(-1)

    values = list(itertools.islice(picker, 5))
    assert sorted(values) == list(range(5))


def test_create_is_reproducible_with_seed():
    a = create(12, config=PickerConfig(seed=2024))
    b = create(12, config=PickerConfig(seed=2024))
    assert a.draw_many(40) == b.draw_many(40)


def test_create_rejects_rng_with_seeded_config():
    with pytest.raises(InvalidArgumentError):
        create(5, rng=CentralizedRNG(1), config=PickerConfig(seed=1))

    # an unseeded config combines with an explicit rng
    picker = create(5, rng=ReplayRNG([4]), config=PickerConfig(max_attempts=2))
    assert picker.next() == 4
    assert picker.retry_policy.max_attempts == 2


def test_config_rejects_bad_max_attempts():
    for bad in (0, -1):
        with pytest.raises(ValueError):
            PickerConfig(max_attempts=bad)


def test_repr():
    picker = NonRepeatingPicker(6, rng=ReplayRNG([3]))
    picker.next()
    assert repr(picker) == "NonRepeatingPicker(size=6, seen=1)"


if __name__ == "__main__":
    test_unique_until_exhaustion()
    test_reset_avoids_last_and_neighbours()
    test_size_three_bounded_retry_exhausts()
    print("NonRepeatingPicker verification SUCCESS")
