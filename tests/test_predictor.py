import random

import pytest

from lottostats.predictor import (
    generate_custom_suggestion,
    generate_suggestions,
    hot_cold_pools,
    rank_frequencies,
)
from lottostats.profiles import LotteryProfile


def _counts(total=25):
    # higher numbers are drawn more often
    return {n: n for n in range(1, total + 1)}


def _assert_ticket(ticket, profile):
    assert len(ticket) == profile.bet_size
    assert ticket == sorted(set(ticket))
    assert all(1 <= n <= profile.total_numbers for n in ticket)


def test_rank_frequencies_ties_by_number():
    assert rank_frequencies({3: 1, 1: 2, 2: 2}) == [(1, 2), (2, 2), (3, 1)]


def test_pools(profile):
    hot, cold = hot_cold_pools(_counts(), profile)
    assert hot == [25, 24, 23, 22, 21]
    assert cold == [5, 4, 3, 2, 1]


def test_hot_and_cold_come_from_their_pools(profile):
    s = generate_suggestions(_counts(), profile, rng=random.Random(7))
    assert s["hot"] == [21, 22, 23, 24, 25]
    assert s["cold"] == [1, 2, 3, 4, 5]
    _assert_ticket(s["mixed"], profile)
    assert len([n for n in s["mixed"] if n >= 21]) == 3
    assert len([n for n in s["mixed"] if n <= 5]) == 2


def test_seeded_rng_is_repeatable():
    profile = LotteryProfile("m", "M", 60, 6, 6, 10, 10)
    counts = _counts(60)
    a = generate_suggestions(counts, profile, rng=random.Random(42))
    b = generate_suggestions(counts, profile, rng=random.Random(42))
    assert a == b


@pytest.mark.parametrize("hot_count,cold_count", [(1, 1), (2, 3), (6, 1), (10, 10), (60, 60)])
def test_every_ticket_is_full_for_small_pools(hot_count, cold_count):
    profile = LotteryProfile("m", "M", 60, 6, 8, hot_count, cold_count)
    rng = random.Random(0)
    for _ in range(20):
        s = generate_suggestions(_counts(60), profile, rng=rng)
        for ticket in s.values():
            _assert_ticket(ticket, profile)


def test_mixed_overlapping_pools_are_topped_up():
    # every number is both hot and cold: the halves can collide
    profile = LotteryProfile("t", "T", 6, 3, 6, 6, 6)
    rng = random.Random(3)
    for _ in range(20):
        assert generate_suggestions(_counts(6), profile, rng=rng)["mixed"] == [1, 2, 3, 4, 5, 6]


def test_custom_suggestion_uses_neutral_numbers(profile):
    ticket = generate_custom_suggestion(_counts(), profile, [25, 24], [1, 2], rng=random.Random(5))
    _assert_ticket(ticket, profile)
    assert {25, 24, 1, 2} <= set(ticket)
    extra = set(ticket) - {25, 24, 1, 2}
    assert len(extra) == 1
    assert extra <= set(range(6, 21))


def test_custom_suggestion_falls_back_when_no_neutral_numbers():
    profile = LotteryProfile("t", "T", 10, 3, 6, 5, 5)
    ticket = generate_custom_suggestion(_counts(10), profile, [10], [1], rng=random.Random(1))
    _assert_ticket(ticket, profile)


@pytest.mark.parametrize("hot,cold", [([26], []), ([3, 3], []), ([1, 2, 3], [4, 5, 6])])
def test_custom_suggestion_rejects_bad_picks(profile, hot, cold):
    with pytest.raises(ValueError):
        generate_custom_suggestion(_counts(), profile, hot, cold)
