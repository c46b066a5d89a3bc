"""
Number suggestions from historical frequency.

Generates hot, cold and mixed tickets, plus a custom ticket built around
numbers the user picked.  Every call takes its own random source, so a
seeded ``random.Random`` gives repeatable tickets and calling again with an
unseeded one gives new picks.
"""
import math
import random


def rank_frequencies(counts: dict) -> list:
    """(number, count) pairs by count descending, ties by number ascending."""
    return sorted(counts.items(), key=lambda x: (-x[1], x[0]))


def hot_cold_pools(counts: dict, profile):
    """Most frequent ``hot_count`` numbers and least frequent ``cold_count`` numbers."""
    ranked = [n for n, _ in rank_frequencies(counts)]
    return ranked[:profile.hot_count], ranked[-profile.cold_count:]


def _pick(numbers, count, rng) -> list:
    """Up to *count* distinct numbers sampled uniformly from *numbers*."""
    numbers = list(numbers)
    return rng.sample(numbers, min(count, len(numbers)))


def _fill(chosen, size, pool, rng) -> list:
    """Top *chosen* up to *size* with random numbers from *pool* not already chosen."""
    chosen = list(dict.fromkeys(chosen))
    if len(chosen) < size:
        taken = set(chosen)
        available = [n for n in pool if n not in taken]
        chosen += _pick(available, size - len(chosen), rng)
    elif len(chosen) > size:
        chosen = _pick(chosen, size, rng)
    return sorted(chosen)


def generate_suggestions(counts: dict, profile, rng=None) -> dict:
    """
    Build one hot, one cold and one mixed ticket of ``bet_size`` numbers.

    hot   : sampled from the hot pool
    cold  : sampled from the cold pool
    mixed : ceil(bet_size / 2) hot numbers, the rest cold

    Pools smaller than a ticket are topped up with random numbers from the
    whole range.
    """
    rng = rng or random.Random()
    hot_pool, cold_pool = hot_cold_pools(counts, profile)
    all_numbers = list(profile.numbers)
    bet_size = profile.bet_size

    hot = _fill(_pick(hot_pool, bet_size, rng), bet_size, all_numbers, rng)
    cold = _fill(_pick(cold_pool, bet_size, rng), bet_size, all_numbers, rng)

    hot_half = math.ceil(bet_size / 2)
    mixed = _pick(hot_pool, hot_half, rng) + _pick(cold_pool, bet_size - hot_half, rng)
    mixed = _fill(mixed, bet_size, all_numbers, rng)

    return {"hot": hot, "cold": cold, "mixed": mixed}


def generate_custom_suggestion(counts: dict, profile, hot_picks, cold_picks, rng=None) -> list:
    """
    Complete a ticket around user-picked hot and cold numbers.

    The rest of the ticket comes from neutral numbers (neither hot nor
    cold).  If there are not enough of those, any unused number is used.
    """
    rng = rng or random.Random()
    base = list(hot_picks) + list(cold_picks)

    for n in base:
        if not 1 <= n <= profile.total_numbers:
            raise ValueError(f"Number {n} is outside 1-{profile.total_numbers}")
    if len(set(base)) != len(base):
        raise ValueError("Picked numbers must be distinct")
    if len(base) > profile.bet_size:
        raise ValueError(f"At most {profile.bet_size} numbers can be picked")

    hot_pool, cold_pool = hot_cold_pools(counts, profile)
    extremes = set(hot_pool) | set(cold_pool)
    neutral = [n for n in profile.numbers if n not in extremes]

    ticket = _fill(base, min(profile.bet_size, len(base) + len(neutral)), neutral, rng)
    return _fill(ticket, profile.bet_size, list(profile.numbers), rng)
