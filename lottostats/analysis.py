"""
Lottery Draw History - Statistical Analysis Engine

Descriptive statistics over a consolidated draw history: number frequency,
pair co-occurrence, even/odd split, recurrence intervals, repeated draws
and the contests each number appeared in.

History expected:
    tuple of Draw (contest, numbers, date), newest draw first.

Every function recomputes from the history it is given, so a date-filtered
subset can be analysed without re-reading any file.
"""
from collections import Counter
from itertools import combinations

import numpy as np
import pandas as pd

from lottostats.predictor import generate_suggestions, rank_frequencies


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

TOP_PAIRS = 10
LAST_DRAWS = 10


def _chronological(history):
    """Oldest draw first."""
    return list(reversed(history))


# ===================================================================
# 1. Frequency Analysis
# ===================================================================

def frequency_analysis(history, profile) -> dict:
    """
    Count how often each number of the game was drawn.

    Returns
    -------
    dict with keys:
        counts      : dict {number: count}, every number in range
        ranked      : list of (number, count) sorted desc
        total_draws : int
        dataframe   : pd.DataFrame summary
    """
    counter = Counter()
    for draw in history:
        counter.update(draw.numbers)
    counts = {n: counter.get(n, 0) for n in profile.numbers}

    ranked = rank_frequencies(counts)
    total_draws = len(history)
    total_slots = profile.draw_size * total_draws if total_draws > 0 else 1

    records = []
    for rank, (num, cnt) in enumerate(ranked, 1):
        records.append({
            "number": num,
            "count": cnt,
            "freq_pct": round(100.0 * cnt / total_slots, 4),
            "rank": rank,
        })

    return {
        "counts": counts,
        "ranked": ranked,
        "total_draws": total_draws,
        "dataframe": pd.DataFrame(records, columns=["number", "count", "freq_pct", "rank"]),
    }


# ===================================================================
# 2. Pair Analysis
# ===================================================================

def pair_analysis(history, top_n: int = TOP_PAIRS) -> dict:
    """
    Co-occurrence count of every pair of numbers drawn together.

    Returns
    -------
    dict with keys:
        top_pairs   : list of dicts {pair, count}, top *top_n*
        pair_counts : Counter {(a, b): count}
    """
    pair_counter: Counter = Counter()
    for draw in history:
        pair_counter.update(combinations(sorted(draw.numbers), 2))

    top_pairs = [{"pair": pair, "count": count}
                 for pair, count in pair_counter.most_common(top_n)]

    return {
        "top_pairs": top_pairs,
        "pair_counts": pair_counter,
    }


# ===================================================================
# 3. Even / Odd Distribution
# ===================================================================

def parity_label(even: int, odd: int) -> str:
    return f"{even} even / {odd} odd"


def parity_distribution(history) -> dict:
    """
    How many draws had each even/odd split.

    Only splits that actually occurred are listed, most common first.
    """
    dist: Counter = Counter()
    for draw in history:
        even = sum(1 for n in draw.numbers if n % 2 == 0)
        dist[(even, len(draw.numbers) - even)] += 1

    distribution = [
        {"label": parity_label(even, odd), "even": even, "odd": odd, "count": count}
        for (even, odd), count in dist.most_common()
    ]

    return {
        "distribution": distribution,
        "dataframe": pd.DataFrame(distribution, columns=["label", "even", "odd", "count"]),
    }


# ===================================================================
# 4. Interval / Delay Analysis
# ===================================================================

def interval_analysis(history, profile) -> dict:
    """
    For each number: current delay, average interval and max delay.

    current_delay    : draws since the number last came out (0 if it is in
                       the newest draw, len(history) if it never came out)
    average_interval : mean gap between consecutive appearances (0 if fewer
                       than two appearances)
    max_delay        : largest gap between consecutive appearances

    Returns
    -------
    dict with keys:
        stats     : dict {number: {current_delay, average_interval, max_delay, appearances}}
        dataframe : pd.DataFrame
    """
    total = len(history)
    size = profile.total_numbers + 1
    last_seen = [None] * size
    gaps = [[] for _ in range(size)]
    appearances = [0] * size

    for idx, draw in enumerate(_chronological(history)):
        for n in draw.numbers:
            if not 1 <= n <= profile.total_numbers:
                continue
            if last_seen[n] is not None:
                gaps[n].append(idx - last_seen[n])
            last_seen[n] = idx
            appearances[n] += 1

    stats = {}
    for n in profile.numbers:
        number_gaps = gaps[n]
        stats[n] = {
            "current_delay": total - 1 - last_seen[n] if last_seen[n] is not None else total,
            "average_interval": round(float(np.mean(number_gaps)), 2) if number_gaps else 0.0,
            "max_delay": int(max(number_gaps)) if number_gaps else 0,
            "appearances": appearances[n],
        }

    records = [{"number": n, **v} for n, v in stats.items()]
    return {
        "stats": stats,
        "dataframe": pd.DataFrame(
            records,
            columns=["number", "current_delay", "average_interval", "max_delay", "appearances"],
        ),
    }


# ===================================================================
# 5. Repeated Draws
# ===================================================================

def repeated_draws(history) -> list:
    """Number combinations that came out under more than one contest."""
    groups: dict = {}
    for draw in history:
        groups.setdefault(tuple(sorted(draw.numbers)), []).append(draw.contest)

    return [{"numbers": numbers, "contests": contests}
            for numbers, contests in groups.items() if len(contests) > 1]


# ===================================================================
# 6. Draws by Number
# ===================================================================

def draws_by_number(history, profile) -> dict:
    """Contests each number appeared in, in history order (newest first)."""
    index = {n: [] for n in profile.numbers}
    for draw in history:
        for n in draw.numbers:
            if n in index:
                index[n].append(draw.contest)
    return index


# ===================================================================
# Master function
# ===================================================================

def number_summary(frequency: dict, intervals: dict) -> pd.DataFrame:
    """One row per number with frequency and delay columns, ready for export."""
    records = []
    for n, count in sorted(frequency["counts"].items()):
        interval = intervals["stats"][n]
        records.append({
            "number": n,
            "frequency": count,
            "current_delay": interval["current_delay"],
            "average_interval": interval["average_interval"],
            "max_delay": interval["max_delay"],
        })
    return pd.DataFrame(
        records,
        columns=["number", "frequency", "current_delay", "average_interval", "max_delay"],
    )


def get_full_analysis(history, profile, rng=None, file_names=()) -> dict:
    """
    Run every analysis on *history* and generate a fresh suggestion set.

    Returns a dict keyed by analysis name.
    """
    history = tuple(history)
    frequency = frequency_analysis(history, profile)
    intervals = interval_analysis(history, profile)

    return {
        "file_names": list(file_names),
        "total_draws": len(history),
        "draws": history,
        "frequency": frequency,
        "pairs": pair_analysis(history),
        "parity": parity_distribution(history),
        "intervals": intervals,
        "repeated_draws": repeated_draws(history),
        "draws_by_number": draws_by_number(history, profile),
        "last_draws": history[:LAST_DRAWS],
        "suggestions": generate_suggestions(frequency["counts"], profile, rng=rng),
        "summary": number_summary(frequency, intervals),
    }
