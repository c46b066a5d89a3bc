"""
Multi-file draw loading.

Runs read -> locate header -> extract for each result file, then merges the
per-file draws into one history keyed by contest number.  When the same
contest shows up in several files the file given last wins.
"""
import os
import warnings
from typing import NamedTuple

import pandas as pd

from lottostats.analysis import get_full_analysis
from lottostats.errors import (
    FileProcessingError,
    HeaderNotFoundError,
    MalformedFileError,
    NoValidDrawsError,
)
from lottostats.extractor import extract_draws
from lottostats.header import locate_header
from lottostats.reader import read_grid


class LoadResult(NamedTuple):
    history: tuple
    file_names: list
    errors: list
    dropped_rows: int


def load_file_draws(data: bytes, file_name: str, profile, kind=None):
    """Extract (draws, dropped_rows) from a single file's bytes."""
    grid = read_grid(data, file_name, kind)
    match = locate_header(grid, profile)
    return extract_draws(grid, match, profile)


def consolidate(batches, profile) -> tuple:
    """
    Merge lists of draws (in file order) into a newest-first history.

    Raises NoValidDrawsError if nothing is left.
    """
    merged = {}
    for draws in batches:
        for draw in draws:
            merged[draw.contest] = draw

    if not merged:
        raise NoValidDrawsError(profile.draw_size, profile.total_numbers)

    return tuple(sorted(merged.values(), key=lambda d: d.date, reverse=True))


def _source_name(source):
    if isinstance(source, (str, os.PathLike)):
        return os.path.basename(source)
    return source[0]


def _source_bytes(source):
    """Accept (file_name, bytes) pairs or paths on disk."""
    if isinstance(source, (str, os.PathLike)):
        with open(source, "rb") as fh:
            return fh.read()
    return source[1]


def load_draw_history(sources, profile, strict=True) -> LoadResult:
    """
    Load and consolidate several result files.

    Every file is processed even when an earlier one fails; each failure is
    reported with its file name.  With ``strict=True`` the first failure is
    raised once all files have been read.  Otherwise failures are collected
    in ``errors`` and the draws from the readable files are used.
    """
    batches = []
    file_names = []
    errors = []
    dropped_total = 0

    for source in sources:
        file_name = _source_name(source)
        file_names.append(file_name)
        try:
            data = _source_bytes(source)
            draws, dropped = load_file_draws(data, file_name, profile)
        except (MalformedFileError, HeaderNotFoundError, OSError) as e:
            err = FileProcessingError(file_name, e)
            err.__cause__ = e
            errors.append(err)
            print(f"[Loader] {file_name}: failed ({e})")
            if not strict:
                warnings.warn(f"Skipping '{file_name}': {e}")
            continue

        print(f"[Loader] {file_name}: {len(draws)} draws, {dropped} rows skipped")
        batches.append(draws)
        dropped_total += dropped

    if strict and errors:
        raise errors[0]

    history = consolidate(batches, profile)
    print(f"[Loader] Consolidated {len(history)} draws from {len(batches)} file(s)")
    return LoadResult(history, file_names, errors, dropped_total)


def history_to_frame(history, profile) -> pd.DataFrame:
    """Tabulate a history as contest, date, num1..numN (newest first)."""
    num_cols = [f"num{i}" for i in range(1, profile.draw_size + 1)]
    records = []
    for draw in history:
        record = {"contest": draw.contest, "date": pd.Timestamp(draw.date)}
        record.update(zip(num_cols, draw.numbers))
        records.append(record)
    return pd.DataFrame(records, columns=["contest", "date"] + num_cols)


def analyze_files(sources, profile, strict=True, rng=None) -> dict:
    """Load every file and run the full analysis on the merged history."""
    loaded = load_draw_history(sources, profile, strict=strict)
    result = get_full_analysis(loaded.history, profile, rng=rng, file_names=loaded.file_names)
    result["errors"] = loaded.errors
    result["dropped_rows"] = loaded.dropped_rows
    return result
