#!/usr/bin/env python3
"""
Standalone analysis script.

Loads one or more result files for a game, prints the statistics summary
and a set of suggested tickets, and optionally writes the per-number
summary to CSV.
"""
import argparse
import os
import random
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from lottostats.analysis import get_full_analysis
from lottostats.errors import LotteryDataError
from lottostats.filters import date_bounds, filter_by_date_range
from lottostats.loader import load_draw_history
from lottostats.profiles import PROFILES, get_profile


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Lottery draw history statistics")
    parser.add_argument("files", nargs="+", help="CSV or XLSX result files")
    parser.add_argument("--game", default="mega_sena", choices=sorted(PROFILES))
    parser.add_argument("--start", help="first draw date to include (YYYY-MM-DD)")
    parser.add_argument("--end", help="last draw date to include (YYYY-MM-DD)")
    parser.add_argument("--seed", type=int, help="seed for the suggestion generator")
    parser.add_argument("--lenient", action="store_true",
                        help="skip unreadable files instead of stopping")
    parser.add_argument("--export", help="write the per-number summary to this CSV path")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    profile = get_profile(args.game)

    print(f"Loading {len(args.files)} file(s) for {profile.name}...")
    try:
        loaded = load_draw_history(args.files, profile, strict=not args.lenient)
    except LotteryDataError as e:
        print(f"Error: {e}")
        return 1

    for err in loaded.errors:
        print(f"  [SKIPPED] {err}")

    history = loaded.history
    if args.start or args.end:
        try:
            history = filter_by_date_range(history, args.start, args.end)
        except ValueError as e:
            print(f"Error: invalid date range: {e}")
            return 1
        if not history:
            print("No draws in the selected period.")
            return 1

    rng = random.Random(args.seed) if args.seed is not None else None
    result = get_full_analysis(history, profile, rng=rng, file_names=loaded.file_names)

    oldest, newest = date_bounds(history)
    print(f"\n{'='*60}")
    print(f"{profile.name.upper()} STATISTICAL ANALYSIS SUMMARY")
    print(f"{'='*60}")
    print(f"Files: {', '.join(result['file_names'])}")
    print(f"Draws analysed: {result['total_draws']} ({oldest:%d/%m/%Y} to {newest:%d/%m/%Y})")
    print(f"Rows skipped: {loaded.dropped_rows}")

    ranked = result["frequency"]["ranked"]
    print(f"\nMost frequent: {', '.join(f'{n:02d} ({c}x)' for n, c in ranked[:5])}")
    print(f"Least frequent: {', '.join(f'{n:02d} ({c}x)' for n, c in ranked[::-1][:5])}")

    print("\nTop pairs:")
    for p in result["pairs"]["top_pairs"][:5]:
        print(f"  {p['pair'][0]:02d}-{p['pair'][1]:02d}: {p['count']}x")

    print("\nEven/odd splits:")
    for d in result["parity"]["distribution"]:
        print(f"  {d['label']}: {d['count']}")

    stats = result["intervals"]["stats"]
    overdue = sorted(stats.items(), key=lambda x: x[1]["current_delay"], reverse=True)[:5]
    delays = ", ".join(f"{n:02d} ({s['current_delay']})" for n, s in overdue)
    print(f"\nLongest current delay: {delays}")

    if result["repeated_draws"]:
        print("\nRepeated draws:")
        for r in result["repeated_draws"]:
            print(f"  {r['numbers']} in contests {r['contests']}")

    print("\nSuggestions:")
    for name in ("hot", "cold", "mixed"):
        nums = result["suggestions"][name]
        print(f"  {name.capitalize():6s} {', '.join(f'{n:02d}' for n in nums)}")

    if args.export:
        result["summary"].to_csv(args.export, index=False)
        print(f"\nSummary written to {args.export}")

    print(f"\n{'='*60}")
    print("DISCLAIMER: every combination has the same chance in every draw.")
    print("Past results describe history only. Play responsibly.")
    print(f"{'='*60}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
