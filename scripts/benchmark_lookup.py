#!/usr/bin/env python3
"""
benchmark_lookup.py - Time index parsing against on-disk binary search.

Parses a WordNet index file into memory several times, then times single
lookups with wordy.search (byte-offset midpoints) and LineOffsetIndex (built
once, then line-number midpoints) for a random sample of headwords.

Usage:
  uv run python scripts/benchmark_lookup.py dict/index.noun [options]

Options:
  --parse-runs N   Number of full parses to time (default: 5)
  --lookups N      Number of headwords to look up (default: 1000)
  --key WORD       Also time this one headword (e.g. cellophane)
  --json           Output results as JSON
"""

import argparse
import json
import logging
import random
import sys
import time
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import List, Optional

from wordy.index import Index
from wordy.line_index import LineOffsetIndex
from wordy.search import search


logger = logging.getLogger(__name__)


@dataclass
class BenchResult:
    """Timings for one index file."""

    file: str
    file_bytes: int
    records: int
    parse_avg_ms: float
    search_avg_us: float
    search_miss_avg_us: float
    offsets_build_ms: float
    offsets_search_avg_us: float
    key_us: Optional[float] = None


def benchmark_parse(path: Path, runs: int) -> tuple:
    """Average wall time of a full parse, plus the last parsed index."""
    index = None
    start = time.perf_counter()
    for _ in range(runs):
        index = Index()
        index.parse_file(path)
    elapsed = time.perf_counter() - start
    return (elapsed / runs) * 1000, index


def benchmark_search(path: Path, keys: List[str]) -> float:
    """Average microseconds per wordy.search call."""
    with open(path, 'rb') as f:
        start = time.perf_counter()
        for key in keys:
            search(f, key)
        elapsed = time.perf_counter() - start
    return (elapsed / len(keys)) * 1_000_000


def benchmark_offsets(path: Path, keys: List[str]) -> tuple:
    """Build time (ms) and average lookup time (us) for LineOffsetIndex."""
    with open(path, 'rb') as f:
        start = time.perf_counter()
        offsets = LineOffsetIndex.build(f)
        build_ms = (time.perf_counter() - start) * 1000

        start = time.perf_counter()
        for key in keys:
            offsets.search(key)
        elapsed = time.perf_counter() - start
    return build_ms, (elapsed / len(keys)) * 1_000_000


def run(path: Path, parse_runs: int, lookups: int, key: Optional[str]) -> BenchResult:
    print(f"Parsing {path.name} x{parse_runs}...")
    parse_ms, index = benchmark_parse(path, parse_runs)

    words = [record.lemma for record in index.records()]
    if not words:
        raise ValueError(f"No records in {path}")
    sample = random.choices(words, k=min(lookups, len(words)))
    misses = [w + "xyz" for w in sample]

    print(f"Searching {len(sample):,} keys...")
    search_us = benchmark_search(path, sample)
    miss_us = benchmark_search(path, misses)
    build_ms, offsets_us = benchmark_offsets(path, sample)

    key_us = benchmark_search(path, [key] * 20) if key else None

    return BenchResult(
        file=str(path),
        file_bytes=path.stat().st_size,
        records=len(index),
        parse_avg_ms=parse_ms,
        search_avg_us=search_us,
        search_miss_avg_us=miss_us,
        offsets_build_ms=build_ms,
        offsets_search_avg_us=offsets_us,
        key_us=key_us,
    )


def print_result(result: BenchResult, key: Optional[str]):
    print()
    print("=" * 60)
    print(f"{result.file} ({result.file_bytes / (1024 * 1024):.2f} MB, {result.records:,} records)")
    print("=" * 60)
    print(f"  Full parse:              {result.parse_avg_ms:10.1f} ms")
    print(f"  search (hit):            {result.search_avg_us:10.1f} us")
    print(f"  search (miss):           {result.search_miss_avg_us:10.1f} us")
    print(f"  LineOffsetIndex build:   {result.offsets_build_ms:10.1f} ms")
    print(f"  LineOffsetIndex search:  {result.offsets_search_avg_us:10.1f} us")
    if result.key_us is not None:
        print(f"  search({key!r}): {result.key_us:10.1f} us")


def main():
    parser = argparse.ArgumentParser(description='Benchmark index parsing and on-disk search')
    parser.add_argument('file', type=Path, help='Sorted WordNet index file')
    parser.add_argument('--parse-runs', type=int, default=5, help='Full parses to time')
    parser.add_argument('--lookups', type=int, default=1000, help='Headwords to look up')
    parser.add_argument('--key', help='Also time this headword')
    parser.add_argument('--json', action='store_true', help='Output results as JSON')
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.WARNING,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    if not args.file.exists():
        logger.error(f"Index file not found: {args.file}")
        return 1

    result = run(args.file, args.parse_runs, args.lookups, args.key)

    if args.json:
        print(json.dumps(asdict(result), indent=2))
    else:
        print_result(result, args.key)
    return 0


if __name__ == '__main__':
    sys.exit(main())
